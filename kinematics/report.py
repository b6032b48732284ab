"""Run the reference scenario and print the corrected results."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from kinematics.config import ScenarioSettings, get_settings
from kinematics.updaters import (
    DistanceParams,
    FuelParams,
    VelocityParams,
    calc_new_distance,
    calc_new_velocity,
    calc_remaining_fuel,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ScenarioReport:
    """Results of one scenario run."""

    new_velocity_kmh: float
    new_distance_km: float
    remaining_fuel_kg: float


def run_scenario(settings: ScenarioSettings | None = None) -> ScenarioReport:
    """Evaluate each updater once with the scenario constants."""
    if settings is None:
        settings = get_settings()

    new_velocity = calc_new_velocity(
        VelocityParams(
            initial_velocity=settings.initial_velocity,
            acceleration=settings.acceleration,
            time=settings.time,
        )
    )
    new_distance = calc_new_distance(
        DistanceParams(
            initial_distance=settings.initial_distance,
            initial_velocity=settings.initial_velocity,
            time=settings.time,
        )
    )
    remaining_fuel = calc_remaining_fuel(
        FuelParams(
            initial_fuel=settings.initial_fuel,
            fuel_burn_rate=settings.fuel_burn_rate,
            time=settings.time,
        )
    )

    return ScenarioReport(
        new_velocity_kmh=new_velocity,
        new_distance_km=new_distance,
        remaining_fuel_kg=remaining_fuel,
    )


def format_report(report: ScenarioReport) -> list[str]:
    """Format the three results, each rounded to 2 decimals with its unit."""
    return [
        f"Corrected New Velocity: {report.new_velocity_kmh:.2f} km/h",
        f"Corrected New Distance: {report.new_distance_km:.2f} km",
        f"Corrected Remaining Fuel: {report.remaining_fuel_kg:.2f} kg",
    ]


def main() -> None:
    """Console entry point: print the reference scenario report to stdout."""
    settings = get_settings()
    logging.basicConfig(level=settings.log_level.upper())
    logger.info("Running scenario with %s", settings.model_dump())

    for line in format_report(run_scenario(settings)):
        print(line)


if __name__ == "__main__":
    main()
