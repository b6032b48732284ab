"""Scenario settings via pydantic-settings."""

from __future__ import annotations

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class ScenarioSettings(BaseSettings):
    """Constants for the reference scenario run by the report driver.

    Defaults reproduce the fixed scenario.  Fields can be overridden with
    ``KINEMATICS_``-prefixed environment variables; ``.env`` files are not read.
    """

    model_config = SettingsConfigDict(
        env_prefix="KINEMATICS_",
        case_sensitive=False,
        extra="ignore",
    )

    initial_velocity: float = 10000.0  # km/h
    acceleration: float = 3.0  # m/s^2
    time: float = 3600.0  # s (1 hour)
    initial_distance: float = 0.0  # km
    initial_fuel: float = 5000.0  # kg
    fuel_burn_rate: float = 0.5  # kg/s

    log_level: str = "WARNING"


@lru_cache(maxsize=1)
def get_settings() -> ScenarioSettings:
    """Return cached settings (created on first call)."""
    return ScenarioSettings()
