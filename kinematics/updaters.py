"""Velocity, distance and fuel updaters.

Three independent, stateless formulas. Each takes a single parameter record
(or a mapping with the same field names) and returns a float:

- :func:`calc_new_velocity` — km/h after constant acceleration over ``time``.
- :func:`calc_new_distance` — km after travelling at the *initial* velocity for
  ``time``.  Acceleration is deliberately not part of this estimate.
- :func:`calc_remaining_fuel` — kg left after burning at a constant rate.
  The result is not clamped, so overdrawing the tank yields a negative value.

Every field is checked with :func:`~kinematics.validation.require_numbers`
before any arithmetic happens.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import asdict, dataclass, fields
from typing import TypeVar

from kinematics.constants import KPH_TO_MPS, M_PER_KM, MPS_TO_KPH
from kinematics.validation import require_numbers

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Parameter records
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class VelocityParams:
    """Inputs for :func:`calc_new_velocity`."""

    initial_velocity: float  # km/h
    acceleration: float  # m/s^2
    time: float  # s


@dataclass(frozen=True)
class DistanceParams:
    """Inputs for :func:`calc_new_distance`."""

    initial_distance: float  # km
    initial_velocity: float  # km/h
    time: float  # s


@dataclass(frozen=True)
class FuelParams:
    """Inputs for :func:`calc_remaining_fuel`."""

    initial_fuel: float  # kg
    fuel_burn_rate: float  # kg/s
    time: float  # s


ParamsT = TypeVar("ParamsT", VelocityParams, DistanceParams, FuelParams)


def _as_params(params: ParamsT | Mapping[str, object], record: type[ParamsT]) -> ParamsT:
    """Build a parameter record from a mapping; missing keys become None.

    Unknown keys are ignored.  No validation happens here.
    """
    if isinstance(params, record):
        return params
    if not isinstance(params, Mapping):
        msg = f"Expected {record.__name__} or a mapping, got {type(params).__name__}"
        raise TypeError(msg)
    return record(**{f.name: params.get(f.name) for f in fields(record)})  # type: ignore[arg-type]


def _validated(params: ParamsT | Mapping[str, object], record: type[ParamsT]) -> ParamsT:
    result = _as_params(params, record)
    require_numbers(**asdict(result))
    return result


# ---------------------------------------------------------------------------
# Updaters
# ---------------------------------------------------------------------------


def calc_new_velocity(params: VelocityParams | Mapping[str, object]) -> float:
    """Return the velocity in km/h after accelerating for ``time`` seconds.

    The initial velocity is converted to m/s, the acceleration term is added,
    and the sum is converted back to km/h.

    Raises
    ------
    InvalidArgumentError
        If any field is missing or not a finite number.
    """
    p = _validated(params, VelocityParams)

    initial_mps = p.initial_velocity * KPH_TO_MPS
    new_mps = initial_mps + p.acceleration * p.time
    new_kph = new_mps * MPS_TO_KPH

    logger.debug("calc_new_velocity(%s) -> %.6f km/h", p, new_kph)
    return float(new_kph)


def calc_new_distance(params: DistanceParams | Mapping[str, object]) -> float:
    """Return the distance in km after ``time`` seconds at the initial velocity.

    Constant-velocity estimate: there is no ``0.5 * a * t**2`` term.

    Raises
    ------
    InvalidArgumentError
        If any field is missing or not a finite number.
    """
    p = _validated(params, DistanceParams)

    initial_mps = p.initial_velocity * KPH_TO_MPS
    new_distance_m = p.initial_distance * M_PER_KM + initial_mps * p.time
    new_distance_km = new_distance_m / M_PER_KM

    logger.debug("calc_new_distance(%s) -> %.6f km", p, new_distance_km)
    return float(new_distance_km)


def calc_remaining_fuel(params: FuelParams | Mapping[str, object]) -> float:
    """Return the fuel mass in kg left after burning for ``time`` seconds.

    May be negative when ``fuel_burn_rate * time`` exceeds ``initial_fuel``.

    Raises
    ------
    InvalidArgumentError
        If any field is missing or not a finite number.
    """
    p = _validated(params, FuelParams)

    fuel_consumed = p.fuel_burn_rate * p.time
    remaining = p.initial_fuel - fuel_consumed

    logger.debug("calc_remaining_fuel(%s) -> %.6f kg", p, remaining)
    return float(remaining)
