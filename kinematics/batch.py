"""Vectorised evaluation of the updaters over a table of scenarios.

Each row of the input DataFrame is an independent scenario carrying the six
scenario constants.  The three formulas are applied column-wise with numpy;
rows never influence each other and nothing is time-stepped.
"""

from __future__ import annotations

import logging

import numpy as np
import pandas as pd

from kinematics.constants import KPH_TO_MPS, M_PER_KM, MPS_TO_KPH
from kinematics.validation import INVALID_ARGUMENT_MSG, InvalidArgumentError

logger = logging.getLogger(__name__)

SCENARIO_COLUMNS: tuple[str, ...] = (
    "initial_velocity",
    "acceleration",
    "time",
    "initial_distance",
    "initial_fuel",
    "fuel_burn_rate",
)

RESULT_COLUMNS: tuple[str, ...] = (
    "new_velocity_kmh",
    "new_distance_km",
    "remaining_fuel_kg",
)


def _check_columns(scenarios: pd.DataFrame) -> None:
    """Raise InvalidArgumentError on missing, non-numeric or non-finite columns."""
    missing = [c for c in SCENARIO_COLUMNS if c not in scenarios.columns]
    if missing:
        msg = f"{INVALID_ARGUMENT_MSG} Missing columns: {', '.join(missing)}"
        raise InvalidArgumentError(msg)

    bad: list[str] = []
    for col in SCENARIO_COLUMNS:
        series = scenarios[col]
        if (
            pd.api.types.is_bool_dtype(series)
            or pd.api.types.is_complex_dtype(series)
            or not pd.api.types.is_numeric_dtype(series)
        ):
            bad.append(col)
        elif not np.isfinite(series.to_numpy(dtype=float)).all():
            bad.append(col)

    if bad:
        logger.warning("Rejected scenario columns: %s", ", ".join(bad))
        msg = f"{INVALID_ARGUMENT_MSG} Invalid columns: {', '.join(bad)}"
        raise InvalidArgumentError(msg)


def compute_scenarios(scenarios: pd.DataFrame) -> pd.DataFrame:
    """Apply the velocity, distance and fuel formulas to every row.

    Parameters
    ----------
    scenarios:
        DataFrame with columns ``initial_velocity`` (km/h), ``acceleration``
        (m/s^2), ``time`` (s), ``initial_distance`` (km), ``initial_fuel`` (kg)
        and ``fuel_burn_rate`` (kg/s).  Extra columns are carried through.

    Returns
    -------
    A copy of *scenarios* with ``new_velocity_kmh``, ``new_distance_km`` and
    ``remaining_fuel_kg`` appended.

    Raises
    ------
    InvalidArgumentError
        If a required column is missing, non-numeric, or holds NaN/inf.
    """
    _check_columns(scenarios)

    v_kph = scenarios["initial_velocity"].to_numpy(dtype=float)
    accel = scenarios["acceleration"].to_numpy(dtype=float)
    t = scenarios["time"].to_numpy(dtype=float)
    d_km = scenarios["initial_distance"].to_numpy(dtype=float)
    fuel = scenarios["initial_fuel"].to_numpy(dtype=float)
    burn = scenarios["fuel_burn_rate"].to_numpy(dtype=float)

    v_mps = v_kph * KPH_TO_MPS

    result = scenarios.copy()
    result["new_velocity_kmh"] = (v_mps + accel * t) * MPS_TO_KPH
    # Constant-velocity displacement, same as calc_new_distance
    result["new_distance_km"] = (d_km * M_PER_KM + v_mps * t) / M_PER_KM
    result["remaining_fuel_kg"] = fuel - burn * t

    logger.debug("Evaluated %d scenarios", len(result))
    return result
