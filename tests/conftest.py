"""Shared test fixtures for kinematics tests."""

from __future__ import annotations

import os
from collections.abc import Generator

import pandas as pd
import pytest

from kinematics.config import ScenarioSettings, get_settings


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """Drop KINEMATICS_* env vars and the cached settings around each test."""
    for key in list(os.environ):
        if key.upper().startswith("KINEMATICS_"):
            monkeypatch.delenv(key)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture()
def default_settings() -> ScenarioSettings:
    """The reference scenario."""
    return ScenarioSettings()


@pytest.fixture()
def scenario_frame() -> pd.DataFrame:
    """Three independent scenarios, the first being the reference one."""
    return pd.DataFrame(
        {
            "initial_velocity": [10000.0, 0.0, 120.0],
            "acceleration": [3.0, 9.81, -2.0],
            "time": [3600.0, 10.0, 30.0],
            "initial_distance": [0.0, 5.0, 1.5],
            "initial_fuel": [5000.0, 100.0, 10.0],
            "fuel_burn_rate": [0.5, 2.0, 1.0],
        }
    )
