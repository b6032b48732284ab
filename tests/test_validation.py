"""Tests for kinematics.validation."""

from __future__ import annotations

import logging

import numpy as np
import pytest

from kinematics.validation import (
    INVALID_ARGUMENT_MSG,
    InvalidArgumentError,
    is_finite_number,
    require_numbers,
)


class TestIsFiniteNumber:
    @pytest.mark.parametrize("value", [0, -3, 2.5, 1e300, np.float64(1.5), np.int32(7)])
    def test_accepts_finite_reals(self, value: object) -> None:
        assert is_finite_number(value)

    @pytest.mark.parametrize(
        "value",
        [
            "10000",
            None,
            True,
            False,
            np.bool_(True),
            float("nan"),
            float("inf"),
            -float("inf"),
            np.nan,
            1 + 2j,
            10**400,
            [1.0],
        ],
    )
    def test_rejects_everything_else(self, value: object) -> None:
        assert not is_finite_number(value)


class TestRequireNumbers:
    def test_all_valid_returns_none(self) -> None:
        assert require_numbers(a=1, b=2.0, c=np.float64(3.0)) is None

    def test_error_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            require_numbers(a="x")

    def test_message_states_contract_and_names_offenders(self) -> None:
        with pytest.raises(InvalidArgumentError) as exc_info:
            require_numbers(a=1, b=None, c=float("nan"))
        message = str(exc_info.value)
        assert message.startswith(INVALID_ARGUMENT_MSG)
        assert "All parameters must be numbers" in message
        assert message.endswith("Invalid: b, c")

    def test_logs_warning_on_rejection(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger="kinematics.validation"):
            with pytest.raises(InvalidArgumentError):
                require_numbers(speed="fast")
        assert "speed" in caplog.text
