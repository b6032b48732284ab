"""Input validation shared by the kinematic updaters."""

from __future__ import annotations

import logging
import math
import numbers

import numpy as np

logger = logging.getLogger(__name__)

INVALID_ARGUMENT_MSG = "Invalid input parameter types. All parameters must be numbers."


class InvalidArgumentError(ValueError):
    """Raised when a required parameter is missing or not a finite number."""


def is_finite_number(value: object) -> bool:
    """Return True for finite real scalars (``int``, ``float``, numpy reals).

    Booleans are rejected even though ``bool`` subclasses ``int``.
    """
    if isinstance(value, (bool, np.bool_)):
        return False
    if not isinstance(value, numbers.Real):
        return False
    try:
        return math.isfinite(value)
    except OverflowError:
        # ints beyond float range
        return False


def require_numbers(**params: object) -> None:
    """Raise InvalidArgumentError unless every keyword value is a finite number.

    Parameters
    ----------
    **params:
        Parameter name → value. Names are only used in the error message.
    """
    bad = [name for name, value in params.items() if not is_finite_number(value)]
    if not bad:
        return
    logger.warning("Rejected non-numeric parameters: %s", ", ".join(bad))
    msg = f"{INVALID_ARGUMENT_MSG} Invalid: {', '.join(bad)}"
    raise InvalidArgumentError(msg)
