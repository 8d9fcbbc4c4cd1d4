"""Boundary checks shared by the impact and mitigation models."""

from __future__ import annotations

import logging
import math

logger = logging.getLogger(__name__)


class InvalidInputError(ValueError):
    """Raised when a caller passes a value the models cannot work with."""


def require_positive(name: str, value: float) -> float:
    """Return ``value`` as a float, rejecting non-finite or non-positive numbers.

    Raises:
        InvalidInputError: If ``value`` is NaN, infinite, or <= 0.
    """
    value = float(value)
    if not math.isfinite(value) or value <= 0:
        logger.error("Rejected %s=%r: must be a finite positive number", name, value)
        raise InvalidInputError(f"{name} must be a finite positive number, got {value!r}")
    return value


def require_non_negative(name: str, value: float) -> float:
    """Return ``value`` as a float, rejecting non-finite or negative numbers.

    Raises:
        InvalidInputError: If ``value`` is NaN, infinite, or < 0.
    """
    value = float(value)
    if not math.isfinite(value) or value < 0:
        logger.error("Rejected %s=%r: must be a finite non-negative number", name, value)
        raise InvalidInputError(f"{name} must be a finite non-negative number, got {value!r}")
    return value
