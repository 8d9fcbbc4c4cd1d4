"""Deflection strategy scoring.

Scores a mitigation strategy against the warning time available and the
impact energy to be diverted. Each strategy has its own step curve of base
success over warning time; energy scales that down linearly to zero at
1000 MT, and the reported probability is kept within [5, 95] percent.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from enum import Enum

import numpy as np
from numpy.typing import ArrayLike, NDArray

from impactlab.core.validation import InvalidInputError, require_non_negative, require_positive
from impactlab.utils.constants import (
    DAYS_PER_YEAR,
    DEFLECTION_COEFFICIENT_DEG,
    ENERGY_CEILING_MT,
    HIGH_SUCCESS_PCT,
    MODERATE_SUCCESS_PCT,
    SUCCESS_CEILING_PCT,
    SUCCESS_FLOOR_PCT,
)

logger = logging.getLogger(__name__)


class Strategy(Enum):
    """Asteroid deflection strategies."""

    KINETIC = "kinetic"
    NUCLEAR = "nuclear"
    GRAVITY = "gravity"

    @classmethod
    def parse(cls, value: Strategy | str) -> Strategy:
        """Accept a Strategy member or its string value (case-insensitive).

        Raises:
            InvalidInputError: If the string names no known strategy.
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            logger.error("Unknown mitigation strategy: %r", value)
            raise InvalidInputError(f"Unknown mitigation strategy: {value!r}") from None


@dataclass(frozen=True)
class StrategyProfile:
    """Display information for a strategy."""

    name: str
    description: str
    pros: tuple[str, ...]
    cons: tuple[str, ...]


# (years of warning strictly exceeded, base success %), checked in order
_SUCCESS_STEPS: dict[Strategy, tuple[tuple[float, float], ...]] = {
    Strategy.KINETIC: ((5.0, 85.0), (2.0, 60.0), (1.0, 35.0)),
    Strategy.NUCLEAR: ((3.0, 90.0), (1.0, 70.0), (0.5, 45.0)),
    Strategy.GRAVITY: ((10.0, 95.0), (5.0, 50.0)),
}

_FALLBACK_SUCCESS: dict[Strategy, float] = {
    Strategy.KINETIC: 10.0,
    Strategy.NUCLEAR: 20.0,
    Strategy.GRAVITY: 15.0,
}

STRATEGY_PROFILES: dict[Strategy, StrategyProfile] = {
    Strategy.KINETIC: StrategyProfile(
        name="Kinetic Impact",
        description="Launch spacecraft to collide with asteroid, changing its momentum",
        pros=("Proven technology", "No nuclear material", "Predictable results"),
        cons=("Requires years of warning", "Less effective on large asteroids"),
    ),
    Strategy.NUCLEAR: StrategyProfile(
        name="Nuclear Deflection",
        description="Detonate nuclear device near asteroid to vaporize surface material",
        pros=("Most powerful option", "Effective on large asteroids", "Faster than alternatives"),
        cons=("Political challenges", "Risk of fragmentation", "Radioactive concerns"),
    ),
    Strategy.GRAVITY: StrategyProfile(
        name="Gravity Tractor",
        description="Position spacecraft near asteroid to gradually alter trajectory via gravity",
        pros=("Gentle and controlled", "No fragmentation risk", "Precise adjustments"),
        cons=("Requires decades of warning", "Only works on smaller asteroids"),
    ),
}


@dataclass(frozen=True)
class MitigationResult:
    """Outcome of scoring one strategy.

    Attributes:
        deflection_needed: Trajectory change required to miss Earth, degrees.
        success_probability: Percent chance of success, within [5, 95].
        description: What the strategy does.
        strategy: Strategy that was scored.
        success_level: HIGH / MODERATE / LOW bucket of the probability.
    """

    deflection_needed: float
    success_probability: float
    description: str
    strategy: Strategy
    success_level: str


def strategy_profile(strategy: Strategy | str) -> StrategyProfile:
    """Return the display profile of a strategy."""
    return STRATEGY_PROFILES[Strategy.parse(strategy)]


def base_success(strategy: Strategy, time_years: float) -> float:
    """Base success percent for a strategy given years of warning."""
    for threshold_years, success in _SUCCESS_STEPS[strategy]:
        if time_years > threshold_years:
            return success
    return _FALLBACK_SUCCESS[strategy]


def success_level(probability: float) -> str:
    """Bucket a success probability into HIGH/MODERATE/LOW."""
    if probability >= HIGH_SUCCESS_PCT:
        return "HIGH"
    elif probability >= MODERATE_SUCCESS_PCT:
        return "MODERATE"
    else:
        return "LOW"


def _energy_factor(energy_mt: float) -> float:
    return max(0.0, 1 - energy_mt / ENERGY_CEILING_MT)


def evaluate_mitigation(
    energy_mt: float,
    days_before_impact: float,
    strategy: Strategy | str,
) -> MitigationResult:
    """Score a deflection strategy.

    Args:
        energy_mt: Impact energy in megatons of TNT (>= 0).
        days_before_impact: Warning time in days (> 0).
        strategy: Strategy member or its string value.

    Returns:
        MitigationResult with deflection needed and success probability.

    Raises:
        InvalidInputError: If energy is negative, the warning time is not
            positive, or the strategy is unknown.
    """
    energy_mt = require_non_negative("energy_mt", energy_mt)
    days_before_impact = require_positive("days_before_impact", days_before_impact)
    strategy = Strategy.parse(strategy)

    time_years = days_before_impact / DAYS_PER_YEAR

    probability = min(SUCCESS_CEILING_PCT, base_success(strategy, time_years) * _energy_factor(energy_mt))
    probability = max(SUCCESS_FLOOR_PCT, probability)

    deflection_needed = DEFLECTION_COEFFICIENT_DEG * math.sqrt(energy_mt) / time_years

    logger.debug(
        "Mitigation %s: %.2f MT, %.2f years -> %.1f%% success, %.6f deg",
        strategy.value, energy_mt, time_years, probability, deflection_needed,
    )
    return MitigationResult(
        deflection_needed=deflection_needed,
        success_probability=probability,
        description=STRATEGY_PROFILES[strategy].description,
        strategy=strategy,
        success_level=success_level(probability),
    )


def compare_strategies(energy_mt: float, days_before_impact: float) -> list[MitigationResult]:
    """Score every strategy, most likely to succeed first.

    Ties keep declaration order (kinetic, nuclear, gravity).
    """
    results = [evaluate_mitigation(energy_mt, days_before_impact, s) for s in Strategy]
    return sorted(results, key=lambda r: r.success_probability, reverse=True)


def recommendations(result: MitigationResult) -> list[str]:
    """Human-readable advice for a scored strategy; none for MODERATE."""
    if result.success_level == "LOW":
        return [
            "Increase warning time",
            "Try a different mitigation strategy",
            "Consider a multiple mission approach",
        ]
    elif result.success_level == "HIGH":
        return ["High probability of success with current parameters"]
    return []


def success_curve(
    energy_mt: float,
    days_before_impact: ArrayLike,
    strategy: Strategy | str,
) -> NDArray[np.float64]:
    """Success probability over a range of warning times.

    Vectorized counterpart of :func:`evaluate_mitigation` for plotting.

    Args:
        energy_mt: Impact energy in megatons of TNT (>= 0).
        days_before_impact: Warning times in days, every value > 0.
        strategy: Strategy member or its string value.

    Returns:
        Array of success percentages, same shape as ``days_before_impact``.

    Raises:
        InvalidInputError: If energy is negative or any warning time is not
            finite and positive.
    """
    energy_mt = require_non_negative("energy_mt", energy_mt)
    strategy = Strategy.parse(strategy)
    days = np.asarray(days_before_impact, dtype=np.float64)
    if not np.all(np.isfinite(days) & (days > 0)):
        logger.error("Rejected success curve: every warning time must be positive")
        raise InvalidInputError("every days_before_impact must be a finite positive number")

    time_years = days / DAYS_PER_YEAR

    # np.select picks the first matching step, like base_success
    steps = _SUCCESS_STEPS[strategy]
    base = np.select(
        [time_years > threshold for threshold, _ in steps],
        [success for _, success in steps],
        default=_FALLBACK_SUCCESS[strategy],
    )

    probability = np.minimum(SUCCESS_CEILING_PCT, base * _energy_factor(energy_mt))
    return np.maximum(SUCCESS_FLOOR_PCT, probability)
