"""Tests for deflection strategy scoring."""

from __future__ import annotations

import math

import numpy as np
import pytest

from impactlab.core.mitigation import (
    STRATEGY_PROFILES,
    MitigationResult,
    Strategy,
    base_success,
    compare_strategies,
    evaluate_mitigation,
    recommendations,
    strategy_profile,
    success_curve,
    success_level,
)
from impactlab.core.validation import InvalidInputError


class TestBaseSuccess:
    """Test the per-strategy step curves at their boundaries."""

    @pytest.mark.parametrize(
        "days, expected",
        [(365, 10), (366, 35), (730, 35), (731, 60), (1825, 60), (1826, 85), (3650, 85)],
    )
    def test_kinetic_steps(self, days, expected):
        assert base_success(Strategy.KINETIC, days / 365) == expected

    @pytest.mark.parametrize(
        "days, expected",
        [(100, 20), (182, 20), (183, 45), (365, 45), (366, 70), (1095, 70), (1096, 90)],
    )
    def test_nuclear_steps(self, days, expected):
        assert base_success(Strategy.NUCLEAR, days / 365) == expected

    @pytest.mark.parametrize(
        "days, expected",
        [(1, 15), (1825, 15), (1826, 50), (3650, 50), (3651, 95)],
    )
    def test_gravity_steps(self, days, expected):
        assert base_success(Strategy.GRAVITY, days / 365) == expected


class TestEvaluateMitigation:
    """Test full strategy evaluation."""

    def test_gravity_with_long_warning_and_no_energy(self):
        """Over ten years of warning, zero energy: the ceiling of 95%."""
        result = evaluate_mitigation(0, 3651, Strategy.GRAVITY)
        assert result.success_probability == 95
        assert result.deflection_needed == 0.0
        assert result.success_level == "HIGH"

    def test_gravity_exactly_ten_years(self):
        """The gravity step is strict: exactly 3650 days is not over 10 years."""
        assert evaluate_mitigation(0, 3650, "gravity").success_probability == 50

    def test_energy_at_ceiling_floors_at_five(self):
        result = evaluate_mitigation(1000, 365, Strategy.KINETIC)
        assert result.success_probability == 5
        assert result.success_level == "LOW"
        assert result.deflection_needed == pytest.approx(0.0001 * math.sqrt(1000))

    def test_energy_above_ceiling(self):
        assert evaluate_mitigation(50_000, 5000, Strategy.NUCLEAR).success_probability == 5

    def test_energy_scales_success(self):
        result = evaluate_mitigation(500, 3000, Strategy.NUCLEAR)
        assert result.success_probability == pytest.approx(90 * 0.5)

    def test_deflection_shrinks_with_warning_time(self):
        short = evaluate_mitigation(100, 100, Strategy.KINETIC)
        long = evaluate_mitigation(100, 1000, Strategy.KINETIC)
        assert long.deflection_needed == pytest.approx(short.deflection_needed / 10)

    def test_description_per_strategy(self):
        for strategy in Strategy:
            result = evaluate_mitigation(10, 1000, strategy)
            assert result.description == STRATEGY_PROFILES[strategy].description
            assert result.strategy is strategy
        assert "collide" in evaluate_mitigation(10, 1000, "kinetic").description

    def test_result_is_immutable(self):
        result = evaluate_mitigation(10, 1000, Strategy.KINETIC)
        with pytest.raises(AttributeError):
            result.success_probability = 99.0

    def test_string_strategy(self):
        result = evaluate_mitigation(10, 1000, "NUCLEAR")
        assert isinstance(result, MitigationResult)
        assert result.strategy is Strategy.NUCLEAR

    @pytest.mark.parametrize("days", [0, -1, float("inf")])
    def test_rejects_bad_warning_time(self, days):
        with pytest.raises(InvalidInputError, match="days_before_impact"):
            evaluate_mitigation(10, days, Strategy.KINETIC)

    def test_rejects_negative_energy(self):
        with pytest.raises(InvalidInputError, match="energy_mt"):
            evaluate_mitigation(-1, 100, Strategy.KINETIC)

    def test_rejects_unknown_strategy(self):
        with pytest.raises(InvalidInputError, match="Unknown mitigation strategy"):
            evaluate_mitigation(10, 100, "laser")

    @pytest.mark.parametrize("strategy", list(Strategy))
    def test_probability_within_bounds(self, strategy):
        for energy in (0, 0.5, 10, 250, 999.9, 1000, 1e6):
            for days in (1, 100, 183, 366, 731, 1096, 1826, 3651, 20000):
                p = evaluate_mitigation(energy, days, strategy).success_probability
                assert 5 <= p <= 95

    @pytest.mark.parametrize("strategy", list(Strategy))
    def test_monotonic_in_warning_time(self, strategy):
        days = [1, 182, 183, 365, 366, 730, 731, 1095, 1096, 1825, 1826, 3650, 3651, 10000]
        for energy in (0, 100, 900):
            probabilities = [evaluate_mitigation(energy, d, strategy).success_probability for d in days]
            assert probabilities == sorted(probabilities)


class TestHelpers:
    """Test profiles, levels, comparisons and advice."""

    def test_success_level_thresholds(self):
        assert success_level(95) == "HIGH"
        assert success_level(70) == "HIGH"
        assert success_level(69.9) == "MODERATE"
        assert success_level(40) == "MODERATE"
        assert success_level(39.9) == "LOW"

    def test_strategy_profile(self):
        profile = strategy_profile("gravity")
        assert profile.name == "Gravity Tractor"
        assert "No fragmentation risk" in profile.pros
        assert len(profile.cons) == 2

    def test_compare_strategies_sorted(self):
        results = compare_strategies(0, 400)
        assert [r.strategy for r in results] == [Strategy.NUCLEAR, Strategy.KINETIC, Strategy.GRAVITY]
        assert [r.success_probability for r in results] == [70, 35, 15]

    def test_recommendations(self):
        low = evaluate_mitigation(0, 30, Strategy.KINETIC)
        high = evaluate_mitigation(0, 2000, Strategy.KINETIC)
        moderate = evaluate_mitigation(0, 200, Strategy.NUCLEAR)

        assert len(recommendations(low)) == 3
        assert "High probability" in recommendations(high)[0]
        assert recommendations(moderate) == []


class TestSuccessCurve:
    """Test vectorized warning-time sweep."""

    @pytest.mark.parametrize("strategy", list(Strategy))
    def test_matches_scalar(self, strategy):
        days = np.array([1, 182, 183, 365, 366, 730, 731, 1096, 1826, 3650, 3651])
        curve = success_curve(300, days, strategy)
        expected = [evaluate_mitigation(300, d, strategy).success_probability for d in days]
        np.testing.assert_allclose(curve, expected)

    def test_non_decreasing(self):
        curve = success_curve(0, np.arange(1, 5000), Strategy.KINETIC)
        assert np.all(np.diff(curve) >= 0)
        assert curve.min() >= 5
        assert curve.max() <= 95

    def test_rejects_zero_days(self):
        with pytest.raises(InvalidInputError):
            success_curve(10, np.array([0, 100]), Strategy.GRAVITY)
