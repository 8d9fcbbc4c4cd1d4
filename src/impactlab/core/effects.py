from __future__ import annotations

import logging
from dataclasses import dataclass

from impactlab.core.impact import ImpactResults

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EnergyBenchmark:
    name: str
    energy_mt: float


@dataclass(frozen=True)
class DamageZone:
    name: str
    width_km: float  # ring width beyond the next inner zone


# Reference events for "similar to ..." comparisons
ENERGY_BENCHMARKS: tuple[EnergyBenchmark, ...] = (
    EnergyBenchmark("Hiroshima Bomb", 0.015),
    EnergyBenchmark("Tsar Bomba", 50.0),
    EnergyBenchmark("Krakatoa Eruption", 200.0),
    EnergyBenchmark("Tunguska Event", 15.0),
    EnergyBenchmark("Mt. St. Helens", 24.0),
)

# Chart series, without Krakatoa
_CHART_BENCHMARKS: tuple[EnergyBenchmark, ...] = (
    EnergyBenchmark("Hiroshima", 0.015),
    EnergyBenchmark("Tunguska", 15.0),
    EnergyBenchmark("Mt St Helens", 24.0),
    EnergyBenchmark("Tsar Bomba", 50.0),
)


def closest_comparison(tnt_equivalent: float) -> EnergyBenchmark:
    """
    Find the benchmark event closest in energy to an impact.

    Args:
        tnt_equivalent: Impact energy in megatons of TNT

    Returns:
        The benchmark with the smallest absolute energy difference
        (earliest listed wins ties)
    """
    return min(ENERGY_BENCHMARKS, key=lambda b: abs(b.energy_mt - tnt_equivalent))


def energy_comparisons(tnt_equivalent: float) -> list[EnergyBenchmark]:
    """Chart benchmarks plus this impact, sorted by ascending energy."""
    entries = list(_CHART_BENCHMARKS) + [EnergyBenchmark("This Impact", tnt_equivalent)]
    return sorted(entries, key=lambda b: b.energy_mt)


def environmental_effects(results: ImpactResults) -> list[str]:
    """
    Describe the wider environmental consequences of an impact.

    Thresholds are cumulative: a 500 MT impact lists every effect from
    the 1, 10 and 100 MT tiers.
    """
    effects = []
    tnt = results.tnt_equivalent

    if tnt > 1:
        effects.append("Severe local fires and forest destruction")
    if tnt > 10:
        effects.append("Regional atmospheric disturbance")
    if tnt > 100:
        effects.append("Global dust cloud affecting climate")
    if tnt > 1000:
        effects.append("Mass extinction event possible")
    if results.seismic_magnitude > 5:
        effects.append(f"Magnitude {results.seismic_magnitude:.1f} earthquake")

    return effects or ["Localized damage only"]


def damage_zones(results: ImpactResults) -> list[DamageZone]:
    """Concentric damage rings in km, dropping rings with no width."""
    zones = [
        DamageZone("Fireball", results.fireball / 1000),
        DamageZone("Thermal Radiation", (results.thermal_radiation - results.fireball) / 1000),
        DamageZone("Air Blast", (results.air_blast - results.thermal_radiation) / 1000),
    ]
    return [zone for zone in zones if zone.width_km > 0]


def crater_in_football_fields(results: ImpactResults) -> float:
    """Crater diameter expressed in 100 m football fields."""
    return results.crater_diameter / 100


def format_count(value: float) -> str:
    """Format a large count with billion/million/thousand wording."""
    if value >= 1e9:
        return f"{value / 1e9:.2f} billion"
    elif value >= 1e6:
        return f"{value / 1e6:.2f} million"
    elif value >= 1e3:
        return f"{value / 1e3:.2f} thousand"
    else:
        return f"{value:.0f}"
