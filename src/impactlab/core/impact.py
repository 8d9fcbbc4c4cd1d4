"""Impact physics: asteroid parameters to impact effects.

Converts diameter, velocity, entry angle and composition into impact
energy, crater size, blast radii, seismic magnitude and a casualty
estimate. The scaling laws are fixed empirical fits of this model and are
reproduced exactly so outputs stay comparable across versions.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING

import numpy as np
from numpy.typing import ArrayLike, NDArray

from impactlab.core.validation import InvalidInputError, require_positive
from impactlab.utils.constants import (
    AFFECTED_AREA_COEFFICIENT_M,
    AFFECTED_AREA_EXPONENT,
    AIR_BLAST_COEFFICIENT_M,
    AIR_BLAST_EXPONENT,
    CASUALTY_FRACTION,
    CRATER_COEFFICIENT,
    CRATER_DEPTH_RATIO,
    CRATER_EXPONENT,
    DENSITY_ICY_KG_M3,
    DENSITY_METALLIC_KG_M3,
    DENSITY_ROCKY_KG_M3,
    FIREBALL_COEFFICIENT_M,
    FIREBALL_EXPONENT,
    GRAVITY_M_S2 as G,
    POPULATION_AREA_DIVISOR,
    SEISMIC_OFFSET,
    THERMAL_COEFFICIENT_M,
    THERMAL_EXPONENT,
    TNT_DIVISOR_J,
)

if TYPE_CHECKING:
    from impactlab.data.neo import NEOAsteroid

logger = logging.getLogger(__name__)


class Density(Enum):
    """Asteroid composition classes."""

    ROCKY = "rocky"
    METALLIC = "metallic"
    ICY = "icy"

    @property
    def kg_m3(self) -> float:
        """Bulk density in kg/m³."""
        return _DENSITY_TABLE[self]

    @classmethod
    def parse(cls, value: Density | str) -> Density:
        """Accept a Density member or its string value (case-insensitive).

        Raises:
            InvalidInputError: If the string names no known composition.
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            logger.error("Unknown density class: %r", value)
            raise InvalidInputError(f"Unknown density class: {value!r}") from None


_DENSITY_TABLE = {
    Density.ROCKY: DENSITY_ROCKY_KG_M3,
    Density.METALLIC: DENSITY_METALLIC_KG_M3,
    Density.ICY: DENSITY_ICY_KG_M3,
}


@dataclass(frozen=True)
class AsteroidParams:
    """Physical description of an impactor.

    Attributes:
        diameter: Diameter in meters.
        velocity: Entry velocity in km/s.
        angle: Entry angle in degrees from horizontal (90 = vertical).
            Values outside [0, 90] are accepted and go through the sine
            term unchanged.
        density: Composition class (a Density or its string value).

    Raises:
        InvalidInputError: If diameter or velocity is not a finite positive
            number, the angle is not finite, or the density is unknown.
    """

    diameter: float
    velocity: float
    angle: float = 45.0
    density: Density = field(default=Density.ROCKY)

    def __post_init__(self) -> None:
        object.__setattr__(self, "diameter", require_positive("diameter", self.diameter))
        object.__setattr__(self, "velocity", require_positive("velocity", self.velocity))
        angle = float(self.angle)
        if not math.isfinite(angle):
            logger.error("Rejected angle=%r: must be finite", angle)
            raise InvalidInputError(f"angle must be finite, got {angle!r}")
        object.__setattr__(self, "angle", angle)
        object.__setattr__(self, "density", Density.parse(self.density))

    @classmethod
    def from_neo(
        cls,
        neo: NEOAsteroid,
        angle: float = 45.0,
        density: Density | str = Density.ROCKY,
    ) -> AsteroidParams:
        """Build impact parameters from a catalog entry.

        The feed carries no entry angle or composition, so those default to
        a 45° rocky impactor.
        """
        return cls(
            diameter=neo.diameter_m,
            velocity=neo.velocity_kmps,
            angle=angle,
            density=density,
        )


@dataclass(frozen=True)
class ImpactResults:
    """Impact effects for one set of asteroid parameters.

    Attributes:
        mass: Impactor mass in kg.
        impact_energy: Energy delivered in joules.
        tnt_equivalent: Energy in megatons of TNT (model convention).
        crater_diameter: Crater diameter in meters.
        crater_depth: Crater depth in meters (always diameter / 3).
        affected_area_radius: Radius of the populated area at risk, meters.
        fireball: Fireball radius in meters.
        thermal_radiation: Thermal radiation radius in meters.
        air_blast: Air blast radius in meters.
        seismic_magnitude: Richter-like magnitude, never below 0.
        casualty_estimate: Estimated casualties (0 without population).
    """

    mass: float
    impact_energy: float
    tnt_equivalent: float
    crater_diameter: float
    crater_depth: float
    affected_area_radius: float
    fireball: float
    thermal_radiation: float
    air_blast: float
    seismic_magnitude: float
    casualty_estimate: int


# Largest float64 below 2**63; int64 casts of anything larger wrap negative
_MAX_BATCH_CASUALTIES = np.nextafter(np.float64(2.0 ** 63), 0.0)


def _power(base: float, exponent: float) -> float:
    """Real fractional power; NaN for negative bases instead of a complex result."""
    if base < 0:
        return math.nan
    return base ** exponent


def _seismic_magnitude(impact_energy: float) -> float:
    # log10 of zero (grazing entry) is -inf, which clamps to 0
    if not impact_energy > 0:
        return 0.0
    return max(0.0, math.log10(impact_energy) - SEISMIC_OFFSET)


def _casualties(affected_area_radius: float, population: float) -> int:
    if not population > 0:
        return 0
    affected_area = math.pi * affected_area_radius * affected_area_radius
    population_density = population / POPULATION_AREA_DIVISOR
    casualties = affected_area * population_density * CASUALTY_FRACTION
    if not math.isfinite(casualties):
        return 0
    return math.floor(casualties)


def compute_impact(params: AsteroidParams, population: float = 0) -> ImpactResults:
    """Compute the effects of an asteroid impact.

    Args:
        params: Impactor description.
        population: Population of the impact site; 0 (or less) skips the
            casualty estimate.

    Returns:
        A fresh ImpactResults record.

    Note:
        A grazing impact (angle = 0) yields zero energy, so every
        energy-derived field is zero as well.
    """
    density_value = params.density.kg_m3

    radius = params.diameter / 2
    # float ** raises OverflowError where a product gives inf
    volume = (4 / 3) * math.pi * radius * radius * radius
    mass = volume * density_value

    velocity_ms = params.velocity * 1000
    impact_energy = 0.5 * mass * (velocity_ms * velocity_ms) * math.sin(params.angle * math.pi / 180)
    tnt_equivalent = impact_energy / TNT_DIVISOR_J

    crater_diameter = CRATER_COEFFICIENT * _power(impact_energy / (G * density_value), CRATER_EXPONENT)
    crater_depth = crater_diameter / CRATER_DEPTH_RATIO

    affected_area_radius = _power(tnt_equivalent, AFFECTED_AREA_EXPONENT) * AFFECTED_AREA_COEFFICIENT_M
    fireball = _power(tnt_equivalent, FIREBALL_EXPONENT) * FIREBALL_COEFFICIENT_M
    thermal_radiation = _power(tnt_equivalent, THERMAL_EXPONENT) * THERMAL_COEFFICIENT_M
    air_blast = _power(tnt_equivalent, AIR_BLAST_EXPONENT) * AIR_BLAST_COEFFICIENT_M

    results = ImpactResults(
        mass=mass,
        impact_energy=impact_energy,
        tnt_equivalent=tnt_equivalent,
        crater_diameter=crater_diameter,
        crater_depth=crater_depth,
        affected_area_radius=affected_area_radius,
        fireball=fireball,
        thermal_radiation=thermal_radiation,
        air_blast=air_blast,
        seismic_magnitude=_seismic_magnitude(impact_energy),
        casualty_estimate=_casualties(affected_area_radius, population),
    )

    logger.debug(
        "Impact: d=%.1f m, v=%.1f km/s, angle=%.1f deg, %s -> E=%.3e J, crater=%.1f m",
        params.diameter, params.velocity, params.angle, params.density.value,
        impact_energy, crater_diameter,
    )
    return results


def compute_impact_batch(
    diameters: ArrayLike,
    velocities: ArrayLike,
    angles: ArrayLike = 45.0,
    density: Density | str = Density.ROCKY,
    population: ArrayLike = 0.0,
) -> dict[str, NDArray]:
    """Vectorized impact computation for parameter sweeps.

    Inputs broadcast against each other (e.g. an array of diameters with a
    scalar velocity). Produces the same numbers as :func:`compute_impact`
    applied elementwise.

    Args:
        diameters: Diameters in meters.
        velocities: Velocities in km/s.
        angles: Entry angles in degrees.
        density: Composition class shared by every element.
        population: Impact-site population(s).

    Returns:
        Dict keyed by ImpactResults field name, each an array of the
        broadcast shape. ``casualty_estimate`` has int64 dtype and saturates
        just below 2**63 rather than wrapping.

    Raises:
        InvalidInputError: If any diameter or velocity is not finite and
            positive, or any angle is not finite.
    """
    density_value = Density.parse(density).kg_m3

    d, v, a, pop = np.broadcast_arrays(
        np.asarray(diameters, dtype=np.float64),
        np.asarray(velocities, dtype=np.float64),
        np.asarray(angles, dtype=np.float64),
        np.asarray(population, dtype=np.float64),
    )

    for name, values in (("diameter", d), ("velocity", v)):
        if not np.all(np.isfinite(values) & (values > 0)):
            logger.error("Rejected batch: every %s must be a finite positive number", name)
            raise InvalidInputError(f"every {name} must be a finite positive number")
    if not np.all(np.isfinite(a)):
        logger.error("Rejected batch: every angle must be finite")
        raise InvalidInputError("every angle must be finite")

    # Negative energies (angles past 180 deg) give NaN radii, as in the scalar path
    with np.errstate(divide="ignore", invalid="ignore"):
        radius = d / 2
        mass = (4 / 3) * np.pi * radius * radius * radius * density_value
        velocity_ms = v * 1000
        impact_energy = 0.5 * mass * (velocity_ms * velocity_ms) * np.sin(a * np.pi / 180)
        tnt = impact_energy / TNT_DIVISOR_J

        crater_diameter = CRATER_COEFFICIENT * np.power(impact_energy / (G * density_value), CRATER_EXPONENT)
        affected_area_radius = np.power(tnt, AFFECTED_AREA_EXPONENT) * AFFECTED_AREA_COEFFICIENT_M

        seismic = np.where(
            impact_energy > 0,
            np.maximum(0.0, np.log10(impact_energy) - SEISMIC_OFFSET),
            0.0,
        )

        affected_area = np.pi * affected_area_radius * affected_area_radius
        raw_casualties = np.floor(affected_area * (pop / POPULATION_AREA_DIVISOR) * CASUALTY_FRACTION)
        casualties = np.where((pop > 0) & np.isfinite(raw_casualties), raw_casualties, 0.0)

        results = {
            "mass": mass,
            "impact_energy": impact_energy,
            "tnt_equivalent": tnt,
            "crater_diameter": crater_diameter,
            "crater_depth": crater_diameter / CRATER_DEPTH_RATIO,
            "affected_area_radius": affected_area_radius,
            "fireball": np.power(tnt, FIREBALL_EXPONENT) * FIREBALL_COEFFICIENT_M,
            "thermal_radiation": np.power(tnt, THERMAL_EXPONENT) * THERMAL_COEFFICIENT_M,
            "air_blast": np.power(tnt, AIR_BLAST_EXPONENT) * AIR_BLAST_COEFFICIENT_M,
            "seismic_magnitude": seismic,
            "casualty_estimate": np.minimum(casualties, _MAX_BATCH_CASUALTIES).astype(np.int64),
        }

    logger.debug("Batch impact computed for %d parameter sets", d.size)
    return results
