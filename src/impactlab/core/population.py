"""Impact-site population lookup."""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PopulatedPlace:
    """A named place and the population exposed at it."""

    name: str
    lat: float
    lng: float
    population: int


KNOWN_CITIES: tuple[PopulatedPlace, ...] = (
    PopulatedPlace("New York", 40.7128, -74.006, 8_000_000),
    PopulatedPlace("London", 51.5074, -0.1278, 9_000_000),
    PopulatedPlace("Tokyo", 35.6762, 139.6503, 14_000_000),
    PopulatedPlace("Los Angeles", 34.0522, -118.2437, 4_000_000),
    PopulatedPlace("Paris", 48.8566, 2.3522, 2_200_000),
    PopulatedPlace("Mumbai", 19.076, 72.8777, 20_000_000),
)

CITY_MATCH_RADIUS_DEG: float = 1.0


def locate_population(lat: float, lng: float) -> PopulatedPlace:
    """Find the known city at an impact location.

    Distance is measured naively in degrees of latitude/longitude; the
    first city closer than one degree wins.

    Args:
        lat: Latitude in degrees.
        lng: Longitude in degrees.

    Returns:
        The matching city, or an unpopulated "Ocean/Rural Area" place at
        the given location.
    """
    for city in KNOWN_CITIES:
        if math.hypot(lat - city.lat, lng - city.lng) < CITY_MATCH_RADIUS_DEG:
            logger.debug("Impact at (%.3f, %.3f) matched %s", lat, lng, city.name)
            return city
    return PopulatedPlace("Ocean/Rural Area", lat, lng, 0)
