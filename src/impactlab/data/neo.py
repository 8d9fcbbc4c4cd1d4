"""NASA NeoWs near-Earth-object feed client.

Fetches upcoming close approaches, keeps the potentially hazardous ones
closest to Earth, and caches the snapshot for a fixed validity window.
Any fetch failure falls back to a static list so callers always get data.
"""

from __future__ import annotations

import logging
import math
import os
import time
from dataclasses import dataclass, field
from datetime import date, timedelta
from typing import Any, Callable

import requests

from impactlab.utils.constants import (
    DEFAULT_NEO_API_KEY,
    MAX_HAZARDOUS_NEOS,
    NEO_CACHE_SECONDS,
    NEO_FEED_URL,
    NEO_FEED_WINDOW_DAYS,
    NEO_REQUEST_TIMEOUT_S,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class NEOAsteroid:
    """One near-Earth object and its next close approach.

    Attributes:
        id: NeoWs object id.
        name: Designation.
        diameter_m: Mean estimated diameter in meters, rounded.
        velocity_kmps: Relative velocity at close approach in km/s.
        is_hazardous: Potentially Hazardous Object flag.
        close_approach_date: ISO date (YYYY-MM-DD) of the close approach.
        miss_distance_km: Miss distance in km.
    """

    id: str
    name: str
    diameter_m: float
    velocity_kmps: float
    is_hazardous: bool
    close_approach_date: str
    miss_distance_km: float


MOCK_ASTEROIDS: tuple[NEOAsteroid, ...] = (
    NEOAsteroid("2021277", "277 Elvis", 450, 35.2, True, "2025-11-15", 7_500_000),
    NEOAsteroid("433", "433 Eros", 340, 24.8, True, "2026-01-31", 4_200_000),
    NEOAsteroid("99942", "99942 Apophis", 370, 30.7, True, "2029-04-13", 31_000),
    NEOAsteroid("101955", "101955 Bennu", 490, 28.6, True, "2135-09-25", 750_000),
    NEOAsteroid("1950DA", "29075 (1950 DA)", 1100, 15.3, True, "2880-03-16", 8_000_000),
    NEOAsteroid("2340", "2340 Hathor", 210, 41.5, True, "2026-10-21", 12_000_000),
    NEOAsteroid("4179", "4179 Toutatis", 520, 35.0, True, "2028-12-08", 18_000_000),
    NEOAsteroid("2062", "2062 Aten", 900, 26.4, True, "2030-08-19", 25_000_000),
    NEOAsteroid("1862", "1862 Apollo", 1400, 31.2, True, "2027-05-06", 16_000_000),
    NEOAsteroid("1566", "1566 Icarus", 1300, 42.8, True, "2029-06-14", 9_500_000),
)
"""Fallback catalog used when the feed is unavailable or empty."""


def parse_diameter_range(neo: dict[str, Any]) -> float:
    """Mean of the estimated min/max diameter in meters, rounded; 0 if absent."""
    meters = (neo.get("estimated_diameter") or {}).get("meters")
    if not meters:
        return 0
    # half-up, not banker's rounding
    return math.floor((meters["estimated_diameter_min"] + meters["estimated_diameter_max"]) / 2 + 0.5)


def parse_feed(payload: dict[str, Any]) -> list[NEOAsteroid]:
    """Flatten a NeoWs feed response into NEOAsteroid records.

    Objects missing diameter estimates or close-approach data are skipped.

    Args:
        payload: Decoded JSON of a ``/feed`` response.

    Returns:
        Every usable object, in feed order.

    Raises:
        KeyError: If the payload has no ``near_earth_objects`` section or a
            close approach lacks its velocity or miss distance.
        ValueError: If a numeric field cannot be parsed or a section has
            the wrong shape.
    """
    asteroids: list[NEOAsteroid] = []

    days = payload["near_earth_objects"]
    if not isinstance(days, dict):
        raise ValueError(f"near_earth_objects must be a mapping, got {type(days).__name__}")

    for day, day_objects in days.items():
        if not isinstance(day_objects, list):
            raise ValueError(f"NEO list for {day} must be a list, got {type(day_objects).__name__}")
        for neo in day_objects:
            if not isinstance(neo, dict):
                raise ValueError(f"NEO record for {day} must be a mapping, got {type(neo).__name__}")
            meters = (neo.get("estimated_diameter") or {}).get("meters")
            approaches = neo.get("close_approach_data") or []
            if not meters or not approaches:
                continue

            approach = approaches[0]
            asteroids.append(NEOAsteroid(
                id=str(neo["id"]),
                name=neo["name"],
                diameter_m=parse_diameter_range(neo),
                velocity_kmps=float(approach["relative_velocity"]["kilometers_per_second"]),
                is_hazardous=bool(neo.get("is_potentially_hazardous_asteroid", False)),
                close_approach_date=approach["close_approach_date"],
                miss_distance_km=float(approach["miss_distance"]["kilometers"]),
            ))

    logger.debug("Parsed %d NEOs from feed", len(asteroids))
    return asteroids


def select_hazardous(asteroids: list[NEOAsteroid], limit: int = MAX_HAZARDOUS_NEOS) -> list[NEOAsteroid]:
    """Hazardous objects only, closest approach first, at most ``limit``."""
    hazardous = [a for a in asteroids if a.is_hazardous]
    return sorted(hazardous, key=lambda a: a.miss_distance_km)[:limit]


def _default_api_key() -> str:
    return os.environ.get("NASA_API_KEY", DEFAULT_NEO_API_KEY)


@dataclass
class NeoFeedClient:
    """Client for the NASA NeoWs ``/feed`` endpoint.

    Attributes:
        api_key: api.nasa.gov key. Defaults to ``$NASA_API_KEY`` or the
            rate-limited ``DEMO_KEY``.
        timeout: Request timeout in seconds.
    """

    api_key: str = field(default_factory=_default_api_key)
    timeout: float = NEO_REQUEST_TIMEOUT_S
    _session: requests.Session = field(default_factory=requests.Session, repr=False)

    FEED_URL = NEO_FEED_URL

    def fetch_feed(self, start_date: date, end_date: date) -> list[NEOAsteroid]:
        """Fetch every object with a close approach in a date range.

        NeoWs limits a feed request to 7 days.

        Raises:
            requests.HTTPError: If the request fails.
            KeyError, ValueError: If the response cannot be parsed.
        """
        params = {
            "start_date": start_date.isoformat(),
            "end_date": end_date.isoformat(),
            "api_key": self.api_key,
        }
        response = self._session.get(self.FEED_URL, params=params, timeout=self.timeout)
        response.raise_for_status()
        return parse_feed(response.json())

    def fetch_hazardous(self, start_date: date, end_date: date) -> list[NEOAsteroid]:
        """Fetch the closest hazardous objects in a date range.

        Returns:
            Up to 10 hazardous objects sorted by ascending miss distance.
        """
        return select_hazardous(self.fetch_feed(start_date, end_date))


@dataclass
class NeoCatalog:
    """Cached view of the hazardous-object feed.

    Holds one snapshot and the instant it was refreshed. ``get`` serves the
    snapshot while it is younger than ``cache_seconds`` and refreshes
    otherwise. Not thread-safe.

    Attributes:
        client: Feed client used on refresh.
        cache_seconds: Validity window of a snapshot.
        clock: Monotonic clock in seconds.
        today: Returns the first day of the feed window.
    """

    client: NeoFeedClient = field(default_factory=NeoFeedClient)
    cache_seconds: float = NEO_CACHE_SECONDS
    clock: Callable[[], float] = field(default=time.monotonic, repr=False)
    today: Callable[[], date] = field(default=date.today, repr=False)
    _snapshot: list[NEOAsteroid] | None = field(default=None, init=False, repr=False)
    _refreshed_at: float | None = field(default=None, init=False, repr=False)

    def is_fresh(self) -> bool:
        """Whether a snapshot exists and is still inside its validity window."""
        if self._snapshot is None or self._refreshed_at is None:
            return False
        return (self.clock() - self._refreshed_at) < self.cache_seconds

    def get(self) -> list[NEOAsteroid]:
        """Return the cached snapshot, refreshing it first if stale."""
        if self.is_fresh():
            return list(self._snapshot)
        return self.refresh()

    def refresh(self) -> list[NEOAsteroid]:
        """Fetch a new snapshot, falling back to MOCK_ASTEROIDS on failure.

        Never raises for fetch or parse errors; the fallback list is cached
        for the full validity window like a real snapshot.
        """
        start = self.today()
        end = start + timedelta(days=NEO_FEED_WINDOW_DAYS)

        try:
            asteroids = self.client.fetch_hazardous(start, end)
        except (requests.RequestException, AttributeError, KeyError, TypeError, ValueError) as e:
            logger.warning("Failed to fetch NEO feed, using fallback catalog: %s", e)
            asteroids = []
        else:
            if not asteroids:
                logger.warning("NEO feed returned no hazardous objects, using fallback catalog")

        self._snapshot = asteroids or list(MOCK_ASTEROIDS)
        self._refreshed_at = self.clock()
        logger.debug("NEO catalog refreshed with %d objects", len(self._snapshot))
        return list(self._snapshot)
