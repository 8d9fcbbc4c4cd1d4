"""Historical impact events used for comparison and education."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class HistoricalImpact:
    """A documented impact event.

    Attributes:
        name: Event name.
        year: Year of the event; negative values are years BCE.
        diameter_m: Estimated impactor diameter in meters.
        energy_mt: Estimated energy in megatons of TNT.
        location: Where it happened.
        effect: Short description of the consequences.
    """

    name: str
    year: int
    diameter_m: float
    energy_mt: float
    location: str
    effect: str


_HISTORICAL_IMPACTS: tuple[HistoricalImpact, ...] = (
    HistoricalImpact(
        name="Chicxulub Impact",
        year=-65_000_000,
        diameter_m=10_000.0,
        energy_mt=100_000_000.0,
        location="Yucatan Peninsula, Mexico",
        effect="Dinosaur extinction event",
    ),
    HistoricalImpact(
        name="Tunguska Event",
        year=1908,
        diameter_m=60.0,
        energy_mt=15.0,
        location="Siberia, Russia",
        effect="2,000 km² of forest destroyed",
    ),
    HistoricalImpact(
        name="Chelyabinsk Meteor",
        year=2013,
        diameter_m=20.0,
        energy_mt=0.5,
        location="Chelyabinsk, Russia",
        effect="1,500 injuries, widespread damage",
    ),
    HistoricalImpact(
        name="Meteor Crater",
        year=-50_000,
        diameter_m=50.0,
        energy_mt=10.0,
        location="Arizona, USA",
        effect="1.2 km crater formed",
    ),
)


def list_historical_impacts() -> list[HistoricalImpact]:
    """Return the reference impacts, always the same four in the same order."""
    return list(_HISTORICAL_IMPACTS)
