from __future__ import annotations

"""Physical constants and empirical coefficients for the impact model.

All values in SI units unless otherwise noted. The scaling exponents and
coefficients are tuning constants of this model, not derived physical laws.
"""

# --- Physical parameters ---
GRAVITY_M_S2: float = 9.81
"""Standard gravitational acceleration in m/s²."""

TNT_DIVISOR_J: float = 4.184e9
"""Divisor converting impact energy in joules to the reported TNT equivalent."""

# --- Bulk densities (kg/m³) ---
DENSITY_ROCKY_KG_M3: float = 3000.0
"""Bulk density of a stony asteroid."""

DENSITY_METALLIC_KG_M3: float = 8000.0
"""Bulk density of an iron-nickel asteroid."""

DENSITY_ICY_KG_M3: float = 1000.0
"""Bulk density of a cometary/icy body."""

# --- Effect scaling (radius = tnt ** exponent * coefficient, in m) ---
CRATER_EXPONENT: float = 0.25
CRATER_COEFFICIENT: float = 2.0
CRATER_DEPTH_RATIO: float = 3.0
"""Crater diameter divided by crater depth."""

AFFECTED_AREA_EXPONENT: float = 0.33
AFFECTED_AREA_COEFFICIENT_M: float = 1000.0

FIREBALL_EXPONENT: float = 0.4
FIREBALL_COEFFICIENT_M: float = 100.0

THERMAL_EXPONENT: float = 0.41
THERMAL_COEFFICIENT_M: float = 150.0

AIR_BLAST_EXPONENT: float = 0.33
AIR_BLAST_COEFFICIENT_M: float = 800.0

SEISMIC_OFFSET: float = 4.8
"""Subtracted from log10(energy in J) to give the seismic magnitude."""

# --- Casualty model ---
POPULATION_AREA_DIVISOR: float = 1_000_000.0
"""Population is spread over this many square meters of affected area."""

CASUALTY_FRACTION: float = 0.7
"""Fraction of the affected population counted as casualties."""

# --- Mitigation ---
DAYS_PER_YEAR: float = 365.0

ENERGY_CEILING_MT: float = 1000.0
"""Energy at which mitigation success degrades to the floor."""

SUCCESS_FLOOR_PCT: float = 5.0
SUCCESS_CEILING_PCT: float = 95.0

DEFLECTION_COEFFICIENT_DEG: float = 0.0001
"""Degrees of deflection per sqrt(MT) per year of warning."""

HIGH_SUCCESS_PCT: float = 70.0
MODERATE_SUCCESS_PCT: float = 40.0

# --- NASA NeoWs feed ---
NEO_FEED_URL: str = "https://api.nasa.gov/neo/rest/v1/feed"
"""Near-Earth-object feed endpoint, keyed by a date range and an API key."""

DEFAULT_NEO_API_KEY: str = "DEMO_KEY"
"""Rate-limited demo key used when ``NASA_API_KEY`` is not set."""

NEO_FEED_WINDOW_DAYS: int = 7
"""Length of the feed window requested on refresh, starting today."""

NEO_CACHE_SECONDS: float = 3600.0
"""Validity window of a cached catalog snapshot."""

MAX_HAZARDOUS_NEOS: int = 10
"""Cap on hazardous entries kept from one feed response."""

NEO_REQUEST_TIMEOUT_S: float = 30.0
