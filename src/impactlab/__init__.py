"""
impactlab — Asteroid impact effects and deflection scoring for Python.

Open-source library for estimating what an asteroid strike would do
(energy, crater, blast radii, seismic magnitude, casualties) and how
likely a deflection mission is to prevent it. Built for education and
outreach; the formulas are fixed so results are reproducible.
"""

from __future__ import annotations

__version__ = "0.1.0-dev"

from impactlab.core.validation import InvalidInputError
from impactlab.core.impact import (
    AsteroidParams,
    Density,
    ImpactResults,
    compute_impact,
    compute_impact_batch,
)
from impactlab.core.mitigation import (
    MitigationResult,
    Strategy,
    compare_strategies,
    evaluate_mitigation,
    success_curve,
)
from impactlab.data.historical import HistoricalImpact, list_historical_impacts
from impactlab.data.neo import NEOAsteroid, NeoCatalog, NeoFeedClient

__all__ = [
    "__version__",
    "InvalidInputError",
    "AsteroidParams",
    "Density",
    "ImpactResults",
    "compute_impact",
    "compute_impact_batch",
    "MitigationResult",
    "Strategy",
    "compare_strategies",
    "evaluate_mitigation",
    "success_curve",
    "HistoricalImpact",
    "list_historical_impacts",
    "NEOAsteroid",
    "NeoCatalog",
    "NeoFeedClient",
]
