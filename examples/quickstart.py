"""impactlab Quickstart — simulate an impact and score a deflection."""

from impactlab import AsteroidParams, Strategy, compute_impact, evaluate_mitigation
from impactlab.core.effects import closest_comparison, environmental_effects, format_count
from impactlab.core.population import locate_population

# 100 m stony asteroid at 30 km/s, 45° entry, over New York
params = AsteroidParams(diameter=100, velocity=30, angle=45, density="rocky")
place = locate_population(40.7128, -74.006)

results = compute_impact(params, population=place.population)

print(f"Impact site:    {place.name}")
print(f"Mass:           {results.mass:.3e} kg")
print(f"Energy:         {results.impact_energy:.3e} J ({results.tnt_equivalent:.2e} MT)")
print(f"Similar to:     {closest_comparison(results.tnt_equivalent).name}")
print(f"Crater:         {results.crater_diameter:.0f} m wide, {results.crater_depth:.0f} m deep")
print(f"Air blast:      {results.air_blast / 1000:.1f} km")
print(f"Seismic:        M{results.seismic_magnitude:.1f}")
print(f"Casualties:     {format_count(results.casualty_estimate)}")
for effect in environmental_effects(results):
    print(f"  - {effect}")

# Five years of warning
for strategy in Strategy:
    m = evaluate_mitigation(results.tnt_equivalent, 5 * 365, strategy)
    print(f"{strategy.value:8s} {m.success_probability:5.1f}%  ({m.success_level})  {m.deflection_needed:.4f}°")
