"""impactlab Sweeps — vectorized series for charts.

Energy against diameter for each composition, and deflection success
against warning time for each strategy.
"""

import numpy as np

from impactlab import Density, Strategy, compute_impact_batch, success_curve

diameters = np.logspace(1, 3, 9)  # 10 m to 1 km

for density in Density:
    batch = compute_impact_batch(diameters, velocities=20.0, angles=45.0, density=density)
    print(f"{density.value:8s}", " ".join(f"{e:.1e}" for e in batch["tnt_equivalent"]))

days = np.array([30, 180, 365, 730, 1825, 3650, 5475])
for strategy in Strategy:
    curve = success_curve(energy_mt=100.0, days_before_impact=days, strategy=strategy)
    print(f"{strategy.value:8s}", " ".join(f"{p:5.1f}" for p in curve))
