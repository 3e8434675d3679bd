# examples/neutron_cloud.py
from charge_sim import Simulation, ParticleKind
from charge_sim.core import kinetic_energy
import numpy as np

# Neutrons carry no charge, so nothing in this cloud ever moves.
sim = Simulation([ParticleKind.NEUTRON] * 10)
start = sim.positions().copy()

for _ in range(500):
    sim.step()

print("max displacement:", float(np.abs(sim.positions() - start).max()))
print("kinetic energy:", kinetic_energy(sim.particles))
