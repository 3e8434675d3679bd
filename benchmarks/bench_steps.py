"""
Microbenchmark: time per step vs number of particles.
Run:
  python benchmarks/bench_steps.py
"""
import time
import numpy as np
from charge_sim import Simulation, SimulationConfig, ParticleKind
from charge_sim.profiler import Profiler

KINDS = [ParticleKind.ELECTRON, ParticleKind.PROTON, ParticleKind.NEUTRON]


def run(n: int, steps: int = 50):
    prof = Profiler()
    rng = np.random.default_rng(12345)  # determinism
    sim = Simulation(config=SimulationConfig(spawn_bounds=(-100.0, 100.0)), rng=rng, profiler=prof)
    for i in range(n):
        sim.insert(KINDS[i % 3])

    # warmup
    for _ in range(5):
        sim.step()

    t0 = time.perf_counter()
    for _ in range(steps):
        sim.step()
    t1 = time.perf_counter()

    per_step = (t1 - t0) / steps
    return per_step, prof.stats.summary()


if __name__ == "__main__":
    for n in [10, 50, 100, 250]:
        per_step, summary = run(n)
        print(f"N={n:4d}  step={1e3*per_step:8.3f} ms  steps/s={1/per_step:8.1f}")
        for k in ["forces", "integrate"]:
            if k in summary:
                print(" ", k, summary[k])
        print()
