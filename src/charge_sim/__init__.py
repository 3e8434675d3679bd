# MIT License (see LICENSE)
"""
charge_sim - A 3D toy simulation of charged particles.

Electrons, protons and neutrons attract and repel each other through a
simplified Coulomb-style force and are advanced together one tick at a time.

Main entry points:
    - Simulation: The world containing particles; insert() and step().
    - Particle, ParticleKind: Simulated bodies and their species.
    - SimulationConfig: Spawn bounds, trails and seed.

Submodules:
    - core: Force model, integrator, diagnostics.
    - renderer: Optional visualization adapters.
    - host: Headless frame loop and key bindings.

Example:
    from charge_sim import Simulation, ParticleKind

    sim = Simulation([(ParticleKind.ELECTRON, (200, 0, 0)),
                      (ParticleKind.PROTON, (100, 0, 0))])
    sim.insert(ParticleKind.NEUTRON)
    sim.step()
    print(sim.positions())
"""
from .simulation import Simulation
from .types import Particle, ParticleKind, Trail
from .config import DEFAULT_SCENE, ParticleSpec, SimulationConfig, load_config, save_config
from .errors import ChargeSimError, InsufficientParticlesError

__all__ = [
    # Core simulation
    "Simulation",
    "Particle",
    "ParticleKind",
    "Trail",
    # Configuration
    "SimulationConfig",
    "ParticleSpec",
    "DEFAULT_SCENE",
    "load_config",
    "save_config",
    # Errors
    "ChargeSimError",
    "InsufficientParticlesError",
]
