# examples/rutherford.py
import logging

from charge_sim import DEFAULT_SCENE, Simulation, SimulationConfig
from charge_sim.host import FrameLoop, events_from_keys
from charge_sim.renderer import DebugRenderer

logging.basicConfig(level=logging.INFO)

sim = Simulation(DEFAULT_SCENE, config=SimulationConfig(enable_trail=True, seed=1))

# Scripted key presses standing in for a window's input: spawn one of each
# kind, let it run, then quit.
keys = [["1"], ["2"], ["3"]] + [[]] * 20 + [["q"]]
frames = iter(keys)

loop = FrameLoop(sim, renderer=DebugRenderer(verbose=False), poll=lambda: events_from_keys(next(frames)))
loop.run()

print("ticks:", sim.tick, "particles:", len(sim))
