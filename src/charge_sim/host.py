# MIT License (see LICENSE)
"""
Headless host frame loop.

A windowed front end owns the camera, the window and raw input; what it
hands the simulation is a list of discrete events per frame. This module
turns key presses into those events and drives one frame:

    1. Quit if requested.
    2. Insert a particle for each spawn event.
    3. Step the simulation exactly once, unless only one particle exists;
       a lone particle is held still until a second one is spawned.
    4. Render.

Key bindings mirror the interactive demo: 1/2/3 spawn an electron, proton or
neutron at a random position; q or escape quits.
"""
from __future__ import annotations
import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from enum import Enum

from .renderer import NullRenderer, RendererAdapter
from .simulation import Simulation
from .types import ParticleKind

logger = logging.getLogger(__name__)


class HostEvent(Enum):
    SPAWN_ELECTRON = "spawn_electron"
    SPAWN_PROTON = "spawn_proton"
    SPAWN_NEUTRON = "spawn_neutron"
    QUIT = "quit"


SPAWN_KINDS: dict[HostEvent, ParticleKind] = {
    HostEvent.SPAWN_ELECTRON: ParticleKind.ELECTRON,
    HostEvent.SPAWN_PROTON: ParticleKind.PROTON,
    HostEvent.SPAWN_NEUTRON: ParticleKind.NEUTRON,
}

DEFAULT_KEYMAP: dict[str, HostEvent] = {
    "1": HostEvent.SPAWN_ELECTRON,
    "2": HostEvent.SPAWN_PROTON,
    "3": HostEvent.SPAWN_NEUTRON,
    "q": HostEvent.QUIT,
    "escape": HostEvent.QUIT,
}


def events_from_keys(
    keys: Iterable[str], keymap: dict[str, HostEvent] = DEFAULT_KEYMAP
) -> list[HostEvent]:
    """Translate key-press names to events. Unbound keys are ignored."""
    return [keymap[k.lower()] for k in keys if k.lower() in keymap]


@dataclass
class FrameLoop:
    """
    Drives a Simulation one frame at a time.

    Attributes:
        simulation: The world being advanced.
        renderer: Receives every frame after the step.
        poll: Called once per frame for that frame's events. None means no input.
        frames: Frames completed so far.
        running: False once a QUIT event has been seen.
    """
    simulation: Simulation
    renderer: RendererAdapter = field(default_factory=NullRenderer)
    poll: Callable[[], Iterable[HostEvent]] | None = None
    frames: int = 0
    running: bool = True

    def run_frame(self, events: Iterable[HostEvent] | None = None) -> bool:
        """
        Process one frame.

        Args:
            events: Events for this frame. Defaults to calling ``poll``.

        Returns:
            False if the frame was a quit request (nothing was stepped).
        """
        if events is None:
            events = self.poll() if self.poll is not None else ()
        events = list(events)

        if HostEvent.QUIT in events:
            logger.info("Quit requested after %d frames", self.frames)
            self.running = False
            return False

        for event in events:
            kind = SPAWN_KINDS.get(event)
            if kind is not None:
                self.simulation.insert(kind)

        # A lone particle has nothing to interact with; hold it still until a
        # second one arrives.
        if len(self.simulation) == 1:
            logger.debug("Deferring step: only one particle in the simulation")
        else:
            self.simulation.step()
        self.renderer.render_simulation(self.simulation)
        self.frames += 1
        return True

    def run(self, max_frames: int | None = None) -> int:
        """Run until quit or ``max_frames``; returns the number of frames completed."""
        while self.running and (max_frames is None or self.frames < max_frames):
            self.run_frame()
        return self.frames
