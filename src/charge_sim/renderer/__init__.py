# MIT License (see LICENSE)
"""
Rendering adapters for visualization.

This subpackage provides:
    - RendererAdapter: Abstract base class defining the drawing interface.
    - DebugRenderer: Text output for debugging.
    - NullRenderer: No-op renderer for headless runs.
    - BufferedRenderer: Records frames for playback or export.
    - KIND_COLORS: Display colour per particle kind.

Typical usage:
    from charge_sim.renderer import DebugRenderer

    DebugRenderer().render_simulation(sim)
"""
from .adapter import (
    KIND_COLORS,
    RendererAdapter,
    DebugRenderer,
    NullRenderer,
    BufferedRenderer,
)

__all__ = [
    "KIND_COLORS",
    "RendererAdapter",
    "DebugRenderer",
    "NullRenderer",
    "BufferedRenderer",
]
