# MIT License (see LICENSE)
"""
Simulation configuration and its JSON form.

A configuration describes how a run starts: spawn bounds, the optional trail,
the random seed and the initial particle list. It is never used to persist
the evolving particle state.

JSON Schema Overview:
---------------------
{
  "spawn_bounds": [lo, hi],        # Default: [-10.0, 10.0], half-open per axis
  "enable_trail": bool,            # Default: false
  "trail_capacity": int,           # Default: 50
  "seed": int | null,              # Default: null (fresh entropy)
  "particles": [
    {
      "kind": "electron" | "proton" | "neutron",   # Required
      "position": [x, y, z]                         # Optional, random if omitted
    }
  ]
}
"""
from __future__ import annotations
import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from .constants import DEFAULT_SPAWN_BOUNDS, DEFAULT_TRAIL_CAPACITY
from .types import ParticleKind


@dataclass(frozen=True)
class SimulationConfig:
    """
    Tunable parameters of a Simulation.

    Attributes:
        spawn_bounds: Half-open interval (lo, hi) for random positions, per axis.
        enable_trail: Attach a position history to every particle.
        trail_capacity: Number of positions kept per trail.
        seed: Seed for the default random source. None draws fresh entropy.
    """
    spawn_bounds: tuple[float, float] = DEFAULT_SPAWN_BOUNDS
    enable_trail: bool = False
    trail_capacity: int = DEFAULT_TRAIL_CAPACITY
    seed: int | None = None

    def __post_init__(self) -> None:
        lo, hi = self.spawn_bounds
        if not lo < hi:
            raise ValueError(f"spawn_bounds must satisfy lo < hi, got {self.spawn_bounds}")
        object.__setattr__(self, "spawn_bounds", (float(lo), float(hi)))
        if self.trail_capacity < 1:
            raise ValueError(f"trail_capacity must be >= 1, got {self.trail_capacity}")


@dataclass(frozen=True)
class ParticleSpec:
    """An entry of the initial particle list. ``position=None`` means random."""
    kind: ParticleKind
    position: tuple[float, float, float] | None = None


# The original two-body demo: an electron orbiting out from a proton.
DEFAULT_SCENE: tuple[ParticleSpec, ...] = (
    ParticleSpec(ParticleKind.ELECTRON, (200.0, 0.0, 0.0)),
    ParticleSpec(ParticleKind.PROTON, (100.0, 0.0, 0.0)),
)


def _vec3(value: Any, what: str) -> tuple[float, float, float]:
    if len(value) != 3:
        raise ValueError(f"{what} must have 3 components, got {len(value)}")
    return (float(value[0]), float(value[1]), float(value[2]))


def particle_from_json(data: dict[str, Any]) -> ParticleSpec:
    """Parse one entry of the ``particles`` list."""
    if "kind" not in data:
        raise ValueError("particle entry is missing 'kind'")
    kind = ParticleKind.parse(str(data["kind"]))
    pos = data.get("position")
    return ParticleSpec(kind, None if pos is None else _vec3(pos, "position"))


def particle_to_json(spec: ParticleSpec) -> dict[str, Any]:
    out: dict[str, Any] = {"kind": spec.kind.value}
    if spec.position is not None:
        out["position"] = list(spec.position)
    return out


def config_from_json(data: dict[str, Any]) -> tuple[SimulationConfig, list[ParticleSpec]]:
    """
    Build a configuration and initial particle list from a parsed JSON dict.

    Missing keys take their defaults; a missing ``particles`` list gives the
    default two-body scene.
    """
    config = SimulationConfig(
        spawn_bounds=tuple(data.get("spawn_bounds", DEFAULT_SPAWN_BOUNDS)),
        enable_trail=bool(data.get("enable_trail", False)),
        trail_capacity=int(data.get("trail_capacity", DEFAULT_TRAIL_CAPACITY)),
        seed=data.get("seed"),
    )
    if "particles" in data:
        specs = [particle_from_json(p) for p in data["particles"]]
    else:
        specs = list(DEFAULT_SCENE)
    return config, specs


def config_to_json(config: SimulationConfig, particles=DEFAULT_SCENE) -> dict[str, Any]:
    """Inverse of config_from_json."""
    return {
        "spawn_bounds": list(config.spawn_bounds),
        "enable_trail": config.enable_trail,
        "trail_capacity": config.trail_capacity,
        "seed": config.seed,
        "particles": [particle_to_json(s) for s in particles],
    }


def load_config(path: str | Path) -> tuple[SimulationConfig, list[ParticleSpec]]:
    """Load a configuration file written by save_config (or by hand)."""
    with open(path, "r", encoding="utf-8") as fh:
        data = json.load(fh)
    if not isinstance(data, dict):
        raise ValueError(f"{path}: expected a JSON object at top level")
    return config_from_json(data)


def save_config(config: SimulationConfig, path: str | Path, particles=DEFAULT_SCENE) -> None:
    with open(path, "w", encoding="utf-8") as fh:
        json.dump(config_to_json(config, particles), fh, indent=2)
