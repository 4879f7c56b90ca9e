from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

import yaml


@dataclass
class FlockParams:
    alignment_strength: float = 1.0
    cohesion_strength: float = 1.0
    avoidance_strength: float = 1.5
    gravity_strength: float = 1.0
    max_speed: float = 130.0
    # Multiplier applied to the summed steering before it is added to velocity.
    steering_scale: float = 130.0
    neighbor_radius: float = 80.0
    avoidance_radius: float = 60.0


@dataclass
class HuntParams:
    hunt_strength: float = 2.0
    kill_radius: float = 60.0


@dataclass
class WrapBounds:
    # Half of the viewport extent in world units (1280x720 window at 2.5 units per pixel).
    half_width: float = 1600.0
    half_height: float = 900.0
    padding: float = 600.0


@dataclass
class SimulationConfig:
    physics_step: float = 1.0 / 24.0
    cosmetic_step: float = 1.0 / 8.0
    prey_count: int = 200
    predator_count: int = 6
    neutral_count: int = 0
    seed: int = 42
    workers: int = 0
    use_spatial_grid: bool = True
    cell_size: float = 80.0
    config_version: str = "v1"
    flock: FlockParams = field(default_factory=FlockParams)
    hunt: HuntParams = field(default_factory=HuntParams)
    bounds: WrapBounds = field(default_factory=WrapBounds)

    @staticmethod
    def from_yaml(path: Path) -> "SimulationConfig":
        data = yaml.safe_load(Path(path).read_text())
        return load_config(data or {})


def load_config(raw: dict) -> SimulationConfig:
    flock = FlockParams(**raw.get("flock", {}))
    hunt = HuntParams(**raw.get("hunt", {}))
    bounds = WrapBounds(**raw.get("bounds", {}))
    sim_values = {k: v for k, v in raw.items() if k not in {"flock", "hunt", "bounds"}}
    return SimulationConfig(flock=flock, hunt=hunt, bounds=bounds, **sim_values)


def load_params(path: Path) -> tuple[FlockParams, HuntParams]:
    """Read only the tunable flock/hunt sections of a YAML file."""

    data = yaml.safe_load(Path(path).read_text()) or {}
    return FlockParams(**data.get("flock", {})), HuntParams(**data.get("hunt", {}))
