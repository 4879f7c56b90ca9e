from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Dict, List

from .metrics import TickMetrics

if TYPE_CHECKING:
    from ..core.agent import AgentView


@dataclass(slots=True)
class Snapshot:
    tick: int
    metrics: TickMetrics | None
    agents: List["AgentView"]
    metadata: "SnapshotMetadata"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "tick": self.tick,
            "metrics": None
            if self.metrics is None
            else {
                "tick": self.metrics.tick,
                "prey": self.metrics.prey,
                "predators": self.metrics.predators,
                "neutral": self.metrics.neutral,
                "kills": self.metrics.kills,
                "neighbor_checks": self.metrics.neighbor_checks,
                "average_speed": self.metrics.average_speed,
                "wrapped": self.metrics.wrapped,
                "tick_duration_ms": self.metrics.tick_duration_ms,
            },
            "agents": [
                {
                    "id": agent.id,
                    "role": agent.role.value,
                    "x": agent.position[0],
                    "y": agent.position[1],
                    "vx": agent.velocity[0],
                    "vy": agent.velocity[1],
                }
                for agent in self.agents
            ],
            "metadata": {
                "half_width": self.metadata.half_width,
                "half_height": self.metadata.half_height,
                "padding": self.metadata.padding,
                "physics_step": self.metadata.physics_step,
                "tick_rate": self.metadata.tick_rate,
                "seed": self.metadata.seed,
                "config_version": self.metadata.config_version,
            },
        }


@dataclass(slots=True)
class SnapshotMetadata:
    half_width: float
    half_height: float
    padding: float
    physics_step: float
    tick_rate: float
    seed: int
    config_version: str
