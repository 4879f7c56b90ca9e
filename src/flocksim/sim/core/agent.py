from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from pygame.math import Vector2


class Role(str, Enum):
    PREY = "Prey"
    PREDATOR = "Predator"
    NEUTRAL = "Neutral"


@dataclass(slots=True)
class Agent:
    id: int
    role: Role
    position: Vector2 = field(default_factory=Vector2)
    velocity: Vector2 = field(default_factory=Vector2)


@dataclass(frozen=True, slots=True)
class AgentView:
    """Detached copy of one agent, safe to hand to renderers."""

    id: int
    position: tuple[float, float]
    velocity: tuple[float, float]
    role: Role

    @classmethod
    def from_agent(cls, agent: Agent) -> "AgentView":
        return cls(
            id=agent.id,
            position=(agent.position.x, agent.position.y),
            velocity=(agent.velocity.x, agent.velocity.y),
            role=agent.role,
        )
