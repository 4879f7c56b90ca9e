from __future__ import annotations

import math

from ..core.agent import Role
from ..core.world import World
from ..types.metrics import TickMetrics


def create_metrics(
    world: World,
    tick: int,
    kills: int,
    neighbor_checks: int,
    wrapped: int,
    duration_ms: float,
) -> TickMetrics:
    prey = predators = neutral = 0
    speed_sum = 0.0
    for agent in world:
        if agent.role == Role.PREY:
            prey += 1
        elif agent.role == Role.PREDATOR:
            predators += 1
        else:
            neutral += 1
        speed_sum += math.hypot(agent.velocity.x, agent.velocity.y)
    population = prey + predators + neutral
    return TickMetrics(
        tick=tick,
        prey=prey,
        predators=predators,
        neutral=neutral,
        kills=kills,
        neighbor_checks=neighbor_checks,
        average_speed=0.0 if population == 0 else speed_sum / population,
        wrapped=wrapped,
        tick_duration_ms=duration_ms,
    )
