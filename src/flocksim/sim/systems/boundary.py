from __future__ import annotations

from typing import Iterable

from ..core.agent import Agent
from ..core.config import WrapBounds


def wrap_coordinate(value: float, bound: float, padding: float) -> float:
    """Teleport a coordinate that left the padded band to the opposite visible edge."""

    if value >= bound + padding:
        return -bound
    if value <= -bound - padding:
        return bound
    return value


def wrap(agent: Agent, bounds: WrapBounds) -> bool:
    """Wrap one agent in place; velocity is left alone. Returns True when it moved."""

    x = agent.position.x
    y = agent.position.y
    wrapped_x = wrap_coordinate(x, bounds.half_width, bounds.padding)
    wrapped_y = wrap_coordinate(y, bounds.half_height, bounds.padding)
    if wrapped_x == x and wrapped_y == y:
        return False
    agent.position.update(wrapped_x, wrapped_y)
    return True


def wrap_all(agents: Iterable[Agent], bounds: WrapBounds) -> int:
    wrapped = 0
    for agent in agents:
        if wrap(agent, bounds):
            wrapped += 1
    return wrapped
