"""Flocking steering: alignment, cohesion, avoidance and a pull to the origin.

Clamp order: each behaviour component is limited to its own strength, the
unclamped sum is scaled by ``steering_scale`` and added to velocity, and only
the resulting velocity is clamped to ``max_speed``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pygame.math import Vector2

from ..core.agent import Agent
from ..core.config import FlockParams
from ..core.snapshot import NeighborSnapshot
from ..utils.math2d import _clamp_length_xy_f, _limit_to_strength

if TYPE_CHECKING:
    from ..core.pool import WorkerPool


def steer(
    agent: Agent,
    snapshot: NeighborSnapshot,
    params: FlockParams,
    return_count: bool = False,
) -> tuple[Vector2, int] | Vector2:
    pos_x = agent.position.x
    pos_y = agent.position.y
    gravity_x = -pos_x * params.gravity_strength
    gravity_y = -pos_y * params.gravity_strength
    alignment_x = alignment_y = 0.0
    cohesion_x = cohesion_y = 0.0
    avoidance_x = avoidance_y = 0.0
    neighbors = 0
    radius_sq = params.neighbor_radius * params.neighbor_radius
    avoidance_radius_sq = params.avoidance_radius * params.avoidance_radius
    agent_id = agent.id

    for other_id, (other_vx, other_vy), (other_x, other_y) in snapshot.candidates(
        pos_x, pos_y, params.neighbor_radius
    ):
        if other_id == agent_id:
            continue
        offset_x = pos_x - other_x
        offset_y = pos_y - other_y
        dist_sq = offset_x * offset_x + offset_y * offset_y
        if dist_sq > radius_sq:
            continue
        neighbors += 1
        if dist_sq < avoidance_radius_sq:
            avoidance_x += offset_x
            avoidance_y += offset_y
        alignment_x += other_vx
        alignment_y += other_vy
        cohesion_x += other_x
        cohesion_y += other_y

    if neighbors == 0:
        # Isolated agents keep their heading.
        result = Vector2(agent.velocity)
        return (result, 0) if return_count else result

    cohesion_x -= pos_x
    cohesion_y -= pos_y

    alignment_x, alignment_y = _average(alignment_x, alignment_y, params.alignment_strength, neighbors)
    cohesion_x, cohesion_y = _average(cohesion_x, cohesion_y, params.cohesion_strength, neighbors)
    avoidance_x, avoidance_y = _average(avoidance_x, avoidance_y, params.avoidance_strength, neighbors)

    alignment_x, alignment_y = _limit_to_strength(alignment_x, alignment_y, params.alignment_strength)
    cohesion_x, cohesion_y = _limit_to_strength(cohesion_x, cohesion_y, params.cohesion_strength)
    avoidance_x, avoidance_y = _limit_to_strength(avoidance_x, avoidance_y, params.avoidance_strength)
    gravity_x, gravity_y = _limit_to_strength(gravity_x, gravity_y, params.gravity_strength)

    result = Vector2(
        alignment_x + cohesion_x + avoidance_x + gravity_x,
        alignment_y + cohesion_y + avoidance_y + gravity_y,
    )
    return (result, neighbors) if return_count else result


def _average(x: float, y: float, strength: float, neighbors: int) -> tuple[float, float]:
    return x * strength / neighbors, y * strength / neighbors


def apply_steering(agent: Agent, snapshot: NeighborSnapshot, params: FlockParams) -> int:
    """Add scaled steering to the agent's velocity, clamp it and return the neighbor count."""

    steering, neighbors = steer(agent, snapshot, params, return_count=True)
    scale = params.steering_scale
    vel_x = agent.velocity.x + steering.x * scale
    vel_y = agent.velocity.y + steering.y * scale
    vel_x, vel_y = _clamp_length_xy_f(vel_x, vel_y, params.max_speed)
    agent.velocity.update(vel_x, vel_y)
    return neighbors


def run_steering(
    pool: WorkerPool, agents: list[Agent], snapshot: NeighborSnapshot, params: FlockParams
) -> int:
    """Steer every agent in parallel and return the total number of neighbor matches."""

    if not agents:
        return 0
    counts = pool.run(lambda agent: apply_steering(agent, snapshot, params), agents)
    return sum(counts)
