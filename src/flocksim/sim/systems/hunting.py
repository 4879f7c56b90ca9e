"""Predator pursuit and kill collection.

Each predator walks the prey snapshot in order, keeping the nearest prey
seen so far. The walk stops at the first improvement that lands inside the
kill radius, so a predator may kill a prey that is not the globally nearest
one when an earlier entry already qualified.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

from ..core.agent import Agent
from ..core.config import HuntParams
from ..core.pool import KillSet
from ..core.snapshot import NeighborSnapshot
from ..utils.math2d import _safe_normalize_xy_f

if TYPE_CHECKING:
    from ..core.pool import WorkerPool


def hunt(predator: Agent, prey: NeighborSnapshot, params: HuntParams, kill_set: KillSet) -> int | None:
    """Pull ``predator`` toward its target and return the id it killed, if any."""

    if not prey:
        return None
    pos_x = predator.position.x
    pos_y = predator.position.y
    kill_radius_sq = params.kill_radius * params.kill_radius
    closest_sq = math.inf
    closest_x = 0.0
    closest_y = 0.0
    killed: int | None = None

    for prey_id, _velocity, (prey_x, prey_y) in prey:
        offset_x = prey_x - pos_x
        offset_y = prey_y - pos_y
        dist_sq = offset_x * offset_x + offset_y * offset_y
        if dist_sq < closest_sq:
            closest_sq = dist_sq
            closest_x = offset_x
            closest_y = offset_y
            if dist_sq < kill_radius_sq:
                kill_set.add(prey_id)
                killed = prey_id
                break

    dir_x, dir_y = _safe_normalize_xy_f(closest_x, closest_y)
    predator.velocity.update(
        predator.velocity.x + dir_x * params.hunt_strength,
        predator.velocity.y + dir_y * params.hunt_strength,
    )
    return killed


def run_hunting(
    pool: WorkerPool, predators: list[Agent], prey: NeighborSnapshot, params: HuntParams
) -> KillSet:
    kill_set = KillSet()
    if not prey or not predators:
        return kill_set
    pool.run(lambda predator: hunt(predator, prey, params, kill_set), predators)
    return kill_set
