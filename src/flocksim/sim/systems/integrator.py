from __future__ import annotations

from typing import TYPE_CHECKING

from ..core.agent import Agent

if TYPE_CHECKING:
    from ..core.pool import WorkerPool


def integrate(agent: Agent, dt: float) -> None:
    agent.position.update(
        agent.position.x + agent.velocity.x * dt,
        agent.position.y + agent.velocity.y * dt,
    )


def run_integration(pool: WorkerPool, agents: list[Agent], dt: float) -> None:
    if agents:
        pool.run(lambda agent: integrate(agent, dt), agents)
