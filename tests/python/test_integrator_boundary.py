from __future__ import annotations

from pygame.math import Vector2
from pytest import approx

from flocksim.sim.core.agent import Agent, Role
from flocksim.sim.core.config import WrapBounds
from flocksim.sim.core.pool import WorkerPool
from flocksim.sim.systems.boundary import wrap, wrap_all, wrap_coordinate
from flocksim.sim.systems.integrator import integrate, run_integration


def _agent(x: float, y: float, vx: float = 0.0, vy: float = 0.0, agent_id: int = 0) -> Agent:
    return Agent(id=agent_id, role=Role.NEUTRAL, position=Vector2(x, y), velocity=Vector2(vx, vy))


def test_integrate_advances_by_velocity_times_dt():
    agent = _agent(1.0, 2.0, 24.0, -48.0)
    integrate(agent, 1.0 / 24.0)
    assert agent.position.x == approx(2.0)
    assert agent.position.y == approx(0.0)
    assert agent.velocity == Vector2(24.0, -48.0)


def test_run_integration_in_parallel():
    agents = [_agent(float(i), 0.0, 1.0, 1.0, agent_id=i) for i in range(20)]
    with WorkerPool(4) as pool:
        run_integration(pool, agents, 0.5)
    assert [agent.position.x for agent in agents] == [i + 0.5 for i in range(20)]
    assert all(agent.position.y == 0.5 for agent in agents)


def test_wrap_coordinate_thresholds():
    assert wrap_coordinate(1600.0, 1000.0, 600.0) == -1000.0
    assert wrap_coordinate(-1600.0, 1000.0, 600.0) == 1000.0
    assert wrap_coordinate(1599.9, 1000.0, 600.0) == 1599.9
    assert wrap_coordinate(-1599.9, 1000.0, 600.0) == -1599.9


def test_wrap_teleports_and_keeps_velocity():
    bounds = WrapBounds(half_width=100.0, half_height=50.0, padding=10.0)
    agent = _agent(111.0, -70.0, 3.0, -4.0)

    assert wrap(agent, bounds)
    assert agent.position == Vector2(-100.0, 50.0)
    assert agent.velocity == Vector2(3.0, -4.0)


def test_wrap_leaves_inside_agents_alone():
    bounds = WrapBounds(half_width=100.0, half_height=50.0, padding=10.0)
    agents = [_agent(109.0, 59.0), _agent(-109.0, -59.0), _agent(0.0, 0.0)]

    assert wrap_all(agents, bounds) == 0
    assert agents[0].position == Vector2(109.0, 59.0)
    assert agents[1].position == Vector2(-109.0, -59.0)


def test_wrap_is_stable_once_wrapped():
    bounds = WrapBounds(half_width=100.0, half_height=50.0, padding=10.0)
    agent = _agent(110.0, 0.0)
    wrap(agent, bounds)
    assert not wrap(agent, bounds)
    assert agent.position.x == -100.0
