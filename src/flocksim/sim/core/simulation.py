from __future__ import annotations

import logging
from dataclasses import replace
from pathlib import Path
from time import perf_counter
from typing import List

from pygame.math import Vector2

from .agent import Agent, AgentView, Role
from .config import FlockParams, HuntParams, SimulationConfig, WrapBounds, load_params
from .pool import WorkerPool
from .rng import DeterministicRng
from .snapshot import NeighborSnapshot
from .world import World
from ..systems import boundary, hunting, integrator, metrics as metrics_system, steering
from ..types.metrics import TickMetrics
from ..types.snapshot import Snapshot, SnapshotMetadata
from ..types.spawn import AgentCounts, Rect

logger = logging.getLogger(__name__)


class Simulation:
    """Owns the world state, live parameters and the worker pool.

    One ``tick`` runs, in order: prey snapshot, hunting, kill drain, flock
    snapshot, steering, integration and wrap. Phases are separated by join
    points so no phase observes a half finished predecessor.
    """

    def __init__(self, config: SimulationConfig | None = None, workers: int | None = None):
        self._config = config if config is not None else SimulationConfig()
        self._flock = replace(self._config.flock)
        self._hunt = replace(self._config.hunt)
        self._bounds = replace(self._config.bounds)
        self._rng = DeterministicRng(self._config.seed)
        self._pool = WorkerPool(self._config.workers if workers is None else workers)
        self._world = World()
        self._next_id = 0
        self._tick = 0
        self._metrics: TickMetrics | None = None
        self.reset(self.default_counts(), self.default_spawn_bounds())

    @property
    def config(self) -> SimulationConfig:
        return self._config

    @property
    def world(self) -> World:
        return self._world

    @property
    def tick_count(self) -> int:
        return self._tick

    @property
    def metrics(self) -> TickMetrics | None:
        return self._metrics

    @property
    def flock_params(self) -> FlockParams:
        return replace(self._flock)

    @property
    def hunt_params(self) -> HuntParams:
        return replace(self._hunt)

    @property
    def bounds(self) -> WrapBounds:
        return replace(self._bounds)

    @property
    def workers(self) -> int:
        return self._pool.size

    def default_counts(self) -> AgentCounts:
        return AgentCounts(
            prey=self._config.prey_count,
            predator=self._config.predator_count,
            neutral=self._config.neutral_count,
        )

    def default_spawn_bounds(self) -> Rect:
        return Rect.centered(self._bounds.half_width, self._bounds.half_height)

    def reset(self, counts: AgentCounts | None = None, spawn_bounds: Rect | None = None) -> None:
        counts = counts if counts is not None else self.default_counts()
        spawn_bounds = spawn_bounds if spawn_bounds is not None else self.default_spawn_bounds()
        if counts.prey < 0 or counts.predator < 0 or counts.neutral < 0:
            raise ValueError(f"Agent counts must be non-negative: {counts}")
        if not spawn_bounds.width > 0 or not spawn_bounds.height > 0:
            raise ValueError(f"Spawn bounds must have positive width and height: {spawn_bounds}")

        self._world.clear()
        self._next_id = 0
        self._tick = 0
        self._metrics = None
        for role, count in (
            (Role.PREY, counts.prey),
            (Role.PREDATOR, counts.predator),
            (Role.NEUTRAL, counts.neutral),
        ):
            for _ in range(count):
                position = self._rng.next_point(
                    spawn_bounds.min_x, spawn_bounds.min_y, spawn_bounds.max_x, spawn_bounds.max_y
                )
                self.spawn(role, position, self._rng.next_velocity())
        logger.info(
            "reset world: %d agents (%d prey, %d predators, %d neutral)",
            counts.total,
            counts.prey,
            counts.predator,
            counts.neutral,
        )

    def spawn(
        self,
        role: Role,
        position: Vector2 | tuple[float, float],
        velocity: Vector2 | tuple[float, float] = (0.0, 0.0),
    ) -> int:
        agent = Agent(id=self._next_id, role=role, position=Vector2(position), velocity=Vector2(velocity))
        self._world.add(agent)
        self._next_id += 1
        return agent.id

    def set_params(self, params: FlockParams | HuntParams) -> None:
        if isinstance(params, FlockParams):
            self._flock = replace(params)
        elif isinstance(params, HuntParams):
            self._hunt = replace(params)
        else:
            raise TypeError(f"Unsupported parameter set: {type(params).__name__}")
        logger.debug("parameters updated: %s", params)

    def set_bounds(self, bounds: WrapBounds) -> None:
        self._bounds = replace(bounds)

    def reload_params(self, path: Path) -> None:
        flock, hunt = load_params(path)
        self.set_params(flock)
        self.set_params(hunt)

    def tick(self, dt: float | None = None, bounds: WrapBounds | None = None) -> None:
        start = perf_counter()
        dt = self._config.physics_step if dt is None else dt
        if bounds is not None:
            self.set_bounds(bounds)
        flock = self._flock
        hunt = self._hunt
        world = self._world
        pool = self._pool

        prey = NeighborSnapshot.from_world(world, Role.PREY)
        kill_set = hunting.run_hunting(pool, world.with_role(Role.PREDATOR), prey, hunt)
        killed = kill_set.drain()
        kills = world.remove_many(killed)
        if kills:
            logger.debug("tick %d: %d prey removed %s", self._tick, kills, killed)

        agents = world.agents
        cell_size = self._config.cell_size if self._config.use_spatial_grid else None
        flock_snapshot = NeighborSnapshot.build(agents, cell_size)
        neighbor_checks = steering.run_steering(pool, agents, flock_snapshot, flock)
        integrator.run_integration(pool, agents, dt)
        wrapped = boundary.wrap_all(agents, self._bounds)

        elapsed_ms = (perf_counter() - start) * 1000.0
        self._metrics = metrics_system.create_metrics(
            world, self._tick, kills, neighbor_checks, wrapped, elapsed_ms
        )
        self._tick += 1

    def read_agents(self) -> List[AgentView]:
        return [AgentView.from_agent(agent) for agent in self._world]

    def snapshot(self) -> Snapshot:
        step = self._config.physics_step
        metadata = SnapshotMetadata(
            half_width=self._bounds.half_width,
            half_height=self._bounds.half_height,
            padding=self._bounds.padding,
            physics_step=step,
            tick_rate=0.0 if step <= 0 else 1.0 / step,
            seed=self._config.seed,
            config_version=self._config.config_version,
        )
        return Snapshot(tick=self._tick, metrics=self._metrics, agents=self.read_agents(), metadata=metadata)

    def close(self) -> None:
        self._pool.close()

    def __enter__(self) -> "Simulation":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
