from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, List

from .agent import AgentView

if TYPE_CHECKING:
    from .simulation import Simulation


class FixedStepClock:
    """Accumulates host time and reports how many whole steps are due."""

    def __init__(self, step: float, max_steps: int | None = None) -> None:
        if not step > 0:
            raise ValueError(f"Fixed step must be positive, got {step}")
        self._step = step
        self._max_steps = max_steps
        self._accumulated = 0.0

    @property
    def step(self) -> float:
        return self._step

    @property
    def accumulated(self) -> float:
        return self._accumulated

    def advance(self, elapsed: float) -> int:
        if elapsed > 0:
            self._accumulated += elapsed
        steps = 0
        while self._accumulated >= self._step:
            if self._max_steps is not None and steps >= self._max_steps:
                # Drop the backlog instead of spiralling after a long stall.
                self._accumulated = 0.0
                break
            self._accumulated -= self._step
            steps += 1
        return steps

    def reset(self) -> None:
        self._accumulated = 0.0


@dataclass(frozen=True, slots=True)
class FrameReport:
    physics_ticks: int
    cosmetic_ticks: int


CosmeticCallback = Callable[[List[AgentView]], None]


class TickScheduler:
    """Drives the physics and cosmetic loops from one host frame loop.

    The two clocks are independent. Cosmetic callbacks only ever see the
    copied agent views, so their cadence cannot influence the simulation.
    """

    def __init__(
        self,
        simulation: Simulation,
        physics_step: float | None = None,
        cosmetic_step: float | None = None,
        on_cosmetic: CosmeticCallback | None = None,
        max_physics_steps: int | None = None,
    ) -> None:
        config = simulation.config
        self._simulation = simulation
        self._physics = FixedStepClock(
            config.physics_step if physics_step is None else physics_step, max_physics_steps
        )
        self._cosmetic = FixedStepClock(config.cosmetic_step if cosmetic_step is None else cosmetic_step)
        self._on_cosmetic = on_cosmetic

    @property
    def physics_clock(self) -> FixedStepClock:
        return self._physics

    @property
    def cosmetic_clock(self) -> FixedStepClock:
        return self._cosmetic

    def update(self, elapsed: float) -> FrameReport:
        physics_ticks = self._physics.advance(elapsed)
        for _ in range(physics_ticks):
            self._simulation.tick(self._physics.step)
        cosmetic_ticks = self._cosmetic.advance(elapsed)
        if self._on_cosmetic is not None:
            for _ in range(cosmetic_ticks):
                self._on_cosmetic(self._simulation.read_agents())
        return FrameReport(physics_ticks=physics_ticks, cosmetic_ticks=cosmetic_ticks)

    def reset(self) -> None:
        self._physics.reset()
        self._cosmetic.reset()
