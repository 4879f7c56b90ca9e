from __future__ import annotations

import pytest

from flocksim.sim.core.config import SimulationConfig
from flocksim.sim.core.scheduler import FixedStepClock, TickScheduler
from flocksim.sim.core.simulation import Simulation


def test_clock_runs_whole_steps_only():
    clock = FixedStepClock(0.25)
    assert clock.advance(0.1) == 0
    assert clock.advance(0.2) == 1
    assert clock.accumulated == pytest.approx(0.05)
    assert clock.advance(0.5) == 2
    assert clock.advance(-1.0) == 0


def test_clock_drops_backlog_past_max_steps():
    clock = FixedStepClock(0.25, max_steps=2)
    assert clock.advance(10.0) == 2
    assert clock.accumulated == 0.0


def test_clock_rejects_non_positive_step():
    with pytest.raises(ValueError):
        FixedStepClock(0.0)


def test_physics_and_cosmetic_loops_are_independent():
    frames = []
    config = SimulationConfig(prey_count=10, predator_count=1, workers=1, physics_step=0.125, cosmetic_step=0.5)
    with Simulation(config) as simulation:
        scheduler = TickScheduler(simulation, on_cosmetic=frames.append)
        report = scheduler.update(1.0)

        assert report.physics_ticks == 8
        assert report.cosmetic_ticks == 2
        assert simulation.tick_count == 8
        assert len(frames) == 2
        assert all(len(frame) == len(simulation.world) for frame in frames)


def test_cosmetic_cadence_does_not_change_the_simulation():
    def run(cosmetic_step: float) -> list[tuple]:
        config = SimulationConfig(seed=9, prey_count=30, predator_count=2, workers=1, physics_step=0.125)
        seen = []
        with Simulation(config) as simulation:
            scheduler = TickScheduler(simulation, cosmetic_step=cosmetic_step, on_cosmetic=seen.append)
            for _ in range(12):
                scheduler.update(0.25)
            return [(view.id, view.position, view.velocity) for view in simulation.read_agents()]

    assert run(0.125) == run(1.0)
