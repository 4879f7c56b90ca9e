from __future__ import annotations

import argparse
import csv
import json
import logging
import statistics
from pathlib import Path
from typing import Optional

from ..sim.core.agent import Role
from ..sim.core.config import SimulationConfig
from ..sim.core.simulation import Simulation
from ..sim.types.metrics import TickMetrics

logger = logging.getLogger(__name__)


_HEADER = [
    "tick",
    "prey",
    "predators",
    "neutral",
    "kills",
    "neighbor_checks",
    "avg_speed",
    "wrapped",
    "tick_ms",
]


def _format_row(metrics: TickMetrics, tick_ms: float) -> list[object]:
    return [
        metrics.tick,
        metrics.prey,
        metrics.predators,
        metrics.neutral,
        metrics.kills,
        metrics.neighbor_checks,
        f"{metrics.average_speed:.4f}",
        metrics.wrapped,
        f"{tick_ms:.3f}",
    ]


def _summary_stats(values: list[float]) -> dict[str, float]:
    """Min, max, mean and median of one metric column; zeros when empty."""

    if not values:
        return dict.fromkeys(("min", "max", "avg", "median"), 0.0)
    return {
        "min": float(min(values)),
        "max": float(max(values)),
        "avg": statistics.fmean(values),
        "median": float(statistics.median(values)),
    }


def run_headless(
    steps: int,
    seed: Optional[int],
    log_path: Optional[Path],
    deterministic_log: bool = False,
    summary_path: Optional[Path] = None,
    summary_window: int = 500,
    config_path: Optional[Path] = None,
    workers: Optional[int] = None,
    snapshot_path: Optional[Path] = None,
) -> Simulation:
    config = SimulationConfig.from_yaml(config_path) if config_path else SimulationConfig()
    if seed is not None:
        config.seed = seed
    simulation = Simulation(config, workers=workers)

    writer = None
    csv_file = None
    if log_path:
        csv_file = Path(log_path).open("w", newline="")
        writer = csv.writer(csv_file)
        writer.writerow(_HEADER)

    tick_ms_series: list[float] = []
    prey_series: list[float] = []
    neighbor_checks_series: list[float] = []
    total_kills = 0
    max_tick_ms = (-1.0, -1)
    max_kills = (-1, -1)

    try:
        for tick in range(steps):
            simulation.tick()
            metrics = simulation.metrics
            tick_ms = 0.0 if deterministic_log else metrics.tick_duration_ms
            total_kills += metrics.kills

            if summary_path:
                tick_ms_series.append(tick_ms)
                prey_series.append(float(metrics.prey))
                neighbor_checks_series.append(float(metrics.neighbor_checks))
                if tick_ms > max_tick_ms[0]:
                    max_tick_ms = (tick_ms, tick)
                if metrics.kills > max_kills[0]:
                    max_kills = (metrics.kills, tick)

            if writer:
                writer.writerow(_format_row(metrics, tick_ms))
    finally:
        if csv_file:
            csv_file.close()
        simulation.close()

    logger.info(
        "ran %d ticks with %d workers: %d prey left, %d kills",
        steps,
        simulation.workers,
        simulation.world.count(Role.PREY),
        total_kills,
    )

    if summary_path:
        window = max(1, int(summary_window))
        tail_slice = slice(max(0, len(tick_ms_series) - window), len(tick_ms_series))
        summary = {
            "steps": steps,
            "seed": config.seed,
            "workers": simulation.workers,
            "deterministic_log": deterministic_log,
            "total_kills": total_kills,
            "tick_ms": _summary_stats(tick_ms_series),
            "prey": _summary_stats(prey_series),
            "neighbor_checks": _summary_stats(neighbor_checks_series),
            "peaks": {
                "tick_ms": {"value": float(max_tick_ms[0]), "tick": max_tick_ms[1]},
                "kills": {"value": max_kills[0], "tick": max_kills[1]},
            },
            "tail_window": {
                "window": window,
                "tick_ms": _summary_stats(tick_ms_series[tail_slice]),
                "prey": _summary_stats(prey_series[tail_slice]),
                "neighbor_checks": _summary_stats(neighbor_checks_series[tail_slice]),
            },
        }
        Path(summary_path).write_text(json.dumps(summary, indent=2))

    if snapshot_path:
        Path(snapshot_path).write_text(json.dumps(simulation.snapshot().to_dict(), indent=2))

    return simulation


def main() -> None:
    parser = argparse.ArgumentParser(description="Headless flocking simulation")
    parser.add_argument("--steps", type=int, default=1000)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--config", type=Path, default=None, help="YAML configuration file")
    parser.add_argument("--workers", type=int, default=None, help="Worker threads (0 = one per CPU)")
    parser.add_argument("--log", type=Path, default=None, help="CSV file to write metrics")
    parser.add_argument(
        "--summary",
        type=Path,
        default=None,
        help="Optional JSON file to write summary stats for the run.",
    )
    parser.add_argument(
        "--summary-window",
        type=int,
        default=500,
        help="Tail window size (ticks) for summary stats.",
    )
    parser.add_argument(
        "--snapshot",
        type=Path,
        default=None,
        help="Optional JSON file to write the final agent snapshot.",
    )
    parser.add_argument(
        "--deterministic-log",
        action="store_true",
        help="Write deterministic CSV (tick_ms is forced to 0.000 so identical seeds match).",
    )
    parser.add_argument("--log-level", default="WARNING", help="Python logging level")
    args = parser.parse_args()
    logging.basicConfig(
        level=getattr(logging, str(args.log_level).upper(), logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    run_headless(
        args.steps,
        args.seed,
        args.log,
        deterministic_log=args.deterministic_log,
        summary_path=args.summary,
        summary_window=args.summary_window,
        config_path=args.config,
        workers=args.workers,
        snapshot_path=args.snapshot,
    )


if __name__ == "__main__":
    main()
