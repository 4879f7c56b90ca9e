from __future__ import annotations

import logging
import os
import threading
from concurrent.futures import ThreadPoolExecutor
from typing import Callable, List, Sequence, Set, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")
R = TypeVar("R")


def default_worker_count() -> int:
    return max(1, os.cpu_count() or 1)


class WorkerPool:
    """Fixed size fork-join pool: ``run`` blocks until every task finished.

    The first task exception is re-raised from ``run`` and the phase that
    called it is abandoned.
    """

    def __init__(self, workers: int = 0) -> None:
        self._size = workers if workers > 0 else default_worker_count()
        self._executor: ThreadPoolExecutor | None = None
        logger.debug("worker pool sized to %d", self._size)

    @property
    def size(self) -> int:
        return self._size

    def run(self, task: Callable[[T], R], items: Sequence[T]) -> List[R]:
        if self._size == 1 or len(items) <= 1:
            return [task(item) for item in items]
        if self._executor is None:
            self._executor = ThreadPoolExecutor(max_workers=self._size, thread_name_prefix="flocksim")
        return list(self._executor.map(task, items))

    def close(self) -> None:
        if self._executor is not None:
            self._executor.shutdown(wait=True)
            self._executor = None

    def __enter__(self) -> "WorkerPool":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


class KillSet:
    """Prey ids marked for removal, written concurrently by predator tasks."""

    def __init__(self) -> None:
        self._ids: Set[int] = set()
        self._lock = threading.Lock()

    def add(self, agent_id: int) -> None:
        with self._lock:
            self._ids.add(agent_id)

    def __contains__(self, agent_id: object) -> bool:
        with self._lock:
            return agent_id in self._ids

    def __len__(self) -> int:
        with self._lock:
            return len(self._ids)

    def drain(self) -> List[int]:
        with self._lock:
            ids = sorted(self._ids)
            self._ids.clear()
        return ids
