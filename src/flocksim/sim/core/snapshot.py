from __future__ import annotations

from typing import Iterable, Iterator, NamedTuple, Sequence, Tuple

from .agent import Agent, Role
from .spatial_grid import SpatialGrid
from .world import World


class SnapshotEntry(NamedTuple):
    id: int
    velocity: Tuple[float, float]
    position: Tuple[float, float]


class NeighborSnapshot:
    """Read-only copy of (id, velocity, position) taken before a parallel phase.

    Entries are plain float tuples so nothing a worker reads can change
    while the phase runs. When built with a ``cell_size`` the snapshot also
    keeps a bucket grid and ``candidates`` returns only nearby entries, still
    in snapshot order.
    """

    __slots__ = ("_entries", "_grid")

    def __init__(self, entries: Sequence[SnapshotEntry], cell_size: float | None = None) -> None:
        self._entries: Tuple[SnapshotEntry, ...] = tuple(entries)
        self._grid: SpatialGrid | None = None
        if cell_size is not None and cell_size > 0 and self._entries:
            grid = SpatialGrid(cell_size)
            for index, entry in enumerate(self._entries):
                grid.insert(index, entry.position[0], entry.position[1])
            self._grid = grid

    @classmethod
    def build(cls, agents: Iterable[Agent], cell_size: float | None = None) -> "NeighborSnapshot":
        entries = [
            SnapshotEntry(
                agent.id,
                (agent.velocity.x, agent.velocity.y),
                (agent.position.x, agent.position.y),
            )
            for agent in agents
        ]
        return cls(entries, cell_size)

    @classmethod
    def from_world(
        cls, world: World, role: Role | None = None, cell_size: float | None = None
    ) -> "NeighborSnapshot":
        agents = world if role is None else world.with_role(role)
        return cls.build(agents, cell_size)

    @property
    def entries(self) -> Tuple[SnapshotEntry, ...]:
        return self._entries

    @property
    def indexed(self) -> bool:
        return self._grid is not None

    def __len__(self) -> int:
        return len(self._entries)

    def __bool__(self) -> bool:
        return bool(self._entries)

    def __iter__(self) -> Iterator[SnapshotEntry]:
        return iter(self._entries)

    def __getitem__(self, index: int) -> SnapshotEntry:
        return self._entries[index]

    def candidates(self, x: float, y: float, radius: float) -> Sequence[SnapshotEntry]:
        if self._grid is None:
            return self._entries
        entries = self._entries
        return [entries[index] for index in self._grid.query(x, y, radius)]
