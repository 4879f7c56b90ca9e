from __future__ import annotations

from typing import Dict, Iterable, Iterator, List

from .agent import Agent, Role


class World:
    """Authoritative agent set for one simulation.

    Only the tick thread mutates the structure (add/remove); workers touch
    the position and velocity of the single agent they were handed.
    """

    def __init__(self) -> None:
        self._agents: Dict[int, Agent] = {}

    @property
    def agents(self) -> List[Agent]:
        return list(self._agents.values())

    def __len__(self) -> int:
        return len(self._agents)

    def __iter__(self) -> Iterator[Agent]:
        return iter(self._agents.values())

    def __contains__(self, agent_id: object) -> bool:
        return agent_id in self._agents

    def get(self, agent_id: int) -> Agent | None:
        return self._agents.get(agent_id)

    def add(self, agent: Agent) -> None:
        if agent.id in self._agents:
            raise ValueError(f"Agent id {agent.id} already present")
        self._agents[agent.id] = agent

    def remove(self, agent_id: int) -> bool:
        return self._agents.pop(agent_id, None) is not None

    def remove_many(self, agent_ids: Iterable[int]) -> int:
        removed = 0
        for agent_id in agent_ids:
            if self.remove(agent_id):
                removed += 1
        return removed

    def clear(self) -> None:
        self._agents.clear()

    def with_role(self, role: Role) -> List[Agent]:
        return [agent for agent in self._agents.values() if agent.role == role]

    def count(self, role: Role) -> int:
        return sum(1 for agent in self._agents.values() if agent.role == role)
