from __future__ import annotations

from .sim.core.config import FlockParams, HuntParams, SimulationConfig, WrapBounds
from .sim.core.simulation import Simulation
from .sim.core.agent import Agent, Role

__all__ = [
    "Agent",
    "FlockParams",
    "HuntParams",
    "Role",
    "Simulation",
    "SimulationConfig",
    "WrapBounds",
]
