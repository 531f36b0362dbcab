"""
Low Dice agents.

Importing this package registers every built-in agent with the registry.
"""

from lowdice.agents.base import Agent
from lowdice.agents.registry import (
    AGENT_REGISTRY,
    available_agent_types,
    get_agent_for,
    register_agent,
)
from lowdice.agents.lowest_die_agent import LowestDieAgent
from lowdice.agents.random_agent import RandomKeepAgent

__all__ = [
    "Agent",
    "AGENT_REGISTRY",
    "available_agent_types",
    "get_agent_for",
    "register_agent",
    "LowestDieAgent",
    "RandomKeepAgent",
]
