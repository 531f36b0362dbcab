"""
Central agent registry and registration decorator for Low Dice agents.
Use @register_agent("name") above your agent class to make it available to players of that type.
Type tags are matched case-insensitively.
"""

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from lowdice.agents.base import Agent

AGENT_REGISTRY: dict[str, type["Agent"]] = {}


def register_agent(name: str, *aliases: str):
    """
    Decorator to register an agent class under a name and optional aliases.
    Usage:
        @register_agent("lowest_die", "ai_reflex")
        class LowestDieAgent(Agent): ...
    """
    def decorator(cls):
        for tag in (name, *aliases):
            AGENT_REGISTRY[tag.lower()] = cls
        return cls
    return decorator


def get_agent_for(player_type: str | None, **kwargs: Any) -> "Agent | None":
    """
    Build a new agent for a player type tag.
    Args:
        player_type: The player's type tag.
        **kwargs: Passed to the agent's constructor.
    Returns:
        Agent | None: A fresh agent, or None for an empty or unknown tag.
    """
    if not player_type:
        return None
    cls = AGENT_REGISTRY.get(player_type.lower())
    if cls is None:
        return None
    return cls(**kwargs)


def available_agent_types() -> list[str]:
    """Sorted list of registered type tags."""
    return sorted(AGENT_REGISTRY)
