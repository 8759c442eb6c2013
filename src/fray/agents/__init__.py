"""Agent registry: known agent bases used to validate mentions.

All agents are discovered from agents/<name>/agent.yml.
"""

from fray.agents.registry import (
    agent_base_name,
    load_agent_bases,
    load_registry,
)

__all__ = [
    "agent_base_name",
    "load_agent_bases",
    "load_registry",
]
