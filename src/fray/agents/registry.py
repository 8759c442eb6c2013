"""Agent registry snapshot (single source of known agent bases).

Agents are declared in `agents/<name>/agent.yml`. The registry supplies the
set of base names used to validate mentions; an absent registry directory
means "no restriction" rather than "no agents".
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

from fray.workers import parse_job_worker_name

logger = logging.getLogger(__name__)


def agent_base_name(agent_id: str) -> str:
    """Base name of an agent id: `pm.frontend[xyz9-3]` -> `pm`."""
    base = parse_job_worker_name(agent_id).base_agent
    return base.split(".", 1)[0]


def _agent_id(config: dict[str, Any]) -> str | None:
    value = config.get("agent_id") or config.get("name")
    if isinstance(value, str) and value.strip():
        return value.strip().lower()
    return None


def load_registry(agents_dir: Path, include_disabled: bool = False) -> dict[str, dict[str, Any]]:
    """
    Load agent registry from agents/<name>/agent.yml.

    Args:
        agents_dir: agents directory path
        include_disabled: whether to include disabled agents

    Returns:
        agent_id -> config dict
    """
    registry: dict[str, dict[str, Any]] = {}

    if not agents_dir.exists():
        logger.warning("Agents directory not found: %s", agents_dir)
        return registry

    for agent_dir in sorted(agents_dir.iterdir()):
        if not agent_dir.is_dir():
            continue
        if agent_dir.name.startswith("_"):
            continue

        agent_yml = agent_dir / "agent.yml"
        if not agent_yml.exists():
            continue

        try:
            with open(agent_yml, encoding="utf-8") as f:
                config = yaml.safe_load(f)
        except yaml.YAMLError as e:
            logger.error("Error parsing %s: %s", agent_yml, e)
            continue
        except OSError as e:
            logger.error("Error loading %s: %s", agent_yml, e)
            continue

        if not isinstance(config, dict) or not config:
            logger.warning("Empty config in %s", agent_yml)
            continue

        agent_id = _agent_id(config)
        if not agent_id:
            logger.warning("%s missing 'agent_id' or 'name'", agent_yml)
            continue

        # Skip disabled unless requested
        if not include_disabled and not config.get("enabled", True):
            logger.info("%s is disabled, skipping", agent_id)
            continue

        registry[agent_id] = config

    return registry


def load_agent_bases(agents_dir: Path | None, include_disabled: bool = False) -> set[str] | None:
    """
    Snapshot of registered agent base names.

    Returns:
        None when there is no registry directory (heuristic mode), otherwise
        the (possibly empty) set of base names.
    """
    if agents_dir is None or not agents_dir.is_dir():
        logger.info("No agent registry at %s, mentions use the length heuristic", agents_dir)
        return None

    registry = load_registry(agents_dir, include_disabled=include_disabled)
    return {agent_base_name(agent_id) for agent_id in registry}
