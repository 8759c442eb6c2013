"""Core command handlers: worker/list-agents."""

import json
from argparse import Namespace

from fray.agents.registry import agent_base_name, load_registry
from fray.config import Config
from fray.errors import NoMatch
from fray.workers import parse_job_worker_name, require_job_worker_name


def handle_worker(args: Namespace) -> int | None:
    if getattr(args, "require", False):
        try:
            worker = require_job_worker_name(args.agent_id)
        except NoMatch as e:
            print(f"[ERROR] {e}")
            return 1
    else:
        worker = parse_job_worker_name(args.agent_id)

    print(
        json.dumps(
            {
                "base_agent": worker.base_agent,
                "job_suffix": worker.job_suffix,
                "worker_index": worker.worker_index,
                "is_worker": worker.is_worker,
            }
        )
    )
    return None


def handle_list_agents(config: Config, include_disabled: bool = False) -> None:
    registry = load_registry(config.agents_dir, include_disabled=include_disabled)
    print("\n=== Registered Agents ===\n")
    print(f"{'Agent':<24} {'Base':<15} {'Enabled'}")
    print("-" * 50)
    for agent_id, agent_config in registry.items():
        enabled = "yes" if agent_config.get("enabled", True) else "no"
        print(f"{agent_id:<24} {agent_base_name(agent_id):<15} {enabled}")
