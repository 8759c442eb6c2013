"""Job worker identifiers: ``base[suffix-index]``."""

import re
from dataclasses import dataclass

from fray.errors import NoMatch

# Longer indexes are treated as plain names rather than parsed.
MAX_WORKER_INDEX_DIGITS = 6

WORKER_NAME_PATTERN = re.compile(r"([a-z][a-z0-9.-]*)\[([a-z0-9]+)-([0-9]{1,%d})\]" % MAX_WORKER_INDEX_DIGITS)


@dataclass(frozen=True)
class WorkerIdentifier:
    """Decomposed agent reference.

    Attributes:
        base_agent: base agent name (the whole input for non-worker ids)
        job_suffix: shared job suffix, "" when not a worker
        worker_index: slot index within the job, -1 when not a worker
        is_worker: whether the input was a job worker id
    """

    base_agent: str
    job_suffix: str = ""
    worker_index: int = -1
    is_worker: bool = False


def parse_job_worker_name(agent_id: str) -> WorkerIdentifier:
    """Split a worker id into its components.

    Examples:
        >>> parse_job_worker_name("dev[abc1-0]")
        WorkerIdentifier(base_agent='dev', job_suffix='abc1', worker_index=0, is_worker=True)
        >>> parse_job_worker_name("dev")
        WorkerIdentifier(base_agent='dev', job_suffix='', worker_index=-1, is_worker=False)
    """
    match = WORKER_NAME_PATTERN.fullmatch(agent_id)
    if match is None:
        return WorkerIdentifier(base_agent=agent_id)

    base, suffix, digits = match.groups()
    index = 0
    for digit in digits:
        index = index * 10 + (ord(digit) - ord("0"))
    return WorkerIdentifier(base_agent=base, job_suffix=suffix, worker_index=index, is_worker=True)


def require_job_worker_name(agent_id: str) -> WorkerIdentifier:
    """Like parse_job_worker_name, but raise NoMatch for plain agent names."""
    worker = parse_job_worker_name(agent_id)
    if not worker.is_worker:
        raise NoMatch(agent_id)
    return worker


def format_job_worker_name(base_agent: str, job_suffix: str, worker_index: int) -> str:
    """Build the canonical ``base[suffix-index]`` form."""
    if worker_index < 0:
        raise ValueError(f"worker index must be non-negative, got {worker_index}")
    return f"{base_agent}[{job_suffix}-{worker_index}]"
