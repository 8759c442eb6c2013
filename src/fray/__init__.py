"""fray: directive parsing for multi-agent chat messages."""

from fray.errors import DirectiveError, InvalidReaction, NoMatch
from fray.parser import (
    InterruptInfo,
    MentionResult,
    expand_all_mention,
    extract_issue_refs,
    extract_mentions,
    extract_mentions_with_session,
)
from fray.reactions import (
    format_reaction_event,
    format_reaction_events,
    normalize_reaction_text,
    normalize_reactions,
)
from fray.utils.mentions import is_valid_agent_name
from fray.workers import WorkerIdentifier, parse_job_worker_name

__all__ = [
    "DirectiveError",
    "InterruptInfo",
    "InvalidReaction",
    "MentionResult",
    "NoMatch",
    "WorkerIdentifier",
    "expand_all_mention",
    "extract_issue_refs",
    "extract_mentions",
    "extract_mentions_with_session",
    "format_reaction_event",
    "format_reaction_events",
    "is_valid_agent_name",
    "normalize_reaction_text",
    "normalize_reactions",
    "parse_job_worker_name",
]
