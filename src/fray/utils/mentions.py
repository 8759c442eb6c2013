"""Shared mention grammar and helpers."""

import re
from collections.abc import Collection

# Agent name: base name + optional bracket suffix for job workers.
# Base: alice, bob.frontend, pm.1
# Worker: dev[abc1-0], pm.frontend[xyz9-3]
AGENT_NAME_PATTERN = r"[a-z][a-z0-9]*(?:[-.][a-z0-9]+)*(?:\[[a-z0-9]+-[0-9]+\])?"

MENTION_PATTERN = re.compile(r"@(" + AGENT_NAME_PATTERN + r")")
MENTION_WITH_SESSION_PATTERN = re.compile(r"@(" + AGENT_NAME_PATTERN + r")(?:#([a-zA-Z0-9]+))?")
# groups: (1) "!" or "!!", (2) agent name, (3) "" or "!"
INTERRUPT_MENTION_PATTERN = re.compile(r"(!{1,2})@(" + AGENT_NAME_PATTERN + r")(!?)")
ISSUE_REF_PATTERN = re.compile(r"@([a-z]+-[a-zA-Z0-9]+)")

ALL_MENTION = "all"

# Heuristic bounds used when no registry snapshot is available.
MIN_HEURISTIC_NAME_LENGTH = 3
MAX_HEURISTIC_NAME_LENGTH = 15


def is_word_char(ch: str) -> bool:
    """Unicode letter or decimal digit."""
    return ch.isalpha() or ch.isdecimal()


def follows_word_char(text: str, start: int) -> bool:
    """Whether the match starting at ``start`` is glued to a preceding word, e.g. an email."""
    return start > 0 and is_word_char(text[start - 1])


def is_valid_agent_name(name: str, agent_bases: Collection[str] | None) -> bool:
    """Decide whether ``name`` denotes an addressable agent.

    Args:
        name: candidate name without the ``@`` prefix
        agent_bases: registered base names, or None when no registry is known

    Returns:
        True for ``all``, qualified/worker names, registry members, or (without
        a registry) names within the heuristic length bounds.
    """
    if name == ALL_MENTION:
        return True
    if "." in name or "[" in name:
        return True
    if agent_bases is not None:
        return name in agent_bases
    return MIN_HEURISTIC_NAME_LENGTH <= len(name) <= MAX_HEURISTIC_NAME_LENGTH
