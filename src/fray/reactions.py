"""Reaction text validation and grouped reaction event rendering."""

from collections.abc import Iterable

from fray.errors import InvalidReaction

MAX_REACTION_CHARS = 20
REACTION_PREVIEW_LEN = 40
SENTENCE_PUNCTUATION = "?!.,;:"

_ESCAPES = {
    "\a": "\\a",
    "\b": "\\b",
    "\f": "\\f",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\v": "\\v",
    "\\": "\\\\",
    '"': '\\"',
}


def normalize_reaction_text(value: str) -> str:
    """Trim and validate reaction text.

    Reactions are short single-token responses or emoji. Multi-word text or
    sentence-like punctuation is a message, not a reaction.

    Raises:
        InvalidReaction: if the trimmed text is not a valid reaction
    """
    trimmed = value.strip()
    if not trimmed:
        raise InvalidReaction(value, "empty")
    if len(trimmed) > MAX_REACTION_CHARS:
        raise InvalidReaction(value, f"longer than {MAX_REACTION_CHARS} characters")
    if any(ch.isspace() for ch in trimmed):
        raise InvalidReaction(value, "contains whitespace")
    if any(ch in SENTENCE_PUNCTUATION for ch in trimmed):
        raise InvalidReaction(value, "contains punctuation")
    return trimmed


def quote(value: str) -> str:
    """Double-quoted literal with backslash escapes; printable Unicode is kept as-is."""
    parts = ['"']
    for ch in value:
        if ch in _ESCAPES:
            parts.append(_ESCAPES[ch])
        elif ch.isprintable():
            parts.append(ch)
        elif ord(ch) < 0x80:
            parts.append(f"\\x{ord(ch):02x}")
        elif ord(ch) <= 0xFFFF:
            parts.append(f"\\u{ord(ch):04x}")
        else:
            parts.append(f"\\U{ord(ch):08x}")
    parts.append('"')
    return "".join(parts)


def unique_sorted(values: Iterable[str]) -> list[str]:
    """Trimmed, non-empty, deduplicated and sorted."""
    return sorted({value.strip() for value in values if value.strip()})


def truncate_preview(body: str, max_len: int = REACTION_PREVIEW_LEN) -> str:
    compact = " ".join(body.split())
    if len(compact) <= max_len:
        return compact
    return compact[: max_len - 3] + "..."


def format_reaction_target(message_id: str, message_body: str) -> str:
    preview = truncate_preview(message_body)
    if not preview:
        return f"#{message_id}"
    return f"#{message_id} {preview}"


def format_reaction_event(reactors: Iterable[str], reaction: str, message_id: str, message_body: str) -> str:
    """Render a grouped reaction event.

    Examples:
        >>> format_reaction_event(["bob", "alice", "alice"], "+1", "42", "Fix the thing please")
        'alice, bob reacted "+1" to "#42 Fix the thing please"'
    """
    reacted_by = ", ".join(unique_sorted(reactors))
    target = format_reaction_target(message_id, message_body)
    return f"{reacted_by} reacted {quote(reaction)} to {quote(target)}"


def normalize_reactions(reactions: dict[str, list[str]] | None) -> dict[str, list[str]]:
    """Clean a reaction -> reactors mapping.

    Reaction keys are trimmed and empty keys dropped. Reactors are trimmed,
    empty names dropped and duplicates removed keeping first occurrences.
    Keys that trim to the same reaction share one reactor list. Reactions
    left without reactors are omitted.
    """
    merged: dict[str, list[str]] = {}
    for reaction, reactors in (reactions or {}).items():
        reaction = reaction.strip()
        if not reaction:
            continue
        bucket = merged.setdefault(reaction, [])
        for reactor in reactors or ():
            reactor = reactor.strip()
            if reactor and reactor not in bucket:
                bucket.append(reactor)
    return {reaction: reactors for reaction, reactors in merged.items() if reactors}


def format_reaction_events(reactions: dict[str, list[str]] | None, message_id: str, message_body: str) -> list[str]:
    """One grouped event line per reaction, ordered by reaction text."""
    cleaned = normalize_reactions(reactions)
    return [
        format_reaction_event(cleaned[reaction], reaction, message_id, message_body) for reaction in sorted(cleaned)
    ]
