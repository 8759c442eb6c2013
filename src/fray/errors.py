"""Error types raised by the directive parsers."""


class DirectiveError(Exception):
    """Base class for directive parsing errors."""


class InvalidReaction(DirectiveError, ValueError):
    """Reaction text is not a short single-token reaction."""

    def __init__(self, value: str, reason: str):
        self.value = value
        self.reason = reason
        super().__init__(f"invalid reaction {value!r}: {reason}")


class NoMatch(DirectiveError, LookupError):
    """Agent reference is not a job worker identifier."""

    def __init__(self, agent_id: str):
        self.agent_id = agent_id
        super().__init__(f"not a job worker id: {agent_id!r}")
