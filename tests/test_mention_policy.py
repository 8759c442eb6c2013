"""Tests for mention addressing policy."""

import pytest

from fray.mention_policy import (
    is_all_mention,
    is_direct_address,
    is_self_mention,
    leading_mentions,
    matches_mention,
    mention_targets,
)
from fray.parser import extract_mentions_with_session


@pytest.mark.parametrize(
    ("mention", "agent_id", "expected"),
    [
        ("alice", "alice", True),
        ("alice", "alice.1", True),
        ("alice", "alice.frontend.1", True),
        ("alice.1", "alice", True),
        ("bob", "alice", False),
        ("ali", "alice", False),
        ("alice.2", "alice.1", False),
        ("", "alice", False),
    ],
)
def test_matches_mention(mention, agent_id, expected):
    assert matches_mention(agent_id, mention) is expected


@pytest.mark.parametrize(
    ("body", "agent_id", "expected"),
    [
        ("@alice hey", "alice", True),
        ("@alice @bob hey", "alice", True),
        ("@alice @bob hey", "bob", True),
        ("@alice, what do you think?", "alice", True),
        ("@alice hey", "alice.1", True),
        ("@alice.1 hey", "alice.1", True),
        ("@alice.1 hey", "alice", True),
        ("hey @alice what's up", "alice", False),
        ("alice hey", "alice", False),
        ("FYI @alice this happened", "alice", False),
        ("fyi @alice this happened", "alice", False),
        ("CC @alice @bob", "alice", False),
        ("cc @alice", "alice", False),
        ("heads up @alice", "alice", False),
        ("@bob hey", "alice", False),
        ("check this @alice", "alice", False),
    ],
)
def test_is_direct_address(body, agent_id, expected):
    assert is_direct_address(body, agent_id) is expected


def test_leading_mentions_stops_at_text():
    assert leading_mentions("  @alice @bob, hello @carol") == ["alice", "bob"]
    assert leading_mentions("") == []


@pytest.mark.parametrize(
    ("from_agent", "agent_id", "expected"),
    [
        ("alice", "alice", True),
        ("bob", "alice", False),
        ("alice.1", "alice", False),
    ],
)
def test_is_self_mention(from_agent, agent_id, expected):
    assert is_self_mention(from_agent, agent_id) is expected


def test_is_all_mention():
    assert is_all_mention("all") is True
    assert is_all_mention("alice") is False


def test_mention_targets_expand_all():
    bases = {"alice", "bob", "carol"}
    result = extract_mentions_with_session("@bob heads up @all", bases)
    assert mention_targets(result, bases) == ["bob", "alice", "carol"]


def test_mention_targets_without_all_is_a_copy():
    bases = {"alice", "bob"}
    result = extract_mentions_with_session("@alice", bases)
    targets = mention_targets(result, bases)
    assert targets == ["alice"]
    assert targets is not result.mentions
