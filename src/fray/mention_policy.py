"""@ 提及寻址策略

判断某条消息中的 mention 是否指向指定 agent，以及为消息索引生成 fan-out 目标。
"""

import logging
import re
from collections.abc import Iterable

from fray.parser import MentionResult, expand_all_mention
from fray.utils.mentions import AGENT_NAME_PATTERN, ALL_MENTION

logger = logging.getLogger(__name__)

# A run of mentions at the very start of a message, e.g. "@alice @bob, ..."
_LEADING_MENTION = re.compile(r"@(" + AGENT_NAME_PATTERN + r")[\s,:]*")


def is_all_mention(mention: str) -> bool:
    return mention == ALL_MENTION


def matches_mention(agent_id: str, mention: str) -> bool:
    """Whether a mention addresses ``agent_id``.

    Parents and dotted sub-agents address each other; siblings and bare
    prefixes do not.

    Examples:
        >>> matches_mention("alice.1", "alice")
        True
        >>> matches_mention("alice", "ali")
        False
    """
    if not agent_id or not mention:
        return False
    if agent_id == mention:
        return True
    return agent_id.startswith(mention + ".") or mention.startswith(agent_id + ".")


def leading_mentions(body: str | None) -> list[str]:
    """Mentions that open the message, before any other text."""
    if not body:
        return []

    text = body.lstrip()
    pos = 0
    names: list[str] = []
    while True:
        match = _LEADING_MENTION.match(text, pos)
        if match is None:
            break
        names.append(match.group(1))
        pos = match.end()
    return names


def is_direct_address(body: str | None, agent_id: str) -> bool:
    """消息是否以 @agent 开头直接寻址该 agent（FYI/CC 及句中提及不算）"""
    return any(matches_mention(agent_id, name) for name in leading_mentions(body))


def is_self_mention(from_agent: str, agent_id: str) -> bool:
    """Messages an agent wrote itself; sub-agents are distinct authors."""
    return from_agent == agent_id


def mention_targets(result: MentionResult, agent_bases: Iterable[str] | None) -> list[str]:
    """每个需要写入 mention 收件箱的 agent（@all 已展开）

    Args:
        result: 消息的解析结果
        agent_bases: 完整的已注册 agent 基础名集合

    Returns:
        去重后的目标列表
    """
    targets = expand_all_mention(result.mentions, agent_bases)
    if targets is not result.mentions:
        logger.info("[EXPAND] @all -> %d targets", len(targets))
    return list(targets)
