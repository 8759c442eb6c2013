"""@mention 解析器：从消息正文中提取 mention、fork session 与 interrupt 指令"""

import logging
from collections.abc import Collection, Iterable
from dataclasses import dataclass, field
from typing import Any

from fray.utils.mentions import (
    ALL_MENTION,
    INTERRUPT_MENTION_PATTERN,
    ISSUE_REF_PATTERN,
    MENTION_PATTERN,
    MENTION_WITH_SESSION_PATTERN,
    follows_word_char,
    is_valid_agent_name,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class InterruptInfo:
    """Interrupt flags for a ``!@agent`` directive.

    Attributes:
        double: ``!!`` prefix, start a fresh session instead of resuming
        no_spawn: trailing ``!``, do not start the agent if it is not running
    """

    double: bool = False
    no_spawn: bool = False


@dataclass
class MentionResult:
    """Mentions, fork sessions and interrupts extracted from one message."""

    mentions: list[str] = field(default_factory=list)
    fork_sessions: dict[str, str] = field(default_factory=dict)
    interrupts: dict[str, InterruptInfo] = field(default_factory=dict)

    def add_mention(self, name: str) -> None:
        if name not in self.mentions:
            self.mentions.append(name)

    def to_dict(self) -> dict[str, Any]:
        return {
            "mentions": list(self.mentions),
            "fork_sessions": dict(self.fork_sessions),
            "interrupts": {
                name: {"double": info.double, "no_spawn": info.no_spawn} for name, info in self.interrupts.items()
            },
        }


def extract_mentions(body: str | None, agent_bases: Collection[str] | None) -> list[str]:
    """从正文中解析 @mention（不含 @ 前缀）

    Args:
        body: 消息正文
        agent_bases: 已注册的 agent 基础名集合；None 表示无注册表，按长度启发式判断

    Returns:
        去重后的 mention 列表，保持首次出现顺序
    """
    if not body:
        return []

    mentions: list[str] = []
    for match in MENTION_PATTERN.finditer(body):
        if follows_word_char(body, match.start()):
            continue
        name = match.group(1)
        if not is_valid_agent_name(name, agent_bases):
            logger.debug("[SKIP] unknown agent: %s", name)
            continue
        if name not in mentions:
            mentions.append(name)
    return mentions


def extract_mentions_with_session(body: str | None, agent_bases: Collection[str] | None) -> MentionResult:
    """解析 @agent、@agent#sessid 以及 !@agent / !!@agent / !@agent! / !!@agent! 语法

    Args:
        body: 消息正文
        agent_bases: 已注册的 agent 基础名集合（None 表示不限制）

    Returns:
        MentionResult；interrupt 中出现但普通扫描未收录的 agent 追加在末尾
    """
    result = MentionResult()
    if not body:
        return result

    for match in MENTION_WITH_SESSION_PATTERN.finditer(body):
        # 排除 email 等嵌在单词中的 @
        if follows_word_char(body, match.start()):
            continue

        name, session_id = match.group(1), match.group(2)
        if not is_valid_agent_name(name, agent_bases):
            logger.debug("[SKIP] unknown agent: %s", name)
            continue

        result.add_mention(name)
        if session_id and name not in result.fork_sessions:
            result.fork_sessions[name] = session_id

    for name, info in extract_interrupts(body, agent_bases):
        result.add_mention(name)
        result.interrupts[name] = info

    return result


def extract_interrupts(body: str | None, agent_bases: Collection[str] | None) -> list[tuple[str, InterruptInfo]]:
    """Interrupt directives in order of appearance; repeated agents appear once per marker."""
    if not body:
        return []

    interrupts = []
    for match in INTERRUPT_MENTION_PATTERN.finditer(body):
        prefix, name, suffix = match.groups()
        if not is_valid_agent_name(name, agent_bases):
            continue
        interrupts.append((name, InterruptInfo(double=prefix == "!!", no_spawn=suffix == "!")))
    return interrupts


def extract_issue_refs(body: str | None) -> list[str]:
    """Find ``@prefix-id`` issue references, lower-cased and deduplicated (sorted)."""
    if not body:
        return []
    return sorted({ref.lower() for ref in ISSUE_REF_PATTERN.findall(body)})


def expand_all_mention(mentions: list[str], agent_bases: Iterable[str] | None) -> list[str]:
    """将 @all 展开为所有已注册 agent

    Bases are spliced in sorted order at the position of ``all``; names already
    seen earlier in the list are not repeated.

    Returns:
        原列表（未包含 all 时）或新的去重列表
    """
    if ALL_MENTION not in mentions:
        return mentions

    bases = sorted(agent_bases or ())
    seen: set[str] = set()
    expanded: list[str] = []
    for mention in mentions:
        candidates = bases if mention == ALL_MENTION else [mention]
        for name in candidates:
            if name not in seen:
                seen.add(name)
                expanded.append(name)
    return expanded
