"""
解析消息正文中的 @mention / fork session / interrupt 指令

输出 MentionResult，供消息索引流程消费：
- 普通 mention：@alice, @pm.frontend, @dev[abc1-0]
- fork session：@alice#sess1
- interrupt：!@alice, !!@bob!
"""

import argparse
import json
import logging
import sys
from pathlib import Path

from fray.agents.registry import load_agent_bases
from fray.config import Config, load_config
from fray.mention_policy import mention_targets
from fray.parser import MentionResult, extract_issue_refs, extract_mentions_with_session

logger = logging.getLogger(__name__)


def parse_message(body: str, agent_bases: set[str] | None) -> tuple[MentionResult, list[str]]:
    """
    解析单条消息

    Args:
        body: 消息正文
        agent_bases: 已注册 agent 基础名；None 表示不限制

    Returns:
        (result, targets) 元组
        - result: 原样的 MentionResult（保留 all，fork_sessions/interrupts 的 key 均在 mentions 中）
        - targets: 展开 @all 后的 fan-out 目标
    """
    result = extract_mentions_with_session(body, agent_bases)
    return result, mention_targets(result, agent_bases)


def resolve_agent_bases(args: argparse.Namespace, config: Config) -> set[str] | None:
    """命令行 --agent 优先，其次是注册目录；--unrestricted 表示不使用注册表"""
    if args.unrestricted:
        return None
    if args.agent:
        return {name.strip() for name in args.agent if name.strip()}
    agents_dir = Path(args.agents_dir) if args.agents_dir else config.agents_dir
    return load_agent_bases(agents_dir)


def read_body(args: argparse.Namespace) -> str:
    if args.body_file:
        with open(args.body_file, encoding="utf-8") as f:
            return f.read()
    return args.body


def add_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--body", help="Message body text", default="")
    parser.add_argument("--body-file", help="Message body text (read from file)", default="")
    parser.add_argument("--agent", action="append", default=[], help="Registered agent base (repeatable)")
    parser.add_argument("--agents-dir", default="", help="Agent registry directory (default: from config)")
    parser.add_argument("--unrestricted", action="store_true", help="Ignore the registry, use the length heuristic")
    parser.add_argument("--expand-all", action="store_true", help="Also report fan-out targets with @all expanded")
    parser.add_argument("--issue-refs", action="store_true", help="Also report @prefix-id issue references")
    parser.add_argument("--output", default="json", choices=["json", "csv", "text"], help="Output format (default: json)")


def run(args: argparse.Namespace, config: Config | None = None) -> int:
    config = config or load_config()

    try:
        body = read_body(args)
    except OSError as e:
        print(f"Error reading body-file: {e}", file=sys.stderr)
        return 1

    if not body.strip():
        print("Error: No text provided", file=sys.stderr)
        return 1

    if len(body) > config.max_body_length:
        print(f"Error: body longer than {config.max_body_length} characters", file=sys.stderr)
        return 1

    agent_bases = resolve_agent_bases(args, config)
    result, targets = parse_message(body, agent_bases)
    names = targets if args.expand_all else result.mentions
    logger.debug("parsed %d mentions", len(result.mentions))

    if args.output == "json":
        payload = result.to_dict()
        if args.expand_all:
            payload["targets"] = targets
        if args.issue_refs:
            payload["issue_refs"] = extract_issue_refs(body)
        print(json.dumps(payload, ensure_ascii=False))
    elif args.output == "csv":
        print(",".join(names))
    else:  # text
        for name in names:
            print(name)
        if args.issue_refs:
            for ref in extract_issue_refs(body):
                print(ref)

    return 0


def main(argv: list[str] | None = None) -> int:
    """
    CLI 入口点

    Args:
        argv: 命令行参数，None 则使用 sys.argv

    Returns:
        退出码，0 表示成功
    """
    parser = argparse.ArgumentParser(description="Parse @mentions, fork sessions and interrupts from a message")
    add_arguments(parser)
    args = parser.parse_args(argv)
    return run(args)


if __name__ == "__main__":
    sys.exit(main())
