"""主入口：支持多种子命令"""

import argparse
import sys

from fray.cli import mentions as mentions_cli
from fray.cli import reactions as reactions_cli
from fray.commands.core import handle_list_agents, handle_worker
from fray.config import load_config
from fray.logging_config import setup_logging


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="fray directive parser")
    subparsers = parser.add_subparsers(dest="command", help="可用命令")

    # 解析消息中的 mention / fork session / interrupt
    mentions_parser = subparsers.add_parser("mentions", help="解析消息指令")
    mentions_cli.add_arguments(mentions_parser)

    # 校验与格式化 reaction
    react_parser = subparsers.add_parser("react", help="reaction 校验与格式化")
    reactions_cli.add_arguments(react_parser)

    # 拆分 job worker 标识
    worker_parser = subparsers.add_parser("worker", help="拆分 job worker 标识")
    worker_parser.add_argument("agent_id", help="例如 dev[abc1-0]")
    worker_parser.add_argument("--require", action="store_true", help="非 worker 标识时返回错误码")

    list_parser = subparsers.add_parser("list-agents", help="列出已注册 agent")
    list_parser.add_argument("--include-disabled", action="store_true")

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    config = load_config()
    setup_logging(level=config.log_level, log_file=config.log_file)

    if args.command == "mentions":
        return mentions_cli.run(args, config)
    if args.command == "react":
        return reactions_cli.run(args)
    if args.command == "worker":
        return handle_worker(args) or 0
    if args.command == "list-agents":
        handle_list_agents(config, include_disabled=args.include_disabled)
        return 0

    parser.print_help()
    return 1


if __name__ == "__main__":
    sys.exit(main())
