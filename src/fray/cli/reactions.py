"""Validate reaction text and render grouped reaction events."""

import argparse
import json
import sys

from fray.errors import InvalidReaction
from fray.reactions import format_reaction_event, format_reaction_events, normalize_reaction_text


def add_arguments(parser: argparse.ArgumentParser) -> None:
    subparsers = parser.add_subparsers(dest="action")

    normalize_parser = subparsers.add_parser("normalize", help="Validate and trim reaction text")
    normalize_parser.add_argument("text")

    format_parser = subparsers.add_parser("format", help="Render a grouped reaction event")
    format_parser.add_argument("--reaction", required=True)
    format_parser.add_argument("--message-id", required=True)
    format_parser.add_argument("--body", default="", help="Reacted-to message body (for preview)")
    format_parser.add_argument("--reactor", action="append", default=[], help="Reactor name (repeatable)")

    summary_parser = subparsers.add_parser("summary", help="Render one event per reaction from a JSON mapping")
    summary_parser.add_argument("--reactions", required=True, help='JSON object, e.g. {"+1": ["alice", "bob"]}')
    summary_parser.add_argument("--message-id", required=True)
    summary_parser.add_argument("--body", default="", help="Reacted-to message body (for preview)")


def _load_reactions(raw: str) -> dict[str, list[str]] | None:
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        print(f"Error: invalid --reactions JSON: {e}", file=sys.stderr)
        return None
    if not isinstance(data, dict) or not all(
        isinstance(users, list) and all(isinstance(u, str) for u in users) for users in data.values()
    ):
        print("Error: --reactions must map reaction text to a list of names", file=sys.stderr)
        return None
    return data


def run(args: argparse.Namespace) -> int:
    try:
        if args.action == "normalize":
            print(normalize_reaction_text(args.text))
        elif args.action == "format":
            reaction = normalize_reaction_text(args.reaction)
            print(format_reaction_event(args.reactor, reaction, args.message_id, args.body))
        elif args.action == "summary":
            reactions = _load_reactions(args.reactions)
            if reactions is None:
                return 1
            for line in format_reaction_events(reactions, args.message_id, args.body):
                print(line)
        else:
            print("Error: expected 'normalize', 'format' or 'summary'", file=sys.stderr)
            return 1
    except InvalidReaction as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Reaction helpers")
    add_arguments(parser)
    return run(parser.parse_args(argv))


if __name__ == "__main__":
    sys.exit(main())
