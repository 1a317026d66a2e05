#!/usr/bin/env python3
"""
taskboard: Team task board CLI.

Commands:
  show     Display tasks grouped by stage
  move     Move a task to another stage (HEAD_MANAGER only)
"""

import argparse
import sys

from taskboard.cli import BoardCLI
from taskboard.constants import STAGE_ORDER
from taskboard.core.exceptions import ConfigError
from taskboard.support.config import load_config
from taskboard.support.logging_setup import setup_logging


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="taskboard", description="Team task board CLI"
    )
    parser.add_argument("--config", help="Path to YAML config file")
    parser.add_argument("--base-url", help="Task service base URL")
    parser.add_argument("--role", help="Actor role (e.g. HEAD_MANAGER)")
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    # 'show' command
    show_parser = subparsers.add_parser("show", help="Display tasks grouped by stage")
    show_parser.add_argument("--json", action="store_true", help="Output as JSON")

    # 'move' command
    move_parser = subparsers.add_parser(
        "move", help="Move a task to another stage"
    )
    move_parser.add_argument("id", type=int, help="Task ID to move")
    move_parser.add_argument(
        "stage", help=f"Destination stage ({', '.join(STAGE_ORDER)})"
    )

    return parser


def main(argv=None) -> int:
    """Main entry point for taskboard CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    setup_logging(args.verbose)

    try:
        config = load_config(
            args.config,
            overrides={"base_url": args.base_url, "role": args.role},
        )
    except ConfigError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    cli = BoardCLI(config)

    if args.command == "show":
        return cli.cmd_show(args)
    elif args.command == "move":
        return cli.cmd_move(args)
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
