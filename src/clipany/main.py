#!/usr/bin/env python3

import argparse
import dataclasses
import json
import logging
import sys
from typing import List, Optional, Sequence

from clipany.config import ClipboardConfig
from clipany.models import ClipboardManagerName, Outcome
from clipany.services.clipboard_service import ClipboardService

logger = logging.getLogger(__name__)


def _common_options() -> argparse.ArgumentParser:
    common = argparse.ArgumentParser(add_help=False)

    common.add_argument(
        "-m", "--clipboard-manager",
        type=str,
        default=None,
        help=("Clipboard manager to use (one of: "
              f"{ClipboardManagerName.names()}; default: detect)")
    )

    common.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose debug logging"
    )

    common.add_argument(
        "--timeout",
        type=float,
        default=None,
        help="Seconds to wait for each external command (default: no limit)"
    )

    common.add_argument(
        "--json",
        action="store_true",
        help="Print the result envelope as JSON"
    )

    return common


def build_parser() -> argparse.ArgumentParser:
    common = _common_options()
    parser = argparse.ArgumentParser(
        prog="clipany",
        description="clipany - Common interface to clipboard manager functions"
    )
    commands = parser.add_subparsers(dest="command", metavar="COMMAND")
    commands.required = True

    commands.add_parser(
        "detect", parents=[common],
        help="Detect which clipboard manager program is currently running")
    commands.add_parser(
        "get", parents=[common],
        help="Get the clipboard content (most recent, history index [0])")

    add = commands.add_parser(
        "add", parents=[common],
        help="Add a new content to the clipboard")
    add.add_argument(
        "content",
        nargs="?",
        default=None,
        help="Content to add (default: read from standard input)")
    add.add_argument(
        "--tee",
        action="store_true",
        help="Also print the content to standard output")

    commands.add_parser(
        "clear-content", parents=[common],
        help="Delete current clipboard content")
    commands.add_parser(
        "clear-history", parents=[common],
        help="Delete all clipboard items")
    commands.add_parser(
        "list-history", parents=[common],
        help="List the clipboard history")

    item = commands.add_parser(
        "get-item", parents=[common],
        help="Get one item of the clipboard history")
    item.add_argument(
        "index",
        type=int,
        help="History index, 0 is the current content")

    return parser


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    return build_parser().parse_args(argv)


def _configure_logging(config: ClipboardConfig, verbose: bool) -> None:
    level = logging.DEBUG if verbose else getattr(logging, config.log_level, logging.WARNING)
    logging.basicConfig(level=level, format="%(levelname)s: %(message)s")
    logging.getLogger().setLevel(level)


def _print_outcome(outcome: Outcome, as_json: bool) -> int:
    if as_json:
        print(json.dumps(outcome.as_envelope()))
    elif not outcome.ok:
        print(f"ERROR {outcome.status}: {outcome.message}", file=sys.stderr)
    elif isinstance(outcome.payload, list):
        for row in outcome.payload:
            print(row)
    elif outcome.payload is not None:
        print(outcome.payload)

    return 0 if outcome.ok else 1


def run(args: argparse.Namespace, service: ClipboardService) -> int:
    manager = args.clipboard_manager

    if args.command == "detect":
        if manager is not None:
            logger.warning("--clipboard-manager is ignored by detect")
        detected = service.detect_clipboard_manager()
        if detected is None:
            outcome = Outcome(status=412, message="Can't detect any known clipboard manager")
        else:
            outcome = Outcome.success(detected.value)
        return _print_outcome(outcome, args.json)

    if args.command == "get":
        outcome = service.get_clipboard_content(manager)
    elif args.command == "add":
        content = args.content
        if content is None:
            content = sys.stdin.read()
        outcome = service.add_clipboard_content(content, manager, tee=args.tee)
    elif args.command == "clear-content":
        outcome = service.clear_clipboard_content(manager)
    elif args.command == "clear-history":
        outcome = service.clear_clipboard_history(manager)
    elif args.command == "list-history":
        outcome = service.list_clipboard_history(manager)
    elif args.command == "get-item":
        outcome = service.get_clipboard_history_item(args.index, manager)
    else:
        raise ValueError(f"Unknown command: {args.command}")

    return _print_outcome(outcome, args.json)


def main(argv: Optional[Sequence[str]] = None, service: Optional[ClipboardService] = None) -> int:
    args = parse_args(argv)
    config = ClipboardConfig.from_env()
    if args.timeout is not None:
        config = dataclasses.replace(config, command_timeout=args.timeout)

    _configure_logging(config, args.verbose)

    if service is None:
        service = ClipboardService(config=config)

    try:
        return run(args, service)
    except KeyboardInterrupt:
        print("\nInterrupted", file=sys.stderr)
        return 130


def _shortcut(command: str, argv: Optional[Sequence[str]]) -> List[str]:
    rest = list(sys.argv[1:] if argv is None else argv)
    return [command, *rest]


def clipget(argv: Optional[Sequence[str]] = None) -> int:
    return main(_shortcut("get", argv))


def clipadd(argv: Optional[Sequence[str]] = None) -> int:
    return main(_shortcut("add", argv))


if __name__ == "__main__":
    sys.exit(main())
