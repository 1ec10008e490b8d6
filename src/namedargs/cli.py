"""Command-line front end: parse a named-arguments string and print its bindings."""

from __future__ import annotations

import argparse
import json
import logging
import sys

from rich.console import Console
from rich.logging import RichHandler

from namedargs.config import INT64_MAX, ParserConfig
from namedargs.errors import NamedArgsError
from namedargs.lexer import lex
from namedargs.parser import parse_bindings

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False) -> None:
    """Route log records through Rich on stderr.

    Args:
        verbose: Enable debug logging.
    """
    level = logging.DEBUG if verbose else logging.WARNING
    handler = RichHandler(
        console=Console(stderr=True),
        show_time=False,
        show_path=False,
        markup=False,
        rich_tracebacks=True,
    )
    logging.basicConfig(
        level=level,
        format="[%(name)s] %(message)s",
        handlers=[handler],
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="namedargs",
        description="Parse `key = value, ...` text and print the bindings as JSON",
    )
    parser.add_argument(
        "text",
        nargs="?",
        default="-",
        help="Arguments to parse; '-' or omitted reads standard input",
    )
    parser.add_argument(
        "--tokens",
        action="store_true",
        help="Print the token stream and exit",
    )
    parser.add_argument(
        "--max-integer",
        type=int,
        default=INT64_MAX,
        help="Largest accepted numeric literal (default: %(default)s)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the CLI.

    Returns:
        int: Exit code, 0 on success and 1 when the input is rejected.
    """
    args = build_parser().parse_args(argv)
    setup_logging(args.verbose)

    text = sys.stdin.read() if args.text == "-" else args.text
    try:
        config = ParserConfig(max_integer=args.max_integer)
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    try:
        if args.tokens:
            for token in lex(text, config):
                print(f"{token.kind.value}\t{token.position}\t{token.text!r}")
            return 0
        store = parse_bindings(text, config)
    except NamedArgsError as exc:
        logger.debug("rejected input %r", text)
        print(f"error: {exc}", file=sys.stderr)
        return 1

    print(json.dumps(store.to_dict(), indent=2, sort_keys=True))
    return 0


if __name__ == "__main__":
    sys.exit(main())
