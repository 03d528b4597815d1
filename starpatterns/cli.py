"""Command line entry point that prints a pattern."""

from __future__ import annotations

import argparse
import sys

from starpatterns.patterns import PATTERNS, get_pattern, render

PROMPT = "Enter the Number : "
DEFAULT_PATTERN = "star_triangle"


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="starpatterns",
        description="Print a pattern of stars, numbers or letters.",
    )
    parser.add_argument(
        "pattern",
        nargs="?",
        default=DEFAULT_PATTERN,
        help=f"pattern name (default: {DEFAULT_PATTERN})",
    )
    parser.add_argument(
        "size",
        nargs="?",
        help="pattern size; read from standard input when omitted",
    )
    parser.add_argument(
        "--list", action="store_true", help="list the available patterns"
    )
    return parser


def _parse_size(parser: argparse.ArgumentParser, text: str) -> int:
    tokens = text.split()
    if not tokens:
        parser.error("no number given")
    try:
        return int(tokens[0])
    except ValueError:
        parser.error(f"not a number: {tokens[0]!r}")


def main(argv: list[str] | None = None) -> int:
    """Print the chosen pattern; the size is prompted for if not given."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.list:
        for name in PATTERNS:
            print(name)
        return 0

    try:
        get_pattern(args.pattern)
    except ValueError as exc:
        parser.error(str(exc))

    if args.size is None:
        try:
            text = input(PROMPT)
        except EOFError:
            text = ""
    else:
        text = args.size
    size = _parse_size(parser, text)

    sys.stdout.write(render(args.pattern, size))
    return 0


if __name__ == "__main__":
    sys.exit(main())