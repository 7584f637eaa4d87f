"""Command-line runner: tokenize a file and print its tokens.

Usage:
    sepalex program.txt
    sepalex --profile standalone --all program.txt
    cat program.txt | sepalex -
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from sepalex import tokenize
from sepalex.errors import SepalexError
from sepalex.profiles import BUILTIN_PROFILES, get_profile

EXIT_LEX_ERROR = 1
EXIT_IO_ERROR = 2


def read_source(path: str) -> str:
    """Read a whole source file as UTF-8. ``-`` reads stdin."""
    if path == "-":
        return sys.stdin.read()
    return Path(path).read_text(encoding="utf-8")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sepalex",
        description="Tokenize a source file and print its tokens.",
    )
    parser.add_argument("file", help="Source file to tokenize ('-' for stdin).")
    parser.add_argument(
        "--profile",
        choices=sorted(BUILTIN_PROFILES),
        default="library",
        help="Keyword/operator set to use (default: library).",
    )
    parser.add_argument(
        "--all",
        action="store_true",
        help="Also print whitespace tokens.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging on stderr.",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s"
        )

    try:
        source = read_source(args.file)
    except (OSError, UnicodeDecodeError) as exc:
        print(f"sepalex: cannot read {args.file}: {exc}", file=sys.stderr)
        return EXIT_IO_ERROR

    source_file = None if args.file == "-" else args.file
    try:
        tokens = tokenize(
            source, profile=get_profile(args.profile), source_file=source_file
        )
    except SepalexError as exc:
        print(f"sepalex: {exc}", file=sys.stderr)
        return EXIT_LEX_ERROR

    for token in tokens:
        if token.is_whitespace and not args.all:
            continue
        print(f"Token: {token}")
    return 0
