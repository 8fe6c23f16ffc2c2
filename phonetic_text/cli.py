"""Command-line interface for phonetic spelling.

WHY: Support staff and field technicians want to spell a code out (or
turn a transcribed spelling back into a code) straight from a terminal
or a shell pipeline, without writing Python.

HOW: argparse with two subcommands, ``encode`` and ``decode``. Defaults
come from phonetic_text.config (environment / .env); flags override
them. The result is printed to stdout; errors go to stderr.

RULES:
- TEXT omitted or "-" reads from stdin; one trailing newline is dropped
- --delimiter switches to single-line output joined by that delimiter
- --case-prefix / --no-case-prefix override PHONETIC_INCLUDE_CASE_PREFIX
- --alphabet overrides PHONETIC_ALPHABET
- ValueError (bad alphabet, empty delimiter) prints "Error: ..." and exits 1
- decode needs the same --delimiter / --case-prefix used for encode
"""

from __future__ import annotations

import argparse
import dataclasses
import logging
import sys
from typing import List, Optional

from phonetic_text.alphabets import ALPHABETS, get_alphabet
from phonetic_text.config import load_alphabet_name, load_converter_config
from phonetic_text.core.converter import ConverterConfig, PhoneticConverter

logger = logging.getLogger(__name__)


def _read_text(value: Optional[str]) -> str:
    """Return the positional TEXT, or stdin when it is omitted or "-"."""
    if value is not None and value != "-":
        return value
    data = sys.stdin.read()
    if data.endswith("\n"):
        data = data[:-1]
    return data


def _resolve_config(args: argparse.Namespace) -> ConverterConfig:
    """Merge CLI flags over the environment defaults."""
    config = load_converter_config()
    overrides = {}
    if args.case_prefix is not None:
        overrides["include_case_prefix"] = args.case_prefix
    if args.delimiter is not None:
        overrides["delimiter"] = args.delimiter
        overrides["newline_output"] = False
    if overrides:
        config = dataclasses.replace(config, **overrides)
    return config


def build_parser() -> argparse.ArgumentParser:
    """Build the argparse parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="phonetic_text",
        description="Spell text out with phonetic words for voice dictation, "
                    "or turn a phonetic spelling back into text.",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log debug details (unmapped characters, unrecognised lines) to stderr.",
    )

    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "text",
        nargs="?",
        default=None,
        help="Input text. Omit or pass '-' to read from stdin.",
    )
    common.add_argument(
        "--case-prefix",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Prefix letters with 'Capital' / 'Lowercase' "
             "(default: PHONETIC_INCLUDE_CASE_PREFIX or off).",
    )
    common.add_argument(
        "--delimiter",
        default=None,
        help="Join lines with this delimiter on a single line instead of newlines.",
    )
    common.add_argument(
        "--alphabet",
        default=None,
        help="Phonetic table to use. Available: {}. "
             "Default: PHONETIC_ALPHABET or nato.".format(", ".join(sorted(ALPHABETS))),
    )

    subparsers = parser.add_subparsers(dest="command", required=True)
    subparsers.add_parser(
        "encode",
        parents=[common],
        help="Convert text into phonetic spelling.",
    )
    subparsers.add_parser(
        "decode",
        parents=[common],
        help="Convert phonetic spelling back into text.",
    )
    return parser


def run(args: argparse.Namespace) -> str:
    """Execute one parsed command and return its output text.

    Raises:
        ValueError: For an unknown alphabet or an invalid configuration.
    """
    config = _resolve_config(args)
    table = get_alphabet(args.alphabet or load_alphabet_name())
    converter = PhoneticConverter(config, table=table)
    text = _read_text(args.text)
    logger.debug("Running %s with %s table, config=%s", args.command, table.name, config)
    if args.command == "encode":
        return converter.encode(text)
    return converter.decode(text)


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for ``python -m phonetic_text`` and the console script.

    argv=None means use sys.argv; explicit argv is for testing.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        output = run(args)
    except ValueError as e:
        print("Error: {}".format(e), file=sys.stderr)
        sys.exit(1)
    print(output)


if __name__ == "__main__":
    main()
