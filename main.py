#!/usr/bin/env python3
"""
Roman Numeral — Entry Point
============================

Converts one value in whichever direction its shape implies.

Usage:
    python main.py 1983            # 1983 => MCMLXXXIII
    python main.py MCMXXCIIV       # MCMXXCIIV => 1983
    python main.py 4506 --ascii    # 4506 => _I_VDVI
    python main.py mcmliv --canonical
"""

from __future__ import annotations

import argparse
import logging
import sys

from dotenv import load_dotenv

from roman_numeral.config import log_level
from roman_numeral.converter import NumeralConverter
from roman_numeral.exceptions import RomanNumeralError
from roman_numeral.models import ConversionResult, Notation

# ─── ANSI Color Constants ───────────────────────────────────────────

_RED = "\033[91m"
_DIM = "\033[2m"
_BOLD = "\033[1m"
_RESET = "\033[0m"


# ─── Printers ───────────────────────────────────────────────────────


def print_result(result: ConversionResult, show_canonical: bool = False) -> None:
    """Print `<input> => <converted>`, plus the canonical form if asked."""
    print(result.summary)
    if show_canonical and result.direction == "to_decimal":
        print(f"  {_DIM}canonical:{_RESET} {_BOLD}{result.canonical}{_RESET}")


def print_error(error: RomanNumeralError) -> None:
    print(f"{_RED}[{error.code}]{_RESET} {error}", file=sys.stderr)


# ─── Main ────────────────────────────────────────────────────────────


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Convert between Roman numerals and integers (0 to 3,999,999)."
    )
    parser.add_argument("value", help="an integer (all digits) or a Roman numeral")
    parser.add_argument(
        "--ascii",
        action="store_true",
        help="write overlined numerals with a '_' prefix instead of U+0305",
    )
    parser.add_argument(
        "--canonical",
        action="store_true",
        help="also print the standard form of a numeral input",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run one conversion. Returns 0 on success, 1 on a config or conversion error."""
    load_dotenv()
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else log_level(),
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        converter = NumeralConverter(Notation.ASCII if args.ascii else None)
    except ValueError as e:
        print(f"{_RED}[CONFIG]{_RESET} {e}", file=sys.stderr)
        return 1

    try:
        result = converter.convert(args.value)
    except RomanNumeralError as e:
        print_error(e)
        return 1

    print_result(result, show_canonical=args.canonical)
    return 0


if __name__ == "__main__":
    sys.exit(main())
