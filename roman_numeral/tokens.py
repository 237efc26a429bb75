"""
The numeral token table.

Plain numerals are single characters. Overlined numerals (value ×1000) are
two characters: the letter followed by U+0305 COMBINING OVERLINE. The ASCII
`_` prefix is only surface syntax; the lexer rewrites `_X` to `X̅` before
looking it up here.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from .models import Token

# ─── Modifiers ───────────────────────────────────────────────────────

# Prefix `_` before a numeral to multiply it by 1000 (ASCII alternative).
MEGA_MODIFIER_PREFIX = "_"

# Combining overline after a numeral multiplies it by 1000.
MEGA_MODIFIER_POSTFIX = "\u0305"

# Letters that accept either modifier.
MODIFIABLE_TOKENS = "MDCLXVI"

# It's unclear how the Romans wrote zero; `N` (nulla) is the usual choice.
ZERO_NUMERAL = "N"


# ─── Symbol Table ────────────────────────────────────────────────────

_BASE_VALUES: dict[str, int] = {
    "M": 1_000,
    "D": 500,
    "C": 100,
    "L": 50,
    "X": 10,
    "V": 5,
    "I": 1,
}


def _build_table() -> Mapping[str, Token]:
    table: dict[str, Token] = {}
    for letter, value in _BASE_VALUES.items():
        mega = letter + MEGA_MODIFIER_POSTFIX
        table[mega] = Token(symbol=mega, value=value * 1_000)
    for letter, value in _BASE_VALUES.items():
        table[letter] = Token(symbol=letter, value=value)
    table[ZERO_NUMERAL] = Token(symbol=ZERO_NUMERAL, value=0)
    return MappingProxyType(table)


ROMAN_TOKENS: Mapping[str, Token] = _build_table()


def lookup_token(symbol: str) -> Token | None:
    """Return the token for `symbol`, or None if it is not a numeral."""
    return ROMAN_TOKENS.get(symbol)


def to_mega(letter: str) -> str:
    """`X` -> `X̅`."""
    return letter + MEGA_MODIFIER_POSTFIX
