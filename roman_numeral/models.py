"""
Pydantic models for numeral data.

Tokens and numeral sets are frozen value records: they are built once from
constant tables and never change afterwards.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


# ─── Output Notation ────────────────────────────────────────────────


class Notation(str, Enum):
    """How overlined (×1000) numerals are written."""

    UNICODE = "unicode"  # X̅  (letter + U+0305 COMBINING OVERLINE)
    ASCII = "ascii"  # _X  (underscore prefix)


# ─── Token ──────────────────────────────────────────────────────────


class Token(BaseModel):
    """A single lexed numeral symbol and its decimal value."""

    model_config = ConfigDict(frozen=True)

    symbol: str  # "X", "X̅", "N", ...
    value: int = Field(ge=0)


# ─── Numeral Set ────────────────────────────────────────────────────


class NumeralSet(BaseModel):
    """Symbols needed to write any digit at one decimal position.

    For the tens position: `this` is X (10), `half` is L (50) and `next` is
    C (100). `down` replaces `this` in the subtractive digits 4 and 9 at the
    position where plain numerals give way to overlined ones, so 4000 is
    written I̅V̅ rather than MV̅.
    """

    model_config = ConfigDict(frozen=True)

    next: Optional[str] = None
    half: Optional[str] = None
    this: str
    down: Optional[str] = None


# ─── Conversion Result ──────────────────────────────────────────────


class ConversionResult(BaseModel):
    """Outcome of converting one CLI argument or API value."""

    input: str
    direction: str  # "to_roman" or "to_decimal"
    decimal: int
    roman: str  # as given (text input) or generated (integer input)
    canonical: str  # generator output for `decimal`
    notation: Notation = Notation.UNICODE

    @property
    def summary(self) -> str:
        """`1983 => MCMLXXXIII` or `MCMXXCIIV => 1983`."""
        if self.direction == "to_roman":
            return f"{self.decimal} => {self.roman}"
        return f"{self.roman} => {self.decimal}"
