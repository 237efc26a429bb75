"""
Conversion service — turns one raw user-supplied value into a result.

Flow:
  raw input ──► all digits? ──yes──► RomanNumeral(int) ──► generate text
                     │
                     no
                     ▼
               RomanNumeral(str) ──► lex + parse ──► integer

Used by both the CLI (main.py) and the HTTP API (api.py), so they agree on
how an argument like "1983" or "mcmlxxxiii" is interpreted.
"""

from __future__ import annotations

import logging
import re

from .config import default_notation
from .exceptions import NumeralRangeError
from .generator import MAX_DECIMAL
from .models import ConversionResult, Notation
from .numeral import RomanNumeral

logger = logging.getLogger(__name__)

_DIGITS = re.compile(r"^[0-9]+$")

# Longest digit string that can still be in range, leading zeros aside.
_MAX_DIGITS = len(str(MAX_DECIMAL))


class NumeralConverter:
    """Converts decimal strings to numerals and numerals to integers.

    Usage:
        converter = NumeralConverter()
        result = converter.convert("1983")
        print(result.summary)   # 1983 => MCMLXXXIII
    """

    def __init__(self, notation: Notation | str | None = None):
        self.notation = Notation(notation) if notation is not None else default_notation()

    def convert(self, raw: str) -> ConversionResult:
        """Convert `raw` in whichever direction its shape implies.

        Raises:
            RomanNumeralError: Any lexing, range or type failure, unchanged.
        """
        value = raw.strip()
        if _DIGITS.match(value):
            digits = value.lstrip("0")
            if len(digits) > _MAX_DIGITS:
                raise NumeralRangeError(
                    f"Integer out of range: {len(digits)}-digit value "
                    f"(must be 0..{MAX_DECIMAL - 1:,})",
                    details={"digits": len(digits), "min": 0, "max_exclusive": MAX_DECIMAL},
                )
            return self.to_roman(int(digits or "0"), source=value)
        return self.to_decimal(value)

    def to_roman(self, number: int, source: str | None = None) -> ConversionResult:
        numeral = RomanNumeral.from_int(number)
        text = numeral.to_text(self.notation)
        logger.debug("Converted %d to %s", number, text)
        return ConversionResult(
            input=source if source is not None else str(number),
            direction="to_roman",
            decimal=numeral.decimal,
            roman=text,
            canonical=text,
            notation=self.notation,
        )

    def to_decimal(self, text: str) -> ConversionResult:
        numeral = RomanNumeral.from_text(text)
        logger.debug("Converted %s to %d", numeral.roman, numeral.decimal)
        return ConversionResult(
            input=text,
            direction="to_decimal",
            decimal=numeral.decimal,
            roman=numeral.roman,
            canonical=numeral.canonical(self.notation),
            notation=self.notation,
        )
