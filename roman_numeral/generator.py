"""
Generator: integer -> canonical numeral text.

Numbers are written one decimal digit at a time. Each decimal position has a
NumeralSet holding the three (or four) symbols any digit at that position
needs, and every digit is rendered with the same standard-form rule:

     digit   hundreds   rule
       0     ""         -
       1     C          this
       2     CC         this x 2
       3     CCC        this x 3
       4     CD         (down or this) + half
       5     D          half
       6     DC         half + this
       7     DCC        half + this x 2
       8     DCCC       half + this x 3
       9     CM         (down or this) + next

Numbers from 4000 upwards use the vinculum: a line over a numeral
multiplies it by 1000 (V̅ = 5000, M̅ = 1 000 000).

Unlike the parser, the generator is strict: each integer has exactly one
output form.
"""

from __future__ import annotations

import logging
import re
from types import MappingProxyType
from typing import Mapping

from .exceptions import GeneratorError, NumeralRangeError, TypeMismatchError
from .models import Notation, NumeralSet
from .tokens import MEGA_MODIFIER_POSTFIX, MEGA_MODIFIER_PREFIX, ZERO_NUMERAL, to_mega

logger = logging.getLogger(__name__)

# Exclusive upper bound. The leading digit of any value below it is at most
# 3, so the top position never needs a half or next symbol.
MAX_DECIMAL = 4_000_000

# ─── Numeral Sets ────────────────────────────────────────────────────

NUMERAL_SETS: Mapping[int, NumeralSet] = MappingProxyType({
    7: NumeralSet(this=to_mega("M")),
    6: NumeralSet(next=to_mega("M"), half=to_mega("D"), this=to_mega("C")),
    5: NumeralSet(next=to_mega("C"), half=to_mega("L"), this=to_mega("X")),
    4: NumeralSet(next=to_mega("X"), half=to_mega("V"), this="M", down=to_mega("I")),
    3: NumeralSet(next="M", half="D", this="C"),
    2: NumeralSet(next="C", half="L", this="X"),
    1: NumeralSet(next="X", half="V", this="I"),
})

_OVERLINED = re.compile(f"(.){MEGA_MODIFIER_POSTFIX}")


# ─── Range Check ─────────────────────────────────────────────────────


def check_range(value: object) -> int:
    """Ensure `value` is an int the generator can write.

    Raises:
        TypeMismatchError: If `value` is not an int (bool is rejected too).
        NumeralRangeError: If `value` is outside [0, MAX_DECIMAL).
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeMismatchError(
            f"Expected int, got {type(value).__name__}",
            details={"type": type(value).__name__},
        )
    if not 0 <= value < MAX_DECIMAL:
        raise NumeralRangeError(
            f"Integer out of range: {value} (must be 0..{MAX_DECIMAL - 1:,})",
            details={"value": value, "min": 0, "max_exclusive": MAX_DECIMAL},
        )
    return value


# ─── Digit Rendering ─────────────────────────────────────────────────


def digit_to_roman(position: int, digit: int) -> str:
    """Render one decimal digit at a 1-based position (1 = ones)."""
    if not 0 <= digit <= 9:
        raise GeneratorError(f"Digit out of bounds: {digit}", details={"digit": digit})

    numeral_set = NUMERAL_SETS.get(position)
    if numeral_set is None:
        raise GeneratorError(
            f"No numeral set for decimal position {position}",
            details={"position": position},
        )

    # Nothing above the top position; the range check keeps its digit <= 3.
    if position == len(NUMERAL_SETS):
        return numeral_set.this * digit

    if digit == 0:
        return ""
    if digit <= 3:
        return numeral_set.this * digit
    if digit == 4:
        return (numeral_set.down or numeral_set.this) + numeral_set.half
    if digit == 5:
        return numeral_set.half
    if digit <= 8:
        return numeral_set.half + numeral_set.this * (digit - 5)
    return (numeral_set.down or numeral_set.this) + numeral_set.next


# ─── Main Generator ──────────────────────────────────────────────────


def generate(decimal: int, notation: Notation = Notation.UNICODE) -> str:
    """Write `decimal` as a canonical Roman numeral.

    Args:
        decimal: An int in [0, 4 000 000).
        notation: UNICODE writes overlined numerals as letter + U+0305,
            ASCII writes them with a `_` prefix.

    Returns:
        The numeral, e.g. "MMCDXXI" for 2421, "I̅V̅DVI" for 4506 and "N"
        for 0.

    Raises:
        TypeMismatchError: If `decimal` is not an int.
        NumeralRangeError: If `decimal` is outside the supported range.
    """
    check_range(decimal)

    if decimal == 0:
        return ZERO_NUMERAL

    digits = str(decimal)
    output = "".join(
        digit_to_roman(len(digits) - i, int(digit)) for i, digit in enumerate(digits)
    )
    logger.debug("Generated %s for %d", output, decimal)

    if Notation(notation) is Notation.ASCII:
        return to_ascii(output)
    return output


def to_ascii(numeral: str) -> str:
    """Rewrite overlined numerals in prefix form: "I̅V̅DVI" -> "_I_VDVI"."""
    return _OVERLINED.sub(lambda m: MEGA_MODIFIER_PREFIX + m.group(1), numeral)
