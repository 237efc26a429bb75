"""
RomanNumeral — an integer that knows how to spell itself in Roman numerals.

    >>> n = RomanNumeral("MCMXXCIIV")
    >>> int(n)
    1983
    >>> str(n + 20)
    'MMIII'
    >>> 20 + RomanNumeral(1983) == 2003
    True

Construction from text validates eagerly (lex + parse). Construction from
an int stores the int and only generates the text on first access.
"""

from __future__ import annotations

import functools
import logging
import operator
from typing import Callable, Union

from .exceptions import TypeMismatchError
from .generator import check_range, generate
from .lexer import lex
from .models import Notation
from .parser import parse

logger = logging.getLogger(__name__)

Operand = Union["RomanNumeral", int]


def _truncating_div(a: int, b: int) -> int:
    """Integer division rounding toward zero."""
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


@functools.total_ordering
class RomanNumeral:
    """Immutable Roman numeral value in [0, 4 000 000).

    Arithmetic and comparisons work on the integer value and accept a plain
    int on either side. Arithmetic results are new RomanNumerals and are
    range-checked again, so `RomanNumeral(1) - 2` raises NumeralRangeError.
    """

    __slots__ = ("_decimal", "_roman")

    def __init__(self, value: Union[int, str]):
        if isinstance(value, str):
            roman = value.upper()
            self._decimal = check_range(parse(lex(roman)))
            self._roman: str | None = roman
        elif isinstance(value, int) and not isinstance(value, bool):
            self._decimal = check_range(value)
            self._roman = None  # generated lazily, see `roman`
        else:
            raise TypeMismatchError(
                f"Expected int or str, got {type(value).__name__}",
                details={"type": type(value).__name__},
            )
        logger.debug("Created RomanNumeral(%r) = %d", value, self._decimal)

    @classmethod
    def from_int(cls, value: int) -> RomanNumeral:
        if isinstance(value, str):
            raise TypeMismatchError("Expected int, got str", details={"type": "str"})
        return cls(value)

    @classmethod
    def from_text(cls, text: str) -> RomanNumeral:
        if not isinstance(text, str):
            raise TypeMismatchError(
                f"Expected str, got {type(text).__name__}",
                details={"type": type(text).__name__},
            )
        return cls(text)

    # ── Representations ─────────────────────────────────────────────

    @property
    def decimal(self) -> int:
        return self._decimal

    @property
    def roman(self) -> str:
        """The numeral text: uppercased input, or the generated canonical form.

        The cache write is idempotent, so concurrent first reads at worst
        generate the same string twice.
        """
        if self._roman is None:
            self._roman = generate(self._decimal)
        return self._roman

    def canonical(self, notation: Notation = Notation.UNICODE) -> str:
        """Generator output for this value, whatever text it was built from."""
        return generate(self._decimal, notation)

    def to_int(self) -> int:
        return self._decimal

    def to_text(self, notation: Notation | None = None) -> str:
        if notation is None:
            return self.roman
        return self.canonical(notation)

    def __int__(self) -> int:
        return self._decimal

    def __index__(self) -> int:
        return self._decimal

    def __str__(self) -> str:
        return self.roman

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.roman!r})"

    def __hash__(self) -> int:
        return hash(self._decimal)

    def __setattr__(self, name: str, value: object) -> None:
        if name == "_decimal" and hasattr(self, "_decimal"):
            raise AttributeError(f"{type(self).__name__} is immutable")
        object.__setattr__(self, name, value)

    # ── Comparison ──────────────────────────────────────────────────

    def compare(self, other: Operand) -> int:
        """-1, 0 or 1 as this value is less than, equal to or greater than `other`."""
        theirs = self._coerce(other)
        return (self._decimal > theirs) - (self._decimal < theirs)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, RomanNumeral):
            return self._decimal == other._decimal
        if isinstance(other, int) and not isinstance(other, bool):
            return self._decimal == other
        return NotImplemented

    def __lt__(self, other: Operand) -> bool:
        return self._decimal < self._coerce(other)

    # ── Arithmetic ──────────────────────────────────────────────────

    def _coerce(self, other: object) -> int:
        if isinstance(other, RomanNumeral):
            return other._decimal
        if isinstance(other, int) and not isinstance(other, bool):
            return other
        raise TypeMismatchError(
            f"Unable to coerce {type(other).__name__} to {type(self).__name__}",
            details={"type": type(other).__name__},
        )

    def _op(self, func: Callable[[int, int], int], other: Operand, reflected: bool = False) -> RomanNumeral:
        theirs = self._coerce(other)
        if reflected:
            return type(self)(func(theirs, self._decimal))
        return type(self)(func(self._decimal, theirs))

    def __add__(self, other: Operand) -> RomanNumeral:
        return self._op(operator.add, other)

    def __radd__(self, other: Operand) -> RomanNumeral:
        return self._op(operator.add, other, reflected=True)

    def __sub__(self, other: Operand) -> RomanNumeral:
        return self._op(operator.sub, other)

    def __rsub__(self, other: Operand) -> RomanNumeral:
        return self._op(operator.sub, other, reflected=True)

    def __mul__(self, other: Operand) -> RomanNumeral:
        return self._op(operator.mul, other)

    def __rmul__(self, other: Operand) -> RomanNumeral:
        return self._op(operator.mul, other, reflected=True)

    def __truediv__(self, other: Operand) -> RomanNumeral:
        return self._op(_truncating_div, other)

    def __rtruediv__(self, other: Operand) -> RomanNumeral:
        return self._op(_truncating_div, other, reflected=True)

    __floordiv__ = __truediv__
    __rfloordiv__ = __rtruediv__

    add = __add__
    subtract = __sub__
    multiply = __mul__
    divide = __truediv__


# ─── Shortcuts ───────────────────────────────────────────────────────


def to_roman(value: int, notation: Notation = Notation.UNICODE) -> str:
    """2421 -> "MMCDXXI"."""
    return RomanNumeral.from_int(value).to_text(notation)


def from_roman(text: str) -> int:
    """"mmcdxxi" -> 2421."""
    return RomanNumeral.from_text(text).decimal
