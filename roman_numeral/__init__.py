"""
Roman Numeral — lenient reader, strict writer.

Architecture: text → Lexer → tokens → Parser → int;  int → Generator → text
Supports the vinculum (×1000) as X̅ (combining overline) or _X (ASCII prefix),
for values in [0, 4 000 000).
"""

from .exceptions import (
    EmptyInputError,
    InvalidNumeralError,
    NumeralRangeError,
    RomanNumeralError,
    TypeMismatchError,
    UnexpectedModifierError,
)
from .models import Notation
from .numeral import RomanNumeral, from_roman, to_roman

__version__ = "1.0.0"

__all__ = [
    "EmptyInputError",
    "InvalidNumeralError",
    "Notation",
    "NumeralRangeError",
    "RomanNumeral",
    "RomanNumeralError",
    "TypeMismatchError",
    "UnexpectedModifierError",
    "from_roman",
    "to_roman",
]
