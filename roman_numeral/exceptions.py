"""
Custom exception hierarchy for Roman numeral conversion.

Each exception type maps to one category of conversion failure and carries a
machine-readable code, so the CLI and the HTTP API can report it without
string matching.
"""

from __future__ import annotations


class RomanNumeralError(Exception):
    """Base exception for all conversion failures."""

    def __init__(self, code: str, message: str, details: dict | None = None):
        self.code = code
        self.message = message
        self.details = details or {}
        super().__init__(message)


class NumeralRangeError(RomanNumeralError, ValueError):
    """The integer cannot be written as a numeral (outside [0, 4 000 000))."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__("OUT_OF_RANGE", message, details)


class EmptyInputError(RomanNumeralError, ValueError):
    """An empty string is not a numeral."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__("EMPTY_INPUT", message, details)


class InvalidNumeralError(RomanNumeralError, ValueError):
    """A symbol in the input does not match any known numeral."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__("INVALID_NUMERAL", message, details)


class UnexpectedModifierError(RomanNumeralError, ValueError):
    """The `_` prefix is misplaced, or combined with a Unicode overline."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__("UNEXPECTED_MODIFIER", message, details)


class TypeMismatchError(RomanNumeralError, TypeError):
    """An operand is neither a RomanNumeral nor an int."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__("TYPE_MISMATCH", message, details)


class GeneratorError(RomanNumeralError):
    """Internal generator failure (no numeral set for a decimal position)."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__("GENERATOR_FAILURE", message, details)
