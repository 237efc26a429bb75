"""Configuration for the CLI and HTTP API.

Environment Variables:
    ROMAN_NOTATION: Output notation for overlined numerals, "unicode" (X̅,
        default) or "ascii" (_X)
    ROMAN_LOG_LEVEL: Log level used by the CLI (default "WARNING")

Entry points load a `.env` file first, so either can live there.
"""
import os

from .models import Notation


def default_notation() -> Notation:
    """Notation from ROMAN_NOTATION; raises ValueError on an unknown name."""
    name = os.getenv("ROMAN_NOTATION", Notation.UNICODE.value).strip().lower()
    try:
        return Notation(name)
    except ValueError:
        choices = ", ".join(n.value for n in Notation)
        raise ValueError(f"Invalid ROMAN_NOTATION {name!r} (expected one of: {choices})") from None


def log_level() -> str:
    return os.getenv("ROMAN_LOG_LEVEL", "WARNING").strip().upper()
