"""
Lexer: numeral text -> token sequence.

Both ×1000 notations are folded into one token alphabet here, so the parser
never sees `_` or a bare combining overline:

    "I̅V̅DVI"  ->  [I̅, V̅, D, V, I]
    "_I_VDVI" ->  [I̅, V̅, D, V, I]

The lexer does no case folding; callers uppercase first.
"""

from __future__ import annotations

from .exceptions import EmptyInputError, InvalidNumeralError, UnexpectedModifierError
from .models import Token
from .tokens import (
    MEGA_MODIFIER_POSTFIX,
    MEGA_MODIFIER_PREFIX,
    MODIFIABLE_TOKENS,
    lookup_token,
    to_mega,
)


def lex(text: str) -> list[Token]:
    """Split numeral text into tokens, left to right.

    Args:
        text: Uppercase numeral text, e.g. "MCMLIV", "X̅MM" or "_XMM".

    Returns:
        The tokens in reading order.

    Raises:
        EmptyInputError: If `text` is empty.
        UnexpectedModifierError: If `_` is followed by anything other than
            one of MDCLXVI, or if a letter carries both `_` and a
            combining overline. A trailing `_` is ignored.
        InvalidNumeralError: If a symbol is not a numeral.
    """
    if not text:
        raise EmptyInputError("Invalid numeral: empty string")

    tokens: list[Token] = []
    mega = False
    for i, char in enumerate(text):
        if mega and char not in MODIFIABLE_TOKENS:
            raise UnexpectedModifierError(
                f"Unexpected character after {MEGA_MODIFIER_PREFIX!r}: {char!r}",
                details={"input": text, "position": i, "char": char},
            )

        if char == MEGA_MODIFIER_PREFIX:
            mega = True
            continue

        # Combining overlines were consumed by the look-ahead below; stray
        # ones are skipped too.
        if char == MEGA_MODIFIER_POSTFIX:
            continue

        symbol = char
        if text[i + 1 : i + 2] == MEGA_MODIFIER_POSTFIX:
            symbol = text[i : i + 2]
            if mega:
                raise UnexpectedModifierError(
                    f"Cannot combine {MEGA_MODIFIER_PREFIX!r} with an overline: "
                    f"{MEGA_MODIFIER_PREFIX}{symbol}",
                    details={"input": text, "position": i, "symbol": symbol},
                )
        elif mega:
            symbol = to_mega(char)

        token = lookup_token(symbol)
        if token is None:
            raise InvalidNumeralError(
                f"Invalid numeral: {symbol}",
                details={"input": text, "position": i, "symbol": symbol},
            )

        mega = False
        tokens.append(token)

    return tokens
