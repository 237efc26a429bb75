"""
Parser: token sequence -> integer.

The parser is a lenient reader. Rather than insisting on canonical
subtractive pairs, it reads the tokens in runs of equal value and decides
for each whole run whether it adds to or subtracts from the total. Both of
these historical spellings therefore read as 1983:

    MCMLXXXIII   (standard)
    MCMXXCIII    M, CM, XXC, III
    MCMXXCIIV    M, CM, XXC, IIV
"""

from __future__ import annotations

from collections.abc import Iterable

from .models import Token


def parse(tokens: Iterable[Token]) -> int:
    """Reduce already-lexed tokens to their integer value.

    Never raises; an empty sequence is 0.

    Algorithm:
        `run_sum` accumulates the current run of equal-valued tokens. When a
        token with a different value arrives, the finished run is flushed
        into `total`: subtracted if the new value is larger (the run was a
        subtractive prefix, like the I in IV), added otherwise. The last run
        has nothing after it and is always added.

        A zero token (N) resets `previous_value` to 0, so the run after it
        is always additive.
    """
    total = 0
    previous_value = 0
    run_sum = 0

    for token in tokens:
        value = token.value
        if value == previous_value:
            run_sum += value
        else:
            if value > previous_value and previous_value > 0:
                total -= run_sum
            else:
                total += run_sum
            run_sum = value
        previous_value = value

    return total + run_sum
