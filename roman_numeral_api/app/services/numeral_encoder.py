"""Integer to Roman numeral encoding."""

from typing import Tuple

# Descending (value, symbol) pairs.  The subtractive forms are single
# entries, so one greedy pass gives the canonical numeral.
NUMERAL_TABLE: Tuple[Tuple[int, str], ...] = (
    (1000, "M"), (900, "CM"), (500, "D"), (400, "CD"),
    (100, "C"), (90, "XC"), (50, "L"), (40, "XL"),
    (10, "X"), (9, "IX"), (5, "V"), (4, "IV"), (1, "I"),
)

MIN_VALUE = 1
MAX_VALUE = 3999


def encode(number: int) -> str:
    """Return the Roman numeral for ``number``.

    ``number`` must lie in ``MIN_VALUE..MAX_VALUE``; callers validate
    it before calling.
    """
    result = []
    for value, symbol in NUMERAL_TABLE:
        while number >= value:
            result.append(symbol)
            number -= value
    return "".join(result)
