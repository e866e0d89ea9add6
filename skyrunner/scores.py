"""High-score storage and number formatting."""

from __future__ import annotations

from os import PathLike
from typing import Union

HIGH_SCORE_READ_LIMIT = 100

_DIGITS = "0123456789"


def parse_int(text: str) -> int:
    """Read a leading integer from ``text``.

    Every ``+`` or ``-`` met flips the sign, digits accumulate, and any
    other character ends the number.
    """
    sign = 1
    result = 0
    for char in text:
        if char in "+-":
            sign = -sign
        elif char in _DIGITS:
            result = result * 10 + _DIGITS.index(char)
        else:
            break
    return sign * result


def int_to_str(n: int) -> str:
    """Decimal text of a non-negative score."""
    if n < 0:
        raise ValueError(f"score must not be negative: {n}")
    return str(n)


def read_high_score(path: Union[str, PathLike]) -> str:
    """Return the start of the high-score file as text."""
    with open(path, "rb") as handle:
        data = handle.read(HIGH_SCORE_READ_LIMIT)
    return data.decode("utf-8", errors="replace")


def update_high_score(score: int, high_score: int, path: Union[str, PathLike]) -> bool:
    """Write ``score`` over the start of the file when it beats ``high_score``.

    The file is not truncated. Returns whether the file was written.
    """
    with open(path, "r+b") as handle:
        if high_score < score:
            handle.write(int_to_str(score).encode("ascii"))
            return True
    return False