"""A small printf-style formatter used for console messages."""

from __future__ import annotations

import operator
import re
import sys
from typing import Any, Iterator

_SPEC = re.compile(r"%(\n|lld|l[di]|h[di]|[^\n])?")

_UINT_RANGE = 1 << 32
_SHORT_HALF = 1 << 15
_SHORT_RANGE = 1 << 16


def to_octal(n: int) -> str:
    """Octal digits of ``n``, with a leading minus when negative."""
    return format(operator.index(n), "o")


def to_hex(n: int, upper: bool = False) -> str:
    """Hex digits of ``n``; zero and negative numbers give no digits."""
    n = operator.index(n)
    if n <= 0:
        return ""
    return format(n, "X" if upper else "x")


def to_binary(n: int) -> str:
    """Binary digits of ``n``; zero and negative numbers give no digits."""
    n = operator.index(n)
    if n <= 0:
        return ""
    return format(n, "b")


def _escape_char(char: str) -> str:
    code = ord(char)
    if code < 32:
        return f"\\00{code}"
    if code >= 127:
        return f"\\0{code}"
    return char


def escape_nonprintable(text: str) -> str:
    """Replace control and non-ASCII characters with backslash codes."""
    return "".join(_escape_char(char) for char in text)


def _take(args: Iterator[Any]) -> Any:
    try:
        return next(args)
    except StopIteration:
        raise ValueError("not enough arguments for format string") from None


def _char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"%c needs a single character, got {value!r}")
        return value
    return chr(operator.index(value) % 256)


def _convert(spec: str, args: Iterator[Any]) -> str:
    if spec == "%":
        return "%"
    if spec in ("d", "i") or spec.startswith("l"):
        return str(operator.index(_take(args)))
    if spec in ("hd", "hi"):
        value = operator.index(_take(args))
        return str((value + _SHORT_HALF) % _SHORT_RANGE - _SHORT_HALF)
    if spec == "b":
        return to_binary(_take(args))
    if spec == "u":
        return str(operator.index(_take(args)) % _UINT_RANGE)
    if spec == "s":
        return str(_take(args))
    if spec == "S":
        return escape_nonprintable(str(_take(args)))
    if spec == "c":
        return _char(_take(args))
    if spec == "o":
        return to_octal(_take(args))
    if spec == "x":
        return to_hex(_take(args), upper=False)
    if spec == "X":
        return to_hex(_take(args), upper=True)
    if spec == "p":
        return "0x" + to_hex(_take(args), upper=True)
    return ""


def format_printf(fmt: str, *args: Any) -> str:
    """Expand the conversions in ``fmt`` with ``args``.

    Unknown conversions print nothing and use no argument; a ``%``
    directly before a line break is kept as is.
    """
    remaining = iter(args)

    def replace(match: "re.Match[str]") -> str:
        spec = match.group(1)
        if spec is None:
            return ""
        if spec == "\n":
            return "%\n"
        return _convert(spec, remaining)

    return _SPEC.sub(replace, fmt)


def my_printf(fmt: str, *args: Any) -> None:
    """Format and write to standard output."""
    sys.stdout.write(format_printf(fmt, *args))