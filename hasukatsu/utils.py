"""Utility helpers for the Hasukatsu provider."""

from __future__ import annotations

import re
from typing import Any


LEADING_INTEGER_RE = re.compile(r"^\s*([+-]?[0-9]+)")

_INT32_SPAN = 1 << 32
_INT32_MIN = -(1 << 31)


def to_int32(value: int) -> int:
    """Wrap an integer into the signed 32-bit range.

    Values outside ``[-2**31, 2**31 - 1]`` wrap modulo ``2**32`` the same way
    a bitwise ``| 0`` does in JavaScript, so ``2**31`` becomes ``-2**31``.
    """

    return (value - _INT32_MIN) % _INT32_SPAN + _INT32_MIN


def parse_leading_int(value: Any) -> int | None:
    """Return the integer at the start of ``value`` or ``None``.

    Mirrors ``parseInt`` semantics: surrounding whitespace and trailing junk
    are ignored, so ``" 42abc"`` yields ``42``.
    """

    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if value is None:
        return None
    match = LEADING_INTEGER_RE.match(str(value))
    if not match:
        return None
    return int(match.group(1))


def first_text(*candidates: Any) -> str | None:
    """Return the first candidate that is a non-blank string."""

    for candidate in candidates:
        if isinstance(candidate, str) and candidate.strip():
            return candidate
    return None
