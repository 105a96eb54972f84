"""Classification of free-form episode labels such as ``"12_END"``."""

from __future__ import annotations

import re
from dataclasses import dataclass

from .utils import to_int32

LEADING_DIGITS_RE = re.compile(r"^([0-9]+)")
UNDERSCORE_NUMBER_RE = re.compile(r"_([0-9]+)")

DEFAULT_EPISODE_NUMBER = 1
END_MARKER_SUFFIX = "_end"


@dataclass(frozen=True, slots=True)
class ParsedLabel:
    """Structured view of a raw episode label."""

    raw_label: str
    base_number: int
    has_underscore_suffix: bool = False
    has_dash_range: bool = False
    is_end_marker: bool = False
    display_title: str = f"Episode {DEFAULT_EPISODE_NUMBER}"


def digits_to_int32(digits: str) -> int:
    """Convert a run of ASCII digits to a wrapped 32-bit integer.

    ``10**32`` is a multiple of ``2**32``, so only the last 32 digits affect
    the wrapped value and arbitrarily long runs stay cheap to convert.
    """

    return to_int32(int(digits[-32:]))


def has_dash_range(label: str) -> bool:
    return "-" in label and len(label.split("-")) > 1


def is_end_marker(label: str) -> bool:
    return label.lower().endswith(END_MARKER_SUFFIX)


def part_number_key(label: str) -> tuple[int, str] | None:
    """Return a sort key for the "_<digits>" part of ``label``, if any.

    The key is ``(digit count, digits)`` with leading zeros dropped, which
    orders like the integer value without converting the digits.
    """

    match = UNDERSCORE_NUMBER_RE.search(label)
    if match is None:
        return None
    digits = match.group(1).lstrip("0") or "0"
    return len(digits), digits


def parse_label(raw_label: str | None) -> ParsedLabel:
    """Classify an upstream episode label.

    Never raises: labels without a leading number default to episode 1 and
    keep their own text as the display title.
    """

    label = (raw_label or "").strip()
    if not label:
        return ParsedLabel(raw_label="", base_number=DEFAULT_EPISODE_NUMBER)

    end_marker = is_end_marker(label)
    match = LEADING_DIGITS_RE.match(label)
    if match is None:
        return ParsedLabel(
            raw_label=label,
            base_number=DEFAULT_EPISODE_NUMBER,
            is_end_marker=end_marker,
            display_title=label,
        )

    base_number = digits_to_int32(match.group(1))
    underscore = "_" in label
    dash = has_dash_range(label)
    if underscore or dash:
        display_title = f"Episode {label}"
    else:
        display_title = f"Episode {base_number}"

    return ParsedLabel(
        raw_label=label,
        base_number=base_number,
        has_underscore_suffix=underscore,
        has_dash_range=dash,
        is_end_marker=end_marker,
        display_title=display_title,
    )
