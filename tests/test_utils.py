import pytest

from hasukatsu.utils import first_text, parse_leading_int, to_int32


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (0, 0),
        (5, 5),
        (2**31 - 1, 2**31 - 1),
        (2**31, -(2**31)),
        (2**32, 0),
        (2**32 + 7, 7),
        (-(2**31) - 1, 2**31 - 1),
    ],
)
def test_to_int32_wraps_like_bitwise_or(value: int, expected: int) -> None:
    assert to_int32(value) == expected


def test_parse_leading_int_matches_parse_int_semantics():
    assert parse_leading_int("21") == 21
    assert parse_leading_int("  21abc") == 21
    assert parse_leading_int("-4") == -4
    assert parse_leading_int(77) == 77
    assert parse_leading_int("abc") is None
    assert parse_leading_int("") is None
    assert parse_leading_int(None) is None
    assert parse_leading_int(True) is None


def test_first_text_skips_blank_candidates():
    assert first_text(None, "  ", "Frieren", "Sousou no Frieren") == "Frieren"
    assert first_text(None, "") is None
