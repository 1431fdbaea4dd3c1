"""Query-string integer parsing."""
import pytest

from users_api.dependencies import parse_int, parse_optional_int


@pytest.mark.parametrize(
    ("raw", "expected"),
    [(None, 20), ("", 20), ("abc", 20), ("1.5", 20), ("-1", 20), ("0", 0), ("7", 7), (" 9 ", 9)],
)
def test_parse_int_falls_back_to_default(raw, expected) -> None:
    assert parse_int(raw, 20) == expected


@pytest.mark.parametrize(
    ("raw", "expected"),
    [(None, None), ("", None), ("x", None), ("0", 0), ("3", 3), ("-2", -2)],
)
def test_parse_optional_int(raw, expected) -> None:
    assert parse_optional_int(raw) == expected


@pytest.mark.parametrize(
    "raw",
    ["99999999999999999999", str(2**63), "-99999999999999999999"],
)
def test_parse_int_treats_overflow_as_unparseable(raw) -> None:
    assert parse_int(raw, 20) == 20


def test_parse_int_accepts_largest_bigint() -> None:
    assert parse_int(str(2**63 - 1), 20) == 2**63 - 1


@pytest.mark.parametrize("raw", ["99999999999999999999", str(2**31), str(-(2**31) - 1)])
def test_parse_optional_int_treats_out_of_range_as_missing(raw) -> None:
    assert parse_optional_int(raw) is None
