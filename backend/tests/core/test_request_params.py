"""Request Parameters — pagination clamping and id parsing.

Tests:
    - Missing, non-positive and non-numeric page → 1
    - Missing or non-numeric limit → 10; limit > 100 → 100; limit < 1 → 1
    - skip == (page - 1) * limit
    - Non-integer and out-of-range ids raise InvalidIdError
    - Oversized digit strings saturate instead of overflowing int parsing or OFFSET
"""

import pytest

from user_api.core.errors import InvalidIdError
from user_api.core.request_params import (
    MAX_DIGITS, MAX_SKIP, Pagination, parse_int, parse_user_id,
    resolve_pagination,
)


# --- parse_int ----------------------------------------------------------------

@pytest.mark.parametrize("raw, expected", [
    ("0", 0), ("42", 42), ("-7", -7), ("+3", 3), (" 12 ", 12),
])
def test_parse_int_accepts_decimal_integers(raw, expected):
    assert parse_int(raw) == expected


@pytest.mark.parametrize("raw", [None, "", " ", "abc", "1.5", "12abc", "0x10", "1e3"])
def test_parse_int_rejects_everything_else(raw):
    assert parse_int(raw) is None


# --- resolve_pagination -------------------------------------------------------

def test_defaults_when_missing():
    p = resolve_pagination()
    assert (p.page, p.limit, p.skip) == (1, 10, 0)


@pytest.mark.parametrize("page", ["0", "-1", "-100"])
def test_non_positive_page_becomes_one(page):
    assert resolve_pagination(page=page).page == 1


def test_limit_capped_at_one_hundred():
    assert resolve_pagination(limit="500").limit == 100


@pytest.mark.parametrize("limit", ["0", "-5"])
def test_limit_below_one_clamped_to_one(limit):
    assert resolve_pagination(limit=limit).limit == 1


def test_non_numeric_values_fall_back_to_defaults():
    p = resolve_pagination(page="two", limit="lots")
    assert (p.page, p.limit) == (1, 10)


@pytest.mark.parametrize("page, limit", [("1", "10"), ("3", "25"), ("7", "100"), ("2", "1")])
def test_skip_is_page_offset_times_limit(page, limit):
    p = resolve_pagination(page, limit)
    assert p.skip == (p.page - 1) * p.limit


def test_pagination_is_immutable():
    p = Pagination(page=2, limit=5)
    with pytest.raises(AttributeError):
        p.page = 3


# --- parse_user_id ------------------------------------------------------------

def test_parse_user_id_returns_int():
    assert parse_user_id("15") == 15


@pytest.mark.parametrize("raw", ["abc", "", "1.0", "7x", str(2 ** 31), str(-(2 ** 31) - 1)])
def test_parse_user_id_rejects_invalid(raw):
    with pytest.raises(InvalidIdError) as exc_info:
        parse_user_id(raw)
    assert exc_info.value.detail == "Invalid ID"
    assert exc_info.value.raw_id == raw


def test_parse_user_id_accepts_range_bounds():
    assert parse_user_id(str(2 ** 31 - 1)) == 2 ** 31 - 1
    assert parse_user_id("-1") == -1


# --- oversized input ----------------------------------------------------------

def test_parse_int_saturates_long_digit_strings():
    assert parse_int("1" * 5000) == 10 ** MAX_DIGITS
    assert parse_int("-" + "9" * 40) == -(10 ** MAX_DIGITS)


def test_parse_int_ignores_leading_zeros_when_counting_digits():
    assert parse_int("0" * 5000 + "7") == 7


def test_huge_limit_still_clamps_to_max():
    assert resolve_pagination(limit="9" * 5000).limit == 100


@pytest.mark.parametrize("page, limit", [
    ("9" * 5000, None), ("99999999999999999999", "1"), ("99999999999999999999", "100"),
])
def test_huge_page_keeps_skip_within_64_bits(page, limit):
    p = resolve_pagination(page, limit)
    assert 0 <= p.skip <= MAX_SKIP
    assert p.skip == (p.page - 1) * p.limit


def test_parse_user_id_rejects_oversized_digit_string():
    with pytest.raises(InvalidIdError):
        parse_user_id("1" * 5000)
