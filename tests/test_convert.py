import pytest
from hypothesis import given
from hypothesis import strategies as st

from ftlib.convert import atoi, itoa

int32 = st.integers(min_value=-(2**31), max_value=2**31 - 1)


def test_atoi_plain_numbers():
    assert atoi("42") == 42
    assert atoi("-42") == -42
    assert atoi("+7") == 7


def test_atoi_stops_at_non_digit():
    assert atoi("12abc") == 12
    assert atoi("-8 9") == -8


def test_atoi_empty_is_zero():
    assert atoi("") == 0


def test_atoi_does_not_skip_whitespace():
    assert atoi("  42") == atoi("")


def test_atoi_single_sign_only():
    assert atoi("--5") == atoi("")
    assert atoi("+-5") == atoi("")


def test_atoi_positive_beyond_int64_gives_minus_one():
    assert atoi("9223372036854775808") == -1


def test_atoi_negative_beyond_int64_gives_zero():
    assert atoi("-9223372036854775808") == 0


def test_atoi_wraps_into_int32():
    assert atoi("2147483648") == -2147483648


@given(int32)
def test_round_trip(n):
    assert atoi(itoa(n)) == n


@given(int32, st.text(alphabet="xyz -+", max_size=5))
def test_trailing_text_ignored(n, tail):
    assert atoi(itoa(n) + tail) == n


def test_itoa_extremes():
    assert itoa(-2147483648) == "-2147483648"
    assert itoa(0) == "0"


@given(st.integers())
def test_itoa_parses_back(n):
    assert int(itoa(n)) == n


def test_itoa_rejects_non_int():
    with pytest.raises(TypeError):
        itoa("5")