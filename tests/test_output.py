import io

import pytest
from hypothesis import given
from hypothesis import strategies as st

from ftlib.output import putchar, putendl, putnbr, putstr


def test_putchar_writes_character():
    buf = io.StringIO()
    putchar("x", buf)
    putchar("y", buf)
    assert buf.getvalue() == "xy"


def test_putchar_rejects_longer_string():
    with pytest.raises(ValueError):
        putchar("ab", io.StringIO())


def test_putstr_writes_text():
    buf = io.StringIO()
    putstr("hello", buf)
    assert buf.getvalue() == "hello"


def test_putstr_none_writes_nothing():
    buf = io.StringIO()
    putstr(None, buf)
    assert buf.getvalue() == ""


def test_putendl_appends_newline():
    buf = io.StringIO()
    putendl("abc", buf)
    assert buf.getvalue() == "abc\n"


def test_putendl_none_writes_newline_only():
    buf = io.StringIO()
    putendl(None, buf)
    assert buf.getvalue() == "\n"


def test_putnbr_minimum_int():
    buf = io.StringIO()
    putnbr(-2147483648, buf)
    assert buf.getvalue() == "-2147483648"


@given(st.integers(min_value=-(2**31), max_value=2**31 - 1))
def test_putnbr_parses_back(n):
    buf = io.StringIO()
    putnbr(n, buf)
    assert int(buf.getvalue()) == n


def test_putnbr_rejects_non_int():
    with pytest.raises(TypeError):
        putnbr("12", io.StringIO())


def test_default_stream_is_stdout(capsys):
    putstr("hi")
    putnbr(5)
    putendl("!")
    assert capsys.readouterr().out == "hi5!\n"