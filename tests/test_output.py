import io

import pytest
from hypothesis import given
from hypothesis import strategies as st

from pushswap.output import (
    format_printf,
    printf,
    put_char,
    put_endl,
    put_nbr,
    put_str,
)


def test_put_char_string_and_code():
    buf = io.StringIO()
    put_char("x", buf)
    put_char(ord("y"), buf)
    assert buf.getvalue() == "xy"


def test_put_str_and_none():
    buf = io.StringIO()
    put_str("BIG", buf)
    put_str(None, buf)
    assert buf.getvalue() == "BIG"


def test_put_endl_adds_newline():
    buf = io.StringIO()
    put_endl("hello", buf)
    assert buf.getvalue() == "hello\n"


@pytest.mark.parametrize("n", [-1234, 0, 7, -2147483648, 2147483647])
def test_put_nbr_round_trip(n):
    buf = io.StringIO()
    put_nbr(n, buf)
    assert int(buf.getvalue()) == n


def test_null_string_and_pointer():
    assert format_printf("%s", None) == "(null)"
    assert format_printf("%p", None) == "(nil)"
    assert format_printf("%p", 0) == "(nil)"


def test_pointer_hex():
    out = format_printf("%p", 255)
    assert out.startswith("0x")
    assert int(out[2:], 16) == 255
    assert out == out.lower()


def test_hex_case():
    low = format_printf("%x", 4781)
    up = format_printf("%X", 4781)
    assert int(low, 16) == 4781
    assert low == low.lower()
    assert up == up.upper()
    assert low.upper() == up


def test_unsigned_and_hex_wrap_negative():
    assert format_printf("%u", -1) == "4294967295"
    assert format_printf("%x", -1) == "ffffffff"


def test_percent_and_char():
    assert format_printf("100%%") == "100%"
    assert ord(format_printf("%c", 65)) == 65
    assert format_printf("%c", "z") == "z"


def test_unknown_conversion_consumes_nothing():
    assert format_printf("%q%d", 7) == "7"


def test_trailing_percent_dropped():
    assert format_printf("ab%") == "ab"


def test_missing_argument_raises():
    with pytest.raises(TypeError):
        format_printf("%d %d", 1)


def test_printf_writes_and_counts():
    buf = io.StringIO()
    count = printf("abc %d %s", 5, "jonkler", file=buf)
    assert buf.getvalue() == format_printf("abc %d %s", 5, "jonkler")
    assert count == len(buf.getvalue())


@given(st.integers(min_value=-(2**31), max_value=2**31 - 1))
def test_signed_round_trip(n):
    assert int(format_printf("%d", n)) == n
    assert int(format_printf("%i", n)) == n


@given(st.integers(min_value=0, max_value=2**32 - 1))
def test_unsigned_hex_round_trip(n):
    assert int(format_printf("%u", n)) == n
    assert int(format_printf("%x", n), 16) == n
    assert int(format_printf("%X", n), 16) == n


@given(st.text(alphabet=st.characters(blacklist_characters="%")))
def test_plain_text_unchanged(text):
    assert format_printf(text) == text