import io
import os

import pytest

from ftkit.printf import (
    format_char,
    format_hex,
    format_nbr,
    format_ptr,
    format_str,
    format_unsigned,
    printf,
    sprintf,
)


def test_format_char_accepts_str_and_int():
    assert format_char("a") == "a"
    assert format_char(ord("Z")) == "Z"
    assert format_char(ord("q") + 256) == "q"


def test_format_char_rejects_long_string():
    with pytest.raises(ValueError):
        format_char("ab")


def test_format_str_null_and_value():
    assert format_str(None) == "(null)"
    assert format_str("hello") == "hello"
    assert format_str("") == ""


def test_format_str_rejects_non_string():
    with pytest.raises(TypeError):
        format_str(42)


def test_format_ptr_null():
    assert format_ptr(None) == "(nil)"
    assert format_ptr(0) == "(nil)"


def test_format_ptr_pinned_value():
    assert format_ptr(255) == "0xff"


@pytest.mark.parametrize("address", [1, 16, 0xDEADBEEF, 0x7FFFFFFFFFFF])
def test_format_ptr_round_trip(address):
    text = format_ptr(address)
    assert text.startswith("0x")
    assert text[2:] == text[2:].lower()
    assert int(text, 16) == address


def test_format_ptr_object_uses_identity():
    obj = object()
    assert int(format_ptr(obj), 16) == id(obj)


@pytest.mark.parametrize("n", [0, 1, -1, 42, -2147483648, 2147483647])
def test_format_nbr_round_trip(n):
    assert int(format_nbr(n)) == n


def test_format_nbr_wraps_to_int32():
    assert format_nbr(2**31) == "-2147483648"
    assert int(format_nbr(2**32 + 5)) == 5


def test_format_nbr_rejects_non_int():
    with pytest.raises(TypeError):
        format_nbr("12")
    with pytest.raises(TypeError):
        format_nbr(True)


def test_format_unsigned():
    assert format_unsigned(0) == "0"
    assert int(format_unsigned(-1)) == 2**32 - 1
    assert int(format_unsigned(123456)) == 123456


def test_format_hex_zero():
    assert format_hex(0, "x") == "0"
    assert format_hex(0, "X") == "0"


def test_format_hex_case():
    assert format_hex(255, "X") == "FF"
    lower = format_hex(0xABCDEF, "x")
    upper = format_hex(0xABCDEF, "X")
    assert lower == lower.lower()
    assert upper == upper.upper()
    assert lower.upper() == upper


@pytest.mark.parametrize("n", [1, 15, 16, 4096, 0xFFFFFFFF])
def test_format_hex_round_trip(n):
    assert int(format_hex(n, "x"), 16) == n


def test_format_hex_negative_wraps():
    assert int(format_hex(-1, "x"), 16) == 2**32 - 1


def test_sprintf_plain_text():
    assert sprintf("hello world") == "hello world"
    assert sprintf("") == ""


def test_sprintf_percent_escape():
    assert sprintf("%%") == "%"
    assert sprintf("100%%!") == "100%!"


def test_sprintf_unknown_conversion_is_echoed():
    assert sprintf("%q") == "%q"
    assert sprintf("a%kb") == "a%kb"


def test_sprintf_conversions_combined():
    result = sprintf("%s=%d", "x", -7)
    assert result == "x=" + format_nbr(-7)
    assert sprintf("%c%c", "o", ord("k")) == "ok"
    assert sprintf("%s", None) == "(null)"
    assert sprintf("%p", None) == "(nil)"
    assert sprintf("%i", 12) == format_nbr(12)
    assert sprintf("%u", -1) == format_unsigned(-1)
    assert sprintf("%x|%X", 3054, 3054) == format_hex(3054, "x") + "|" + format_hex(3054, "X")


def test_sprintf_extra_args_ignored():
    assert sprintf("%s", "a", "b") == "a"


def test_sprintf_missing_argument():
    with pytest.raises(TypeError):
        sprintf("%d")


def test_sprintf_lone_trailing_percent():
    with pytest.raises(ValueError):
        sprintf("abc%")


def test_printf_to_stream_returns_length():
    stream = io.StringIO()
    count = printf("%s-%d", "abc", 42, file=stream)
    assert stream.getvalue() == "abc-" + format_nbr(42)
    assert count == len(stream.getvalue())


def test_printf_counts_nul_char():
    stream = io.StringIO()
    count = printf("%c", 0, file=stream)
    assert count == 1
    assert stream.getvalue() == "\0"


def test_printf_to_file_descriptor():
    read_fd, write_fd = os.pipe()
    try:
        count = printf("%s %%", "hi", file=write_fd)
    finally:
        os.close(write_fd)
    with os.fdopen(read_fd, "rb") as reader:
        data = reader.read()
    assert data == b"hi %"
    assert count == len(data)


def test_printf_defaults_to_stdout(capsys):
    count = printf("%s", "out")
    assert capsys.readouterr().out == "out"
    assert count == 3