import io

import pytest

from pipex.printf import format_string, is_conversion, printf


@pytest.mark.parametrize("text", ["%c", "%s", "%p", "%d", "%i", "%u", "%U", "%x", "%X", "%%"])
def test_is_conversion_accepts_known_letters(text):
    assert is_conversion(text) is True


@pytest.mark.parametrize("text", [None, "", "%", "%q", "d", "x%d"])
def test_is_conversion_rejects_others(text):
    assert is_conversion(text) is False


def test_plain_text_is_copied():
    assert format_string("hello world") == "hello world"


def test_percent_escape():
    assert format_string("100%%") == "100%"


def test_unknown_and_trailing_percent_are_literal():
    assert format_string("%q") == "%q"
    assert format_string("50%") == "50%"


def test_string_and_null_string():
    assert format_string("[%s]", "abc") == "[abc]"
    assert format_string("%s", None) == "(null)"


def test_char_from_str_and_int():
    assert format_string("%c", "z") == "z"
    assert format_string("%c", ord("k")) == "k"


@pytest.mark.parametrize("n", [0, 7, -42, 2147483647, -2147483648])
def test_decimal_round_trip(n):
    assert int(format_string("%d", n)) == n
    assert format_string("%i", n) == format_string("%d", n)


def test_decimal_wraps_to_32_bits():
    assert format_string("%d", 2147483648) == "-2147483648"


def test_unsigned_wraps_negative():
    assert format_string("%u", -1) == "4294967295"


@pytest.mark.parametrize("n", [0, 1, 255, 48879, 4294967295])
def test_hex_round_trip(n):
    lower = format_string("%x", n)
    upper = format_string("%X", n)
    assert int(lower, 16) == n
    assert upper == lower.upper()
    assert lower == lower.lower()


def test_pointer_null_and_address():
    assert format_string("%p", 0) == "(null)"
    assert format_string("%p", None) == "(null)"
    out = format_string("%p", 4096)
    assert out.startswith("0x")
    assert int(out[2:], 16) == 4096


def test_mixed_format():
    assert format_string("%s=%d%%", "x", 5) == "x=5%"


def test_unsupported_upper_u_raises():
    with pytest.raises(ValueError):
        format_string("%U", 3)


def test_missing_argument_raises():
    with pytest.raises(TypeError):
        format_string("%d %d", 1)


def test_none_format_raises():
    with pytest.raises(TypeError):
        format_string(None)


def test_printf_writes_and_counts():
    stream = io.StringIO()
    count = printf("%s:%x", "id", 171, stream=stream)
    assert stream.getvalue() == format_string("%s:%x", "id", 171)
    assert count == len(stream.getvalue())


def test_printf_defaults_to_stdout(capsys):
    count = printf("%d-%s", 12, "ab")
    assert capsys.readouterr().out == "12-ab"
    assert count == 5