import string

import pytest

from pipex.chars import (
    absolute,
    absolute_long,
    is_alnum,
    is_alpha,
    is_ascii,
    is_digit,
    is_print,
    to_lower,
    to_upper,
)

CODES = range(-5, 300)
PRINTABLE = set(string.printable) - set("\t\n\r\x0b\x0c")


def _char(code):
    return chr(code) if code >= 0 else ""


def test_is_alpha_matches_ascii_letters():
    assert [c for c in CODES if is_alpha(c)] == [ord(ch) for ch in sorted(string.ascii_letters)]


def test_is_digit_matches_ascii_digits():
    assert [c for c in CODES if is_digit(c)] == [ord(ch) for ch in string.digits]


def test_is_alnum_is_union_of_alpha_and_digit():
    for c in CODES:
        assert is_alnum(c) == (is_alpha(c) or is_digit(c))


def test_is_ascii_bounds():
    assert is_ascii(0) is True
    assert is_ascii(127) is True
    assert is_ascii(128) is False
    assert is_ascii(-1) is False


def test_is_print_matches_printable_set():
    for c in CODES:
        assert is_print(c) == (_char(c) in PRINTABLE and c >= 0)


def test_classifiers_accept_strings():
    assert is_alpha("q") is True
    assert is_digit("7") is True
    assert is_alpha("7") is False
    assert is_print(" ") is True


def test_to_upper_on_strings():
    assert "".join(to_upper(ch) for ch in string.ascii_lowercase) == string.ascii_uppercase
    assert "".join(to_upper(ch) for ch in string.punctuation) == string.punctuation


def test_to_lower_on_strings():
    assert "".join(to_lower(ch) for ch in string.ascii_uppercase) == string.ascii_lowercase
    assert "".join(to_lower(ch) for ch in string.digits) == string.digits


def test_case_conversion_on_codes_round_trips():
    for ch in string.ascii_lowercase:
        assert to_lower(to_upper(ord(ch))) == ord(ch)
        assert to_upper(ord(ch)) == ord(ch.upper())


def test_case_conversion_leaves_non_letters():
    for c in (0, 64, 91, 96, 123, 200):
        assert to_upper(c) == c
        assert to_lower(c) == c


def test_multi_character_string_rejected():
    with pytest.raises(ValueError):
        is_alpha("ab")


def test_wrong_type_rejected():
    with pytest.raises(TypeError):
        to_upper(3.5)


@pytest.mark.parametrize("x", [0, 1, 42, 2147483647])
def test_absolute_of_non_negative_is_identity(x):
    assert absolute(x) == x
    assert absolute(-x) == x


@pytest.mark.parametrize("x", [0, 7, 9223372036854775807])
def test_absolute_long(x):
    assert absolute_long(-x) == x
    assert absolute_long(x) == x