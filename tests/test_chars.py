import string

import pytest

from pushswap.chars import (
    is_alnum,
    is_alpha,
    is_ascii,
    is_digit,
    is_print,
    to_lower,
    to_upper,
)


@pytest.mark.parametrize("ch", list(string.ascii_letters))
def test_letters_are_alpha_and_alnum(ch):
    assert is_alpha(ch) is True
    assert is_alnum(ch) is True
    assert is_digit(ch) is False


@pytest.mark.parametrize("ch", list(string.digits))
def test_digits(ch):
    assert is_digit(ch) is True
    assert is_alnum(ch) is True
    assert is_alpha(ch) is False


@pytest.mark.parametrize("ch", ["@", "[", "`", "{", " ", "/", ":"])
def test_boundaries_are_not_alnum(ch):
    assert is_alnum(ch) is False


def test_int_codes_accepted():
    assert is_alpha(ord("q")) is True
    assert is_digit(ord("7")) is True
    assert is_alpha(200) is False


def test_ascii_range():
    assert is_ascii(0) is True
    assert is_ascii(127) is True
    assert is_ascii(128) is False
    assert is_ascii(-1) is False


def test_printable_range():
    assert is_print(" ") is True
    assert is_print("~") is True
    assert is_print(31) is False
    assert is_print(127) is False


def test_case_conversion_strings():
    assert to_upper("a") == "A"
    assert to_lower("P") == "p"
    assert to_upper("5") == "5"
    assert to_lower("z") == "z"


def test_case_conversion_keeps_int_type():
    assert to_upper(ord("m")) == ord("M")
    assert to_lower(ord("M")) == ord("m")
    assert to_upper(300) == 300


@pytest.mark.parametrize("ch", list(string.ascii_lowercase))
def test_case_round_trip(ch):
    assert to_lower(to_upper(ch)) == ch
    assert to_upper(ch) == ch.upper()


def test_multi_char_string_rejected():
    with pytest.raises(ValueError):
        is_alpha("ab")


def test_non_char_rejected():
    with pytest.raises(TypeError):
        is_digit(1.5)