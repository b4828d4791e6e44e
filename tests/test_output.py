import io

import pytest

from pushswap.output import put_char, put_endl, put_nbr, put_str


def test_put_char_str():
    out = io.StringIO()
    put_char("z", out)
    assert out.getvalue() == "z"


def test_put_char_int():
    out = io.StringIO()
    put_char(ord("A"), out)
    assert out.getvalue() == "A"


def test_put_char_rejects_long_string():
    with pytest.raises(ValueError):
        put_char("ab", io.StringIO())


def test_put_str():
    out = io.StringIO()
    put_str("hello", out)
    put_str("", out)
    assert out.getvalue() == "hello"


def test_put_endl():
    out = io.StringIO()
    put_endl("hello", out)
    assert out.getvalue() == "hello\n"


@pytest.mark.parametrize("n", [0, 7, -432, 2147483647])
def test_put_nbr(n):
    out = io.StringIO()
    put_nbr(n, out)
    assert int(out.getvalue()) == n


def test_put_nbr_minimum():
    out = io.StringIO()
    put_nbr(-2147483648, out)
    assert out.getvalue() == "-2147483648"


def test_put_nbr_out_of_range():
    with pytest.raises(OverflowError):
        put_nbr(2147483648, io.StringIO())


def test_default_stream_is_stdout(capsys):
    put_endl("Error")
    assert capsys.readouterr().out == "Error\n"