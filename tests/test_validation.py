import io

import pytest

from calidad_aire.validation import (
    has_data,
    option_from_float,
    parse_non_negative,
    read_decimal,
)


@pytest.mark.parametrize(
    "text, expected",
    [("3.5", 3.5), (" 7 \n", 7.0), ("0", 0.0), ("1e2\n", 100.0), (".5", 0.5)],
)
def test_parse_valid(text, expected):
    assert parse_non_negative(text) == expected


@pytest.mark.parametrize("text", ["-1", "abc", "1 2", "", "\n", "nan", "1_0", "2x"])
def test_parse_invalid(text):
    with pytest.raises(ValueError):
        parse_non_negative(text)


def test_read_decimal_retries_until_valid():
    out = io.StringIO()
    value = read_decimal(io.StringIO("abc\n-2\n4\n"), out)
    assert value == 4.0
    assert out.getvalue().count("Entrada invalida") == 2


def test_read_decimal_first_line_valid_prints_nothing():
    out = io.StringIO()
    assert read_decimal(io.StringIO("12.25\n"), out) == 12.25
    assert out.getvalue() == ""


def test_read_decimal_eof():
    out = io.StringIO()
    with pytest.raises(EOFError):
        read_decimal(io.StringIO("bad\n"), out)
    assert "Error de entrada" in out.getvalue()


@pytest.mark.parametrize("value, expected", [(2.9, 2), (0.0, 0), (6.0, 6), (1.999, 1)])
def test_option_from_float(value, expected):
    assert option_from_float(value) == expected


def test_option_from_infinite_is_out_of_any_menu_range():
    assert option_from_float(float("inf")) < 1


def test_has_data():
    assert has_data([[0.0, 0.0], [0.0, 0.0]]) is False
    assert has_data([[0.0, 0.0], [0.0, 0.1]]) is True
    assert has_data([]) is False