"""Input validation for numeric console entry."""

from __future__ import annotations

import math
from typing import Sequence, TextIO

_INVALID_MESSAGE = (
    "Entrada invalida. Por favor, solo numeros (enteros o decimales) "
    "mayores o iguales a 0\nIngrese nuevamente:"
)
_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1


def parse_non_negative(text: str) -> float:
    """Parse a single number >= 0 from a line, with nothing else on it."""
    stripped = text.strip()
    if not stripped or "_" in stripped:
        raise ValueError(f"not a number: {text!r}")
    value = float(stripped)
    if not value >= 0:
        raise ValueError(f"number must be >= 0: {text!r}")
    return value


def read_decimal(stdin: TextIO, stdout: TextIO) -> float:
    """Read lines until one holds a valid non-negative number; raise EOFError at end of input."""
    while True:
        line = stdin.readline()
        if not line:
            stdout.write("Error de entrada. Intente de nuevo:\n")
            raise EOFError("input ended before a valid number was entered")
        try:
            return parse_non_negative(line)
        except ValueError:
            stdout.write(_INVALID_MESSAGE)


def option_from_float(value: float) -> int:
    """Floor a number to a menu option; values outside the int range map to a sentinel."""
    if not math.isfinite(value):
        return _INT_MIN
    result = math.floor(value)
    if result < _INT_MIN or result > _INT_MAX:
        return _INT_MIN
    return result


def has_data(table: Sequence[Sequence[float]]) -> bool:
    """True if any value in the table is non-zero."""
    return any(value != 0 for row in table for value in row)