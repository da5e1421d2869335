"""CSV tables on disk: saving, clearing and rendering them for display."""

from __future__ import annotations

import os
import re
from datetime import datetime
from typing import Sequence

from .models import Pollutant
from .presente import ZONE_NAMES

_NUMBER = (
    r"\s*([+-]?(?:\d+\.?\d*(?:[eE][+-]?\d+)?|\.\d+(?:[eE][+-]?\d+)?"
    r"|inf(?:inity)?|nan))"
)
_TABLE_ROW = re.compile(
    r'"([^"]{1,63})","([^"]{1,31})","([^"]{1,31})",([^,]{1,31}),([^,]{1,31}),([^\n]{1,31})'
)
_HISTORY_ROW = re.compile(
    r"([^,]{1,31})" + (r"," + _NUMBER) * 7, re.DOTALL | re.IGNORECASE
)
_PREDICTION_ROW = re.compile(
    r"([^,]{1,31})" + (r"," + _NUMBER) * 4, re.DOTALL | re.IGNORECASE
)

_TABLE_RULE = "------------------------------------------------------------------------------------------"
_HISTORY_RULE = "--------------------------------------------------------------------------"
_PREDICTION_RULE = "-------------------------------------------------------------"


def clear_table(path: str) -> None:
    """Truncate the file, creating it if missing."""
    with open(path, "w", encoding="utf-8"):
        pass


def save_table(
    levels: Sequence[Sequence[float]],
    limits: Sequence[Pollutant],
    path: str,
    title: str,
    now: datetime | None = None,
) -> None:
    """Append the levels as CSV rows, writing a header first if the file is new or empty."""
    stamp = (now or datetime.now()).strftime("%Y-%m-%d %H:%M:%S")
    empty = not os.path.exists(path) or os.path.getsize(path) == 0
    with open(path, "a", encoding="utf-8") as table:
        if empty:
            table.write(f"Fecha, Zona, Contaminante, {title}, Limite, Excede Limite\n")
        for zone, row in zip(ZONE_NAMES, levels):
            for value, pollutant in zip(row, limits):
                exceeds = "SI" if value >= pollutant.limit else "NO"
                table.write(
                    f'"{stamp}","{zone}","{pollutant.name}",{value:.2f},'
                    f"{pollutant.limit},{exceeds}\n"
                )


def _read_lines(path: str) -> list[str] | None:
    try:
        with open(path, encoding="utf-8") as source:
            return source.read().splitlines(keepends=True)
    except OSError:
        return None


def render_table(path: str) -> str:
    """Render a table written by save_table, or a message if it is missing or empty."""
    lines = _read_lines(path)
    if lines is None:
        return f"Archivo {path} inexistente\n"
    if not lines:
        return f"Archivo vacio: {path}\n"
    parts = [
        f"\n{'Fecha':<20} {'Zona':<12} {'Contaminante':<15} {'Valor':<15} "
        f"{'Limite':<8} {'Excede':<12}\n",
        _TABLE_RULE + "\n",
    ]
    for line in lines[1:]:
        match = _TABLE_ROW.match(line)
        if match:
            date, zone, name, value, limit, exceeds = match.groups()
            parts.append(
                f"{date:<20} {zone:<12} {name:<15} {value:<15} {limit:<8} {exceeds:<12}\n"
            )
    parts.append("\n")
    return "".join(parts)


def render_history(path: str) -> str:
    """Render the historical readings file as an aligned table."""
    lines = _read_lines(path)
    if lines is None:
        return f"Archivo {path} inexistente\n"
    parts = []
    if lines:
        headers = ("CO2", "SO2", "NO2", "PM2.5", "Temp", "Viento", "Humedad")
        parts.append(f"\n{'Zona':<12} " + " ".join(f"{h:<8}" for h in headers) + "\n")
        parts.append(_HISTORY_RULE + "\n")
    for line in lines[1:]:
        match = _HISTORY_ROW.match(line)
        if match:
            zone, *numbers = match.groups()
            parts.append(
                f"{zone:<12} " + " ".join(f"{float(n):<8.2f}" for n in numbers) + "\n"
            )
    parts.append("\n")
    return "".join(parts)


def render_predictions(path: str) -> str:
    """Render the prediction report file as an aligned table."""
    lines = _read_lines(path)
    if lines is None:
        return f"Archivo {path} inexistente\n"
    parts = []
    if lines:
        headers = ("CO2", "SO2", "NO2", "PM2.5")
        parts.append(f"\n{'Zona':<12} " + " ".join(f"{h:<10}" for h in headers) + "\n")
        parts.append(_PREDICTION_RULE + "\n")
    for line in lines[1:]:
        match = _PREDICTION_ROW.match(line)
        if match:
            zone, *numbers = match.groups()
            parts.append(
                f"{zone:<12} " + " ".join(f"{float(n):<10.2f}" for n in numbers) + "\n"
            )
    parts.append("\n")
    return "".join(parts)