"""Loading historical readings and computing unweighted historical averages."""

from __future__ import annotations

import enum
import re
from dataclasses import dataclass
from typing import Iterable, Sequence, TextIO

from .models import HIST_DAYS, MAX_NAME, Pollutant, Reading, ZoneRegistry

_NUMBER = (
    r"\s*([+-]?(?:\d+\.?\d*(?:[eE][+-]?\d+)?|\.\d+(?:[eE][+-]?\d+)?"
    r"|inf(?:inity)?|nan))"
)
_LINE = re.compile(
    r"([^,]{1,%d})" % (MAX_NAME - 1) + (r"," + _NUMBER) * 7,
    re.DOTALL | re.IGNORECASE,
)
_SEPARATOR = "---------------------------------"


def parse_history_line(line: str) -> tuple[str, Reading] | None:
    """Parse 'zone,co2,so2,no2,pm25,temp,wind,humidity'; None if the line does not fit."""
    match = _LINE.match(line)
    if match is None:
        return None
    name, *numbers = match.groups()
    co2, so2, no2, pm25, temp, wind, humidity = (float(n) for n in numbers)
    return name, Reading(co2, so2, no2, pm25, temp, wind, humidity)


def load_history(registry: ZoneRegistry, lines: Iterable[str]) -> int:
    """Skip the header, then push each valid line into its zone; return readings stored."""
    stored = 0
    iterator = iter(lines)
    next(iterator, None)
    for line in iterator:
        parsed = parse_history_line(line)
        if parsed is None:
            continue
        name, reading = parsed
        zone = registry.find_or_create(name)
        if zone is None:
            continue
        zone.push(reading)
        stored += 1
    return stored


class Status(enum.Enum):
    """How an average compares with its limit."""

    NORMAL = "Normal"
    AT_LIMIT = "Se encuentra en el limite"
    DANGEROUS = "Peligroso"


def classify(value: float, limit: float) -> Status:
    """Classify a value against a limit."""
    if value < limit:
        return Status.NORMAL
    if value == limit:
        return Status.AT_LIMIT
    return Status.DANGEROUS


@dataclass(frozen=True)
class ZoneAverage:
    """Unweighted pollutant averages for one zone slot."""

    name: str
    co2: float
    so2: float
    no2: float
    pm25: float


def unweighted_averages(registry: ZoneRegistry) -> list[ZoneAverage]:
    """Average each zone over the full HIST_DAYS window, missing days counting as zero.

    One entry per registry slot; unused slots come out with an empty name and zeros.
    """
    averages = []
    for zone in registry.named_zones():
        history = zone.history
        averages.append(
            ZoneAverage(
                zone.name,
                sum(r.co2 for r in history) / HIST_DAYS,
                sum(r.so2 for r in history) / HIST_DAYS,
                sum(r.no2 for r in history) / HIST_DAYS,
                sum(r.pm25 for r in history) / HIST_DAYS,
            )
        )
    while len(averages) < registry.capacity:
        averages.append(ZoneAverage("", 0.0, 0.0, 0.0, 0.0))
    return averages


def format_averages(averages: Iterable[ZoneAverage], limits: Sequence[Pollutant]) -> str:
    """Render averages with their status; limits are matched to CO2, SO2, NO2, PM2.5 by position."""
    lines = []
    for avg in averages:
        lines.append(f"Zona: {avg.name}")
        rows = (
            ("CO2   promedio", avg.co2, "ppm"),
            ("SO2   promedio", avg.so2, "ug/m3"),
            ("NO2   promedio", avg.no2, "ug/m3"),
            ("PM2.5 promedio", avg.pm25, "ug/m3"),
        )
        for (label, value, unit), pollutant in zip(rows, limits):
            lines.append(f"{label}: {value:.2f} {unit}")
            lines.append(f"Estado: {classify(value, pollutant.limit).value}")
        lines.append(_SEPARATOR)
    return "".join(line + "\n" for line in lines)


def write_historical_averages(
    registry: ZoneRegistry, limits: Sequence[Pollutant], out: TextIO, echo: TextIO
) -> list[ZoneAverage]:
    """Compute averages, write the report to out and echo it; return the averages."""
    averages = unweighted_averages(registry)
    text = format_averages(averages, limits)
    out.write(text)
    echo.write(text)
    return averages