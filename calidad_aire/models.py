"""Core data types: readings, pollutant limits, zones and the zone registry."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator

POLLUTANT_COUNT = 4
ZONE_COUNT = 5
HIST_DAYS = 30
MAX_NAME = 20

CURRENT_FILE = "tabla_actual.csv"
PREDICTION_FILE = "tabla_prediccion.csv"
HISTORY_FILE = "historico.csv"
REPORT_FILE = "predicciones.csv"
HISTORY_RESULT_FILE = "promedio_historia.csv"


@dataclass(frozen=True)
class Reading:
    """One day of pollutant and weather measurements for a zone."""

    co2: float = 0.0
    so2: float = 0.0
    no2: float = 0.0
    pm25: float = 0.0
    temp: float = 0.0
    wind: float = 0.0
    humidity: float = 0.0


@dataclass(frozen=True)
class Pollutant:
    """A pollutant name with its permitted limit."""

    name: str
    limit: int


@dataclass
class Zone:
    """A named zone holding its most recent readings, newest first."""

    name: str
    history: list[Reading] = field(default_factory=list)

    def push(self, reading: Reading) -> None:
        """Store a reading as the most recent day, dropping the oldest past HIST_DAYS."""
        self.history.insert(0, reading)
        del self.history[HIST_DAYS:]

    def days_loaded(self) -> int:
        """Number of days of history currently held."""
        return len(self.history)


class ZoneRegistry:
    """A fixed-capacity collection of zones, kept in order of first appearance."""

    def __init__(self, capacity: int = ZONE_COUNT) -> None:
        self.capacity = capacity
        self._zones: list[Zone] = []

    def find_or_create(self, name: str) -> Zone | None:
        """Return the zone with this name, creating it if there is room; None when full."""
        if not name:
            raise ValueError("zone name must not be empty")
        name = name[: MAX_NAME - 1]
        for zone in self._zones:
            if zone.name == name:
                return zone
        if len(self._zones) >= self.capacity:
            return None
        zone = Zone(name)
        self._zones.append(zone)
        return zone

    def named_zones(self) -> list[Zone]:
        """The zones created so far, in order of creation."""
        return list(self._zones)

    def __iter__(self) -> Iterator[Zone]:
        return iter(self._zones)

    def __len__(self) -> int:
        return len(self._zones)


def default_limits() -> list[Pollutant]:
    """The pollutants tracked by the system with their limits, in table order."""
    return [
        Pollutant("PM", 15),
        Pollutant("NO2", 25),
        Pollutant("SO2", 40),
        Pollutant("CO2", 750),
    ]