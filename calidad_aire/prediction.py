"""Weighted 24-hour pollution forecast from historical readings and current weather."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Sequence, TextIO

from .history import load_history
from .models import HIST_DAYS, POLLUTANT_COUNT, REPORT_FILE, Zone, ZoneRegistry
from .validation import read_decimal

_TABLE_RULE = "--------------------------------------------------------------"


@dataclass(frozen=True)
class Climate:
    """Current weather conditions."""

    temp: float
    wind: float
    humidity: float


def weighted_forecast(zone: Zone, climate: Climate) -> list[float]:
    """Forecast [CO2, SO2, NO2, PM2.5] for a zone, newer days weighing more."""
    if not zone.history:
        raise ValueError(f"zone {zone.name!r} has no history")
    weights = [HIST_DAYS - day for day in range(len(zone.history))]
    total = sum(weights)

    def average(attr: str) -> float:
        return sum(getattr(r, attr) * w for r, w in zip(zone.history, weights)) / total

    co2, so2, no2, pm = (average(a) for a in ("co2", "so2", "no2", "pm25"))
    mean_temp = average("temp")

    factor = 1.05 if climate.temp > mean_temp else 0.95
    if climate.wind >= 3.0:
        factor -= 0.05
    if climate.humidity >= 80.0:
        pm *= 1.05
    return [co2 * factor, so2 * factor, no2 * factor, pm]


def predict(registry: ZoneRegistry, climate: Climate) -> list[list[float]]:
    """One forecast row per registry slot, zeros for slots without a zone."""
    rows = [weighted_forecast(zone, climate) for zone in registry.named_zones()]
    rows.extend([0.0] * POLLUTANT_COUNT for _ in range(registry.capacity - len(rows)))
    return rows


def read_climate(stdin: TextIO, stdout: TextIO) -> Climate:
    """Prompt for temperature, wind and humidity."""
    stdout.write("\n=== INGRESE CONDICIONES CLIMATICAS ACTUALES ===\n")
    stdout.write("Temperatura (C): ")
    temp = read_decimal(stdin, stdout)
    stdout.write("Viento (m/s):     ")
    wind = read_decimal(stdin, stdout)
    stdout.write("Humedad (%):      ")
    humidity = read_decimal(stdin, stdout)
    return Climate(temp, wind, humidity)


def format_prediction_report(
    registry: ZoneRegistry, predictions: Sequence[Sequence[float]]
) -> str:
    """Render the forecast table for the named zones."""
    lines = [
        "",
        "====== PREDICCION 24 h ======",
        f"{'Zona':<10} | {'CO2':>10} {'SO2':>10} {'NO2':>10} {'PM2.5':>10}",
        _TABLE_RULE,
    ]
    for zone, row in zip(registry.named_zones(), predictions):
        co2, so2, no2, pm = row[:4]
        lines.append(f"{zone.name:<10} | {co2:10.1f} {so2:10.1f} {no2:10.1f} {pm:10.1f}")
    return "".join(line + "\n" for line in lines)


def write_prediction_report(
    path: str, registry: ZoneRegistry, predictions: Sequence[Sequence[float]]
) -> None:
    """Write the forecast for the named zones as CSV, replacing the file."""
    with open(path, "w", encoding="utf-8") as report:
        report.write("Zona,CO2,SO2,NO2,PM2.5\n")
        for zone, row in zip(registry.named_zones(), predictions):
            co2, so2, no2, pm = row[:4]
            report.write(f"{zone.name},{co2:.2f},{so2:.2f},{no2:.2f},{pm:.2f}\n")


def run_prediction(
    registry: ZoneRegistry,
    history_path: str,
    stdin: TextIO,
    stdout: TextIO,
    show: bool,
) -> list[list[float]] | None:
    """Load history, ask for weather and forecast; None if the history file cannot be read."""
    try:
        with open(history_path, encoding="utf-8") as history:
            load_history(registry, history)
    except OSError:
        stdout.write("No se pudo abrir el archivo historico.\n")
        return None

    climate = read_climate(stdin, stdout)
    predictions = predict(registry, climate)

    if show:
        stdout.write(format_prediction_report(registry, predictions))
        try:
            write_prediction_report(REPORT_FILE, registry, predictions)
        except OSError as exc:
            print(f"{REPORT_FILE}: {exc.strerror}", file=sys.stderr)
    return predictions