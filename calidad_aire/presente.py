"""Entry, comparison and display of current pollutant levels per zone."""

from __future__ import annotations

from datetime import datetime
from typing import Sequence, TextIO

from .models import Pollutant
from .validation import read_decimal

ZONE_NAMES = ("Beijing", "Shanghai", "Shenzhen", "Guangzhou", "Tianjin")

RECOMMENDATIONS = (
    "Reducir trafico vehicular",
    "Cierre temporal de industrias",
    "Suspender actividades al aire libre para minimizar exposicion",
    "Promover el uso de transporte publico",
    "Aumentar areas verdes",
)

_TABLE_RULE = (
    "-----------------------------------------------------------------------------------------------"
)


def read_levels(
    limits: Sequence[Pollutant], stdin: TextIO, stdout: TextIO
) -> list[list[float]]:
    """Prompt for every pollutant level in every zone; one row per zone."""
    levels = []
    for number, zone in enumerate(ZONE_NAMES, start=1):
        stdout.write(f"Ingrese los datos para la zona {number} - {zone}:\n")
        row = []
        for pollutant in limits:
            stdout.write(f"Ingrese el nivel actual de {pollutant.name}: ")
            row.append(read_decimal(stdin, stdout))
        stdout.write("\n")
        levels.append(row)
    return levels


def compare_levels(
    levels: Sequence[Sequence[float]], limits: Sequence[Pollutant]
) -> list[list[bool]]:
    """Flag each level that reaches or exceeds its pollutant's limit."""
    return [
        [value >= pollutant.limit for value, pollutant in zip(row, limits)]
        for row in levels
    ]


def format_comparison(
    levels: Sequence[Sequence[float]], limits: Sequence[Pollutant]
) -> str:
    """Describe, zone by zone, how each level stands against its limit."""
    parts = []
    for zone, row in zip(ZONE_NAMES, levels):
        parts.append(f"Zona: {zone}\n")
        for value, pollutant in zip(row, limits):
            parts.append(f"Contaminante: {pollutant.name}\n")
            parts.append(f"Nivel actual: {value:.2f}\n")
            if value >= pollutant.limit:
                parts.append(
                    f"ALERTA: El nivel de {pollutant.name} supera el limite "
                    f"permitido de {pollutant.limit}.\n"
                )
            else:
                parts.append(
                    f"El nivel de {pollutant.name} esta dentro del limite permitido.\n"
                )
            parts.append("\n")
    return "".join(parts)


def recommendations_for(elevated: Sequence[bool]) -> tuple[str, list[str]]:
    """Pick a diagnosis and recommendations from one zone's flags (PM, NO2, SO2, CO2)."""
    if len(elevated) < 4:
        raise ValueError("expected flags for four pollutants")
    pm, no2, _so2, co2 = elevated[:4]
    if pm and no2:
        return (
            "El nivel de PM y NO2 estan elevados.",
            [RECOMMENDATIONS[0], RECOMMENDATIONS[2], RECOMMENDATIONS[3]],
        )
    if no2:
        return "El nivel de NO2 esta elevado.", [RECOMMENDATIONS[1]]
    if pm and co2:
        return "El nivel de PM y CO2 estan elevados.", [RECOMMENDATIONS[4]]
    return "No se requieren recomendaciones especiales.", []


def format_recommendations(elevated: Sequence[bool]) -> str:
    """Render the recommendations block for one zone."""
    message, advice = recommendations_for(elevated)
    lines = ["Recomendaciones:", message, *advice]
    return "".join(line + "\n" for line in lines)


def format_table(
    levels: Sequence[Sequence[float]],
    limits: Sequence[Pollutant],
    title: str,
    now: datetime | None = None,
) -> str:
    """Render the levels as an aligned table stamped with the given time."""
    stamp = (now or datetime.now()).strftime("%Y-%m-%d %H:%M:%S")
    parts = [
        f"\n\n\nTabla mostrada el: {stamp}\n\n",
        f"{'Zona':<15} {'Contaminante':<15} {title:<15} {'Limite':<15} "
        f"{'Excede Limite':<15}\n",
        _TABLE_RULE + "\n",
    ]
    for zone, row in zip(ZONE_NAMES, levels):
        for value, pollutant in zip(row, limits):
            exceeds = "SI" if value >= pollutant.limit else "NO"
            parts.append(
                f"{zone:<15} {pollutant.name:<15} {value:<15.2f} "
                f"{pollutant.limit:<15d} {exceeds:<15}\n"
            )
        parts.append(_TABLE_RULE + "\n")
    parts.append("\n\n")
    return "".join(parts)