"""Command-line entry point for the air quality system."""

from __future__ import annotations

import argparse
import sys

from .history import load_history
from .menu import Session
from .models import HISTORY_FILE, ZoneRegistry

_BANNER = (
    "===============================================================\n"
    "  SISTEMA INTEGRAL DE GESTION Y PREDICCION DE CONTAMINACION DEL AIRE\n"
    "===============================================================\n\n"
    "                   Bienvenido al sistema\n\n"
)


def main(argv: list[str] | None = None) -> int:
    """Load the history file and run the interactive menu; return the exit status."""
    parser = argparse.ArgumentParser(
        prog="calidad-aire",
        description="Gestion y prediccion de contaminacion del aire.",
    )
    parser.parse_args(argv)

    stdout = sys.stdout
    stdout.write(_BANNER)
    try:
        history = open(HISTORY_FILE, encoding="utf-8")
    except OSError:
        stdout.write(
            "Error al abrir el archivo de datos históricos. "
            "Asegúrese de que el archivo exista.\n"
        )
        return 1

    registry = ZoneRegistry()
    with history:
        load_history(registry, history)

    try:
        Session(registry, sys.stdin, stdout).run()
    except EOFError:
        stdout.write("\n")
        return 1
    stdout.write("\nGracias por usar el sistema. Hasta pronto.\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())