"""Interactive console menus tying together data entry, prediction and files."""

from __future__ import annotations

import sys
from datetime import datetime
from typing import Callable, Sequence, TextIO

from .history import write_historical_averages
from .models import (
    CURRENT_FILE,
    HISTORY_FILE,
    HISTORY_RESULT_FILE,
    POLLUTANT_COUNT,
    PREDICTION_FILE,
    REPORT_FILE,
    ZONE_COUNT,
    Pollutant,
    ZoneRegistry,
    default_limits,
)
from .prediction import run_prediction
from .presente import (
    ZONE_NAMES,
    compare_levels,
    format_comparison,
    format_recommendations,
    read_levels,
)
from .tables import clear_table, render_history, render_predictions, render_table, save_table
from .validation import option_from_float, read_decimal

_NAMED_TABLES = (CURRENT_FILE, PREDICTION_FILE)


def choose_option(stdin: TextIO, stdout: TextIO, low: int, high: int) -> int:
    """Prompt until the floored number entered lies within [low, high]."""
    while True:
        stdout.write(f"Seleccione una opcion ({low}-{high}): ")
        option = option_from_float(read_decimal(stdin, stdout))
        if low <= option <= high:
            return option
        stdout.write("Opcion no valida. Intente de nuevo.\n")


def _zeros() -> list[list[float]]:
    return [[0.0] * POLLUTANT_COUNT for _ in range(ZONE_COUNT)]


class Session:
    """State of one interactive session: limits, current levels and predictions."""

    def __init__(
        self,
        registry: ZoneRegistry,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
        limits: Sequence[Pollutant] | None = None,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self.registry = registry
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout
        self.limits = list(limits) if limits is not None else default_limits()
        self.clock = clock or datetime.now
        self.levels = _zeros()
        self.predictions = _zeros()
        self.elevated = [[False] * POLLUTANT_COUNT for _ in range(ZONE_COUNT)]

    def _write(self, text: str) -> None:
        self.stdout.write(text)

    def _choose(self, high: int) -> int:
        return choose_option(self.stdin, self.stdout, 1, high)

    def _show_recommendations(self, elevated: Sequence[Sequence[bool]]) -> None:
        for zone, flags in zip(ZONE_NAMES, elevated):
            self._write(f"\nZona: {zone}\n")
            self._write(format_recommendations(flags))

    def _save(self, levels: Sequence[Sequence[float]], path: str, title: str) -> None:
        try:
            save_table(levels, self.limits, path, title, self.clock())
        except OSError:
            self._write("No se pudo abrir el archivo para guardar la tabla.\n")

    def _clear(self, path: str, done: str) -> None:
        try:
            clear_table(path)
        except OSError:
            if path in _NAMED_TABLES:
                self._write(f"No se pudo vaciar {path}.\n")
        else:
            if path in _NAMED_TABLES:
                self._write(f"{path} vaciado correctamente.\n")
        self._write(done)

    def run(self) -> None:
        """Run the main menu until the user chooses to leave."""
        while True:
            self._write(
                "\n===== MENU PRINCIPAL =====\n"
                "1. Datos actuales\n"
                "2. Prediccion de contaminacion\n"
                "3. Mostrar y guardar promedio de contaminacion en historia\n"
                "4. Visualizacion de tablas\n"
                "5. Vaciar archivos\n"
                "6. Salir del sistema\n"
            )
            option = self._choose(6)
            if option == 1:
                self.current_data_menu()
            elif option == 2:
                self.prediction_menu()
            elif option == 3:
                self.history_averages()
            elif option == 4:
                self.visualization_menu()
            elif option == 5:
                self.clear_menu()
            else:
                self._write("Saliendo del sistema...\n")
                break
        self._write("\n\n")

    def current_data_menu(self) -> None:
        """Enter current levels, compare them with limits and save them."""
        while True:
            self._write(
                "\n--- MENU DATOS ACTUALES ---\n"
                "1. Ingresar datos actuales y comparar con limites\n"
                "2. Ver tabla de datos actuales\n"
                "3. Volver al menu principal\n"
            )
            option = self._choose(3)
            if option == 1:
                self.levels = read_levels(self.limits, self.stdin, self.stdout)
                self.elevated = compare_levels(self.levels, self.limits)
                self._write(format_comparison(self.levels, self.limits))
                self._show_recommendations(self.elevated)
                self._save(self.levels, CURRENT_FILE, "Nivel Actual")
                self._write("Datos actuales guardados correctamente.\n")
            elif option == 2:
                self._write(render_table(CURRENT_FILE))
            else:
                return

    def prediction_menu(self) -> None:
        """Compute, save and review pollution predictions."""
        while True:
            self._write(
                "\n--- MENU PREDICCION ---\n"
                "1. Ingresar datos para prediccion y guardar tabla\n"
                "2. Ver tabla de datos de prediccion comparadas con limites\n"
                "3. Mostrar alertas y recomendaciones por zonas (usando datos de prediccion)\n"
                "4. Volver al menu principal\n"
            )
            option = self._choose(4)
            if option == 1:
                predictions = run_prediction(
                    self.registry, HISTORY_FILE, self.stdin, self.stdout, False
                )
                if predictions is not None:
                    self.predictions = predictions
                self._save(self.predictions, PREDICTION_FILE, "Prediccion")
                self._write("Prediccion calculada y guardada correctamente.\n")
            elif option == 2:
                self._write(render_table(PREDICTION_FILE))
            elif option == 3:
                elevated = compare_levels(self.predictions, self.limits)
                self._write(format_comparison(self.predictions, self.limits))
                self._show_recommendations(elevated)
            else:
                return

    def history_averages(self) -> None:
        """Append the historical averages report to its file and show it."""
        try:
            with open(HISTORY_RESULT_FILE, "a", encoding="utf-8") as result:
                write_historical_averages(self.registry, self.limits, result, self.stdout)
        except OSError:
            self._write("No se pudo abrir el archivo de resultados.\n")

    def visualization_menu(self) -> None:
        """Show any of the stored tables."""
        while True:
            self._write(
                "\n--- MENU VISUALIZACION ---\n"
                "1. Ver tabla de datos actuales\n"
                "2. Ver tabla de datos de prediccion\n"
                "3. Ver tabla de datos historicos\n"
                "4. Ver tabla de predicciones\n"
                "5. Volver al menu principal\n"
            )
            option = self._choose(5)
            if option == 1:
                self._write(render_table(CURRENT_FILE))
            elif option == 2:
                self._write(render_table(PREDICTION_FILE))
            elif option == 3:
                self._write(render_history(HISTORY_FILE))
            elif option == 4:
                self._write(render_predictions(REPORT_FILE))
            else:
                return

    def clear_menu(self) -> None:
        """Empty the stored tables on request."""
        while True:
            self._write(
                "\n--- MENU VACIADO DE ARCHIVOS ---\n"
                "1. Vaciar archivo de datos actuales\n"
                "2. Vaciar archivo de datos de prediccion\n"
                "3. Vaciar archivo de datos promedio historico\n"
                "4. Volver al menu principal\n"
            )
            option = self._choose(4)
            if option == 1:
                self._clear(CURRENT_FILE, "Archivo de datos actuales vaciado.\n")
            elif option == 2:
                self._clear(PREDICTION_FILE, "Archivo de datos de prediccion vaciado.\n")
            elif option == 3:
                self._clear(HISTORY_RESULT_FILE, "Archivo de promedios historicos vaciado.\n")
            else:
                return