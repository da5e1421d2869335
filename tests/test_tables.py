from datetime import datetime

import pytest

from calidad_aire.models import default_limits
from calidad_aire.presente import ZONE_NAMES
from calidad_aire.tables import (
    clear_table,
    render_history,
    render_predictions,
    render_table,
    save_table,
)

NOW = datetime(2024, 1, 2, 3, 4, 5)


def _levels(value):
    return [[value] * 4 for _ in ZONE_NAMES]


def test_save_table_writes_header_once(tmp_path):
    path = tmp_path / "tabla.csv"
    save_table(_levels(15.0), default_limits(), str(path), "Nivel Actual", NOW)
    save_table(_levels(15.0), default_limits(), str(path), "Nivel Actual", NOW)
    lines = path.read_text(encoding="utf-8").splitlines()
    assert lines[0] == "Fecha, Zona, Contaminante, Nivel Actual, Limite, Excede Limite"
    assert len(lines) == 41
    assert lines.count(lines[0]) == 1
    assert lines[1] == '"2024-01-02 03:04:05","Beijing","PM",15.00,15,SI'


def test_save_table_header_after_clear(tmp_path):
    path = tmp_path / "tabla.csv"
    save_table(_levels(1.0), default_limits(), str(path), "Prediccion", NOW)
    clear_table(str(path))
    assert path.read_text(encoding="utf-8") == ""
    save_table(_levels(1.0), default_limits(), str(path), "Prediccion", NOW)
    assert path.read_text(encoding="utf-8").startswith("Fecha, Zona, Contaminante, Prediccion")


def test_clear_table_creates_file(tmp_path):
    path = tmp_path / "nuevo.csv"
    clear_table(str(path))
    assert path.exists() and path.stat().st_size == 0


def test_clear_table_failure_raises(tmp_path):
    with pytest.raises(OSError):
        clear_table(str(tmp_path))


def test_render_table_round_trip(tmp_path):
    path = tmp_path / "tabla.csv"
    limits = default_limits()
    save_table(_levels(20.0), limits, str(path), "Nivel Actual", NOW)
    text = render_table(str(path))
    rows = [line.split() for line in text.splitlines() if line.startswith("2024")]
    assert len(rows) == 20
    assert {row[2] for row in rows} == set(ZONE_NAMES)
    assert [row[-1] for row in rows[:4]] == ["SI", "NO", "NO", "NO"]


def test_render_table_missing_and_empty(tmp_path):
    missing = str(tmp_path / "tabla_actual.csv")
    assert render_table(missing) == f"Archivo {missing} inexistente\n"
    clear_table(missing)
    assert render_table(missing) == f"Archivo vacio: {missing}\n"


def test_render_history_rows(tmp_path):
    path = tmp_path / "historico.csv"
    path.write_text(
        "Zona,CO2,SO2,NO2,PM2.5,Temp,Viento,Humedad\n"
        "Beijing,400.50,10.25,20.00,30.75,15.50,2.25,50.00\n"
        "linea mala\n",
        encoding="utf-8",
    )
    text = render_history(str(path))
    rows = [line.split() for line in text.splitlines() if line.startswith("Beijing")]
    assert rows == [
        ["Beijing", "400.50", "10.25", "20.00", "30.75", "15.50", "2.25", "50.00"]
    ]
    assert "Humedad" in text
    assert "linea" not in text


def test_render_history_missing(tmp_path):
    missing = str(tmp_path / "historico.csv")
    assert render_history(missing) == f"Archivo {missing} inexistente\n"


def test_render_predictions_rows(tmp_path):
    path = tmp_path / "predicciones.csv"
    path.write_text(
        "Zona,CO2,SO2,NO2,PM2.5\nShanghai,410.25,11.50,21.75,31.00\nx,1,2\n",
        encoding="utf-8",
    )
    text = render_predictions(str(path))
    rows = [line.split() for line in text.splitlines() if line.startswith(("Shanghai", "x"))]
    assert rows == [["Shanghai", "410.25", "11.50", "21.75", "31.00"]]
    assert render_predictions(str(tmp_path / "no.csv")).endswith("inexistente\n")