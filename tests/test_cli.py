import io

from calidad_aire.cli import main

HISTORY = (
    "Zona,CO2,SO2,NO2,PM2.5,Temp,Viento,Humedad\n"
    "Beijing,400,10,20,30,15,2,50\n"
    "Shanghai,300,12,22,32,16,3,60\n"
)


def test_missing_history_fails(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr("sys.stdin", io.StringIO("6\n"))
    assert main([]) == 1
    out = capsys.readouterr().out
    assert "Error al abrir el archivo de datos históricos." in out
    assert "Bienvenido al sistema" in out


def test_exit_from_menu(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "historico.csv").write_text(HISTORY, encoding="utf-8")
    monkeypatch.setattr("sys.stdin", io.StringIO("6\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert out.rstrip().endswith("Gracias por usar el sistema. Hasta pronto.")


def test_end_of_input_returns_error(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "historico.csv").write_text(HISTORY, encoding="utf-8")
    monkeypatch.setattr("sys.stdin", io.StringIO(""))
    assert main([]) == 1
    assert "Hasta pronto" not in capsys.readouterr().out


def test_history_averages_from_loaded_file(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "historico.csv").write_text(HISTORY, encoding="utf-8")
    monkeypatch.setattr("sys.stdin", io.StringIO("3\n6\n"))
    assert main([]) == 0
    report = (tmp_path / "promedio_historia.csv").read_text(encoding="utf-8")
    assert "Zona: Beijing" in report
    assert "Zona: Shanghai" in report
    assert report.count("---------------------------------") == 5