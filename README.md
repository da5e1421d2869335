# calidad_aire

A console program for tracking air pollution in five city zones (Beijing,
Shanghai, Shenzhen, Guangzhou, Tianjin), averaging the recorded history and
forecasting the next 24 hours. All prompts and reports are in Spanish.

Four pollutants are watched, each with a fixed limit
(`calidad_aire.models.default_limits()`):

| Pollutant | Limit |
|-----------|-------|
| PM        | 15    |
| NO2       | 25    |
| SO2       | 40    |
| CO2       | 750   |

A level counts as exceeding its limit when it is greater than or equal to it.

## Installation

```
pip install .
```

## Running

```
calidad-aire
```

The command takes no options besides `--help`. It reads its history from
`historico.csv` in the current directory and exits with status 1 if that file
cannot be opened. The file has a header line, then one line per day and zone:

```
Zona,CO2,SO2,NO2,PM2.5,Temp,Viento,Humedad
Beijing,410.2,12.5,30.1,18.4,22.0,2.5,65.0
```

Lines that do not have a name and seven numbers are skipped. Later lines count
as more recent days. Up to 30 days are kept per zone, and only the first five
zone names seen are used; names are cut to 19 characters.

All files are read and written in the current directory under fixed names.

## Menus

Every prompt accepts only a single non-negative number; anything else is asked
for again. Menu choices are the number rounded down, so `2.7` selects option
2. If input ends, the program stops with status 1.

1. **Datos actuales** – enter the level of each pollutant in each zone. Each
   level is compared with its limit, recommendations are shown for every zone,
   and the readings are appended to `tabla_actual.csv` (with a header if the
   file is new or empty). The table can also be shown from here.
2. **Prediccion de contaminacion** – reads `historico.csv` again into the
   zones already loaded, asks for the current temperature, wind and humidity,
   and forecasts each zone. The forecast is appended to
   `tabla_prediccion.csv`. Alerts and recommendations can then be shown for
   the forecast.
3. **Promedio en historia** – for each of the five zone slots, the sum of each
   pollutant over the stored days divided by 30 (missing days count as zero),
   marked `Normal`, `Se encuentra en el limite` or `Peligroso`. The report is
   printed and appended to `promedio_historia.csv`.
4. **Visualizacion de tablas** – shows `tabla_actual.csv`,
   `tabla_prediccion.csv`, `historico.csv` and `predicciones.csv`.
5. **Vaciar archivos** – empties `tabla_actual.csv`, `tabla_prediccion.csv`
   or `promedio_historia.csv`.
6. **Salir del sistema**.

### Forecast

For each zone the stored days are averaged with weights 30, 29, 28, … from the
newest day down. CO2, SO2 and NO2 are multiplied by 1.05 if the current
temperature is above the weighted mean temperature and by 0.95 otherwise,
less a further 0.05 when the wind is 3 m/s or more. PM2.5 is multiplied by
1.05 when humidity is 80 % or more.

Forecast rows follow the order in which zones first appear in the history,
while the saved tables label rows with the five fixed zone names by position.

### Recommendations

Per zone, from the PM, NO2 and CO2 flags:

- PM and NO2 elevated: reduce traffic, suspend outdoor activity, promote
  public transport.
- NO2 elevated: temporary closure of industries.
- PM and CO2 elevated: increase green areas.
- Otherwise: no special recommendations.

### Historical averages and limits

`calidad_aire.history.format_averages` pairs the averages (CO2, SO2, NO2,
PM2.5) with the limits by position, so with the default limits CO2 is judged
against 15, SO2 against 25, NO2 against 40 and PM2.5 against 750.

## Limitations

- The menu never writes `predicciones.csv`; option 4 only shows it if it is
  already there. It is written by
  `calidad_aire.prediction.write_prediction_report`, or by
  `run_prediction(..., show=True)`.
- If `historico.csv` cannot be read when a forecast is requested, the previous
  forecast (zeros at first) is saved to `tabla_prediccion.csv` all the same.
- File names, zones and limits cannot be changed from the command line.

## Using it as a library

- `calidad_aire.models` – `Reading`, `Pollutant`, `Zone`, `ZoneRegistry`,
  `default_limits()`.
- `calidad_aire.validation` – `parse_non_negative`, `read_decimal`,
  `option_from_float`, `has_data`.
- `calidad_aire.history` – `parse_history_line`, `load_history`, `Status`,
  `classify`, `ZoneAverage`, `unweighted_averages`, `format_averages`,
  `write_historical_averages`.
- `calidad_aire.prediction` – `Climate`, `weighted_forecast`, `predict`,
  `read_climate`, `format_prediction_report`, `write_prediction_report`,
  `run_prediction`.
- `calidad_aire.presente` – `read_levels`, `compare_levels`,
  `format_comparison`, `recommendations_for`, `format_recommendations`,
  `format_table`.
- `calidad_aire.tables` – `clear_table`, `save_table`, `render_table`,
  `render_history`, `render_predictions`.
- `calidad_aire.menu` – `choose_option` and `Session`, which takes a
  `ZoneRegistry` and optional input and output streams, limits and clock.
- `calidad_aire.cli` – `main(argv=None)`, the `calidad-aire` command.

```python
import io
from calidad_aire.history import load_history
from calidad_aire.models import ZoneRegistry
from calidad_aire.prediction import Climate, predict

registry = ZoneRegistry()
load_history(registry, io.StringIO(
    "Zona,CO2,SO2,NO2,PM2.5,Temp,Viento,Humedad\n"
    "Beijing,410.2,12.5,30.1,18.4,22.0,2.5,65.0\n"
))
print(predict(registry, Climate(temp=25.0, wind=1.0, humidity=50.0))[0])
```

## Development

```
pip install .[test]
pytest
```