"""Air-quality monitoring by zone: data entry, historical averages, forecasts and CSV tables."""

__version__ = "0.1.0"