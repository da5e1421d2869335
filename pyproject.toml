[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "calidad_aire"
version = "0.1.0"
description = "Interactive air-quality monitoring, historical averages and 24-hour pollution forecasting for city zones"
requires-python = ">=3.10"
dependencies = []
keywords = ["air quality", "pollution", "forecast", "co2", "pm2.5", "no2", "so2"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Science/Research",
    "Natural Language :: Spanish",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Atmospheric Science",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
calidad-aire = "calidad_aire.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["calidad_aire"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
