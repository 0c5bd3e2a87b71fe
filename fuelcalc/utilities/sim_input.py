"""Scenario input handling for fuel moisture simulations.

This module reads ``.cfg`` scenario files (``configparser`` INI format) into
:class:`~fuelcalc.utilities.data_classes.ScenarioParams`.

Example file for a multi-day forecast::

    [Scenario]
    type = multi_day
    label = Five Forks week ahead

    [MultiDay]
    initial_1hr = 8
    initial_10hr = 10

    [Forecast]
    # temp (F), min RH (%), wind (mph), hours
    day_1 = 75, 40, 6, 12
    day_2 = 82, 28, 9, 12

    [Output]
    log_folder = logs
    plot = false

Example file for a 24-hour drying cycle::

    [Scenario]
    type = 24_hour

    [Diurnal]
    day_temp = 85
    day_min_rh = 25
    night_temp = 55
    night_max_rh = 80
    rain = 0.05
    wind = 10
    fuel = pasture_grass

Functions:
    - load_scenario_params: Parse a scenario file.
"""
import configparser
import os

from fuelcalc.exceptions import ConfigurationError
from fuelcalc.models.fuel_models import DEFAULT_FUEL, FuelPresets
from fuelcalc.utilities.data_classes import (
    DiurnalParams,
    MultiDayParams,
    ScenarioParams,
    WeatherSample,
)
from fuelcalc.utilities.fire_util import WeatherDefaults

SCENARIO_TYPES = ("multi_day", "24_hour")


def load_scenario_params(cfg_path: str) -> ScenarioParams:
    """Parse a scenario file.

    Args:
        cfg_path (str): Path to the ``.cfg`` file.

    Raises:
        ConfigurationError: If the file is missing, a required value is absent, a value
            is not a number, or the scenario type or fuel is unknown.

    Returns:
        ScenarioParams: The parsed scenario.
    """
    if not os.path.exists(cfg_path):
        raise ConfigurationError("Scenario file not found", config_path=cfg_path)

    config = configparser.ConfigParser(inline_comment_prefixes=("#", ";"))
    try:
        config.read(cfg_path)
    except configparser.Error as e:
        raise ConfigurationError(f"Could not parse scenario file: {e}", config_path=cfg_path) from e

    if "Scenario" not in config:
        raise ConfigurationError("Missing [Scenario] section", config_path=cfg_path)

    scenario_type = config["Scenario"].get("type", None)
    if scenario_type not in SCENARIO_TYPES:
        raise ConfigurationError(f"Scenario type must be one of {SCENARIO_TYPES}, got {scenario_type!r}",
                                 config_path=cfg_path, parameter="type")

    params = ScenarioParams(
        scenario_type=scenario_type,
        label=config["Scenario"].get("label", ""),
        config_path=cfg_path
    )

    if scenario_type == "multi_day":
        params.multi_day = _load_multi_day(config, cfg_path)
    else:
        params.diurnal = _load_diurnal(config, cfg_path)

    if "Output" in config:
        params.log_folder = config["Output"].get("log_folder", None) or None
        try:
            params.plot = config["Output"].getboolean("plot", False)
        except ValueError as e:
            raise ConfigurationError("Value must be a boolean", config_path=cfg_path,
                                     parameter="plot") from e

    return params


def _get_float(section: configparser.SectionProxy, key: str, cfg_path: str,
               default: float = None) -> float:
    raw = section.get(key, None)

    if raw is None or raw.strip() == "":
        if default is None:
            raise ConfigurationError(f"Missing required value in [{section.name}]",
                                     config_path=cfg_path, parameter=key)
        return default

    try:
        return float(raw)
    except ValueError as e:
        raise ConfigurationError(f"Value must be a number, got {raw!r}",
                                 config_path=cfg_path, parameter=key) from e


def _load_multi_day(config: configparser.ConfigParser, cfg_path: str) -> MultiDayParams:
    section = config["MultiDay"] if "MultiDay" in config else config["DEFAULT"]

    initial_1hr = _get_float(section, "initial_1hr", cfg_path, WeatherDefaults.initial_1hr)
    initial_10hr = _get_float(section, "initial_10hr", cfg_path, WeatherDefaults.initial_10hr)

    if "Forecast" not in config:
        raise ConfigurationError("Missing [Forecast] section", config_path=cfg_path)

    steps = []
    for key, raw in config["Forecast"].items():
        fields = [part.strip() for part in raw.split(",")]
        if len(fields) not in (2, 3, 4):
            raise ConfigurationError("Forecast entries must be 'temp, rh[, wind[, hours]]'",
                                     config_path=cfg_path, parameter=key)
        try:
            values = [float(part) for part in fields]
        except ValueError as e:
            raise ConfigurationError(f"Forecast values must be numbers, got {raw!r}",
                                     config_path=cfg_path, parameter=key) from e

        temp, rh = values[0], values[1]
        wind = values[2] if len(values) > 2 else 0.0
        hours = values[3] if len(values) > 3 else WeatherDefaults.step_hours

        steps.append(WeatherSample(temp_f=temp, rel_humidity=rh, wind_mph=wind, hours=hours,
                                   label=key.replace("_", " ").title()))

    return MultiDayParams(initial_1hr=initial_1hr, initial_10hr=initial_10hr, steps=steps)


def _load_diurnal(config: configparser.ConfigParser, cfg_path: str) -> DiurnalParams:
    if "Diurnal" not in config:
        raise ConfigurationError("Missing [Diurnal] section", config_path=cfg_path)

    section = config["Diurnal"]

    fuel = section.get("fuel", DEFAULT_FUEL)
    if fuel not in FuelPresets.keys():
        raise ConfigurationError(f"Unknown fuel type {fuel!r}, expected one of {FuelPresets.keys()}",
                                 config_path=cfg_path, parameter="fuel")

    return DiurnalParams(
        day_temp_f=_get_float(section, "day_temp", cfg_path),
        day_min_rh=_get_float(section, "day_min_rh", cfg_path),
        night_temp_f=_get_float(section, "night_temp", cfg_path),
        night_max_rh=_get_float(section, "night_max_rh", cfg_path),
        rain_in=_get_float(section, "rain", cfg_path, 0.0),
        wind_mph=_get_float(section, "wind", cfg_path, WeatherDefaults.wind_mph),
        fuel=fuel
    )
