"""Shared pytest fixtures for FUELCALC test suite.

This module provides reusable fixtures for testing FUELCALC components,
including forecast weather, fuel presets, and scenario files.
"""

import pytest
import matplotlib

matplotlib.use("Agg")


# ============================================================================
# Weather Fixtures
# ============================================================================

@pytest.fixture
def hot_dry_sample():
    """Provide a single hot, dry forecast period.

    Returns:
        WeatherSample: Red flag style afternoon, 12 hour period.
    """
    from fuelcalc.utilities.data_classes import WeatherSample
    return WeatherSample(temp_f=90.0, rel_humidity=15.0, wind_mph=12.0, hours=12.0)


@pytest.fixture
def drying_forecast():
    """Provide a five day forecast that warms and dries out.

    Returns:
        list[WeatherSample]: Five forecast periods of 12 hours each.
    """
    from fuelcalc.utilities.data_classes import WeatherSample
    return [
        WeatherSample(temp_f=60.0 + i * 5, rel_humidity=max(5.0, 80.0 - i * 8),
                      wind_mph=5.0 + i, hours=12.0)
        for i in range(5)
    ]


@pytest.fixture
def humid_forecast():
    """Provide a cool, humid forecast that never reaches critical drying.

    Returns:
        list[WeatherSample]: Three humid forecast periods.
    """
    from fuelcalc.utilities.data_classes import WeatherSample
    return [
        WeatherSample(temp_f=55.0, rel_humidity=85.0, wind_mph=3.0, hours=12.0, label="Mon"),
        WeatherSample(temp_f=58.0, rel_humidity=80.0, wind_mph=4.0, hours=12.0, label="Tue"),
        WeatherSample(temp_f=60.0, rel_humidity=90.0, wind_mph=2.0, hours=12.0, label="Wed"),
    ]


# ============================================================================
# Fuel Fixtures
# ============================================================================

@pytest.fixture
def grass_fuel():
    """Provide the pasture grass preset.

    Returns:
        FuelPreset: Fast, wind-driven grass fuel.
    """
    from fuelcalc.models.fuel_models import get_fuel_preset
    return get_fuel_preset("pasture_grass")


@pytest.fixture
def litter_fuel():
    """Provide the leaf and pine litter preset.

    Returns:
        FuelPreset: Mixed hardwood/pine forest floor.
    """
    from fuelcalc.models.fuel_models import get_fuel_preset
    return get_fuel_preset("leaf_pine_litter")


# ============================================================================
# Scenario File Fixtures
# ============================================================================

@pytest.fixture
def multi_day_cfg(tmp_path):
    """Write a multi-day scenario file.

    Returns:
        Path: Path to the .cfg file.
    """
    path = tmp_path / "multi_day.cfg"
    path.write_text(
        "[Scenario]\n"
        "type = multi_day\n"
        "label = Week ahead\n"
        "\n"
        "[MultiDay]\n"
        "initial_1hr = 8\n"
        "initial_10hr = 10\n"
        "\n"
        "[Forecast]\n"
        "# temp, rh, wind, hours\n"
        "day_1 = 75, 40, 6, 12\n"
        "day_2 = 88, 18, 12, 12\n"
        "day_3 = 70, 60\n"
    )
    return path


@pytest.fixture
def diurnal_cfg(tmp_path):
    """Write a 24-hour scenario file.

    Returns:
        Path: Path to the .cfg file.
    """
    path = tmp_path / "diurnal.cfg"
    path.write_text(
        "[Scenario]\n"
        "type = 24_hour\n"
        "\n"
        "[Diurnal]\n"
        "day_temp = 85\n"
        "day_min_rh = 25\n"
        "night_temp = 55\n"
        "night_max_rh = 80\n"
        "rain = 0.05\n"
        "wind = 10\n"
        "fuel = pasture_grass\n"
    )
    return path
