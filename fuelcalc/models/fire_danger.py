"""Fire danger rating and current-conditions fire behavior.

Classes the current weather into LOW, MODERATE, HIGH or EXTREME using a
Virginia fire weather heuristic, and combines the moisture and spread models
into a single estimate for the weather right now.

The rating is a customized heuristic for the dashboard's county cards, not an
official NFDRS adjective rating.
"""
from typing import Union

from fuelcalc.models.fuel_models import DEFAULT_FUEL, get_fuel_preset
from fuelcalc.models.moisture_model import emc, update_toward_equilibrium
from fuelcalc.models.spread_model import rate_of_spread
from fuelcalc.utilities.data_classes import DangerRating, FireBehavior, FuelPreset
from fuelcalc.utilities.fire_util import DangerLevels, TimeLags, UtilFuncs, WeatherDefaults
from fuelcalc.utilities.unit_conversions import ch_h_to_ft_min


def danger_level(temp_f: float, rel_humidity: float, wind_mph: float) -> str:
    """Categorical danger level for the given weather.

    Missing or non-finite inputs fall back to low-risk values (70 F, 70% RH, 5 mph).

    Args:
        temp_f (float): Air temperature (F).
        rel_humidity (float): Relative humidity (%).
        wind_mph (float): Wind speed (mph).

    Returns:
        str: One of the :class:`DangerLevels` names.
    """
    t = UtilFuncs.finite_or(temp_f, WeatherDefaults.temp_f)
    h = UtilFuncs.finite_or(rel_humidity, WeatherDefaults.danger_rh)
    w = UtilFuncs.finite_or(wind_mph, WeatherDefaults.wind_mph)

    if (h <= 25 and w >= 15) or (h <= 20 and t >= 85):
        return DangerLevels.EXTREME

    if h <= 30 and w >= 10:
        return DangerLevels.HIGH

    if h <= 45 or w >= 10:
        return DangerLevels.MODERATE

    return DangerLevels.LOW


def danger_rating(temp_f: float, rel_humidity: float, wind_mph: float) -> DangerRating:
    """Danger level with its display color and description."""
    level = danger_level(temp_f, rel_humidity, wind_mph)

    return DangerRating(level=level,
                        color=DangerLevels.colors[level],
                        description=DangerLevels.descriptions[level])


def calculate_fire_behavior(temp_f: float, rel_humidity: float, wind_mph: float,
                            fuel: Union[str, FuelPreset] = DEFAULT_FUEL,
                            initial_m1: float = 15.0, hours: float = 1.0,
                            slope_pct: float = 0.0) -> FireBehavior:
    """Fire behavior estimate for current conditions.

    The 1-hr moisture starts at 'initial_m1' and relaxes toward the current EMC for 'hours'.

    Args:
        temp_f (float): Current temperature (F).
        rel_humidity (float): Current relative humidity (%).
        wind_mph (float): Current 20-ft wind speed (mph).
        fuel (Union[str, FuelPreset], optional): Fuel preset. Defaults to "leaf_pine_litter".
        initial_m1 (float, optional): Starting 1-hr moisture (%). Defaults to 15.
        hours (float, optional): Exposure to the current weather (hours). Defaults to 1.
        slope_pct (float, optional): Slope (%). Defaults to 0.

    Raises:
        InvalidFuelError: If 'fuel' is not a built-in preset.

    Returns:
        FireBehavior: EMC, 1-hr moisture, rate of spread and danger rating.
    """
    preset = get_fuel_preset(fuel)

    emc_value = emc(temp_f, rel_humidity)
    m1 = update_toward_equilibrium(UtilFuncs.finite_or(initial_m1, emc_value), emc_value,
                                   UtilFuncs.finite_or(hours, 1.0), TimeLags.ONE_HOUR)

    ros = rate_of_spread(preset, m1, wind_mph, slope_pct)

    return FireBehavior(
        emc=emc_value,
        m1=m1,
        ros_ch_h=ros,
        ros_ft_min=ch_h_to_ft_min(ros),
        danger=danger_rating(temp_f, rel_humidity, wind_mph),
        fuel_name=preset.display_name,
    )
