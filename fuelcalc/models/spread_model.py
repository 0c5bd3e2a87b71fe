"""Operational surface rate of spread approximation.

A fuel preset's base rate of spread is scaled by moisture, wind and slope
multipliers, each clamped to keep the estimate inside the range the presets
were calibrated for.

These are NOT the Rothermel (1972) equations. The estimate is meant for trend
analysis and relative fire danger comparisons, not for tactical suppression
decisions, burn prescriptions or escape route timing. Use BehavePlus, FlamMap
or another validated system for those.

References:
    Rothermel, R.C. (1972). A mathematical model for predicting fire spread in
    wildland fuels. USDA FS Research Paper INT-115.
"""
import numpy as np
from typing import Union

from fuelcalc.models.fuel_models import get_fuel_preset
from fuelcalc.utilities.data_classes import FuelPreset
from fuelcalc.utilities.fire_util import SpreadConstants as sc
from fuelcalc.utilities.fire_util import UtilFuncs, WeatherDefaults
from fuelcalc.utilities.unit_conversions import ch_h_to_ft_min


def calc_moisture_multiplier(m1: float, moisture_sensitivity: float,
                             m_ref: float = sc.ref_moisture) -> float:
    """Exponential moisture damping relative to the reference 1-hr moisture.

    Moisture above 'm_ref' suppresses spread, moisture below it accelerates spread.

    Args:
        m1 (float): 1-hr dead fuel moisture (%).
        moisture_sensitivity (float): Preset moisture sensitivity.
        m_ref (float): Reference moisture (%) of the preset's base rate of spread.

    Returns:
        float: Multiplier in [0.05, 2.5].
    """
    mult = np.exp(-moisture_sensitivity * (m1 - m_ref) / 10.0)
    lo, hi = sc.moisture_mult_bounds
    return UtilFuncs.clamp(float(mult), lo, hi)


def calc_wind_multiplier(wind_mph: float, wind_sensitivity: float) -> float:
    """Wind multiplier from the 20-ft wind speed.

    Wind up to 5 mph adds nothing. The excess contributes superlinearly. The 20-ft wind is
    used directly; multiply by ~0.4 beforehand to approximate midflame wind.

    Args:
        wind_mph (float): 20-ft wind speed (mph). Negative values count as 0.
        wind_sensitivity (float): Preset wind sensitivity.

    Returns:
        float: Multiplier in [0.5, 4.0].
    """
    w = max(0.0, max(0.0, wind_mph) - sc.ref_wind_mph)
    mult = 1.0 + wind_sensitivity * (w / sc.wind_scale_mph) ** sc.wind_exponent
    lo, hi = sc.wind_mult_bounds
    return UtilFuncs.clamp(float(mult), lo, hi)


def calc_slope_multiplier(slope_pct: float) -> float:
    """Linear slope multiplier, independent of fuel type.

    Args:
        slope_pct (float): Slope (%). Negative values count as 0.

    Returns:
        float: Multiplier in [1.0, 2.5].
    """
    mult = 1.0 + sc.slope_coeff * max(0.0, slope_pct)
    lo, hi = sc.slope_mult_bounds
    return UtilFuncs.clamp(mult, lo, hi)


def rate_of_spread(fuel: Union[str, FuelPreset], m1: float, wind_mph: float,
                   slope_pct: float = 0.0) -> float:
    """Rate of spread estimate for a fuel preset.

    Args:
        fuel (Union[str, FuelPreset]): Preset key (e.g. "pasture_grass") or a FuelPreset.
        m1 (float): 1-hr dead fuel moisture (%).
        wind_mph (float): 20-ft wind speed (mph).
        slope_pct (float, optional): Slope (%). Defaults to 0.

    Raises:
        InvalidFuelError: If 'fuel' is a key that is not a built-in preset.

    Returns:
        float: Rate of spread (ch/h), never below 0.1.
    """
    preset = get_fuel_preset(fuel)

    m1 = UtilFuncs.finite_or(m1, sc.ref_moisture)
    wind_mph = UtilFuncs.finite_or(wind_mph, WeatherDefaults.wind_mph)
    slope_pct = UtilFuncs.finite_or(slope_pct, 0.0)

    mm = calc_moisture_multiplier(m1, preset.moisture_sensitivity)
    wm = calc_wind_multiplier(wind_mph, preset.wind_sensitivity)
    sm = calc_slope_multiplier(slope_pct)

    ros = preset.base_ros * mm * wm * sm

    return max(sc.min_ros, ros)


def rate_of_spread_ft_min(fuel: Union[str, FuelPreset], m1: float, wind_mph: float,
                          slope_pct: float = 0.0) -> float:
    """Same as :func:`rate_of_spread`, converted to ft/min."""
    return ch_h_to_ft_min(rate_of_spread(fuel, m1, wind_mph, slope_pct))
