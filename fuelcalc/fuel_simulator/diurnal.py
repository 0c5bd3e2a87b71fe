"""
24-hour dead fuel drying cycle.

Simulates one day/night cycle in one-hour steps: 10 hours at the daytime high
temperature and minimum humidity, then 14 hours at the overnight low
temperature and maximum humidity. Starting moisture comes from recent
rainfall. Each hour updates 1-hr, 10-hr and 100-hr moisture and estimates
the rate of spread for the current 1-hr moisture (no slope).

.. autofunction:: run_24_hour_simulation
"""
from typing import List, Union

from fuelcalc.exceptions import SimulationError
from fuelcalc.models.fuel_models import DEFAULT_FUEL, get_fuel_preset
from fuelcalc.models.moisture_model import (
    emc,
    initial_moisture_from_rainfall,
    update_fuel_moisture,
)
from fuelcalc.models.spread_model import rate_of_spread
from fuelcalc.utilities.data_classes import (
    DiurnalResults,
    DiurnalSummary,
    FuelPreset,
    HourlyResult,
)
from fuelcalc.utilities.unit_conversions import ch_h_to_ft_min

DAY_HOURS = 10
NIGHT_HOURS = 14
STEP_HOURS = 1.0


def run_24_hour_simulation(day_temp_f: float, day_min_rh: float, night_temp_f: float,
                           night_max_rh: float, rain_in: float, wind_mph: float,
                           fuel: Union[str, FuelPreset] = DEFAULT_FUEL) -> DiurnalResults:
    """Simulate dead fuel drying over one day/night cycle.

    Args:
        day_temp_f (float): Daytime high temperature (F).
        day_min_rh (float): Daytime minimum relative humidity (%).
        night_temp_f (float): Overnight low temperature (F).
        night_max_rh (float): Overnight maximum relative humidity (%).
        rain_in (float): Recent rainfall (inches), sets the starting moisture.
        wind_mph (float): 20-ft wind speed (mph), held constant over the cycle.
        fuel (Union[str, FuelPreset], optional): Fuel preset. Defaults to "leaf_pine_litter".

    Raises:
        InvalidFuelError: If 'fuel' is not a built-in preset. Raised before any step runs.

    Returns:
        DiurnalResults: 24 hourly rows and a summary of the driest hour.
    """
    preset = get_fuel_preset(fuel)

    state = initial_moisture_from_rainfall(rain_in)
    results = DiurnalResults(initial=state)

    day_emc = emc(day_temp_f, day_min_rh)
    night_emc = emc(night_temp_f, night_max_rh)

    for hour in range(DAY_HOURS + NIGHT_HOURS):
        if hour < DAY_HOURS:
            period, emc_value = "day", day_emc
        else:
            period, emc_value = "night", night_emc

        state = update_fuel_moisture(state, emc_value, STEP_HOURS)
        ros = rate_of_spread(preset, state.one_hour, wind_mph, 0.0)

        results.hourly.append(HourlyResult(
            hour=hour,
            period=period,
            emc=emc_value,
            m1=state.one_hour,
            m10=state.ten_hour,
            m100=state.hundred_hour,
            ros_ch_h=ros,
            ros_ft_min=ch_h_to_ft_min(ros)
        ))

    results.summary = summarize_hourly(results.hourly, preset.display_name)

    return results


def summarize_hourly(hourly: List[HourlyResult], fuel_name: str) -> DiurnalSummary:
    """Summarize a full 24-hour cycle.

    The driest hour is the first one reaching the minimum 1-hr moisture; its rate of spread
    is reported as the peak.

    Raises:
        SimulationError: If 'hourly' does not hold a full cycle.
    """
    if len(hourly) != DAY_HOURS + NIGHT_HOURS:
        raise SimulationError(f"Expected {DAY_HOURS + NIGHT_HOURS} hourly results, got {len(hourly)}",
                              step=len(hourly))

    driest = hourly[0]
    for entry in hourly[1:]:
        if entry.m1 < driest.m1:
            driest = entry

    return DiurnalSummary(
        min_m1_hour=driest.hour,
        min_m1_value=driest.m1,
        max_ros_ch_h=driest.ros_ch_h,
        max_ros_ft_min=driest.ros_ft_min,
        end_of_day_m1=hourly[DAY_HOURS - 1].m1,
        end_of_24h_m1=hourly[-1].m1,
        fuel_name=fuel_name
    )
