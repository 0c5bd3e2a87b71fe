"""Dead fuel moisture model: equilibrium moisture and time-lag response.

Estimate equilibrium moisture content (EMC) of dead fuels from air temperature
and relative humidity, then relax 1-hr, 10-hr and 100-hr fuel moisture toward
that equilibrium with the standard exponential time-lag response.

The EMC uses a three-term empirical fit:

    EMC = 0.942 RH^0.679 + 11 e^((RH - 100) / 10) + 0.18 (21.1 - T) (1 - e^(-0.115 RH))

with T in degrees Celsius, clamped to [0.1, 100] percent.

Functions:
    - emc: Equilibrium moisture content (%) from temperature (F) and RH (%).
    - update_toward_equilibrium: Exponential time-lag update of one fuel class.
    - update_fuel_moisture: Time-lag update of all three dead fuel classes.
    - initial_moisture_from_rainfall: Starting moisture from recent rain.

References:
    Cohen, J.D., & Deeming, J.E. (1985). The National Fire-Danger Rating
    System: basic equations. USDA Forest Service GTR PSW-82.

    Simard, A.J. (1968). The moisture content of forest fuels. Canadian
    Department of Forestry and Rural Development, Information Report FF-X-14.
"""
import bisect
import numpy as np

from fuelcalc.utilities.data_classes import FuelMoistureState
from fuelcalc.utilities.fire_util import MoistureConstants, TimeLags, UtilFuncs, WeatherDefaults
from fuelcalc.utilities.unit_conversions import F_to_C


def emc(temp_f: float, rel_humidity: float) -> float:
    """Equilibrium moisture content of dead fuels.

    Args:
        temp_f (float): Air temperature (F). Non-finite values fall back to 70 F.
        rel_humidity (float): Relative humidity (%). Clamped to [0, 100]; non-finite values
            fall back to 50%.

    Returns:
        float: EMC (%) in [0.1, 100]. Never NaN.
    """
    t_c = F_to_C(UtilFuncs.finite_or(temp_f, WeatherDefaults.temp_f))
    h = UtilFuncs.clamp(UtilFuncs.finite_or(rel_humidity, WeatherDefaults.rel_humidity), 0.0, 100.0)

    term1 = 0.942 * h ** 0.679
    term2 = 11.0 * np.exp((h - 100.0) / 10.0)
    term3 = 0.18 * (21.1 - t_c) * (1.0 - np.exp(-0.115 * h))

    value = float(term1 + term2 + term3)

    if not np.isfinite(value):
        return MoistureConstants.emc_min

    return UtilFuncs.clamp(value, MoistureConstants.emc_min, MoistureConstants.emc_max)


def update_toward_equilibrium(prev_moisture: float, emc_value: float, hours: float,
                              tau_hours: float) -> float:
    """Relax fuel moisture toward equilibrium over an elapsed period.

    M(t) = EMC + (M0 - EMC) * exp(-t / tau)

    Drying (M0 above EMC) and wetting (M0 below EMC) use the same formula.

    Args:
        prev_moisture (float): Moisture at the start of the period (%). Non-finite values fall
            back to the EMC.
        emc_value (float): Equilibrium moisture content over the period (%). Non-finite values
            fall back to 5%.
        hours (float): Elapsed time (hours). Negative values are treated as 0; non-finite
            values fall back to 0.
        tau_hours (float): Time-lag constant (hours). Non-finite values fall back to 1 hour.
            A non-positive time-lag means the fuel reaches equilibrium instantly, so the EMC
            is returned unchanged.

    Returns:
        float: Moisture at the end of the period (%).
    """
    e = UtilFuncs.finite_or(emc_value, WeatherDefaults.emc)
    m0 = UtilFuncs.finite_or(prev_moisture, e)
    tau = UtilFuncs.finite_or(tau_hours, WeatherDefaults.time_lag_hours)

    if tau <= 0:
        return e

    t = max(0.0, UtilFuncs.finite_or(hours, WeatherDefaults.elapsed_hours))
    k = np.exp(-t / tau)

    return float(e + (m0 - e) * k)


def update_fuel_moisture(state: FuelMoistureState, emc_value: float,
                         hours: float) -> FuelMoistureState:
    """Apply the time-lag update to the 1-hr, 10-hr and 100-hr classes together.

    Args:
        state (FuelMoistureState): Moisture at the start of the period.
        emc_value (float): Equilibrium moisture content over the period (%).
        hours (float): Elapsed time (hours).

    Returns:
        FuelMoistureState: Moisture at the end of the period.
    """
    return FuelMoistureState(
        one_hour=update_toward_equilibrium(state.one_hour, emc_value, hours, TimeLags.ONE_HOUR),
        ten_hour=update_toward_equilibrium(state.ten_hour, emc_value, hours, TimeLags.TEN_HOUR),
        hundred_hour=update_toward_equilibrium(state.hundred_hour, emc_value, hours,
                                               TimeLags.HUNDRED_HOUR),
    )


def initial_moisture_from_rainfall(rain_in: float) -> FuelMoistureState:
    """Estimate starting dead fuel moisture from recent rainfall.

    Heuristic for cool-season conditions. Bucket edges are 0.10, 0.30 and 0.75 inches, and
    an amount equal to an edge falls in the wetter bucket.

    Args:
        rain_in (float): Recent rainfall (inches). Negative or non-finite values count as 0.

    Returns:
        FuelMoistureState: Starting 1-hr, 10-hr and 100-hr moisture (%).
    """
    r = max(0.0, UtilFuncs.finite_or(rain_in, 0.0))

    idx = bisect.bisect_right(MoistureConstants.rain_thresholds_in, r)
    m1, m10, m100 = MoistureConstants.rain_initial_moisture[idx]

    return FuelMoistureState(one_hour=m1, ten_hour=m10, hundred_hour=m100)
