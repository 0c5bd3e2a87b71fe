"""
Multi-day fuel moisture forecast.

This module folds the moisture model over an ordered sequence of forecast
periods. At each step the period's temperature and humidity give an EMC, and
the 1-hr and 10-hr moisture carried over from the previous step relax toward
it for the period's length.

.. autofunction:: run_multi_day_simulation
"""
from typing import Iterable, Optional

from fuelcalc.exceptions import ValidationError
from fuelcalc.models.moisture_model import emc, update_toward_equilibrium
from fuelcalc.utilities.data_classes import (
    DailyResult,
    MultiDayResults,
    SimulationSummary,
    WeatherSample,
)
from fuelcalc.utilities.fire_util import MoistureConstants, TimeLags, UtilFuncs, WeatherDefaults


def run_multi_day_simulation(initial_1hr: float, initial_10hr: float,
                             steps: Iterable[WeatherSample]) -> MultiDayResults:
    """Run the moisture model over a multi-day forecast.

    Args:
        initial_1hr (float): Starting 1-hr moisture (%). Non-finite values fall back to 8%.
        initial_10hr (float): Starting 10-hr moisture (%). Non-finite values fall back to 10%.
        steps (Iterable[WeatherSample]): Forecast periods, in order.

    Raises:
        ValidationError: If a step is not a :class:`WeatherSample`.

    Returns:
        MultiDayResults: One :class:`DailyResult` per step, in input order, and a summary.
    """
    start_1 = UtilFuncs.finite_or(initial_1hr, WeatherDefaults.initial_1hr)
    start_10 = UtilFuncs.finite_or(initial_10hr, WeatherDefaults.initial_10hr)

    results = MultiDayResults(initial_1hr=start_1, initial_10hr=start_10)

    prev_1 = start_1
    prev_10 = start_10

    for idx, step in enumerate(steps if steps is not None else []):
        if not isinstance(step, WeatherSample):
            raise ValidationError("Forecast steps must be WeatherSample instances",
                                  field=f"steps[{idx}]", value=step)

        temp = UtilFuncs.finite_or(step.temp_f, WeatherDefaults.temp_f)
        rh = UtilFuncs.clamp(UtilFuncs.finite_or(step.rel_humidity, WeatherDefaults.rel_humidity),
                             0.0, 100.0)
        # wind is reported only, the moisture model does not use it
        wind = UtilFuncs.finite_or(step.wind_mph, 0.0)
        hours = max(0.0, UtilFuncs.finite_or(step.hours, WeatherDefaults.step_hours))

        emc_value = emc(temp, rh)

        m1 = update_toward_equilibrium(prev_1, emc_value, hours, TimeLags.ONE_HOUR)
        m10 = update_toward_equilibrium(prev_10, emc_value, hours, TimeLags.TEN_HOUR)

        results.daily_results.append(DailyResult(
            day=step.label or f"Day {idx + 1}",
            temp_f=temp,
            rel_humidity=rh,
            wind_mph=wind,
            hours=hours,
            emc=emc_value,
            moisture_1hr=m1,
            moisture_10hr=m10
        ))

        prev_1 = m1
        prev_10 = m10

    results.summary = SimulationSummary(
        first_critical_day=first_critical_day(results),
        final_1hr=prev_1,
        final_10hr=prev_10
    )

    return results


def first_critical_day(results: MultiDayResults,
                       threshold: float = MoistureConstants.critical_1hr) -> Optional[str]:
    """Label of the first day whose 1-hr moisture is at or below 'threshold', else None."""
    for day in results.daily_results:
        if day.moisture_1hr <= threshold:
            return day.day

    return None
