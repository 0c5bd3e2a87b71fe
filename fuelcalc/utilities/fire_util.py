"""Various sets of constants and helper functions useful throughout the codebase

.. autoclass:: UtilFuncs
    :members:

.. autoclass:: TimeLags
    :members:

.. autoclass:: MoistureConstants
    :members:

.. autoclass:: SpreadConstants
    :members:

.. autoclass:: WeatherDefaults
    :members:

.. autoclass:: DangerLevels
    :members:

"""

import math
import numbers


class TimeLags:
    """Time-lag constants (hours) of the dead fuel size classes.

    Attributes:
        - **ONE_HOUR** (float): fine fuels, less than 1/4 inch in diameter.
        - **TEN_HOUR** (float): 1/4 to 1 inch in diameter.
        - **HUNDRED_HOUR** (float): 1 to 3 inches in diameter.
    """
    ONE_HOUR, TEN_HOUR, HUNDRED_HOUR = 1.0, 10.0, 100.0


class MoistureConstants:
    """Bounds and thresholds used by the moisture model.

    Attributes:
        - **emc_min** (float): lower bound of equilibrium moisture content (%).
        - **emc_max** (float): upper bound of equilibrium moisture content (%).
        - **critical_1hr** (float): 1-hr moisture (%) at or below which a forecast day is
          flagged as critical drying.
        - **rain_thresholds_in** (tuple): rainfall bucket edges (inches), compared with ``<``.
        - **rain_initial_moisture** (tuple): (1-hr, 10-hr, 100-hr) starting moisture for
          each rainfall bucket, the last entry covering everything above the final edge.
    """
    emc_min = 0.1
    emc_max = 100.0

    critical_1hr = 6.0

    rain_thresholds_in = (0.10, 0.30, 0.75)

    rain_initial_moisture = (
        (18.0, 15.0, 14.0),
        (22.0, 17.0, 14.5),
        (26.0, 20.0, 16.0),
        (30.0, 25.0, 20.0),
    )


class SpreadConstants:
    """Reference conditions and multiplier bounds of the rate of spread approximation.

    Attributes:
        - **ref_moisture** (float): 1-hr moisture (%) at which presets' base ROS applies.
        - **ref_wind_mph** (float): wind speed below which wind adds nothing.
        - **wind_scale_mph** (float): wind excess that yields a full sensitivity step.
        - **wind_exponent** (float): superlinear exponent on the scaled wind excess.
        - **slope_coeff** (float): multiplier increase per percent slope.
        - **min_ros** (float): floor on the rate of spread (ch/h).
    """
    ref_moisture = 9.0
    ref_wind_mph = 5.0
    wind_scale_mph = 25.0
    wind_exponent = 1.15
    slope_coeff = 0.02
    min_ros = 0.1

    moisture_mult_bounds = (0.05, 2.5)
    wind_mult_bounds = (0.5, 4.0)
    slope_mult_bounds = (1.0, 2.5)


class WeatherDefaults:
    """Fallback values substituted for missing or non-finite numeric inputs.

    The time-lag update falls back to a 5% EMC, no elapsed time and a 1 hour time-lag; a
    missing starting moisture takes the EMC.

    The danger rating uses its own low-risk humidity default (``danger_rh``), matching the
    dashboard card that it drives.
    """
    temp_f = 70.0
    rel_humidity = 50.0
    wind_mph = 5.0
    step_hours = 12.0
    initial_1hr = 8.0
    initial_10hr = 10.0

    # time-lag update
    emc = 5.0
    elapsed_hours = 0.0
    time_lag_hours = 1.0

    danger_rh = 70.0


class DangerLevels:
    """Enumeration of the fire danger categories with their display colors.

    Attributes:
        - **LOW**, **MODERATE**, **HIGH**, **EXTREME** (str): category names.
        - **colors** (dict): hex display color for each category.
        - **descriptions** (dict): short text for each category.
    """
    LOW, MODERATE, HIGH, EXTREME = "LOW", "MODERATE", "HIGH", "EXTREME"

    colors = {
        LOW: "#28a745",
        MODERATE: "#ffc107",
        HIGH: "#ff6600",
        EXTREME: "#cc3300",
    }

    descriptions = {
        LOW: "Wet or calm conditions",
        MODERATE: "Approaching dryness or moderate wind",
        HIGH: "Dry and breezy",
        EXTREME: "Critical fire weather conditions",
    }


class UtilFuncs:
    """Various utility functions that are useful across numerous files.
    """
    def clamp(value: float, lo: float, hi: float) -> float:
        """Limit 'value' to the closed interval ['lo', 'hi'].

        :param value: value to limit
        :type value: float
        :param lo: lower bound
        :type lo: float
        :param hi: upper bound
        :type hi: float
        :return: 'value' limited to ['lo', 'hi']
        :rtype: float
        """
        return min(hi, max(lo, value))

    def finite_or(value: float, fallback: float) -> float:
        """Return 'value' as a float, or 'fallback' if it is missing, not a number, NaN or infinite.

        Only real numbers (including numpy scalars) are accepted. Strings count as missing
        even when they hold a number; converting raw form input is the caller's job.

        :param value: candidate number
        :type value: float
        :param fallback: value used when 'value' is missing or non-finite
        :type fallback: float
        :return: a finite float
        :rtype: float
        """
        if not isinstance(value, numbers.Real):
            return float(fallback)

        value = float(value)
        if not math.isfinite(value):
            return float(fallback)

        return value
