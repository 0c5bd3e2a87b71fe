"""Tests for the 24-hour drying cycle."""

import dataclasses

import pytest

from fuelcalc.exceptions import InvalidFuelError, SimulationError
from fuelcalc.fuel_simulator.diurnal import (
    DAY_HOURS,
    NIGHT_HOURS,
    run_24_hour_simulation,
    summarize_hourly,
)
from fuelcalc.models.moisture_model import emc
from fuelcalc.models.spread_model import rate_of_spread


@pytest.fixture
def grass_cycle():
    """Hot dry day, cool humid night, light rain, 10 mph wind, pasture grass."""
    return run_24_hour_simulation(85, 25, 55, 80, 0.05, 10, "pasture_grass")


class TestRun24HourSimulation:
    """Tests for run_24_hour_simulation."""

    def test_hour_layout(self, grass_cycle):
        """There should be 10 day hours followed by 14 night hours."""
        hourly = grass_cycle.hourly

        assert DAY_HOURS == 10 and NIGHT_HOURS == 14
        assert len(hourly) == 24
        assert [h.hour for h in hourly] == list(range(24))
        assert [h.period for h in hourly] == ["day"] * 10 + ["night"] * 14

    def test_period_emc(self, grass_cycle):
        """Each hour uses its period's EMC."""
        day_emc = emc(85, 25)
        night_emc = emc(55, 80)

        for h in grass_cycle.hourly:
            expected = day_emc if h.period == "day" else night_emc
            assert h.emc == pytest.approx(expected)

    def test_starts_from_rainfall_moisture(self, grass_cycle):
        """Light rain starts the cycle at 18/15/14%."""
        assert grass_cycle.initial.as_tuple() == (18.0, 15.0, 14.0)

    def test_dries_by_day_and_wets_at_night(self, grass_cycle):
        """1-hr moisture should fall through the day and rise through the night."""
        m1 = [h.m1 for h in grass_cycle.hourly]

        assert all(a > b for a, b in zip(m1[:10], m1[1:10]))
        assert all(a < b for a, b in zip(m1[9:], m1[10:]))

    def test_heavier_fuels_lag(self, grass_cycle):
        """Larger fuels should respond more slowly to the dry day."""
        end_of_day = grass_cycle.hourly[DAY_HOURS - 1]
        assert end_of_day.m1 < end_of_day.m10 < end_of_day.m100

    def test_spread_follows_moisture(self, grass_cycle):
        """Each hour's ROS should come from that hour's 1-hr moisture on flat ground."""
        for h in grass_cycle.hourly:
            assert h.ros_ch_h == pytest.approx(rate_of_spread("pasture_grass", h.m1, 10, 0.0))
            assert h.ros_ft_min == h.ros_ch_h * 66.0 / 60.0

    def test_summary(self, grass_cycle):
        """The driest hour is the end of the day here, and reports the peak ROS."""
        s = grass_cycle.summary
        hourly = grass_cycle.hourly

        assert s.min_m1_hour == 9
        assert s.min_m1_value == min(h.m1 for h in hourly)
        assert s.max_ros_ch_h == pytest.approx(max(h.ros_ch_h for h in hourly))
        assert s.end_of_day_m1 == hourly[9].m1
        assert s.end_of_24h_m1 == hourly[23].m1
        assert s.fuel_name == "Pasture Grass"

    def test_default_fuel(self):
        """Fuel defaults to leaf and pine litter."""
        results = run_24_hour_simulation(80, 30, 60, 75, 0.0, 5)
        assert results.summary.fuel_name == "Leaf & Pine Litter"

    def test_heavy_rain_starts_wetter(self):
        """More rain should mean wetter fuel at the end of the day."""
        dry = run_24_hour_simulation(80, 30, 60, 75, 0.0, 5)
        wet = run_24_hour_simulation(80, 30, 60, 75, 1.0, 5)
        assert wet.summary.end_of_day_m1 >= dry.summary.end_of_day_m1
        assert wet.hourly[-1].m100 > dry.hourly[-1].m100

    def test_unknown_fuel_raises(self):
        """Unknown fuels are rejected before any step runs."""
        with pytest.raises(InvalidFuelError):
            run_24_hour_simulation(85, 25, 55, 80, 0.05, 10, "tundra")


class TestSummarizeHourly:
    """Tests for summarize_hourly."""

    def test_first_minimum_wins(self, grass_cycle):
        """Ties resolve to the earliest hour."""
        hourly = list(grass_cycle.hourly)
        hourly[15] = dataclasses.replace(hourly[9], hour=15, period="night")

        assert summarize_hourly(hourly, "Pasture Grass").min_m1_hour == 9

    def test_converged_drying_reports_last_strict_minimum(self):
        """Once moisture sits near EMC the hour is picked on unrounded values."""
        results = run_24_hour_simulation(95, 5, 60, 60, 0.0, 5, "pasture_grass")
        s = results.summary

        assert round(results.hourly[6].m1, 1) == round(results.hourly[9].m1, 1)
        assert s.min_m1_hour == 9
        assert s.min_m1_value == results.hourly[9].m1

    def test_partial_cycle_raises(self, grass_cycle):
        """A partial cycle cannot be summarized."""
        with pytest.raises(SimulationError) as exc_info:
            summarize_hourly(grass_cycle.hourly[:12], "Pasture Grass")

        assert exc_info.value.step == 12
