"""Tests for the danger rating heuristic and current-conditions fire behavior."""

import pytest

from fuelcalc.exceptions import InvalidFuelError
from fuelcalc.models.fire_danger import calculate_fire_behavior, danger_level, danger_rating
from fuelcalc.models.moisture_model import emc, update_toward_equilibrium
from fuelcalc.models.spread_model import rate_of_spread
from fuelcalc.utilities.fire_util import DangerLevels


class TestDangerLevel:
    """Tests for the categorical danger level."""

    @pytest.mark.parametrize("temp,rh,wind,expected", [
        (90, 15, 20, DangerLevels.EXTREME),
        (70, 25, 15, DangerLevels.EXTREME),
        (86, 18, 0, DangerLevels.EXTREME),
        (70, 28, 12, DangerLevels.HIGH),
        (70, 30, 10, DangerLevels.HIGH),
        (84, 20, 0, DangerLevels.MODERATE),
        (70, 40, 5, DangerLevels.MODERATE),
        (70, 60, 12, DangerLevels.MODERATE),
        (70, 60, 5, DangerLevels.LOW),
        (50, 90, 0, DangerLevels.LOW),
    ])
    def test_levels(self, temp, rh, wind, expected):
        """Levels should follow the humidity, wind and temperature thresholds."""
        assert danger_level(temp, rh, wind) == expected

    def test_missing_inputs_are_low_risk(self):
        """Missing inputs fall back to 70F, 70% RH and 5 mph."""
        assert danger_level(None, None, None) == DangerLevels.LOW
        assert danger_level(float("nan"), float("nan"), float("nan")) == DangerLevels.LOW

    def test_missing_humidity_uses_damp_fallback(self):
        """Missing RH should not by itself make hot windy weather extreme."""
        assert danger_level(95, None, 12) == DangerLevels.MODERATE


class TestDangerRating:
    """Tests for the rating record."""

    def test_rating_fields(self):
        """Rating should carry the level's color and description."""
        rating = danger_rating(90, 15, 20)
        assert rating.level == DangerLevels.EXTREME
        assert rating.color == DangerLevels.colors[DangerLevels.EXTREME]
        assert rating.description == DangerLevels.descriptions[DangerLevels.EXTREME]


class TestCalculateFireBehavior:
    """Tests for the current-conditions estimate."""

    def test_combines_models(self):
        """Moisture, spread and rating should agree with the underlying models."""
        result = calculate_fire_behavior(70, 50, 5, fuel="pasture_grass", initial_m1=15.0, hours=1.0)

        expected_emc = emc(70, 50)
        expected_m1 = update_toward_equilibrium(15.0, expected_emc, 1.0, 1.0)

        assert result.emc == pytest.approx(expected_emc)
        assert result.m1 == pytest.approx(expected_m1)
        assert result.ros_ch_h == pytest.approx(rate_of_spread("pasture_grass", expected_m1, 5))
        assert result.ros_ft_min == pytest.approx(result.ros_ch_h * 1.1)
        assert result.danger.level == DangerLevels.LOW
        assert result.fuel_name == "Pasture Grass"

    def test_long_exposure_reaches_emc(self):
        """After many hours the 1-hr moisture should sit at EMC."""
        result = calculate_fire_behavior(90, 15, 20, initial_m1=25.0, hours=48.0)
        assert result.m1 == pytest.approx(emc(90, 15), abs=1e-6)
        assert result.danger.level == DangerLevels.EXTREME

    def test_slope_increases_spread(self):
        """Slope should only increase the estimate."""
        flat = calculate_fire_behavior(80, 30, 10, fuel="leaf_pine_litter")
        steep = calculate_fire_behavior(80, 30, 10, fuel="leaf_pine_litter", slope_pct=40.0)
        assert steep.ros_ch_h > flat.ros_ch_h

    def test_unknown_fuel_raises(self):
        """Unknown fuels should raise."""
        with pytest.raises(InvalidFuelError):
            calculate_fire_behavior(80, 30, 10, fuel="tundra")
