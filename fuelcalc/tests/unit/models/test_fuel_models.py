"""Tests for the built-in fuel presets."""

import dataclasses

import pytest

from fuelcalc.exceptions import FuelCalcError, InvalidFuelError
from fuelcalc.models.fuel_models import (
    DEFAULT_FUEL,
    FUEL_PRESETS,
    FuelPresets,
    get_fuel_preset,
)
from fuelcalc.utilities.data_classes import FuelPreset


class TestFuelPresets:
    """Tests for the preset table."""

    def test_preset_keys(self):
        """Exactly the three calibrated presets should be available."""
        assert set(FUEL_PRESETS) == {"pasture_grass", "hardwood_deadfall", "leaf_pine_litter"}
        assert sorted(FuelPresets.keys()) == sorted(FUEL_PRESETS)

    @pytest.mark.parametrize("key,base_ros,wind_k,moist_k", [
        ("pasture_grass", 20.0, 1.30, 1.70),
        ("hardwood_deadfall", 3.5, 0.55, 1.30),
        ("leaf_pine_litter", 6.0, 0.85, 1.40),
    ])
    def test_calibration_values(self, key, base_ros, wind_k, moist_k):
        """Calibration values should match the published presets."""
        preset = FUEL_PRESETS[key]
        assert preset.name == key
        assert preset.base_ros == pytest.approx(base_ros)
        assert preset.wind_sensitivity == pytest.approx(wind_k)
        assert preset.moisture_sensitivity == pytest.approx(moist_k)

    def test_display_names(self):
        """Display names are shown in summaries and plots."""
        assert FUEL_PRESETS["pasture_grass"].display_name == "Pasture Grass"
        assert FUEL_PRESETS["hardwood_deadfall"].display_name == "Hardwood Dead Fall"
        assert FUEL_PRESETS["leaf_pine_litter"].display_name == "Leaf & Pine Litter"

    def test_grass_fastest(self):
        """Grass should spread fastest at reference conditions, deadfall slowest."""
        assert (FUEL_PRESETS["pasture_grass"].base_ros
                > FUEL_PRESETS["leaf_pine_litter"].base_ros
                > FUEL_PRESETS["hardwood_deadfall"].base_ros)

    def test_table_is_read_only(self):
        """The preset table should reject assignment."""
        with pytest.raises(TypeError):
            FUEL_PRESETS["tundra"] = FUEL_PRESETS["pasture_grass"]

    def test_preset_is_frozen(self):
        """Presets should be immutable."""
        with pytest.raises(dataclasses.FrozenInstanceError):
            FUEL_PRESETS["pasture_grass"].base_ros = 100.0

    def test_loader_caches(self):
        """Repeated loads should return the same table."""
        assert FuelPresets.load_fuel_presets() is FuelPresets.load_fuel_presets()

    def test_default_fuel_exists(self):
        """The default fuel should be a valid preset."""
        assert DEFAULT_FUEL in FUEL_PRESETS


class TestGetFuelPreset:
    """Tests for preset lookup."""

    def test_lookup_by_key(self, grass_fuel):
        """Keys should resolve to their preset."""
        assert grass_fuel is FUEL_PRESETS["pasture_grass"]

    def test_preset_passes_through(self):
        """A FuelPreset instance should be returned unchanged."""
        custom = FuelPreset(name="custom", display_name="Custom", description="",
                            base_ros=1.0, wind_sensitivity=1.0, moisture_sensitivity=1.0)
        assert get_fuel_preset(custom) is custom

    def test_unknown_key_raises(self):
        """Unknown keys should raise InvalidFuelError carrying the key."""
        with pytest.raises(InvalidFuelError) as exc_info:
            get_fuel_preset("tundra")

        assert exc_info.value.fuel_key == "tundra"
        assert "tundra" in str(exc_info.value)
        assert isinstance(exc_info.value, FuelCalcError)

    @pytest.mark.parametrize("bad_key", [["pasture_grass"], {"name": "pasture_grass"}, None, 3])
    def test_non_string_key_raises(self, bad_key):
        """Keys that are not strings are invalid fuels, not a crash."""
        with pytest.raises(InvalidFuelError) as exc_info:
            get_fuel_preset(bad_key)

        assert exc_info.value.fuel_key == bad_key

    def test_lookup_is_case_sensitive(self):
        """Keys are matched exactly."""
        with pytest.raises(InvalidFuelError):
            get_fuel_preset("Pasture_Grass")
