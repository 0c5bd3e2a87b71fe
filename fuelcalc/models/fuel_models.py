"""Fuel presets for the operational rate of spread approximation.

This module defines the fuel types available to the spread model. Each preset
is a read-only calibration record: a base rate of spread at reference
conditions (9% 1-hr moisture, 5 mph 20-ft wind, 0% slope) and how strongly
wind and moisture move the spread away from that base.

Presets:
    - pasture_grass: Fast, wind-driven (20 ch/h base), similar to Scott & Burgan GR1.
    - hardwood_deadfall: Slower, heavy dead (3.5 ch/h base), similar to Scott & Burgan TU1-TU4.
    - leaf_pine_litter: Moderate response (6 ch/h base), similar to Anderson models 8-9.

The calibrations are initial estimates for Virginia field conditions and need
field validation.

References:
    - Scott, J.H., & Burgan, R.E. (2005). Standard fire behavior fuel models.
      USDA Forest Service GTR RMRS-GTR-153.
    - Anderson, H. E. (1982). Aids to Determining Fuel Models for Estimating Fire Behavior.
      USDA Forest Service General Technical Report INT-122.
"""
import os
import json
from types import MappingProxyType
from typing import Mapping, Union

from fuelcalc.exceptions import InvalidFuelError
from fuelcalc.utilities.data_classes import FuelPreset


class FuelPresets:
    _fuel_presets = None # class-level cache

    @classmethod
    def load_fuel_presets(cls) -> Mapping[str, FuelPreset]:
        if cls._fuel_presets is None:
            json_path = os.path.join(os.path.dirname(__file__), "FuelPresets.json")
            with open(json_path, "r") as f:
                raw = json.load(f)

            presets = {}
            for key in raw["display_names"]:
                presets[key] = FuelPreset(
                    name=key,
                    display_name=raw["display_names"][key],
                    description=raw["descriptions"][key],
                    base_ros=float(raw["base_ros"][key]),
                    wind_sensitivity=float(raw["wind_sensitivity"][key]),
                    moisture_sensitivity=float(raw["moisture_sensitivity"][key]),
                )

            cls._fuel_presets = MappingProxyType(presets)

        return cls._fuel_presets

    @classmethod
    def keys(cls):
        return list(cls.load_fuel_presets().keys())

    @classmethod
    def get(cls, fuel_key: str) -> FuelPreset:
        """Look up a preset by key.

        Args:
            fuel_key (str): Preset key, e.g. "pasture_grass".

        Raises:
            InvalidFuelError: If 'fuel_key' is not a string naming a built-in preset.

        Returns:
            FuelPreset: The preset.
        """
        presets = cls.load_fuel_presets()

        if not isinstance(fuel_key, str) or fuel_key not in presets:
            raise InvalidFuelError(f"Invalid fuel type, expected one of {sorted(presets)}",
                                   fuel_key=fuel_key)

        return presets[fuel_key]


FUEL_PRESETS = FuelPresets.load_fuel_presets()

DEFAULT_FUEL = "leaf_pine_litter"


def get_fuel_preset(fuel: Union[str, FuelPreset]) -> FuelPreset:
    """Resolve a preset key to its FuelPreset; FuelPreset instances pass through."""
    if isinstance(fuel, FuelPreset):
        return fuel

    return FuelPresets.get(fuel)
