"""FUELCALC - Dead fuel moisture and fire behavior estimation.

An operational approximation for relative fire danger comparisons. It is NOT a
substitute for BehavePlus, FlamMap or other validated fire behavior systems.
"""

from fuelcalc.models.moisture_model import (
    emc,
    update_toward_equilibrium,
    initial_moisture_from_rainfall,
)
from fuelcalc.models.fuel_models import FUEL_PRESETS, get_fuel_preset
from fuelcalc.models.spread_model import rate_of_spread
from fuelcalc.models.fire_danger import danger_rating, calculate_fire_behavior
from fuelcalc.fuel_simulator.multi_day import run_multi_day_simulation
from fuelcalc.fuel_simulator.diurnal import run_24_hour_simulation
from fuelcalc.utilities.unit_conversions import ch_h_to_ft_min
from fuelcalc.utilities.data_classes import WeatherSample, FuelMoistureState, FuelPreset
from fuelcalc.exceptions import (
    FuelCalcError,
    ConfigurationError,
    SimulationError,
    ValidationError,
    InvalidFuelError,
)

__version__ = "0.1.0"

__all__ = [
    "emc",
    "update_toward_equilibrium",
    "initial_moisture_from_rainfall",
    "FUEL_PRESETS",
    "get_fuel_preset",
    "rate_of_spread",
    "ch_h_to_ft_min",
    "danger_rating",
    "calculate_fire_behavior",
    "run_multi_day_simulation",
    "run_24_hour_simulation",
    "WeatherSample",
    "FuelMoistureState",
    "FuelPreset",
    "FuelCalcError",
    "ConfigurationError",
    "SimulationError",
    "ValidationError",
    "InvalidFuelError",
]
