"""Custom exceptions for the FUELCALC fuel moisture framework.

This module defines a hierarchy of exceptions used throughout FUELCALC
to provide clear, specific error messages and enable targeted exception
handling by the dashboard code that calls into the models.

Exception Hierarchy:
    FuelCalcError (base)
    ├── ConfigurationError - Invalid scenario files or parameters
    ├── SimulationError - Errors while running a drying simulation
    ├── ValidationError - Structurally invalid inputs
    └── InvalidFuelError - Unknown fuel preset key

Numeric inputs that are merely out of range or non-finite are not errors;
the models clamp them or substitute documented fallbacks.

Example:
    >>> from fuelcalc.exceptions import InvalidFuelError
    >>> raise InvalidFuelError("Unknown fuel type", fuel_key="tundra")
"""

from typing import Optional


class FuelCalcError(Exception):
    """Base exception for all FUELCALC-related errors.

    All custom exceptions in FUELCALC inherit from this class, allowing
    callers to catch all FUELCALC errors with a single except clause.

    Example:
        >>> try:
        ...     rate_of_spread("tundra", 8.0, 10.0)
        ... except FuelCalcError as e:
        ...     print(f"FUELCALC error occurred: {e}")
    """

    pass


class ConfigurationError(FuelCalcError):
    """Raised when a scenario file or its parameters are invalid.

    This exception is raised when:
    - Required sections or values are missing from a scenario file
    - A value cannot be parsed as a number
    - The scenario type is not recognised

    Attributes:
        config_path (str): Path to the scenario file, if applicable.
        parameter (str): Name of the problematic parameter, if applicable.

    Example:
        >>> raise ConfigurationError(
        ...     "Missing required value",
        ...     config_path="/path/to/scenario.cfg",
        ...     parameter="day_temp"
        ... )
    """

    def __init__(self, message: str, config_path: Optional[str] = None, parameter: Optional[str] = None):
        self.config_path = config_path
        self.parameter = parameter

        parts = []
        if config_path:
            parts.append(f"in {config_path}")
        if parameter:
            parts.append(f"parameter '{parameter}'")

        if parts:
            full_message = f"{message} ({', '.join(parts)})"
        else:
            full_message = message

        super().__init__(full_message)


class SimulationError(FuelCalcError):
    """Raised when a drying simulation cannot complete.

    Attributes:
        step (int): Index of the step being processed, if available.
    """

    def __init__(self, message: str, step: Optional[int] = None):
        self.step = step

        if step is not None:
            full_message = f"{message} (at step {step})"
        else:
            full_message = message

        super().__init__(full_message)


class ValidationError(FuelCalcError):
    """Raised when input validation fails.

    This exception is raised when an input has the wrong shape, for example
    a forecast step that is not a ``WeatherSample``. Bad numbers inside a
    well-formed input are clamped instead.

    Attributes:
        field (str): Name of the field that failed validation, if applicable.
        value: The invalid value, if applicable.

    Example:
        >>> raise ValidationError(
        ...     "Forecast steps must be WeatherSample instances",
        ...     field="steps",
        ...     value={"temp": 90}
        ... )
    """

    def __init__(self, message: str, field: Optional[str] = None, value=None):
        self.field = field
        self.value = value

        parts = []
        if field:
            parts.append(f"field '{field}'")
        if value is not None:
            parts.append(f"value={value!r}")

        if parts:
            full_message = f"{message} ({', '.join(parts)})"
        else:
            full_message = message

        super().__init__(full_message)


class InvalidFuelError(FuelCalcError):
    """Raised when a fuel preset key is not one of the built-in presets.

    Returning a default rate of spread for an unknown fuel would misstate
    fire danger, so callers always get this exception instead.

    Attributes:
        fuel_key (str): The fuel key that was requested, if applicable.

    Example:
        >>> raise InvalidFuelError(
        ...     "Unknown fuel type",
        ...     fuel_key="tundra"
        ... )
    """

    def __init__(self, message: str, fuel_key: Optional[str] = None):
        self.fuel_key = fuel_key

        if fuel_key is not None:
            full_message = f"{message} (fuel type: {fuel_key!r})"
        else:
            full_message = message

        super().__init__(full_message)
