"""Custom exceptions for the wildland_fire equation library.

This module defines the hierarchy of exceptions raised by the fire-behavior
and fire-danger models so that callers can tell a bad input apart from a
numerical failure and handle each in a targeted way.

Exception Hierarchy:
    WildlandFireError (base)
    ├── ValidationError - Input contract violations (sigma <= 0, bad fractions, ...)
    ├── FuelModelError - Unknown or corrupt NFDRS fuel model
    ├── ConfigurationError - Invalid configuration files or parameters
    └── SolverError - ODE integration failed to converge

Physical saturation (moisture at or above extinction, fuels flagged wet,
capped index values) is a valid model state and never raises.

Example:
    >>> from wildland_fire.exceptions import ValidationError
    >>> raise ValidationError("Fuel bed depth must be positive", field="depth", value=0.0)
"""

from typing import Optional


class WildlandFireError(Exception):
    """Base exception for all wildland_fire errors.

    All custom exceptions inherit from this class, allowing users to catch
    every library error with a single except clause if desired.

    Example:
        >>> try:
        ...     calc_rothermel(bed, env)
        ... except WildlandFireError as e:
        ...     print(f"Spread evaluation failed: {e}")
    """

    pass


class ValidationError(WildlandFireError):
    """Raised when input validation fails.

    This exception is raised when:
    - A required positive quantity is zero or negative (SAV ratio, depth,
      particle density, moisture of extinction)
    - A fraction lies outside [0, 1] (mineral contents)
    - An input is NaN or infinite
    - A discrete class index is out of range (climate class, slope class,
      lightning activity level)

    Attributes:
        message (str): Explanation of the validation failure.
        field (str): Name of the field that failed validation, if applicable.
        value: The invalid value, if applicable.

    Example:
        >>> raise ValidationError(
        ...     "Surface-area-to-volume ratio must be positive",
        ...     field="sav_ratio",
        ...     value=0.0
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


class FuelModelError(WildlandFireError):
    """Raised when fuel model lookups fail.

    This exception is raised when:
    - An unknown NFDRS fuel model code is requested (including "M", which
      is deliberately absent from the catalog)
    - The fuel model table is missing or corrupt

    Attributes:
        message (str): Explanation of the fuel model error.
        fuel_model_code (str): The code involved, if applicable.

    Example:
        >>> raise FuelModelError(
        ...     "Fuel model not found",
        ...     fuel_model_code="M"
        ... )
    """

    def __init__(self, message: str, fuel_model_code: Optional[str] = None):
        self.fuel_model_code = fuel_model_code

        if fuel_model_code is not None:
            full_message = f"{message} (fuel model code: {fuel_model_code!r})"
        else:
            full_message = message

        super().__init__(full_message)


class ConfigurationError(WildlandFireError):
    """Raised when configuration file or parameters are invalid.

    This exception is raised when:
    - A config file cannot be read
    - Parameter values are out of valid ranges
    - An unknown option value is given (e.g. units other than US/SI)

    Attributes:
        message (str): Explanation of the configuration error.
        config_path (str): Path to the configuration file, if applicable.
        parameter (str): Name of the problematic parameter, if applicable.

    Example:
        >>> raise ConfigurationError(
        ...     "Unknown wind limit variant",
        ...     config_path="/path/to/model.cfg",
        ...     parameter="wind_limit"
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


class SolverError(WildlandFireError):
    """Raised when the numerical ODE integration fails.

    This exception is raised when:
    - The state or its derivative becomes NaN or infinite
    - The adaptive step size underflows
    - The step budget is exhausted before reaching the end of the span

    Attributes:
        message (str): Explanation of the solver failure.
        parameters (dict): The parameters of the attempted integration.

    Example:
        >>> raise SolverError(
        ...     "Step size underflow",
        ...     parameters={"y0": 0.2, "t_span": (0.0, 1.0)}
        ... )
    """

    def __init__(self, message: str, parameters: Optional[dict] = None):
        self.parameters = dict(parameters) if parameters else {}

        if self.parameters:
            detail = ", ".join(f"{k}={v!r}" for k, v in self.parameters.items())
            full_message = f"{message} (parameters: {detail})"
        else:
            full_message = message

        super().__init__(full_message)
