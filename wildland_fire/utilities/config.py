"""Model configuration and the ``.cfg`` loader.

A ``ModelConfig`` picks the unit convention used at the boundary, the optional
wind-speed limit applied inside the spread models and the tolerances handed to
the ODE integrator. It can be built in code or read from an INI-style file::

    [Model]
    units = SI
    wind_limit = corrected
    epsilon = 1e-10

    [Solver]
    rtol = 1e-8
    atol = 1e-10
    max_steps = 10000
"""

from dataclasses import dataclass
from typing import Optional
import configparser
import os

from wildland_fire.exceptions import ConfigurationError

UNIT_SYSTEMS = ("US", "SI")
WIND_LIMIT_VARIANTS = ("corrected", "original")


@dataclass(frozen=True)
class ModelConfig:
    """Options shared by the model entry points.

    Attributes:
        units (str): "US" (canonical) or "SI".
        wind_limit (Optional[str]): None, "corrected" or "original".
        epsilon (float): Floor used for degenerate denominators.
        ode_rtol (float): Relative tolerance for the moisture ODEs.
        ode_atol (float): Absolute tolerance for the moisture ODEs.
        ode_max_steps (int): Step budget for the moisture ODEs.
    """
    units: str = "US"
    wind_limit: Optional[str] = None
    epsilon: float = 1e-10
    ode_rtol: float = 1e-8
    ode_atol: float = 1e-10
    ode_max_steps: int = 10000

    def __post_init__(self):
        if self.units not in UNIT_SYSTEMS:
            raise ConfigurationError(f"Units must be one of {UNIT_SYSTEMS}", parameter="units")

        if self.wind_limit is not None and self.wind_limit not in WIND_LIMIT_VARIANTS:
            raise ConfigurationError(f"Wind limit must be None or one of {WIND_LIMIT_VARIANTS}",
                                     parameter="wind_limit")

        if not self.epsilon > 0:
            raise ConfigurationError("Epsilon must be positive", parameter="epsilon")

        if not (self.ode_rtol > 0 and self.ode_atol > 0):
            raise ConfigurationError("Solver tolerances must be positive", parameter="ode_rtol/ode_atol")

        if self.ode_max_steps < 1:
            raise ConfigurationError("Solver step budget must be at least 1", parameter="ode_max_steps")

    @property
    def is_si(self) -> bool:
        return self.units == "SI"

    def make_wind_limit(self):
        """Builds the configured ``WindLimit`` or returns None when disabled."""
        from wildland_fire.models.spread_relations import WindLimit

        if self.wind_limit is None:
            return None

        return WindLimit(corrected=(self.wind_limit == "corrected"))


def load_model_config(cfg_path: str) -> ModelConfig:
    """Reads a ``ModelConfig`` from an INI-style file.

    Missing sections or options fall back to the defaults.

    Args:
        cfg_path (str): path to the .cfg file

    Raises:
        ConfigurationError: if the file is missing, unparsable or holds bad values

    Returns:
        ModelConfig: the parsed configuration
    """
    if not os.path.exists(cfg_path):
        raise ConfigurationError("Config file not found", config_path=cfg_path)

    config = configparser.ConfigParser()
    try:
        config.read(cfg_path)
    except configparser.Error as e:
        raise ConfigurationError(f"Could not parse config file: {e}", config_path=cfg_path) from e

    defaults = ModelConfig()
    kwargs = {}

    if "Model" in config:
        model = config["Model"]
        kwargs["units"] = model.get("units", defaults.units).strip().upper()

        wind_limit = model.get("wind_limit", "none").strip().lower()
        kwargs["wind_limit"] = None if wind_limit in ("", "none", "off") else wind_limit

        kwargs["epsilon"] = _get_number(model, "epsilon", defaults.epsilon, float, cfg_path)

    if "Solver" in config:
        solver = config["Solver"]
        kwargs["ode_rtol"] = _get_number(solver, "rtol", defaults.ode_rtol, float, cfg_path)
        kwargs["ode_atol"] = _get_number(solver, "atol", defaults.ode_atol, float, cfg_path)
        kwargs["ode_max_steps"] = _get_number(solver, "max_steps", defaults.ode_max_steps, int, cfg_path)

    try:
        return ModelConfig(**kwargs)
    except ConfigurationError as e:
        raise ConfigurationError(str(e), config_path=cfg_path) from e


def _get_number(section, option, default, cast, cfg_path):
    raw = section.get(option, None)
    if raw is None:
        return default

    try:
        return cast(raw)
    except ValueError as e:
        raise ConfigurationError(f"Could not read '{raw}' as {cast.__name__}",
                                 config_path=cfg_path, parameter=option) from e
