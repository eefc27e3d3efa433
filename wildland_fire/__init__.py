"""wildland_fire - Rothermel surface fire spread and NFDRS fire-danger rating."""

from wildland_fire.models.rothermel import calc_rothermel, calc_rothermel_si, evaluate_spread
from wildland_fire.models.rothermel_heterogeneous import calc_heterogeneous, calc_heterogeneous_si
from wildland_fire.models.fire_spread_direction import (
    calc_elliptical_spread,
    calc_fire_spread_direction,
    calc_perimeter_spread,
)
from wildland_fire.models.fuel_models import get_fuel_model, list_fuel_models
from wildland_fire.models.nfdrs_danger import NFDRSFuelMoistures, calc_fire_danger
from wildland_fire.models.spread_relations import WindLimit
from wildland_fire.utilities.config import ModelConfig, load_model_config
from wildland_fire.utilities.data_classes import FuelBed, FuelClass, FuelParticle, SpreadEnvironment
from wildland_fire.exceptions import (
    WildlandFireError,
    ConfigurationError,
    FuelModelError,
    SolverError,
    ValidationError,
)

__version__ = "0.1.0"

__all__ = [
    "calc_rothermel",
    "calc_rothermel_si",
    "evaluate_spread",
    "calc_heterogeneous",
    "calc_heterogeneous_si",
    "calc_fire_spread_direction",
    "calc_elliptical_spread",
    "calc_perimeter_spread",
    "get_fuel_model",
    "list_fuel_models",
    "NFDRSFuelMoistures",
    "calc_fire_danger",
    "WindLimit",
    "ModelConfig",
    "load_model_config",
    "FuelBed",
    "FuelClass",
    "FuelParticle",
    "SpreadEnvironment",
    "WildlandFireError",
    "ConfigurationError",
    "FuelModelError",
    "SolverError",
    "ValidationError",
]
