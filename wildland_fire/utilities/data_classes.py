"""Input records and result bundles for the spread models.

Inputs are plain dataclasses owned by the caller. Results are created fresh
for every evaluation and never mutated by the library afterwards. All values
are in US customary units unless a result was produced by one of the ``*_si``
entry points.
"""

from dataclasses import dataclass
from typing import Optional
import math
import numpy as np

from wildland_fire.exceptions import ValidationError


def check_finite(name: str, value: float):
    if value is None or not math.isfinite(value):
        raise ValidationError("Input must be a finite number", field=name, value=value)

def check_positive(name: str, value: float):
    check_finite(name, value)
    if value <= 0:
        raise ValidationError("Input must be positive", field=name, value=value)

def check_non_negative(name: str, value: float):
    check_finite(name, value)
    if value < 0:
        raise ValidationError("Input must not be negative", field=name, value=value)

def check_fraction(name: str, value: float):
    check_finite(name, value)
    if value < 0 or value > 1:
        raise ValidationError("Input must lie in [0, 1]", field=name, value=value)


@dataclass(frozen=True)
class FuelParticle:
    """Per-class particle properties.

    Attributes:
        heat_content (float): Low heat content (Btu/lb).
        total_mineral (float): Total mineral content S_T (fraction).
        effective_mineral (float): Effective, silica-free mineral content S_e (fraction).
        particle_density (float): Oven-dry particle density (lb/ft^3).
    """
    heat_content: float = 8000.0
    total_mineral: float = 0.0555
    effective_mineral: float = 0.010
    particle_density: float = 32.0

    def validate(self):
        check_non_negative("heat_content", self.heat_content)
        check_fraction("total_mineral", self.total_mineral)
        check_fraction("effective_mineral", self.effective_mineral)
        check_positive("particle_density", self.particle_density)


@dataclass(frozen=True)
class FuelBed:
    """Single fuel class bed description.

    Attributes:
        sav_ratio (float): Surface-area-to-volume ratio sigma (1/ft).
        loading (float): Oven-dry fuel loading w_0 (lb/ft^2).
        depth (float): Fuel bed depth delta (ft).
        dead_mx (float): Dead fuel moisture of extinction (fraction).
    """
    sav_ratio: float
    loading: float
    depth: float
    dead_mx: float

    def validate(self):
        check_positive("sav_ratio", self.sav_ratio)
        check_non_negative("loading", self.loading)
        check_positive("depth", self.depth)
        check_positive("dead_mx", self.dead_mx)


@dataclass
class SpreadEnvironment:
    """Environmental conditions for one evaluation.

    Attributes:
        moisture (float): Fuel moisture content, dry-weight fraction.
        wind_speed (float): Midflame wind speed (ft/min).
        slope (float): Slope steepness as tan(angle).
    """
    moisture: float
    wind_speed: float = 0.0
    slope: float = 0.0

    def validate(self):
        check_non_negative("moisture", self.moisture)
        check_non_negative("wind_speed", self.wind_speed)
        check_non_negative("slope", self.slope)


@dataclass(frozen=True)
class FuelClass:
    """One size class of a heterogeneous fuel bed.

    Attributes:
        sav_ratio (float): Surface-area-to-volume ratio (1/ft).
        loading (float): Oven-dry loading (lb/ft^2). Zero is allowed.
        moisture (float): Moisture content (fraction).
        particle (FuelParticle, optional): Particle properties for the class.
            None means the standard particle in the units of the entry point
            the class is passed to.
    """
    sav_ratio: float
    loading: float
    moisture: float
    particle: Optional[FuelParticle] = None

    def validate(self, name: str = "fuel_class"):
        check_positive(f"{name}.sav_ratio", self.sav_ratio)
        check_non_negative(f"{name}.loading", self.loading)
        check_non_negative(f"{name}.moisture", self.moisture)
        if self.particle is not None:
            self.particle.validate()


@dataclass(frozen=True)
class RothermelResult:
    """Intermediate and output quantities of a single-class evaluation."""
    net_load: float
    bulk_density: float
    packing_ratio: float
    optimum_packing_ratio: float
    relative_packing_ratio: float
    max_reaction_velocity: float
    reaction_velocity_exponent: float
    optimum_reaction_velocity: float
    moisture_damping: float
    mineral_damping: float
    reaction_intensity: float
    propagating_flux_ratio: float
    wind_coeff_C: float
    wind_coeff_B: float
    wind_coeff_E: float
    wind_factor: float
    slope_factor: float
    effective_heating_number: float
    heat_of_preignition: float
    heat_sink: float
    ros_0: float
    ros: float
    residence_time: float
    heat_per_unit_area: float
    fireline_intensity: float
    flame_length: float
    sav_ratio: float
    wind_speed: float
    wind_limited: bool = False


@dataclass(frozen=True)
class WeightedFuelComplex:
    """Weighting factors and characteristic properties of a fuel complex.

    Per-class arrays follow the order the classes were given in.
    """
    dead_areas: np.ndarray
    live_areas: np.ndarray
    dead_weights: np.ndarray
    live_weights: np.ndarray
    dead_fraction: float
    live_fraction: float
    dead_net_load: float
    live_net_load: float
    dead_sav_ratio: float
    live_sav_ratio: float
    sav_ratio: float
    dead_heat_content: float
    live_heat_content: float
    dead_moisture: float
    live_moisture: float
    dead_mineral: float
    live_mineral: float
    total_loading: float
    total_area: float


@dataclass(frozen=True)
class HeterogeneousResult:
    """Output of a multi-class evaluation."""
    fuel_complex: WeightedFuelComplex
    bulk_density: float = 0.0
    packing_ratio: float = 0.0
    optimum_packing_ratio: float = 0.0
    relative_packing_ratio: float = 0.0
    max_reaction_velocity: float = 0.0
    reaction_velocity_exponent: float = 0.0
    optimum_reaction_velocity: float = 0.0
    dead_mx: float = 0.0
    live_mx: float = 0.0
    dead_moisture_damping: float = 0.0
    live_moisture_damping: float = 0.0
    dead_mineral_damping: float = 0.0
    live_mineral_damping: float = 0.0
    reaction_intensity: float = 0.0
    propagating_flux_ratio: float = 0.0
    wind_coeff_C: float = 0.0
    wind_coeff_B: float = 0.0
    wind_coeff_E: float = 0.0
    wind_factor: float = 0.0
    slope_factor: float = 0.0
    heat_sink: float = 0.0
    ros_0: float = 0.0
    ros: float = 0.0
    residence_time: float = 0.0
    heat_per_unit_area: float = 0.0
    fireline_intensity: float = 0.0
    flame_length: float = 0.0
    wind_speed: float = 0.0
    wind_limited: bool = False

    @property
    def sav_ratio(self) -> float:
        return self.fuel_complex.sav_ratio


@dataclass(frozen=True)
class SpreadDirection:
    """Vector composition of wind and slope spread.

    ``direction`` is the angle of maximum spread measured from upslope in
    [0, pi/2]; ``heading`` keeps the sign and quadrant of the resultant.
    """
    slope_distance: float
    wind_distance: float
    x: float
    y: float
    resultant_distance: float
    head_rate: float
    direction: float
    heading: float
    effective_wind_factor: float
    effective_wind_speed: float
    length_to_width: float


@dataclass(frozen=True)
class EllipseShape:
    eccentricity: float
    length_to_width: float
    head_rate: float
    backing_rate: float
    rate_at_bearing: float
    head_distance: float
    backing_distance: float
    length: float
    width: float
    f: float
    g: float
    h: float


@dataclass(frozen=True)
class PerimeterSpread:
    theta: float
    psi: float
    rate: float
    fireline_intensity: float
