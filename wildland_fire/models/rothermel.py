"""Rothermel surface fire spread model for a single fuel class.

Implements the Rothermel (1972) rate of spread equations with the Albini
(1976) revisions, in US customary units:

    R = I_R * xi * (1 + phi_w + phi_s) / (rho_b * epsilon * Q_ig)

Each term is exposed as a standalone function so that callers can compose
them; ``calc_rothermel`` evaluates the whole system at once and returns a
``RothermelResult`` holding every intermediate quantity. ``calc_rothermel_si``
accepts and returns SI values, converting at the boundary only.

References:
    - Rothermel, R. C. (1972). A mathematical model for predicting fire spread
      in wildland fuels. USDA Forest Service Research Paper INT-115.
    - Albini, F. A. (1976). Estimating wildfire behavior and effects. USDA
      Forest Service General Technical Report INT-30.
"""

from dataclasses import replace
from typing import Optional, Tuple
import logging
import numpy as np

from wildland_fire.models.spread_relations import WindLimit
from wildland_fire.utilities.config import ModelConfig
from wildland_fire.utilities.data_classes import (
    FuelBed,
    FuelParticle,
    RothermelResult,
    SpreadEnvironment,
)
from wildland_fire.utilities.unit_conversions import *

logger = logging.getLogger(__name__)

EPSILON = 1e-10


def calc_optimum_packing_ratio(sigma: float) -> float:
    """Packing ratio that maximizes reaction velocity.

    Args:
        sigma (float): surface-area-to-volume ratio (1/ft)

    Returns:
        float: beta_opt
    """
    return 3.348 * sigma ** (-0.8189)

def calc_max_reaction_velocity(sigma: float) -> float:
    """Maximum reaction velocity Gamma_max (1/min)"""
    s_15 = sigma ** 1.5
    return s_15 / (495 + 0.0594 * s_15)

def calc_reaction_velocity_exponent(sigma: float) -> float:
    return 133 * sigma ** (-0.7913)

def calc_optimum_reaction_velocity(gamma_max: float, A: float, beta_ratio: float) -> float:
    """Optimum reaction velocity Gamma' (1/min)

    Args:
        gamma_max (float): maximum reaction velocity
        A (float): reaction velocity exponent
        beta_ratio (float): relative packing ratio beta/beta_opt

    Returns:
        float: Gamma'
    """
    return gamma_max * (beta_ratio ** A) * np.exp(A * (1 - beta_ratio))

def calc_moisture_damping(m_f: float, m_x: float) -> float:
    """Moisture damping coefficient eta_M.

    Exactly zero when the moisture is at or above extinction.

    Args:
        m_f (float): fuel moisture (fraction)
        m_x (float): moisture of extinction (fraction)

    Returns:
        float: eta_M in [0, 1]
    """
    if m_f >= m_x:
        return 0.0

    r_m = m_f / m_x

    moist_damping = 1 - 2.59 * r_m + 5.11 * (r_m)**2 - 3.52 * (r_m)**3

    return max(0.0, moist_damping)

def calc_mineral_damping(s_e: float = 0.010) -> float:
    """Mineral damping coefficient eta_s, capped at 1.

    Args:
        s_e (float, optional): effective mineral content. Defaults to 0.010.

    Returns:
        float: eta_s
    """
    if s_e <= 0:
        return 1.0

    mineral_damping = 0.174 * s_e ** (-0.19)

    return min(mineral_damping, 1.0)

def calc_reaction_intensity(gamma: float, w_n: float, heat_content: float,
                            moist_damping: float, mineral_damping: float) -> float:
    """Reaction intensity I_R (Btu/ft^2/min)"""
    return gamma * w_n * heat_content * moist_damping * mineral_damping

def calc_propagating_flux_ratio(sigma: float, beta: float) -> float:
    """Propagating flux ratio xi.

    Args:
        sigma (float): surface-area-to-volume ratio (1/ft)
        beta (float): packing ratio

    Returns:
        float: xi
    """
    return np.exp((0.792 + 0.681 * sigma ** 0.5) * (beta + 0.1)) / (192 + 0.2595 * sigma)

def calc_wind_coefficients(sigma: float) -> Tuple[float, float, float]:
    """Wind factor coefficients C, B and E for a given SAV ratio.

    Args:
        sigma (float): surface-area-to-volume ratio (1/ft)

    Returns:
        Tuple[float, float, float]: C, B, E
    """
    C = 7.47 * np.exp(-0.133 * sigma ** 0.55)
    B = 0.02526 * sigma ** 0.54
    E = 0.715 * np.exp(-3.59e-4 * sigma)

    return C, B, E

def calc_wind_factor(C: float, B: float, E: float, wind_speed: float, beta_ratio: float) -> float:
    """Wind factor phi_w.

    Args:
        C (float): wind coefficient C
        B (float): wind coefficient B
        E (float): wind coefficient E
        wind_speed (float): midflame wind speed (ft/min)
        beta_ratio (float): relative packing ratio

    Returns:
        float: phi_w
    """
    if wind_speed <= 0 or beta_ratio <= 0:
        return 0.0

    phi_w = C * (wind_speed ** B) * beta_ratio ** (-E)

    return phi_w

def calc_slope_factor(beta: float, tan_phi: float) -> float:
    """Slope factor phi_s.

    Args:
        beta (float): packing ratio
        tan_phi (float): slope steepness, rise over run

    Returns:
        float: phi_s
    """
    if tan_phi == 0 or beta <= 0:
        return 0.0

    phi_s = 5.275 * (beta ** (-0.3)) * tan_phi ** 2

    return phi_s

def calc_effective_heating_number(sigma: float) -> float:
    return np.exp(-138 / sigma)

def calc_heat_of_preignition(m_f: float) -> float:
    """Heat of preignition Q_ig (Btu/lb)"""
    return 250 + 1116 * m_f

def calc_residence_time(sigma: float) -> float:
    """Flame residence time t_r (min)"""
    return 384 / sigma

def calc_flame_length(fireline_intensity: float) -> float:
    """Byram's flame length for a surface fire.

    Args:
        fireline_intensity (float): fireline intensity (Btu/ft/min)

    Returns:
        float: flame length (ft)
    """
    if fireline_intensity <= 0:
        return 0.0

    # Brown and Davis 1973 pg. 175, intensity in Btu/ft/s
    fli = fireline_intensity / 60

    return 0.45 * fli ** 0.46


def calc_rothermel(fuel_bed: FuelBed, environment: SpreadEnvironment,
                   particle: Optional[FuelParticle] = None,
                   wind_limit: Optional[WindLimit] = None,
                   epsilon: float = EPSILON) -> RothermelResult:
    """Evaluates the single-class Rothermel model.

    Args:
        fuel_bed (FuelBed): fuel bed description, US units
        environment (SpreadEnvironment): moisture, midflame wind (ft/min) and slope
        particle (FuelParticle, optional): particle properties. Defaults to the
            standard values (8000 Btu/lb, S_T 0.0555, S_e 0.010, 32 lb/ft^3).
        wind_limit (WindLimit, optional): cap applied to the wind speed before
            the wind factor. Defaults to None (no cap).
        epsilon (float, optional): floor for the heat sink denominator.

    Raises:
        ValidationError: if any input violates its contract

    Returns:
        RothermelResult: all intermediate and output quantities
    """
    if particle is None:
        particle = FuelParticle()

    fuel_bed.validate()
    particle.validate()
    environment.validate()

    if environment.moisture > 3.0:
        logger.warning("Fuel moisture %.2f is above 300%%, check the input units", environment.moisture)

    sigma = fuel_bed.sav_ratio
    m_f = environment.moisture

    w_n = fuel_bed.loading * (1 - particle.total_mineral)
    rho_b = fuel_bed.loading / fuel_bed.depth
    beta = rho_b / particle.particle_density

    beta_opt = calc_optimum_packing_ratio(sigma)
    beta_ratio = beta / beta_opt

    gamma_max = calc_max_reaction_velocity(sigma)
    A = calc_reaction_velocity_exponent(sigma)
    gamma = calc_optimum_reaction_velocity(gamma_max, A, beta_ratio)

    moist_damping = calc_moisture_damping(m_f, fuel_bed.dead_mx)
    mineral_damping = calc_mineral_damping(particle.effective_mineral)

    I_r = calc_reaction_intensity(gamma, w_n, particle.heat_content, moist_damping, mineral_damping)
    xi = calc_propagating_flux_ratio(sigma, beta)

    C, B, E = calc_wind_coefficients(sigma)

    wind_speed = environment.wind_speed
    wind_limited = False
    if wind_limit is not None:
        wind_speed, wind_limited = wind_limit.apply(wind_speed, I_r)

    phi_w = calc_wind_factor(C, B, E, wind_speed, beta_ratio)
    phi_s = calc_slope_factor(beta, environment.slope)

    eps = calc_effective_heating_number(sigma)
    Q_ig = calc_heat_of_preignition(m_f)
    heat_sink = rho_b * eps * Q_ig

    if heat_sink < epsilon:
        logger.debug("Heat sink %.3g below floor, using %.3g", heat_sink, epsilon)

    R_0 = (I_r * xi) / max(epsilon, heat_sink)
    R = R_0 * (1 + phi_w + phi_s)

    t_r = calc_residence_time(sigma)
    H_a = I_r * t_r
    I_b = H_a * R

    return RothermelResult(
        net_load=w_n,
        bulk_density=rho_b,
        packing_ratio=beta,
        optimum_packing_ratio=beta_opt,
        relative_packing_ratio=beta_ratio,
        max_reaction_velocity=gamma_max,
        reaction_velocity_exponent=A,
        optimum_reaction_velocity=gamma,
        moisture_damping=moist_damping,
        mineral_damping=mineral_damping,
        reaction_intensity=I_r,
        propagating_flux_ratio=xi,
        wind_coeff_C=C,
        wind_coeff_B=B,
        wind_coeff_E=E,
        wind_factor=phi_w,
        slope_factor=phi_s,
        effective_heating_number=eps,
        heat_of_preignition=Q_ig,
        heat_sink=heat_sink,
        ros_0=R_0,
        ros=R,
        residence_time=t_r,
        heat_per_unit_area=H_a,
        fireline_intensity=I_b,
        flame_length=calc_flame_length(I_b),
        sav_ratio=sigma,
        wind_speed=wind_speed,
        wind_limited=wind_limited,
    )


def calc_rothermel_si(fuel_bed: FuelBed, environment: SpreadEnvironment,
                      particle: Optional[FuelParticle] = None,
                      wind_limit: Optional[WindLimit] = None,
                      epsilon: float = EPSILON) -> RothermelResult:
    """Evaluates the single-class model with SI inputs and outputs.

    Inputs: SAV ratio 1/m, loading kg/m^2, depth m, heat content kJ/kg,
    particle density kg/m^3, wind speed m/s. Moisture and slope are unitless.

    Outputs are converted back to SI: rates m/s, reaction intensity kW/m^2,
    fireline intensity kW/m, heat per unit area kJ/m^2, flame length m,
    residence time s. The wind coefficients C, B and E are returned in their
    US form since they only apply to wind speeds in ft/min.
    """
    us_bed = FuelBed(
        sav_ratio=m_inv_to_ft_inv(fuel_bed.sav_ratio),
        loading=KiSq_to_Lbsft2(fuel_bed.loading),
        depth=m_to_ft(fuel_bed.depth),
        dead_mx=fuel_bed.dead_mx,
    )
    us_env = SpreadEnvironment(
        moisture=environment.moisture,
        wind_speed=m_s_to_ft_min(environment.wind_speed),
        slope=environment.slope,
    )
    us_particle = None if particle is None else particle_to_us(particle)

    result = calc_rothermel(us_bed, us_env, us_particle, wind_limit, epsilon)

    return rothermel_result_to_si(result)


def evaluate_spread(fuel_bed: FuelBed, environment: SpreadEnvironment,
                    particle: Optional[FuelParticle] = None,
                    config: Optional[ModelConfig] = None) -> RothermelResult:
    """Evaluates the single-class model under a ``ModelConfig``.

    The config picks the unit convention of the inputs and outputs and the
    optional wind limit.
    """
    if config is None:
        config = ModelConfig()

    wind_limit = config.make_wind_limit()

    if config.is_si:
        return calc_rothermel_si(fuel_bed, environment, particle, wind_limit, config.epsilon)

    return calc_rothermel(fuel_bed, environment, particle, wind_limit, config.epsilon)


def particle_to_us(particle: FuelParticle) -> FuelParticle:
    """Converts SI particle properties (kJ/kg, kg/m^3) to US (Btu/lb, lb/ft^3)."""
    return FuelParticle(
        heat_content=kJ_kg_to_BTU_lb(particle.heat_content),
        total_mineral=particle.total_mineral,
        effective_mineral=particle.effective_mineral,
        particle_density=KiCu_to_Lbsft3(particle.particle_density),
    )


def rothermel_result_to_si(result: RothermelResult) -> RothermelResult:
    return replace(
        result,
        net_load=Lbsft2_to_KiSq(result.net_load),
        bulk_density=Lbsft3_to_KiCu(result.bulk_density),
        max_reaction_velocity=result.max_reaction_velocity / 60,
        optimum_reaction_velocity=result.optimum_reaction_velocity / 60,
        reaction_intensity=BTU_ft2_min_to_kW_m2(result.reaction_intensity),
        heat_of_preignition=BTU_lb_to_kJ_kg(result.heat_of_preignition),
        heat_sink=BTU_ft3_to_kJ_m3(result.heat_sink),
        ros_0=ft_min_to_m_s(result.ros_0),
        ros=ft_min_to_m_s(result.ros),
        residence_time=min_to_s(result.residence_time),
        heat_per_unit_area=BTU_ft2_to_kJ_m2(result.heat_per_unit_area),
        fireline_intensity=BTU_ft_min_to_kW_m(result.fireline_intensity),
        flame_length=ft_to_m(result.flame_length),
        sav_ratio=ft_inv_to_m_inv(result.sav_ratio),
        wind_speed=ft_min_to_m_s(result.wind_speed),
    )
