"""Rothermel spread model for fuel beds with several dead and live classes.

Each class is described by a ``FuelClass`` record. Classes are weighted by
their share of the surface area within their group (dead or live), and the
groups are weighted by their share of the total surface area. The weighted
characteristic values then feed the same equations as the single-class model
in ``wildland_fire.models.rothermel``, except that reaction intensity sums the
dead and live contributions and the heat sink is accumulated class by class.

The live moisture of extinction is derived from the dead-to-live fine fuel
ratio and is never an input.
"""

from dataclasses import replace
from typing import Optional, Sequence
import logging
import numpy as np

from wildland_fire.models.rothermel import (
    EPSILON,
    calc_effective_heating_number,
    calc_flame_length,
    calc_heat_of_preignition,
    calc_max_reaction_velocity,
    calc_mineral_damping,
    calc_moisture_damping,
    calc_optimum_packing_ratio,
    calc_optimum_reaction_velocity,
    calc_propagating_flux_ratio,
    calc_reaction_velocity_exponent,
    calc_residence_time,
    calc_slope_factor,
    calc_wind_coefficients,
    calc_wind_factor,
    particle_to_us,
)
from wildland_fire.models.spread_relations import (
    WindLimit,
    calc_dead_to_live_ratio,
    calc_fine_dead_moisture,
    calc_live_mx,
)
from wildland_fire.utilities.data_classes import (
    FuelClass,
    FuelParticle,
    HeterogeneousResult,
    WeightedFuelComplex,
    check_non_negative,
    check_positive,
)
from wildland_fire.utilities.unit_conversions import *

logger = logging.getLogger(__name__)


def _with_particle(classes: Sequence[FuelClass]) -> list:
    return [fc if fc.particle is not None else replace(fc, particle=FuelParticle()) for fc in classes]

def _surface_areas(classes: Sequence[FuelClass]) -> np.ndarray:
    return np.array([fc.sav_ratio * fc.loading / fc.particle.particle_density for fc in classes],
                    dtype=float)

def _group_mean(weights: np.ndarray, values) -> float:
    if weights.size == 0:
        return 0.0

    return float(np.dot(weights, np.asarray(values, dtype=float)))


def calc_weighted_fuel_complex(dead: Sequence[FuelClass], live: Sequence[FuelClass],
                               epsilon: float = EPSILON) -> WeightedFuelComplex:
    """Computes the surface-area weighting factors of a fuel complex.

    Args:
        dead (Sequence[FuelClass]): dead classes, in order
        live (Sequence[FuelClass]): live classes, in order
        epsilon (float, optional): floor applied to group and total areas

    Returns:
        WeightedFuelComplex: per-class weights and group characteristic values
    """
    dead = _with_particle(dead)
    live = _with_particle(live)

    for i, fc in enumerate(dead):
        fc.validate(f"dead[{i}]")
    for i, fc in enumerate(live):
        fc.validate(f"live[{i}]")

    dead_areas = _surface_areas(dead)
    live_areas = _surface_areas(live)

    A_dead = float(np.sum(dead_areas))
    A_live = float(np.sum(live_areas))
    A_T = A_dead + A_live

    dead_weights = dead_areas / max(epsilon, A_dead)
    live_weights = live_areas / max(epsilon, A_live)

    f_dead = A_dead / max(epsilon, A_T)
    f_live = A_live / max(epsilon, A_T)

    dead_net_load = _group_mean(dead_weights, [fc.loading * (1 - fc.particle.total_mineral) for fc in dead])
    live_net_load = _group_mean(live_weights, [fc.loading * (1 - fc.particle.total_mineral) for fc in live])

    sigma_dead = _group_mean(dead_weights, [fc.sav_ratio for fc in dead])
    sigma_live = _group_mean(live_weights, [fc.sav_ratio for fc in live])

    return WeightedFuelComplex(
        dead_areas=dead_areas,
        live_areas=live_areas,
        dead_weights=dead_weights,
        live_weights=live_weights,
        dead_fraction=f_dead,
        live_fraction=f_live,
        dead_net_load=dead_net_load,
        live_net_load=live_net_load,
        dead_sav_ratio=sigma_dead,
        live_sav_ratio=sigma_live,
        sav_ratio=f_dead * sigma_dead + f_live * sigma_live,
        dead_heat_content=_group_mean(dead_weights, [fc.particle.heat_content for fc in dead]),
        live_heat_content=_group_mean(live_weights, [fc.particle.heat_content for fc in live]),
        dead_moisture=_group_mean(dead_weights, [fc.moisture for fc in dead]),
        live_moisture=_group_mean(live_weights, [fc.moisture for fc in live]),
        dead_mineral=_group_mean(dead_weights, [fc.particle.effective_mineral for fc in dead]),
        live_mineral=_group_mean(live_weights, [fc.particle.effective_mineral for fc in live]),
        total_loading=float(sum(fc.loading for fc in dead) + sum(fc.loading for fc in live)),
        total_area=A_T,
    )


def calc_heat_sink(fuel_complex: WeightedFuelComplex, dead: Sequence[FuelClass],
                   live: Sequence[FuelClass], bulk_density: float) -> float:
    """Heat required to bring the fuel ahead of the front to ignition (Btu/ft^3).

    Each class contributes with its own effective heating number and heat of
    preignition, weighted within its group and then by the group fraction.
    """
    dead_sum = 0
    for f_ij, fc in zip(fuel_complex.dead_weights, dead):
        dead_sum += f_ij * calc_effective_heating_number(fc.sav_ratio) * calc_heat_of_preignition(fc.moisture)

    live_sum = 0
    for f_ij, fc in zip(fuel_complex.live_weights, live):
        live_sum += f_ij * calc_effective_heating_number(fc.sav_ratio) * calc_heat_of_preignition(fc.moisture)

    return bulk_density * (fuel_complex.dead_fraction * dead_sum + fuel_complex.live_fraction * live_sum)


def calc_heterogeneous(dead: Sequence[FuelClass], live: Sequence[FuelClass], depth: float,
                       wind_speed: float, slope: float, dead_mx: float,
                       wind_limit: Optional[WindLimit] = None,
                       epsilon: float = EPSILON) -> HeterogeneousResult:
    """Evaluates the multi-class Rothermel model.

    Args:
        dead (Sequence[FuelClass]): dead fuel classes (may be empty)
        live (Sequence[FuelClass]): live fuel classes (may be empty)
        depth (float): fuel bed depth (ft)
        wind_speed (float): midflame wind speed (ft/min)
        slope (float): slope steepness, rise over run
        dead_mx (float): dead fuel moisture of extinction (fraction)
        wind_limit (WindLimit, optional): cap applied to the wind speed
        epsilon (float, optional): floor for degenerate denominators

    Raises:
        ValidationError: if any input violates its contract

    Returns:
        HeterogeneousResult: weighted complex and spread outputs
    """
    check_positive("depth", depth)
    check_positive("dead_mx", dead_mx)
    check_non_negative("wind_speed", wind_speed)
    check_non_negative("slope", slope)

    dead = _with_particle(dead)
    live = _with_particle(live)

    fuel_complex = calc_weighted_fuel_complex(dead, live, epsilon)

    if fuel_complex.total_area <= epsilon:
        logger.debug("Fuel bed has no surface area, returning a zero result")
        return HeterogeneousResult(fuel_complex=fuel_complex, dead_mx=dead_mx, live_mx=dead_mx,
                                   wind_speed=wind_speed)

    rho_b = fuel_complex.total_loading / depth
    beta = sum(fc.loading / fc.particle.particle_density for fc in list(dead) + list(live)) / depth

    sigma = fuel_complex.sav_ratio
    beta_opt = calc_optimum_packing_ratio(sigma)
    beta_ratio = beta / beta_opt

    gamma_max = calc_max_reaction_velocity(sigma)
    A = calc_reaction_velocity_exponent(sigma)
    gamma = calc_optimum_reaction_velocity(gamma_max, A, beta_ratio)

    W = calc_dead_to_live_ratio(dead, live)
    live_mx = calc_live_mx(W, calc_fine_dead_moisture(dead), dead_mx)

    dead_moist_damping = calc_moisture_damping(fuel_complex.dead_moisture, dead_mx)
    live_moist_damping = calc_moisture_damping(fuel_complex.live_moisture, live_mx)
    dead_mineral_damping = calc_mineral_damping(fuel_complex.dead_mineral)
    live_mineral_damping = calc_mineral_damping(fuel_complex.live_mineral)

    I_r = gamma * (
        fuel_complex.dead_net_load * fuel_complex.dead_heat_content * dead_mineral_damping * dead_moist_damping +
        fuel_complex.live_net_load * fuel_complex.live_heat_content * live_mineral_damping * live_moist_damping
    )

    xi = calc_propagating_flux_ratio(sigma, beta)
    C, B, E = calc_wind_coefficients(sigma)

    wind_limited = False
    if wind_limit is not None:
        wind_speed, wind_limited = wind_limit.apply(wind_speed, I_r)

    phi_w = calc_wind_factor(C, B, E, wind_speed, beta_ratio)
    phi_s = calc_slope_factor(beta, slope)

    heat_sink = calc_heat_sink(fuel_complex, dead, live, rho_b)

    R_0 = (I_r * xi) / max(epsilon, heat_sink)
    R = R_0 * (1 + phi_w + phi_s)

    t_r = calc_residence_time(sigma)
    H_a = I_r * t_r
    I_b = H_a * R

    return HeterogeneousResult(
        fuel_complex=fuel_complex,
        bulk_density=rho_b,
        packing_ratio=beta,
        optimum_packing_ratio=beta_opt,
        relative_packing_ratio=beta_ratio,
        max_reaction_velocity=gamma_max,
        reaction_velocity_exponent=A,
        optimum_reaction_velocity=gamma,
        dead_mx=dead_mx,
        live_mx=live_mx,
        dead_moisture_damping=dead_moist_damping,
        live_moisture_damping=live_moist_damping,
        dead_mineral_damping=dead_mineral_damping,
        live_mineral_damping=live_mineral_damping,
        reaction_intensity=I_r,
        propagating_flux_ratio=xi,
        wind_coeff_C=C,
        wind_coeff_B=B,
        wind_coeff_E=E,
        wind_factor=phi_w,
        slope_factor=phi_s,
        heat_sink=heat_sink,
        ros_0=R_0,
        ros=R,
        residence_time=t_r,
        heat_per_unit_area=H_a,
        fireline_intensity=I_b,
        flame_length=calc_flame_length(I_b),
        wind_speed=wind_speed,
        wind_limited=wind_limited,
    )


def calc_heterogeneous_si(dead: Sequence[FuelClass], live: Sequence[FuelClass], depth: float,
                          wind_speed: float, slope: float, dead_mx: float,
                          wind_limit: Optional[WindLimit] = None,
                          epsilon: float = EPSILON) -> HeterogeneousResult:
    """SI boundary for ``calc_heterogeneous``.

    Class SAV ratios in 1/m, loadings in kg/m^2, heat contents in kJ/kg,
    particle densities in kg/m^3, depth in m and wind speed in m/s. A class
    with no ``particle`` gets the standard particle. Outputs use the same SI
    units as ``calc_rothermel_si``.
    """
    def to_us(fc: FuelClass) -> FuelClass:
        return FuelClass(
            sav_ratio=m_inv_to_ft_inv(fc.sav_ratio),
            loading=KiSq_to_Lbsft2(fc.loading),
            moisture=fc.moisture,
            particle=None if fc.particle is None else particle_to_us(fc.particle),
        )

    result = calc_heterogeneous(
        [to_us(fc) for fc in dead],
        [to_us(fc) for fc in live],
        m_to_ft(depth),
        m_s_to_ft_min(wind_speed),
        slope,
        dead_mx,
        wind_limit,
        epsilon,
    )

    fc = result.fuel_complex
    fuel_complex = replace(
        fc,
        dead_net_load=Lbsft2_to_KiSq(fc.dead_net_load),
        live_net_load=Lbsft2_to_KiSq(fc.live_net_load),
        dead_sav_ratio=ft_inv_to_m_inv(fc.dead_sav_ratio),
        live_sav_ratio=ft_inv_to_m_inv(fc.live_sav_ratio),
        sav_ratio=ft_inv_to_m_inv(fc.sav_ratio),
        dead_heat_content=BTU_lb_to_kJ_kg(fc.dead_heat_content),
        live_heat_content=BTU_lb_to_kJ_kg(fc.live_heat_content),
        total_loading=Lbsft2_to_KiSq(fc.total_loading),
    )

    return replace(
        result,
        fuel_complex=fuel_complex,
        bulk_density=Lbsft3_to_KiCu(result.bulk_density),
        max_reaction_velocity=result.max_reaction_velocity / 60,
        optimum_reaction_velocity=result.optimum_reaction_velocity / 60,
        reaction_intensity=BTU_ft2_min_to_kW_m2(result.reaction_intensity),
        heat_sink=BTU_ft3_to_kJ_m3(result.heat_sink),
        ros_0=ft_min_to_m_s(result.ros_0),
        ros=ft_min_to_m_s(result.ros),
        residence_time=min_to_s(result.residence_time),
        heat_per_unit_area=BTU_ft2_to_kJ_m2(result.heat_per_unit_area),
        fireline_intensity=BTU_ft_min_to_kW_m(result.fireline_intensity),
        flame_length=ft_to_m(result.flame_length),
        wind_speed=ft_min_to_m_s(result.wind_speed),
    )
