"""NFDRS fuel moisture equations.

Dead fuel moistures follow the 1978 NFDRS as documented by Cohen and Deeming
(1985): equilibrium moisture content (EMC) from temperature and humidity,
algebraic 1-hr and 10-hr timelag moistures, and daily relaxation of the
100-hr and 1000-hr classes toward a boundary condition built from the
day-length weighted EMC and the precipitation duration.

The 100-hr and 1000-hr classes are available both as the original one-day
step and as a continuous first-order relaxation

    dMC/dt = k * (boundary(t) - MC)

integrated with ``wildland_fire.utilities.ode_solver``. The rate k is chosen so
that one day at a constant boundary reproduces the discrete step exactly.

Live herbaceous and woody moistures are selected by stage flags supplied by
the caller; the functions hold no calendar state.

All moistures are dry-weight fractions unless the name ends in ``_pct``.
Temperatures are in degrees Fahrenheit and relative humidity in percent.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional, Sequence, Union
import logging
import numpy as np

from wildland_fire.exceptions import ValidationError
from wildland_fire.models.spread_relations import calc_curing_fraction
from wildland_fire.utilities.config import ModelConfig
from wildland_fire.utilities.data_classes import check_finite, check_non_negative
from wildland_fire.utilities.ode_solver import ODESolution, solve_ode

logger = logging.getLogger(__name__)

HUNDRED_HOUR_COEFF = 1.0 - 0.87 * np.exp(-0.24)
THOUSAND_HOUR_COEFF = 1.0 - 0.82 * np.exp(-0.168)

# Continuous rates (1/day) matching the daily steps above
HUNDRED_HOUR_RESPONSE = -np.log(1.0 - HUNDRED_HOUR_COEFF)
THOUSAND_HOUR_RESPONSE = -np.log(1.0 - THOUSAND_HOUR_COEFF)

CLIMATE_CLASSES = (1, 2, 3, 4)

# Climate class -> (HERBGA, HERBGB, ANNTA, ANNTB, PERTA, PERTB)
HERB_COEFFS = {
    1: (-70.0, 12.8, -150.5, 18.4, 11.2, 7.4),
    2: (-100.0, 14.0, -187.7, 19.6, -10.3, 8.3),
    3: (-137.5, 15.5, -245.2, 22.0, -42.7, 9.8),
    4: (-185.0, 17.4, -305.2, 24.3, -93.5, 12.2),
}

# Climate class -> (PREGRN, WOODGA, WOODGB)
WOODY_COEFFS = {
    1: (0.50, 12.5, 7.5),
    2: (0.60, -5.0, 8.2),
    3: (0.70, -22.5, 8.9),
    4: (0.80, -45.0, 9.8),
}

HERB_MIN_MOISTURE = 0.30
HERB_GREEN_THRESHOLD = 1.20
HERB_MAX_MOISTURE = 2.50
HERB_TRANSITION_MAX = 1.50
WOODY_MAX_MOISTURE = 2.0

Boundary = Union[float, Callable[[float], float]]


class HerbStage(Enum):
    GREENUP = "greenup"
    GREEN = "green"
    TRANSITION = "transition"
    CURED = "cured"


class WoodyStage(Enum):
    PREGREEN = "pregreen"
    GREENUP = "greenup"
    GREEN = "green"


@dataclass(frozen=True)
class LiveFuelMoisture:
    """Live fuel moisture and the stage that produced it.

    Attributes:
        moisture (float): Moisture content (fraction).
        stage (Enum): ``HerbStage`` or ``WoodyStage`` member.
    """
    moisture: float
    stage: Enum


@dataclass(frozen=True)
class FuelLoadingTransfer:
    """Result of moving cured herbaceous load into the 1-hr class.

    Attributes:
        fraction (float): FCTCUR, fraction of the herbaceous load transferred.
        transferred (float): WHERBC, load moved to the 1-hr class.
        one_hour_load (float): W1P, 1-hr load including the transfer.
        herb_load (float): WHERBP, herbaceous load left live.
    """
    fraction: float
    transferred: float
    one_hour_load: float
    herb_load: float


def check_climate_class(climate_class: int) -> int:
    if climate_class not in CLIMATE_CLASSES:
        raise ValidationError(f"Climate class must be one of {CLIMATE_CLASSES}",
                              field="climate_class", value=climate_class)
    return int(climate_class)


def calc_emc(temp_f: float, rh_pct: float) -> float:
    """Equilibrium moisture content from temperature and relative humidity.

    Three regressions split at 10% and 50% relative humidity, used as
    published.

    Args:
        temp_f (float): dry bulb temperature (F)
        rh_pct (float): relative humidity (%)

    Returns:
        float: EMC (fraction)
    """
    check_finite("temp_f", temp_f)
    check_finite("rh_pct", rh_pct)
    if rh_pct < 0 or rh_pct > 100:
        raise ValidationError("Relative humidity must lie in [0, 100] percent", field="rh_pct", value=rh_pct)

    if rh_pct < 10:
        emc = 0.03229 + 0.281073 * rh_pct - 0.000578 * temp_f * rh_pct
    elif rh_pct < 50:
        emc = 2.22749 + 0.160107 * rh_pct - 0.014784 * temp_f
    else:
        emc = 21.0606 + 0.005565 * rh_pct ** 2 - 0.00035 * rh_pct * temp_f - 0.483199 * rh_pct

    return emc / 100


def calc_one_hour_moisture(emcprm: float, mc10: Optional[float] = None,
                           use_fuel_sticks: bool = False, is_raining: bool = False) -> float:
    """1-hr timelag fuel moisture.

    Args:
        emcprm (float): EMC at the fuel-atmosphere interface (fraction)
        mc10 (float, optional): 10-hr moisture, required with fuel sticks
        use_fuel_sticks (bool, optional): whether fuel moisture sticks are read
        is_raining (bool, optional): rain at observation time

    Returns:
        float: MC1 (fraction)
    """
    check_non_negative("emcprm", emcprm)

    if is_raining:
        return 0.35

    if use_fuel_sticks:
        if mc10 is None:
            raise ValidationError("10-hr moisture is required when fuel sticks are used", field="mc10")
        check_non_negative("mc10", mc10)
        return (4.0 * emcprm + mc10) / 5.0

    return 1.03 * emcprm


def calc_ten_hour_moisture(emcprm: float, use_fuel_sticks: bool = False,
                           stick_weight_g: float = 100.0, stick_age_days: float = 0.0,
                           climate_class: int = 1) -> float:
    """10-hr timelag fuel moisture.

    With fuel sticks the reading is age corrected:
    ``(AA*CC + BB*CC*(WT - 100)) / 100`` where AA = 0.5*AGE/30,
    BB = 1 + 0.02*AGE/30 and CC = CLIMAT/4.

    Args:
        emcprm (float): EMC at the fuel-atmosphere interface (fraction)
        use_fuel_sticks (bool, optional): whether a stick weight is available
        stick_weight_g (float, optional): stick weight (g). Defaults to 100.
        stick_age_days (float, optional): days since the sticks were set out
        climate_class (int, optional): NFDRS climate class 1-4

    Returns:
        float: MC10 (fraction)
    """
    check_non_negative("emcprm", emcprm)

    if not use_fuel_sticks:
        return 1.28 * emcprm

    check_non_negative("stick_weight_g", stick_weight_g)
    check_non_negative("stick_age_days", stick_age_days)
    climate_class = check_climate_class(climate_class)

    AA = 0.5 * stick_age_days / 30.0
    BB = 1.0 + 0.02 * stick_age_days / 30.0
    CC = climate_class / 4.0

    return (AA * CC + BB * CC * (stick_weight_g - 100.0)) / 100.0


def calc_daylength(lat_deg: float, julian_day: float) -> float:
    """Hours of daylight for a latitude and day of year.

    Args:
        lat_deg (float): station latitude (degrees)
        julian_day (float): day of year, 1-366

    Returns:
        float: daylength (hours)
    """
    check_finite("lat_deg", lat_deg)
    if not 1 <= julian_day <= 366:
        raise ValidationError("Julian day must lie in [1, 366]", field="julian_day", value=julian_day)

    decl = 0.41008 * np.sin((julian_day - 82) * 0.01745)
    tan_product = np.tan(np.radians(lat_deg)) * np.tan(decl)

    # Polar day and night are clipped
    if abs(tan_product) > 0.99:
        logger.debug("Daylength clipped at latitude %.2f, day %d", lat_deg, julian_day)
        tan_product = min(0.99, max(-0.99, tan_product))

    return float(24.0 * (1.0 - np.arccos(tan_product) / 3.1416))


def calc_emc_bar(daylength: float, emc_min: float, emc_max: float) -> float:
    """Daylength weighted 24-hour average EMC.

    Args:
        daylength (float): hours of daylight
        emc_min (float): EMC at max temperature and min humidity (fraction)
        emc_max (float): EMC at min temperature and max humidity (fraction)

    Returns:
        float: EMCBAR (fraction)
    """
    _check_hours("daylength", daylength)
    return (daylength * emc_min + (24.0 - daylength) * emc_max) / 24.0


def calc_hundred_hour_boundary(emc_bar: float, precip_duration: float) -> float:
    """Boundary condition BNDRYH for the 100-hr class.

    Args:
        emc_bar (float): weighted 24-hour average EMC (fraction)
        precip_duration (float): hours of precipitation in the last 24 hours

    Returns:
        float: BNDRYH (fraction)
    """
    _check_hours("precip_duration", precip_duration)
    P = precip_duration
    return ((24.0 - P) * emc_bar + P * (0.5 * P + 41.0) / 100.0) / 24.0


def calc_thousand_hour_boundary(emc_bar: float, precip_duration: float) -> float:
    """Daily boundary condition BNDRYT for the 1000-hr class."""
    _check_hours("precip_duration", precip_duration)
    P = precip_duration
    return ((24.0 - P) * emc_bar + P * (2.7 * P + 76.0) / 100.0) / 24.0


def calc_boundary_running_mean(boundaries: Sequence[float], window: int = 7) -> float:
    """Running mean BDYBAR of the most recent daily 1000-hr boundaries.

    Fewer than ``window`` values average what is available.
    """
    values = np.asarray(boundaries, dtype=float)
    if values.size == 0:
        raise ValidationError("At least one boundary value is required", field="boundaries")

    if not np.all(np.isfinite(values)):
        raise ValidationError("Boundary values must be finite", field="boundaries")

    return float(np.mean(values[-window:]))


def calc_hundred_hour_moisture(previous: float, boundary: float) -> float:
    """One-day step of the 100-hr moisture toward BNDRYH."""
    check_non_negative("previous", previous)
    return previous + (boundary - previous) * HUNDRED_HOUR_COEFF


def calc_thousand_hour_moisture(previous: float, boundary_mean: float) -> float:
    """One-day step of the 1000-hr moisture toward BDYBAR.

    Args:
        previous (float): MC1000 at the previous step (fraction)
        boundary_mean (float): 7-day running mean boundary BDYBAR (fraction)

    Returns:
        float: MC1000 (fraction)
    """
    check_non_negative("previous", previous)
    return previous + (boundary_mean - previous) * THOUSAND_HOUR_COEFF


def integrate_timelag_moisture(initial: float, boundary: Boundary, response: float,
                               days: float = 1.0, config: Optional[ModelConfig] = None) -> ODESolution:
    """Integrates ``dMC/dt = response * (boundary(t) - MC)`` over ``days``.

    Args:
        initial (float): moisture at t = 0 (fraction)
        boundary (float or Callable[[float], float]): boundary condition, constant
            or a function of time in days
        response (float): relaxation rate (1/day)
        days (float, optional): integration length (days). Defaults to 1.
        config (ModelConfig, optional): solver tolerances and step budget

    Raises:
        SolverError: if the integration fails

    Returns:
        ODESolution: accepted steps, time in days
    """
    check_non_negative("initial", initial)
    check_non_negative("days", days)
    check_finite("response", response)

    if config is None:
        config = ModelConfig()

    if not callable(boundary):
        check_finite("boundary", boundary)

    def rhs(t, y):
        b = boundary(t) if callable(boundary) else boundary
        return response * (b - y)

    return solve_ode(rhs, initial, (0.0, days), rtol=config.ode_rtol, atol=config.ode_atol,
                     max_steps=config.ode_max_steps)


def integrate_hundred_hour_moisture(initial: float, boundary: Boundary, days: float = 1.0,
                                    config: Optional[ModelConfig] = None) -> float:
    """Continuous 100-hr moisture after ``days`` days, relaxing toward BNDRYH."""
    sol = integrate_timelag_moisture(initial, boundary, HUNDRED_HOUR_RESPONSE, days, config)
    return float(sol.y_final[0])


def integrate_thousand_hour_moisture(initial: float, boundary: Boundary, days: float = 1.0,
                                     config: Optional[ModelConfig] = None) -> float:
    """Continuous 1000-hr moisture after ``days`` days, relaxing toward BDYBAR."""
    sol = integrate_timelag_moisture(initial, boundary, THOUSAND_HOUR_RESPONSE, days, config)
    return float(sol.y_final[0])


def calc_greenup_fraction(greenup_days: float, climate_class: int) -> float:
    """Fraction of the greenup period elapsed, GREN.

    Greenup lasts 7 days per climate class unit.
    """
    check_non_negative("greenup_days", greenup_days)
    climate_class = check_climate_class(climate_class)

    return min(1.0, greenup_days / (7.0 * climate_class))


def calc_herbaceous_moisture(x1000: float, mc1: float, climate_class: int,
                             is_annual: bool = True, greenup_days: float = 0.0,
                             is_greenup: bool = False, is_cured: bool = False) -> LiveFuelMoisture:
    """Live herbaceous fuel moisture, MCHERB.

    The cured flag takes precedence over the greenup flag. Outside those two
    stages the potential moisture MCHRBP decides between green (above 120%)
    and transition.

    Args:
        x1000 (float): modified 1000-hr moisture X1000 (fraction)
        mc1 (float): 1-hr moisture, used for cured annuals (fraction)
        climate_class (int): NFDRS climate class 1-4
        is_annual (bool, optional): annual rather than perennial herbs
        greenup_days (float, optional): days since greenup started
        is_greenup (bool, optional): greenup in progress
        is_cured (bool, optional): herbs cured or frozen

    Returns:
        LiveFuelMoisture: moisture (fraction) and ``HerbStage``
    """
    check_non_negative("x1000", x1000)
    check_non_negative("mc1", mc1)
    climate_class = check_climate_class(climate_class)

    HERBGA, HERBGB, ANNTA, ANNTB, PERTA, PERTB = HERB_COEFFS[climate_class]
    x1000_pct = x1000 * 100

    perennial_trans = _clamp((PERTA + PERTB * x1000_pct) / 100.0, HERB_MIN_MOISTURE, HERB_TRANSITION_MAX)
    annual_trans = _clamp((ANNTA + ANNTB * x1000_pct) / 100.0, HERB_MIN_MOISTURE, HERB_TRANSITION_MAX)

    if is_cured:
        return LiveFuelMoisture(mc1 if is_annual else perennial_trans, HerbStage.CURED)

    MCHRBP = (HERBGA + HERBGB * x1000_pct) / 100.0

    if is_greenup:
        GREN = calc_greenup_fraction(greenup_days, climate_class)
        moisture = HERB_MIN_MOISTURE + (max(HERB_MIN_MOISTURE, MCHRBP) - HERB_MIN_MOISTURE) * GREN
        return LiveFuelMoisture(moisture, HerbStage.GREENUP)

    if MCHRBP > HERB_GREEN_THRESHOLD:
        return LiveFuelMoisture(min(HERB_MAX_MOISTURE, MCHRBP), HerbStage.GREEN)

    return LiveFuelMoisture(annual_trans if is_annual else perennial_trans, HerbStage.TRANSITION)


def calc_woody_moisture(mc1000: float, climate_class: int, greenup_days: float = 0.0,
                        is_greenup: bool = False, is_frozen: bool = False) -> LiveFuelMoisture:
    """Live woody fuel moisture, MCWOOD.

    Args:
        mc1000 (float): 1000-hr moisture (fraction)
        climate_class (int): NFDRS climate class 1-4
        greenup_days (float, optional): days since greenup started
        is_greenup (bool, optional): greenup in progress
        is_frozen (bool, optional): pregreen or frozen/dormant

    Returns:
        LiveFuelMoisture: moisture (fraction) and ``WoodyStage``
    """
    check_non_negative("mc1000", mc1000)
    climate_class = check_climate_class(climate_class)

    PREGRN, WOODGA, WOODGB = WOODY_COEFFS[climate_class]

    if is_frozen:
        return LiveFuelMoisture(PREGRN, WoodyStage.PREGREEN)

    MCWODP = (WOODGA + WOODGB * mc1000 * 100) / 100.0

    if is_greenup:
        GREN = calc_greenup_fraction(greenup_days, climate_class)
        return LiveFuelMoisture(PREGRN + (max(PREGRN, MCWODP) - PREGRN) * GREN, WoodyStage.GREENUP)

    return LiveFuelMoisture(_clamp(MCWODP, PREGRN, WOODY_MAX_MOISTURE), WoodyStage.GREEN)


def calc_fuel_loading_transfer(mcherb: float, w1: float, wherb: float) -> FuelLoadingTransfer:
    """Transfers cured herbaceous load into the 1-hr class.

    FCTCUR = 1.33 - 0.0111 * MCHERB (percent), clipped to [0, 1]. This is the
    same curing fraction as ``calc_dynamic_load_transfer`` uses.

    Args:
        mcherb (float): herbaceous moisture (fraction)
        w1 (float): 1-hr loading (any loading unit)
        wherb (float): herbaceous loading (same unit as w1)

    Returns:
        FuelLoadingTransfer: fraction and updated loadings
    """
    check_non_negative("mcherb", mcherb)
    check_non_negative("w1", w1)
    check_non_negative("wherb", wherb)

    FCTCUR = calc_curing_fraction(mcherb)
    WHERBC = FCTCUR * wherb

    return FuelLoadingTransfer(fraction=FCTCUR, transferred=WHERBC, one_hour_load=w1 + WHERBC,
                               herb_load=wherb - WHERBC)


def _clamp(value: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, value))

def _check_hours(name: str, hours: float):
    check_finite(name, hours)
    if hours < 0 or hours > 24:
        raise ValidationError("Hours must lie in [0, 24]", field=name, value=hours)
