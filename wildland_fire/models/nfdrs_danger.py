"""NFDRS fire-danger components and indices.

Implements the 1978 NFDRS rating chain (Cohen and Deeming 1985) on top of the
fuel models in ``wildland_fire.models.fuel_models``:

    - SC, spread component (ft/min), surface-area weighted Rothermel spread
    - ERC, energy release component, loading weighted
    - BI, burning index
    - IC, ignition component
    - MCOI, human-caused fire occurrence index
    - LOI, lightning-caused fire occurrence index
    - FLI, fire load index

The components share the Rothermel equations from
``wildland_fire.models.rothermel`` and work in US customary units. Fuel
loadings come from the fuel model in lb/ft^2; all moistures are fractions.

Classes:
    - NFDRSFuelMoistures: dead and live moistures for one evaluation.
    - SpreadComponentResult, EnergyReleaseResult, IgnitionComponentResult,
      LightningOccurrenceResult, FireDangerResult: result records.
"""

from dataclasses import dataclass
from typing import Optional, Union
import logging
import numpy as np

from wildland_fire.exceptions import ValidationError
from wildland_fire.models.fuel_models import NFDRSFuelModel, get_fuel_model
from wildland_fire.models.nfdrs_moisture import FuelLoadingTransfer, calc_fuel_loading_transfer
from wildland_fire.models.rothermel import (
    calc_max_reaction_velocity,
    calc_optimum_packing_ratio,
    calc_optimum_reaction_velocity,
    calc_propagating_flux_ratio,
    calc_reaction_velocity_exponent,
    calc_wind_coefficients,
)
from wildland_fire.utilities.data_classes import check_finite, check_non_negative, check_positive
from wildland_fire.utilities.unit_conversions import F_to_C, mph_to_ft_min

logger = logging.getLogger(__name__)

# Particle properties shared by all NFDRS classes
RHO_P = 32.0
STD = STL = 0.0555
SD = SL = 0.01

SLOPE_FACTORS = {1: 0.267, 2: 0.533, 3: 1.068, 4: 2.134, 5: 4.273}

# Ignition component normalization
PNORM1 = 0.00232
PNORM2 = 0.99767
PNORM3 = 0.0000185

# Lightning activity level -> (CGRATE, STMDIA mi, TOTWID mi)
LIGHTNING_TABLE = {
    1: (0.0, 0.0, 0.0),
    2: (12.5, 3.0, 7.0),
    3: (25.0, 4.0, 8.0),
    4: (50.0, 5.0, 9.0),
    5: (100.0, 7.0, 11.0),
    6: (100.0, 7.0, 11.0),
}

INDEX_CAP = 100.0


@dataclass
class NFDRSFuelMoistures:
    """Dead and live fuel moistures (fractions).

    Attributes:
        mc1 (float): 1-hr timelag moisture.
        mc10 (float): 10-hr timelag moisture.
        mc100 (float): 100-hr timelag moisture.
        mc1000 (float): 1000-hr timelag moisture.
        mcherb (float): Live herbaceous moisture.
        mcwood (float): Live woody moisture.
    """
    mc1: float
    mc10: float
    mc100: float
    mc1000: float
    mcherb: float
    mcwood: float

    def validate(self):
        for name in ("mc1", "mc10", "mc100", "mc1000", "mcherb", "mcwood"):
            check_non_negative(name, getattr(self, name))

    @property
    def dead(self) -> np.ndarray:
        """1, 10 and 100-hr moistures"""
        return np.array([self.mc1, self.mc10, self.mc100], dtype=float)

    @property
    def live(self) -> np.ndarray:
        """Herbaceous and woody moistures"""
        return np.array([self.mcherb, self.mcwood], dtype=float)


@dataclass(frozen=True)
class SpreadComponentResult:
    spread_component: float
    rate_of_spread: float
    reaction_intensity: float
    live_mx_pct: float
    wind_factor: float
    slope_factor: float
    heat_sink: float
    wind_limited: bool


@dataclass(frozen=True)
class EnergyReleaseResult:
    energy_release_component: float
    reaction_intensity: float
    residence_time: float
    live_mx_pct: float


@dataclass(frozen=True)
class IgnitionComponentResult:
    """Ignition component and its parts.

    Attributes:
        ignition_component (float): IC, 0-100.
        heat_of_ignition (float): QIGN (cal/g).
        probability_of_ignition (float): P(I), 0-100.
        probability_of_fire (float): P(F/I), square root of the normalized SC.
    """
    ignition_component: float
    heat_of_ignition: float
    probability_of_ignition: float
    probability_of_fire: float


@dataclass(frozen=True)
class LightningOccurrenceResult:
    lightning_occurrence: float
    strike_rate: float
    lightning_duration: float
    fraction_inside: float
    fraction_outside: float
    rain_duration: float
    rain_area_moisture: float
    ic_rain: float
    ic_mean: float
    lightning_risk: float


@dataclass(frozen=True)
class FireDangerResult:
    """All components and indices for one observation."""
    spread: SpreadComponentResult
    energy_release: EnergyReleaseResult
    ignition: IgnitionComponentResult
    lightning: LightningOccurrenceResult
    load_transfer: Optional[FuelLoadingTransfer]
    burning_index: float
    human_occurrence: float
    fire_load_index: float

    @property
    def spread_component(self) -> float:
        return self.spread.spread_component

    @property
    def energy_release_component(self) -> float:
        return self.energy_release.energy_release_component

    @property
    def ignition_component(self) -> float:
        return self.ignition.ignition_component

    @property
    def lightning_occurrence(self) -> float:
        return self.lightning.lightning_occurrence


@dataclass(frozen=True)
class _FuelLoads:
    # lb/ft^2; dead order 1, 10, 100, 1000 and live order herb, wood
    dead: np.ndarray
    live: np.ndarray
    transfer: Optional[FuelLoadingTransfer]


def _resolve_model(model: Union[str, NFDRSFuelModel]) -> NFDRSFuelModel:
    if isinstance(model, NFDRSFuelModel):
        return model
    return get_fuel_model(model)


def _fuel_loads(model: NFDRSFuelModel, moistures: NFDRSFuelMoistures, herb_transfer: bool) -> _FuelLoads:
    dead = model.dead_loads
    live = model.live_loads

    if not herb_transfer:
        return _FuelLoads(dead=dead, live=live, transfer=None)

    transfer = calc_fuel_loading_transfer(moistures.mcherb, dead[0], live[0])
    dead = dead.copy()
    live = live.copy()
    dead[0] = transfer.one_hour_load
    live[0] = transfer.herb_load

    return _FuelLoads(dead=dead, live=live, transfer=transfer)


def _weights(values: np.ndarray) -> np.ndarray:
    return values / max(1e-10, float(np.sum(values)))

def _damping(r: float, b: float, c: float, d: float) -> float:
    return min(1.0, max(0.0, 1.0 + b * r + c * r ** 2 + d * r ** 3))

def _surface_areas(loads, savs) -> np.ndarray:
    return loads / RHO_P * savs


def _surface_weighted_sav(dead_loads, dead_savs, live_loads, live_savs) -> float:
    sa_d = _surface_areas(dead_loads, dead_savs)
    sa_l = _surface_areas(live_loads, live_savs)

    total = max(1e-10, float(np.sum(sa_d) + np.sum(sa_l)))
    f_dead = np.sum(sa_d) / total
    f_live = np.sum(sa_l) / total

    sigma = f_dead * np.dot(_weights(sa_d), dead_savs) + f_live * np.dot(_weights(sa_l), live_savs)

    return max(1.0, float(sigma))


def calc_nfdrs_live_mx(dead_loads, dead_savs, dead_moistures, live_loads, live_savs, mxd_pct: float) -> float:
    """Live fuel moisture of extinction for the NFDRS classes (percent).

    Args:
        dead_loads (array_like): 1, 10 and 100-hr loadings (lb/ft^2)
        dead_savs (array_like): dead SAV ratios (1/ft)
        dead_moistures (array_like): dead moistures (fraction)
        live_loads (array_like): herbaceous and woody loadings (lb/ft^2)
        live_savs (array_like): live SAV ratios (1/ft)
        mxd_pct (float): dead moisture of extinction (percent)

    Returns:
        float: MXL (percent), never below MXD
    """
    wn_d = np.asarray(dead_loads, dtype=float) * (1 - STD)
    wn_l = np.asarray(live_loads, dtype=float) * (1 - STL)

    hn_d = wn_d * np.exp(-138.0 / np.maximum(1.0, dead_savs))
    hn_l = wn_l * np.exp(-500.0 / np.maximum(1.0, live_savs))

    hn_dead = float(np.sum(hn_d))
    hn_live = float(np.sum(hn_l))

    mc_pct = np.asarray(dead_moistures, dtype=float) * 100
    if hn_dead > 1e-10:
        mclfe = float(np.dot(mc_pct, hn_d)) / hn_dead
    else:
        mclfe = mc_pct[0]

    wrat = hn_dead / hn_live if hn_live > 1e-10 else 0.0

    mxl = (2.9 * wrat * (1.0 - mclfe / mxd_pct) - 0.226) * 100.0

    return max(mxd_pct, mxl)


def calc_spread_component(model: Union[str, NFDRSFuelModel], moistures: NFDRSFuelMoistures,
                          wind_speed_mph: float, slope_class: int, fuels_wet: bool = False,
                          herb_transfer: bool = True) -> SpreadComponentResult:
    """NFDRS spread component.

    Uses the 1, 10 and 100-hr dead classes and both live classes, weighted by
    surface area. The wind term ``WS * 88 * WNDFC`` is capped at 0.9 times the
    reaction intensity before the wind exponent is applied.

    Args:
        model (str or NFDRSFuelModel): fuel model or its code
        moistures (NFDRSFuelMoistures): fuel moistures
        wind_speed_mph (float): 20-ft wind speed (mi/h)
        slope_class (int): NFDRS slope class 1-5
        fuels_wet (bool, optional): fuels wet or snow covered, forces SC to 0
        herb_transfer (bool, optional): move cured herbaceous load to the 1-hr class

    Returns:
        SpreadComponentResult: SC (ft/min) and intermediate values
    """
    model = _resolve_model(model)
    moistures.validate()
    check_non_negative("wind_speed_mph", wind_speed_mph)
    if slope_class not in SLOPE_FACTORS:
        raise ValidationError("Slope class must be 1-5", field="slope_class", value=slope_class)

    loads = _fuel_loads(model, moistures, herb_transfer)

    w_d = loads.dead[:3]
    sg_d = model.dead_sav_ratios[:3]
    mc_d = moistures.dead
    w_l = loads.live
    sg_l = model.live_sav_ratios
    mc_l = moistures.live

    sa_d = _surface_areas(w_d, sg_d)
    sa_l = _surface_areas(w_l, sg_l)
    f_d = _weights(sa_d)
    f_l = _weights(sa_l)

    sa_total = max(1e-10, float(np.sum(sa_d) + np.sum(sa_l)))
    FDEAD = np.sum(sa_d) / sa_total
    FLIVE = np.sum(sa_l) / sa_total

    WDEADN = float(np.dot(f_d, w_d * (1 - STD)))
    WLIVEN = float(np.dot(f_l, w_l * (1 - STL)))

    SGBRT = _surface_weighted_sav(w_d, sg_d, w_l, sg_l)

    WTOT = float(np.sum(w_d) + np.sum(w_l))
    RHOBED = WTOT / max(0.01, model.depth)
    BETBAR = RHOBED / RHO_P
    BETOP = calc_optimum_packing_ratio(SGBRT)
    ratio = BETBAR / max(1e-10, BETOP)

    GMAMX = calc_max_reaction_velocity(SGBRT)
    AD = calc_reaction_velocity_exponent(SGBRT)
    GMAOP = calc_optimum_reaction_velocity(GMAMX, AD, ratio)

    ZETA = calc_propagating_flux_ratio(SGBRT, BETBAR)

    MXL = calc_nfdrs_live_mx(w_d, sg_d, mc_d, w_l, sg_l, model.mxd)

    DEDRT = float(np.dot(f_d, mc_d)) * 100 / model.mxd
    LIVRT = float(np.dot(f_l, mc_l)) * 100 / max(0.01, MXL)

    ETAMD = _damping(DEDRT, -2.59, 5.11, -3.52)
    ETAML = _damping(LIVRT, -2.59, 5.11, -3.52)
    ETASD = 0.174 * SD ** (-0.19)
    ETASL = 0.174 * SL ** (-0.19)

    IR = GMAOP * (WDEADN * model.hd * ETASD * ETAMD + WLIVEN * model.hl * ETASL * ETAML)

    C, B, E = calc_wind_coefficients(SGBRT)

    wind_term = mph_to_ft_min(wind_speed_mph) * model.wndfc
    wind_limited = wind_term > 0.9 * IR
    if wind_limited:
        logger.debug("SC wind term %.1f capped at 0.9*IR = %.1f", wind_term, 0.9 * IR)
        wind_term = 0.9 * IR

    if wind_term > 0 and ratio > 0:
        PHIWND = C * ratio ** (-E) * wind_term ** B
    else:
        PHIWND = 0.0

    PHISLP = SLOPE_FACTORS[slope_class] * max(0.01, BETBAR) ** (-0.3)

    qig_d = 250.0 + 11.16 * mc_d * 100
    qig_l = 250.0 + 11.16 * mc_l * 100
    HTSINK = RHOBED * (
        FDEAD * np.dot(f_d, np.exp(-138.0 / np.maximum(1.0, sg_d)) * qig_d) +
        FLIVE * np.dot(f_l, np.exp(-138.0 / np.maximum(1.0, sg_l)) * qig_l)
    )

    ROS = IR * ZETA * (1.0 + PHISLP + PHIWND) / max(0.01, HTSINK)

    return SpreadComponentResult(
        spread_component=0.0 if fuels_wet else float(ROS),
        rate_of_spread=float(ROS),
        reaction_intensity=float(IR),
        live_mx_pct=float(MXL),
        wind_factor=float(PHIWND),
        slope_factor=float(PHISLP),
        heat_sink=float(HTSINK),
        wind_limited=bool(wind_limited),
    )


def calc_energy_release_component(model: Union[str, NFDRSFuelModel], moistures: NFDRSFuelMoistures,
                                  live_mx_pct: Optional[float] = None,
                                  herb_transfer: bool = True) -> EnergyReleaseResult:
    """NFDRS energy release component.

    Loading-weighted over all four dead classes and both live classes, with
    the ERC moisture damping polynomial ``1 - 2r + 1.5r^2 - 0.5r^3``. The
    residence time uses the surface-area weighted SAV ratio of the spread
    component.

    Args:
        model (str or NFDRSFuelModel): fuel model or its code
        moistures (NFDRSFuelMoistures): fuel moistures
        live_mx_pct (float, optional): live moisture of extinction (percent).
            Derived from the fuel complex when None.
        herb_transfer (bool, optional): move cured herbaceous load to the 1-hr class

    Returns:
        EnergyReleaseResult: ERC and intermediate values
    """
    model = _resolve_model(model)
    moistures.validate()

    loads = _fuel_loads(model, moistures, herb_transfer)

    w_d = loads.dead
    sg_d = model.dead_sav_ratios
    mc_d = np.array([moistures.mc1, moistures.mc10, moistures.mc100, moistures.mc1000], dtype=float)
    w_l = loads.live
    sg_l = model.live_sav_ratios
    mc_l = moistures.live

    WTOTD = float(np.sum(w_d))
    WTOTL = float(np.sum(w_l))
    WTOT = WTOTD + WTOTL

    f_de = _weights(w_d)
    f_le = _weights(w_l)
    FDEADE = WTOTD / max(1e-10, WTOT)
    FLIVEE = WTOTL / max(1e-10, WTOT)

    WDEDNE = WTOTD * (1.0 - STD)
    WLIVNE = WTOTL * (1.0 - STL)

    SGBRTE = max(1.0, FDEADE * float(np.dot(f_de, sg_d)) + FLIVEE * float(np.dot(f_le, sg_l)))
    SGBRT = _surface_weighted_sav(w_d[:3], sg_d[:3], w_l, sg_l)

    RHOBED = WTOT / max(0.01, model.depth)
    BETBAR = RHOBED / RHO_P
    BETOPE = calc_optimum_packing_ratio(SGBRTE)
    ratio = BETBAR / max(1e-10, BETOPE)

    GMAMXE = calc_max_reaction_velocity(SGBRTE)
    ADE = calc_reaction_velocity_exponent(SGBRTE)
    GMAOPE = calc_optimum_reaction_velocity(GMAMXE, ADE, ratio)

    if live_mx_pct is None:
        live_mx_pct = calc_nfdrs_live_mx(w_d[:3], sg_d[:3], mc_d[:3], w_l, sg_l, model.mxd)
    else:
        check_positive("live_mx_pct", live_mx_pct)

    DEDRTE = float(np.dot(f_de, mc_d)) * 100 / model.mxd
    LIVRTE = float(np.dot(f_le, mc_l)) * 100 / max(0.01, live_mx_pct)

    ETAMDE = _damping(DEDRTE, -2.0, 1.5, -0.5)
    ETAMLE = _damping(LIVRTE, -2.0, 1.5, -0.5)
    ETASD = 0.174 * SD ** (-0.19)
    ETASL = 0.174 * SL ** (-0.19)

    TAU = 384.0 / SGBRT

    IRE = GMAOPE * (FDEADE * WDEDNE * model.hd * ETASD * ETAMDE +
                    FLIVEE * WLIVNE * model.hl * ETASL * ETAMLE)

    return EnergyReleaseResult(
        energy_release_component=float(0.04 * IRE * TAU),
        reaction_intensity=float(IRE),
        residence_time=float(TAU),
        live_mx_pct=float(live_mx_pct),
    )


def calc_burning_index(sc: float, erc: float, fuels_wet: bool = False) -> float:
    """Burning index, BI = 3.01 * (SC * ERC)^0.46.

    Args:
        sc (float): spread component (ft/min)
        erc (float): energy release component
        fuels_wet (bool, optional): forces BI to 0

    Returns:
        float: BI
    """
    check_finite("sc", sc)
    check_finite("erc", erc)

    if fuels_wet:
        return 0.0

    return 3.01 * max(0.0, sc * erc) ** 0.46


def calc_ignition_component(temp_f: float, mc1: float, sc: float, scm: float) -> IgnitionComponentResult:
    """Ignition component from temperature, 1-hr moisture and spread.

    Args:
        temp_f (float): dry bulb temperature at the fuel surface (F)
        mc1 (float): 1-hr moisture (fraction)
        sc (float): spread component (ft/min)
        scm (float): spread component at which fires become reportable (ft/min)

    Returns:
        IgnitionComponentResult: IC and its probabilities
    """
    check_finite("temp_f", temp_f)
    check_non_negative("mc1", mc1)
    check_non_negative("sc", sc)
    check_non_negative("scm", scm)

    T = F_to_C(temp_f)
    M = mc1 * 100

    QIGN = (144.5 - 0.266 * T - 0.00058 * T ** 2 - 0.01 * T * M
            + 18.54 * (1.0 - np.exp(-0.151 * M)) + 6.4 * M)

    CHI = max(0.0, (344.0 - QIGN) / 10.0)

    P = CHI ** 3.6 * PNORM3
    if P <= PNORM1:
        PI = 0.0
    else:
        PI = min(100.0, max(0.0, (P - PNORM1) * 100.0 / PNORM2))

    SCN = 100.0 * sc / max(1e-10, scm)
    PFI = np.sqrt(max(0.0, SCN))

    return IgnitionComponentResult(
        ignition_component=float(0.10 * PI * PFI),
        heat_of_ignition=float(QIGN),
        probability_of_ignition=float(PI),
        probability_of_fire=float(PFI),
    )


def calc_human_fire_occurrence(mrisk: float, ic: float) -> float:
    """Human-caused fire occurrence index, MCOI = 0.01 * MRISK * IC."""
    check_non_negative("mrisk", mrisk)
    check_non_negative("ic", ic)
    return 0.01 * mrisk * ic


def calc_lightning_fire_occurrence(lal: int, ic: float, mc1: float, is_lightning: bool = False,
                                   is_raining: bool = False, storm_speed_mph: float = 30.0,
                                   lrsf: float = 1.0, yloi: float = 0.0) -> LightningOccurrenceResult:
    """Lightning-caused fire occurrence index.

    LAL 6 (dry lightning) rates 100. Without lightning or with rain at the
    observation, only the carry-over ``0.25 * YLOI`` from the previous day
    remains.

    Args:
        lal (int): lightning activity level 1-6
        ic (float): ignition component
        mc1 (float): 1-hr moisture (fraction)
        is_lightning (bool, optional): lightning observed
        is_raining (bool, optional): rain at observation time
        storm_speed_mph (float, optional): storm translational speed (mi/h). Defaults to 30.
        lrsf (float, optional): lightning risk scaling factor. Defaults to 1.
        yloi (float, optional): previous day's LOI. Defaults to 0.

    Returns:
        LightningOccurrenceResult: LOI and the storm corridor quantities
    """
    if lal not in LIGHTNING_TABLE:
        raise ValidationError("Lightning activity level must be 1-6", field="lal", value=lal)
    check_non_negative("ic", ic)
    check_non_negative("mc1", mc1)
    check_non_negative("storm_speed_mph", storm_speed_mph)
    check_non_negative("lrsf", lrsf)
    check_non_negative("yloi", yloi)

    CGRATE, STMDIA, TOTWID = LIGHTNING_TABLE[lal]
    STMSPD = storm_speed_mph

    LGTDUR = -86.83 + 153.41 * CGRATE ** 0.1437 if CGRATE > 0 else 0.0

    # Share of the swept corridor inside the rain core, Cohen and Deeming
    # (1985) eq. for FINSID: storm-core area over total-width area
    if TOTWID > 0:
        FINSID = ((STMDIA * STMSPD * LGTDUR + 0.7854 * STMDIA ** 2) /
                  max(1e-10, TOTWID * STMSPD * LGTDUR + 0.7854 * TOTWID ** 2))
    else:
        FINSID = 0.0
    FOTSID = 1.0 - FINSID

    RAIDUR = STMDIA / STMSPD if STMSPD > 0 else 0.0

    FMF = mc1 + ((76.0 + 2.7 * RAIDUR) / 100.0 - mc1) * (1.0 - np.exp(-RAIDUR))

    # Proportional reduction rather than a fresh IC at FMF
    ICR = ic * max(0.0, 1.0 - (FMF - mc1) * 10.0)
    ICBAR = (FINSID * ICR + FOTSID * ic) / 100.0

    LRISK = min(INDEX_CAP, CGRATE * lrsf)

    if lal >= 6:
        LOI = INDEX_CAP
    elif not is_lightning or is_raining:
        LOI = min(INDEX_CAP, 0.25 * yloi)
    else:
        LOI = min(INDEX_CAP, 10.0 * LRISK * ICBAR + 0.25 * yloi)

    return LightningOccurrenceResult(
        lightning_occurrence=float(LOI),
        strike_rate=CGRATE,
        lightning_duration=float(LGTDUR),
        fraction_inside=float(FINSID),
        fraction_outside=float(FOTSID),
        rain_duration=float(RAIDUR),
        rain_area_moisture=float(FMF),
        ic_rain=float(ICR),
        ic_mean=float(ICBAR),
        lightning_risk=float(LRISK),
    )


def calc_fire_load_index(bi: float, loi: float, mcoi: float) -> float:
    """Fire load index, FLI = 0.71 * sqrt(BI^2 + (LOI + MCOI)^2), both terms capped at 100."""
    check_non_negative("bi", bi)
    check_non_negative("loi", loi)
    check_non_negative("mcoi", mcoi)

    bi = min(INDEX_CAP, bi)
    occurrence = min(INDEX_CAP, loi + mcoi)

    return 0.71 * np.sqrt(bi ** 2 + occurrence ** 2)


def calc_fire_danger(model: Union[str, NFDRSFuelModel], moistures: NFDRSFuelMoistures,
                     wind_speed_mph: float, slope_class: int, temp_f: float,
                     mrisk: float = 0.0, lal: int = 1, is_lightning: bool = False,
                     is_raining: bool = False, fuels_wet: bool = False,
                     storm_speed_mph: float = 30.0, lrsf: float = 1.0, yloi: float = 0.0,
                     herb_transfer: bool = True) -> FireDangerResult:
    """Evaluates the full NFDRS rating chain for one observation.

    Args:
        model (str or NFDRSFuelModel): fuel model or its code
        moistures (NFDRSFuelMoistures): fuel moistures
        wind_speed_mph (float): 20-ft wind speed (mi/h)
        slope_class (int): NFDRS slope class 1-5
        temp_f (float): dry bulb temperature (F)
        mrisk (float, optional): human-caused risk. Defaults to 0.
        lal (int, optional): lightning activity level 1-6. Defaults to 1.
        is_lightning (bool, optional): lightning observed
        is_raining (bool, optional): rain at observation time
        fuels_wet (bool, optional): fuels wet or snow covered
        storm_speed_mph (float, optional): storm speed (mi/h). Defaults to 30.
        lrsf (float, optional): lightning risk scaling factor. Defaults to 1.
        yloi (float, optional): previous day's LOI. Defaults to 0.
        herb_transfer (bool, optional): move cured herbaceous load to the 1-hr class

    Returns:
        FireDangerResult: every component and index
    """
    model = _resolve_model(model)

    spread = calc_spread_component(model, moistures, wind_speed_mph, slope_class,
                                   fuels_wet=fuels_wet, herb_transfer=herb_transfer)
    energy = calc_energy_release_component(model, moistures, live_mx_pct=spread.live_mx_pct,
                                           herb_transfer=herb_transfer)

    sc = spread.spread_component
    erc = energy.energy_release_component

    bi = calc_burning_index(sc, erc, fuels_wet=fuels_wet)
    ignition = calc_ignition_component(temp_f, moistures.mc1, sc, model.scm)
    ic = ignition.ignition_component

    mcoi = calc_human_fire_occurrence(mrisk, ic)
    lightning = calc_lightning_fire_occurrence(lal, ic, moistures.mc1, is_lightning=is_lightning,
                                               is_raining=is_raining, storm_speed_mph=storm_speed_mph,
                                               lrsf=lrsf, yloi=yloi)

    fli = calc_fire_load_index(bi, lightning.lightning_occurrence, mcoi)

    logger.debug("Fuel model %s: SC=%.2f ERC=%.2f BI=%.2f IC=%.2f FLI=%.2f",
                 model.code, sc, erc, bi, ic, fli)

    return FireDangerResult(
        spread=spread,
        energy_release=energy,
        ignition=ignition,
        lightning=lightning,
        load_transfer=_fuel_loads(model, moistures, herb_transfer).transfer,
        burning_index=float(bi),
        human_occurrence=float(mcoi),
        fire_load_index=float(fli),
    )
