"""Auxiliary relations used around the Rothermel spread model.

These are small standalone equation sets that feed quantities into the
spread models or translate their outputs:

    - dynamic transfer of cured herbaceous load into the dead class
    - live fuel moisture of extinction
    - effective midflame wind speed (inverse of the wind factor)
    - the wind-speed limit as a function of reaction intensity

References:
    - Albini, F. A. (1976). Computer-based models of wildland fire behavior:
      a user's manual. USDA Forest Service, Intermountain Forest and Range
      Experiment Station.
    - Andrews, P. L. (2018). The Rothermel surface fire spread model and
      associated developments. USDA Forest Service RMRS-GTR-371.
"""

from dataclasses import dataclass
from typing import Sequence, Tuple
import logging
import numpy as np

from wildland_fire.utilities.data_classes import FuelClass, check_non_negative, check_positive

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LoadTransfer:
    """Split of the herbaceous load between the live and dead classes.

    Attributes:
        fraction (float): Fraction of the herbaceous load treated as dead (cured).
        dead_load (float): Load moved to the dead class.
        live_load (float): Load that stays live.
    """
    fraction: float
    dead_load: float
    live_load: float


def calc_curing_fraction(herb_moisture: float) -> float:
    """Fraction of the live herbaceous load that is cured.

    Args:
        herb_moisture (float): live herbaceous moisture content (fraction)

    Returns:
        float: transfer fraction in [0, 1]
    """
    return float(np.clip(-1.11 * herb_moisture + 1.33, 0.0, 1.0))


def calc_dynamic_load_transfer(herb_moisture: float, herb_load: float) -> LoadTransfer:
    """Moves the cured part of the herbaceous load into the dead class.

    The fraction is ``1.33 - 1.11 * herb_moisture`` clipped to [0, 1]: the
    whole load moves below about 0.30 moisture and none of it above about 1.20.

    Args:
        herb_moisture (float): live herbaceous moisture content (fraction)
        herb_load (float): live herbaceous loading (any loading unit)

    Returns:
        LoadTransfer: fraction and the resulting dead and live loads
    """
    check_non_negative("herb_moisture", herb_moisture)
    check_non_negative("herb_load", herb_load)

    T = calc_curing_fraction(herb_moisture)

    return LoadTransfer(fraction=T, dead_load=T * herb_load, live_load=(1 - T) * herb_load)


def calc_dead_to_live_ratio(dead: Sequence[FuelClass], live: Sequence[FuelClass]) -> float:
    """Ratio W of dead to live fine-fuel loading, weighted by effective heating number.

    Returns inf when the live classes carry no load, in which case the live
    moisture of extinction does not apply.
    """
    num = 0
    for fc in dead:
        num += fc.loading * np.exp(-138 / fc.sav_ratio)

    den = 0
    for fc in live:
        den += fc.loading * np.exp(-500 / fc.sav_ratio)

    if den == 0:
        return np.inf

    return num / den


def calc_fine_dead_moisture(dead: Sequence[FuelClass]) -> float:
    """Dead fuel moisture weighted by fine-fuel loading (exp(-138/sigma))."""
    num = 0
    den = 0
    for fc in dead:
        weight = fc.loading * np.exp(-138 / fc.sav_ratio)
        num += fc.moisture * weight
        den += weight

    if den == 0:
        return 0.0

    return num / den


def calc_live_mx(W: float, dead_mf: float, dead_mx: float) -> float:
    """Live fuel moisture of extinction.

    Never drops below the dead fuel moisture of extinction.

    Args:
        W (float): dead-to-live loading ratio from ``calc_dead_to_live_ratio``
        dead_mf (float): fine dead fuel moisture (fraction)
        dead_mx (float): dead fuel moisture of extinction (fraction)

    Returns:
        float: live fuel moisture of extinction (fraction)
    """
    check_positive("dead_mx", dead_mx)

    if W == np.inf:
        return dead_mx

    mx = 2.9 * W * (1 - dead_mf / dead_mx) - 0.226

    return max(mx, dead_mx)


def calc_effective_wind_speed(phi_e: float, C: float, B: float, E: float, beta_ratio: float) -> float:
    """Midflame wind speed that alone would produce the combined factor phi_e.

    Inverse of ``phi_w = C * U**B * beta_ratio**(-E)``.

    Args:
        phi_e (float): combined wind and slope factor
        C (float): wind coefficient C
        B (float): wind coefficient B
        E (float): wind coefficient E
        beta_ratio (float): relative packing ratio

    Returns:
        float: effective wind speed (ft/min)
    """
    if phi_e <= 0:
        return 0.0

    u_e = ((phi_e * (beta_ratio ** E)) / C) ** (1 / B)

    return u_e


class WindLimit:
    """Caps the midflame wind speed as a function of reaction intensity.

    Two variants are available. The corrected limit (Andrews et al. 2013)
    is ``96.8 * I_r**(1/3)``; the original limit (Rothermel 1972) is
    ``0.9 * I_r``. Wind speeds in ft/min, reaction intensity in Btu/ft^2/min.

    Args:
        corrected (bool, optional): use the corrected variant. Defaults to True.
    """
    CORRECTED_COEFF = 96.8
    ORIGINAL_COEFF = 0.9

    def __init__(self, corrected: bool = True):
        self.corrected = corrected

    def __repr__(self):
        return f"WindLimit(corrected={self.corrected})"

    def limit(self, I_r: float) -> float:
        """Maximum effective wind speed (ft/min) for a reaction intensity."""
        if I_r <= 0:
            return 0.0

        if self.corrected:
            return self.CORRECTED_COEFF * I_r ** (1 / 3)

        return self.ORIGINAL_COEFF * I_r

    def apply(self, wind_speed: float, I_r: float) -> Tuple[float, bool]:
        """Returns the capped wind speed and whether the cap was hit."""
        U_max = self.limit(I_r)

        if wind_speed > U_max:
            logger.debug("Wind speed %.2f ft/min capped to %.2f ft/min", wind_speed, U_max)
            return U_max, True

        return wind_speed, False
