"""Direction of maximum spread and the elliptical fire shape.

The wind and slope contributions to spread are combined as vectors (Albini
1976) to find the head fire rate and the direction it travels. The fire is
then taken to grow as an ellipse with the ignition point at the rear focus,
which gives spread rates at any bearing from the head and, following
Catchpole et al. (1982), rates normal to the perimeter.

Angles are in radians. ``omega`` is the wind bearing measured from upslope;
``gamma`` is a bearing measured from the direction of maximum spread.

References:
    - Albini, F. A. (1976). Computer-based models of wildland fire behavior:
      a user's manual.
    - Anderson, H. E. (1983). Predicting wind-driven wild land fire size and
      shape. USDA Forest Service Research Paper INT-305.
    - Catchpole, E. A., de Mestre, N. J. and Gill, A. M. (1982). Intensity of
      fire at its perimeter. Australian Forest Research 12: 47-54.
"""

import logging
import numpy as np

from wildland_fire.exceptions import ValidationError
from wildland_fire.models.rothermel import EPSILON, calc_wind_coefficients
from wildland_fire.models.spread_relations import calc_effective_wind_speed
from wildland_fire.utilities.data_classes import (
    EllipseShape,
    PerimeterSpread,
    SpreadDirection,
    check_finite,
    check_non_negative,
    check_positive,
)
from wildland_fire.utilities.unit_conversions import ft_min_to_mph

logger = logging.getLogger(__name__)


def _check_length_to_width(Z: float):
    check_finite("length_to_width", Z)
    if Z < 1:
        raise ValidationError("Length to width ratio must be at least 1", field="length_to_width", value=Z)


def calc_length_to_width(effective_wind_speed: float) -> float:
    """Length to width ratio of the fire ellipse.

    Args:
        effective_wind_speed (float): effective midflame wind speed (ft/min)

    Returns:
        float: Z >= 1
    """
    return 1 + 0.25 * ft_min_to_mph(effective_wind_speed)


def calc_fire_spread_direction(R_0: float, phi_w: float, phi_s: float, omega: float,
                               sav_ratio: float, beta_ratio: float,
                               elapsed: float = 1.0) -> SpreadDirection:
    """Combines the wind and slope spread vectors.

    Args:
        R_0 (float): no-wind, no-slope rate of spread (ft/min)
        phi_w (float): wind factor
        phi_s (float): slope factor
        omega (float): wind bearing relative to upslope (radians)
        sav_ratio (float): characteristic SAV ratio (1/ft), for the wind coefficients
        beta_ratio (float): relative packing ratio
        elapsed (float, optional): elapsed time (min). Defaults to 1.0.

    Returns:
        SpreadDirection: head fire rate, direction and effective wind
    """
    check_non_negative("R_0", R_0)
    check_non_negative("phi_w", phi_w)
    check_non_negative("phi_s", phi_s)
    check_finite("omega", omega)
    check_positive("sav_ratio", sav_ratio)
    check_non_negative("beta_ratio", beta_ratio)
    check_positive("elapsed", elapsed)

    D_s = R_0 * phi_s * elapsed
    D_w = R_0 * phi_w * elapsed

    x = D_s + D_w * np.cos(omega)
    y = D_w * np.sin(omega)
    D_h = np.sqrt(x ** 2 + y ** 2)

    R_h = R_0 + D_h / elapsed

    # Clip guards rounding when |y| ~ D_h
    alpha = np.arcsin(min(1.0, abs(y) / max(D_h, EPSILON)))
    heading = np.arctan2(y, x) if D_h > 0 else 0.0

    if R_0 > 0 and omega == 0:
        # Collinear vectors add without the round trip through R_h
        phi_e = phi_w + phi_s
    elif R_0 > 0:
        phi_e = R_h / R_0 - 1
    else:
        phi_e = 0.0

    if beta_ratio > 0:
        C, B, E = calc_wind_coefficients(sav_ratio)
        u_e = calc_effective_wind_speed(phi_e, C, B, E, beta_ratio)
    else:
        logger.debug("Zero relative packing ratio, effective wind speed set to 0")
        u_e = 0.0

    return SpreadDirection(
        slope_distance=D_s,
        wind_distance=D_w,
        x=x,
        y=y,
        resultant_distance=D_h,
        head_rate=R_h,
        direction=alpha,
        heading=heading,
        effective_wind_factor=phi_e,
        effective_wind_speed=u_e,
        length_to_width=calc_length_to_width(u_e),
    )


def spread_direction_from_result(result, omega: float, elapsed: float = 1.0) -> SpreadDirection:
    """Runs ``calc_fire_spread_direction`` on a spread model result.

    Accepts a ``RothermelResult`` or ``HeterogeneousResult`` in US units.
    """
    return calc_fire_spread_direction(
        result.ros_0,
        result.wind_factor,
        result.slope_factor,
        omega,
        result.sav_ratio,
        result.relative_packing_ratio,
        elapsed,
    )


def calc_eccentricity(Z: float) -> float:
    return np.sqrt(Z ** 2 - 1) / Z


def calc_elliptical_spread(R_H: float, Z: float, gamma: float, elapsed: float = 1.0) -> EllipseShape:
    """Elliptical fire shape after ``elapsed`` minutes.

    Args:
        R_H (float): head fire rate of spread (ft/min)
        Z (float): length to width ratio, at least 1
        gamma (float): bearing from the head direction (radians)
        elapsed (float, optional): elapsed time (min). Defaults to 1.0.

    Returns:
        EllipseShape: rates, distances and semi-axes of the ellipse
    """
    check_non_negative("R_H", R_H)
    check_finite("gamma", gamma)
    check_positive("elapsed", elapsed)
    _check_length_to_width(Z)

    e = calc_eccentricity(Z)

    R_gamma = R_H * (1 - e) / (1 - e * np.cos(gamma))
    R_B = R_H * (1 - e) / (1 + e)

    D_H = R_H * elapsed
    D_B = R_B * elapsed
    L = D_H + D_B
    W = L / Z

    f = L / 2
    h = W / 2
    g = D_H - f

    return EllipseShape(
        eccentricity=e,
        length_to_width=Z,
        head_rate=R_H,
        backing_rate=R_B,
        rate_at_bearing=R_gamma,
        head_distance=D_H,
        backing_distance=D_B,
        length=L,
        width=W,
        f=f,
        g=g,
        h=h,
    )


def calc_perimeter_normal_angle(f: float, g: float, h: float, gamma: float) -> float:
    """Angle theta of the perimeter point reached along bearing ``gamma``.

    theta parameterizes the ellipse (x = g + f cos(theta), y = h sin(theta))
    and is solved from the closed-form relation of Catchpole et al. (1982).
    Bearings with a negative sine give a negative theta.

    Args:
        f (float): semi-major axis
        g (float): offset of the ignition point from the ellipse centre
        h (float): semi-minor axis
        gamma (float): bearing from the head direction (radians)

    Returns:
        float: theta in [-pi, pi]
    """
    cos_g = np.cos(gamma)
    sin_g = np.sin(gamma)

    den = h ** 2 * cos_g ** 2 + f ** 2 * sin_g ** 2
    if den <= EPSILON:
        logger.debug("Degenerate ellipse (f=%.3g, h=%.3g), theta taken as gamma", f, h)
        return float(gamma)

    root = np.sqrt(max(0.0, h ** 2 * cos_g ** 2 + (f ** 2 - g ** 2) * sin_g ** 2))
    cos_theta = (h * cos_g * root - f * g * sin_g ** 2) / den
    cos_theta = min(1.0, max(-1.0, cos_theta))

    theta = np.arccos(cos_theta)

    if sin_g < 0:
        theta = -theta

    return float(theta)


def calc_perimeter_spread(ellipse: EllipseShape, gamma: float, heat_per_area: float = 0.0) -> PerimeterSpread:
    """Spread rate and intensity normal to the fire perimeter.

    Args:
        ellipse (EllipseShape): shape from ``calc_elliptical_spread``
        gamma (float): bearing from the head direction (radians)
        heat_per_area (float, optional): heat per unit area (Btu/ft^2). Defaults to 0.

    Returns:
        PerimeterSpread: theta, normal bearing psi, rate and fireline intensity
    """
    check_finite("gamma", gamma)
    check_non_negative("heat_per_area", heat_per_area)

    f, g, h = ellipse.f, ellipse.g, ellipse.h

    if f <= EPSILON:
        return PerimeterSpread(theta=float(gamma), psi=float(gamma), rate=0.0, fireline_intensity=0.0)

    theta = calc_perimeter_normal_angle(f, g, h, gamma)

    cos_t = np.cos(theta)
    sin_t = np.sin(theta)

    psi = np.arctan2(f * sin_t, h * cos_t)
    R_psi = ellipse.head_rate * h * (g * cos_t + f) / (f * np.sqrt(h ** 2 * cos_t ** 2 + f ** 2 * sin_t ** 2))

    return PerimeterSpread(theta=theta, psi=float(psi), rate=float(R_psi),
                           fireline_intensity=float(heat_per_area * R_psi))


def calc_spread_rates(R_H: float, Z: float, gammas) -> np.ndarray:
    """Spread rates at many bearings from the head.

    Args:
        R_H (float): head fire rate of spread
        Z (float): length to width ratio, at least 1
        gammas (array_like): bearings from the head direction (radians)

    Returns:
        np.ndarray: rates, same shape as ``gammas``
    """
    check_non_negative("R_H", R_H)
    _check_length_to_width(Z)

    gammas = np.asarray(gammas, dtype=float)
    e = calc_eccentricity(Z)

    return R_H * (1 - e) / (1 - e * np.cos(gammas))
