"""This module contains functions for unit conversions

The fire behavior equations are evaluated in US customary units. The functions
here convert to and from SI at the boundary. All of them are constant-factor
(or affine, for temperature) and accept scalars or numpy arrays.
"""

# Temperature

def F_to_C(f_f: float) -> float:
    """Converts from Fahrenheit to Celsius

    Args:
        f_f (float): Fahrenheit

    Returns:
        _type_: float
    """
    g = 5 / 9
    h = 32
    c = g * (f_f - h)

    return c

def C_to_F(f_c: float) -> float:
    """Converts from Celsius to Fahrenheit

    Args:
        f_c (float): Celsius

    Returns:
        _type_: float
    """
    f = f_c * 9 / 5 + 32

    return f

# Length

def m_to_ft(f_m: float) -> float:
    """Converts from meters to feet

    Args:
        f_m (float): meters

    Returns:
        _type_: float
    """
    g = 3.28084
    f = f_m * g

    return f

def ft_to_m(f_ft: float) -> float:
    """Converts from feet to meters

    Args:
        f_ft (float): feet
    Returns:
        _type_: float
    """
    g = 1 / m_to_ft(1)
    f = f_ft * g

    return f

def mi_to_m(f_mi: float) -> float:
    """Converts from statute miles to meters"""
    g = 1609.344
    f = f_mi * g

    return f

def m_to_mi(f_m: float) -> float:
    """Converts from meters to statute miles"""
    g = 1 / mi_to_m(1)
    f = f_m * g

    return f

# Speed

def ft_min_to_m_s(f_ft_min: float) -> float:
    """Converts from ft/min to m/s

    Args:
        f_ft_min (float): ft/min

    Returns:
        _type_: float
    """
    g = 0.00508
    f = f_ft_min * g

    return f

def m_s_to_ft_min(m_s: float) -> float:
    """Converts from m/s to ft/min

    Args:
        m_s (float): m/s

    Returns:
        float: ft/min
    """
    g = 1 / ft_min_to_m_s(1)
    f = m_s * g
    return f

def mph_to_ft_min(f_mph: float) -> float:
    """Converts from mi/h to ft/min

    Args:
        f_mph (float): mi/h

    Returns:
        float: ft/min
    """
    g = 88
    f = f_mph * g
    return f

def ft_min_to_mph(f_ft_min: float) -> float:
    """Converts from ft/min to mi/h"""
    g = 1 / mph_to_ft_min(1)
    f = f_ft_min * g
    return f

def mph_to_m_s(f_mph: float) -> float:
    """Converts from mi/h to m/s"""
    g = 0.44704
    f = f_mph * g
    return f

def m_s_to_mph(m_s: float) -> float:
    """Converts from m/s to mi/h"""
    g = 1 / mph_to_m_s(1)
    f = m_s * g
    return f

# Time

def min_to_s(f_min: float) -> float:
    """Converts from minutes to seconds"""
    return f_min * 60

def hr_to_s(f_hr: float) -> float:
    """Converts from hours to seconds"""
    return f_hr * 3600

# Fuel loading

def Lbsft2_to_KiSq(f_libsft2: float) -> float:
    """Converts from lbs/ft^2 to kg/m^2

    Args:
        f_libsft2 (float): lbs/ft^2

    Returns:
        _type_: float
    """
    g = 4.88243
    f = f_libsft2 * g

    return f

def KiSq_to_Lbsft2(f_kisq: float) -> float:
    """Converts from kg/m^2 to lbs/ft^2

    Args:
        f_kisq (float): kg/m^2

    Returns:
        float: lbs/ft^2
    """
    g = 1 / Lbsft2_to_KiSq(1)
    f = f_kisq * g

    return f

def TPA_to_KiSq(f_tpa: float) -> float:
    """Converts from tons/acre to kg/m^2

    Args:
        f_tpa (float): short tons per acre

    Returns:
        float: kg/m^2
    """
    g = 0.2241702
    f = f_tpa * g
    return f

def KiSq_to_TPA(f_kisq: float) -> float:
    """Converts from kg/m^2 to tons/acre

    Args:
        f_kisq (float): kg/m^2

    Returns:
        float: short tons per acre
    """
    g = 1 / TPA_to_KiSq(1)
    f = f_kisq * g
    return f

def TPA_to_Lbsft2(f_tpa: float) -> float:
    """Converts from tons/acre to lbs/ft^2

    Args:
        f_tpa (float): short tons per acre

    Returns:
        float: lbs/ft^2
    """
    g = 0.0459137
    f = f_tpa * g
    return f

# Particle properties

def BTU_lb_to_kJ_kg(f_btu_lb: float) -> float:
    """Converts from Btu/lb to kJ/kg"""
    g = 2.326
    f = f_btu_lb * g
    return f

def kJ_kg_to_BTU_lb(f_kj_kg: float) -> float:
    """Converts from kJ/kg to Btu/lb"""
    g = 1 / BTU_lb_to_kJ_kg(1)
    f = f_kj_kg * g
    return f

def Lbsft3_to_KiCu(f_lbsft3: float) -> float:
    """Converts from lbs/ft^3 to kg/m^3

    Args:
        f_lbsft3 (float): lbs/ft^3

    Returns:
        float: kg/m^3
    """
    g = 16.0185
    f = f_lbsft3 * g
    return f

def KiCu_to_Lbsft3(f_kicu: float) -> float:
    """Converts from kg/m^3 to lbs/ft^3"""
    g = 1 / Lbsft3_to_KiCu(1)
    f = f_kicu * g
    return f

def ft_inv_to_m_inv(f_ft_inv: float) -> float:
    """Converts a surface-area-to-volume ratio from 1/ft to 1/m

    Args:
        f_ft_inv (float): ft^2/ft^3

    Returns:
        float: m^2/m^3
    """
    return m_to_ft(f_ft_inv)

def m_inv_to_ft_inv(f_m_inv: float) -> float:
    """Converts a surface-area-to-volume ratio from 1/m to 1/ft"""
    return ft_to_m(f_m_inv)

# Heat release

def BTU_ft2_min_to_kW_m2(f_btu_ft2_min: float) -> float:
    """Converts from Btu/ft^2/min to kW/m^2

    Args:
        f_btu_ft2_min (float): Btu/ft^2/min

    Returns:
        float: kW/m^2
    """
    g = 0.189276
    f = f_btu_ft2_min * g
    return f

def kW_m2_to_BTU_ft2_min(f_kw_m2: float) -> float:
    """Converts from kW/m^2 to Btu/ft^2/min"""
    g = 1 / BTU_ft2_min_to_kW_m2(1)
    f = f_kw_m2 * g
    return f

def BTU_ft_min_to_kW_m(f_btu_ft_min: float) -> float:
    """Converts from Btu/ft/min to kW/m

    Args:
        f_btu_ft_min (float): Btu/ft/min

    Returns:
        float: kW/m
    """
    g = 0.05767
    f = f_btu_ft_min * g
    return f

def kW_m_to_BTU_ft_min(f_kw_m: float) -> float:
    """Converts from kW/m to Btu/ft/min"""
    g = 1 / BTU_ft_min_to_kW_m(1)
    f = f_kw_m * g
    return f

def BTU_ft2_to_kJ_m2(f_btu_ft2: float) -> float:
    """Converts from Btu/ft^2 to kJ/m^2"""
    g = 11.3565
    f = f_btu_ft2 * g
    return f

def kJ_m2_to_BTU_ft2(f_kj_m2: float) -> float:
    """Converts from kJ/m^2 to Btu/ft^2"""
    g = 1 / BTU_ft2_to_kJ_m2(1)
    f = f_kj_m2 * g
    return f

def BTU_ft3_to_kJ_m3(f_btu_ft3: float) -> float:
    """Converts from Btu/ft^3 to kJ/m^3"""
    g = 37.2589
    f = f_btu_ft3 * g
    return f

def kJ_m3_to_BTU_ft3(f_kj_m3: float) -> float:
    """Converts from kJ/m^3 to Btu/ft^3"""
    g = 1 / BTU_ft3_to_kJ_m3(1)
    f = f_kj_m3 * g
    return f
