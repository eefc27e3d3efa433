"""Fuel model definitions for the National Fire Danger Rating System.

This module provides the 20 NFDRS fuel models (A-U, with no model M) used by
the fire-danger indices. Each model is an immutable record of calibrated
vegetation parameters stored in its published units, with helpers that
return loadings and SAV ratios in the canonical US units of the equations.

Classes:
    - NFDRSFuelModel: One fuel model record.
    - NFDRSCatalog: Lazily-loaded table of all models.

References:
    - Cohen, J. D. and Deeming, J. E. (1985). The National Fire-Danger Rating
      System: basic equations. USDA Forest Service General Technical Report
      PSW-82, Appendix.

"""
from dataclasses import dataclass
import json
import os
import warnings
import numpy as np

from wildland_fire.exceptions import FuelModelError
from wildland_fire.utilities.unit_conversions import (
    TPA_to_KiSq,
    TPA_to_Lbsft2,
    ft_inv_to_m_inv,
    ft_to_m,
    BTU_lb_to_kJ_kg,
    ft_min_to_m_s,
)

FUEL_MODEL_CODES = ("A", "B", "C", "D", "E", "F", "G", "H", "I", "J",
                    "K", "L", "N", "O", "P", "Q", "R", "S", "T", "U")


@dataclass(frozen=True)
class NFDRSFuelModel:
    """An NFDRS fuel model in published units.

    Attributes:
        code (str): One-letter model code.
        name (str): Descriptive name.
        sg1, sg10, sg100, sg1000 (float): Dead class SAV ratios (1/ft).
        w1, w10, w100, w1000 (float): Dead class loadings (tons/acre).
        sgwood, sgherb (float): Live class SAV ratios (1/ft).
        wwood, wherb (float): Live class loadings (tons/acre).
        depth (float): Fuel bed depth (ft).
        mxd (float): Dead fuel moisture of extinction (percent).
        hd, hl (float): Dead and live heat of combustion (Btu/lb).
        scm (float): Spread component at which a fire becomes reportable (ft/min).
        wndfc (float): Wind reduction factor, 20 ft to midflame.
    """
    code: str
    name: str
    sg1: float
    w1: float
    sg10: float
    w10: float
    sg100: float
    w100: float
    sg1000: float
    w1000: float
    sgwood: float
    wwood: float
    sgherb: float
    wherb: float
    depth: float
    mxd: float
    hd: float
    hl: float
    scm: float
    wndfc: float

    @property
    def mxd_fraction(self) -> float:
        return self.mxd / 100

    @property
    def dead_sav_ratios(self) -> np.ndarray:
        """SAV ratios of the 1, 10, 100 and 1000-hr classes (1/ft)"""
        return np.array([self.sg1, self.sg10, self.sg100, self.sg1000], dtype=float)

    @property
    def dead_loads(self) -> np.ndarray:
        """Loadings of the 1, 10, 100 and 1000-hr classes (lb/ft^2)"""
        return TPA_to_Lbsft2(np.array([self.w1, self.w10, self.w100, self.w1000], dtype=float))

    @property
    def live_sav_ratios(self) -> np.ndarray:
        """SAV ratios of the herbaceous and woody classes (1/ft)"""
        return np.array([self.sgherb, self.sgwood], dtype=float)

    @property
    def live_loads(self) -> np.ndarray:
        """Loadings of the herbaceous and woody classes (lb/ft^2)"""
        return TPA_to_Lbsft2(np.array([self.wherb, self.wwood], dtype=float))

    @property
    def dead_loads_si(self) -> np.ndarray:
        """Loadings of the 1, 10, 100 and 1000-hr classes (kg/m^2)"""
        return fuel_loading_conversion(np.array([self.w1, self.w10, self.w100, self.w1000], dtype=float))

    @property
    def live_loads_si(self) -> np.ndarray:
        """Loadings of the herbaceous and woody classes (kg/m^2)"""
        return fuel_loading_conversion(np.array([self.wherb, self.wwood], dtype=float))

    def as_si(self) -> dict:
        """Returns the model parameters converted to SI.

        SAV ratios in 1/m, loadings in kg/m^2, depth in m, heat contents in
        kJ/kg, SCM in m/s. Moisture of extinction stays in percent.
        """
        si = {"code": self.code, "name": self.name}
        for key in ("sg1", "sg10", "sg100", "sg1000", "sgwood", "sgherb"):
            si[key] = ft_inv_to_m_inv(getattr(self, key))
        for key in ("w1", "w10", "w100", "w1000", "wwood", "wherb"):
            si[key] = fuel_loading_conversion(getattr(self, key))
        si["depth"] = ft_to_m(self.depth)
        si["mxd"] = self.mxd
        si["hd"] = BTU_lb_to_kJ_kg(self.hd)
        si["hl"] = BTU_lb_to_kJ_kg(self.hl)
        si["scm"] = ft_min_to_m_s(self.scm)
        si["wndfc"] = self.wndfc
        return si


class NFDRSCatalog:
    _fuel_models = None # class-level cache

    @classmethod
    def load_fuel_models(cls):
        if cls._fuel_models is None:
            json_path = os.path.join(os.path.dirname(__file__), "NFDRS.json")
            try:
                with open(json_path, "r") as f:
                    raw = json.load(f)["models"]
            except (OSError, ValueError, KeyError) as e:
                raise FuelModelError(f"Could not load NFDRS fuel model table from {json_path}: {e}") from e

            cls._fuel_models = {
                code: NFDRSFuelModel(code=code, **{k: (v if k == "name" else float(v))
                                                   for k, v in params.items()})
                for code, params in raw.items()
            }

        return cls._fuel_models

    @classmethod
    def get(cls, code: str) -> NFDRSFuelModel:
        models = cls.load_fuel_models()

        key = code.strip().upper() if isinstance(code, str) else code
        if key not in models:
            raise FuelModelError(
                f"Fuel model not found. Available models: {', '.join(sorted(models))}",
                fuel_model_code=code
            )

        return models[key]


def get_fuel_model(code: str) -> NFDRSFuelModel:
    """Looks up an NFDRS fuel model by its one-letter code.

    Args:
        code (str): Model code, A-U excluding M. Case-insensitive.

    Raises:
        FuelModelError: if the code is not in the catalog

    Returns:
        NFDRSFuelModel: the fuel model record
    """
    return NFDRSCatalog.get(code)


def list_fuel_models() -> list:
    """Returns all fuel models ordered by code."""
    models = NFDRSCatalog.load_fuel_models()
    return [models[code] for code in sorted(models)]


def fuel_loading_conversion(tons_per_acre: float) -> float:
    """Converts a fuel loading from tons/acre to kg/m^2."""
    return TPA_to_KiSq(tons_per_acre)


def fuel_loading_conversion_lb_ft2(tons_per_acre: float) -> float:
    """Converts a fuel loading from tons/acre to lb/ft^2.

    Deprecated, use ``fuel_loading_conversion`` for kg/m^2.
    """
    warnings.warn(
        "fuel_loading_conversion_lb_ft2 is deprecated, use fuel_loading_conversion (kg/m^2)",
        DeprecationWarning,
        stacklevel=2
    )
    return TPA_to_Lbsft2(tons_per_acre)
