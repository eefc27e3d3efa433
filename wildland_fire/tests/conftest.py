"""Shared pytest fixtures for the wildland_fire test suite.

This module provides reusable fuel beds, fuel classes and NFDRS moisture
scenarios used across the model tests.
"""

import pytest

from wildland_fire.models.nfdrs_danger import NFDRSFuelMoistures
from wildland_fire.utilities.data_classes import FuelBed, FuelClass, SpreadEnvironment


# ============================================================================
# Single Fuel Class Fixtures
# ============================================================================

@pytest.fixture
def short_grass_bed():
    """Provide the Fuel Model 1 (short grass) fuel bed.

    Returns:
        FuelBed: sigma 3500 1/ft, 0.034 lb/ft^2, 1 ft deep, Mx 12%.
    """
    return FuelBed(sav_ratio=3500.0, loading=0.034, depth=1.0, dead_mx=0.12)


@pytest.fixture
def calm_environment():
    """Provide no-wind, no-slope conditions at 5% moisture."""
    return SpreadEnvironment(moisture=0.05, wind_speed=0.0, slope=0.0)


@pytest.fixture
def windy_environment():
    """Provide 5 mi/h midflame wind on a 30% slope at 5% moisture."""
    return SpreadEnvironment(moisture=0.05, wind_speed=440.0, slope=0.3)


# ============================================================================
# Heterogeneous Fuel Fixtures
# ============================================================================

@pytest.fixture
def timber_litter_dead():
    """Provide 1, 10 and 100-hr dead classes in lb/ft^2.

    Returns:
        list[FuelClass]: dead classes, finest first.
    """
    return [
        FuelClass(sav_ratio=2000.0, loading=0.138, moisture=0.06),
        FuelClass(sav_ratio=109.0, loading=0.092, moisture=0.07),
        FuelClass(sav_ratio=30.0, loading=0.230, moisture=0.08),
    ]


@pytest.fixture
def brush_live():
    """Provide herbaceous and woody live classes in lb/ft^2."""
    return [
        FuelClass(sav_ratio=1500.0, loading=0.023, moisture=0.90),
        FuelClass(sav_ratio=1500.0, loading=0.092, moisture=1.20),
    ]


# ============================================================================
# NFDRS Fixtures
# ============================================================================

@pytest.fixture
def dry_moistures():
    """Provide dry summer NFDRS fuel moistures."""
    return NFDRSFuelMoistures(
        mc1=0.04,
        mc10=0.06,
        mc100=0.10,
        mc1000=0.14,
        mcherb=0.60,
        mcwood=0.90,
    )


@pytest.fixture
def wet_moistures():
    """Provide moistures above the extinction moisture of most models."""
    return NFDRSFuelMoistures(
        mc1=0.35,
        mc10=0.35,
        mc100=0.35,
        mc1000=0.35,
        mcherb=2.50,
        mcwood=2.00,
    )
