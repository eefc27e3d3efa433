"""Tests for the NFDRS fuel moisture chain."""

import pytest
import numpy as np

from wildland_fire.exceptions import SolverError, ValidationError
from wildland_fire.models.nfdrs_moisture import (
    HUNDRED_HOUR_COEFF,
    HUNDRED_HOUR_RESPONSE,
    THOUSAND_HOUR_COEFF,
    THOUSAND_HOUR_RESPONSE,
    HerbStage,
    WoodyStage,
    calc_boundary_running_mean,
    calc_daylength,
    calc_emc,
    calc_emc_bar,
    calc_fuel_loading_transfer,
    calc_greenup_fraction,
    calc_herbaceous_moisture,
    calc_hundred_hour_boundary,
    calc_hundred_hour_moisture,
    calc_one_hour_moisture,
    calc_ten_hour_moisture,
    calc_thousand_hour_boundary,
    calc_thousand_hour_moisture,
    calc_woody_moisture,
    integrate_hundred_hour_moisture,
    integrate_thousand_hour_moisture,
    integrate_timelag_moisture,
)
from wildland_fire.utilities.config import ModelConfig


# ============================================================================
# Dead Fuel Moisture
# ============================================================================

class TestEquilibriumMoisture:
    """Tests for the three EMC regressions."""

    def test_low_humidity(self):
        assert calc_emc(70.0, 5.0) == pytest.approx(0.012354, abs=1e-5)

    def test_mid_humidity(self):
        assert calc_emc(70.0, 30.0) == pytest.approx(0.059958, abs=1e-5)

    def test_high_humidity(self):
        assert calc_emc(70.0, 80.0) == pytest.approx(0.160607, abs=1e-5)

    def test_increases_with_humidity(self):
        values = [calc_emc(70.0, rh) for rh in (5, 20, 40, 60, 90)]
        assert all(a < b for a, b in zip(values, values[1:]))

    def test_humidity_out_of_range(self):
        with pytest.raises(ValidationError) as exc_info:
            calc_emc(70.0, 101.0)
        assert exc_info.value.field == "rh_pct"


class TestFineDeadMoisture:
    """Tests for the 1-hr and 10-hr moistures."""

    def test_one_hour_without_sticks(self):
        assert calc_one_hour_moisture(0.05) == pytest.approx(0.0515)

    def test_one_hour_with_sticks(self):
        assert calc_one_hour_moisture(0.05, mc10=0.10, use_fuel_sticks=True) == pytest.approx(0.06)

    def test_one_hour_raining(self):
        assert calc_one_hour_moisture(0.05, is_raining=True) == 0.35

    def test_one_hour_sticks_need_ten_hour(self):
        with pytest.raises(ValidationError):
            calc_one_hour_moisture(0.05, use_fuel_sticks=True)

    def test_ten_hour_without_sticks(self):
        assert calc_ten_hour_moisture(0.05) == pytest.approx(0.064)

    def test_ten_hour_with_sticks(self):
        mc10 = calc_ten_hour_moisture(0.05, use_fuel_sticks=True, stick_weight_g=110.0,
                                      stick_age_days=0.0, climate_class=4)
        assert mc10 == pytest.approx(0.10)

    def test_ten_hour_invalid_climate_class(self):
        with pytest.raises(ValidationError):
            calc_ten_hour_moisture(0.05, use_fuel_sticks=True, climate_class=5)


class TestBoundaryConditions:
    """Tests for daylength and the timelag boundary conditions."""

    def test_equator_daylength(self):
        assert calc_daylength(0.0, 80) == pytest.approx(12.0, abs=1e-3)

    def test_seasonal_daylength(self):
        assert calc_daylength(45.0, 172) > 12.0
        assert calc_daylength(45.0, 355) < 12.0

    def test_polar_daylength_clipped(self):
        hours = calc_daylength(80.0, 172)
        assert 20.0 < hours < 24.0

    def test_invalid_julian_day(self):
        with pytest.raises(ValidationError):
            calc_daylength(45.0, 0)

    def test_emc_bar_weighting(self):
        assert calc_emc_bar(12.0, 0.04, 0.12) == pytest.approx(0.08)
        assert calc_emc_bar(24.0, 0.04, 0.12) == pytest.approx(0.04)

    def test_dry_boundaries_equal_emc_bar(self):
        assert calc_hundred_hour_boundary(0.08, 0.0) == pytest.approx(0.08)
        assert calc_thousand_hour_boundary(0.08, 0.0) == pytest.approx(0.08)

    def test_rain_raises_boundary(self):
        assert calc_hundred_hour_boundary(0.08, 6.0) > 0.08
        assert calc_thousand_hour_boundary(0.08, 6.0) > calc_hundred_hour_boundary(0.08, 6.0)

    def test_invalid_precip_duration(self):
        with pytest.raises(ValidationError):
            calc_hundred_hour_boundary(0.08, 25.0)

    def test_running_mean_window(self):
        values = [0.1] * 3 + [0.2] * 7
        assert calc_boundary_running_mean(values) == pytest.approx(0.2)
        assert calc_boundary_running_mean([0.1, 0.2]) == pytest.approx(0.15)

    def test_running_mean_empty(self):
        with pytest.raises(ValidationError):
            calc_boundary_running_mean([])


class TestTimelagMoisture:
    """Tests for the 100-hr and 1000-hr classes."""

    def test_response_rates(self):
        assert HUNDRED_HOUR_RESPONSE == pytest.approx(0.24 - np.log(0.87))
        assert THOUSAND_HOUR_RESPONSE == pytest.approx(0.168 - np.log(0.82))

    def test_discrete_step(self):
        assert calc_hundred_hour_moisture(0.20, 0.10) == pytest.approx(0.20 - 0.10 * HUNDRED_HOUR_COEFF)
        assert calc_thousand_hour_moisture(0.20, 0.10) == pytest.approx(0.20 - 0.10 * THOUSAND_HOUR_COEFF)

    def test_continuous_matches_discrete_over_one_day(self):
        assert integrate_hundred_hour_moisture(0.20, 0.10) == pytest.approx(
            calc_hundred_hour_moisture(0.20, 0.10), rel=1e-6)
        assert integrate_thousand_hour_moisture(0.20, 0.10) == pytest.approx(
            calc_thousand_hour_moisture(0.20, 0.10), rel=1e-6)

    def test_relaxes_toward_boundary(self):
        week = integrate_hundred_hour_moisture(0.30, 0.10, days=7.0)
        assert 0.10 < week < calc_hundred_hour_moisture(0.30, 0.10)

    def test_zero_days(self):
        assert integrate_hundred_hour_moisture(0.20, 0.10, days=0.0) == 0.20

    def test_time_varying_boundary(self):
        sol = integrate_timelag_moisture(0.20, lambda t: 0.10 + 0.02 * np.sin(2 * np.pi * t),
                                         HUNDRED_HOUR_RESPONSE, days=2.0)
        assert sol.t_final == pytest.approx(2.0)
        assert 0.10 < sol.y_final[0] < 0.20

    def test_step_budget_exhausted(self):
        config = ModelConfig(ode_max_steps=1)
        with pytest.raises(SolverError):
            integrate_hundred_hour_moisture(0.20, 0.10, days=30.0, config=config)


# ============================================================================
# Live Fuel Moisture
# ============================================================================

class TestHerbaceousMoisture:
    """Tests for MCHERB stage selection."""

    def test_cured_annual_follows_one_hour(self):
        m = calc_herbaceous_moisture(0.15, 0.05, 1, is_annual=True, is_cured=True)
        assert m.moisture == pytest.approx(0.05)
        assert m.stage == HerbStage.CURED

    def test_cured_perennial(self):
        m = calc_herbaceous_moisture(0.15, 0.05, 1, is_annual=False, is_cured=True)
        assert m.moisture == pytest.approx(1.222)

    def test_greenup(self):
        m = calc_herbaceous_moisture(0.20, 0.05, 2, greenup_days=7.0, is_greenup=True)
        assert m.moisture == pytest.approx(1.05)
        assert m.stage == HerbStage.GREENUP

    def test_cured_overrides_greenup(self):
        m = calc_herbaceous_moisture(0.20, 0.05, 2, is_greenup=True, is_cured=True)
        assert m.stage == HerbStage.CURED

    def test_green(self):
        m = calc_herbaceous_moisture(0.20, 0.05, 1)
        assert m.moisture == pytest.approx(1.86)
        assert m.stage == HerbStage.GREEN

    def test_green_capped(self):
        assert calc_herbaceous_moisture(0.30, 0.05, 1).moisture == pytest.approx(2.50)

    def test_transition(self):
        annual = calc_herbaceous_moisture(0.10, 0.05, 1, is_annual=True)
        perennial = calc_herbaceous_moisture(0.10, 0.05, 1, is_annual=False)
        assert annual.stage == HerbStage.TRANSITION
        assert annual.moisture == pytest.approx(0.335)
        assert perennial.moisture == pytest.approx(0.852)

    def test_greenup_fraction(self):
        assert calc_greenup_fraction(7.0, 2) == pytest.approx(0.5)
        assert calc_greenup_fraction(60.0, 2) == 1.0

    def test_invalid_climate_class(self):
        with pytest.raises(ValidationError) as exc_info:
            calc_herbaceous_moisture(0.20, 0.05, 5)
        assert exc_info.value.field == "climate_class"


class TestWoodyMoisture:
    """Tests for MCWOOD stage selection."""

    def test_frozen(self):
        m = calc_woody_moisture(0.15, 2, is_frozen=True)
        assert m.moisture == pytest.approx(0.60)
        assert m.stage == WoodyStage.PREGREEN

    def test_green(self):
        m = calc_woody_moisture(0.15, 1)
        assert m.moisture == pytest.approx(1.25)
        assert m.stage == WoodyStage.GREEN

    def test_greenup(self):
        m = calc_woody_moisture(0.15, 1, greenup_days=3.5, is_greenup=True)
        assert m.moisture == pytest.approx(0.875)

    def test_capped(self):
        assert calc_woody_moisture(0.30, 1).moisture == pytest.approx(2.0)

    def test_floored_at_pregreen(self):
        assert calc_woody_moisture(0.05, 4).moisture == pytest.approx(0.80)


class TestFuelLoadingTransfer:

    def test_total_conserved(self):
        t = calc_fuel_loading_transfer(0.60, 0.20, 0.30)
        assert t.one_hour_load + t.herb_load == pytest.approx(0.50)
        assert t.fraction == pytest.approx(1.33 - 0.0111 * 60)

    def test_green_herbs_stay_live(self):
        t = calc_fuel_loading_transfer(1.50, 0.20, 0.30)
        assert t.fraction == 0.0
        assert t.herb_load == pytest.approx(0.30)

    def test_cured_herbs_fully_moved(self):
        t = calc_fuel_loading_transfer(0.25, 0.20, 0.30)
        assert t.fraction == 1.0
        assert t.one_hour_load == pytest.approx(0.50)
