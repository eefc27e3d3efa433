"""Tests for the multi-class Rothermel model."""

import pytest
import numpy as np

from wildland_fire.exceptions import ValidationError
from wildland_fire.models.rothermel import calc_rothermel
from wildland_fire.models.rothermel_heterogeneous import (
    calc_heterogeneous,
    calc_heterogeneous_si,
    calc_weighted_fuel_complex,
)
from wildland_fire.models.spread_relations import WindLimit
from wildland_fire.utilities.data_classes import FuelClass, FuelParticle
from wildland_fire.utilities.unit_conversions import (
    BTU_lb_to_kJ_kg,
    Lbsft2_to_KiSq,
    Lbsft3_to_KiCu,
    ft_inv_to_m_inv,
    ft_min_to_m_s,
    ft_to_m,
)


class TestWeightedFuelComplex:
    """Tests for the surface-area weighting factors."""

    def test_group_weights_sum_to_one(self, timber_litter_dead, brush_live):
        fc = calc_weighted_fuel_complex(timber_litter_dead, brush_live)
        assert np.sum(fc.dead_weights) == pytest.approx(1.0)
        assert np.sum(fc.live_weights) == pytest.approx(1.0)
        assert fc.dead_fraction + fc.live_fraction == pytest.approx(1.0)

    def test_surface_areas(self, timber_litter_dead, brush_live):
        fc = calc_weighted_fuel_complex(timber_litter_dead, brush_live)
        assert fc.dead_areas[0] == pytest.approx(2000.0 * 0.138 / 32)
        assert fc.live_areas[1] == pytest.approx(1500.0 * 0.092 / 32)

    def test_fine_fuel_dominates_dead_sav(self, timber_litter_dead):
        """The 1-hr class carries most of the surface area."""
        fc = calc_weighted_fuel_complex(timber_litter_dead, [])
        assert fc.dead_weights[0] > 0.9
        assert 1500 < fc.dead_sav_ratio < 2000

    def test_no_live_group(self, timber_litter_dead):
        fc = calc_weighted_fuel_complex(timber_litter_dead, [])
        assert fc.live_fraction == 0.0
        assert fc.live_weights.size == 0
        assert fc.sav_ratio == pytest.approx(fc.dead_sav_ratio)

    def test_zero_loaded_live_group(self, timber_litter_dead):
        live = [FuelClass(sav_ratio=1500.0, loading=0.0, moisture=1.0)]
        fc = calc_weighted_fuel_complex(timber_litter_dead, live)
        assert fc.live_fraction == 0.0
        assert np.all(np.isfinite(fc.live_weights))

    def test_total_loading(self, timber_litter_dead, brush_live):
        fc = calc_weighted_fuel_complex(timber_litter_dead, brush_live)
        assert fc.total_loading == pytest.approx(0.138 + 0.092 + 0.230 + 0.023 + 0.092)


class TestHeterogeneousSpread:
    """Tests for the multi-class spread evaluation."""

    def test_single_class_matches_single_class_model(self, short_grass_bed, windy_environment):
        """One dead class reproduces the single-class model."""
        dead = [FuelClass(sav_ratio=3500.0, loading=0.034, moisture=0.05)]
        het = calc_heterogeneous(dead, [], 1.0, windy_environment.wind_speed, windy_environment.slope, 0.12)
        single = calc_rothermel(short_grass_bed, windy_environment)

        assert het.reaction_intensity == pytest.approx(single.reaction_intensity)
        assert het.heat_sink == pytest.approx(single.heat_sink)
        assert het.ros == pytest.approx(single.ros)

    def test_mixed_bed_spreads(self, timber_litter_dead, brush_live):
        result = calc_heterogeneous(timber_litter_dead, brush_live, 1.0, 440.0, 0.0, 0.25)
        assert result.ros > result.ros_0 > 0
        assert result.reaction_intensity > 0

    def test_live_mx_not_below_dead_mx(self, timber_litter_dead, brush_live):
        result = calc_heterogeneous(timber_litter_dead, brush_live, 1.0, 0.0, 0.0, 0.25)
        assert result.live_mx >= result.dead_mx

    def test_no_live_uses_dead_mx(self, timber_litter_dead):
        result = calc_heterogeneous(timber_litter_dead, [], 1.0, 0.0, 0.0, 0.25)
        assert result.live_mx == 0.25
        assert result.fuel_complex.live_fraction == 0.0

    def test_wet_dead_fuel_no_dead_contribution(self, brush_live):
        dead = [FuelClass(sav_ratio=2000.0, loading=0.138, moisture=0.40)]
        result = calc_heterogeneous(dead, brush_live, 1.0, 0.0, 0.0, 0.25)
        assert result.dead_moisture_damping == 0.0

    def test_all_wet_no_spread(self):
        dead = [FuelClass(sav_ratio=2000.0, loading=0.138, moisture=0.40)]
        result = calc_heterogeneous(dead, [], 1.0, 440.0, 0.3, 0.25)
        assert result.ros == 0.0

    def test_empty_bed_returns_zero(self):
        dead = [FuelClass(sav_ratio=2000.0, loading=0.0, moisture=0.06)]
        result = calc_heterogeneous(dead, [], 1.0, 440.0, 0.2, 0.25)
        assert result.ros == 0.0
        assert result.reaction_intensity == 0.0
        assert result.fireline_intensity == 0.0

    def test_no_classes_returns_zero(self):
        result = calc_heterogeneous([], [], 1.0, 0.0, 0.0, 0.25)
        assert result.ros == 0.0

    def test_wind_increases_rate(self, timber_litter_dead, brush_live):
        calm = calc_heterogeneous(timber_litter_dead, brush_live, 1.0, 0.0, 0.0, 0.25)
        windy = calc_heterogeneous(timber_litter_dead, brush_live, 1.0, 880.0, 0.0, 0.25)
        assert windy.ros > calm.ros
        assert windy.ros_0 == pytest.approx(calm.ros_0)

    def test_wind_limit(self, timber_litter_dead, brush_live):
        result = calc_heterogeneous(timber_litter_dead, brush_live, 1.0, 1e5, 0.0, 0.25,
                                    wind_limit=WindLimit(corrected=False))
        assert result.wind_limited
        assert result.wind_speed == pytest.approx(0.9 * result.reaction_intensity)

    def test_heat_per_unit_area(self, timber_litter_dead, brush_live):
        result = calc_heterogeneous(timber_litter_dead, brush_live, 1.0, 440.0, 0.0, 0.25)
        assert result.heat_per_unit_area == pytest.approx(result.reaction_intensity * 384 / result.sav_ratio)


class TestHeterogeneousSI:
    """Tests for the SI boundary."""

    def test_matches_us(self, timber_litter_dead, brush_live):
        particle = FuelParticle(heat_content=BTU_lb_to_kJ_kg(8000.0), particle_density=Lbsft3_to_KiCu(32.0))

        def to_si(fc):
            return FuelClass(sav_ratio=ft_inv_to_m_inv(fc.sav_ratio), loading=Lbsft2_to_KiSq(fc.loading),
                             moisture=fc.moisture, particle=particle)

        us = calc_heterogeneous(timber_litter_dead, brush_live, 1.0, 440.0, 0.2, 0.25)
        si = calc_heterogeneous_si([to_si(fc) for fc in timber_litter_dead],
                                   [to_si(fc) for fc in brush_live],
                                   ft_to_m(1.0), ft_min_to_m_s(440.0), 0.2, 0.25)

        assert si.ros == pytest.approx(ft_min_to_m_s(us.ros), rel=1e-4)
        assert si.live_mx == pytest.approx(us.live_mx, rel=1e-4)
        assert si.sav_ratio == pytest.approx(ft_inv_to_m_inv(us.sav_ratio), rel=1e-4)

    def test_default_particle_is_standard(self, timber_litter_dead, brush_live):
        """Classes without a particle get the standard particle in SI as well."""
        def to_si(fc):
            return FuelClass(sav_ratio=ft_inv_to_m_inv(fc.sav_ratio), loading=Lbsft2_to_KiSq(fc.loading),
                             moisture=fc.moisture)

        us = calc_heterogeneous(timber_litter_dead, brush_live, 1.0, 440.0, 0.2, 0.25)
        si = calc_heterogeneous_si([to_si(fc) for fc in timber_litter_dead],
                                   [to_si(fc) for fc in brush_live],
                                   ft_to_m(1.0), ft_min_to_m_s(440.0), 0.2, 0.25)

        assert si.ros == pytest.approx(ft_min_to_m_s(us.ros), rel=1e-4)
        assert si.fuel_complex.dead_heat_content == pytest.approx(BTU_lb_to_kJ_kg(8000.0), rel=1e-6)


class TestHeterogeneousValidation:

    def test_invalid_depth(self, timber_litter_dead):
        with pytest.raises(ValidationError):
            calc_heterogeneous(timber_litter_dead, [], 0.0, 0.0, 0.0, 0.25)

    def test_invalid_class_reports_position(self, timber_litter_dead):
        live = [FuelClass(sav_ratio=0.0, loading=0.1, moisture=1.0)]
        with pytest.raises(ValidationError) as exc_info:
            calc_heterogeneous(timber_litter_dead, live, 1.0, 0.0, 0.0, 0.25)
        assert exc_info.value.field == "live[0].sav_ratio"

    def test_negative_wind(self, timber_litter_dead):
        with pytest.raises(ValidationError):
            calc_heterogeneous(timber_litter_dead, [], 1.0, -1.0, 0.0, 0.25)
