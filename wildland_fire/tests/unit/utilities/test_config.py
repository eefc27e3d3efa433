"""Tests for ModelConfig and the .cfg loader."""

import pytest

from wildland_fire.exceptions import ConfigurationError
from wildland_fire.models.spread_relations import WindLimit
from wildland_fire.utilities.config import ModelConfig, load_model_config


# ============================================================================
# Fixtures
# ============================================================================

@pytest.fixture
def write_cfg(tmp_path):
    """Write a .cfg file and return its path."""
    def _write(text):
        path = tmp_path / "model.cfg"
        path.write_text(text)
        return str(path)
    return _write


class TestModelConfig:
    """Tests for the in-code configuration."""

    def test_defaults(self):
        config = ModelConfig()
        assert config.units == "US"
        assert not config.is_si
        assert config.wind_limit is None
        assert config.make_wind_limit() is None

    def test_si(self):
        assert ModelConfig(units="SI").is_si

    def test_bad_units(self):
        with pytest.raises(ConfigurationError) as exc_info:
            ModelConfig(units="metric")
        assert exc_info.value.parameter == "units"

    def test_bad_wind_limit(self):
        with pytest.raises(ConfigurationError):
            ModelConfig(wind_limit="strict")

    def test_bad_tolerance(self):
        with pytest.raises(ConfigurationError):
            ModelConfig(ode_rtol=0.0)

    @pytest.mark.parametrize("variant,corrected", [("corrected", True), ("original", False)])
    def test_make_wind_limit(self, variant, corrected):
        limit = ModelConfig(wind_limit=variant).make_wind_limit()
        assert isinstance(limit, WindLimit)
        assert limit.corrected is corrected


class TestLoadModelConfig:
    """Tests for reading configuration files."""

    def test_full_file(self, write_cfg):
        path = write_cfg(
            "[Model]\nunits = si\nwind_limit = Original\nepsilon = 1e-12\n\n"
            "[Solver]\nrtol = 1e-6\natol = 1e-9\nmax_steps = 500\n"
        )
        config = load_model_config(path)
        assert config.units == "SI"
        assert config.wind_limit == "original"
        assert config.epsilon == pytest.approx(1e-12)
        assert config.ode_rtol == pytest.approx(1e-6)
        assert config.ode_max_steps == 500

    def test_missing_sections_use_defaults(self, write_cfg):
        assert load_model_config(write_cfg("")) == ModelConfig()

    def test_wind_limit_off(self, write_cfg):
        assert load_model_config(write_cfg("[Model]\nwind_limit = none\n")).wind_limit is None

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigurationError) as exc_info:
            load_model_config(str(tmp_path / "missing.cfg"))
        assert exc_info.value.config_path.endswith("missing.cfg")

    def test_bad_number(self, write_cfg):
        with pytest.raises(ConfigurationError) as exc_info:
            load_model_config(write_cfg("[Solver]\nmax_steps = many\n"))
        assert exc_info.value.parameter == "max_steps"

    def test_bad_value_reports_path(self, write_cfg):
        path = write_cfg("[Model]\nunits = metric\n")
        with pytest.raises(ConfigurationError) as exc_info:
            load_model_config(path)
        assert exc_info.value.config_path == path

    def test_unparsable(self, write_cfg):
        with pytest.raises(ConfigurationError):
            load_model_config(write_cfg("units = SI\n"))
