# -*- coding: utf-8 -*-
"""Tests for EngineConfig and the config singleton."""

import pytest

from sustainability_engine.config import (
    EngineConfig,
    get_config,
    reset_config,
    set_config,
)
from sustainability_engine.exceptions import ConfigurationError


class TestEngineConfigDefaults:
    """Default values."""

    def test_defaults(self):
        config = EngineConfig()

        assert config.min_completeness_score == 30.0
        assert config.default_report_format == "basic"
        assert config.roadmap_max_actions == 5
        assert config.enable_provenance is True
        assert config.enable_metrics is True

    def test_defaults_validate(self):
        EngineConfig().validate()


class TestEngineConfigValidation:
    """validate() range checks."""

    @pytest.mark.parametrize("score", [-1.0, 100.5, 120.0])
    def test_completeness_out_of_range(self, score):
        with pytest.raises(ConfigurationError) as exc_info:
            EngineConfig(min_completeness_score=score).validate()
        assert exc_info.value.context["config_key"] == "min_completeness_score"

    def test_unknown_format(self):
        with pytest.raises(ConfigurationError) as exc_info:
            EngineConfig(default_report_format="pdf").validate()
        assert exc_info.value.context["value"] == "pdf"

    def test_roadmap_max_actions_positive(self):
        with pytest.raises(ConfigurationError):
            EngineConfig(roadmap_max_actions=0).validate()


class TestEngineConfigFromEnv:
    """Environment overrides with the SUSTAINABILITY_ENGINE_ prefix."""

    def test_overrides(self, monkeypatch):
        monkeypatch.setenv("SUSTAINABILITY_ENGINE_MIN_COMPLETENESS_SCORE", "45")
        monkeypatch.setenv("SUSTAINABILITY_ENGINE_DEFAULT_REPORT_FORMAT", "Detailed")
        monkeypatch.setenv("SUSTAINABILITY_ENGINE_ROADMAP_MAX_ACTIONS", "3")
        monkeypatch.setenv("SUSTAINABILITY_ENGINE_ENABLE_PROVENANCE", "no")
        monkeypatch.setenv("SUSTAINABILITY_ENGINE_ENABLE_METRICS", "YES")

        config = EngineConfig.from_env()

        assert config.min_completeness_score == 45.0
        assert config.default_report_format == "detailed"
        assert config.roadmap_max_actions == 3
        assert config.enable_provenance is False
        assert config.enable_metrics is True

    def test_unparseable_numbers_keep_defaults(self, monkeypatch):
        monkeypatch.setenv("SUSTAINABILITY_ENGINE_MIN_COMPLETENESS_SCORE", "lots")
        monkeypatch.setenv("SUSTAINABILITY_ENGINE_ROADMAP_MAX_ACTIONS", "2.5")

        config = EngineConfig.from_env()

        assert config.min_completeness_score == 30.0
        assert config.roadmap_max_actions == 5


class TestConfigSingleton:
    """get_config / set_config / reset_config."""

    def test_get_config_is_cached(self):
        assert get_config() is get_config()

    def test_set_config_replaces(self):
        custom = EngineConfig(min_completeness_score=50.0)
        set_config(custom)
        assert get_config() is custom

    def test_set_config_rejects_invalid(self):
        with pytest.raises(ConfigurationError):
            set_config(EngineConfig(roadmap_max_actions=-1))

    def test_reset_config_reloads_env(self, monkeypatch):
        first = get_config()
        monkeypatch.setenv("SUSTAINABILITY_ENGINE_ROADMAP_MAX_ACTIONS", "7")
        reset_config()

        second = get_config()
        assert second is not first
        assert second.roadmap_max_actions == 7
