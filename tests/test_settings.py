"""Tests for environment-driven settings and logging setup."""

import logging

import pytest
from pydantic import ValidationError

from event_footprint.config import logging as logging_config
from event_footprint.config.settings import Settings, get_settings
from event_footprint.models.enums import Region


class TestSettings:
    def test_defaults(self, settings):
        assert settings.log_level == "INFO"
        assert settings.cohort_tolerance_percent == 1.0
        assert settings.hybrid_in_person_ratio == 0.5
        assert settings.default_region is Region.US
        assert settings.events_per_year == 4

    def test_env_prefix(self, monkeypatch):
        monkeypatch.setenv("EVENT_FOOTPRINT_DEFAULT_REGION", "eu")
        monkeypatch.setenv("EVENT_FOOTPRINT_COHORT_TOLERANCE_PERCENT", "2.5")
        settings = Settings(_env_file=None)
        assert settings.default_region is Region.EU
        assert settings.cohort_tolerance_percent == 2.5

    def test_invalid_ratio_rejected(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, hybrid_in_person_ratio=1.5)

    def test_get_settings_cached(self):
        assert get_settings() is get_settings()


class TestConfigureLogging:
    def test_configures_once(self, monkeypatch):
        calls = []
        monkeypatch.setattr(logging_config, "_LOGGER_INITIALIZED", False)
        monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))

        logging_config.configure_logging("debug")
        logging_config.configure_logging("info")

        assert len(calls) == 1
        assert calls[0]["level"] == "DEBUG"
        assert "%(name)s" in calls[0]["format"]
