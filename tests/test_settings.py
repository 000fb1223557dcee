"""Tests for environment-driven engine settings."""

import pytest
from pydantic import ValidationError

from starbond.config import Settings, get_settings, reset_settings_cache


class TestSettingsDefaults:
    def test_defaults(self):
        s = Settings()
        assert s.log_level == "INFO"
        assert s.neutral_category_score == 50
        assert s.match_normalization == 28.0
        assert s.duration_cap_days == 365.0
        assert s.stationary_epsilon == 0.001
        assert s.collective_orb_window == 1.0
        assert s.personal_transit_limit == 5


class TestSettingsEnvironment:
    def test_env_alias_override(self, monkeypatch):
        monkeypatch.setenv("MATCH_NORMALIZATION", "16")
        monkeypatch.setenv("PERSONAL_TRANSIT_LIMIT", "3")

        s = Settings()
        assert s.match_normalization == 16.0
        assert s.personal_transit_limit == 3
        assert s.duration_cap_days == 365.0  # unchanged default

    def test_invalid_value_rejected(self, monkeypatch):
        monkeypatch.setenv("MATCH_NORMALIZATION", "0")
        with pytest.raises(ValidationError):
            Settings()

    def test_neutral_score_range(self, monkeypatch):
        monkeypatch.setenv("NEUTRAL_CATEGORY_SCORE", "101")
        with pytest.raises(ValidationError):
            Settings()


def test_get_settings_is_cached(monkeypatch):
    first = get_settings()
    monkeypatch.setenv("DURATION_CAP_DAYS", "30")

    assert get_settings() is first
    assert get_settings().duration_cap_days == 365.0

    reset_settings_cache()
    assert get_settings().duration_cap_days == 30.0
