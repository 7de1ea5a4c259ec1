# ABOUTME: Unit tests for token library settings
# ABOUTME: Tests defaults, case-insensitive validation, token defaults and the cached accessor

import pytest
from pydantic import ValidationError

from authtoken.config._base import BaseTokenSettings
from authtoken.config.settings import TokenSettings, get_settings


class TestBaseTokenSettings:
    """Test suite for BaseTokenSettings configuration class."""

    @pytest.mark.unit
    @pytest.mark.config
    def test_default_values(self):
        """Test that default values are set correctly."""
        settings = BaseTokenSettings()

        assert settings.LOG_LEVEL == "INFO"
        assert settings.LOG_FORMAT == "txt"
        assert settings.TIMEZONE == "UTC"
        assert settings.DEFAULT_WARN_FOR_MS == 60_000
        assert settings.LOG_TOKEN_VALUES is False

    @pytest.mark.unit
    @pytest.mark.config
    def test_log_level_and_format_normalized(self):
        """Test LOG_LEVEL and LOG_FORMAT are normalized."""
        settings = BaseTokenSettings(LOG_LEVEL=" debug ", LOG_FORMAT="Structured")

        assert settings.LOG_LEVEL == "DEBUG"
        assert settings.LOG_FORMAT == "json"

    @pytest.mark.unit
    @pytest.mark.config
    def test_warn_alias_for_log_level(self):
        """Test WARN is accepted as a spelling of WARNING."""
        assert BaseTokenSettings(LOG_LEVEL="warn").LOG_LEVEL == "WARNING"

    @pytest.mark.unit
    @pytest.mark.config
    def test_unused_keys_ignored(self):
        """Test unrelated environment keys do not become settings."""
        settings = BaseTokenSettings(APP_NAME="Other", DEBUG=True)

        assert not hasattr(settings, "APP_NAME")
        assert not hasattr(settings, "DEBUG")

    @pytest.mark.unit
    @pytest.mark.config
    def test_timezone_casing_repaired(self):
        """Test TIMEZONE accepts lower-case IANA identifiers."""
        assert BaseTokenSettings(TIMEZONE="america/new_york").TIMEZONE == "America/New_York"

    @pytest.mark.unit
    @pytest.mark.config
    @pytest.mark.parametrize("timezone", ["", "Mars/Olympus_Mons"])
    def test_timezone_invalid(self, timezone):
        """Test TIMEZONE rejects unknown identifiers."""
        with pytest.raises(ValidationError, match="Invalid timezone"):
            BaseTokenSettings(TIMEZONE=timezone)

    @pytest.mark.unit
    @pytest.mark.config
    @pytest.mark.parametrize("warn_for", [-1, float("nan"), float("inf")])
    def test_default_warn_for_invalid(self, warn_for):
        """Test DEFAULT_WARN_FOR_MS must be finite and non-negative."""
        with pytest.raises(ValidationError):
            BaseTokenSettings(DEFAULT_WARN_FOR_MS=warn_for)

    @pytest.mark.unit
    @pytest.mark.config
    def test_environment_variables(self, monkeypatch):
        """Test settings load from environment variables."""
        monkeypatch.setenv("DEFAULT_WARN_FOR_MS", "1500")
        monkeypatch.setenv("log_token_values", "true")
        monkeypatch.setenv("TIMEZONE", "Europe/Berlin")

        settings = BaseTokenSettings()

        assert settings.DEFAULT_WARN_FOR_MS == 1500
        assert settings.LOG_TOKEN_VALUES is True
        assert settings.TIMEZONE == "Europe/Berlin"


class TestGetSettings:
    """Test suite for the cached settings accessor."""

    @pytest.mark.unit
    @pytest.mark.config
    def test_returns_singleton(self):
        """Test get_settings caches a single TokenSettings instance."""
        first = get_settings()

        assert isinstance(first, TokenSettings)
        assert get_settings() is first

    @pytest.mark.unit
    @pytest.mark.config
    def test_cache_clear_picks_up_environment(self, monkeypatch):
        """Test clearing the cache re-reads the environment."""
        assert get_settings().DEFAULT_WARN_FOR_MS == 60_000

        monkeypatch.setenv("DEFAULT_WARN_FOR_MS", "10")
        assert get_settings().DEFAULT_WARN_FOR_MS == 60_000

        get_settings.cache_clear()
        assert get_settings().DEFAULT_WARN_FOR_MS == 10
