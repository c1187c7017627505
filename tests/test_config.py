"""Tests for application configuration."""

import os
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from dicemath.config import Settings, get_settings


class TestSettingsDefaults:
    """Tests for default configuration values."""

    def test_default_seed_is_none(self, default_settings):
        """Rolls should use system entropy unless a seed is configured."""
        assert default_settings.seed is None

    def test_default_fraction_style(self, default_settings):
        """Fractions should print as improper fractions by default."""
        assert default_settings.fraction_style == "improper"

    def test_default_debug_is_false(self, default_settings):
        """Debug mode should be off by default."""
        assert default_settings.debug is False
        assert default_settings.effective_log_level == "WARNING"


class TestSettingsFromEnvironment:
    """Tests for DICE_* environment variables."""

    def test_seed_from_env(self, default_settings):
        """DICE_SEED should set the seed."""
        with patch.dict(os.environ, {"DICE_SEED": "42"}, clear=False):
            assert Settings(_env_file=None).seed == 42

    def test_fraction_style_from_env(self, default_settings):
        """DICE_FRACTION_STYLE should accept mixed."""
        with patch.dict(os.environ, {"DICE_FRACTION_STYLE": "mixed"}, clear=False):
            assert Settings(_env_file=None).fraction_style == "mixed"

    def test_invalid_fraction_style_rejected(self, default_settings):
        """Only improper and mixed are valid styles."""
        with patch.dict(os.environ, {"DICE_FRACTION_STYLE": "decimal"}, clear=False):
            with pytest.raises(ValidationError):
                Settings(_env_file=None)

    def test_debug_overrides_log_level(self, default_settings):
        """DICE_DEBUG should force DEBUG logging."""
        with patch.dict(
            os.environ, {"DICE_DEBUG": "true", "DICE_LOG_LEVEL": "error"}, clear=False
        ):
            settings = Settings(_env_file=None)
            assert settings.effective_log_level == "DEBUG"

    def test_log_level_is_uppercased(self, default_settings):
        """Log level names should be case-insensitive."""
        with patch.dict(os.environ, {"DICE_LOG_LEVEL": "info"}, clear=False):
            assert Settings(_env_file=None).effective_log_level == "INFO"

    def test_unprefixed_variables_ignored(self, default_settings):
        """Plain SEED should not configure dice."""
        with patch.dict(os.environ, {"SEED": "7"}, clear=False):
            assert Settings(_env_file=None).seed is None


class TestGetSettings:
    """Tests for the cached accessor."""

    def test_get_settings_is_cached(self, default_settings):
        """get_settings should return the same instance."""
        assert get_settings() is get_settings()
