"""Unit tests for configuration."""

import pytest

from buildlink.core.config import Config, ConventionDefaults


class TestConfig:
    """Tests for configuration loading."""

    def test_defaults(self, config):
        assert config.log_level == "INFO"
        assert config.conventions == ConventionDefaults()
        assert config.conventions.desugaring_jdk_threshold == 8

    def test_from_env(self, monkeypatch):
        """Test environment overrides.

        Verifies that log level and convention values are read from
        BUILDLINK_* variables.
        """
        monkeypatch.setenv("BUILDLINK_LOG_LEVEL", "DEBUG")
        monkeypatch.setenv("BUILDLINK_MIN_SDK", "26")
        monkeypatch.setenv("BUILDLINK_DESUGAR_LIB_VERSION", "2.1.2")

        config = Config.from_env()

        assert config.log_level == "DEBUG"
        assert config.conventions.min_sdk == 26
        assert config.conventions.desugar_lib_version == "2.1.2"
        assert config.conventions.room_version == "2.6.1"

    def test_from_env_without_overrides(self, monkeypatch):
        for name in ("BUILDLINK_LOG_LEVEL", "BUILDLINK_MIN_SDK", "BUILDLINK_DESUGAR_LIB_VERSION"):
            monkeypatch.delenv(name, raising=False)
        assert Config.from_env() == Config()

    def test_invalid_values_rejected(self):
        """Test that configuration values are validated."""
        with pytest.raises(ValueError):
            ConventionDefaults(min_sdk=0)
        with pytest.raises(ValueError):
            Config(log_level="TRACE")
