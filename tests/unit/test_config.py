"""
Unit tests for configuration management.
"""

import os
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from ggsa_export.config.settings import (
    ExportSettings,
    get_config,
    load_config,
    reload_config,
)


class TestExportSettings:
    """Test cases for ExportSettings."""

    def test_config_with_valid_env_vars(self, test_config):
        """Test configuration loads correctly with valid environment variables."""
        assert test_config.environment == "testing"
        assert test_config.debug is True
        assert test_config.log_level == "DEBUG"
        assert test_config.log_format == "standard"
        assert test_config.default_currency == "EUR"

    def test_default_values(self, mock_env):
        """Test default rendering configuration values."""
        config = ExportSettings(_env_file=None)

        assert config.environment == "testing"  # From mock_env
        assert config.template_dir is None
        assert config.template_namespace == "Codality"
        assert config.strict_variables is False
        assert config.autoescape is True

    def test_field_names_are_accepted(self):
        """Test that settings can be built by field name as well as alias."""
        config = ExportSettings(_env_file=None, environment="production", log_level="warning")

        assert config.environment == "production"
        assert config.log_level == "WARNING"

    def test_rendering_env_vars(self, mock_env, tmp_path):
        """Test GGSA_* variables configure the template environment."""
        test_env = mock_env.copy()
        test_env.update(
            {
                "GGSA_TEMPLATE_DIR": str(tmp_path),
                "GGSA_TEMPLATE_NAMESPACE": "Acme",
                "GGSA_STRICT_VARIABLES": "true",
                "GGSA_AUTOESCAPE": "false",
                "GGSA_DEFAULT_CURRENCY": "chf",
            }
        )

        with patch.dict(os.environ, test_env):
            config = ExportSettings(_env_file=None)

        assert config.template_dir == tmp_path
        assert config.template_namespace == "Acme"
        assert config.strict_variables is True
        assert config.autoescape is False
        assert config.default_currency == "CHF"

    @pytest.mark.parametrize(
        "key,value,message",
        [
            ("LOG_LEVEL", "VERBOSE", "Log level must be one of"),
            ("LOG_FORMAT", "xml", "Log format must be"),
            ("ENVIRONMENT", "staging", "Environment must be one of"),
            ("GGSA_DEFAULT_CURRENCY", "EURO", "three-letter ISO code"),
            ("GGSA_TEMPLATE_DIR", "/nonexistent/templates", "does not exist"),
        ],
    )
    def test_invalid_values(self, mock_env, key, value, message):
        """Test validation of individual settings."""
        test_env = mock_env.copy()
        test_env[key] = value

        with patch.dict(os.environ, test_env):
            with pytest.raises(ValidationError) as exc_info:
                ExportSettings(_env_file=None)

        assert message in str(exc_info.value)


class TestConfigFunctions:
    """Test module-level configuration helpers."""

    def test_get_config_is_cached(self, mock_env):
        """Test get_config returns the same instance until reloaded."""
        first = get_config()

        assert get_config() is first
        assert reload_config() is not first

    def test_load_config_reads_env_file(self, mock_env, tmp_path):
        """Test values from a .env file are picked up."""
        env_file = tmp_path / ".env"
        env_file.write_text("GGSA_TEMPLATE_NAMESPACE=Acme\n", encoding="utf-8")

        with patch.dict(os.environ, mock_env):
            config = load_config(str(env_file))

        assert config.template_namespace == "Acme"

    def test_env_file_does_not_override_environment(self, mock_env, tmp_path):
        """Test variables already set win over the .env file."""
        env_file = tmp_path / ".env"
        env_file.write_text("LOG_LEVEL=ERROR\n", encoding="utf-8")

        with patch.dict(os.environ, mock_env):
            config = load_config(str(env_file))

        assert config.log_level == "DEBUG"
