"""
Configuration management for the GGSA export.
"""

from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class ExportSettings(BaseSettings):
    """Configuration settings for the GGSA export."""

    # Application Configuration
    environment: str = Field(default="development", alias="ENVIRONMENT")
    debug: bool = Field(default=False, alias="DEBUG")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    log_format: str = Field(default="standard", alias="LOG_FORMAT")

    # Template Configuration
    template_dir: Optional[Path] = Field(default=None, alias="GGSA_TEMPLATE_DIR")
    template_namespace: str = Field(default="Codality", alias="GGSA_TEMPLATE_NAMESPACE")
    strict_variables: bool = Field(default=False, alias="GGSA_STRICT_VARIABLES")
    autoescape: bool = Field(default=True, alias="GGSA_AUTOESCAPE")

    # Rendering Configuration
    default_currency: str = Field(default="EUR", alias="GGSA_DEFAULT_CURRENCY")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        validate_default=True,
        populate_by_name=True,
        extra="ignore",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v):
        """Ensure log level is valid."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in valid_levels:
            raise ValueError(f"Log level must be one of: {valid_levels}")
        return v.upper()

    @field_validator("log_format")
    @classmethod
    def validate_log_format(cls, v):
        """Ensure log format is valid."""
        if v.lower() not in ("standard", "json"):
            raise ValueError("Log format must be 'standard' or 'json'")
        return v.lower()

    @field_validator("environment")
    @classmethod
    def validate_environment(cls, v):
        """Ensure environment is valid."""
        valid_envs = ["development", "testing", "production"]
        if v.lower() not in valid_envs:
            raise ValueError(f"Environment must be one of: {valid_envs}")
        return v.lower()

    @field_validator("template_dir")
    @classmethod
    def validate_template_dir(cls, v):
        """Ensure a template override points at an existing directory."""
        if v is not None and not v.is_dir():
            raise ValueError(f"Template directory does not exist: {v}")
        return v

    @field_validator("default_currency")
    @classmethod
    def validate_currency(cls, v):
        """Ensure the currency is a three-letter code."""
        if len(v) != 3 or not v.isalpha():
            raise ValueError("Currency must be a three-letter ISO code")
        return v.upper()


def load_config(env_file: Optional[str] = None) -> ExportSettings:
    """Load configuration from environment variables and .env file."""
    if env_file:
        load_dotenv(env_file)
    else:
        load_dotenv()

    return ExportSettings()


# Global configuration instance
_config: Optional[ExportSettings] = None


def get_config() -> ExportSettings:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = load_config()
    return _config


def reload_config(env_file: Optional[str] = None) -> ExportSettings:
    """Reload configuration (useful for testing)."""
    global _config
    _config = load_config(env_file)
    return _config
