"""
Configuration management using Pydantic Settings.

Type-safe, validated configuration loaded from environment variables.

Architecture:
- Flat settings classes (no nesting)
- Settings: runtime environment and logging
- EmailFormatSettings: EMAIL_* flags for the address format check, loaded
  on their own so a bad logging variable never affects validation
- Cached singletons via get_settings() / get_email_format_settings()

Usage:
    from emailvo.core.config import get_email_format_settings, get_settings

    if get_settings().is_development:
        ...
    if get_email_format_settings().allow_domain_literal:
        ...
"""

import logging
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from emailvo.core.enums import Environment


class Settings(BaseSettings):
    """
    Runtime settings (flat structure).

    Configuration precedence:
        1. Environment variables
        2. Default values
    """

    environment: Environment = Field(
        default=Environment.DEVELOPMENT,
        description="Runtime environment (development, testing, ci, production)",
    )
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )

    model_config = SettingsConfigDict(
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """
        Normalize and check the log level name.

        Args:
            v: Level name in any case.

        Returns:
            str: Upper-cased level name.

        Raises:
            ValueError: If the name is not a standard logging level.
        """
        level = v.strip().upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level: {v}")
        return level

    @property
    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.environment == Environment.DEVELOPMENT

    @property
    def is_testing(self) -> bool:
        """Check if running in testing environment."""
        return self.environment == Environment.TESTING

    @property
    def is_ci(self) -> bool:
        """Check if running in CI environment."""
        return self.environment == Environment.CI

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment == Environment.PRODUCTION


class EmailFormatSettings(BaseSettings):
    """
    Address forms accepted by the format check.

    Read from EMAIL_* variables only. Defaults accept quoted local parts and
    IP-literal domains, reject non-ASCII (SMTPUTF8) addresses and reject
    local parts longer than 64 characters.
    """

    allow_quoted_local: bool = Field(
        default=True,
        description='Accept quoted local parts such as "john doe"@example.com',
    )
    allow_domain_literal: bool = Field(
        default=True,
        description="Accept IP-literal domains such as user@[192.168.0.1]",
    )
    allow_smtputf8: bool = Field(
        default=False,
        description="Accept non-ASCII characters in the address",
    )
    globally_deliverable: bool = Field(
        default=True,
        description="Reject special-use domains (localhost, .local, .test, ...)",
    )
    strict: bool = Field(
        default=True,
        description="Enforce the 64-character local part limit",
    )

    model_config = SettingsConfigDict(
        env_prefix="EMAIL_",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache()
def get_settings() -> Settings:
    """
    Return the cached runtime settings instance.

    Call get_settings.cache_clear() after changing the environment
    (tests do this between cases).

    Returns:
        Settings: Configuration loaded from environment.
    """
    return Settings()


@lru_cache()
def get_email_format_settings() -> EmailFormatSettings:
    """
    Return the cached format-check settings instance.

    Returns:
        EmailFormatSettings: EMAIL_* flags loaded from environment.
    """
    return EmailFormatSettings()
