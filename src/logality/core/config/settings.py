"""
Environment-driven defaults for Logality.

This module provides the process-wide defaults that a Logality instance falls
back to when a construction argument is left unset. Values are read with
pydantic-settings from environment variables carrying the ``LOGALITY_``
prefix, or from a ``.env`` file in the working directory.

Classes:
    Settings: Default construction options and internal diagnostics settings

Functions:
    get_settings(): Read the environment, reporting bad values as ConfigurationError

Environment Variables:
    LOGALITY_APP_NAME: Application name written to context.runtime.application
    LOGALITY_PRETTY_PRINT: Use the pretty renderer instead of compact JSON
    LOGALITY_ASYNC_MODE: Return awaitable handles from log calls
    LOGALITY_LOG_LEVEL: Threshold for Logality's own diagnostics
    LOGALITY_DEBUG: Render Logality's own diagnostics with rich

Example:
    >>> from logality.core.config.settings import Settings
    >>> settings = Settings(APP_NAME="billing")
    >>> settings.APP_NAME
    'billing'
"""

from pydantic import ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from logality.core.exceptions.custom_exceptions import ConfigurationError


class Settings(BaseSettings):
    """
    Logality defaults with environment variable support.

    Attributes:
        APP_NAME: Default application name for new loggers
        PRETTY_PRINT: Default renderer selection
        ASYNC_MODE: Default dispatch mode
        LOG_LEVEL: Minimum level of Logality's internal diagnostics
        DEBUG: Enable rich console formatting for internal diagnostics

    Note:
        LOG_LEVEL filters the library's own diagnostics only. Records
        produced by log calls are never filtered.
    """

    APP_NAME: str = "Logality"
    PRETTY_PRINT: bool = False
    ASYNC_MODE: bool = False

    # Internal diagnostics
    LOG_LEVEL: str = "WARNING"
    DEBUG: bool = False

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """
        Validate the diagnostics level is a standard logging level.

        Args:
            v (str): The log level value to validate

        Returns:
            str: The validated and normalized log level

        Raises:
            ValueError: If log level is not supported
        """
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in valid_levels:
            raise ValueError(f"LOG_LEVEL must be one of: {valid_levels}")
        return v.upper()

    model_config = SettingsConfigDict(
        env_prefix="LOGALITY_",
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )


def get_settings() -> Settings:
    """
    Read a fresh settings instance from the environment.

    Raises:
        ConfigurationError: If an environment value fails validation
    """
    try:
        return Settings()
    except ValidationError as e:
        raise ConfigurationError(
            f"Invalid Logality settings: {e}",
            error_code="INVALID_SETTINGS",
            details={"errors": e.errors(include_url=False)},
        ) from e
