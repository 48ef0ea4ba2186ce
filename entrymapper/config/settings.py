"""Typed runtime settings with dotenv support and startup validation."""

import logging
from typing import Literal

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_CONFIG_LOGGER_NAME = "entrymapper"


class SettingsLoadError(RuntimeError):
    """Raised when runtime settings cannot be loaded or validated."""


class EntryMapperSettings(BaseSettings):
    """Settings for entry mapping behavior and package logging.

    Environment variable names are field names in uppercase with the
    `ENTRYMAPPER_` prefix.
    Example: `enumeration_order` reads from `ENTRYMAPPER_ENUMERATION_ORDER`.

    Attributes:
        enumeration_order: Source enumeration-order policy (`host` or `insertion`).
        log_level: Standard logging level name applied to the package logger.
    """

    model_config = SettingsConfigDict(
        env_prefix="ENTRYMAPPER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    enumeration_order: Literal["host", "insertion"] = Field(default="host")
    log_level: str = Field(default="WARNING", min_length=1)

    @field_validator("enumeration_order", mode="before")
    @classmethod
    def _normalize_enumeration_order(cls, value: object) -> object:
        if isinstance(value, str):
            return value.strip().lower()
        return value

    @field_validator("log_level")
    @classmethod
    def _validate_log_level(cls, value: str) -> str:
        normalized_value = value.strip().upper()
        if normalized_value not in logging.getLevelNamesMapping():
            raise ValueError(f"log_level must be a standard logging level name; got {value!r}")
        return normalized_value


def config_load_settings() -> EntryMapperSettings:
    """Load and validate runtime settings from environment and dotenv.

    Returns:
        EntryMapperSettings: Validated runtime settings object.

    Raises:
        SettingsLoadError: Raised when settings are invalid.
    """

    try:
        return EntryMapperSettings()
    except ValidationError as error:
        raise SettingsLoadError(
            f"Entry mapper configuration validation failed. Update .env or environment variables. Details: {error}"
        ) from error


def config_configure_logging(settings: EntryMapperSettings) -> logging.Logger:
    """Apply the configured level to the package logger.

    Args:
        settings: Validated runtime settings.

    Returns:
        logging.Logger: Package logger.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    package_logger = logging.getLogger(_CONFIG_LOGGER_NAME)
    package_logger.setLevel(settings.log_level)
    return package_logger
