"""
Configuration for eitherkit, read from environment variables.

The library itself is configuration free; settings only govern how the
``eitherkit`` logger is wired up by :func:`eitherkit.logging_config.configure_logging`.
Loading returns an Either so callers can decide whether invalid settings
are fatal.
"""

import logging
import os
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from eitherkit.core.combinators import map_left
from eitherkit.core.either import Either, Left, Right, attempt, not_an_either
from eitherkit.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

ENV_PREFIX = "EITHERKIT_"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
DEFAULT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class Settings(BaseModel):
    """Validated eitherkit settings."""

    model_config = ConfigDict(frozen=True)

    log_level: str = Field(
        default="WARNING", description="Level for the eitherkit logger"
    )
    log_format: str = Field(
        default=DEFAULT_LOG_FORMAT,
        min_length=1,
        description="logging.Formatter format string for the installed handler",
    )
    propagate: bool = Field(
        default=True, description="Whether eitherkit records reach the root logger"
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def normalise_level(cls, value: Any) -> str:
        if not isinstance(value, str):
            raise ValueError("log level must be a string")
        level = value.strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"unknown log level {value!r}, expected one of {LOG_LEVELS}")
        return level

    @field_validator("log_format")
    @classmethod
    def check_format(cls, value: str) -> str:
        # Formatter rejects strings without a %-style field
        logging.Formatter(value)
        return value

    @property
    def level_number(self) -> int:
        return logging.getLevelNamesMapping()[self.log_level]


def parse_bool(value: str | None, default: bool) -> bool:
    """Parse a boolean flag the way shell users write them."""
    if value is None or value == "":
        return default
    return value.strip().lower() in ("true", "1", "yes", "on")


def _to_configuration_error(exc: ValidationError) -> ConfigurationError:
    errors = exc.errors()
    first = errors[0]
    field_name = ".".join(str(part) for part in first["loc"]) or None
    message = "; ".join(
        f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}" for err in errors
    )
    invalid = first.get("input")
    return ConfigurationError(
        f"Invalid eitherkit settings: {message}",
        field_name=field_name,
        invalid_value=invalid if isinstance(invalid, str | int | float | bool) else None,
    )


def load_settings(
    environ: Mapping[str, str] | None = None,
) -> Either[ConfigurationError, Settings]:
    """Load settings from ``environ`` (default ``os.environ``).

    Unset or empty variables fall back to the defaults. Validation failures
    come back as a Left holding a :class:`ConfigurationError`.
    """
    env = os.environ if environ is None else environ
    raw: dict[str, Any] = {
        "propagate": parse_bool(env.get(f"{ENV_PREFIX}PROPAGATE"), default=True),
    }
    for field_name in ("log_level", "log_format"):
        value = env.get(f"{ENV_PREFIX}{field_name.upper()}")
        if value:
            raw[field_name] = value

    result = map_left(
        attempt(lambda: Settings.model_validate(raw), ValidationError),
        _to_configuration_error,
    )
    if isinstance(result, Left):
        logger.warning("%s", result.value.message)
    return result


def load_settings_or_raise(environ: Mapping[str, str] | None = None) -> Settings:
    """Load settings, raising :class:`ConfigurationError` when they are invalid."""
    match load_settings(environ):
        case Right(settings):
            return settings
        case Left(error):
            raise error
        case other:
            not_an_either(other)


__all__ = [
    "DEFAULT_LOG_FORMAT",
    "ENV_PREFIX",
    "LOG_LEVELS",
    "Settings",
    "load_settings",
    "load_settings_or_raise",
    "parse_bool",
]
