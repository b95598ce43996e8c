"""
tempfuzz Settings Manager - Runtime configuration management.

Settings are read from environment variables (and a ``.env`` file loaded
at package import) through pydantic-settings.
"""

import logging
from functools import lru_cache
from typing import Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from tempfuzz.errors import ConfigurationError, ErrorCodes
from tempfuzz.logging import get_logger

logger = get_logger(__name__)

# Sentinel timezone name meaning "naive local wall-clock time"
LOCAL_TIMEZONE = "local"


class LoggingSettings(BaseSettings):
    """Logging Settings.

    Environment variables:
        TEMPFUZZ_LOGGING_LEVEL: Console log level. Default: INFO
        TEMPFUZZ_LOGGING_DEBUG: Enable debug mode. Default: false
        TEMPFUZZ_LOGGING_LOG_DIR: Directory for rotating log files. Default: unset
    """

    level: str = Field(default="INFO", description="Console log level name")
    debug: bool = Field(default=False, description="Enable global debug mode")
    log_dir: Optional[str] = Field(
        default=None, description="Directory for log files, console only when unset"
    )
    max_file_size_mb: int = Field(default=10, gt=0)
    backup_count: int = Field(default=5, ge=0)

    model_config = SettingsConfigDict(env_prefix="TEMPFUZZ_LOGGING_")

    @field_validator("level")
    @classmethod
    def validate_level(cls, level: str) -> str:
        """Reject names the logging module does not know."""
        if not isinstance(logging.getLevelName(level.upper()), int):
            raise ValueError(f"Unknown log level: {level}")
        return level.upper()


class TemporalSettings(BaseSettings):
    """Temporal Settings.

    Environment variables:
        TEMPFUZZ_TEMPORAL_TIMEZONE: Timezone used by ``TemporalFactory.now()``.
            ``local`` yields naive local time, any IANA name (e.g.
            ``Europe/Vilnius``, ``UTC``) yields an aware timestamp. Default: local
    """

    timezone: str = Field(
        default=LOCAL_TIMEZONE,
        description="Timezone for current timestamps ('local' or an IANA name)",
    )

    model_config = SettingsConfigDict(env_prefix="TEMPFUZZ_TEMPORAL_")

    @field_validator("timezone")
    @classmethod
    def validate_timezone(cls, timezone: str) -> str:
        """Accept 'local' or any timezone zoneinfo can resolve."""
        if timezone == LOCAL_TIMEZONE:
            return timezone
        try:
            ZoneInfo(timezone)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise ValueError(f"Unknown timezone: {timezone}") from e
        return timezone

    def tzinfo(self) -> Optional[ZoneInfo]:
        """Resolved tzinfo, None for naive local time."""
        if self.timezone == LOCAL_TIMEZONE:
            return None
        return ZoneInfo(self.timezone)


# Cache settings to avoid repeated env access
@lru_cache
def get_logging_settings() -> LoggingSettings:
    """Get logging settings with caching."""
    return _load(LoggingSettings)


@lru_cache
def get_temporal_settings() -> TemporalSettings:
    """Get temporal settings with caching."""
    return _load(TemporalSettings)


def clear_settings_cache() -> None:
    """Clear settings cache, forcing a re-read of the environment."""
    get_logging_settings.cache_clear()
    get_temporal_settings.cache_clear()


def _load(settings_class: type[BaseSettings]) -> BaseSettings:
    try:
        settings = settings_class()
    except ValueError as e:
        # pydantic.ValidationError subclasses ValueError
        logger.error(f"Invalid {settings_class.__name__}: {e}")
        raise ConfigurationError(
            message=f"Invalid {settings_class.__name__} from environment",
            error_code=ErrorCodes.CONFIG_VALIDATION_FAILED,
            context={"settings": settings_class.__name__},
            details={"errors": str(e)},
            suggestion=f"Check the {settings_class.model_config.get('env_prefix')}* environment variables",
        ) from e
    logger.debug(f"Loaded {settings_class.__name__}: {settings.model_dump()}")
    return settings
