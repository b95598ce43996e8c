"""
Configuration for tempfuzz.

Environment-driven settings for logging and temporal evaluation.
"""

from tempfuzz.config.settings import (
    LOCAL_TIMEZONE,
    LoggingSettings,
    TemporalSettings,
    clear_settings_cache,
    get_logging_settings,
    get_temporal_settings,
)

__all__ = [
    "LOCAL_TIMEZONE",
    "LoggingSettings",
    "TemporalSettings",
    "clear_settings_cache",
    "get_logging_settings",
    "get_temporal_settings",
]
