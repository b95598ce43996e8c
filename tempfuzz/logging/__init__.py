"""
Logging system for tempfuzz.

This module provides a centralized logging configuration with console and
rotating file outputs, a global debug flag, and helper decorators.
"""

from tempfuzz.logging.config import (
    configure_logging,
    configure_logging_from_settings,
    get_logger,
    is_debug_mode,
    set_debug_mode,
)
from tempfuzz.logging.helpers import log_entry_exit

__all__ = [
    # Configuration
    "configure_logging",
    "configure_logging_from_settings",
    "get_logger",
    "set_debug_mode",
    "is_debug_mode",
    # Helper methods
    "log_entry_exit",
]
