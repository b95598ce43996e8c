"""
tempfuzz - Signed fuzzy logic over [-1, +1] with time-parameterized factories.
"""

from dotenv import load_dotenv

from tempfuzz.errors import (
    ConfigurationError,
    FuzzyError,
    NullArgumentError,
    RangeError,
    ValidationError,
)
from tempfuzz.fuzzy import (
    FALSE,
    TRUE,
    UNKNOWN,
    Trigger,
    TriggerConfig,
    TriggerFactory,
    TruthValue,
)
from tempfuzz.logging import configure_logging, get_logger
from tempfuzz.temporal import TemporalFactory, current_timestamp
from tempfuzz.version import __version__

# Load environment variables from .env file
load_dotenv()

__all__ = [
    "TruthValue",
    "TRUE",
    "FALSE",
    "UNKNOWN",
    "Trigger",
    "TriggerConfig",
    "TriggerFactory",
    "TemporalFactory",
    "current_timestamp",
    "FuzzyError",
    "ValidationError",
    "RangeError",
    "NullArgumentError",
    "ConfigurationError",
    "configure_logging",
    "get_logger",
    "__version__",
]
