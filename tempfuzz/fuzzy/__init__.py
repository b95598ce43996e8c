"""
Fuzzy logic module for tempfuzz.

This module provides the signed fuzzy truth value with its NOT/AND/OR
algebra and the triggers that collapse a truth value into a boolean.
"""

from tempfuzz.fuzzy.logical import FuzzyLogical, SignedFuzzyLogical
from tempfuzz.fuzzy.trigger import Trigger
from tempfuzz.fuzzy.trigger_config import TriggerConfig, TriggerFactory
from tempfuzz.fuzzy.truth import FALSE, TRUE, UNKNOWN, TruthValue

__all__ = [
    "FuzzyLogical",
    "SignedFuzzyLogical",
    "Trigger",
    "TriggerConfig",
    "TriggerFactory",
    "TruthValue",
    "TRUE",
    "FALSE",
    "UNKNOWN",
]
