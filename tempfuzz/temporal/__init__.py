"""
Temporal module for tempfuzz.

Factories that produce truth values as a function of time and compose with
fuzzy AND, OR and NOT.
"""

from tempfuzz.temporal.container import Container, TemporalContainer
from tempfuzz.temporal.factory import TemporalFactory, TimeFunction, current_timestamp

__all__ = [
    "Container",
    "TemporalContainer",
    "TemporalFactory",
    "TimeFunction",
    "current_timestamp",
]
