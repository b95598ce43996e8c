"""
Temporal truth value factories.

A TemporalFactory is a "time machine": it wraps a time function that defines
the rules for producing a TruthValue at a given point in time. Factories can
be combined with AND, OR and NOT; composition is lazy and every evaluation
re-runs the whole chain of operands at the requested timestamp.

Example:
    >>> sun_has_set = TemporalFactory(lambda t: TruthValue.of(1.0 if t.hour >= 21 else -1.0))
    >>> tom_is_home = TemporalFactory(lambda t: TruthValue.of(0.9 if t.hour >= 20 else -1.0))
    >>> good_time_to_meet = sun_has_set & tom_is_home
    >>> good_time_to_meet.evaluate(datetime(2022, 1, 1, 21, 30)).magnitude
    0.9
"""

from datetime import datetime
from typing import Callable, Iterable, Optional

import pandas as pd

from tempfuzz.config import get_temporal_settings
from tempfuzz.errors import NullArgumentError
from tempfuzz.fuzzy.trigger import Trigger
from tempfuzz.fuzzy.truth import UNKNOWN, TruthValue
from tempfuzz.logging import get_logger, log_entry_exit
from tempfuzz.temporal.container import TemporalContainer

# Set up module-level logger
logger = get_logger(__name__)

TimeFunction = Callable[[datetime], TruthValue]


def current_timestamp() -> datetime:
    """
    Current point in time in the configured timezone.

    Returns naive local time when TEMPFUZZ_TEMPORAL_TIMEZONE is ``local``.
    """
    return datetime.now(get_temporal_settings().tzinfo())


def _unknown(time: datetime) -> TruthValue:
    return UNKNOWN


def _as_index(timestamps: Iterable[datetime]) -> pd.Index:
    if isinstance(timestamps, pd.Index):
        return timestamps
    return pd.Index(list(timestamps))


class TemporalFactory(TemporalContainer):
    """
    Produces TruthValue objects whose state depends on time.
    """

    def __init__(self, time_function: TimeFunction = _unknown):
        """
        Initialize a factory.

        Args:
            time_function: Function mapping a timestamp to a TruthValue.
                Defaults to a function that always returns UNKNOWN.

        Raises:
            NullArgumentError: If time_function is None
            TypeError: If time_function is not callable
        """
        if time_function is None:
            raise NullArgumentError.for_argument("time_function")
        if not callable(time_function):
            raise TypeError(
                f"Time function must be callable, got {type(time_function).__name__}"
            )
        object.__setattr__(self, "_time_function", time_function)

    @property
    def time_function(self) -> TimeFunction:
        """The wrapped time function."""
        return self._time_function

    def get(self, time: datetime) -> TruthValue:
        """
        Produce a TruthValue for a definite time.

        Args:
            time: Point in time

        Returns:
            Result of the time function, unchanged

        Raises:
            NullArgumentError: If time is None or NaT
        """
        if time is None or time is pd.NaT:
            raise NullArgumentError.for_argument("time")
        return self._time_function(time)

    evaluate = get

    def now(self) -> TruthValue:
        """Produce a TruthValue for the current time."""
        return self.get(current_timestamp())

    # --- Composition ---

    def and_(self, other: "TemporalFactory") -> "TemporalFactory":
        """
        New factory combining this and other with fuzzy AND.

        Raises:
            NullArgumentError: If other is None
        """
        if other is None:
            raise NullArgumentError.for_argument("other")
        logger.debug(f"Composing {self!r} AND {other!r}")
        return TemporalFactory(lambda time: self.get(time).and_(other.get(time)))

    def or_(self, other: "TemporalFactory") -> "TemporalFactory":
        """
        New factory combining this and other with fuzzy OR.

        Raises:
            NullArgumentError: If other is None
        """
        if other is None:
            raise NullArgumentError.for_argument("other")
        logger.debug(f"Composing {self!r} OR {other!r}")
        return TemporalFactory(lambda time: self.get(time).or_(other.get(time)))

    def not_(self) -> "TemporalFactory":
        """New factory negating this factory's result."""
        logger.debug(f"Composing NOT {self!r}")
        return TemporalFactory(lambda time: self.get(time).not_())

    def __and__(self, other):
        if not isinstance(other, TemporalFactory):
            return NotImplemented
        return self.and_(other)

    def __or__(self, other):
        if not isinstance(other, TemporalFactory):
            return NotImplemented
        return self.or_(other)

    def __invert__(self):
        return self.not_()

    # --- Sampling ---

    @log_entry_exit()
    def sample(self, timestamps: Iterable[datetime]) -> pd.Series:
        """
        Evaluate the factory at each timestamp.

        Args:
            timestamps: Iterable of timestamps or a pandas DatetimeIndex

        Returns:
            Float Series of truth values named "truth", indexed by timestamp
        """
        index = _as_index(timestamps)
        values = [self.get(time).magnitude for time in index]
        return pd.Series(values, index=index, dtype=float, name="truth")

    def sample_triggers(
        self, timestamps: Iterable[datetime], trigger: Optional[Trigger] = None
    ) -> pd.Series:
        """
        Collapse the factory to booleans at each timestamp.

        Args:
            timestamps: Iterable of timestamps or a pandas DatetimeIndex
            trigger: Trigger to apply; each value's default trigger when None

        Returns:
            Boolean Series named "triggered", indexed by timestamp
        """
        index = _as_index(timestamps)
        if trigger is None:
            flags = [self.get(time).trigger() for time in index]
        else:
            flags = [self.get(time).trigger(trigger) for time in index]
        return pd.Series(flags, index=index, dtype=bool, name="triggered")

    def __setattr__(self, name: str, value) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __repr__(self) -> str:
        name = getattr(self._time_function, "__name__", type(self._time_function).__name__)
        return f"TemporalFactory({name})"
