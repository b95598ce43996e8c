"""
Trigger definitions for fuzzy logic.

A trigger is the bridge between a fuzzy truth value and traditional boolean
logic: it decides when a value in [-1, +1] can be interpreted as "true".
Triggers know nothing about the valid range; range checking is done by the
caller (TruthValue) before a trigger is invoked.
"""

from typing import Callable, Optional, Union

import numpy as np
import pandas as pd

from tempfuzz.errors import NullArgumentError
from tempfuzz.logging import get_logger

# Set up module-level logger
logger = get_logger(__name__)

Predicate = Callable[[float], bool]


class Trigger:
    """
    Named predicate over a scalar truth value.

    Instances are immutable and safe to share. A trigger is callable, so
    ``Trigger.STRONG(0.75)`` and ``Trigger.STRONG.test(0.75)`` are the same.

    Named constants:
    - EXACT_TRUE:   v == 1.0
    - POSITIVE:     v > 0
    - NON_NEGATIVE: v >= 0
    - MAJORITY:     v > 0.5
    - STRONG:       v >= 0.7
    - ALWAYS_TRUE:  always True
    - ALWAYS_FALSE: always False
    """

    __slots__ = ("_predicate", "_name")

    EXACT_TRUE: "Trigger"
    POSITIVE: "Trigger"
    NON_NEGATIVE: "Trigger"
    MAJORITY: "Trigger"
    STRONG: "Trigger"
    ALWAYS_TRUE: "Trigger"
    ALWAYS_FALSE: "Trigger"

    def __init__(self, predicate: Predicate, name: Optional[str] = None):
        """
        Initialize a trigger from a predicate.

        Args:
            predicate: Function mapping a float to a boolean
            name: Optional display name, defaults to the predicate's name

        Raises:
            NullArgumentError: If predicate is None
            TypeError: If predicate is not callable
        """
        if predicate is None:
            raise NullArgumentError.for_argument("predicate")
        if not callable(predicate):
            raise TypeError(f"Trigger predicate must be callable, got {type(predicate)}")

        object.__setattr__(self, "_predicate", predicate)
        object.__setattr__(self, "_name", name or getattr(predicate, "__name__", "custom"))

    @classmethod
    def wrap(cls, trigger: Union["Trigger", Predicate]) -> "Trigger":
        """
        Return ``trigger`` unchanged if it already is a Trigger, else wrap it.

        Raises:
            NullArgumentError: If trigger is None
        """
        if trigger is None:
            raise NullArgumentError.for_argument("trigger")
        if isinstance(trigger, cls):
            return trigger
        return cls(trigger)

    @property
    def name(self) -> str:
        """Display name of the trigger."""
        return self._name

    def test(self, value: float) -> bool:
        """
        Evaluate the trigger for a single value.

        Args:
            value: Truth value to test

        Returns:
            True if the value counts as boolean "true"
        """
        return bool(self._predicate(value))

    __call__ = test

    def evaluate(
        self, x: Union[float, pd.Series, np.ndarray]
    ) -> Union[bool, pd.Series, np.ndarray]:
        """
        Evaluate the trigger for scalar or vectorized input.

        Args:
            x: Value(s) to test

        Returns:
            Boolean, or boolean Series/array of the same shape as the input
        """
        # For scalar inputs
        if isinstance(x, (int, float)):
            return self.test(x)

        # For pandas Series
        elif isinstance(x, pd.Series):
            logger.debug(f"Evaluating trigger {self._name} for Series of length {len(x)}")
            return x.apply(self.test).astype(bool)

        # For numpy arrays
        elif isinstance(x, np.ndarray):
            logger.debug(f"Evaluating trigger {self._name} for array of shape {x.shape}")
            if x.size == 0:
                return np.zeros(x.shape, dtype=bool)
            return np.vectorize(self.test, otypes=[bool])(x)

        else:
            logger.error(f"Unsupported input type for trigger: {type(x)}")
            raise TypeError(
                f"Unsupported input type: {type(x)}. Expected float, pd.Series, or np.ndarray."
            )

    @staticmethod
    def above_threshold(threshold: float) -> "Trigger":
        """Trigger that returns True when value > threshold."""
        return Trigger(lambda v: v > threshold, f"above({threshold})")

    @staticmethod
    def at_or_above_threshold(threshold: float) -> "Trigger":
        """Trigger that returns True when value >= threshold."""
        return Trigger(lambda v: v >= threshold, f"at_or_above({threshold})")

    @staticmethod
    def below_threshold(threshold: float) -> "Trigger":
        """Trigger that returns True when value < threshold."""
        return Trigger(lambda v: v < threshold, f"below({threshold})")

    @staticmethod
    def in_range(minimum: float, maximum: float) -> "Trigger":
        """Trigger that returns True when value is in [minimum, maximum]."""
        return Trigger(
            lambda v: minimum <= v <= maximum, f"in_range({minimum}, {maximum})"
        )

    def __setattr__(self, name: str, value) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __repr__(self) -> str:
        return f"Trigger({self._name})"


Trigger.EXACT_TRUE = Trigger(lambda v: v == 1.0, "EXACT_TRUE")
Trigger.POSITIVE = Trigger(lambda v: v > 0, "POSITIVE")
Trigger.NON_NEGATIVE = Trigger(lambda v: v >= 0, "NON_NEGATIVE")
Trigger.MAJORITY = Trigger(lambda v: v > 0.5, "MAJORITY")
Trigger.STRONG = Trigger(lambda v: v >= 0.7, "STRONG")
Trigger.ALWAYS_TRUE = Trigger(lambda v: True, "ALWAYS_TRUE")
Trigger.ALWAYS_FALSE = Trigger(lambda v: False, "ALWAYS_FALSE")
