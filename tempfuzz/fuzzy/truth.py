"""
Signed fuzzy truth values.

A TruthValue is an immutable scalar in [-1, +1]: negative values are graded
falsity, positive values graded truth, and zero is "unknown". Values are
rounded to two decimal places on construction and carry a default trigger
used to collapse them back into a plain boolean.

Algebra:
- NOT a  = -a (the unknown value is a fixed point)
- a AND b = -|a * b| if a < 0 or b < 0, else |a * b|
- a OR b  = max(a, b) if a != 0 and b != 0, else a + b
"""

import math
import numbers
from typing import Any, Optional, Union

from tempfuzz.errors import ErrorCodes, NullArgumentError, RangeError
from tempfuzz.fuzzy.logical import SignedFuzzyLogical
from tempfuzz.fuzzy.trigger import Predicate, Trigger
from tempfuzz.logging import get_logger

# Set up module-level logger
logger = get_logger(__name__)

# Values are kept to the nearest 1/PRECISION
PRECISION = 100.0

_MISSING = object()

Operand = Union["TruthValue", float]
TriggerLike = Union[Trigger, Predicate]


def _round(value: float) -> float:
    """Round half up to the nearest 1/PRECISION."""
    return math.floor(value * PRECISION + 0.5) / PRECISION


def _as_real(value: Any, argument: str) -> float:
    if value is None:
        raise NullArgumentError.for_argument(argument)
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise TypeError(f"'{argument}' must be a real number, got {type(value).__name__}")
    return float(value)


class TruthValue(SignedFuzzyLogical):
    """
    Immutable fuzzy boolean with a signed truth value in [-1, +1].

    Two truth values are equal when their magnitudes are equal; the trigger
    is not part of equality. Use ``TruthValue.of`` to get the shared TRUE,
    FALSE and UNKNOWN instances for the values +1, -1 and 0.
    """

    TRUE: "TruthValue"
    FALSE: "TruthValue"
    UNKNOWN: "TruthValue"

    def __init__(self, magnitude: float, trigger: TriggerLike = Trigger.EXACT_TRUE):
        """
        Create a truth value.

        Args:
            magnitude: Truth value in [-1, +1], rounded to two decimals
            trigger: Default trigger, EXACT_TRUE unless given

        Raises:
            RangeError: If magnitude is outside [-1, +1]
            NullArgumentError: If magnitude or trigger is None
        """
        value = _as_real(magnitude, "magnitude")
        if not self.is_value_valid(value):
            logger.error(f"Truth value out of range: {magnitude}")
            raise RangeError.for_value(magnitude)

        object.__setattr__(self, "_truth", _round(value))
        object.__setattr__(self, "_trigger", Trigger.wrap(trigger))

    @classmethod
    def of(cls, magnitude: float, trigger: Optional[TriggerLike] = None) -> "TruthValue":
        """
        Factory method returning shared instances for the canonical values.

        Without a trigger, exactly +1.0, -1.0 and 0.0 map to TRUE, FALSE and
        UNKNOWN. With an explicit trigger a new instance is always created so
        the trigger is kept.

        Args:
            magnitude: Truth value in [-1, +1]
            trigger: Optional default trigger for the new instance

        Returns:
            TruthValue instance

        Raises:
            NullArgumentError: If magnitude is None
            TypeError: If magnitude is not a real number
        """
        if trigger is not None:
            return cls(magnitude, trigger)
        magnitude = _as_real(magnitude, "magnitude")
        if magnitude == 1.0:
            return TRUE
        if magnitude == -1.0:
            return FALSE
        if magnitude == 0.0:
            return UNKNOWN
        return cls(magnitude)

    @classmethod
    def from_boolean(cls, value: bool) -> "TruthValue":
        """Convert a boolean to TRUE or FALSE."""
        return TRUE if value else FALSE

    @property
    def magnitude(self) -> float:
        """Current truth value."""
        return self._truth

    truth = magnitude

    @property
    def trigger_function(self) -> Trigger:
        """Default trigger of this value."""
        return self._trigger

    def with_trigger(self, trigger: TriggerLike) -> "TruthValue":
        """
        Create a new truth value with the same magnitude and another trigger.

        Raises:
            NullArgumentError: If trigger is None
        """
        return TruthValue(self._truth, trigger)

    # --- Raw algebra ---

    def fuzzy_not(self) -> float:
        """not a = -a, with 0 mapped to 0."""
        return 0.0 if self._truth == 0.0 else -self._truth

    def fuzzy_and(self, value: float) -> float:
        """a AND b = -|a * b| if a < 0 or b < 0, else |a * b|."""
        value = self._check_operand(value)
        product = _round(abs(self._truth * value))
        return -product if (self._truth < 0 or value < 0) else product

    def fuzzy_or(self, value: float) -> float:
        """a OR b = max(a, b) if both are non-zero, else a + b."""
        value = self._check_operand(value)
        if self._truth != 0 and value != 0:
            return max(self._truth, value)
        return self._truth + value

    def trigger_value(self, value: float) -> bool:
        """
        Apply the default trigger to an external value.

        Values outside [-1, +1] are never "true".

        Raises:
            NullArgumentError: If value is None
            TypeError: If value is not a real number
        """
        value = _as_real(value, "value")
        if not self.is_value_valid(value):
            logger.debug(f"Trigger value out of range, returning False: {value}")
            return False
        return self._trigger.test(value)

    def _check_operand(self, value: Any) -> float:
        value = _as_real(value, "other")
        if not self.is_value_valid(value):
            logger.error(f"Operand out of range: {value}")
            raise RangeError.for_value(
                value, argument="other", error_code=ErrorCodes.VALUE_OPERAND_OUT_OF_RANGE
            )
        return value

    # --- Instance algebra ---

    def not_(self) -> "TruthValue":
        """Negated truth value carrying the same trigger; UNKNOWN stays UNKNOWN."""
        if self._truth == 0.0:
            return UNKNOWN
        return TruthValue.of(-self._truth, self._trigger)

    def and_(self, other: Operand) -> "TruthValue":
        """
        Fuzzy AND with another truth value or a raw float.

        Any negative operand makes the result negative, so FALSE AND FALSE
        is FALSE rather than the real-number product.

        Raises:
            RangeError: If a raw operand is outside [-1, +1]
            NullArgumentError: If other is None
        """
        return TruthValue.of(self.fuzzy_and(self._operand_value(other)), self._trigger)

    def or_(self, other: Operand) -> "TruthValue":
        """
        Fuzzy OR with another truth value or a raw float.

        Raises:
            RangeError: If a raw operand is outside [-1, +1]
            NullArgumentError: If other is None
        """
        return TruthValue.of(self.fuzzy_or(self._operand_value(other)), self._trigger)

    @staticmethod
    def _operand_value(other: Operand) -> Any:
        if isinstance(other, TruthValue):
            return other._truth
        return other

    # --- Triggers ---

    def trigger(self, arg: Any = _MISSING) -> bool:
        """
        Collapse to a plain boolean.

        - ``trigger()`` applies the default trigger to this value
        - ``trigger(Trigger)`` applies the given trigger to this value
        - ``trigger(float)`` applies the default trigger to the given value,
          returning False when it lies outside [-1, +1]

        Raises:
            NullArgumentError: If arg is None
            TypeError: If arg is neither a trigger nor a real number
        """
        if arg is _MISSING:
            return self._trigger.test(self._truth)
        if arg is None:
            raise NullArgumentError.for_argument("trigger")
        if isinstance(arg, Trigger):
            return arg.test(self._truth)
        if isinstance(arg, numbers.Real) and not isinstance(arg, bool):
            return self.trigger_value(float(arg))
        if callable(arg):
            return bool(arg(self._truth))
        raise TypeError(f"Expected a Trigger or a real number, got {type(arg).__name__}")

    def is_positive(self) -> bool:
        """Check if value is positive (> 0)."""
        return self._truth > 0

    def is_negative(self) -> bool:
        """Check if value is negative (< 0)."""
        return self._truth < 0

    def is_unknown(self) -> bool:
        """Check if value is zero (unknown)."""
        return self._truth == 0

    # --- Python protocol ---

    def __invert__(self) -> "TruthValue":
        return self.not_()

    def __and__(self, other: Any) -> "TruthValue":
        if not isinstance(other, (TruthValue, numbers.Real)) or isinstance(other, bool):
            return NotImplemented
        return self.and_(other)

    def __or__(self, other: Any) -> "TruthValue":
        if not isinstance(other, (TruthValue, numbers.Real)) or isinstance(other, bool):
            return NotImplemented
        return self.or_(other)

    def __bool__(self) -> bool:
        return self.trigger()

    def __float__(self) -> float:
        return self._truth

    def __eq__(self, other: Any) -> bool:
        if self is other:
            return True
        if not isinstance(other, TruthValue):
            return NotImplemented
        return self._truth == other._truth

    def __hash__(self) -> int:
        return hash(self._truth)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __repr__(self) -> str:
        return f"TruthValue[{self._truth:.2f}]"


TRUE = TruthValue(1.0)
FALSE = TruthValue(-1.0)
UNKNOWN = TruthValue(0.0)

TruthValue.TRUE = TRUE
TruthValue.FALSE = FALSE
TruthValue.UNKNOWN = UNKNOWN
