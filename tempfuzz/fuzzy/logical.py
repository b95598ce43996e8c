"""
Abstract fuzzy logic algebra.

FuzzyLogical describes the raw-value operations any fuzzy boolean type has
to provide; SignedFuzzyLogical narrows the value domain to floats in the
signed interval [-1, +1].
"""

from abc import ABC, abstractmethod


class FuzzyLogical(ABC):
    """
    The common fuzzy logic algebra.

    The receiver is always the first (left) operand; operations return raw
    values, not new instances.
    """

    @abstractmethod
    def fuzzy_not(self) -> float:
        """
        Logical operation NOT.

        Returns:
            Result of the operation as a raw fuzzy value
        """
        pass

    @abstractmethod
    def fuzzy_and(self, value: float) -> float:
        """
        Logical operation AND.

        Args:
            value: Value of the second (right) operand

        Returns:
            Result of the operation as a raw fuzzy value
        """
        pass

    @abstractmethod
    def fuzzy_or(self, value: float) -> float:
        """
        Logical operation OR.

        Args:
            value: Value of the second (right) operand

        Returns:
            Result of the operation as a raw fuzzy value
        """
        pass

    @abstractmethod
    def trigger_value(self, value: float) -> bool:
        """
        Interpret an arbitrary fuzzy value as a boolean.

        Args:
            value: Fuzzy value to interpret

        Returns:
            True if the value can be interpreted as "true"
        """
        pass


class SignedFuzzyLogical(FuzzyLogical):
    """Fuzzy logic over signed float values in [-1, +1]."""

    MIN_VALUE = -1.0
    MAX_VALUE = 1.0

    @classmethod
    def is_value_valid(cls, value: float) -> bool:
        """
        Check that value lies in [-1, +1]. NaN is never valid.
        """
        return cls.MIN_VALUE <= value <= cls.MAX_VALUE
