"""
Container abstractions.

A container is a factory that produces objects whose state is determined by
a parameter. The temporal factories are containers parameterized by time.
"""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Generic, TypeVar

from tempfuzz.fuzzy.truth import TruthValue

O = TypeVar("O")
T = TypeVar("T")


class Container(ABC, Generic[O, T]):
    """
    Factory producing objects of type O in a state determined by T.
    """

    @abstractmethod
    def get(self, parameter: T) -> O:
        """
        Produce an object in the state determined by parameter.

        Args:
            parameter: Determines the state of the produced object

        Returns:
            Object of type O
        """
        pass


class TemporalContainer(Container[TruthValue, datetime]):
    """Container that produces truth values depending on time."""

    pass
