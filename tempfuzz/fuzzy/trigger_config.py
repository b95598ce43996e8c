"""
Configuration models and factory for triggers.

This module lets triggers be described declaratively (for example from
application settings) and turned into Trigger instances.
"""

from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from tempfuzz.errors import ConfigurationError, ErrorCodes
from tempfuzz.fuzzy.trigger import Trigger
from tempfuzz.logging import get_logger

# Set up module-level logger
logger = get_logger(__name__)

TriggerKind = Literal[
    "exact_true",
    "positive",
    "non_negative",
    "majority",
    "strong",
    "always_true",
    "always_false",
    "above",
    "at_or_above",
    "below",
    "in_range",
]

_NAMED_TRIGGERS = {
    "exact_true": Trigger.EXACT_TRUE,
    "positive": Trigger.POSITIVE,
    "non_negative": Trigger.NON_NEGATIVE,
    "majority": Trigger.MAJORITY,
    "strong": Trigger.STRONG,
    "always_true": Trigger.ALWAYS_TRUE,
    "always_false": Trigger.ALWAYS_FALSE,
}

_THRESHOLD_TRIGGERS = {
    "above": Trigger.above_threshold,
    "at_or_above": Trigger.at_or_above_threshold,
    "below": Trigger.below_threshold,
}

_PARAMETER_NAMES = ("threshold", "min", "max")


def _allowed_parameters(kind: str) -> set[str]:
    """Parameter names accepted by a trigger kind."""
    if kind in _THRESHOLD_TRIGGERS:
        return {"threshold"}
    if kind == "in_range":
        return {"min", "max"}
    return set()


def _validation_error_code(kind: str, error: ValidationError) -> str:
    """Pick the error code for a failed TriggerConfig validation."""
    # value_error only comes from validate_parameters
    if any(item["type"] != "value_error" for item in error.errors()):
        return ErrorCodes.TRIGGER_INVALID_PARAMETER
    if kind == "in_range":
        return ErrorCodes.TRIGGER_INVALID_RANGE
    return ErrorCodes.TRIGGER_MISSING_THRESHOLD


class TriggerConfig(BaseModel):
    """
    Declarative description of a trigger.

    Named kinds take no parameters. ``above``, ``at_or_above`` and ``below``
    require ``threshold``; ``in_range`` requires ``min`` and ``max`` with
    ``min <= max``.
    """

    model_config = ConfigDict(extra="forbid")

    kind: TriggerKind
    threshold: Optional[float] = Field(
        default=None, description="Threshold for above/at_or_above/below triggers"
    )
    min: Optional[float] = Field(default=None, description="Lower bound for in_range")
    max: Optional[float] = Field(default=None, description="Upper bound for in_range")

    @model_validator(mode="after")
    def validate_parameters(self) -> "TriggerConfig":
        """Check that the parameters required by ``kind`` are present."""
        given = {name for name in _PARAMETER_NAMES if getattr(self, name) is not None}
        unexpected = given - _allowed_parameters(self.kind)
        if unexpected:
            raise ValueError(
                f"Trigger kind '{self.kind}' does not take {sorted(unexpected)}"
            )

        if self.kind in _THRESHOLD_TRIGGERS and self.threshold is None:
            raise ValueError(f"Trigger kind '{self.kind}' requires a threshold")

        if self.kind == "in_range":
            if self.min is None or self.max is None:
                raise ValueError("Trigger kind 'in_range' requires min and max")
            if self.min > self.max:
                raise ValueError(
                    f"Trigger range must satisfy min <= max, got [{self.min}, {self.max}]"
                )

        return self


class TriggerFactory:
    """
    Factory class for creating Trigger instances from configuration.
    """

    @staticmethod
    def create(kind: str, **parameters: float) -> Trigger:
        """
        Create a trigger from its kind and parameters.

        Args:
            kind: Trigger kind (case-insensitive), see get_supported_types()
            **parameters: threshold, or min and max, as required by the kind

        Returns:
            Trigger instance

        Raises:
            ConfigurationError: If the kind is unknown or parameters are invalid
        """
        kind_lower = kind.lower()

        if kind_lower not in TriggerFactory.get_supported_types():
            logger.error(f"Unknown trigger type: {kind}")
            raise ConfigurationError(
                message=f"Unknown trigger type: {kind}",
                error_code=ErrorCodes.TRIGGER_UNKNOWN_TYPE,
                details={
                    "type": kind,
                    "supported_types": TriggerFactory.get_supported_types(),
                },
            )

        unexpected = sorted(set(parameters) - _allowed_parameters(kind_lower))
        if unexpected:
            logger.error(f"Unexpected parameters for trigger '{kind}': {unexpected}")
            raise ConfigurationError(
                message=f"Trigger type {kind} does not take parameters {unexpected}",
                error_code=ErrorCodes.TRIGGER_INVALID_PARAMETER,
                context={"type": kind},
                details={
                    "parameters": parameters,
                    "allowed": sorted(_allowed_parameters(kind_lower)),
                },
            )

        try:
            config = TriggerConfig(kind=kind_lower, **parameters)
        except ValidationError as e:
            logger.error(f"Invalid parameters for trigger '{kind}': {parameters}")
            error_code = _validation_error_code(kind_lower, e)
            raise ConfigurationError(
                message=f"Invalid parameters for trigger type: {kind}",
                error_code=error_code,
                context={"type": kind},
                details={"parameters": parameters, "errors": e.errors()},
            ) from e

        return TriggerFactory.from_config(config)

    @staticmethod
    def from_config(config: TriggerConfig) -> Trigger:
        """
        Build a trigger from a validated TriggerConfig.

        Args:
            config: Trigger configuration

        Returns:
            Trigger instance
        """
        if config.kind in _NAMED_TRIGGERS:
            return _NAMED_TRIGGERS[config.kind]

        if config.kind in _THRESHOLD_TRIGGERS:
            trigger = _THRESHOLD_TRIGGERS[config.kind](config.threshold)
        else:
            trigger = Trigger.in_range(config.min, config.max)

        logger.debug(f"Created trigger {trigger.name} from config")
        return trigger

    @staticmethod
    def get_supported_types() -> list[str]:
        """
        Get list of supported trigger kinds.

        Returns:
            List of supported trigger kind names
        """
        return list(_NAMED_TRIGGERS) + list(_THRESHOLD_TRIGGERS) + ["in_range"]
