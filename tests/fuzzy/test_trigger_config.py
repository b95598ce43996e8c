"""
Tests for declarative trigger configuration.
"""

import pytest
from pydantic import ValidationError

from tempfuzz.errors import ConfigurationError, ErrorCodes
from tempfuzz.fuzzy import Trigger, TriggerConfig, TriggerFactory


class TestTriggerConfig:
    """Tests for the TriggerConfig model."""

    def test_named_kind_needs_no_parameters(self):
        """Named kinds validate on their own."""
        config = TriggerConfig(kind="strong")
        assert config.threshold is None

    def test_threshold_kind_requires_threshold(self):
        """above/at_or_above/below need a threshold."""
        with pytest.raises(ValidationError) as exc_info:
            TriggerConfig(kind="above")
        assert "requires a threshold" in str(exc_info.value)

    def test_in_range_requires_bounds(self):
        """in_range needs min and max."""
        with pytest.raises(ValidationError):
            TriggerConfig(kind="in_range", min=0.1)

    def test_in_range_requires_ordered_bounds(self):
        """min must not exceed max."""
        with pytest.raises(ValidationError) as exc_info:
            TriggerConfig(kind="in_range", min=0.5, max=0.1)
        assert "min <= max" in str(exc_info.value)

    def test_unknown_kind_rejected(self):
        """Only the supported kinds validate."""
        with pytest.raises(ValidationError):
            TriggerConfig(kind="sometimes")


class TestTriggerFactory:
    """Tests for building triggers from configuration."""

    @pytest.mark.parametrize(
        "kind,expected",
        [
            ("exact_true", Trigger.EXACT_TRUE),
            ("positive", Trigger.POSITIVE),
            ("non_negative", Trigger.NON_NEGATIVE),
            ("majority", Trigger.MAJORITY),
            ("strong", Trigger.STRONG),
            ("always_true", Trigger.ALWAYS_TRUE),
            ("always_false", Trigger.ALWAYS_FALSE),
        ],
    )
    def test_named_kinds_return_constants(self, kind, expected):
        """Named kinds map onto the shared constants."""
        assert TriggerFactory.create(kind) is expected

    def test_kind_is_case_insensitive(self):
        """Kinds are matched case-insensitively."""
        assert TriggerFactory.create("STRONG") is Trigger.STRONG

    def test_threshold_kinds(self):
        """Threshold kinds honour their comparison."""
        above = TriggerFactory.create("above", threshold=0.5)
        at_or_above = TriggerFactory.create("at_or_above", threshold=0.5)
        below = TriggerFactory.create("below", threshold=0.5)

        assert not above(0.5)
        assert at_or_above(0.5)
        assert below(0.49)
        assert not below(0.5)

    def test_in_range_kind(self):
        """in_range is inclusive on both ends."""
        trigger = TriggerFactory.create("in_range", min=-0.1, max=0.1)
        assert trigger(-0.1)
        assert trigger(0.1)
        assert not trigger(0.2)

    def test_from_config(self):
        """A validated model can be turned into a trigger."""
        trigger = TriggerFactory.from_config(TriggerConfig(kind="below", threshold=0.0))
        assert trigger(-0.3)
        assert trigger.name == "below(0.0)"

    def test_unknown_kind_raises_configuration_error(self):
        """Unknown kinds carry the supported list."""
        with pytest.raises(ConfigurationError) as exc_info:
            TriggerFactory.create("sometimes")
        error = exc_info.value
        assert error.error_code == ErrorCodes.TRIGGER_UNKNOWN_TYPE
        assert "in_range" in error.details["supported_types"]

    def test_missing_threshold_raises_configuration_error(self):
        """Invalid parameters surface as ConfigurationError."""
        with pytest.raises(ConfigurationError) as exc_info:
            TriggerFactory.create("above")
        assert exc_info.value.error_code == ErrorCodes.TRIGGER_MISSING_THRESHOLD
        assert isinstance(exc_info.value.__cause__, ValidationError)

    def test_invalid_range_raises_configuration_error(self):
        """Reversed bounds surface as ConfigurationError."""
        with pytest.raises(ConfigurationError) as exc_info:
            TriggerFactory.create("in_range", min=0.9, max=0.1)
        assert exc_info.value.error_code == ErrorCodes.TRIGGER_INVALID_RANGE

    def test_non_numeric_threshold_raises_invalid_parameter(self):
        """A threshold that is not a number is not reported as missing."""
        with pytest.raises(ConfigurationError) as exc_info:
            TriggerFactory.create("above", threshold="abc")
        assert exc_info.value.error_code == ErrorCodes.TRIGGER_INVALID_PARAMETER
        assert isinstance(exc_info.value.__cause__, ValidationError)

    @pytest.mark.parametrize(
        "kind, parameters",
        [
            ("positive", {"threshold": 0.9}),
            ("above", {"threshold": 0.5, "max": 1.0}),
            ("in_range", {"min": 0.0, "max": 1.0, "threshold": 0.5}),
            ("below", {"limit": 0.2}),
        ],
    )
    def test_unexpected_parameters_raise(self, kind, parameters):
        """Parameters a kind does not use are rejected, not ignored."""
        with pytest.raises(ConfigurationError) as exc_info:
            TriggerFactory.create(kind, **parameters)
        assert exc_info.value.error_code == ErrorCodes.TRIGGER_INVALID_PARAMETER

    def test_config_model_rejects_unexpected_parameters(self):
        """The model itself refuses unknown fields and unused parameters."""
        with pytest.raises(ValidationError):
            TriggerConfig(kind="strong", threshold=0.9)
        with pytest.raises(ValidationError):
            TriggerConfig(kind="above", threshold=0.5, limit=0.2)

    def test_supported_types(self):
        """All eleven kinds are listed."""
        supported = TriggerFactory.get_supported_types()
        assert len(supported) == 11
        assert {"strong", "above", "in_range"} <= set(supported)
