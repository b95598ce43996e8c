"""
Central registry of error codes for the tempfuzz package.

Error codes follow the pattern: CATEGORY-ErrorName

Categories:
- VALUE: Truth value range errors
- ARGUMENT: Missing or malformed call arguments
- TRIGGER: Trigger construction errors
- CONFIG: Settings and configuration errors

Usage:
    from tempfuzz.errors.error_codes import ErrorCodes

    raise RangeError(
        value=1.5,
        error_code=ErrorCodes.VALUE_OUT_OF_RANGE,
    )
"""


class ErrorCodes:
    """Central registry of error codes for consistent error handling."""

    # Truth value errors
    VALUE_OUT_OF_RANGE = "VALUE-OutOfRange"
    VALUE_OPERAND_OUT_OF_RANGE = "VALUE-OperandOutOfRange"

    # Argument errors
    ARGUMENT_MISSING = "ARGUMENT-Missing"

    # Trigger errors
    TRIGGER_UNKNOWN_TYPE = "TRIGGER-UnknownType"
    TRIGGER_MISSING_THRESHOLD = "TRIGGER-MissingThreshold"
    TRIGGER_INVALID_RANGE = "TRIGGER-InvalidRange"
    TRIGGER_INVALID_PARAMETER = "TRIGGER-InvalidParameter"

    # Configuration errors
    CONFIG_VALIDATION_FAILED = "CONFIG-ValidationFailed"
