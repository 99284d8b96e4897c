"""
XBytes error taxonomy.

Every parsing or conversion failure is reported as a ParseError with a ParseErrorKind attached,
overflow failures additionally behave as OverflowError.
"""

# Standard library -----------------------------------------------------------------------------------------------------
from enum import StrEnum, unique

# Local ----------------------------------------------------------------------------------------------------------------
from .formatters import fmt_type


# Classes --------------------------------------------------------------------------------------------------------------

# @formatter:off
@unique
class ParseErrorKind(StrEnum):
    """
    Kinds of failures raised while parsing or converting sizes.

    The member value is the human-readable message.
    """
    EMPTY_INPUT                = "empty input"
    MISSING_VALUE              = "missing value"
    MISSING_UNIT               = "missing unit"
    INVALID_VALUE              = "invalid value"
    INVALID_PREFIX             = "invalid prefix"
    INVALID_PREFIX_CASE_FORMAT = "invalid case: expected format like 'k', 'K', 'Ki', 'M', 'Mi'"
    INVALID_UNIT_CASE_FORMAT   = "invalid case: expected format like 'kB', 'Kb', 'KiB', 'Mb', 'MiB'"
    INVALID_SIZE_VARIANT       = "invalid size variant"
    INVALID_THOUSANDS_FORMAT   = "invalid thousands format"
    VALUE_OVERFLOW             = "value overflow"
# @formatter:on


class ParseError(ValueError):
    """
    Typed parse or conversion failure.

    Attributes:
        kind: The ParseErrorKind of this failure.
        detail: Optional fragment naming the offending input.

    Examples:
        >>> err = ParseError(ParseErrorKind.MISSING_UNIT, "'10'")
        >>> str(err)
        "missing unit: '10'"
    """

    def __init__(self, kind: ParseErrorKind, detail: str | None = None):
        if not isinstance(kind, ParseErrorKind):
            raise TypeError(f"kind must be ParseErrorKind, but got {fmt_type(kind)}")
        self.kind = kind
        self.detail = detail
        super().__init__(str(kind) if not detail else f"{kind}: {detail}")


class ValueOverflowError(ParseError, OverflowError):
    """Value does not fit into the backing integer."""

    def __init__(self, detail: str | None = None):
        super().__init__(ParseErrorKind.VALUE_OVERFLOW, detail)
