"""
Parse "<number> <unit>" strings into ByteSize values.

Grammar:
    [digits with optional thousands separators][.digits][whitespace]<unit>

The number ends at the first letter or whitespace character. Thousands separators are
only recognized before the decimal point and must split the integer part into a leading
group of 1 to 3 digits followed by groups of exactly 3 digits.

Examples:
    >>> from xbytes.sizes import MEBI_BYTE
    >>> parse("1.5 MiB") == ByteSize.of(1.5, MEBI_BYTE)
    True
    >>> parse("10kB").bytes
    10000
    >>> parse("1,024 KiB") == parse("1 MiB")
    True
"""

# Standard library -----------------------------------------------------------------------------------------------------
import math
import re
from fractions import Fraction

# Local ----------------------------------------------------------------------------------------------------------------
from .bytesize import ByteSize
from .conf import ByteSizeConf
from .errors import ParseError, ParseErrorKind
from .formatters import fmt_type, fmt_value
from .unit import Unit

_NUMBER = re.compile(r"\d+(?:\.\d*)?|\.\d+", re.ASCII)


# Methods --------------------------------------------------------------------------------------------------------------

def parse(text: str, thousands_separator: str = ",") -> ByteSize:
    """
    Parse a size string like "1.5 MiB", "10kB", "58,375.28 EiB" or "3 gigabits".

    Args:
        text: Input string, surrounding whitespace is ignored.
        thousands_separator: Single character grouping the integer digits.

    Returns:
        ByteSize, truncated to whole bits.

    Raises:
        TypeError: If text or thousands_separator is not a str.
        ValueError: If thousands_separator is not a single punctuation character.
        ParseError: With kind EMPTY_INPUT, MISSING_VALUE, MISSING_UNIT, INVALID_VALUE,
            INVALID_THOUSANDS_FORMAT or any Unit.from_str() kind.
        ValueOverflowError: If the size exceeds MAX_VALUE and the overflow policy is "raise".
    """
    size, _ = parse_with_unit(text, thousands_separator)
    return size


def parse_with_unit(text: str, thousands_separator: str = ",") -> tuple[ByteSize, Unit]:
    """
    Parse a size string and return the size together with the unit it was written in.

    See parse() for the grammar and raised errors.

    Examples:
        >>> size, unit = parse_with_unit("2 Gib")
        >>> str(unit), size.bits
        ('Gib', 2147483648)
    """
    if not isinstance(text, str):
        raise TypeError(f"text must be str, but got {fmt_type(text)}")
    _validate_separator(thousands_separator)

    stripped = text.strip()
    if not stripped:
        raise ParseError(ParseErrorKind.EMPTY_INPUT)

    boundary = next((i for i, char in enumerate(stripped) if char.isalpha() or char.isspace()), None)
    if boundary is None:
        raise ParseError(ParseErrorKind.MISSING_UNIT, fmt_value(stripped))
    if boundary == 0:
        raise ParseError(ParseErrorKind.MISSING_VALUE, fmt_value(stripped))

    magnitude = _parse_number(stripped[:boundary], thousands_separator)
    unit = Unit.from_str(stripped[boundary:].lstrip())
    return ByteSize.of(magnitude, unit), unit


def _parse_number(text: str, separator: str) -> float | Fraction:
    """Numeric part of a size string with thousands separators removed."""
    integer, dot, fraction = text.partition(".")

    if separator in integer:
        grouping = re.compile(rf"\d{{1,3}}(?:{re.escape(separator)}\d{{3}})+", re.ASCII)
        if not grouping.fullmatch(integer):
            raise ParseError(ParseErrorKind.INVALID_THOUSANDS_FORMAT, fmt_value(text))
        integer = integer.replace(separator, "")

    digits = f"{integer}{dot}{fraction}"
    if not _NUMBER.fullmatch(digits):
        raise ParseError(ParseErrorKind.INVALID_VALUE, fmt_value(text))

    if ByteSizeConf.LOSSLESS:
        return Fraction(digits)

    value = float(digits)
    if not math.isfinite(value):
        # past the float range, ByteSize.of() applies the overflow policy to the exact value
        return Fraction(digits)
    return value


def _validate_separator(separator: str):
    if not isinstance(separator, str):
        raise TypeError(f"thousands_separator must be str, but got {fmt_type(separator)}")
    if len(separator) != 1 or separator.isalnum() or separator.isspace() or separator == ".":
        raise ValueError(f"thousands_separator must be a single punctuation character other than '.', "
                         f"but got {fmt_value(separator)}")
