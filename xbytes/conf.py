"""
XBytes configuration constants.

Settings here are picked once per deployment. The overflow policy and the numeric
backend can be selected with environment variables before the first import:

    XBYTES_OVERFLOW=raise|saturate
    XBYTES_LOSSLESS=0|1
"""

# Standard library -----------------------------------------------------------------------------------------------------
import os


# Methods --------------------------------------------------------------------------------------------------------------

def _env_overflow() -> str:
    policy = os.environ.get("XBYTES_OVERFLOW", "raise").strip().lower()
    if policy not in ("raise", "saturate"):
        raise ValueError(f"XBYTES_OVERFLOW must be 'raise' or 'saturate', but got '{policy}'")
    return policy


def _env_lossless() -> bool:
    flag = os.environ.get("XBYTES_LOSSLESS", "").strip().lower()
    return flag in ("1", "true", "yes", "on")


# Classes --------------------------------------------------------------------------------------------------------------

# @formatter:off

class ByteSizeConf:
    """
    Default configuration constants for ByteSize values and their string representation.

    Attributes:
        INT_BITS: Width of the backing unsigned integer. 128 bits hold the Zetta/Yotta
            and Zebi/Yobi units which do not fit into 64 bits.

        MAX_VALUE: Largest canonical value (in bits) a ByteSize can hold.

        OVERFLOW: Overflow policy for conversions and arithmetic:
            - "raise":    results outside [0, MAX_VALUE] raise ValueOverflowError
            - "saturate": results are clamped to [0, MAX_VALUE] with a RuntimeWarning

        LOSSLESS: Numeric backend. False scales values as IEEE doubles, True keeps
            exact fractions.Fraction values all the way down to the rendered digits.

        PRECISION: Default number of decimal places in rendered values.

        THOUSANDS_SEPARATOR: Default digit group separator.

        SPACING: Default number of spaces between the value and the unit.
    """
    INT_BITS = 128
    MAX_VALUE = (1 << INT_BITS) - 1

    OVERFLOW = _env_overflow()
    LOSSLESS = _env_lossless()

    PRECISION = 2
    THOUSANDS_SEPARATOR = ","
    SPACING = 1

# @formatter:on
