"""
Option sets for unit selection and string representation.

Both are enum.Flag sets: combine with |, test with in, the empty set is DEFAULT.
"""

# Standard library -----------------------------------------------------------------------------------------------------
from enum import Flag, auto


# Classes --------------------------------------------------------------------------------------------------------------

class Mode(Flag):
    """
    Automatic unit selection mode.

    The empty set selects binary-prefixed bytes: 1 B, 2.13 KiB, 1.50 MiB.

    Attributes:
        BITS: Select bit units instead of byte units.
        DECIMAL: Select decimal prefixes (K, M, G) instead of binary prefixes (Ki, Mi, Gi).
        NO_PREFIX: Never scale, render raw bits or bytes.
    """
    DEFAULT = 0
    BITS = auto()
    DECIMAL = auto()
    NO_PREFIX = auto()


# @formatter:off
class Format(Flag):
    """
    Style flags for rendering a size, each independently togglable.

    Attributes:
        INITIALS:                 1 B, 2.13 KB, 1024.43 MB (no binary "i")
        CONDENSED:                1 B, 2.13 K, 1024.43 M (single character)
        LONG:                     1 Byte, 2.13 KiloBytes, 1024.43 MebiBytes
        NO_PLURAL:                1 Byte, 2.13 KiloByte (requires LONG)
        FORCE_PLURAL:             1 Bytes, 2.13 KiloBytes (requires LONG)
        NO_MULTI_CAPS:            1 Byte, 2.13 Kilobytes (requires LONG)
        LOWER_CAPS:               1 b, 2.13 kb, 1024.43 mib
        UPPER_CAPS:               1 B, 2.13 KB, 1024.43 MIB
        NO_FRACTION:              1 B, 2 KB, 1024 MiB
        FORCE_FRACTION:           1.00 B, 2.13 KB, 1024.43 MiB
        SHOW_THOUSANDS_SEPARATOR: 1 B, 2.13 KB, 1,024.43 MiB
        NO_SPACE:                 1B, 2.13KB, 1024.43MiB
    """
    DEFAULT                  = 0
    INITIALS                 = auto()
    CONDENSED                = auto()
    LONG                     = auto()
    NO_PLURAL                = auto()
    FORCE_PLURAL             = auto()
    NO_MULTI_CAPS            = auto()
    LOWER_CAPS               = auto()
    UPPER_CAPS               = auto()
    NO_FRACTION              = auto()
    FORCE_FRACTION           = auto()
    SHOW_THOUSANDS_SEPARATOR = auto()
    NO_SPACE                 = auto()
# @formatter:on


# Concern groups: flags in one group configure the same aspect of the output
FORMAT_GROUPS = (
    Format.INITIALS | Format.CONDENSED | Format.LONG,
    Format.NO_PLURAL | Format.FORCE_PLURAL,
    Format.NO_MULTI_CAPS,
    Format.LOWER_CAPS | Format.UPPER_CAPS,
    Format.NO_FRACTION | Format.FORCE_FRACTION,
    Format.SHOW_THOUSANDS_SEPARATOR,
    Format.NO_SPACE,
)


# Module Sanity Checks -------------------------------------------------------------------------------------------------

# Every format flag belongs to exactly one concern group.
_grouped = Format.DEFAULT
for _group in FORMAT_GROUPS:
    if _grouped & _group:
        raise AssertionError("Configuration Error: format concern groups must not overlap.")
    _grouped |= _group

if _grouped != ~Format.DEFAULT:
    raise AssertionError("Configuration Error: every Format flag must belong to a concern group.")
