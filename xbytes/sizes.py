"""
Named unit constants and grouping tables.

Each grouping tuple is strictly increasing by effective value in declared order.

Examples:
    >>> from xbytes.sizes import KIBI_BYTE, BYTES
    >>> str(KIBI_BYTE)
    'KiB'
    >>> [str(unit) for unit in BYTES[:3]]
    ['B', 'KB', 'KiB']
"""

# Third-party ----------------------------------------------------------------------------------------------------------
from frozendict import frozendict

# Local ----------------------------------------------------------------------------------------------------------------
from .prefix import UnitPrefix
from .unit import SizeVariant, Unit

_b = SizeVariant.BIT
_B = SizeVariant.BYTE

# @formatter:off

# No prefix ------------------------------------------------------------------------------------------------------------
BIT  = Unit(None, _b)
BYTE = Unit(None, _B)

# Decimal --------------------------------------------------------------------------------------------------------------
KILO_BIT   = Unit(UnitPrefix.KILO,  _b);   KILO_BYTE  = Unit(UnitPrefix.KILO,  _B)
MEGA_BIT   = Unit(UnitPrefix.MEGA,  _b);   MEGA_BYTE  = Unit(UnitPrefix.MEGA,  _B)
GIGA_BIT   = Unit(UnitPrefix.GIGA,  _b);   GIGA_BYTE  = Unit(UnitPrefix.GIGA,  _B)
TERA_BIT   = Unit(UnitPrefix.TERA,  _b);   TERA_BYTE  = Unit(UnitPrefix.TERA,  _B)
PETA_BIT   = Unit(UnitPrefix.PETA,  _b);   PETA_BYTE  = Unit(UnitPrefix.PETA,  _B)
EXA_BIT    = Unit(UnitPrefix.EXA,   _b);   EXA_BYTE   = Unit(UnitPrefix.EXA,   _B)
ZETTA_BIT  = Unit(UnitPrefix.ZETTA, _b);   ZETTA_BYTE = Unit(UnitPrefix.ZETTA, _B)
YOTTA_BIT  = Unit(UnitPrefix.YOTTA, _b);   YOTTA_BYTE = Unit(UnitPrefix.YOTTA, _B)

# Binary ---------------------------------------------------------------------------------------------------------------
KIBI_BIT   = Unit(UnitPrefix.KIBI,  _b);   KIBI_BYTE  = Unit(UnitPrefix.KIBI,  _B)
MEBI_BIT   = Unit(UnitPrefix.MEBI,  _b);   MEBI_BYTE  = Unit(UnitPrefix.MEBI,  _B)
GIBI_BIT   = Unit(UnitPrefix.GIBI,  _b);   GIBI_BYTE  = Unit(UnitPrefix.GIBI,  _B)
TEBI_BIT   = Unit(UnitPrefix.TEBI,  _b);   TEBI_BYTE  = Unit(UnitPrefix.TEBI,  _B)
PEBI_BIT   = Unit(UnitPrefix.PEBI,  _b);   PEBI_BYTE  = Unit(UnitPrefix.PEBI,  _B)
EXBI_BIT   = Unit(UnitPrefix.EXBI,  _b);   EXBI_BYTE  = Unit(UnitPrefix.EXBI,  _B)
ZEBI_BIT   = Unit(UnitPrefix.ZEBI,  _b);   ZEBI_BYTE  = Unit(UnitPrefix.ZEBI,  _B)
YOBI_BIT   = Unit(UnitPrefix.YOBI,  _b);   YOBI_BYTE  = Unit(UnitPrefix.YOBI,  _B)

# Groups ---------------------------------------------------------------------------------------------------------------
NOPREFIX = (BIT, BYTE)

DECIMAL = (
    KILO_BIT,  KILO_BYTE,  MEGA_BIT,  MEGA_BYTE,  GIGA_BIT,  GIGA_BYTE,
    TERA_BIT,  TERA_BYTE,  PETA_BIT,  PETA_BYTE,  EXA_BIT,   EXA_BYTE,
    ZETTA_BIT, ZETTA_BYTE, YOTTA_BIT, YOTTA_BYTE,
)

BINARY = (
    KIBI_BIT, KIBI_BYTE, MEBI_BIT, MEBI_BYTE, GIBI_BIT, GIBI_BYTE,
    TEBI_BIT, TEBI_BYTE, PEBI_BIT, PEBI_BYTE, EXBI_BIT, EXBI_BYTE,
    ZEBI_BIT, ZEBI_BYTE, YOBI_BIT, YOBI_BYTE,
)

BITS = (
    BIT,
    KILO_BIT,  KIBI_BIT, MEGA_BIT,  MEBI_BIT, GIGA_BIT,  GIBI_BIT,
    TERA_BIT,  TEBI_BIT, PETA_BIT,  PEBI_BIT, EXA_BIT,   EXBI_BIT,
    ZETTA_BIT, ZEBI_BIT, YOTTA_BIT, YOBI_BIT,
)

BYTES = (
    BYTE,
    KILO_BYTE,  KIBI_BYTE, MEGA_BYTE,  MEBI_BYTE, GIGA_BYTE,  GIBI_BYTE,
    TERA_BYTE,  TEBI_BYTE, PETA_BYTE,  PEBI_BYTE, EXA_BYTE,   EXBI_BYTE,
    ZETTA_BYTE, ZEBI_BYTE, YOTTA_BYTE, YOBI_BYTE,
)

PREFIXED = (
    KILO_BIT,  KIBI_BIT, KILO_BYTE,  KIBI_BYTE, MEGA_BIT,  MEBI_BIT, MEGA_BYTE,  MEBI_BYTE,
    GIGA_BIT,  GIBI_BIT, GIGA_BYTE,  GIBI_BYTE, TERA_BIT,  TEBI_BIT, TERA_BYTE,  TEBI_BYTE,
    PETA_BIT,  PEBI_BIT, PETA_BYTE,  PEBI_BYTE, EXA_BIT,   EXBI_BIT, EXA_BYTE,   EXBI_BYTE,
    ZETTA_BIT, ZEBI_BIT, ZETTA_BYTE, ZEBI_BYTE, YOTTA_BIT, YOBI_BIT, YOTTA_BYTE, YOBI_BYTE,
)

ALL = NOPREFIX + PREFIXED

# @formatter:on

GROUPS = frozendict({
    "NOPREFIX": NOPREFIX,
    "DECIMAL": DECIMAL,
    "BINARY": BINARY,
    "BITS": BITS,
    "BYTES": BYTES,
    "PREFIXED": PREFIXED,
    "ALL": ALL,
})


# Module Sanity Checks -------------------------------------------------------------------------------------------------

# Every prefix/variant combination is listed exactly once.
if len(set(ALL)) != len(ALL) or len(ALL) != 2 * (len(UnitPrefix) + 1):
    raise AssertionError("Configuration Error: sizes.ALL must list every unit exactly once.")

for _name, _group in GROUPS.items():
    if any(a >= b for a, b in zip(_group, _group[1:])):
        raise AssertionError(f"Configuration Error: sizes.{_name} must be strictly increasing.")
