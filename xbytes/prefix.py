"""
Magnitude prefixes for digital storage units.

Two families share one 8-step ladder:
    decimal (SI, base 1000):  Kilo, Mega, Giga, Tera, Peta, Exa, Zetta, Yotta
    binary  (IEC, base 1024): Kibi, Mebi, Gibi, Tebi, Pebi, Exbi, Zebi, Yobi

Symbols are kept in data tables indexed by family and magnitude index.
"""

# Standard library -----------------------------------------------------------------------------------------------------
from enum import Enum, StrEnum, unique
from typing import Self

# Third-party ----------------------------------------------------------------------------------------------------------
from frozendict import frozendict

# Local ----------------------------------------------------------------------------------------------------------------
from .collections import FrozenBiMap
from .errors import ParseError, ParseErrorKind
from .formatters import fmt_type, fmt_value


# Classes --------------------------------------------------------------------------------------------------------------

@unique
class PrefixFamily(StrEnum):
    """
    Prefix family of a UnitPrefix.

    Attributes:
        DECIMAL: SI prefixes, powers of 1000.
        BINARY: IEC prefixes, powers of 1024.
    """
    DECIMAL = "decimal"
    BINARY = "binary"

    @property
    def base(self) -> int:
        """Multiplier step between two adjacent prefixes: 1000 or 1024."""
        return 1000 if self is PrefixFamily.DECIMAL else 1024

    def ladder(self) -> tuple["UnitPrefix", ...]:
        """All 8 prefixes of this family in increasing order."""
        return _LADDERS[self]


# @formatter:off
@unique
class UnitPrefix(Enum):
    """
    Magnitude prefix: a (family, index) pair with a fixed multiplier and three symbol forms.

    Attributes:
        family: PrefixFamily.DECIMAL or PrefixFamily.BINARY.
        index: Magnitude index, 0 (Kilo/Kibi) to 7 (Yotta/Yobi).
        multiplier: base ** (index + 1).
        symbol: Short symbol, "K", "Ki", "M", "Mi", ...
        symbol_long: Full prefix word, "Kilo", "Kibi", ...
        symbol_initials: Family-neutral initial, "K" for both Kilo and Kibi.

    Examples:
        >>> UnitPrefix.MEBI.multiplier
        1048576
        >>> UnitPrefix.KIBI.decimal() is UnitPrefix.KILO
        True
        >>> format(UnitPrefix.GIBI, "#")
        'Gibi'
    """
    KILO  = (PrefixFamily.DECIMAL, 0);   KIBI = (PrefixFamily.BINARY, 0)
    MEGA  = (PrefixFamily.DECIMAL, 1);   MEBI = (PrefixFamily.BINARY, 1)
    GIGA  = (PrefixFamily.DECIMAL, 2);   GIBI = (PrefixFamily.BINARY, 2)
    TERA  = (PrefixFamily.DECIMAL, 3);   TEBI = (PrefixFamily.BINARY, 3)
    PETA  = (PrefixFamily.DECIMAL, 4);   PEBI = (PrefixFamily.BINARY, 4)
    EXA   = (PrefixFamily.DECIMAL, 5);   EXBI = (PrefixFamily.BINARY, 5)
    ZETTA = (PrefixFamily.DECIMAL, 6);   ZEBI = (PrefixFamily.BINARY, 6)
    YOTTA = (PrefixFamily.DECIMAL, 7);   YOBI = (PrefixFamily.BINARY, 7)
# @formatter:on

    @property
    def family(self) -> PrefixFamily:
        return self.value[0]

    @property
    def index(self) -> int:
        return self.value[1]

    @property
    def is_decimal(self) -> bool:
        return self.family is PrefixFamily.DECIMAL

    @property
    def is_binary(self) -> bool:
        return self.family is PrefixFamily.BINARY

    @property
    def multiplier(self) -> int:
        return self.family.base ** (self.index + 1)

    @property
    def symbol(self) -> str:
        return _SYMBOLS[self.family][self.index]

    @property
    def symbol_long(self) -> str:
        return _SYMBOLS_LONG[self.family][self.index]

    @property
    def symbol_initials(self) -> str:
        return _INITIALS[self.index]

    def decimal(self) -> Self:
        """Decimal counterpart at the same magnitude index, self if already decimal."""
        return _LADDERS[PrefixFamily.DECIMAL][self.index]

    def binary(self) -> Self:
        """Binary counterpart at the same magnitude index, self if already binary."""
        return _LADDERS[PrefixFamily.BINARY][self.index]

    @classmethod
    def from_str(cls, text: str) -> Self:
        """
        Parse a prefix from its short symbol or its long name.

        Case rules:
            - Short symbols are case-sensitive: "K", "Ki", "M", "Mi", ...
            - Lower-case "k" is the only accepted lower-case short symbol, it means decimal Kilo.
            - Long names are case-insensitive: "mega", "MEBI", "Gibi", ...

        Raises:
            TypeError: If text is not a str.
            ParseError: INVALID_PREFIX_CASE_FORMAT for a case-mangled short symbol like "m" or "ki",
                        INVALID_PREFIX for anything else that is not a prefix.

        Examples:
            >>> UnitPrefix.from_str("k") is UnitPrefix.KILO
            True
            >>> UnitPrefix.from_str("mebi") is UnitPrefix.MEBI
            True
        """
        if not isinstance(text, str):
            raise TypeError(f"prefix text must be str, but got {fmt_type(text)}")

        if _BY_SYMBOL.has_value(text):
            return _BY_SYMBOL.get_key(text)
        if text == "k":
            return cls.KILO

        folded = text.lower()
        prefix = _BY_SYMBOL_LONG.get(folded)
        if prefix is not None:
            return prefix
        if folded in _FOLDED_SYMBOLS:
            raise ParseError(ParseErrorKind.INVALID_PREFIX_CASE_FORMAT, fmt_value(text))
        raise ParseError(ParseErrorKind.INVALID_PREFIX, fmt_value(text))

    def __str__(self) -> str:
        return self.symbol

    def __format__(self, format_spec: str) -> str:
        """
        Format spec: "" short symbol, "-" initials, "#" long name.

        Any other spec applies to the short symbol as a plain str spec.
        """
        if format_spec == "-":
            return self.symbol_initials
        if format_spec == "#":
            return self.symbol_long
        return format(self.symbol, format_spec)


# Symbol Tables --------------------------------------------------------------------------------------------------------

# @formatter:off
_SYMBOLS = frozendict({
    PrefixFamily.DECIMAL: ("K", "M", "G", "T", "P", "E", "Z", "Y"),
    PrefixFamily.BINARY:  ("Ki", "Mi", "Gi", "Ti", "Pi", "Ei", "Zi", "Yi"),
})

_SYMBOLS_LONG = frozendict({
    PrefixFamily.DECIMAL: ("Kilo", "Mega", "Giga", "Tera", "Peta", "Exa", "Zetta", "Yotta"),
    PrefixFamily.BINARY:  ("Kibi", "Mebi", "Gibi", "Tebi", "Pebi", "Exbi", "Zebi", "Yobi"),
})

_INITIALS = ("K", "M", "G", "T", "P", "E", "Z", "Y")
# @formatter:on

_LADDERS = frozendict({
    family: tuple(sorted((p for p in UnitPrefix if p.family is family), key=lambda p: p.index))
    for family in PrefixFamily
})

_BY_SYMBOL: FrozenBiMap[UnitPrefix, str] = FrozenBiMap((p, p.symbol) for p in UnitPrefix)
_BY_SYMBOL_LONG = frozendict({p.symbol_long.lower(): p for p in UnitPrefix})
_FOLDED_SYMBOLS = frozenset(p.symbol.lower() for p in UnitPrefix)


# Module Sanity Checks -------------------------------------------------------------------------------------------------

# Every prefix needs an entry in every symbol table, and every family a full ladder.
for _family in PrefixFamily:
    if len(_LADDERS[_family]) != len(_INITIALS):
        raise AssertionError(f"Configuration Error: incomplete prefix ladder for family '{_family}'.")
    if len(_SYMBOLS[_family]) != len(_INITIALS) or len(_SYMBOLS_LONG[_family]) != len(_INITIALS):
        raise AssertionError(f"Configuration Error: incomplete symbol table for family '{_family}'.")
