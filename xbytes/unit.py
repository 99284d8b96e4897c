"""
Digital storage units: an optional magnitude prefix combined with a bit or byte size variant.
"""

# Standard library -----------------------------------------------------------------------------------------------------
from dataclasses import dataclass
from enum import Enum, unique
from functools import total_ordering
from typing import Self

# Local ----------------------------------------------------------------------------------------------------------------
from .errors import ParseError, ParseErrorKind
from .formatters import fmt_type, fmt_value
from .prefix import PrefixFamily, UnitPrefix


# Classes --------------------------------------------------------------------------------------------------------------

# @formatter:off
@unique
class SizeVariant(Enum):
    """
    Bit or Byte. A Byte is always exactly 8 Bits.

    Attributes:
        symbol: "b" or "B".
        symbol_long: "Bit" or "Byte".
        symbol_plural: "Bits" or "Bytes".
        bits: Size of the variant in bits, 1 or 8.
    """
    BIT  = ("b", "Bit", 1)
    BYTE = ("B", "Byte", 8)
# @formatter:on

    @property
    def symbol(self) -> str:
        return self.value[0]

    @property
    def symbol_long(self) -> str:
        return self.value[1]

    @property
    def symbol_plural(self) -> str:
        return f"{self.value[1]}s"

    @property
    def bits(self) -> int:
        return self.value[2]

    @classmethod
    def from_str(cls, text: str) -> Self:
        """
        Parse a variant: "b" is Bit and "B" is Byte, the word forms
        "bit", "bits", "byte" and "bytes" are case-insensitive.

        Raises:
            ParseError: INVALID_SIZE_VARIANT for anything else.
        """
        if not isinstance(text, str):
            raise TypeError(f"size variant text must be str, but got {fmt_type(text)}")

        if text == "b":
            return cls.BIT
        if text == "B":
            return cls.BYTE
        folded = text.lower()
        if folded in ("bit", "bits"):
            return cls.BIT
        if folded in ("byte", "bytes"):
            return cls.BYTE
        raise ParseError(ParseErrorKind.INVALID_SIZE_VARIANT, fmt_value(text))

    def __str__(self) -> str:
        return self.symbol


@total_ordering
@dataclass(frozen=True)
class Unit:
    """
    A digital storage unit: optional UnitPrefix and a SizeVariant.

    Units are ordered by their effective value, the number of bits one unit holds,
    so 1 KiB > 1 kB and 1 kB > 1 Kib.

    Attributes:
        prefix: Magnitude prefix, None for the raw Bit and Byte units.
        variant: SizeVariant.BIT or SizeVariant.BYTE.

    Examples:
        >>> unit = Unit(UnitPrefix.MEBI, SizeVariant.BYTE)
        >>> str(unit)
        'MiB'
        >>> unit.effective_value
        8388608
        >>> unit.symbol_long(plural=True)
        'MebiBytes'
        >>> Unit.from_str("kB") == Unit(UnitPrefix.KILO, SizeVariant.BYTE)
        True
    """
    prefix: UnitPrefix | None
    variant: SizeVariant

    def __post_init__(self):
        if not isinstance(self.prefix, (UnitPrefix, type(None))):
            raise TypeError(f"prefix must be UnitPrefix or None, but got {fmt_type(self.prefix)}")
        if not isinstance(self.variant, SizeVariant):
            raise TypeError(f"variant must be SizeVariant, but got {fmt_type(self.variant)}")

    @property
    def effective_value(self) -> int:
        """Bits in one unit: prefix multiplier times variant bits, computed exactly."""
        multiplier = self.prefix.multiplier if self.prefix is not None else 1
        return multiplier * self.variant.bits

    @property
    def is_prefixed(self) -> bool:
        return self.prefix is not None

    @property
    def is_decimal(self) -> bool:
        return self.prefix is not None and self.prefix.is_decimal

    @property
    def is_binary(self) -> bool:
        return self.prefix is not None and self.prefix.is_binary

    @property
    def family(self) -> PrefixFamily | None:
        return self.prefix.family if self.prefix is not None else None

    def decimal(self) -> Self:
        """Same unit with the decimal prefix of the same magnitude, no-op for unprefixed units."""
        if self.prefix is None:
            return self
        return Unit(self.prefix.decimal(), self.variant)

    def binary(self) -> Self:
        """Same unit with the binary prefix of the same magnitude, no-op for unprefixed units."""
        if self.prefix is None:
            return self
        return Unit(self.prefix.binary(), self.variant)

    def symbol(self) -> str:
        """Short symbol: "b", "B", "Kb", "KiB", "MB", ..."""
        prefix = self.prefix.symbol if self.prefix is not None else ""
        return f"{prefix}{self.variant.symbol}"

    def symbol_long(self, plural: bool = False, multi_caps: bool = True) -> str:
        """
        Full unit name: "Bit", "Bytes", "KiloBytes", ...

        Args:
            plural: Use the plural variant word.
            multi_caps: Capitalize the variant word after a prefix ("KiloBytes"),
                        otherwise only the first letter is capitalized ("Kilobytes").
        """
        variant = self.variant.symbol_plural if plural else self.variant.symbol_long
        if self.prefix is None:
            return variant
        if not multi_caps:
            variant = variant.lower()
        return f"{self.prefix.symbol_long}{variant}"

    def symbol_initials(self) -> str:
        """Prefix initial and variant letter, with no binary "i": "KB" for both kB and KiB."""
        prefix = self.prefix.symbol_initials if self.prefix is not None else ""
        return f"{prefix}{self.variant.symbol}"

    def symbol_condensed(self) -> str:
        """Single character: the prefix initial, or the variant letter for unprefixed units."""
        if self.prefix is None:
            return self.variant.symbol
        return self.prefix.symbol_initials

    @classmethod
    def from_str(cls, text: str) -> Self:
        """
        Parse a unit like "B", "kB", "KiB", "Mb", "MegaByte" or "gibibits".

        The rightmost case-sensitive 'b' or 'B' starts the variant part, everything
        before it is the prefix part. See UnitPrefix.from_str() for the prefix case rules.

        Raises:
            ParseError: INVALID_SIZE_VARIANT, INVALID_PREFIX, INVALID_PREFIX_CASE_FORMAT
                        or INVALID_UNIT_CASE_FORMAT.
        """
        if not isinstance(text, str):
            raise TypeError(f"unit text must be str, but got {fmt_type(text)}")

        split = max(text.rfind("b"), text.rfind("B"))
        if split < 0:
            raise ParseError(ParseErrorKind.INVALID_SIZE_VARIANT, fmt_value(text))

        prefix_text, variant_text = text[:split], text[split:]
        variant = SizeVariant.from_str(variant_text)
        if not prefix_text:
            return cls(None, variant)

        try:
            prefix = UnitPrefix.from_str(prefix_text)
        except ParseError as exc:
            # A case-mangled binary symbol is a unit casing error: "MIB", "mib", "kiB"
            if exc.kind is ParseErrorKind.INVALID_PREFIX_CASE_FORMAT and len(prefix_text) == 2:
                raise ParseError(ParseErrorKind.INVALID_UNIT_CASE_FORMAT, fmt_value(text)) from exc
            raise
        return cls(prefix, variant)

    def __str__(self) -> str:
        return self.symbol()

    def __format__(self, format_spec: str) -> str:
        """
        Format spec: "" short symbol, "-" initials, "#" long name, "+" plural long name.

        Any other spec applies to the short symbol as a plain str spec.
        """
        if format_spec == "-":
            return self.symbol_initials()
        if format_spec == "#":
            return self.symbol_long()
        if format_spec == "+":
            return self.symbol_long(plural=True)
        return format(self.symbol(), format_spec)

    def __lt__(self, other):
        if isinstance(other, Unit):
            return self.effective_value < other.effective_value
        return NotImplemented
