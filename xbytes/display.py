"""
String representation of digital storage sizes.

A size renders through a ByteSizeRepr snapshot: a scaled value, the Unit it is expressed in,
and a ReprFormat with style flags, precision, thousands separator and spacing.

Examples:
    >>> from xbytes.sizes import MEGA_BYTE
    >>> str(ByteSizeRepr(1536, MEGA_BYTE, ReprFormat.long()))
    '1536 MegaBytes'
    >>> format(ByteSizeRepr(1536, MEGA_BYTE), ",.1")
    '1,536 MB'
    >>> format(ByteSizeRepr(1.5, MEGA_BYTE), "-#.1")
    '1.5 M'
"""

# Standard library -----------------------------------------------------------------------------------------------------
import re
from dataclasses import dataclass, field, replace
from fractions import Fraction
from functools import total_ordering
from typing import Self

# Local ----------------------------------------------------------------------------------------------------------------
from .conf import ByteSizeConf
from .flags import FORMAT_GROUPS, Format, Mode
from .formatters import fmt_type, fmt_value
from .numeric import is_finite, is_whole, std_numeric
from .prefix import PrefixFamily
from .sentinels import UNSET, UnsetType, ifnotunset
from .unit import SizeVariant, Unit


# Classes --------------------------------------------------------------------------------------------------------------

@dataclass(frozen=True)
class ReprFormat:
    """
    Stored style configuration of a size representation.

    Fields left as None take their defaults from ByteSizeConf when the instance is created.

    Attributes:
        flags: Format style flags, see xbytes.flags.Format.
        precision: Decimal places shown when the value has a fraction or FORCE_FRACTION is set.
        thousands_separator: Digit group separator used with SHOW_THOUSANDS_SEPARATOR.
        spacing: Number of spaces between value and unit, ignored with NO_SPACE.

    Conflicting flags resolve as: LONG over CONDENSED over INITIALS, NO_PLURAL over
    FORCE_PLURAL, LOWER_CAPS over UPPER_CAPS, NO_FRACTION over FORCE_FRACTION.

    Examples:
        >>> fmt = ReprFormat.long().with_format(Format.NO_MULTI_CAPS)
        >>> fmt.flags == Format.LONG | Format.NO_MULTI_CAPS
        True
        >>> fmt.override(Format.CONDENSED).flags == Format.CONDENSED | Format.NO_MULTI_CAPS
        True
    """
    flags: Format = Format.DEFAULT
    precision: int | None = None
    thousands_separator: str | None = None
    spacing: int | None = None

    def __post_init__(self):
        """Validate and set fields"""
        if not isinstance(self.flags, Format):
            raise TypeError(f"flags must be Format, but got {fmt_type(self.flags)}")

        if self.precision is None:
            object.__setattr__(self, "precision", ByteSizeConf.PRECISION)
        if isinstance(self.precision, bool) or not isinstance(self.precision, int):
            raise TypeError(f"precision must be int or None, but got {fmt_type(self.precision)}")
        if self.precision < 0:
            raise ValueError(f"precision must be non-negative, but got {fmt_value(self.precision)}")

        if self.thousands_separator is None:
            object.__setattr__(self, "thousands_separator", ByteSizeConf.THOUSANDS_SEPARATOR)
        if not isinstance(self.thousands_separator, str):
            raise TypeError(f"thousands_separator must be str or None, "
                            f"but got {fmt_type(self.thousands_separator)}")

        if self.spacing is None:
            object.__setattr__(self, "spacing", ByteSizeConf.SPACING)
        if isinstance(self.spacing, bool) or not isinstance(self.spacing, int):
            raise TypeError(f"spacing must be int or None, but got {fmt_type(self.spacing)}")
        if self.spacing < 0:
            raise ValueError(f"spacing must be non-negative, but got {fmt_value(self.spacing)}")

    @classmethod
    def initials(cls) -> Self:
        """Prefix initial and variant letter: 2.13 KB, 1.50 MB."""
        return cls(flags=Format.INITIALS)

    @classmethod
    def condensed(cls) -> Self:
        """Single character unit: 2.13 K, 1.50 M."""
        return cls(flags=Format.CONDENSED)

    @classmethod
    def long(cls) -> Self:
        """Full unit names: 2.13 KiloBytes, 1.50 MebiBytes."""
        return cls(flags=Format.LONG)

    @classmethod
    def nospace(cls) -> Self:
        """No space between value and unit: 2.13KB, 1.50MiB."""
        return cls(flags=Format.NO_SPACE)

    def with_format(self, flags: Format) -> Self:
        """New instance with flags added to the stored flags."""
        return replace(self, flags=self.flags | _as_flags(flags))

    def without_format(self, flags: Format) -> Self:
        """New instance with flags removed from the stored flags."""
        return replace(self, flags=self.flags & ~_as_flags(flags))

    def reset_format(self) -> Self:
        """New instance with no flags, other settings kept."""
        return replace(self, flags=Format.DEFAULT)

    def override(self, flags: Format) -> Self:
        """
        New instance where flags replace the stored flags of every concern they touch.

        A concern is a group of flags configuring the same aspect of the output,
        for example the unit form {INITIALS, CONDENSED, LONG}. Stored flags of
        untouched concerns are kept.
        """
        flags = _as_flags(flags)
        stored = self.flags
        for group in FORMAT_GROUPS:
            if flags & group:
                stored &= ~group
        return replace(self, flags=stored | flags)

    def merge(self,
              flags: Format | UnsetType = UNSET,
              precision: int | UnsetType = UNSET,
              thousands_separator: str | UnsetType = UNSET,
              spacing: int | UnsetType = UNSET,
              ) -> Self:
        """
        Create a new ReprFormat instance with merged configuration options.

        Parameters not provided (UNSET) are inherited from the current instance.
        """
        return ReprFormat(
            flags=ifnotunset(flags, default=self.flags),
            precision=ifnotunset(precision, default=self.precision),
            thousands_separator=ifnotunset(thousands_separator, default=self.thousands_separator),
            spacing=ifnotunset(spacing, default=self.spacing),
        )

    def __or__(self, other: "ReprFormat | Format") -> Self:
        if isinstance(other, ReprFormat):
            return self.with_format(other.flags)
        if isinstance(other, Format):
            return self.with_format(other)
        return NotImplemented


@total_ordering
@dataclass(frozen=True, eq=False)
class ByteSizeRepr:
    """
    Renderable snapshot of a size: a scaled value in a fixed unit with a stored format.

    Reprs compare by (unit, value), so the unit's effective value decides first:
    "1 MiB" sorts after "1 MB" and "1 MB" after "900 KiB".

    The format spec mini-language of format() and f-strings:

        [[fill]align][sign][#][width][,][.precision]

        +   long form: 1.50 MebiBytes
        +#  long form without plural: 1.50 MebiByte
        -   initials: 1.50 MB
        -#  condensed: 1.50 M
        #   long variant word without inner caps: 1.50 Mebibytes (with a stored LONG flag)
        ,   show thousands separator
        .N  N decimal places

    Spec directives replace the stored format flags of the same concern, stored flags
    of other concerns still apply. Fill, align and width pad the final string.

    Attributes:
        value: Non-negative finite magnitude in unit, float or Fraction.
        unit: The Unit value is expressed in.
        format: Stored ReprFormat, a bare Format is converted.
    """
    value: float | Fraction
    unit: Unit
    format: ReprFormat = field(default_factory=ReprFormat)

    def __post_init__(self):
        """Validate and set fields"""
        value = std_numeric(self.value)
        if not is_finite(value):
            raise ValueError(f"value must be finite, but got {fmt_value(value)}")
        if value < 0:
            raise ValueError(f"value must be non-negative, but got {fmt_value(value)}")
        object.__setattr__(self, "value", value)

        if not isinstance(self.unit, Unit):
            raise TypeError(f"unit must be Unit, but got {fmt_type(self.unit)}")

        if isinstance(self.format, Format):
            object.__setattr__(self, "format", ReprFormat(flags=self.format))
        if not isinstance(self.format, ReprFormat):
            raise TypeError(f"format must be ReprFormat or Format, but got {fmt_type(self.format)}")

    def __str__(self) -> str:
        return render(self.value, self.unit, self.format)

    def __format__(self, format_spec: str) -> str:
        if not format_spec:
            return str(self)

        spec = parse_format_spec(format_spec)
        fmt = self.format.override(spec.flags)
        if spec.precision is not None:
            fmt = fmt.merge(precision=spec.precision)

        text = render(self.value, self.unit, fmt)
        if spec.width is None:
            return text
        return format(text, f"{spec.fill}{spec.align}{spec.width}")

    def with_format(self, flags: Format) -> Self:
        """New snapshot with flags added to the stored format."""
        return replace(self, format=self.format.with_format(flags))

    def merge(self, **kwargs) -> Self:
        """New snapshot with stored format options replaced, see ReprFormat.merge()."""
        return replace(self, format=self.format.merge(**kwargs))

    def _key(self) -> tuple:
        return self.unit.effective_value, self.value

    def __eq__(self, other):
        if isinstance(other, ByteSizeRepr):
            return self._key() == other._key()
        return NotImplemented

    def __lt__(self, other):
        if isinstance(other, ByteSizeRepr):
            return self._key() < other._key()
        return NotImplemented

    def __hash__(self):
        return hash(self._key())


@dataclass(frozen=True)
class FormatSpec:
    """Parsed format spec: style flags, precision override and padding."""
    flags: Format = Format.DEFAULT
    precision: int | None = None
    fill: str = " "
    align: str = "<"
    width: int | None = None


# Methods --------------------------------------------------------------------------------------------------------------

_FORMAT_SPEC = re.compile(
    r"""
    (?:(?P<fill>.)?(?P<align>[<>^]))?
    (?P<sign>[+-])?
    (?P<alt>\#)?
    (?P<width>\d+)?
    (?P<grouping>,)?
    (?:\.(?P<precision>\d+))?
    """,
    re.VERBOSE | re.DOTALL,
)


def parse_format_spec(format_spec: str) -> FormatSpec:
    """
    Parse a format spec string into style flags, precision and padding.

    Raises:
        ValueError: If the spec does not follow [[fill]align][sign][#][width][,][.precision].

    Examples:
        >>> spec = parse_format_spec(">+12.1")
        >>> spec.flags, spec.precision, spec.align, spec.width
        (<Format.LONG: 4>, 1, '>', 12)
    """
    match = _FORMAT_SPEC.fullmatch(format_spec)
    if match is None:
        raise ValueError(f"invalid format spec for size: {fmt_value(format_spec)}")

    sign, alt = match["sign"], match["alt"] is not None
    flags = Format.DEFAULT
    if sign == "+":
        flags |= Format.LONG | Format.NO_PLURAL if alt else Format.LONG
    elif sign == "-":
        flags |= Format.CONDENSED if alt else Format.INITIALS
    elif alt:
        flags |= Format.NO_MULTI_CAPS
    if match["grouping"]:
        flags |= Format.SHOW_THOUSANDS_SEPARATOR

    return FormatSpec(
        flags=flags,
        precision=int(match["precision"]) if match["precision"] is not None else None,
        fill=match["fill"] or " ",
        align=match["align"] or "<",
        width=int(match["width"]) if match["width"] is not None else None,
    )


def select_unit(bits: int, mode: Mode = Mode.DEFAULT) -> Unit:
    """
    Best fitting unit for a bit count: the largest unit of the mode's family that is not larger than the size.

    Sizes smaller than the first prefixed unit stay unprefixed.

    Examples:
        >>> str(select_unit(8 * 1536))
        'KiB'
        >>> str(select_unit(8 * 1536, Mode.DECIMAL | Mode.BITS))
        'Kb'
        >>> str(select_unit(8 * 1536, Mode.NO_PREFIX))
        'B'
    """
    variant = SizeVariant.BIT if Mode.BITS in mode else SizeVariant.BYTE
    unit = Unit(None, variant)
    if Mode.NO_PREFIX in mode:
        return unit

    family = PrefixFamily.DECIMAL if Mode.DECIMAL in mode else PrefixFamily.BINARY
    for prefix in family.ladder():
        candidate = Unit(prefix, variant)
        if bits < candidate.effective_value:
            break
        unit = candidate
    return unit


def scale(bits: int, unit: Unit) -> float | Fraction:
    """Bit count expressed in unit: exact Fraction with the lossless backend, float otherwise."""
    if ByteSizeConf.LOSSLESS:
        return Fraction(bits, unit.effective_value)
    return bits / unit.effective_value


def thsep(digits: str, separator: str = ",") -> str:
    """
    Group a digit string in threes from the right.

    Examples:
        >>> thsep("1234567")
        '1,234,567'
        >>> thsep("123", "_")
        '123'
    """
    head = len(digits) % 3 or 3
    groups = [digits[:head]] + [digits[i:i + 3] for i in range(head, len(digits), 3)]
    return separator.join(groups)


def render(value: int | float | Fraction, unit: Unit, fmt: ReprFormat) -> str:
    """
    Render a scaled value in unit under fmt.

    Numeric text:
        - NO_FRACTION truncates to an integer.
        - A value with a fraction, or any value with FORCE_FRACTION, shows fmt.precision decimals.
        - SHOW_THOUSANDS_SEPARATOR groups the integer part only.

    Unit text: LONG, CONDENSED, INITIALS or the short symbol. The long form is plural when
    the rendered value is not exactly 1, LOWER_CAPS and UPPER_CAPS apply last.
    """
    flags = fmt.flags
    whole = int(value)
    fractional = not is_whole(value)

    if Format.NO_FRACTION in flags:
        number = str(whole)
        plural = whole != 1
    else:
        if fractional or Format.FORCE_FRACTION in flags:
            number = format(value, f".{fmt.precision}f")
        else:
            number = str(whole)
        plural = fractional or whole != 1

    if Format.SHOW_THOUSANDS_SEPARATOR in flags:
        integer, dot, fraction = number.partition(".")
        number = f"{thsep(integer, fmt.thousands_separator)}{dot}{fraction}"

    space = "" if Format.NO_SPACE in flags else " " * fmt.spacing
    return f"{number}{space}{_unit_text(unit, flags, plural)}"


def _unit_text(unit: Unit, flags: Format, plural: bool) -> str:
    if Format.LONG in flags:
        if Format.NO_PLURAL in flags:
            plural = False
        elif Format.FORCE_PLURAL in flags:
            plural = True
        text = unit.symbol_long(plural=plural, multi_caps=Format.NO_MULTI_CAPS not in flags)
    elif Format.CONDENSED in flags:
        text = unit.symbol_condensed()
    elif Format.INITIALS in flags:
        text = unit.symbol_initials()
    else:
        text = unit.symbol()

    if Format.LOWER_CAPS in flags:
        return text.lower()
    if Format.UPPER_CAPS in flags:
        return text.upper()
    return text


def _as_flags(flags: Format) -> Format:
    if not isinstance(flags, Format):
        raise TypeError(f"flags must be Format, but got {fmt_type(flags)}")
    return flags
