"""
Digital storage size value with exact integer arithmetic.

A ByteSize stores one non-negative integer: the size in bits. Conversion to bytes
truncates (bits // 8). Values are limited to ByteSizeConf.MAX_VALUE, the overflow
policy in ByteSizeConf.OVERFLOW decides whether out-of-range results raise or saturate.
"""

# Standard library -----------------------------------------------------------------------------------------------------
import operator
import warnings
from dataclasses import dataclass
from fractions import Fraction
from typing import ClassVar, Self

# Local ----------------------------------------------------------------------------------------------------------------
from .conf import ByteSizeConf
from .display import ByteSizeRepr, ReprFormat, scale, select_unit
from .errors import ValueOverflowError
from .flags import Format, Mode
from .formatters import fmt_type, fmt_value
from .numeric import exact, std_numeric
from .unit import Unit


# Classes --------------------------------------------------------------------------------------------------------------

@dataclass(frozen=True, order=True)
class ByteSize:
    """
    A digital storage size, stored exactly as a count of bits.

    Construction:
        - ByteSize.from_bits(n), ByteSize.from_bytes(n): from raw counts, checked against MAX_VALUE.
        - ByteSize.of(magnitude, unit): magnitude × unit.effective_value, truncated to whole bits.
        - ByteSize.from_str(text): parse "<number> <unit>", see xbytes.parse.parse().

    Arithmetic:
        - size + size, size - size, size + n, size - n: n counts bits.
        - size * n, size / n, size // n: scaled and truncated to whole bits.
        - size / size: ratio as float, or Fraction with the lossless backend.
        - size // size: integer quotient, size % size: remainder as ByteSize.

    Results outside [0, MAX_VALUE] raise ValueOverflowError, or saturate with a
    RuntimeWarning when ByteSizeConf.OVERFLOW is "saturate".

    Ordering and equality use the bit count only, so sizes built from different units
    compare equal when they hold the same number of bits.

    Attributes:
        bits: Size in bits.

    Examples:
        >>> from xbytes.sizes import MEBI_BYTE
        >>> size = ByteSize.of(1.5, MEBI_BYTE)
        >>> str(size)
        '1.50 MiB'
        >>> str(size.repr(Mode.BITS))
        '12 Mib'
        >>> f"{size:+}"
        '1.50 MebiBytes'
        >>> size.bytes
        1572864
    """
    bits: int = 0

    ZERO: ClassVar["ByteSize"]
    MAX: ClassVar["ByteSize"]

    def __post_init__(self):
        if isinstance(self.bits, bool) or not isinstance(self.bits, int):
            raise TypeError(f"bits must be int, but got {fmt_type(self.bits)}")
        if self.bits < 0:
            raise ValueError(f"bits must be non-negative, but got {fmt_value(self.bits)}")
        if self.bits > ByteSizeConf.MAX_VALUE:
            raise ValueOverflowError(f"{self.bits} bits exceed the {ByteSizeConf.INT_BITS}-bit limit")

    # Constructors -----------------------------------------------------------------------------------------------------

    @classmethod
    def from_bits(cls, bits: int) -> Self:
        """Size from a raw bit count."""
        return cls(_as_count(bits, "bits"))

    @classmethod
    def from_bytes(cls, count: int) -> Self:
        """
        Size from a raw byte count.

        Raises:
            ValueOverflowError: If count * 8 bits do not fit the backing integer.
        """
        return cls(_as_count(count, "count") * 8)

    @classmethod
    def of(cls, magnitude, unit: Unit) -> Self:
        """
        Size of magnitude units, truncated to whole bits.

        With the float backend a float magnitude counts as the decimal it prints as,
        so 0.3 kB is 2400 bits. With the lossless backend it keeps its binary value.

        Args:
            magnitude: Non-negative int, float, Fraction, Decimal or numeric scalar.
            unit: Unit the magnitude is expressed in.

        Raises:
            TypeError: If unit is not a Unit or magnitude is not numeric.
            ValueError: If magnitude is negative, inf or nan.
            ValueOverflowError: If the result exceeds MAX_VALUE and the overflow policy is "raise".

        Examples:
            >>> from xbytes.sizes import KIBI_BYTE
            >>> ByteSize.of(2, KIBI_BYTE).bits
            16384
        """
        if not isinstance(unit, Unit):
            raise TypeError(f"unit must be Unit, but got {fmt_type(unit)}")
        value = _magnitude(magnitude)
        if value < 0:
            raise ValueError(f"magnitude must be non-negative, but got {fmt_value(magnitude)}")
        return cls(_saturate(int(value * unit.effective_value), "of()"))

    @classmethod
    def from_str(cls, text: str) -> Self:
        """Parse "<number> <unit>", see xbytes.parse.parse()."""
        from .parse import parse
        return parse(text)

    # Accessors --------------------------------------------------------------------------------------------------------

    @property
    def bytes(self) -> int:
        """Size in whole bytes, a trailing partial byte is truncated."""
        return self.bits // 8

    def to(self, unit: Unit) -> float | Fraction:
        """Size expressed in unit: float, or Fraction with the lossless backend."""
        if not isinstance(unit, Unit):
            raise TypeError(f"unit must be Unit, but got {fmt_type(unit)}")
        return scale(self.bits, unit)

    # Representation ---------------------------------------------------------------------------------------------------

    def repr(self, mode: Mode = Mode.DEFAULT, format: ReprFormat | Format | None = None) -> ByteSizeRepr:
        """
        Renderable snapshot in the best fitting unit for the selection mode.

        Examples:
            >>> str(ByteSize.from_bytes(1_500_000).repr(Mode.DECIMAL))
            '1.50 MB'
        """
        if not isinstance(mode, Mode):
            raise TypeError(f"mode must be Mode, but got {fmt_type(mode)}")
        unit = select_unit(self.bits, mode)
        return ByteSizeRepr(scale(self.bits, unit), unit, _repr_format(format))

    def repr_as(self, unit: Unit, format: ReprFormat | Format | None = None) -> ByteSizeRepr:
        """
        Renderable snapshot in a fixed unit.

        Examples:
            >>> from xbytes.sizes import KILO_BYTE
            >>> str(ByteSize.from_bytes(1_500_000).repr_as(KILO_BYTE, Format.SHOW_THOUSANDS_SEPARATOR))
            '1,500 KB'
        """
        return ByteSizeRepr(self.to(unit), unit, _repr_format(format))

    def __str__(self) -> str:
        return str(self.repr())

    def __format__(self, format_spec: str) -> str:
        return format(self.repr(), format_spec)

    def __bool__(self) -> bool:
        return self.bits != 0

    # Arithmetic -------------------------------------------------------------------------------------------------------

    def __add__(self, other) -> Self:
        other_bits = _operand_bits(other)
        if other_bits is NotImplemented:
            return NotImplemented
        return ByteSize(_saturate(int(self.bits + other_bits), "addition"))

    def __radd__(self, other) -> Self:
        return self.__add__(other)

    def __sub__(self, other) -> Self:
        other_bits = _operand_bits(other)
        if other_bits is NotImplemented:
            return NotImplemented
        return ByteSize(_saturate(int(self.bits - other_bits), "subtraction"))

    def __rsub__(self, other) -> Self:
        other_bits = _operand_bits(other)
        if other_bits is NotImplemented:
            return NotImplemented
        return ByteSize(_saturate(int(other_bits - self.bits), "subtraction"))

    def __mul__(self, other) -> Self:
        factor = _scalar(other)
        if factor is NotImplemented:
            return NotImplemented
        return ByteSize(_saturate(int(self.bits * factor), "multiplication"))

    def __rmul__(self, other) -> Self:
        return self.__mul__(other)

    def __truediv__(self, other):
        if isinstance(other, ByteSize):
            if ByteSizeConf.LOSSLESS:
                return Fraction(self.bits, other.bits)
            return self.bits / other.bits
        divisor = _scalar(other)
        if divisor is NotImplemented:
            return NotImplemented
        return ByteSize(_saturate(int(self.bits / divisor), "division"))

    def __floordiv__(self, other):
        if isinstance(other, ByteSize):
            return self.bits // other.bits
        divisor = _scalar(other)
        if divisor is NotImplemented:
            return NotImplemented
        return ByteSize(_saturate(int(self.bits // divisor), "division"))

    def __mod__(self, other) -> Self:
        if isinstance(other, ByteSize):
            return ByteSize(self.bits % other.bits)
        return NotImplemented


ByteSize.ZERO = ByteSize(0)
ByteSize.MAX = ByteSize(ByteSizeConf.MAX_VALUE)


# Methods --------------------------------------------------------------------------------------------------------------

def _as_count(value, name: str) -> int:
    """Raw non-negative integer count, rejecting bool and non-integral numbers."""
    if isinstance(value, bool):
        raise TypeError(f"{name} must be int, but got {fmt_type(value)}")
    try:
        count = operator.index(value)
    except TypeError as exc:
        raise TypeError(f"{name} must be int, but got {fmt_type(value)}") from exc
    if count < 0:
        raise ValueError(f"{name} must be non-negative, but got {fmt_value(count)}")
    if count > ByteSizeConf.MAX_VALUE:
        raise ValueOverflowError(f"{count} {name} exceed the {ByteSizeConf.INT_BITS}-bit limit")
    return count


def _magnitude(value) -> Fraction:
    """Exact value of a number; with the float backend a float counts as the decimal it prints as."""
    return exact(value, shortest=not ByteSizeConf.LOSSLESS)


def _operand_bits(other) -> int | Fraction:
    """Bit count of an additive operand: a ByteSize or a plain number of bits."""
    if isinstance(other, ByteSize):
        return other.bits
    return _scalar(other)


def _scalar(other) -> int | Fraction:
    """Exact value of a numeric operand, NotImplemented for non-numeric types."""
    if isinstance(other, ByteSize):
        return NotImplemented
    try:
        std_numeric(other)
    except TypeError:
        return NotImplemented
    return _magnitude(other)


def _repr_format(format: ReprFormat | Format | None) -> ReprFormat:
    if format is None:
        return ReprFormat()
    if isinstance(format, Format):
        return ReprFormat(flags=format)
    if isinstance(format, ReprFormat):
        return format
    raise TypeError(f"format must be ReprFormat, Format or None, but got {fmt_type(format)}")


def _saturate(bits: int, operation: str) -> int:
    """
    Apply the overflow policy to a computed bit count.

    Returns bits unchanged when they fit [0, MAX_VALUE], otherwise raises
    ValueOverflowError or clamps to the nearest bound with a RuntimeWarning.
    """
    max_value = ByteSizeConf.MAX_VALUE
    if 0 <= bits <= max_value:
        return bits

    if ByteSizeConf.OVERFLOW == "saturate":
        bound = 0 if bits < 0 else max_value
        warnings.warn(
            f"ByteSize {operation} result of {bits} bits saturated to {bound}",
            RuntimeWarning,
            stacklevel=3
        )
        return bound

    raise ValueOverflowError(f"{operation} result of {bits} bits is outside [0, {max_value}]")
