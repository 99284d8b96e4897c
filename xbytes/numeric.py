"""
Standardize numeric magnitudes from Python stdlib and third-party libraries.

Sizes are scaled with exact arithmetic, so every accepted input is normalized
to a Python int, float or fractions.Fraction before it meets a ByteSize.
"""

# Standard library -----------------------------------------------------------------------------------------------------
import math
import operator
from decimal import Decimal
from fractions import Fraction
from typing import Protocol, runtime_checkable

# Local ----------------------------------------------------------------------------------------------------------------
from .formatters import fmt_type, fmt_value


@runtime_checkable
class SupportsFloat(Protocol):
    """Protocol for duck-typed numeric conversion."""

    def __float__(self) -> float: ...


Numeric = int | float | Fraction


def std_numeric(value, *, allow_bool: bool = False) -> Numeric:
    """
    Convert a numeric value to a standard Python int, float or Fraction.

    Detection Priority:
        1. int, float, Fraction → returned unchanged
        2. Decimal → exact Fraction (integer-valued Decimals become int)
        3. __index__() → int (NumPy integers)
        4. .item() → int or float (array scalars)
        5. __float__() → float (general fallback)

    Args:
        value: Numeric value to convert.
        allow_bool: If True, convert bool to int. Booleans are rejected by default
            since bool is a subclass of int and a size of True is most likely a bug.

    Returns:
        int, float or Fraction. Non-finite floats (inf, nan) are passed through,
        callers that need finite values check with is_finite().

    Raises:
        TypeError: If the value is None, a bool (unless allowed) or of an unsupported type.

    Examples:
        >>> std_numeric(42)
        42
        >>> std_numeric(Decimal("1.5"))
        Fraction(3, 2)
        >>> std_numeric(Decimal("3.0"))
        3
    """
    if isinstance(value, bool):
        if allow_bool:
            return int(value)
        raise TypeError(f"boolean values not supported, got {value}")

    if isinstance(value, (int, float, Fraction)):
        return value

    if isinstance(value, Decimal):
        if not value.is_finite():
            return float(value)
        as_fraction = Fraction(value)
        return as_fraction.numerator if as_fraction.denominator == 1 else as_fraction

    # NumPy integer types implement __index__
    if hasattr(value, '__index__'):
        try:
            return operator.index(value)
        except (TypeError, ValueError) as e:
            raise TypeError(f"cannot convert {fmt_type(value)} to int via __index__: {e}") from e

    # Array and tensor scalars
    if hasattr(value, 'item') and callable(value.item):
        try:
            result = value.item()
        except (TypeError, ValueError, AttributeError):
            result = None
        if isinstance(result, (int, float)):
            return std_numeric(result, allow_bool=allow_bool)

    if isinstance(value, SupportsFloat) and not isinstance(value, (str, bytes)):
        try:
            return float(value)
        except (TypeError, ValueError) as e:
            raise TypeError(f"cannot convert {fmt_type(value)} to float: {e}") from e

    raise TypeError(
        f"unsupported numeric type: {fmt_type(value)}. "
        f"Expected int, float, Fraction, Decimal or types implementing __index__, __float__ or .item()"
    )


def exact(value, *, shortest: bool = False) -> Fraction:
    """
    Exact rational value of a number.

    Floats are converted from their binary value, so exact(0.1) is not 1/10.
    With shortest=True a float is read as its shortest round-trip decimal
    instead, so exact(0.1, shortest=True) == Fraction(1, 10).

    Raises:
        TypeError: If the value is not numeric.
        ValueError: If the value is inf or nan.
    """
    num = std_numeric(value)
    if not is_finite(num):
        raise ValueError(f"finite number required, but got {fmt_value(num)}")
    if shortest and isinstance(num, float):
        return Fraction(float.__repr__(num))
    return Fraction(num)


def is_finite(value: Numeric) -> bool:
    """True for ints, Fractions and finite floats."""
    if isinstance(value, float):
        return math.isfinite(value)
    return True


def is_whole(value: Numeric) -> bool:
    """True if the number has no fractional part."""
    if isinstance(value, int):
        return True
    if isinstance(value, Fraction):
        return value.denominator == 1
    return math.isfinite(value) and value.is_integer()
