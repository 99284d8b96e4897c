"""
Type-aware formatters for exception messages.

Broken __repr__ methods and oversized values are handled gracefully.
"""

# Standard library -----------------------------------------------------------------------------------------------------
from typing import Any

PRIMITIVE_TYPES = (
    type(None),
    bool,  # Comes before int (is subclass of int)
    int,
    float,
    str,
    bytes,
)


# Methods --------------------------------------------------------------------------------------------------------------

def fmt_type(obj: Any, *, fully_qualified: bool = False) -> str:
    """
    Format type information of an object or a type.

    Examples:
        >>> fmt_type(42)
        '<int>'
        >>> fmt_type(ValueError)
        '<ValueError>'
    """
    cls = obj if isinstance(obj, type) else type(obj)
    name = getattr(cls, "__name__", "?")
    if fully_qualified and cls.__module__ != "builtins":
        name = f"{cls.__module__}.{name}"
    return f"<{name}>"


def fmt_value(obj: Any, *, max_repr: int = 80) -> str:
    """
    Format a single value for an exception message.

    Primitives are shown as their repr, everything else as a type-value pair.

    Examples:
        >>> fmt_value("10 XB")
        "'10 XB'"
        >>> fmt_value([1, 2])
        '<list: [1, 2]>'
    """
    repr_ = _fmt_truncate(_safe_repr(obj), max_repr)
    if type(obj) in PRIMITIVE_TYPES:
        return repr_
    return f"<{type(obj).__name__}: {repr_}>"


# Private Methods ------------------------------------------------------------------------------------------------------

def _fmt_truncate(repr_: str, max_len: int, ellipsis: str = "...") -> str:
    """Truncate to max_len characters, keeping the closing quote of quoted reprs."""
    if len(repr_) <= max_len:
        return repr_
    if len(repr_) >= 2 and repr_[0] in ("'", '"') and repr_[-1] == repr_[0]:
        return f"{repr_[:max(2, max_len)]}{ellipsis}{repr_[0]}"
    return repr_[:max(1, max_len)] + ellipsis


def _safe_repr(obj: Any) -> str:
    try:
        return repr(obj)
    except Exception as e:
        return f"<{type(obj).__name__} object (repr failed: {type(e).__name__})>"
