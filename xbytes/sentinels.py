"""
Sentinel for distinguishing an unprovided optional argument from None.

Example:
    >>> def merge(precision: int | UnsetType = UNSET):
    ...     return ifnotunset(precision, default=2)
    >>> merge(), merge(None)
    (2, None)
"""

from typing import Any, Final

__all__ = [
    'UNSET',
    'UnsetType',
    'ifnotunset',
]


class UnsetType:
    """
    Singleton type of the UNSET sentinel.

    Compared by identity, hashed by identity and always falsy.
    """
    __slots__ = ()

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return '<UNSET>'

    def __bool__(self) -> bool:
        return False

    def __reduce__(self):
        return (UnsetType, ())


UNSET: Final = UnsetType()


def ifnotunset(value: Any, *, default: Any) -> Any:
    """Return default if value is UNSET, otherwise return value."""
    return default if value is UNSET else value
