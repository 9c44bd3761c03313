"""Shared utilities and helper functions for domain entities.

Pure utility functions with zero external dependencies.
"""

from collections.abc import Iterable
from fractions import Fraction
import math
from typing import Any

from immutable_list.domain.errors import InvalidArgumentError


def resolve_index(length: int, index: int) -> int:
    """Resolve a possibly negative index against a sequence length.

    Negative indices count from the end (``-1`` is the last element). The
    result is not clamped; callers decide what an out-of-range index means.
    """
    return length + index if index < 0 else index


def in_bounds(length: int, index: int) -> bool:
    """Check whether a resolved index addresses an existing element."""
    return 0 <= index < length


def is_defined(value: Any) -> bool:
    """Check that a value is not None."""
    return value is not None


def is_numeric(value: Any) -> bool:
    """Check that a value is a finite real number (booleans excluded)."""
    if isinstance(value, bool):
        return False
    if isinstance(value, int | Fraction):
        return True
    return isinstance(value, float) and math.isfinite(value)


def require_callable(value: Any, name: str = "callback") -> None:
    """Raise InvalidArgumentError unless ``value`` can be called."""
    if not callable(value):
        raise InvalidArgumentError(f"'{name}' must be callable")


_SCALAR_TYPES = (type(None), bool, int, float, complex, Fraction, str, bytes)

_NAN_KEY = "nan"
_NEGATIVE_ZERO_KEY = "-0.0"


def strict_key(item: Any) -> tuple[Any, ...]:
    """Key under which two elements count as the same value.

    Immutable scalars match when they have the same type and compare equal
    (NaN matches NaN, 0.0 and -0.0 differ). Every other object matches
    only itself, so two equal but distinct lists or dicts stay different.
    """
    kind = type(item)
    if kind in _SCALAR_TYPES:
        if kind is float and math.isnan(item):
            return (kind, _NAN_KEY)
        if kind is float and item == 0 and math.copysign(1.0, item) < 0:
            return (kind, _NEGATIVE_ZERO_KEY)
        return (kind, item)
    return (object, id(item))


def same_value(first: Any, second: Any) -> bool:
    """Check that two elements are the same value under :func:`strict_key`."""
    return strict_key(first) == strict_key(second)


class ItemSet:
    """Membership set keyed by :func:`strict_key`.

    Members are held alongside their keys so identity keys stay valid for
    the lifetime of the set. Unhashable elements are fine since only their
    identity is hashed.
    """

    __slots__ = ("_members",)

    def __init__(self, items: Iterable[Any] = ()):
        self._members: dict[tuple[Any, ...], Any] = {}
        for item in items:
            self.add(item)

    def add(self, item: Any) -> None:
        self._members.setdefault(strict_key(item), item)

    def discard(self, item: Any) -> None:
        self._members.pop(strict_key(item), None)

    def __contains__(self, item: Any) -> bool:
        return strict_key(item) in self._members

    def __len__(self) -> int:
        return len(self._members)
