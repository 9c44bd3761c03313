"""Core domain entities."""

from .sequence import List, json_default

# Shared utilities
from .shared import (
    ItemSet,
    in_bounds,
    is_defined,
    is_numeric,
    require_callable,
    resolve_index,
    same_value,
    strict_key,
)

__all__ = [
    # Sequence entity
    "List",
    "json_default",
    # Shared utilities
    "ItemSet",
    "in_bounds",
    "is_defined",
    "is_numeric",
    "require_callable",
    "resolve_index",
    "same_value",
    "strict_key",
]
