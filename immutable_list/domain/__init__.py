"""Domain layer - the immutable List and its supporting helpers."""

from . import entities, randomness
from .entities import List, json_default, resolve_index
from .errors import InvalidArgumentError
from .randomness import get_random, seed_random

__all__ = [
    # Modules
    "entities",
    "randomness",
    # Key domain types
    "InvalidArgumentError",
    "List",
    "json_default",
    "resolve_index",
    # Random source
    "get_random",
    "seed_random",
]
