"""Ambient random source for shuffle/random operations.

A single ``random.Random`` instance is shared by the process. It is seeded
from ``settings.random.seed`` at import and can be reseeded with
:func:`seed_random` for reproducible tests.
"""

import random

from immutable_list.config import get_logger, settings

logger = get_logger(__name__)

_random = random.Random(settings.random.seed)


def get_random() -> random.Random:
    """Return the ambient random source."""
    return _random


def seed_random(seed: int | None = None) -> None:
    """Reseed the ambient random source.

    Args:
        seed: Seed value, or None to reseed from system entropy
    """
    logger.debug(f"Seeding ambient random source with {seed!r}")
    _random.seed(seed)


def resolve_random(rng: random.Random | None = None) -> random.Random:
    """Return the injected source if given, otherwise the ambient one."""
    return rng if rng is not None else _random
