from __future__ import annotations

"""Randomness helpers for seeding and unbiased sampling."""

import os
import random
from typing import List, Optional, Sequence, TypeVar

T = TypeVar("T")


def seed_from_env() -> Optional[int]:
    """Return the integer in the SEED env var, or None if unset/invalid."""
    seed = os.environ.get("SEED")
    if seed is None:
        return None
    try:
        return int(seed)
    except ValueError:
        return None


def make_rng(seed: Optional[int] = None) -> random.Random:
    """Build a private RNG, seeded explicitly or from SEED if set."""
    if seed is None:
        seed = seed_from_env()
    return random.Random(seed)


def shuffled(items: Sequence[T], rng: random.Random) -> List[T]:
    """Return a Fisher-Yates shuffled copy of items."""
    out = list(items)
    for i in range(len(out) - 1, 0, -1):
        j = rng.randrange(i + 1)
        out[i], out[j] = out[j], out[i]
    return out


def sample_distinct(pool: Sequence[T], k: int, rng: random.Random) -> List[T]:
    """Pick k elements of pool without replacement, in random order."""
    if k > len(pool):
        raise ValueError(f"cannot sample {k} items from a pool of {len(pool)}")
    return rng.sample(list(pool), k)


def coin_flip(rng: random.Random) -> bool:
    return rng.random() < 0.5
