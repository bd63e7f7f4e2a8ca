"""Reseedable pseudorandom source shared by all generator decisions.

A string seed is hashed with xmur3 into a 32-bit state, numeric seeds are
reduced modulo 2**32, and the state drives a mulberry32 stream. The same
seed therefore yields the same sequence of draws on every platform, which
keeps seeded grids reproducible byte for byte.
"""

from __future__ import annotations

import math
import random
from typing import Callable, List, MutableSequence, Optional, Sequence, TypeVar, Union

T = TypeVar("T")

MASK_32 = 0xFFFFFFFF


def _imul(a: int, b: int) -> int:
    return (a * b) & MASK_32


def xmur3(text: str) -> Callable[[], int]:
    """Return a generator of 32-bit hashes derived from ``text``."""

    raw = text.encode("utf-16-le")
    units = [int.from_bytes(raw[i:i + 2], "little") for i in range(0, len(raw), 2)]
    h = 1779033703 ^ len(units)
    for unit in units:
        h = _imul(h ^ unit, 3432918353)
        h = ((h << 13) & MASK_32) | (h >> 19)

    def next_hash() -> int:
        nonlocal h
        h = _imul(h ^ (h >> 16), 2246822507)
        h = _imul(h ^ (h >> 13), 3266489909)
        h ^= h >> 16
        return h

    return next_hash


def mulberry32(state: int) -> Callable[[], float]:
    """Return a float stream in [0, 1) seeded with a 32-bit ``state``."""

    a = state & MASK_32

    def next_float() -> float:
        nonlocal a
        a = (a + 0x6D2B79F5) & MASK_32
        t = _imul(a ^ (a >> 15), a | 1)
        t ^= (t + _imul(t ^ (t >> 7), t | 61)) & MASK_32
        return ((t ^ (t >> 14)) & MASK_32) / 4294967296

    return next_float


def seed_to_state(seed: Union[int, float, str]) -> int:
    if isinstance(seed, (int, float)) and not isinstance(seed, bool):
        if isinstance(seed, float) and not math.isfinite(seed):
            return 0
        return int(seed) & MASK_32
    return xmur3(str(seed))()


class SeededRandom:
    """Deterministic random helper; falls back to ``random`` without a seed."""

    def __init__(self, seed: Optional[Union[int, float, str]] = None) -> None:
        self.seed = seed
        if seed is None:
            self._next = random.Random().random
        else:
            self._next = mulberry32(seed_to_state(seed))

    def random(self) -> float:
        return self._next()

    def randbelow(self, n: int) -> int:
        return int(self._next() * n)

    def choice(self, seq: Sequence[T]) -> T:
        if not seq:
            raise IndexError("Cannot choose from an empty sequence")
        return seq[self.randbelow(len(seq))]

    def shuffle(self, items: MutableSequence[T]) -> MutableSequence[T]:
        for i in range(len(items) - 1, 0, -1):
            j = self.randbelow(i + 1)
            items[i], items[j] = items[j], items[i]
        return items

    def shuffled(self, items: Sequence[T]) -> List[T]:
        result = list(items)
        self.shuffle(result)
        return result
