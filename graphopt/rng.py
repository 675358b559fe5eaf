"""Deterministic 32-bit Mersenne Twister (MT19937) seeded like the reference generator."""

from __future__ import annotations

import math
import random as _random
from collections.abc import Callable, MutableSequence
from typing import TypeVar

_MASK32 = 0xFFFFFFFF
_STATE_SIZE = 624

T = TypeVar("T")


def _init_genrand(seed: int) -> list[int]:
    state = [seed & _MASK32]
    for i in range(1, _STATE_SIZE):
        prev = state[-1]
        state.append((1812433253 * (prev ^ (prev >> 30)) + i) & _MASK32)
    return state


class Random:
    """MT19937 generator with single-integer seeding and reproducible helpers."""

    MAX = _MASK32

    def __init__(self, seed: int) -> None:
        self._gen = _random.Random()
        state = _init_genrand(seed)
        self._gen.setstate((3, tuple(state + [_STATE_SIZE]), None))

    def __call__(self) -> int:
        """Next raw 32-bit unsigned output."""
        return self._gen.getrandbits(32)

    def rand_int(self) -> int:
        """Next output reinterpreted as a signed 32-bit integer."""
        value = self()
        return value - (1 << 32) if value >= (1 << 31) else value

    def rand_double(self) -> float:
        """Uniform double in [0, 1)."""
        return self() / (self.MAX + 1.0)

    def rand_exp(self) -> float:
        """Exponential variate with mean 1."""
        return -math.log1p(-self.rand_double())

    def uniform(self, bound: int) -> int:
        """Integer in [0, bound) taken as the raw output modulo ``bound``."""
        if bound <= 0:
            raise ValueError(f"bound must be positive, got {bound}")
        return self() % bound


def shuffle(items: MutableSequence[T], rng: Callable[[], int]) -> None:
    """Shuffle ``items`` in place with a fixed, platform-independent algorithm."""
    size = len(items)
    for start in range(size - 1):
        j = start + rng() % (size - start)
        items[start], items[j] = items[j], items[start]