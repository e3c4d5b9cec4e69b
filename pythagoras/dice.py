"""Random-source helpers; every roll goes through an injected generator."""

import random
from typing import Optional, Protocol

from pythagoras.config import DAMAGE_VARIANCE


class RandomSource(Protocol):
    def random(self) -> float: ...

    def randint(self, a: int, b: int) -> int: ...


def make_rng(seed: Optional[int] = None) -> random.Random:
    return random.Random(seed)


def chance(rng: RandomSource, probability: float) -> bool:
    return rng.random() < probability


def variance_factor(rng: RandomSource) -> float:
    """Uniform factor in [low, high); the upper bound is never returned."""
    low, high = DAMAGE_VARIANCE
    return low + rng.random() * (high - low)


def roll_d10(rng: RandomSource) -> int:
    return rng.randint(1, 10)
