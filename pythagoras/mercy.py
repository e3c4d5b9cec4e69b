"""Probability roll for sparing a generic opponent."""

import logging
from dataclasses import dataclass

from pythagoras.config import MERCY_CHANCE
from pythagoras.dice import RandomSource, roll_d10

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MercyResult:
    roll: int
    success: bool


def attempt_mercy(rng: RandomSource, mercy_chance: int = MERCY_CHANCE) -> MercyResult:
    roll = roll_d10(rng)
    result = MercyResult(roll=roll, success=mercy_chance >= roll)
    logger.debug("Mercy roll %d against %d: %s", roll, mercy_chance, result.success)
    return result
