"""Shared fixtures for the unit tests."""

from pythagoras.bootstrap import create_app
from pythagoras.message_log import MessageLog
from pythagoras.models import Player


class ScriptedRandom:
    """Random source that replays fixed values in order."""

    def __init__(self, randoms=(), ints=()):
        self._randoms = list(randoms)
        self._ints = list(ints)

    def random(self) -> float:
        if not self._randoms:
            raise AssertionError("random() called more times than scripted")
        return self._randoms.pop(0)

    def randint(self, a: int, b: int) -> int:
        if not self._ints:
            raise AssertionError("randint() called more times than scripted")
        value = self._ints.pop(0)
        if not a <= value <= b:
            raise AssertionError(f"scripted value {value} outside [{a}, {b}]")
        return value

    def extend(self, randoms=(), ints=()):
        self._randoms.extend(randoms)
        self._ints.extend(ints)

    def remaining(self) -> int:
        return len(self._randoms) + len(self._ints)


def make_app(randoms=(), ints=()):
    rng = ScriptedRandom(randoms=randoms, ints=ints)
    return create_app(rng=rng), rng


def make_player(**overrides) -> Player:
    player = Player.new()
    for key, value in overrides.items():
        setattr(player, key, value)
    return player


def make_log() -> MessageLog:
    return MessageLog()
