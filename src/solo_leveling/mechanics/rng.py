"""Random sources for reward and drop rolls."""
from __future__ import annotations

import random
from collections.abc import Iterable, Sequence
from typing import Protocol, TypeVar

T = TypeVar("T")


class RandomSource(Protocol):
    """Anything that yields uniform floats in [0, 1).

    ``random.Random`` instances and the ``random`` module both qualify.
    """

    def random(self) -> float: ...


class RandomSourceExhausted(RuntimeError):
    """A scripted source was asked for more draws than it holds."""


class ScriptedRandom:
    """Deterministic source that replays a fixed sequence of draws."""

    def __init__(self, values: Iterable[float]) -> None:
        self._values = list(values)
        self._pos = 0

    def random(self) -> float:
        if self._pos >= len(self._values):
            raise RandomSourceExhausted(
                f"Scripted source exhausted after {len(self._values)} draws"
            )
        value = self._values[self._pos]
        self._pos += 1
        return value

    @property
    def draws(self) -> int:
        """How many values have been consumed."""
        return self._pos

    @property
    def remaining(self) -> int:
        return len(self._values) - self._pos


def resolve(rng: RandomSource | None) -> RandomSource:
    """Fall back to the module-level system source when none is given."""
    return rng if rng is not None else random


def pick(rng: RandomSource, options: Sequence[T]) -> T:
    """Uniformly pick one element using a single draw."""
    return options[int(rng.random() * len(options))]


def randint(rng: RandomSource, low: int, high: int) -> int:
    """Inclusive integer in [low, high] using a single draw."""
    return low + int(rng.random() * (high - low + 1))
