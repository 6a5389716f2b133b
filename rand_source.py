# rand_source.py
"""
Uniform random sources used by the generators.

A source supplies two things:
    - next_probability(): a float in [0, 1), one per Bernoulli trial.
    - choose(candidates): a uniform pick from a non-empty sequence.

Two backends are provided, the stdlib `random` module and NumPy's
Generator. Both are seeded from fresh entropy unless a seed is given.
"""

import random
from typing import Optional, Sequence, TypeVar

import numpy as np


T = TypeVar("T")

RNG_KINDS = ("python", "numpy")


class EmptyWeightChoice(ValueError):
    """Raised when a pick is attempted against an empty candidate list."""


class RandomSource:
    def next_probability(self) -> float:
        raise NotImplementedError

    def choose(self, candidates: Sequence[T]) -> T:
        raise NotImplementedError


class PyRandomSource(RandomSource):
    def __init__(self, seed: Optional[int] = None):
        self._rng = random.Random(seed)

    def next_probability(self) -> float:
        return self._rng.random()

    def choose(self, candidates: Sequence[T]) -> T:
        if not candidates:
            raise EmptyWeightChoice("cannot choose from an empty candidate list")
        return self._rng.choice(candidates)


class NumpyRandomSource(RandomSource):
    def __init__(self, seed: Optional[int] = None):
        self._rng = np.random.default_rng(seed)

    def next_probability(self) -> float:
        return float(self._rng.random())

    def choose(self, candidates: Sequence[T]) -> T:
        if not candidates:
            raise EmptyWeightChoice("cannot choose from an empty candidate list")
        # rng.choice would coerce the candidates into a numpy array
        return candidates[int(self._rng.integers(len(candidates)))]


def make_random_source(kind: str = "python", seed: Optional[int] = None) -> RandomSource:
    if kind == "python":
        return PyRandomSource(seed)
    if kind == "numpy":
        return NumpyRandomSource(seed)
    raise ValueError(f"unknown random source {kind!r} (expected one of {', '.join(RNG_KINDS)})")
