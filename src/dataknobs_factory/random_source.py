"""Uniform random source used by the randomized generators.

Sequence, Chance and ManySubFactories only ever need uniform floats in
[0, 1). They accept any object with a ``random()`` method, so tests can pass
a deterministic source instead of patching the global generator.
"""

import random
from typing import Protocol, runtime_checkable


@runtime_checkable
class RandomSource(Protocol):
    """Anything that yields uniform floats in [0, 1)."""

    def random(self) -> float:
        ...


_default_source: RandomSource = random.Random()


def get_default_source() -> RandomSource:
    """Return the process-wide random source shared by all generators.

    Returns:
        The shared random source
    """
    return _default_source


def resolve_source(rng: RandomSource | None) -> RandomSource:
    """Return ``rng`` if given, otherwise the shared default source."""
    return rng if rng is not None else _default_source
