"""Deterministic random sources for tests.

Example:
    ```python
    from dataknobs_factory import sequence
    from dataknobs_factory.testing import CountingRandom, ScriptedRandom

    # Always draws 0.0: Fisher-Yates swaps every element with the first
    seq = sequence([1, 2, 3], randomize_if_not_enough_items=True,
                   rng=ScriptedRandom([0.0]))

    # Counts draws made by a real generator
    rng = CountingRandom(seed=42)
    sequence([1, 2, 3, 4], randomize_if_not_enough_items=True, rng=rng)
    ```
"""

import random
from typing import Iterable, List

from dataknobs_factory.exceptions import ValidationError


class ScriptedRandom:
    """Random source replaying a fixed list of floats, cyclically.

    Args:
        values: Floats in [0, 1) to return in order
    """

    def __init__(self, values: Iterable[float]) -> None:
        self.values: List[float] = list(values)
        if not self.values:
            raise ValidationError("ScriptedRandom requires at least one value")
        for value in self.values:
            if not 0.0 <= value < 1.0:
                raise ValidationError(
                    "Scripted random values must be in [0, 1)", context={"value": value}
                )
        self.calls = 0

    def random(self) -> float:
        value = self.values[self.calls % len(self.values)]
        self.calls += 1
        return value


class CountingRandom:
    """Seeded random source that counts how many draws were made.

    Args:
        seed: Seed for the underlying ``random.Random``
    """

    def __init__(self, seed: int | None = None) -> None:
        self._rng = random.Random(seed)
        self.calls = 0

    def random(self) -> float:
        self.calls += 1
        return self._rng.random()
