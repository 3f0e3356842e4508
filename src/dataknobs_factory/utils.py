"""Small helpers shared by the generators and the factory driver."""

import math
from collections.abc import Callable, Mapping
from typing import Any, Dict, List, TypeVar

from dataknobs_factory.random_source import RandomSource, resolve_source

T = TypeVar("T")
V = TypeVar("V")


def times(callback: Callable[[int], T], number: int) -> List[T]:
    """Call ``callback`` with each index in ``range(number)``.

    Args:
        callback: Function receiving the zero-based index
        number: How many times to call it

    Returns:
        The results, in index order
    """
    return [callback(index) for index in range(number)]


def object_map(mapping: Mapping[str, Any], callback: Callable[[Any], V]) -> Dict[str, V]:
    """Build a new dict with ``callback`` applied to every value.

    Keys keep the insertion order of ``mapping``.
    """
    return {key: callback(value) for key, value in mapping.items()}


def random_integer(min_value: int, max_value: int, rng: RandomSource | None = None) -> int:
    """Draw a uniformly distributed integer in ``[min_value, max_value]``.

    Uses exactly one ``random()`` call on the source.

    Args:
        min_value: Lower bound (inclusive)
        max_value: Upper bound (inclusive)
        rng: Random source, defaults to the shared source

    Returns:
        The drawn integer
    """
    source = resolve_source(rng)
    return math.floor(source.random() * (max_value - min_value + 1)) + min_value


def randomize_list(items: List[T], rng: RandomSource | None = None) -> List[T]:
    """Return a Fisher-Yates shuffled copy of ``items``.

    The input list is left untouched. A list of length n consumes n - 1
    random draws.

    Example:
        ```python
        randomize_list([1, 2, 3])  # e.g. [3, 1, 2]
        ```
    """
    result = list(items)
    for index in range(len(result) - 1, 0, -1):
        other = random_integer(0, index, rng)
        result[index], result[other] = result[other], result[index]
    return result
