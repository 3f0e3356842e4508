"""Weighted choice generator.

``chance()`` takes ``(count, value)`` pairs and guarantees that across every
run of ``sum(counts)`` consecutive items each value appears exactly ``count``
times. Only the order is random.

Typical usage example:

    ```python
    from dataknobs_factory import Factory, chance, or_none

    class OrderFactory(Factory):
        define = {
            "status": chance([(7, "paid"), (2, "pending"), (1, "refunded")]),
            "coupon": or_none("SPRING", chance=30),
        }

    orders = OrderFactory().create(10)
    # exactly 7 paid, 2 pending, 1 refunded
    ```
"""

import math
from typing import Any, Generic, Iterable, List, Tuple, TypeVar

from dataknobs_factory.descriptors import UNDEFINED
from dataknobs_factory.exceptions import ValidationError
from dataknobs_factory.random_source import RandomSource
from dataknobs_factory.settings import get_settings
from dataknobs_factory.utils import randomize_list

T = TypeVar("T")


class Chance(Generic[T]):
    """Field generator producing each value an exact number of times.

    The pairs are expanded into a flat list (each value repeated ``count``
    times, in input order) which is shuffled once at construction. Evaluation
    indexes into that fixed list modulo its length and never reshuffles.

    Attributes:
        values: The flat, shuffled list of values

    Args:
        values: ``(count, value)`` pairs
        rng: Random source for the shuffle

    Raises:
        ValidationError: If a count is negative or not an integer, or if all
            counts are zero
    """

    def __init__(
        self,
        values: Iterable[Tuple[int, T]],
        rng: RandomSource | None = None,
    ) -> None:
        flat_values: List[T] = []
        for count, value in values:
            if isinstance(count, bool) or not isinstance(count, int) or count < 0:
                raise ValidationError(
                    "Chance counts must be non-negative integers",
                    context={"count": count, "value": value},
                )
            flat_values.extend([value] * count)

        if not flat_values:
            raise ValidationError("Chance requires at least one positive count")

        self.values: List[T] = randomize_list(flat_values, rng)

    def evaluate(self, index: int) -> T:
        return self.values[index % len(self.values)]

    def __repr__(self) -> str:
        return f"Chance({len(self.values)} slots)"


def chance(values: Iterable[Tuple[int, T]], rng: RandomSource | None = None) -> Chance[T]:
    """Create a Chance field generator from ``(count, value)`` pairs."""
    return Chance(values, rng=rng)


def simple_chance(
    value: T,
    chance: float | None,
    second_value: Any,
    rng: RandomSource | None = None,
) -> Chance[Any]:
    """Create a two-outcome Chance out of 100 slots.

    Args:
        value: Primary value
        chance: Percentage of slots given to ``value``. Fractions are floored
            and the sign is dropped. Defaults to the current factory settings.
        second_value: Value for the remaining slots
        rng: Random source for the shuffle

    Returns:
        Chance producing ``value`` ``chance`` times out of every 100 items

    Raises:
        ValidationError: If the percentage is not between 1 and 99
    """
    if chance is None:
        chance = get_settings().chance_percentage
    safe_chance = abs(math.floor(chance))
    if safe_chance == 0 or safe_chance >= 100:
        raise ValidationError(
            "Chance must be an integer between 1 and 99",
            context={"chance": chance},
        )

    return Chance([(safe_chance, value), (100 - safe_chance, second_value)], rng=rng)


def or_none(value: T, chance: float | None = None, rng: RandomSource | None = None) -> Chance[Any]:
    """Produce ``value`` ``chance`` percent of the time, otherwise ``None``."""
    return simple_chance(value, chance, None, rng=rng)


def or_undefined(
    value: T, chance: float | None = None, rng: RandomSource | None = None
) -> Chance[Any]:
    """Produce ``value`` ``chance`` percent of the time, otherwise omit the field."""
    return simple_chance(value, chance, UNDEFINED, rng=rng)
