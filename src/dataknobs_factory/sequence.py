"""Sequence generator cycling through a fixed list of values by item index.

Typical usage example:

    ```python
    from dataknobs_factory import Factory, sequence

    class UserFactory(Factory):
        define = {
            "id": sequence(lambda index: index + 1),
            "role": sequence(["admin", "editor", "viewer"]),
        }

    UserFactory().create(4)
    # [{'id': 1, 'role': 'admin'}, {'id': 2, 'role': 'editor'},
    #  {'id': 3, 'role': 'viewer'}, {'id': 4, 'role': 'admin'}]
    ```
"""

import logging
from collections.abc import Callable
from typing import Any, Generic, List, TypeVar, Union

from dataknobs_factory.exceptions import ValidationError
from dataknobs_factory.random_source import RandomSource
from dataknobs_factory.settings import get_settings
from dataknobs_factory.utils import randomize_list

logger = logging.getLogger(__name__)

T = TypeVar("T")

SequenceArgument = Union[T, Callable[[int], T]]


class _NoFallback:
    def __repr__(self) -> str:
        return "NO_FALLBACK"


NO_FALLBACK: Any = _NoFallback()


class Sequence(Generic[T]):
    """Field generator that picks a value by the item's index in the batch.

    Entries are used cyclically (``values[index % len(values)]``). An entry
    that is a function (any callable other than a class) is called as
    ``entry(index)`` and its result is used. Classes are returned as is.

    When fewer items are requested than there are entries, two policies can
    apply:

    - ``fallback``: if configured, every item gets the fallback value as is
      (it is never called). Any value other than ``None`` counts as
      configured, including ``0``, ``""`` and ``False``.
    - ``randomize_if_not_enough_items``: entries are taken from a shuffled
      copy of the values, built once per Sequence instance and reused across
      calls. Indexes past the end of the shuffled copy wrap around.

    Attributes:
        values: The ordered entries
        fallback: Configured fallback, ``None`` or ``NO_FALLBACK``
        randomize_if_not_enough_items: Whether the shuffled copy is used

    Args:
        values: A list (or tuple) of entries, or a single entry
        fallback: Value returned when the batch is smaller than ``values``
        randomize_if_not_enough_items: Use a shuffled copy of the entries.
            Defaults to the current factory settings.
        rng: Random source for the shuffle
    """

    def __init__(
        self,
        values: Union[List[SequenceArgument[T]], SequenceArgument[T]],
        fallback: Any = NO_FALLBACK,
        randomize_if_not_enough_items: bool | None = None,
        rng: RandomSource | None = None,
    ) -> None:
        self.values: List[SequenceArgument[T]] = (
            list(values) if isinstance(values, (list, tuple)) else [values]
        )
        if not self.values:
            raise ValidationError("Sequence requires at least one value")
        self.fallback = fallback
        if randomize_if_not_enough_items is None:
            randomize_if_not_enough_items = get_settings().randomize_if_not_enough_items
        self.randomize_if_not_enough_items = randomize_if_not_enough_items
        self._rng = rng
        self._randomized: List[SequenceArgument[T]] | None = None

    @property
    def has_fallback(self) -> bool:
        return self.fallback is not NO_FALLBACK and self.fallback is not None

    def _evaluate_randomized(self, index: int) -> SequenceArgument[T]:
        if self._randomized is None:
            self._randomized = randomize_list(self.values, self._rng)
            logger.debug("Built randomized sequence of %d values", len(self._randomized))
        return self._randomized[index % len(self._randomized)]

    def _evaluate_normal(self, index: int) -> SequenceArgument[T]:
        return self.values[index % len(self.values)]

    def evaluate(self, index: int, items_to_create: int) -> Any:
        """Resolve the value for the item at ``index``.

        Args:
            index: Zero-based position of the item within the batch
            items_to_create: Total number of items in the batch

        Returns:
            The fallback, or the selected entry (called with ``index`` if it is a function)
        """
        if items_to_create < len(self.values) and self.has_fallback:
            return self.fallback

        if self.randomize_if_not_enough_items:
            value = self._evaluate_randomized(index)
        else:
            value = self._evaluate_normal(index)

        if callable(value) and not isinstance(value, type):
            return value(index)
        return value

    def __repr__(self) -> str:
        return f"Sequence({self.values!r})"


def sequence(
    values: Union[List[SequenceArgument[T]], SequenceArgument[T]],
    fallback: Any = NO_FALLBACK,
    randomize_if_not_enough_items: bool | None = None,
    rng: RandomSource | None = None,
) -> Sequence[T]:
    """Create a Sequence field generator.

    Example:
        ```python
        sequence([5, 0, 1])                  # 5, 0, 1, 5, 0, ...
        sequence([5, 0, 1], fallback=100)    # 100 when fewer than 3 items
        sequence(lambda index: f"user-{index}")
        ```
    """
    return Sequence(
        values,
        fallback=fallback,
        randomize_if_not_enough_items=randomize_if_not_enough_items,
        rng=rng,
    )
