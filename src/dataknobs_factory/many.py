"""Collection generator producing a random number of nested instances."""

import logging
from typing import Any, Generic, List, TypeVar

from dataknobs_factory.exceptions import ValidationError
from dataknobs_factory.random_source import RandomSource
from dataknobs_factory.settings import get_settings
from dataknobs_factory.utils import random_integer

logger = logging.getLogger(__name__)

T = TypeVar("T")


class ManySubFactories(Generic[T]):
    """Field generator returning a list of nested factory instances.

    The nested factory is instantiated once, at construction, and every
    evaluation asks it for a batch. Each evaluation draws a fresh length
    uniformly from ``[min, max]``, independently of the item index.

    Attributes:
        object: The owned nested factory instance
        min: Smallest list length (inclusive)
        max: Largest list length (inclusive)

    Args:
        factory_class: Factory class, constructed with no arguments
        min: Smallest list length, defaults to the ``many_min`` setting
        max: Largest list length, defaults to the ``many_max`` setting
        rng: Random source for the length draw

    Raises:
        ValidationError: If ``min`` is negative or greater than ``max``

    Example:
        ```python
        class CommentFactory(Factory):
            define = {"body": "Nice post"}

        class PostFactory(Factory):
            define = {"comments": many(CommentFactory, min=2, max=4)}

        len(PostFactory().create()["comments"])  # 2, 3 or 4
        ```
    """

    def __init__(
        self,
        factory_class: type,
        min: int | None = None,
        max: int | None = None,
        rng: RandomSource | None = None,
    ) -> None:
        settings = get_settings()
        self.min = settings.many_min if min is None else min
        self.max = settings.many_max if max is None else max
        if self.min < 0:
            raise ValidationError("min must be >= 0", context={"min": self.min})
        if self.min > self.max:
            raise ValidationError(
                "min must not exceed max", context={"min": self.min, "max": self.max}
            )
        self._rng = rng
        self.object = factory_class()

    def evaluate(self) -> List[T]:
        count = random_integer(self.min, self.max, self._rng)
        logger.debug(
            "Creating %d nested %s instances", count, type(self.object).__name__
        )
        return self.object.create(count)

    def __repr__(self) -> str:
        return f"ManySubFactories({type(self.object).__name__}, min={self.min}, max={self.max})"


def many(
    factory_class: type,
    min: int | None = None,
    max: int | None = None,
    rng: RandomSource | None = None,
) -> ManySubFactories[Any]:
    """Create a ManySubFactories field generator."""
    return ManySubFactories(factory_class, min=min, max=max, rng=rng)
