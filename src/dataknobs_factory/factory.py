"""Factory base class: declare a data shape once, create instances on demand.

A factory is a subclass of ``Factory`` with a ``define`` class attribute
mapping field names to descriptors. Each descriptor is resolved per created
item:

=========================  ====================================================
Descriptor                 Resolved value
=========================  ====================================================
``sequence(...)``          entry chosen by the item index (see Sequence)
``chance(...)``            weighted value chosen by the item index
``many(FactoryClass)``     list of nested instances of random length
``FactoryClass``           one nested instance, ``FactoryClass().create()``
any other callable         result of calling it with no arguments
anything else              the value itself
=========================  ====================================================

Typical usage example:

    ```python
    import random

    from dataknobs_factory import Factory, many, sequence

    class DogFactory(Factory):
        define = {"name": "Cooper"}

    class PersonFactory(Factory):
        define = {
            "id": sequence(lambda index: index + 1),
            "name": "Mark",
            "age": lambda: random.randint(18, 90),
            "dog": DogFactory,
            "friends": many(DogFactory, min=0, max=3),
        }

        def named(self, name):
            return self.override({"name": name})

    person = PersonFactory().named("Arthur").create()
    people = PersonFactory().omit(["friends"]).create(10)
    ```
"""

import logging
from collections.abc import Callable, Iterable, Mapping
from typing import Any, ClassVar, Dict, List, TypeVar, Union, overload

from dataknobs_factory.chance import Chance
from dataknobs_factory.descriptors import UNDEFINED, NestedFactory, normalize_definition
from dataknobs_factory.exceptions import ValidationError
from dataknobs_factory.many import ManySubFactories
from dataknobs_factory.sequence import Sequence
from dataknobs_factory.utils import times

logger = logging.getLogger(__name__)

F = TypeVar("F", bound="Factory")

Override = Union[Mapping[str, Any], Callable[[], Mapping[str, Any]]]


class Factory:
    """Base class for declarative test-data factories.

    Subclasses set ``define``. Every instance works on its own normalized
    copy of that mapping, so ``override``, ``pick`` and ``omit`` only affect
    the instance they are called on. These methods return ``self`` and can be
    chained; "states" are naturally written as subclass methods that call
    ``override``.

    Attributes:
        define: Class-level field name to descriptor mapping

    Example:
        ```python
        class ResourceFactory(Factory):
            define = {"id": 0, "name": "resource"}

        ResourceFactory().create()
        # {'id': 0, 'name': 'resource'}

        ResourceFactory().override({"id": 1}).create(2)
        # [{'id': 1, 'name': 'resource'}, {'id': 1, 'name': 'resource'}]
        ```
    """

    define: ClassVar[Dict[str, Any]] = {}

    def __init__(self) -> None:
        self._definition: Dict[str, Any] = normalize_definition(type(self).define)

    @property
    def definition(self) -> Dict[str, Any]:
        """Copy of the current (normalized) definition of this instance."""
        return dict(self._definition)

    def _resolve(self, descriptor: Any, index: int, items_to_create: int) -> Any:
        if isinstance(descriptor, Sequence):
            return descriptor.evaluate(index, items_to_create)
        if isinstance(descriptor, Chance):
            return descriptor.evaluate(index)
        if isinstance(descriptor, ManySubFactories):
            return descriptor.evaluate()
        if isinstance(descriptor, NestedFactory):
            return descriptor.evaluate()
        if callable(descriptor):
            return descriptor()
        return descriptor

    def evaluate_definition(self, index: int, items_to_create: int) -> Dict[str, Any]:
        """Resolve every field descriptor for one item.

        Fields resolving to ``UNDEFINED`` are left out of the result.

        Args:
            index: Zero-based position of the item within the batch
            items_to_create: Total number of items in the batch

        Returns:
            The created item
        """
        item: Dict[str, Any] = {}
        for field_name, descriptor in self._definition.items():
            value = self._resolve(descriptor, index, items_to_create)
            if value is not UNDEFINED:
                item[field_name] = value
        return item

    def override(self: F, overrides: Override) -> F:
        """Replace field descriptors, keeping every field not mentioned.

        Args:
            overrides: Partial definition, or a zero-argument function
                returning one

        Returns:
            This factory, for chaining

        Raises:
            ValidationError: If ``overrides`` does not produce a mapping
        """
        new_definition = normalize_definition(overrides)
        self._definition = {**self._definition, **new_definition}
        logger.debug("%s overrides %s", type(self).__name__, sorted(new_definition))
        return self

    def pick(self: F, keys: Iterable[str]) -> F:
        """Keep only the listed fields; the others are never evaluated.

        A single field name may be passed as a plain string.

        Example:
            ```python
            PersonFactory().pick(["id"]).create()  # {'id': ...}
            ```
        """
        keys = {keys} if isinstance(keys, str) else set(keys)
        self._definition = {
            key: value for key, value in self._definition.items() if key in keys
        }
        logger.debug("%s picks %s", type(self).__name__, sorted(keys))
        return self

    def omit(self: F, keys: Iterable[str]) -> F:
        """Drop the listed fields; they are never evaluated."""
        keys = {keys} if isinstance(keys, str) else set(keys)
        self._definition = {
            key: value for key, value in self._definition.items() if key not in keys
        }
        logger.debug("%s omits %s", type(self).__name__, sorted(keys))
        return self

    @overload
    def create(self) -> Dict[str, Any]:
        ...

    @overload
    def create(
        self: F,
        number: int,
        handler: Callable[[int, F], Any] | None = None,
    ) -> List[Any]:
        ...

    def create(self, number=None, handler=None):
        """Create one item, or a batch of ``number`` items.

        Without arguments a single item is evaluated as index 0 of a batch of
        one. With ``number``, items are evaluated for indexes ``0`` to
        ``number - 1`` in order, each seeing ``number`` as the batch size.
        With ``handler``, each element is ``handler(index, factory)`` instead
        of the default evaluation.

        Args:
            number: How many items to create
            handler: Optional per-index replacement for the default evaluation

        Returns:
            A single item (dict) when ``number`` is omitted, otherwise a list

        Raises:
            ValidationError: If ``number`` is not a non-negative integer, or if
                ``handler`` is given without ``number``
        """
        if number is None:
            if handler is not None:
                raise ValidationError("A handler requires the number of items to create")
            return self.evaluate_definition(0, 1)

        if isinstance(number, bool) or not isinstance(number, int) or number < 0:
            raise ValidationError(
                "Number of items must be a non-negative integer",
                context={"number": number},
            )

        logger.debug(
            "Creating %d %s items%s",
            number,
            type(self).__name__,
            " with handler" if handler is not None else "",
        )
        if handler is not None:
            return times(lambda index: handler(index, self), number)
        return times(lambda index: self.evaluate_definition(index, number), number)
