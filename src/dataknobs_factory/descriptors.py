"""Explicit descriptor kinds decided when a definition is declared.

A field descriptor is one of:

- ``Sequence`` / ``Chance`` / ``ManySubFactories`` generator objects
- ``NestedFactory``: a reference to another factory class, producing one
  nested instance
- any other callable: a producer invoked with no arguments
- anything else: a literal value

Classes that expose a ``create`` attribute (``Factory`` subclasses and
duck-typed equivalents) are wrapped in ``NestedFactory`` by
``normalize_definition``, so evaluation never has to guess whether a class
should be instantiated as a factory or called as a producer.
"""

from collections.abc import Callable, Mapping
from typing import Any, Dict

from dataknobs_factory.exceptions import ValidationError


class _Undefined:
    """Marker for a field that should be left out of the produced instance."""

    _instance = None

    def __new__(cls) -> "_Undefined":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNDEFINED"

    def __bool__(self) -> bool:
        return False

    def __copy__(self) -> "_Undefined":
        return self

    def __deepcopy__(self, memo: Dict[int, Any]) -> "_Undefined":
        return self


UNDEFINED = _Undefined()


class NestedFactory:
    """Reference to a factory class that produces one nested instance.

    Args:
        factory_class: Class constructed with no arguments whose instances
            expose ``create()``
    """

    def __init__(self, factory_class: type) -> None:
        self.factory_class = factory_class

    def evaluate(self) -> Any:
        return self.factory_class().create()

    def __eq__(self, other: object) -> bool:
        return isinstance(other, NestedFactory) and other.factory_class is self.factory_class

    def __hash__(self) -> int:
        return hash(self.factory_class)

    def __repr__(self) -> str:
        return f"NestedFactory({self.factory_class.__name__})"


def is_factory_class(value: Any) -> bool:
    """Check whether ``value`` is a class whose instances can ``create()``."""
    return isinstance(value, type) and callable(getattr(value, "create", None))


def normalize_descriptor(value: Any) -> Any:
    """Wrap factory class references, leave every other descriptor as is."""
    if is_factory_class(value):
        return NestedFactory(value)
    return value


def normalize_definition(
    definition: Mapping[str, Any] | Callable[[], Mapping[str, Any]],
) -> Dict[str, Any]:
    """Return a normalized copy of a definition mapping.

    Args:
        definition: Field name to descriptor mapping, or a zero-argument
            function returning one

    Returns:
        New dict with factory class references wrapped in NestedFactory
    """
    if callable(definition) and not isinstance(definition, Mapping):
        definition = definition()
    if not isinstance(definition, Mapping):
        raise ValidationError(
            "Definition must be a mapping of field names to descriptors",
            context={"type": type(definition).__name__},
        )
    return {key: normalize_descriptor(value) for key, value in definition.items()}
