"""Declarative test-data factories.

The dataknobs-factory package lets you describe the shape of a record once and
create as many instances as a test needs.

## Field descriptors

- **Literal** - any plain value, used as is
- **Producer** - a zero-argument callable, called for every item
- **sequence** - cycles through values by item index, with an optional
  fallback or randomized order when the batch is smaller than the sequence
- **chance** - weighted choice guaranteeing exact counts per cycle;
  ``or_none`` / ``or_undefined`` are two-outcome shortcuts
- **many** - a random-length list of instances from another factory
- **Factory class** - one nested instance from another factory

## Quick Example

```python
from dataknobs_factory import Factory, chance, many, or_none, sequence

class TagFactory(Factory):
    define = {"label": sequence(["red", "green", "blue"])}

class ArticleFactory(Factory):
    define = {
        "id": sequence(lambda index: index + 1),
        "title": "Hello",
        "status": chance([(3, "draft"), (1, "published")]),
        "subtitle": or_none("A subtitle", chance=50),
        "tags": many(TagFactory, min=1, max=3),
    }

article = ArticleFactory().create()
articles = ArticleFactory().override({"title": "Bulk"}).create(20)
ids_only = ArticleFactory().pick(["id"]).create(5)
```

## Settings

Defaults used by the helpers (``many`` bounds, ``or_none`` percentage,
sequence randomization) come from ``FactorySettings`` and can be changed
with ``configure()``, from a YAML/JSON file or from ``DATAKNOBS_FACTORY_*``
environment variables.
"""

from dataknobs_factory.chance import Chance, chance, or_none, or_undefined, simple_chance
from dataknobs_factory.descriptors import UNDEFINED, NestedFactory
from dataknobs_factory.exceptions import ConfigurationError, FactoryError, ValidationError
from dataknobs_factory.factory import Factory
from dataknobs_factory.many import ManySubFactories, many
from dataknobs_factory.random_source import RandomSource, get_default_source
from dataknobs_factory.sequence import NO_FALLBACK, Sequence, sequence
from dataknobs_factory.settings import (
    FactorySettings,
    configure,
    get_settings,
    reset_settings,
)
from dataknobs_factory.utils import object_map, random_integer, randomize_list, times

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Factory
    "Factory",
    "NestedFactory",
    "UNDEFINED",
    # Generators
    "Sequence",
    "sequence",
    "NO_FALLBACK",
    "Chance",
    "chance",
    "simple_chance",
    "or_none",
    "or_undefined",
    "ManySubFactories",
    "many",
    # Randomness
    "RandomSource",
    "get_default_source",
    # Settings
    "FactorySettings",
    "configure",
    "get_settings",
    "reset_settings",
    # Exceptions
    "FactoryError",
    "ValidationError",
    "ConfigurationError",
    # Utilities
    "times",
    "object_map",
    "random_integer",
    "randomize_list",
]
