"""Package-wide defaults for the generator helpers.

Defaults can be supplied as a dictionary, a YAML or JSON file, or environment
variables prefixed with ``DATAKNOBS_FACTORY_``:

    ```python
    from dataknobs_factory import FactorySettings, configure

    configure(FactorySettings.from_file("factory.yaml"))
    configure(many_max=5)

    # DATAKNOBS_FACTORY_CHANCE_PERCENTAGE=90
    configure(FactorySettings.from_env())
    ```

Helpers such as ``many()`` and ``or_none()`` read the current settings when
they are called, so changing the settings never affects generators that were
already built.
"""

import dataclasses
import json
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Union

import yaml  # type: ignore[import-untyped]

from dataknobs_factory.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

ENV_PREFIX = "DATAKNOBS_FACTORY_"


@dataclass(frozen=True)
class FactorySettings:
    """Default values used when a helper is called without explicit options.

    Attributes:
        many_min: Default lower bound for ``many()`` collections
        many_max: Default upper bound for ``many()`` collections
        chance_percentage: Default chance of the primary value in ``or_none()``
            and ``or_undefined()``
        randomize_if_not_enough_items: Default for ``sequence()`` randomization
    """

    many_min: int = 1
    many_max: int = 10
    chance_percentage: int = 80
    randomize_if_not_enough_items: bool = False

    def __post_init__(self) -> None:
        for name in ["many_min", "many_max"]:
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ConfigurationError(
                    f"{name} must be an integer", context={name: value}
                )
        if isinstance(self.chance_percentage, bool) or not isinstance(
            self.chance_percentage, (int, float)
        ):
            raise ConfigurationError(
                "chance_percentage must be a number",
                context={"chance_percentage": self.chance_percentage},
            )
        if not isinstance(self.randomize_if_not_enough_items, bool):
            raise ConfigurationError(
                "randomize_if_not_enough_items must be a boolean",
                context={"randomize_if_not_enough_items": self.randomize_if_not_enough_items},
            )
        if self.many_min < 0:
            raise ConfigurationError(
                "many_min must be >= 0", context={"many_min": self.many_min}
            )
        if self.many_min > self.many_max:
            raise ConfigurationError(
                "many_min must not exceed many_max",
                context={"many_min": self.many_min, "many_max": self.many_max},
            )
        if not 0 < self.chance_percentage < 100:
            raise ConfigurationError(
                "chance_percentage must be between 1 and 99",
                context={"chance_percentage": self.chance_percentage},
            )

    @classmethod
    def field_names(cls) -> list[str]:
        return [f.name for f in dataclasses.fields(cls)]

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "FactorySettings":
        """Create settings from a dictionary.

        Args:
            data: Mapping of setting names to values

        Returns:
            FactorySettings instance

        Raises:
            ConfigurationError: If a key is unknown or a value is invalid
        """
        known = cls.field_names()
        unknown = sorted(set(data) - set(known))
        if unknown:
            raise ConfigurationError(
                f"Unknown factory settings: {', '.join(unknown)}",
                context={"unknown": unknown, "known": known},
            )
        return cls(**data)

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> "FactorySettings":
        """Load settings from a YAML or JSON file.

        The file may hold the settings at the top level or under a
        ``factory`` key.

        Args:
            path: Path to a ``.yaml``, ``.yml`` or ``.json`` file

        Returns:
            FactorySettings instance

        Raises:
            ConfigurationError: If the file is missing, unsupported or invalid
        """
        path = Path(path)
        if not path.exists():
            raise ConfigurationError(
                f"Settings file not found: {path}", context={"path": str(path)}
            )

        suffix = path.suffix.lower()
        with open(path) as f:
            try:
                if suffix in [".yaml", ".yml"]:
                    data = yaml.safe_load(f)
                elif suffix == ".json":
                    data = json.load(f)
                else:
                    raise ConfigurationError(
                        f"Unsupported settings file format: {suffix}",
                        context={"path": str(path)},
                    )
            except (yaml.YAMLError, json.JSONDecodeError) as e:
                raise ConfigurationError(
                    f"Failed to parse settings file {path}: {e}",
                    context={"path": str(path)},
                ) from e

        data = data or {}
        if not isinstance(data, dict):
            raise ConfigurationError(
                "Settings file must contain a mapping", context={"path": str(path)}
            )
        if "factory" in data:
            data = data["factory"] or {}

        logger.debug("Loaded factory settings from %s", path)
        return cls.from_dict(data)

    @classmethod
    def from_env(cls, prefix: str = ENV_PREFIX) -> "FactorySettings":
        """Create settings from environment variables.

        ``DATAKNOBS_FACTORY_MANY_MAX=5`` sets ``many_max``. Variables that do
        not name a known setting are ignored.

        Args:
            prefix: Environment variable prefix

        Returns:
            FactorySettings instance
        """
        known = cls.field_names()
        data: Dict[str, Any] = {}
        for key, value in os.environ.items():
            if not key.startswith(prefix):
                continue
            name = key[len(prefix):].lower()
            if name in known:
                data[name] = _parse_value(value)
        return cls.from_dict(data)

    def replace(self, **changes: Any) -> "FactorySettings":
        """Return a copy with the given settings changed."""
        return self.from_dict({**dataclasses.asdict(self), **changes})


def _parse_value(value: str) -> Any:
    """Parse an environment variable value to bool, int, float or str."""
    if value.lower() in ["true", "yes"]:
        return True
    elif value.lower() in ["false", "no"]:
        return False

    try:
        return int(value)
    except ValueError:
        pass

    try:
        return float(value)
    except ValueError:
        pass

    return value


_current = FactorySettings()


def get_settings() -> FactorySettings:
    """Return the settings currently used by the helpers."""
    return _current


def configure(settings: FactorySettings | None = None, **overrides: Any) -> FactorySettings:
    """Replace the current settings.

    Args:
        settings: New base settings, defaults to the current ones
        **overrides: Individual settings to change on top of ``settings``

    Returns:
        The settings now in effect
    """
    global _current
    base = settings if settings is not None else _current
    _current = base.replace(**overrides) if overrides else base
    logger.debug("Factory settings configured: %s", _current)
    return _current


def reset_settings() -> FactorySettings:
    """Restore the built-in defaults."""
    global _current
    _current = FactorySettings()
    return _current
