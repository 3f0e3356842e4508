"""Exception hierarchy for the factory package.

All errors raised by dataknobs_factory derive from FactoryError, which carries
an optional context dictionary describing the offending values. Errors raised
by caller-supplied producers are never wrapped and propagate unchanged.

Example:
    ```python
    from dataknobs_factory import FactoryError, or_none

    try:
        or_none("value", chance=100)
    except FactoryError as e:
        print(e)          # Chance must be an integer between 1 and 99
        print(e.context)  # {'chance': 100}
    ```
"""

from typing import Any, Dict


class FactoryError(Exception):
    """Base exception for the factory package.

    Attributes:
        context: Dictionary containing contextual information about the error
        details: Alias for context

    Args:
        message: Human-readable error message
        context: Optional dictionary with error context
        details: Alternative to context (takes precedence when both are given)
    """

    def __init__(
        self,
        message: str,
        context: Dict[str, Any] | None = None,
        details: Dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.context = details or context or {}
        self.details = self.context


class ValidationError(FactoryError, ValueError):
    """Raised when a generator or factory call receives an invalid argument.

    Common scenarios include:
    - A chance percentage outside the open interval (0, 100)
    - An empty sequence
    - Weighted pairs with negative or all-zero counts
    - A collection range with min greater than max
    - A negative number of items to create

    Example:
        ```python
        raise ValidationError(
            "min must not exceed max",
            context={"min": 5, "max": 2}
        )
        ```
    """

    pass


class ConfigurationError(FactoryError):
    """Raised when factory settings are invalid or cannot be loaded.

    Example:
        ```python
        raise ConfigurationError(
            "Unknown setting",
            context={"key": "many_maximum", "known": ["many_min", "many_max"]}
        )
        ```
    """

    pass


__all__ = [
    "FactoryError",
    "ValidationError",
    "ConfigurationError",
]
