"""
Variable value objects.

``Variable`` is the immutable record held by the store, ``VariableValue`` is
the value-and-secrecy pair callers hand over when seeding a store.
"""

from dataclasses import dataclass
from typing import Any, Mapping, Optional

from .exceptions import VariableNameError


def is_blank(name: Optional[str]) -> bool:
    """True for None, empty and all-whitespace names."""
    return name is None or not str(name).strip()


def _normalize_value(record: object, value: Any) -> None:
    if value is None:
        # frozen dataclass; bypass __setattr__ to normalize
        object.__setattr__(record, "value", "")
    elif not isinstance(value, str):
        raise TypeError(f"Variable value must be a string, got {type(value).__name__}")


@dataclass(frozen=True)
class Variable:
    """A named string value, optionally marked secret."""

    name: str
    value: str = ""
    secret: bool = False

    def __post_init__(self) -> None:
        if is_blank(self.name):
            raise VariableNameError("Variable name must not be empty or whitespace")
        _normalize_value(self, self.value)


@dataclass(frozen=True)
class VariableValue:
    """Value and secrecy flag for one entry of a seeding snapshot."""

    value: str = ""
    is_secret: bool = False

    def __post_init__(self) -> None:
        _normalize_value(self, self.value)
        if not isinstance(self.is_secret, bool):
            raise TypeError(f"Secret flag must be a bool, got {self.is_secret!r}")

    @classmethod
    def coerce(cls, raw: Any) -> "VariableValue":
        """
        Build a VariableValue from the loose shapes accepted when seeding.

        Args:
            raw: A VariableValue, a plain string (or None) for a non-secret
                value, or a mapping with ``value`` and optional ``secret`` keys.

        Returns:
            VariableValue: The normalized record.

        Raises:
            TypeError: If ``raw`` has none of the supported shapes, its value
                is not a string or its ``secret`` flag is not a bool.
        """
        if isinstance(raw, VariableValue):
            return raw
        if raw is None or isinstance(raw, str):
            return cls(value=raw)
        if isinstance(raw, Mapping):
            return cls(value=raw.get("value"), is_secret=raw.get("secret", False))
        raise TypeError(f"Unsupported variable value: {raw!r}")
