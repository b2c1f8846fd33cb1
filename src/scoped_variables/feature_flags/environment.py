"""
Environment access for the feature gate.

The gate reads the host process environment through this small interface so
callers and tests can supply their own view of it.
"""

import os
from abc import ABC, abstractmethod
from typing import Mapping, Optional


class EnvironmentReader(ABC):
    """Read-only view of a process environment."""

    @abstractmethod
    def get(self, name: str) -> Optional[str]:
        """
        Get an environment variable.

        Args:
            name: Name of the environment variable

        Returns:
            The value, or None when the variable is not set
        """
        pass

    def is_set(self, name: str) -> bool:
        """True when the variable is set to a non-empty string."""
        return bool(self.get(name))


class OsEnvironmentReader(EnvironmentReader):
    """Reads ``os.environ`` at call time."""

    def get(self, name: str) -> Optional[str]:
        return os.environ.get(name)


class MappingEnvironmentReader(EnvironmentReader):
    def __init__(self, values: Mapping[str, str]):
        self._values = dict(values)

    def get(self, name: str) -> Optional[str]:
        return self._values.get(name)


def create_environment_reader() -> EnvironmentReader:
    """Create the default environment reader implementation."""
    return OsEnvironmentReader()
