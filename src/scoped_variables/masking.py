"""
Secret masker collaborator.

The store hands seeded secret values to a masker while it is being constructed.
Scrubbing those values from output streams belongs to the masking service
itself and is not done here.
"""

import logging
import threading
from abc import ABC, abstractmethod
from typing import FrozenSet, Set

logger = logging.getLogger(__name__)


class SecretMasker(ABC):
    """Capability to register values that must be hidden from output."""

    @abstractmethod
    def register(self, value: str) -> None:
        """
        Register a secret value.

        Args:
            value: The raw secret text
        """
        pass


class RecordingSecretMasker(SecretMasker):
    """In-memory masker that only remembers what was registered."""

    def __init__(self):
        self._values: Set[str] = set()
        self._lock = threading.Lock()

    def register(self, value: str) -> None:
        if not value:
            return
        with self._lock:
            self._values.add(value)
        logger.debug("Registered a secret value for masking")

    def is_registered(self, value: str) -> bool:
        with self._lock:
            return value in self._values

    @property
    def registered(self) -> FrozenSet[str]:
        with self._lock:
            return frozenset(self._values)


def create_secret_masker() -> SecretMasker:
    """Create the default secret masker implementation."""
    return RecordingSecretMasker()
