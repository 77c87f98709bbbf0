"""Port (ABC) for a client-side key/value storage slot.

Domain layer interface — infrastructure provides the concrete implementation.
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class KeyValueStoragePort(ABC):
    """String key/value storage with ``localStorage`` semantics.

    Implementations may raise :class:`~tri_a11y.domain.errors.StorageError`
    subclasses or ``OSError``; callers decide whether to tolerate them.
    """

    @abstractmethod
    def get_item(self, key: str) -> str | None:
        """Return the stored value, or ``None`` if *key* is absent."""

    @abstractmethod
    def set_item(self, key: str, value: str) -> None:
        """Store *value* under *key*, replacing any previous value."""

    @abstractmethod
    def remove_item(self, key: str) -> None:
        """Remove *key*; a missing key is not an error."""
