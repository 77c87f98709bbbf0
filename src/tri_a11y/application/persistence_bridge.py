"""Persistence bridge — best-effort sync of preferences with client storage.

Storage is treated as unreliable I/O: every failure degrades to the
defaults (on read) or a dropped write, and is only logged.
"""

from __future__ import annotations

import json
import logging

from tri_a11y.domain.errors import StorageError
from tri_a11y.domain.models.preferences import PreferenceState
from tri_a11y.domain.ports.storage_port import KeyValueStoragePort

logger = logging.getLogger(__name__)

STORAGE_KEY = "a11y-prefs"

# Deeply nested JSON fails with RecursionError rather than a ValueError.
_TOLERATED = (StorageError, OSError, ValueError, TypeError, RecursionError)


class PersistenceBridge:
    """Load/save/clear a PreferenceState under a single fixed key."""

    def __init__(self, storage: KeyValueStoragePort, key: str = STORAGE_KEY) -> None:
        self._storage = storage
        self._key = key

    @property
    def key(self) -> str:
        return self._key

    def load(self) -> PreferenceState:
        """Read the stored record merged onto the defaults; never raises."""
        try:
            raw = self._storage.get_item(self._key)
            if not raw:
                return PreferenceState()
            return PreferenceState.from_partial(json.loads(raw))
        except _TOLERATED as exc:
            logger.debug("Ignoring unreadable preferences under %r: %s", self._key, exc)
            return PreferenceState()

    def save(self, state: PreferenceState) -> None:
        """Write the full state; failures are dropped."""
        try:
            self._storage.set_item(self._key, json.dumps(state.to_storage()))
        except _TOLERATED as exc:
            logger.warning("Could not persist preferences under %r: %s", self._key, exc)

    def clear(self) -> None:
        """Remove the stored record; failures are dropped."""
        try:
            self._storage.remove_item(self._key)
        except _TOLERATED as exc:
            logger.warning("Could not clear preferences under %r: %s", self._key, exc)
