"""In-process key/value storage.

Session-scoped stand-in for ``localStorage``.  ``quota`` and ``disabled``
reproduce the two failure modes browsers exhibit (full storage, storage
blocked in private mode).
"""

from __future__ import annotations

from tri_a11y.domain.errors import StorageQuotaExceededError, StorageUnavailableError
from tri_a11y.domain.ports.storage_port import KeyValueStoragePort


class MemoryStorage(KeyValueStoragePort):
    """Dict-backed storage with an optional byte quota."""

    def __init__(self, quota: int | None = None, disabled: bool = False) -> None:
        self._items: dict[str, str] = {}
        self._quota = quota
        self.disabled = disabled

    def get_item(self, key: str) -> str | None:
        self._check_enabled()
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._check_enabled()
        if self._quota is not None:
            others = sum(
                len(k) + len(v.encode("utf-8")) for k, v in self._items.items() if k != key
            )
            if others + len(key) + len(value.encode("utf-8")) > self._quota:
                raise StorageQuotaExceededError(
                    f"Writing {key!r} would exceed the {self._quota}-byte quota"
                )
        self._items[key] = value

    def remove_item(self, key: str) -> None:
        self._check_enabled()
        self._items.pop(key, None)

    def __contains__(self, key: object) -> bool:
        return key in self._items

    def __len__(self) -> int:
        return len(self._items)

    def _check_enabled(self) -> None:
        if self.disabled:
            raise StorageUnavailableError("Storage is disabled")
