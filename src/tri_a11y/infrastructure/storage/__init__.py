"""Client storage adapters."""

from tri_a11y.infrastructure.storage.json_file_storage import JsonFileStorage
from tri_a11y.infrastructure.storage.memory_storage import MemoryStorage

__all__ = ["JsonFileStorage", "MemoryStorage"]
