"""File-backed key/value storage — one file per key in the config dir.

Implements ``KeyValueStoragePort`` for desktop and CLI use, where there is
no browser ``localStorage``.  Values are written atomically (temp file,
then rename) so a crash never leaves a half-written slot behind.
"""

from __future__ import annotations

import re
import tempfile
from pathlib import Path

from tri_a11y.config.paths import resolve_config_dir
from tri_a11y.domain.ports.storage_port import KeyValueStoragePort

_UNSAFE_CHARS = re.compile(r"[^A-Za-z0-9._-]")


class JsonFileStorage(KeyValueStoragePort):
    """Concrete implementation of :class:`KeyValueStoragePort`.

    Parameters
    ----------
    config_dir : Path | None
        Override the default config directory (useful for testing).
    """

    def __init__(self, config_dir: Path | None = None) -> None:
        self._config_dir = resolve_config_dir(config_dir)

    # -- Public API ----------------------------------------------------------

    def get_item(self, key: str) -> str | None:
        path = self.path_for(key)
        if not path.exists():
            return None
        return path.read_text(encoding="utf-8")

    def set_item(self, key: str, value: str) -> None:
        self._config_dir.mkdir(parents=True, exist_ok=True)

        tmp_fd, tmp_path = tempfile.mkstemp(dir=self._config_dir, suffix=".tmp")
        try:
            with open(tmp_fd, "w", encoding="utf-8") as fh:
                fh.write(value)
            Path(tmp_path).replace(self.path_for(key))
        except Exception:
            Path(tmp_path).unlink(missing_ok=True)
            raise

    def remove_item(self, key: str) -> None:
        self.path_for(key).unlink(missing_ok=True)

    def path_for(self, key: str) -> Path:
        """File that holds *key*'s value."""
        return self._config_dir / f"{_UNSAFE_CHARS.sub('_', key)}.json"

    @property
    def config_dir(self) -> Path:
        return self._config_dir
