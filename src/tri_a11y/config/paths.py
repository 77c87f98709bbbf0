"""Config directory resolution.

Precedence: explicit argument, then ``$TRI_A11Y_CONFIG_DIR``, then the
platform user config dir from ``platformdirs``
(``~/.config/tri_a11y`` on Linux).
"""

from __future__ import annotations

import os
from pathlib import Path

import platformdirs

APP_NAME = "tri_a11y"
CONFIG_DIR_ENV = "TRI_A11Y_CONFIG_DIR"


def resolve_config_dir(override: str | Path | None = None) -> Path:
    """Return the directory that holds persisted preference slots."""
    if override:
        return Path(override).expanduser()
    env = os.environ.get(CONFIG_DIR_ENV)
    if env:
        return Path(env).expanduser()
    return Path(platformdirs.user_config_dir(APP_NAME))
