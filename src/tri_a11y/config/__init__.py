"""Runtime configuration — where preferences are stored."""

from tri_a11y.config.paths import APP_NAME, CONFIG_DIR_ENV, resolve_config_dir

__all__ = ["APP_NAME", "CONFIG_DIR_ENV", "resolve_config_dir"]
