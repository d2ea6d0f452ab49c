"""XDG-compliant location of nativepath settings.

The library reads an optional settings file and never writes one.

XDG default:
- Config: ~/.config/nativepath/
"""

import os
from pathlib import Path

# Application identifier for directory naming
APP_NAME = "nativepath"

# File name of the converter settings inside the config directory
SETTINGS_FILENAME = "settings.toml"


def _get_xdg_dir(env_var: str, default_subdir: str) -> Path:
    """Get XDG directory respecting environment variable override.

    Args:
        env_var: XDG environment variable name (e.g., "XDG_CONFIG_HOME").
        default_subdir: Default subdirectory under home (e.g., ".config").

    Returns:
        Path to the application-specific directory.
    """
    base = os.environ.get(env_var)
    if base:
        return Path(base) / APP_NAME
    return Path.home() / default_subdir / APP_NAME


def get_config_dir() -> Path:
    """Get the configuration directory path.

    Returns:
        Path to ~/.config/nativepath/ (or XDG_CONFIG_HOME/nativepath/).
    """
    return _get_xdg_dir("XDG_CONFIG_HOME", ".config")


def get_settings_path() -> Path:
    """Get the converter settings file path.

    Returns:
        Path to ~/.config/nativepath/settings.toml.
    """
    return get_config_dir() / SETTINGS_FILENAME
