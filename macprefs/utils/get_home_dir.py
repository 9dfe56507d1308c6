"""Get macprefs home directory path or path under it."""

import os
from pathlib import Path

from ..constants import MACPREFS_HOME_EXT


def get_home_dir(*parts: str) -> Path:
    """Get macprefs home directory path or path under it.

    Checks MACPREFS_HOME environment variable first, defaults to ~/.macprefs if not set.

    Args:
        *parts: Optional path components to join (e.g., "config.json", "plans")

    Returns:
        Absolute path to the home directory or a subpath under it

    Examples:
        >>> get_home_dir()
        Path("/Users/user/.macprefs")
        >>> get_home_dir("plans")
        Path("/Users/user/.macprefs/plans")
    """
    home_env = os.environ.get("MACPREFS_HOME")
    if home_env:
        home = Path(home_env).expanduser().resolve()
    else:
        # HOME is honoured for test isolation
        user_home = os.environ.get("HOME")
        home = Path(user_home) / MACPREFS_HOME_EXT if user_home else Path.home() / MACPREFS_HOME_EXT

    return home / Path(*parts) if parts else home
