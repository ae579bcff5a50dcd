"""Get mrsetup home directory path or path under it."""

import os
from pathlib import Path

from ...constants import MRSETUP_HOME_EXT


def get_home_dir(*parts: str) -> Path:
    """Get mrsetup home directory path or path under it.

    Checks MRSETUP_HOME environment variable first, defaults to ~/.mrsetup if not set.

    Examples:
        >>> get_home_dir()
        Path("/Users/user/.mrsetup")
        >>> get_home_dir("config.json")
        Path("/Users/user/.mrsetup/config.json")
    """
    home_env = os.environ.get("MRSETUP_HOME")
    if home_env:
        home = Path(home_env).expanduser().resolve()
    else:
        home = Path.home() / MRSETUP_HOME_EXT

    return home / Path(*parts) if parts else home
