"""Pick the shell startup file to edit."""

import os
from pathlib import Path

from ...utils.expand_path import expand_path
from ..config.ShellConfig import ShellConfig

_RC_FILES = {
    "zsh": ".zshrc",
    "bash": ".bashrc",
}


def _detect_rc_file(shell: ShellConfig) -> Path | None:
    """Return the configured rc file, or the one matching $SHELL, or None for other shells."""
    if shell.rc_file:
        return expand_path(shell.rc_file)
    login_shell = Path(os.environ.get("SHELL", "")).name
    rc_name = _RC_FILES.get(login_shell)
    if rc_name is None:
        return None
    return Path.home() / rc_name
