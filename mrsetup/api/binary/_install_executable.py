"""Place a file at its final path and mark it executable."""

import shutil
import stat
from pathlib import Path


def _install_executable(source: Path, target: Path) -> None:
    """Copy ``source`` to ``target`` (creating parent directories) and chmod +x."""
    target.parent.mkdir(parents=True, exist_ok=True)
    if source != target:
        shutil.copy2(source, target)
    mode = target.stat().st_mode
    target.chmod(mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
