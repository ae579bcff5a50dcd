import logging
import os
from logging.handlers import RotatingFileHandler
from pathlib import Path

from ..constants import LOG_FILE_NAME, MRSETUP_HOME_EXT

# Prevent multiple configurations
_CONFIGURED = False


def configure_logging(home: Path | None = None, level: str = "INFO") -> None:
    """Configure unified mrsetup logging.

    Args:
        home: Path to mrsetup home directory. If None, derived from environment.
        level: Logging level name for the ``mrsetup`` logger.
    """
    global _CONFIGURED
    if _CONFIGURED:
        return

    if home is None:
        env_home = os.environ.get("MRSETUP_HOME")
        home = Path(env_home).expanduser().resolve() if env_home else Path.home() / MRSETUP_HOME_EXT

    home.mkdir(parents=True, exist_ok=True)
    log_file = home / LOG_FILE_NAME

    root_logger = logging.getLogger("mrsetup")
    root_logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    file_handler = RotatingFileHandler(
        log_file,
        maxBytes=5 * 1024 * 1024,
        backupCount=3,  # 5MB * 3
    )
    file_handler.setFormatter(formatter)
    root_logger.addHandler(file_handler)

    _CONFIGURED = True
