"""Utility helpers shared by API and CLI layers."""

from .expand_path import expand_path
from .logger import configure_logging
from .run_command import run_command

__all__ = ["configure_logging", "expand_path", "run_command"]
