"""Display abstraction for command output."""

from .Display import Display

__all__ = ["Display"]
