"""Service module - LaunchAgent installation and management."""

from .ServiceConfig import ServiceConfig

__all__ = ["ServiceConfig"]
