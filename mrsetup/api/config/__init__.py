"""Configuration models and commands."""

from .MRSetupConfig import MRSetupConfig

__all__ = ["MRSetupConfig"]
