"""Rich-based terminal display."""

from .CLIDisplay import CLIDisplay

__all__ = ["CLIDisplay"]
