"""Display factory."""

from typing import Literal

from .Display import Display

DisplayMode = Literal["cli"]


class _DisplayContext:
    def get_display(self, mode: DisplayMode = "cli") -> Display:
        """Return the display implementation for ``mode``."""
        if mode == "cli":
            from ...cli.display.CLIDisplay import CLIDisplay

            return CLIDisplay()
        raise ValueError(f"Invalid display mode: {mode}. Must be 'cli'")


display_context = _DisplayContext()
