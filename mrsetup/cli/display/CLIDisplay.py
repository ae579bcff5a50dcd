"""CLI display implementation using Rich library."""

import json
import shutil
import sys
from typing import Any

import yaml
from pygments import highlight
from pygments.formatters import TerminalFormatter
from pygments.lexers import JsonLexer, YamlLexer
from rich.console import Console

from ...utils.display.Display import Display

MAX_DISPLAY_WIDTH = 120


class CLIDisplay(Display):
    """Status lines go to stderr through Rich; structured output goes to stdout."""

    def __init__(self):
        console_width = min(shutil.get_terminal_size().columns or MAX_DISPLAY_WIDTH, MAX_DISPLAY_WIDTH)
        self.stderr_console = Console(file=sys.stderr, width=console_width)

    def status(self, message: str, **kwargs) -> None:
        """Display a status message in blue."""
        self.stderr_console.print(f"[blue]ℹ[/blue] {message}")

    def success(self, message: str, **kwargs) -> None:
        """Display a success message in green."""
        self.stderr_console.print(f"[green]✓[/green] {message}")

    def error(self, message: str, **kwargs) -> None:
        """Display an error message in red."""
        self.stderr_console.print(f"[red]✗[/red] {message}")
        details = kwargs.get("details", "")
        if details:
            self.stderr_console.print(f"  [dim]{details}[/dim]")

    def warning(self, message: str, **kwargs) -> None:
        """Display a warning message in yellow."""
        self.stderr_console.print(f"[yellow]⚠[/yellow] {message}")

    def info(self, message: str, **kwargs) -> None:
        self.stderr_console.print(message)

    def text(self, content: str, **kwargs) -> None:
        # markup and highlighting off: the guide contains brackets and JSON
        self.stderr_console.print(content, markup=False, highlight=False)

    def json_output(self, data: Any, **kwargs) -> None:
        """Write data to stdout as YAML (default) or JSON, highlighted on a terminal."""
        output_format = kwargs.get("format", "yaml")
        if output_format == "json":
            rendered = json.dumps(data, indent=kwargs.get("indent", 2), default=str) + "\n"
            lexer = JsonLexer()
        else:
            rendered = yaml.safe_dump(data, sort_keys=False, allow_unicode=True)
            lexer = YamlLexer()

        if sys.stdout.isatty():
            rendered = highlight(rendered, lexer, TerminalFormatter())
        sys.stdout.write(rendered)
        sys.stdout.flush()
