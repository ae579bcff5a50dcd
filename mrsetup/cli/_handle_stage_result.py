"""Decorator to handle StageResult for CLI display."""

import functools
from collections.abc import Callable
from typing import TypeVar

from ._run_single_execution import _run_single_execution

F = TypeVar("F", bound=Callable)


def _extract_display_format() -> str:
    """Get the display format from the active Typer/Click context chain.

    Raises:
        RuntimeError: If no context is available or the flag was never set.
        ValueError: If an invalid display format value is encountered.
    """
    import click

    context = click.get_current_context(silent=True)
    if context is None:
        raise RuntimeError("Display format unavailable: Typer context is missing")

    current: click.Context | None = context
    while current is not None:
        obj = current.obj
        if isinstance(obj, dict) and "display_format" in obj:
            value = obj["display_format"]
            if value in ("json", "yaml"):
                return value
            raise ValueError(f"Invalid display_format value: {value!r}")
        current = current.parent

    raise RuntimeError("Display format not set in the Typer context chain")


def _handle_stage_result(func: F, result_printer: Callable[[dict, str], None] | None = None) -> F:
    """Wrap a command function to handle StageResult for CLI display.

    Announce and progress go to stderr, the validated output goes to stdout
    (or to ``result_printer`` with the display format), and the process exits 0 on success, 1 otherwise.
    """

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        from mrsetup.utils.display.context import display_context

        display = display_context.get_display("cli")

        try:
            display_format = _extract_display_format()
        except (RuntimeError, ValueError):
            display_format = "yaml"

        _run_single_execution(func, args, kwargs, display, display_format, result_printer)

    return wrapper  # type: ignore[return-value]
