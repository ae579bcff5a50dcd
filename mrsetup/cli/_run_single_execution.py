"""Run command once and display result using 4-stage pattern."""

import sys
from collections.abc import Callable
from datetime import datetime
from typing import Any, TypeVar

from mrsetup.api.validate_output import validate_output
from mrsetup.constants import DEFAULT_TIMESTAMP_FORMAT

F = TypeVar("F", bound=Callable)


def _run_single_execution(
    func: F,
    args: tuple,
    kwargs: dict,
    display: Any,
    display_format: str,
    result_printer: Callable[[dict, str], None] | None = None,
) -> None:
    """Run command once and display result.

    Commands must handle all exceptions internally and format errors
    via their domain-specific output schema.
    """
    result = func(*args, **kwargs)

    # Stage 1: Announce
    display.status(result.announce)

    # Stage 2: Progress
    for progress_percent, message in result.progress_callback(result):
        timestamp = datetime.now().strftime(DEFAULT_TIMESTAMP_FORMAT)
        display.info(f"[dim]{timestamp}[/dim] {message} ({progress_percent:.0%})")

    if not result.result:
        raise ValueError("progress_callback must set result.result to a non-empty string")
    if not result.output:
        raise ValueError("progress_callback must set result.output to a non-empty dict")

    try:
        result.output = validate_output(func, result.output)
    except ValueError as e:
        raise ValueError(f"Output structure validation failed: {e}") from e

    # Stage 3: Result
    for warning in result.output.get("warnings", []):
        display.warning(warning)
    if result.success:
        display.success(result.result)
    else:
        for error in result.output.get("errors", []):
            if error != result.result:
                display.error(error)
        display.error(result.result)

    # Stage 4: Output
    if result_printer:
        result_printer(result.output, display_format)
    else:
        display.json_output(result.output, format=display_format)

    sys.exit(0 if result.success else 1)
