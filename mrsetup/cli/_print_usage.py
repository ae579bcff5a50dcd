"""Result printer for commands that carry the usage guide."""

from mrsetup.utils.display.context import display_context


def _print_usage(output: dict, display_format: str = "yaml") -> None:
    """Print the rendered usage guide instead of the structured output.

    Falls back to the structured output in ``display_format`` when there is no
    guide (a failed or interrupted setup), so the errors and completed steps
    stay visible.
    """
    display = display_context.get_display("cli")
    usage = output.get("usage", "")
    if usage:
        display.text(usage)
    else:
        display.json_output(output, format=display_format)
