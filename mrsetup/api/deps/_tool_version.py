"""Read a tool's version string."""

from ...utils.run_command import run_command


def _tool_version(command: list[str]) -> str:
    """Return the first output line of a version command, or 'installed' if it prints nothing."""
    result = run_command(command)
    text = (result.stdout or result.stderr or "").strip()
    if result.returncode != 0 or not text:
        return "installed"
    return text.splitlines()[0]
