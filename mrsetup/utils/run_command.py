"""Run an external command and log what happened."""

import logging
import os
import subprocess

logger = logging.getLogger(__name__)


def run_command(
    command: list[str],
    check: bool = False,
    env: dict[str, str] | None = None,
    cwd: str | None = None,
    timeout: float | None = None,
) -> subprocess.CompletedProcess:
    """Execute a command with captured text output.

    Args:
        command: Command and arguments. Never run through a shell.
        check: Raise RuntimeError (carrying stderr) on a non-zero exit code.
        env: Extra environment variables merged over the current environment.
        cwd: Working directory for the command.
        timeout: Seconds before the command is killed.

    Returns:
        The completed process. A missing executable is reported as return code 127.

    Raises:
        RuntimeError: If ``check`` is set and the command fails.
    """
    command_str = subprocess.list2cmdline(command)
    logger.info("Executing: %s%s", command_str, f" (in {cwd})" if cwd else "")

    run_env = None
    if env:
        run_env = os.environ.copy()
        run_env.update(env)

    try:
        result = subprocess.run(
            command,
            capture_output=True,
            text=True,
            check=False,
            env=run_env,
            cwd=cwd,
            timeout=timeout,
        )
    except FileNotFoundError as e:
        logger.warning("Command not found: %s", command[0])
        result = subprocess.CompletedProcess(command, 127, "", str(e))
    except subprocess.TimeoutExpired as e:
        logger.warning("Command timed out after %ss: %s", timeout, command_str)
        result = subprocess.CompletedProcess(command, 124, "", f"timed out after {e.timeout}s")

    if result.returncode != 0:
        stderr = (result.stderr or "").strip()
        logger.warning("Command failed (%d): %s %s", result.returncode, command_str, stderr)
        if check:
            detail = f": {stderr}" if stderr else ""
            raise RuntimeError(f"'{command_str}' failed with exit code {result.returncode}{detail}")
    return result
