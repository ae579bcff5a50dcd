"""Detect the 'docker model' CLI plugin."""

from ...utils.run_command import run_command


def _docker_model_plugin_available() -> bool:
    """True if 'docker model version' or 'docker model --help' succeeds."""
    if run_command(["docker", "model", "version"]).returncode == 0:
        return True
    return run_command(["docker", "model", "--help"]).returncode == 0
