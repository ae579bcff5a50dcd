"""Dependency install command."""

import logging
import shutil
from collections.abc import Iterator

from ...utils.run_command import run_command
from .._output_schemas.deps import DepsInstallOutput
from ..config.MRSetupConfig import MRSetupConfig
from ..StageResult import StageResult
from ._docker_model_plugin_available import _docker_model_plugin_available
from ._tool_version import _tool_version

logger = logging.getLogger(__name__)

# (display name, executable, brew formula, version command, needed only to build from source)
_TOOLS: list[tuple[str, str, str, list[str] | None, bool]] = [
    ("llama.cpp", "llama-server", "llama.cpp", None, False),
    ("Go", "go", "go", ["go", "version"], True),
    ("Docker CLI", "docker", "docker", ["docker", "--version"], False),
]


def cmd_install(source: str | None = None) -> StageResult:
    """Install llama.cpp, Go and the Docker CLI with Homebrew when they are missing.

    Go and the Xcode Command Line Tools are only needed when building from source.
    If the Xcode tools are missing their installer is launched and the output
    reports ``xcode_pending`` so the caller can stop and ask for a re-run.
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.05, "Loading configuration...")
        build = (source or MRSetupConfig.load().binary.source) == "build"

        installed: list[str] = []
        present: dict[str, str] = {}
        warnings: list[str] = []

        def finish(success: bool, message: str, errors: list[str], plugin: bool = False, pending: bool = False) -> None:
            result_obj.result = message
            result_obj.output = DepsInstallOutput(
                errors=errors,
                warnings=warnings,
                installed=installed,
                present=present,
                docker_model_plugin=plugin,
                xcode_pending=pending,
            ).model_dump(mode="python")
            result_obj.success = success

        tools = [t for t in _TOOLS if build or not t[4]]
        for index, (display_name, executable, formula, version_cmd, _) in enumerate(tools):
            yield (0.1 + 0.6 * index / len(tools), f"Checking {display_name}...")
            if shutil.which(executable):
                present[display_name] = _tool_version(version_cmd) if version_cmd else "installed"
                logger.info("%s already installed (%s)", display_name, present[display_name])
                continue
            yield (0.1 + 0.6 * (index + 0.5) / len(tools), f"Installing {display_name}...")
            try:
                run_command(["brew", "install", formula], check=True)
            except RuntimeError as e:
                yield (1.0, "Complete")
                finish(False, f"Failed to install {display_name}: {e}", [str(e)])
                return
            installed.append(formula)

        yield (0.75, "Checking docker model plugin...")
        plugin = _docker_model_plugin_available()
        if not plugin:
            warnings.append("docker model plugin not found. You may need to update Docker CLI: brew upgrade docker")

        if build:
            yield (0.9, "Checking Xcode Command Line Tools...")
            if run_command(["xcode-select", "-p"]).returncode != 0:
                run_command(["xcode-select", "--install"])
                warnings.append("Please complete the Xcode CLT installation and run setup again")
                yield (1.0, "Complete")
                finish(True, "Installing Xcode Command Line Tools; re-run setup when it finishes", [], plugin, True)
                return

        yield (1.0, "Complete")
        summary = f"installed {', '.join(installed)}" if installed else "all already installed"
        finish(True, f"Dependencies ready ({summary})", [], plugin)

    return StageResult(
        announce="Installing dependencies...",
        progress_callback=do_work,
    )
