"""Prerequisite check command."""

import logging
import platform
import shutil
from collections.abc import Iterator

from ...utils.run_command import run_command
from .._output_schemas.prereq import PrereqCheckOutput
from ..StageResult import StageResult

logger = logging.getLogger(__name__)


def cmd_check(install_missing: bool = True) -> StageResult:
    """Verify the host can run the GPU model-runner.

    Requires macOS on Apple Silicon with Homebrew. Colima is installed through
    Homebrew when missing and ``install_missing`` is set.
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        system = platform.system()
        machine = platform.machine()
        output = {
            "system": system,
            "machine": machine,
            "brew_path": "",
            "colima_path": "",
            "installed": [],
            "passed": False,
        }
        warnings: list[str] = []

        def fail(message: str) -> None:
            logger.error(message)
            result_obj.result = message
            result_obj.output = PrereqCheckOutput(errors=[message], warnings=warnings, **output).model_dump(
                mode="python"
            )
            result_obj.success = False

        yield (0.1, "Checking operating system...")
        if system != "Darwin":
            yield (1.0, "Complete")
            fail("This tool only works on macOS")
            return

        yield (0.3, "Checking CPU architecture...")
        if machine != "arm64":
            yield (1.0, "Complete")
            fail("This tool requires Apple Silicon (M1/M2/M3/M4)")
            return

        yield (0.5, "Checking Homebrew...")
        brew_path = shutil.which("brew")
        if not brew_path:
            yield (1.0, "Complete")
            fail("Homebrew is not installed. Install from https://brew.sh")
            return
        output["brew_path"] = brew_path

        yield (0.7, "Checking Colima...")
        colima_path = shutil.which("colima")
        if not colima_path:
            if not install_missing:
                yield (1.0, "Complete")
                fail("Colima is not installed. Install with: brew install colima")
                return
            warnings.append("Colima not found. Installing...")
            yield (0.8, "Installing Colima...")
            try:
                run_command(["brew", "install", "colima"], check=True)
            except RuntimeError as e:
                yield (1.0, "Complete")
                fail(f"Failed to install Colima: {e}")
                return
            output["installed"].append("colima")
            colima_path = shutil.which("colima") or ""
        output["colima_path"] = colima_path
        output["passed"] = True

        yield (1.0, "Complete")
        result_obj.result = "Prerequisites check passed!"
        result_obj.output = PrereqCheckOutput(errors=[], warnings=warnings, **output).model_dump(mode="python")
        result_obj.success = True

    return StageResult(
        announce="Checking prerequisites...",
        progress_callback=do_work,
    )
