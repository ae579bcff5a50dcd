"""Setup command - runs every installation step in order."""

import logging
from collections.abc import Callable, Iterator
from typing import Any

from .._output_schemas.setup import SetupSetupOutput
from ..binary.cmd_install import cmd_install as binary_install
from ..colima.cmd_start import cmd_start as colima_start
from ..config.MRSetupConfig import MRSetupConfig
from ..deps.cmd_install import cmd_install as deps_install
from ..prereq.cmd_check import cmd_check as prereq_check
from ..service.cmd_install import cmd_install as service_install
from ..shell.cmd_configure import cmd_configure as shell_configure
from ..StageResult import StageResult
from ..verify.cmd_cli import cmd_cli as verify_cli
from ..verify.cmd_gpu import cmd_gpu as verify_gpu
from ..verify.cmd_health import cmd_health as verify_health
from .cmd_usage import render_usage

logger = logging.getLogger(__name__)

# (step name, command factory, failure aborts the run)
STEPS: list[tuple[str, Callable[[], StageResult], bool]] = [
    ("prerequisites", prereq_check, True),
    ("dependencies", deps_install, True),
    ("binary", binary_install, True),
    ("service", service_install, True),
    ("gpu", verify_gpu, False),
    ("health", verify_health, True),
    ("colima", colima_start, True),
    ("shell", shell_configure, True),
    ("docker-model-cli", verify_cli, False),
]


def cmd_setup() -> StageResult:
    """Install and start the GPU model-runner, then configure Colima and the shell.

    Stops at the first failing mandatory step. Checks that only warn (GPU log
    marker, docker model CLI) never stop the run.
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        steps: list[dict[str, Any]] = []
        warnings: list[str] = []
        errors: list[str] = []
        total = len(STEPS)

        def finish(success: bool, message: str, completed: bool, usage: str = "") -> None:
            result_obj.result = message
            result_obj.output = SetupSetupOutput(
                errors=errors,
                warnings=warnings,
                steps=steps,
                completed=completed,
                usage=usage,
            ).model_dump(mode="python")
            result_obj.success = success

        for index, (name, factory, fatal) in enumerate(STEPS):
            stage = factory()
            yield (index / total, f"[{name}] {stage.announce}")
            for fraction, message in stage.progress_callback(stage):
                yield ((index + fraction) / total, f"[{name}] {message}")

            steps.append({"name": name, "success": stage.success, "result": stage.result})
            warnings.extend(stage.output.get("warnings", []))
            logger.info("Step %s: %s (%s)", name, "ok" if stage.success else "failed", stage.result)

            if not stage.success:
                if fatal:
                    errors.extend(stage.output.get("errors", []) or [stage.result])
                    finish(False, f"Setup failed at step '{name}': {stage.result}", False)
                    return
                if not stage.output.get("warnings"):
                    warnings.append(stage.result)

            if name == "dependencies" and stage.output.get("xcode_pending"):
                finish(True, stage.result, False)
                return

        yield (1.0, "Complete")
        finish(True, "Docker Model Runner GPU setup complete", True, render_usage(MRSetupConfig.load()))

    return StageResult(
        announce="Starting Docker Model Runner GPU Setup for Colima",
        progress_callback=do_work,
    )
