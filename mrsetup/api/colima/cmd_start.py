"""Colima start command."""

from collections.abc import Iterator

from ...utils.run_command import run_command
from .._output_schemas.colima import ColimaStartOutput
from ..config.MRSetupConfig import MRSetupConfig
from ..StageResult import StageResult


def cmd_start() -> StageResult:
    """Start Colima with the configured resources unless it is already running."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.1, "Loading configuration...")
        colima = MRSetupConfig.load().colima

        yield (0.2, "Checking Colima status...")
        if run_command(["colima", "status"]).returncode == 0:
            yield (1.0, "Complete")
            result_obj.result = "Colima is already running"
            result_obj.output = ColimaStartOutput(
                errors=[], warnings=[], already_running=True, started=False, running=True
            ).model_dump(mode="python")
            result_obj.success = True
            return

        yield (0.4, "Starting Colima...")
        try:
            run_command(colima.start_args(), check=True)
        except RuntimeError as e:
            yield (1.0, "Complete")
            result_obj.result = f"Failed to start Colima: {e}"
            result_obj.output = ColimaStartOutput(
                errors=[str(e)], warnings=[], already_running=False, started=False, running=False
            ).model_dump(mode="python")
            result_obj.success = False
            return

        yield (1.0, "Complete")
        result_obj.result = "Colima started"
        result_obj.output = ColimaStartOutput(
            errors=[], warnings=[], already_running=False, started=True, running=True
        ).model_dump(mode="python")
        result_obj.success = True

    return StageResult(
        announce="Setting up Colima...",
        progress_callback=do_work,
    )
