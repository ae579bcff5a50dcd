"""Colima status command."""

from collections.abc import Iterator

from ...utils.run_command import run_command
from .._output_schemas.colima import ColimaStatusOutput
from ..StageResult import StageResult


def cmd_status() -> StageResult:
    """Report whether Colima is running ('colima status' exits 0)."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.5, "Running colima status...")
        result = run_command(["colima", "status"])
        running = result.returncode == 0
        # colima prints its status to stderr
        detail = ((result.stderr or "") + (result.stdout or "")).strip()

        yield (1.0, "Complete")
        result_obj.result = "Colima is running" if running else "Colima is not running"
        result_obj.output = ColimaStatusOutput(
            errors=[],
            warnings=[],
            running=running,
            detail=detail,
        ).model_dump(mode="python")
        result_obj.success = running

    return StageResult(
        announce="Checking Colima...",
        progress_callback=do_work,
    )
