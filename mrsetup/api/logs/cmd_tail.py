"""Logs tail command - shows the end of the service log."""

from collections import deque
from collections.abc import Iterator
from typing import Literal

from .._output_schemas.logs import LogsTailOutput
from ..config.MRSetupConfig import MRSetupConfig
from ..StageResult import StageResult


def cmd_tail(lines: int = 50, stream: Literal["out", "err"] = "out") -> StageResult:
    """Return the last ``lines`` lines of the service stdout or stderr log."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.2, "Loading configuration...")
        data = MRSetupConfig.load().service.data
        log_path = data.log_path if stream == "out" else data.error_log_path  # type: ignore[attr-defined]

        if not log_path.exists():
            yield (1.0, "Complete")
            result_obj.result = f"Log file not found: {log_path}"
            result_obj.output = LogsTailOutput(
                errors=[result_obj.result], warnings=[], log_path=str(log_path), exists=False, lines=[]
            ).model_dump(mode="python")
            result_obj.success = False
            return

        yield (0.6, f"Reading {log_path}...")
        with log_path.open(encoding="utf-8", errors="replace") as fh:
            tail = [line.rstrip("\n") for line in deque(fh, maxlen=max(lines, 0))]

        yield (1.0, "Complete")
        result_obj.result = f"Last {len(tail)} lines of {log_path}"
        result_obj.output = LogsTailOutput(
            errors=[], warnings=[], log_path=str(log_path), exists=True, lines=tail
        ).model_dump(mode="python")
        result_obj.success = True

    return StageResult(
        announce="Reading service log...",
        progress_callback=do_work,
    )
