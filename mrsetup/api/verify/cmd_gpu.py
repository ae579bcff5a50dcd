"""GPU verification command - searches the service log for Metal support."""

import time
from collections.abc import Iterator

from .._output_schemas.verify import VerifyGpuOutput
from ..config.MRSetupConfig import MRSetupConfig
from ..StageResult import StageResult


def cmd_gpu() -> StageResult:
    """Check the service log for the GPU support marker.

    A miss is reported as a warning; callers decide whether it is fatal.
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.1, "Loading configuration...")
        config = MRSetupConfig.load()
        log_path = config.service.data.log_path  # type: ignore[attr-defined]
        marker = config.verify.gpu_marker

        yield (0.3, "Waiting for service to be ready...")
        time.sleep(config.verify.gpu_wait_secs)

        yield (0.7, "Searching service log...")
        detected = False
        if log_path.exists():
            with log_path.open(encoding="utf-8", errors="replace") as fh:
                detected = any(marker in line for line in fh)

        yield (1.0, "Complete")
        warnings: list[str] = []
        if detected:
            result_obj.result = "GPU support detected!"
        else:
            result_obj.result = "GPU support not detected"
            hint = f"GPU support not detected. Check logs: tail -f {log_path}"
            if not log_path.exists():
                hint = f"GPU support not detected: {log_path} does not exist yet"
            warnings.append(hint)
        result_obj.output = VerifyGpuOutput(
            errors=[],
            warnings=warnings,
            log_path=str(log_path),
            marker=marker,
            gpu_detected=detected,
        ).model_dump(mode="python")
        result_obj.success = detected

    return StageResult(
        announce="Verifying GPU support...",
        progress_callback=do_work,
    )
