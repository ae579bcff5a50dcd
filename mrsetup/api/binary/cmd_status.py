"""Binary status command."""

import os
from collections.abc import Iterator

from .._output_schemas.binary import BinaryStatusOutput
from ..config.MRSetupConfig import MRSetupConfig
from ..StageResult import StageResult


def cmd_status() -> StageResult:
    """Report whether the binary is installed and executable."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.3, "Loading configuration...")
        bin_path = MRSetupConfig.load().binary.bin_path

        yield (0.7, "Inspecting binary...")
        exists = bin_path.is_file()
        executable = exists and os.access(bin_path, os.X_OK)
        size = bin_path.stat().st_size if exists else 0

        yield (1.0, "Complete")
        if not exists:
            result_obj.result = f"Binary not found at {bin_path}"
        elif not executable:
            result_obj.result = f"Binary at {bin_path} is not executable"
        else:
            result_obj.result = f"Binary installed at {bin_path}"
        result_obj.output = BinaryStatusOutput(
            errors=[] if executable else [result_obj.result],
            warnings=[],
            bin_path=str(bin_path),
            exists=exists,
            executable=executable,
            size_bytes=size,
        ).model_dump(mode="python")
        result_obj.success = executable

    return StageResult(
        announce="Checking model-runner binary...",
        progress_callback=do_work,
    )
