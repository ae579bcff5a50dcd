"""Binary install command - builds or downloads according to configuration."""

from collections.abc import Iterator

from .._output_schemas.binary import BinaryInstallOutput
from ..config.MRSetupConfig import MRSetupConfig
from ..StageResult import StageResult
from .cmd_build import cmd_build
from .cmd_download import cmd_download


def cmd_install() -> StageResult:
    """Obtain the model-runner binary the way ``binary.source`` says."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.0, "Loading configuration...")
        binary = MRSetupConfig.load().binary

        inner = cmd_build() if binary.source == "build" else cmd_download()
        yield from inner.progress_callback(inner)

        result_obj.result = inner.result
        result_obj.output = BinaryInstallOutput(
            errors=inner.output.get("errors", []),
            warnings=inner.output.get("warnings", []),
            source=binary.source,
            bin_path=inner.output.get("bin_path", str(binary.bin_path)),
            installed=inner.success,
        ).model_dump(mode="python")
        result_obj.success = inner.success

    return StageResult(
        announce="Installing model-runner binary...",
        progress_callback=do_work,
    )
