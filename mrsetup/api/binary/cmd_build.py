"""Binary build command - clones or updates the fork and builds with CGO."""

import logging
from collections.abc import Iterator

from ...utils.run_command import run_command
from .._output_schemas.binary import BinaryBuildOutput
from ..config.MRSetupConfig import MRSetupConfig
from ..StageResult import StageResult
from ._install_executable import _install_executable

logger = logging.getLogger(__name__)


def cmd_build() -> StageResult:
    """Build model-runner from its git repository and install the binary.

    CGO is enabled for the build so the binary links against Metal.
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.05, "Loading configuration...")
        binary = MRSetupConfig.load().binary
        repo_dir = binary.repo_dir
        bin_path = binary.bin_path
        action = ""

        def fail(message: str) -> None:
            logger.error(message)
            result_obj.result = message
            result_obj.output = BinaryBuildOutput(
                errors=[message],
                warnings=[],
                repo_dir=str(repo_dir),
                action=action,
                bin_path=str(bin_path),
                installed=False,
            ).model_dump(mode="python")
            result_obj.success = False

        repo_dir.parent.mkdir(parents=True, exist_ok=True)
        try:
            if repo_dir.is_dir():
                yield (0.1, "Updating existing repository...")
                run_command(["git", "pull"], cwd=str(repo_dir), check=True)
                action = "updated"
            else:
                yield (0.1, "Cloning repository...")
                run_command(["git", "clone", binary.repo_url, str(repo_dir)], check=True)
                action = "cloned"

            yield (0.4, "Building model-runner binary...")
            run_command(["make", binary.build_target], cwd=str(repo_dir), env={"CGO_ENABLED": "1"}, check=True)
        except RuntimeError as e:
            yield (1.0, "Complete")
            fail(f"Build failed: {e}")
            return

        built = repo_dir / binary.name
        if not built.is_file():
            yield (1.0, "Complete")
            fail(f"Build finished but {built} was not produced")
            return

        yield (0.9, "Installing binary...")
        try:
            _install_executable(built, bin_path)
        except OSError as e:
            yield (1.0, "Complete")
            fail(f"Failed to install binary: {e}")
            return

        yield (1.0, "Complete")
        result_obj.result = f"model-runner installed to {bin_path}"
        result_obj.output = BinaryBuildOutput(
            errors=[],
            warnings=[],
            repo_dir=str(repo_dir),
            action=action,
            bin_path=str(bin_path),
            installed=True,
        ).model_dump(mode="python")
        result_obj.success = True

    return StageResult(
        announce="Building model-runner from forked repository...",
        progress_callback=do_work,
    )
