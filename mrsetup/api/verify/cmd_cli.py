"""docker model CLI verification command."""

from collections.abc import Iterator

from ...utils.run_command import run_command
from .._output_schemas.verify import VerifyCliOutput
from ..config.MRSetupConfig import MRSetupConfig
from ..StageResult import StageResult


def cmd_cli() -> StageResult:
    """Run 'docker model ls' against the host service.

    Failure is expected while no models are pulled, so it is reported as a warning.
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.2, "Loading configuration...")
        config = MRSetupConfig.load()
        host = config.host_url

        yield (0.5, "Running docker model ls...")
        result = run_command(["docker", "model", "ls"], env={config.shell.env_var: host}, timeout=60)
        working = result.returncode == 0

        yield (1.0, "Complete")
        warnings: list[str] = []
        if working:
            result_obj.result = "docker model CLI is working!"
        else:
            result_obj.result = "docker model CLI returned an error"
            warnings.append(
                "docker model CLI test returned an error, but this might be normal if no models are installed yet"
            )
        result_obj.output = VerifyCliOutput(
            errors=[],
            warnings=warnings,
            host=host,
            returncode=result.returncode,
            working=working,
        ).model_dump(mode="python")
        result_obj.success = working

    return StageResult(
        announce="Testing docker model CLI...",
        progress_callback=do_work,
    )
