"""Config init command - writes the default configuration file."""

from collections.abc import Iterator

from .._output_schemas.config import ConfigInitOutput
from ..StageResult import StageResult
from .MRSetupConfig import MRSetupConfig


def cmd_init() -> StageResult:
    """Write a config file holding the defaults, unless one already exists."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        config_path = MRSetupConfig.get_config_path()
        yield (0.3, "Checking for an existing config file...")
        if config_path.exists():
            yield (1.0, "Complete")
            result_obj.result = f"Config file already exists at {config_path}"
            result_obj.output = ConfigInitOutput(
                errors=[],
                warnings=[result_obj.result],
                config_path=str(config_path),
                created=False,
            ).model_dump(mode="python")
            result_obj.success = True
            return

        yield (0.6, "Writing defaults...")
        try:
            MRSetupConfig().save()
        except RuntimeError as e:
            yield (1.0, "Complete")
            result_obj.result = str(e)
            result_obj.output = ConfigInitOutput(
                errors=[str(e)],
                warnings=[],
                config_path=str(config_path),
                created=False,
            ).model_dump(mode="python")
            result_obj.success = False
            return

        yield (1.0, "Complete")
        result_obj.result = f"Default configuration written to {config_path}"
        result_obj.output = ConfigInitOutput(
            errors=[],
            warnings=[],
            config_path=str(config_path),
            created=True,
        ).model_dump(mode="python")
        result_obj.success = True

    return StageResult(
        announce="Initializing configuration...",
        progress_callback=do_work,
    )
