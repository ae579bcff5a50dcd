"""Config show command - displays the effective configuration."""

from collections.abc import Iterator

from .._output_schemas.config import ConfigShowOutput
from ..StageResult import StageResult
from .MRSetupConfig import MRSetupConfig


def cmd_show(section: str = "") -> StageResult:
    """Show the effective configuration, or one section of it."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.2, "Loading configuration...")
        config_path = MRSetupConfig.get_config_path()
        try:
            config = MRSetupConfig.load()
        except ValueError as e:
            yield (1.0, "Complete")
            result_obj.result = str(e)
            result_obj.output = ConfigShowOutput(
                errors=[str(e)],
                warnings=[],
                section=section,
                content={},
                config_path=str(config_path),
                file_exists=config_path.exists(),
            ).model_dump(mode="python")
            result_obj.success = False
            return

        yield (0.7, "Selecting section...")
        full = config.to_dict()
        if section and section not in full:
            yield (1.0, "Complete")
            msg = f"Unknown section: {section!r} (available: {', '.join(full)})"
            result_obj.result = msg
            result_obj.output = ConfigShowOutput(
                errors=[msg],
                warnings=[],
                section=section,
                content={},
                config_path=str(config_path),
                file_exists=config_path.exists(),
            ).model_dump(mode="python")
            result_obj.success = False
            return

        warnings = [] if config_path.exists() else [f"No config file at {config_path}; showing defaults"]
        yield (1.0, "Complete")
        result_obj.result = f"Configuration {'section ' + repr(section) if section else 'loaded'}"
        result_obj.output = ConfigShowOutput(
            errors=[],
            warnings=warnings,
            section=section,
            content=full[section] if section else full,
            config_path=str(config_path),
            file_exists=config_path.exists(),
        ).model_dump(mode="python")
        result_obj.success = True

    return StageResult(
        announce="Showing configuration...",
        progress_callback=do_work,
    )
