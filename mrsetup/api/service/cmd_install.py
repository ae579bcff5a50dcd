"""Service install command - writes the LaunchAgent plist and loads it."""

from collections.abc import Iterator

from .._output_schemas.service import ServiceInstallOutput
from ..config.MRSetupConfig import MRSetupConfig
from ..StageResult import StageResult
from .Service import Service


def cmd_install() -> StageResult:
    """Install model-runner as a system service.

    The descriptor is regenerated on every run; a running instance is unloaded first.
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.1, "Loading configuration...")
        config = MRSetupConfig.load()
        label = getattr(config.service.data, "label", "")

        yield (0.2, "Validating backend type...")
        failure_fields = {"message": "", "label": label, "plist_path": "", "replaced_running": False, "installed": False}
        if not Service.validate_backend_type(result_obj, config.service.type, ServiceInstallOutput, failure_fields):
            yield (1.0, "Complete")
            return

        program_path = config.binary.bin_path
        if not program_path.exists():
            yield (1.0, "Complete")
            msg = f"model-runner binary not found at {program_path}. Run 'mrsetup binary install' first."
            result_obj.result = f"Error: {msg}"
            result_obj.output = ServiceInstallOutput(
                errors=[msg], warnings=[], **{**failure_fields, "message": msg}
            ).model_dump(mode="python")
            result_obj.success = False
            return

        yield (0.5, "Writing service descriptor and loading service...")
        try:
            with Service(config.service) as service:
                result = service.install_service(program_path)
        except Exception as e:
            yield (1.0, "Complete")
            result_obj.result = f"Error installing service: {e}"
            result_obj.output = ServiceInstallOutput(
                errors=[str(e)], warnings=[], **{**failure_fields, "message": str(e)}
            ).model_dump(mode="python")
            result_obj.success = False
            return

        yield (1.0, "Complete")
        result_obj.result = "model-runner service is running!"
        result_obj.output = ServiceInstallOutput(
            errors=[],
            warnings=[],
            message=result_obj.result,
            label=result["label"],
            plist_path=result["plist_path"],
            replaced_running=result["replaced_running"],
            installed=True,
        ).model_dump(mode="python")
        result_obj.success = True

    return StageResult(
        announce="Setting up model-runner as a macOS service...",
        progress_callback=do_work,
    )
