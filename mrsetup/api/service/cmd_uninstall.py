"""Service uninstall command - unloads the service and removes its plist."""

from collections.abc import Iterator

from .._output_schemas.service import ServiceUninstallOutput
from ..config.MRSetupConfig import MRSetupConfig
from ..StageResult import StageResult
from .Service import Service


def cmd_uninstall() -> StageResult:
    """Uninstall the system service. The plist is removed only if it exists."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.1, "Loading configuration...")
        config = MRSetupConfig.load()
        label = getattr(config.service.data, "label", "")

        yield (0.2, "Validating backend type...")
        failure_fields = {"message": "", "label": label, "was_loaded": False, "plist_removed": False, "uninstalled": False}
        if not Service.validate_backend_type(result_obj, config.service.type, ServiceUninstallOutput, failure_fields):
            yield (1.0, "Complete")
            return

        yield (0.5, "Uninstalling service...")
        try:
            with Service(config.service) as service:
                result = service.uninstall_service()
        except Exception as e:
            yield (1.0, "Complete")
            result_obj.result = f"Error uninstalling service: {e}"
            result_obj.output = ServiceUninstallOutput(
                errors=[str(e)], warnings=[], **{**failure_fields, "message": str(e)}
            ).model_dump(mode="python")
            result_obj.success = False
            return

        yield (1.0, "Complete")
        parts = ["Service stopped" if result["was_loaded"] else "Service not running"]
        parts.append("LaunchAgent removed" if result["plist_removed"] else "LaunchAgent plist not found")
        result_obj.result = "; ".join(parts)
        result_obj.output = ServiceUninstallOutput(
            errors=[],
            warnings=[],
            message=result_obj.result,
            label=result["label"],
            was_loaded=result["was_loaded"],
            plist_removed=result["plist_removed"],
            uninstalled=True,
        ).model_dump(mode="python")
        result_obj.success = True

    return StageResult(
        announce="Uninstalling service...",
        progress_callback=do_work,
    )
