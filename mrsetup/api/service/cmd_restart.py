"""Service restart command."""

from collections.abc import Iterator

from .._output_schemas.service import ServiceRestartOutput
from ..config.MRSetupConfig import MRSetupConfig
from ..StageResult import StageResult
from .Service import Service


def cmd_restart() -> StageResult:
    """Unload and reload the service."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.1, "Loading configuration...")
        config = MRSetupConfig.load()

        yield (0.2, "Validating backend type...")
        if not Service.validate_backend_type(
            result_obj, config.service.type, ServiceRestartOutput, {"message": "", "running": False}
        ):
            yield (1.0, "Complete")
            return

        yield (0.5, "Restarting service...")
        try:
            with Service(config.service) as service:
                result = service.restart_service()
        except Exception as e:
            result = {"success": False, "error": str(e)}

        yield (1.0, "Complete")
        if result["success"]:
            message = f"Service restarted (label: {result['label']})"
            errors: list[str] = []
        else:
            message = f"Error restarting service: {result['error']}"
            errors = [result["error"]]
        result_obj.result = message
        result_obj.output = ServiceRestartOutput(
            errors=errors,
            warnings=[],
            message=message,
            running=result["success"],
        ).model_dump(mode="python")
        result_obj.success = result["success"]

    return StageResult(
        announce="Restarting model-runner service...",
        progress_callback=do_work,
    )
