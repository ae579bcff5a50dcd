"""Service stop command."""

from collections.abc import Iterator

from .._output_schemas.service import ServiceStopOutput
from ..config.MRSetupConfig import MRSetupConfig
from ..StageResult import StageResult
from .Service import Service


def cmd_stop() -> StageResult:
    """Unload the service. Stopping a stopped service is not an error."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.1, "Loading configuration...")
        config = MRSetupConfig.load()

        yield (0.2, "Validating backend type...")
        if not Service.validate_backend_type(
            result_obj, config.service.type, ServiceStopOutput, {"message": "", "stopped": False}
        ):
            yield (1.0, "Complete")
            return

        yield (0.5, "Stopping service...")
        try:
            with Service(config.service) as service:
                result = service.stop_service()
        except Exception as e:
            result = {"success": False, "error": str(e)}

        yield (1.0, "Complete")
        if result["success"]:
            message = result.get("note") or f"Service stopped (label: {result['label']})"
            errors: list[str] = []
        else:
            message = result["error"]
            errors = [result["error"]]
        result_obj.result = message
        result_obj.output = ServiceStopOutput(
            errors=errors,
            warnings=[],
            message=message,
            stopped=result["success"],
        ).model_dump(mode="python")
        result_obj.success = result["success"]

    return StageResult(
        announce="Stopping model-runner service...",
        progress_callback=do_work,
    )
