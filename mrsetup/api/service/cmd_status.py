"""Service status command."""

from collections.abc import Iterator
from typing import Any

from .._output_schemas.service import ServiceStatusOutput
from ..config.MRSetupConfig import MRSetupConfig
from ..StageResult import StageResult
from .Service import Service


def cmd_status() -> StageResult:
    """Report whether the LaunchAgent is installed and loaded."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.1, "Loading configuration...")
        config = MRSetupConfig.load()
        data = config.service.data
        fields: dict[str, Any] = {
            "label": getattr(data, "label", ""),
            "plist_path": "",
            "installed": False,
            "loaded": False,
            "pid": -1,
            "last_exit_status": 0,
            "log_path": str(getattr(data, "log_path", "")),
            "error_log_path": str(getattr(data, "error_log_path", "")),
        }

        yield (0.2, "Validating backend type...")
        if not Service.validate_backend_type(result_obj, config.service.type, ServiceStatusOutput, fields):
            yield (1.0, "Complete")
            return

        yield (0.5, "Querying launchctl...")
        try:
            with Service(config.service) as service:
                status = service.get_service_status()
        except Exception as e:
            yield (1.0, "Complete")
            result_obj.result = f"Error querying service status: {e}"
            result_obj.output = ServiceStatusOutput(errors=[str(e)], warnings=[], **fields).model_dump(mode="python")
            result_obj.success = False
            return

        fields.update(
            plist_path=status["plist_path"],
            installed=status["installed"],
            loaded=status["loaded"],
            pid=status.get("pid", -1),
            last_exit_status=status.get("last_exit_status", 0),
        )
        warnings: list[str] = []
        if status["loaded"] and not status["installed"]:
            warnings.append("Service is loaded but its plist file is missing")
        if status["loaded"] and fields["last_exit_status"] != 0:
            warnings.append(f"Service last exited with status {fields['last_exit_status']}; check {fields['error_log_path']}")

        yield (1.0, "Complete")
        if status["loaded"]:
            pid_text = f"PID {fields['pid']}" if fields["pid"] != -1 else "not currently running"
            result_obj.result = f"Service loaded ({pid_text})"
        elif status["installed"]:
            result_obj.result = "Service installed but not loaded"
        else:
            result_obj.result = "Service not installed"
        result_obj.output = ServiceStatusOutput(errors=[], warnings=warnings, **fields).model_dump(mode="python")
        result_obj.success = True

    return StageResult(
        announce="Checking service status...",
        progress_callback=do_work,
    )
