"""Uninstall command - removes the model-runner service and binary.

llama.cpp, the Docker CLI, Colima and the shell profile entry are left in place.
"""

import logging
from collections.abc import Iterator
from pathlib import Path

from .._output_schemas.uninstall import UninstallUninstallOutput
from ..config.MRSetupConfig import MRSetupConfig
from ..service.Service import Service
from ..StageResult import StageResult

logger = logging.getLogger(__name__)

KEPT_COMPONENTS = [
    "llama.cpp",
    "Docker CLI",
    "Colima",
    "MODEL_RUNNER_HOST environment variable in shell profile",
]


def cmd_uninstall() -> StageResult:
    """Stop the service and delete everything setup created, reporting what was found."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.1, "Loading configuration...")
        config = MRSetupConfig.load()
        data = config.service.data
        removed: list[str] = []
        not_found: list[str] = []
        errors: list[str] = []

        def remove(path: Path) -> None:
            if not path.exists():
                not_found.append(str(path))
                return
            try:
                path.unlink()
                removed.append(str(path))
            except OSError as e:
                errors.append(f"Failed to remove {path}: {e}")

        yield (0.2, "Stopping model-runner service...")
        service_stopped = False
        try:
            with Service(config.service) as service:
                service_result = service.uninstall_service()
            service_stopped = service_result["was_loaded"]
            if service_result["plist_removed"]:
                removed.append(service_result["plist_path"])
            else:
                not_found.append(service_result["plist_path"])
        except Exception as e:
            errors.append(f"Failed to remove service: {e}")

        yield (0.5, "Removing model-runner binary...")
        remove(config.binary.bin_path)

        yield (0.7, "Removing docker model CLI plugin...")
        remove(config.docker.model_plugin_path)

        yield (0.9, "Removing logs...")
        log_path = data.log_path  # type: ignore[attr-defined]
        if log_path.exists():
            remove(log_path)
            error_log_path = data.error_log_path  # type: ignore[attr-defined]
            if error_log_path.exists():
                remove(error_log_path)

        yield (1.0, "Complete")
        env_var = config.shell.env_var
        warnings = [
            f"To remove the environment variable, edit your ~/.zshrc or ~/.bashrc and remove the {env_var} "
            "export line (or run 'mrsetup shell unconfigure')"
        ]
        if errors:
            result_obj.result = "model-runner uninstall finished with errors"
        else:
            result_obj.result = "model-runner uninstalled successfully"
        for path in removed:
            logger.info("Removed %s", path)
        result_obj.output = UninstallUninstallOutput(
            errors=errors,
            warnings=warnings,
            service_stopped=service_stopped,
            removed=removed,
            not_found=not_found,
            kept=KEPT_COMPONENTS,
        ).model_dump(mode="python")
        result_obj.success = not errors

    return StageResult(
        announce="Uninstalling model-runner...",
        progress_callback=do_work,
    )
