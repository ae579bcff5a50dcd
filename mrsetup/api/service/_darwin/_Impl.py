"""macOS service implementation - runs model-runner as a launchd LaunchAgent."""

import logging
import subprocess
import time
from pathlib import Path
from typing import Any

from ....templating import render_xml_template
from ....utils.run_command import run_command
from .._AbstractImpl import _AbstractImpl
from ..ServiceConfig import ServiceConfig
from ._Data import _Data

logger = logging.getLogger(__name__)

_PLIST_TEMPLATE = """<?xml version="1.0" encoding="UTF-8"?>
<!DOCTYPE plist PUBLIC "-//Apple//DTD PLIST 1.0//EN" "http://www.apple.com/DTDs/PropertyList-1.0.dtd">
<plist version="1.0">
<dict>
    <key>Label</key>
    <string>{{ label }}</string>
    <key>ProgramArguments</key>
    <array>
        <string>{{ program_path }}</string>
    </array>
    <key>EnvironmentVariables</key>
    <dict>
{% for name, value in environment.items() %}
        <key>{{ name }}</key>
        <string>{{ value }}</string>
{% endfor %}
    </dict>
    <key>RunAtLoad</key>
    <{{ 'true' if run_at_load else 'false' }}/>
    <key>KeepAlive</key>
    <{{ 'true' if keep_alive else 'false' }}/>
    <key>StandardOutPath</key>
    <string>{{ stdout_path }}</string>
    <key>StandardErrorPath</key>
    <string>{{ stderr_path }}</string>
</dict>
</plist>
"""


class _Impl(_AbstractImpl):
    """macOS-specific service implementation."""

    @staticmethod
    def _get_launch_agents_dir() -> Path:
        """Get the LaunchAgents directory for the current user."""
        return Path.home() / "Library" / "LaunchAgents"

    @staticmethod
    def _get_plist_path(label: str) -> Path:
        """Get the plist file path for a given label."""
        return _Impl._get_launch_agents_dir() / f"{label}.plist"

    @staticmethod
    def _create_plist_content(config: _Data, program_path: Path) -> str:
        """Create launchd plist XML content that runs the model-runner binary."""
        return render_xml_template(
            _PLIST_TEMPLATE,
            {
                "label": config.label,
                "program_path": str(program_path),
                "environment": {
                    "MODEL_RUNNER_PORT": str(config.port),
                    "LLAMA_SERVER_PATH": config.llama_server_path,
                },
                "run_at_load": config.run_at_load,
                "keep_alive": config.keep_alive,
                "stdout_path": str(config.log_path),
                "stderr_path": str(config.error_log_path),
            },
        )

    @staticmethod
    def _parse_launchctl_list(output: str, label: str) -> dict[str, Any] | None:
        """Find ``label`` in 'launchctl list' output.

        Lines look like ``PID<TAB>Status<TAB>Label``; PID is '-' when not running.
        """
        for line in output.splitlines():
            parts = line.split()
            if len(parts) < 3 or parts[2] != label:
                continue
            entry: dict[str, Any] = {"pid": None, "last_exit_status": 0}
            if parts[0].isdigit():
                entry["pid"] = int(parts[0])
            try:
                entry["last_exit_status"] = int(parts[1])
            except ValueError:
                pass
            return entry
        return None

    def __init__(self, service_config: ServiceConfig):
        if not isinstance(service_config.data, _Data):
            raise ValueError("macOS service config data is required")
        self.config = service_config
        self.data: _Data = service_config.data

    def _launchctl(self, *args: str, check: bool = False) -> subprocess.CompletedProcess:
        return run_command(["launchctl", *args], check=check)

    def _list_entry(self) -> dict[str, Any] | None:
        result = self._launchctl("list")
        if result.returncode != 0:
            return None
        return self._parse_launchctl_list(result.stdout or "", self.data.label)

    def is_loaded(self) -> bool:
        """Whether launchctl currently lists the service label."""
        return self._list_entry() is not None

    def install_service(self, program_path: Path) -> dict[str, Any]:
        """Regenerate the plist and (re)load the service.

        The plist is overwritten on every call. A loaded service is unloaded first.
        """
        plist_path = self._get_plist_path(self.data.label)

        replaced_running = False
        if self.is_loaded():
            logger.info("Stopping existing service %s", self.data.label)
            self._launchctl("unload", str(plist_path))
            replaced_running = True

        plist_path.parent.mkdir(parents=True, exist_ok=True)
        self.data.log_path.parent.mkdir(parents=True, exist_ok=True)
        self.data.error_log_path.parent.mkdir(parents=True, exist_ok=True)
        plist_path.write_text(self._create_plist_content(self.data, program_path), encoding="utf-8")
        logger.info("Wrote %s", plist_path)

        self._launchctl("load", str(plist_path), check=True)

        time.sleep(self.data.startup_wait_secs)

        if not self.is_loaded():
            raise RuntimeError(f"Failed to start model-runner service. Check logs at: {self.data.log_path}")

        return {
            "success": True,
            "type": "darwin",
            "label": self.data.label,
            "plist_path": str(plist_path),
            "replaced_running": replaced_running,
        }

    def uninstall_service(self) -> dict[str, Any]:
        """Unload the service if loaded and remove the plist if it exists."""
        plist_path = self._get_plist_path(self.data.label)

        was_loaded = self.is_loaded()
        if was_loaded:
            # Errors while unloading are ignored; the plist is removed regardless
            self._launchctl("unload", str(plist_path))

        plist_removed = False
        if plist_path.exists():
            plist_path.unlink()
            plist_removed = True

        return {
            "success": True,
            "type": "darwin",
            "label": self.data.label,
            "plist_path": str(plist_path),
            "was_loaded": was_loaded,
            "plist_removed": plist_removed,
        }

    def get_service_status(self) -> dict[str, Any]:
        """Get LaunchAgent status from the plist file and 'launchctl list'."""
        plist_path = self._get_plist_path(self.data.label)
        entry = self._list_entry()

        status: dict[str, Any] = {
            "installed": plist_path.exists(),
            "loaded": entry is not None,
            "label": self.data.label,
            "plist_path": str(plist_path),
            "log_path": str(self.data.log_path),
            "error_log_path": str(self.data.error_log_path),
        }
        if entry is not None:
            if entry["pid"] is not None:
                status["pid"] = entry["pid"]
            status["last_exit_status"] = entry["last_exit_status"]
        return status

    def start_service(self) -> dict[str, Any]:
        """Load the service plist."""
        plist_path = self._get_plist_path(self.data.label)

        if self.is_loaded():
            return {
                "success": True,
                "type": "darwin",
                "label": self.data.label,
                "note": "Service was already running.",
            }

        if not plist_path.exists():
            return {
                "success": False,
                "error": f"Service is not installed (no plist at {plist_path})",
            }

        result = self._launchctl("load", str(plist_path))
        if result.returncode != 0:
            return {
                "success": False,
                "error": f"Failed to load service: {(result.stderr or '').strip()}",
            }

        time.sleep(self.data.startup_wait_secs)
        if not self.is_loaded():
            return {
                "success": False,
                "error": f"Service failed to start. Check logs at: {self.data.log_path}",
            }

        return {
            "success": True,
            "type": "darwin",
            "label": self.data.label,
        }

    def stop_service(self) -> dict[str, Any]:
        """Unload the service plist. Stopping a service that is not loaded succeeds."""
        plist_path = self._get_plist_path(self.data.label)

        if not self.is_loaded():
            return {
                "success": True,
                "type": "darwin",
                "label": self.data.label,
                "note": "Service was not running (already stopped).",
            }

        result = self._launchctl("unload", str(plist_path))
        if result.returncode != 0:
            error_msg = (result.stderr or "").strip()
            return {
                "success": False,
                "error": f"Failed to stop service: {error_msg}" if error_msg else "Failed to stop service.",
            }

        return {
            "success": True,
            "type": "darwin",
            "label": self.data.label,
        }
