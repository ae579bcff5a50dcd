"""Output schemas for service commands."""

from pydantic import Field

from ._base import BaseOutputSchema
from ._registry import register_output_schema


class ServiceInstallOutput(BaseOutputSchema):
    """Output schema for service install command."""

    message: str = Field(..., description="Human-readable result")
    label: str = Field(..., description="Service label")
    plist_path: str = Field(..., description="Path to the plist file")
    replaced_running: bool = Field(..., description="Whether a previously loaded service was unloaded first")
    installed: bool = Field(..., description="Whether the service is installed and loaded")


class ServiceUninstallOutput(BaseOutputSchema):
    """Output schema for service uninstall command."""

    message: str = Field(..., description="Human-readable result")
    label: str = Field(..., description="Service label")
    was_loaded: bool = Field(..., description="Whether the service was loaded before uninstall")
    plist_removed: bool = Field(..., description="Whether a plist file existed and was removed")
    uninstalled: bool = Field(..., description="Whether uninstall succeeded")


class ServiceStartOutput(BaseOutputSchema):
    """Output schema for service start command."""

    message: str = Field(..., description="Human-readable result")
    running: bool = Field(..., description="Whether the service is loaded after the command")


class ServiceStopOutput(BaseOutputSchema):
    """Output schema for service stop command."""

    message: str = Field(..., description="Human-readable result")
    stopped: bool = Field(..., description="Whether the service is unloaded after the command")


class ServiceRestartOutput(BaseOutputSchema):
    """Output schema for service restart command."""

    message: str = Field(..., description="Human-readable result")
    running: bool = Field(..., description="Whether the service is loaded after the command")


class ServiceStatusOutput(BaseOutputSchema):
    """Output schema for service status command."""

    label: str = Field(..., description="Service label")
    plist_path: str = Field(..., description="Path to the plist file")
    installed: bool = Field(..., description="Whether the plist file exists")
    loaded: bool = Field(..., description="Whether launchctl lists the service")
    pid: int = Field(..., description="Process ID if running, -1 otherwise")
    last_exit_status: int = Field(..., description="Last exit status reported by launchctl, 0 if unknown")
    log_path: str = Field(..., description="Service stdout log path")
    error_log_path: str = Field(..., description="Service stderr log path")


register_output_schema("service", "install", ServiceInstallOutput)
register_output_schema("service", "uninstall", ServiceUninstallOutput)
register_output_schema("service", "start", ServiceStartOutput)
register_output_schema("service", "stop", ServiceStopOutput)
register_output_schema("service", "restart", ServiceRestartOutput)
register_output_schema("service", "status", ServiceStatusOutput)
