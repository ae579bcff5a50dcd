"""macOS (launchd) specific service configuration data."""

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ....utils.expand_path import expand_path


class _Data(BaseModel):
    """macOS LaunchAgent configuration data."""

    model_config = ConfigDict(extra="forbid")

    label: str = Field("com.liquescent.model-runner", description="Launchd service identifier (reverse DNS format)")
    keep_alive: bool = Field(True, description="Whether launchd should restart the service if it exits")
    run_at_load: bool = Field(True, description="Whether the service starts as soon as it is loaded")
    port: int = Field(12434, gt=0, lt=65536, description="MODEL_RUNNER_PORT passed to the service")
    llama_server_path: str = Field("/opt/homebrew/bin", description="LLAMA_SERVER_PATH passed to the service")
    log_file: str = Field("~/Library/Logs/model-runner.log", description="StandardOutPath")
    error_log_file: str = Field("~/Library/Logs/model-runner.err", description="StandardErrorPath")
    startup_wait_secs: float = Field(3.0, ge=0, description="Seconds to wait after loading before checking the service")

    @field_validator("label")
    @classmethod
    def validate_label(cls, v: str) -> str:
        if not v:
            raise ValueError("service.data.label is required when service.type is 'darwin'")
        parts = v.split(".")
        if len(parts) < 2:
            raise ValueError(f"service.data.label must be in reverse DNS format (e.g., 'com.example.app'), got: {v!r}")
        return v

    @property
    def log_path(self) -> Path:
        return expand_path(self.log_file)

    @property
    def error_log_path(self) -> Path:
        return expand_path(self.error_log_file)
