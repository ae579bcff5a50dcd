"""Post-install verification configuration."""

from pydantic import BaseModel, ConfigDict, Field


class VerifyConfig(BaseModel):
    """Settings for GPU, HTTP and CLI checks."""

    model_config = ConfigDict(extra="forbid")

    gpu_marker: str = Field("gpuSupport=true", description="Log line fragment that indicates Metal support")
    gpu_wait_secs: float = Field(2.0, ge=0, description="Seconds to wait before searching the log")
    health_path: str = Field("/models", description="HTTP path probed for liveness")
    http_timeout_secs: float = Field(5.0, gt=0, description="HTTP probe timeout")
