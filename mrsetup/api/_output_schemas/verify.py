"""Output schemas for verification commands."""

from pydantic import Field

from ._base import BaseOutputSchema
from ._registry import register_output_schema


class VerifyGpuOutput(BaseOutputSchema):
    """Output schema for verify gpu command."""

    log_path: str = Field(..., description="Log file searched")
    marker: str = Field(..., description="Marker string searched for")
    gpu_detected: bool = Field(..., description="Whether the marker was found")


class VerifyHealthOutput(BaseOutputSchema):
    """Output schema for verify health command."""

    url: str = Field(..., description="Probed URL")
    status_code: int = Field(..., description="HTTP status code, 0 when no response was received")
    responding: bool = Field(..., description="Whether the service answered with a 2xx status")


class VerifyCliOutput(BaseOutputSchema):
    """Output schema for verify cli command."""

    host: str = Field(..., description="MODEL_RUNNER_HOST value used")
    returncode: int = Field(..., description="Exit code of 'docker model ls', -1 if it could not run")
    working: bool = Field(..., description="Whether 'docker model ls' succeeded")


register_output_schema("verify", "gpu", VerifyGpuOutput)
register_output_schema("verify", "health", VerifyHealthOutput)
register_output_schema("verify", "cli", VerifyCliOutput)
