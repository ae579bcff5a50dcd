"""Shell profile configuration."""

from pydantic import BaseModel, ConfigDict, Field


class ShellConfig(BaseModel):
    """Environment variable exported from the user's shell startup file."""

    model_config = ConfigDict(extra="forbid")

    env_var: str = Field("MODEL_RUNNER_HOST", description="Variable pointing clients at the host service")
    host: str = Field("localhost", description="Host name used in the variable's URL")
    rc_file: str = Field("", description="Startup file to edit, empty to detect from $SHELL")
    comment: str = Field("# Docker Model Runner (GPU-accelerated)", description="Comment line preceding the export")
