"""Output schemas for dependency commands."""

from pydantic import Field

from ._base import BaseOutputSchema
from ._registry import register_output_schema


class DepsInstallOutput(BaseOutputSchema):
    """Output schema for deps install command."""

    installed: list[str] = Field(..., description="Formulae installed by this run")
    present: dict[str, str] = Field(..., description="Already-present tools mapped to their version string")
    docker_model_plugin: bool = Field(..., description="Whether the docker model CLI plugin responds")
    xcode_pending: bool = Field(..., description="Whether Xcode Command Line Tools installation was started and setup must be re-run")


register_output_schema("deps", "install", DepsInstallOutput)
