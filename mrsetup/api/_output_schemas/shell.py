"""Output schemas for shell profile commands."""

from pydantic import Field

from ._base import BaseOutputSchema
from ._registry import register_output_schema


class ShellConfigureOutput(BaseOutputSchema):
    """Output schema for shell configure command."""

    rc_file: str = Field(..., description="Shell startup file, empty string if none was detected")
    env_var: str = Field(..., description="Environment variable name")
    value: str = Field(..., description="Environment variable value")
    appended: bool = Field(..., description="Whether the export block was appended by this run")


class ShellUnconfigureOutput(BaseOutputSchema):
    """Output schema for shell unconfigure command."""

    rc_file: str = Field(..., description="Shell startup file, empty string if none was detected")
    env_var: str = Field(..., description="Environment variable name")
    removed: bool = Field(..., description="Whether the export block was removed")


register_output_schema("shell", "configure", ShellConfigureOutput)
register_output_schema("shell", "unconfigure", ShellUnconfigureOutput)
