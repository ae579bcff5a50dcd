"""Output schemas for colima commands."""

from pydantic import Field

from ._base import BaseOutputSchema
from ._registry import register_output_schema


class ColimaStartOutput(BaseOutputSchema):
    """Output schema for colima start command."""

    already_running: bool = Field(..., description="Whether Colima was already running")
    started: bool = Field(..., description="Whether this command started Colima")
    running: bool = Field(..., description="Whether Colima is running after the command")


class ColimaStatusOutput(BaseOutputSchema):
    """Output schema for colima status command."""

    running: bool = Field(..., description="Whether Colima is running")
    detail: str = Field(..., description="Raw status text reported by colima")


register_output_schema("colima", "start", ColimaStartOutput)
register_output_schema("colima", "status", ColimaStatusOutput)
