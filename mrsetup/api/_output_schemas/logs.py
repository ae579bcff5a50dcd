"""Output schemas for log commands."""

from pydantic import Field

from ._base import BaseOutputSchema
from ._registry import register_output_schema


class LogsTailOutput(BaseOutputSchema):
    """Output schema for logs tail command."""

    log_path: str = Field(..., description="Log file read")
    exists: bool = Field(..., description="Whether the log file exists")
    lines: list[str] = Field(..., description="Last lines of the log, oldest first")


register_output_schema("logs", "tail", LogsTailOutput)
