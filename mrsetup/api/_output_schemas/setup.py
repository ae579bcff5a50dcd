"""Output schemas for the setup pipeline."""

from typing import Any

from pydantic import Field

from ._base import BaseOutputSchema
from ._registry import register_output_schema


class SetupSetupOutput(BaseOutputSchema):
    """Output schema for the full setup pipeline."""

    steps: list[dict[str, Any]] = Field(..., description="Per-step records: name, success, result")
    completed: bool = Field(..., description="Whether every step ran (false when stopped early)")
    usage: str = Field(..., description="Rendered quick-start guide, empty string if setup did not complete")


class SetupUsageOutput(BaseOutputSchema):
    """Output schema for the usage command."""

    usage: str = Field(..., description="Rendered quick-start guide")


register_output_schema("setup", "setup", SetupSetupOutput)
register_output_schema("setup", "usage", SetupUsageOutput)
