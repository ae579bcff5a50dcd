"""Output schemas for prerequisite commands."""

from pydantic import Field

from ._base import BaseOutputSchema
from ._registry import register_output_schema


class PrereqCheckOutput(BaseOutputSchema):
    """Output schema for prereq check command."""

    system: str = Field(..., description="Operating system reported by platform.system()")
    machine: str = Field(..., description="Machine architecture reported by platform.machine()")
    brew_path: str = Field(..., description="Path to brew, empty string if not found")
    colima_path: str = Field(..., description="Path to colima, empty string if not found")
    installed: list[str] = Field(..., description="Formulae installed during the check")
    passed: bool = Field(..., description="Whether all prerequisites are satisfied")


register_output_schema("prereq", "check", PrereqCheckOutput)
