"""Output schemas for the uninstall command."""

from pydantic import Field

from ._base import BaseOutputSchema
from ._registry import register_output_schema


class UninstallUninstallOutput(BaseOutputSchema):
    """Output schema for uninstall command."""

    service_stopped: bool = Field(..., description="Whether a loaded service was unloaded")
    removed: list[str] = Field(..., description="Paths removed")
    not_found: list[str] = Field(..., description="Paths that did not exist")
    kept: list[str] = Field(..., description="Components intentionally left installed")


register_output_schema("uninstall", "uninstall", UninstallUninstallOutput)
