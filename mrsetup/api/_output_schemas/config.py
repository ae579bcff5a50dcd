"""Output schemas for config commands."""

from typing import Any

from pydantic import Field

from ._base import BaseOutputSchema
from ._registry import register_output_schema


class ConfigShowOutput(BaseOutputSchema):
    """Output schema for config show command."""

    section: str = Field(..., description="Section name, empty string when showing the whole configuration")
    content: dict[str, Any] = Field(..., description="Section content, or the whole configuration")
    config_path: str = Field(..., description="Path to the configuration file")
    file_exists: bool = Field(..., description="Whether the configuration file exists (defaults are used otherwise)")


class ConfigInitOutput(BaseOutputSchema):
    """Output schema for config init command."""

    config_path: str = Field(..., description="Path to the configuration file")
    created: bool = Field(..., description="Whether a new file was written")


class ConfigVersionOutput(BaseOutputSchema):
    """Output schema for config version command."""

    version: str = Field(..., description="Package version string")
    git_sha: str = Field(..., description="Git commit SHA (short), empty string if not available")
    full_version: str = Field(..., description="Full version string (version + git_sha if available)")


register_output_schema("config", "show", ConfigShowOutput)
register_output_schema("config", "init", ConfigInitOutput)
register_output_schema("config", "version", ConfigVersionOutput)
