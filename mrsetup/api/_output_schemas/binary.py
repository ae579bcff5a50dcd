"""Output schemas for binary commands."""

from pydantic import Field

from ._base import BaseOutputSchema
from ._registry import register_output_schema


class BinaryBuildOutput(BaseOutputSchema):
    """Output schema for binary build command."""

    repo_dir: str = Field(..., description="Source checkout directory")
    action: str = Field(..., description="'cloned' or 'updated', empty string if the checkout failed")
    bin_path: str = Field(..., description="Installed binary path")
    installed: bool = Field(..., description="Whether the binary was installed")


class BinaryDownloadOutput(BaseOutputSchema):
    """Output schema for binary download command."""

    url: str = Field(..., description="Download URL")
    bin_path: str = Field(..., description="Installed binary path")
    size_bytes: int = Field(..., description="Downloaded size in bytes, 0 on failure")
    sha256: str = Field(..., description="SHA-256 of the downloaded file, empty string on failure")
    installed: bool = Field(..., description="Whether the binary was installed")


class BinaryInstallOutput(BaseOutputSchema):
    """Output schema for binary install command."""

    source: str = Field(..., description="'build' or 'download'")
    bin_path: str = Field(..., description="Installed binary path")
    installed: bool = Field(..., description="Whether the binary was installed")


class BinaryStatusOutput(BaseOutputSchema):
    """Output schema for binary status command."""

    bin_path: str = Field(..., description="Binary path")
    exists: bool = Field(..., description="Whether the binary exists")
    executable: bool = Field(..., description="Whether the binary is executable")
    size_bytes: int = Field(..., description="File size in bytes, 0 if missing")


register_output_schema("binary", "build", BinaryBuildOutput)
register_output_schema("binary", "download", BinaryDownloadOutput)
register_output_schema("binary", "install", BinaryInstallOutput)
register_output_schema("binary", "status", BinaryStatusOutput)
