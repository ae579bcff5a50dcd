"""Binary acquisition configuration."""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator

from ...utils.expand_path import expand_path


class BinaryConfig(BaseModel):
    """Where the model-runner binary comes from and where it is installed."""

    model_config = ConfigDict(extra="forbid")

    source: Literal["build", "download"] = Field("build", description="Build from source or download a pre-built binary")
    repo_url: str = Field(
        "https://github.com/Liquescent-Development/model-runner",
        description="Git repository built when source is 'build'",
    )
    build_target: str = Field("build", description="make target producing the binary")
    download_url: str = Field("", description="Pre-built binary URL, required when source is 'download'")
    sha256: str = Field("", description="Expected SHA-256 of the download, empty to skip verification")
    install_dir: str = Field("~/.local/share/model-runner", description="Directory holding the source checkout")
    bin_dir: str = Field("~/.local/bin", description="Directory the binary is installed to")
    name: str = Field("model-runner", description="Binary file name")

    @model_validator(mode="after")
    def _require_download_url(self) -> "BinaryConfig":
        if self.source == "download" and not self.download_url:
            raise ValueError("binary.download_url is required when binary.source is 'download'")
        return self

    @property
    def bin_path(self) -> Path:
        return expand_path(self.bin_dir) / self.name

    @property
    def repo_dir(self) -> Path:
        return expand_path(self.install_dir) / "repo"
