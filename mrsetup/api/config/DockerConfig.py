"""Docker CLI configuration."""

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

from ...utils.expand_path import expand_path


class DockerConfig(BaseModel):
    """Locations of the docker CLI plugin."""

    model_config = ConfigDict(extra="forbid")

    cli_plugins_dir: str = Field("~/.docker/cli-plugins", description="Docker CLI plugin directory")
    model_plugin: str = Field("docker-model", description="File name of the docker model plugin")

    @property
    def model_plugin_path(self) -> Path:
        return expand_path(self.cli_plugins_dir) / self.model_plugin
