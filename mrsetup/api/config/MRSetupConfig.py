"""Top-level mrsetup configuration."""

import json
from contextlib import suppress
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ...constants import CONFIG_FILE_NAME
from ..service.ServiceConfig import ServiceConfig
from .BinaryConfig import BinaryConfig
from .ColimaConfig import ColimaConfig
from .DockerConfig import DockerConfig
from .get_home_dir import get_home_dir
from .LogConfig import LogConfig
from .ShellConfig import ShellConfig
from .VerifyConfig import VerifyConfig


class MRSetupConfig(BaseModel):
    """Top-level configuration for every setup step.

    Every section has defaults, so a missing config file means "use the defaults".
    """

    model_config = ConfigDict(extra="forbid")

    binary: BinaryConfig = Field(default_factory=BinaryConfig)
    service: ServiceConfig = Field(default_factory=ServiceConfig)
    colima: ColimaConfig = Field(default_factory=ColimaConfig)
    shell: ShellConfig = Field(default_factory=ShellConfig)
    docker: DockerConfig = Field(default_factory=DockerConfig)
    verify: VerifyConfig = Field(default_factory=VerifyConfig)
    log: LogConfig = Field(default_factory=LogConfig)

    @classmethod
    def get_home_dir(cls) -> Path:
        """Get mrsetup home directory based on MRSETUP_HOME or default to ~/.mrsetup."""
        return get_home_dir()

    @classmethod
    def get_config_path(cls) -> Path:
        """Get path to the config file."""
        return get_home_dir(CONFIG_FILE_NAME)

    @classmethod
    def load(cls) -> "MRSetupConfig":
        """Load and validate config from file, falling back to defaults if it does not exist.

        Raises:
            ValueError: If the file holds invalid JSON or fails validation
        """
        path = cls.get_config_path()
        if not path.exists():
            return cls()

        try:
            with path.open() as fh:
                raw = json.load(fh)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in config file {path}: {e}") from e

        if not isinstance(raw, dict):
            raise ValueError(f"Config file {path} must contain a JSON object")

        try:
            return cls(**raw)
        except ValidationError as e:
            error_list = e.errors() or [{"msg": str(e), "loc": ()}]
            first = error_list[0]
            error_msg = first.get("msg", str(e))
            loc = first.get("loc", ())
            field = ".".join(str(x) for x in loc) if isinstance(loc, (list, tuple)) else ""
            detail = f"{field}: {error_msg}" if field else error_msg
            raise ValueError(f"Configuration validation error: {detail}") from e

    def to_dict(self) -> dict[str, Any]:
        """Convert to a dictionary for serialization."""
        return {
            "binary": self.binary.model_dump(),
            "service": self.service.model_dump(),
            "colima": self.colima.model_dump(),
            "shell": self.shell.model_dump(),
            "docker": self.docker.model_dump(),
            "verify": self.verify.model_dump(),
            "log": self.log.model_dump(),
        }

    def save(self) -> None:
        """Save the configuration atomically (write temp file, then rename)."""
        path = self.get_config_path()
        path.parent.mkdir(parents=True, exist_ok=True)
        temp_path = path.with_suffix(path.suffix + ".tmp")
        try:
            with temp_path.open("w") as fh:
                json.dump(self.to_dict(), fh, indent=4)
            temp_path.replace(path)
        except Exception as e:
            with suppress(Exception):
                if temp_path.exists():
                    temp_path.unlink()
            raise RuntimeError(f"Failed to save config: {e}") from e

    @property
    def host_url(self) -> str:
        """URL clients use to reach the service (value of MODEL_RUNNER_HOST)."""
        return f"http://{self.shell.host}:{self.service.data.port}"  # type: ignore[attr-defined]
