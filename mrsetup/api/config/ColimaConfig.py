"""Colima VM configuration."""

from pydantic import BaseModel, ConfigDict, Field


class ColimaConfig(BaseModel):
    """Resources for 'colima start'."""

    model_config = ConfigDict(extra="forbid")

    cpu: int = Field(4, gt=0, description="Virtual CPUs")
    memory: int = Field(8, gt=0, description="Memory in GiB")
    disk: int = Field(60, gt=0, description="Disk size in GiB")
    vm_type: str = Field("vz", description="Virtualization framework")

    def start_args(self) -> list[str]:
        return [
            "colima",
            "start",
            "--cpu",
            str(self.cpu),
            "--memory",
            str(self.memory),
            "--disk",
            str(self.disk),
            f"--vm-type={self.vm_type}",
        ]
