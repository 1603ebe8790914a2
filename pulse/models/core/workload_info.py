"""Normalized workload (VM or container) model."""

from pydantic import BaseModel, ConfigDict, Field

from pulse.constants.enums import WorkloadKind, WorkloadStatus


class WorkloadInfo(BaseModel):
    """A virtual machine or container running on a node.

    ``node`` is the owning node's name. It is not guaranteed to match a
    node present in the same refresh.
    """

    model_config = ConfigDict(frozen=True)

    vmid: int
    name: str
    node: str
    kind: WorkloadKind
    status: WorkloadStatus = WorkloadStatus.STOPPED
    cpu_usage: float = 0.0
    memory_used: int = Field(default=0, ge=0)
    memory_max: int = Field(default=0, ge=0)
    uptime: int = Field(default=0, ge=0)

    @property
    def is_running(self) -> bool:
        return self.status is WorkloadStatus.RUNNING

    @property
    def memory_percent(self) -> float:
        """Memory usage as a percentage of the configured maximum."""
        if self.memory_max > 0:
            return self.memory_used / self.memory_max * 100.0
        return 0.0

    @property
    def type_label(self) -> str:
        return self.kind.value
