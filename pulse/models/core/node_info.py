"""Normalized node model."""

from pydantic import BaseModel, ConfigDict, Field

from pulse.constants.enums import NodeStatus


class NodeInfo(BaseModel):
    """A physical or virtual host reported by a provider."""

    model_config = ConfigDict(frozen=True)

    name: str
    status: NodeStatus = NodeStatus.OFFLINE
    # Percent of total CPU; oversubscribed hosts can report more than 100.
    cpu_usage: float = 0.0
    memory_used: int = Field(default=0, ge=0)
    memory_total: int = Field(default=0, ge=0)
    uptime: int = Field(default=0, ge=0)

    @property
    def is_online(self) -> bool:
        return self.status is NodeStatus.ONLINE

    @property
    def memory_percent(self) -> float:
        """Memory usage as a percentage of total, 0 when total is unknown."""
        if self.memory_total > 0:
            return self.memory_used / self.memory_total * 100.0
        return 0.0
