"""Core entity models."""

from pulse.models.core.node_info import NodeInfo
from pulse.models.core.workload_info import WorkloadInfo

__all__ = ["NodeInfo", "WorkloadInfo"]
