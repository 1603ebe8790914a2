"""Data models for Pulse."""

from pulse.models.core import NodeInfo, WorkloadInfo

__all__ = ["NodeInfo", "WorkloadInfo"]
