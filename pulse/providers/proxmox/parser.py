"""Proxmox parser - maps Proxmox API payloads onto the normalized entity models."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ValidationError

from pulse.constants.enums import NodeStatus, WorkloadKind, WorkloadStatus
from pulse.constants.values import PROXMOX_GUEST_RUNNING, PROXMOX_NODE_ONLINE
from pulse.models.core import NodeInfo, WorkloadInfo
from pulse.providers.exceptions import ProviderDecodeError

# =============================================================================
# Wire models
# =============================================================================


class ProxmoxNodeEntry(BaseModel):
    """One entry of ``GET /nodes``."""

    node: str
    status: str


class ProxmoxMemory(BaseModel):
    total: int = 0
    used: int = 0


class ProxmoxNodeStatus(BaseModel):
    """Payload of ``GET /nodes/{node}/status``."""

    cpu: float | None = None
    memory: ProxmoxMemory | None = None
    uptime: int | None = None


class ProxmoxGuest(BaseModel):
    """One entry of ``GET /nodes/{node}/qemu`` or ``/lxc``."""

    vmid: int
    name: str | None = None
    status: str
    cpu: float | None = None
    mem: int | None = None
    maxmem: int | None = None
    uptime: int | None = None


class NodeMetrics(BaseModel):
    """Metrics merged into a node entry; all zero when unknown."""

    cpu_usage: float = 0.0
    memory_used: int = 0
    memory_total: int = 0
    uptime: int = 0


# =============================================================================
# Parser
# =============================================================================


class ProxmoxParser:
    """Parses Proxmox API data into structured formats."""

    _NAME_FALLBACK_PREFIX: dict[WorkloadKind, str] = {
        WorkloadKind.VM: "VM",
        WorkloadKind.CONTAINER: "CT",
    }

    def __init__(self, provider_name: str) -> None:
        """Initialize parser.

        Args:
            provider_name: Name used to attribute decode errors.
        """
        self._provider_name = provider_name

    def _validate_list(self, model: type[BaseModel], data: Any, what: str) -> list[Any]:
        if not isinstance(data, list):
            raise ProviderDecodeError(
                self._provider_name, f"Expected a list of {what}, got {type(data).__name__}"
            )
        try:
            return [model.model_validate(item) for item in data]
        except ValidationError as exc:
            raise ProviderDecodeError(
                self._provider_name, f"Unexpected {what} payload: {exc}"
            ) from exc

    @staticmethod
    def is_online(entry: ProxmoxNodeEntry) -> bool:
        return entry.status == PROXMOX_NODE_ONLINE

    def parse_node_list(self, data: Any) -> list[ProxmoxNodeEntry]:
        """Parse ``GET /nodes`` data into node entries."""
        return self._validate_list(ProxmoxNodeEntry, data, "nodes")

    def parse_node_status(self, data: Any) -> NodeMetrics:
        """Parse ``GET /nodes/{node}/status`` data into node metrics.

        CPU is reported as a 0-1 fraction and converted to percent.
        """
        try:
            status = ProxmoxNodeStatus.model_validate(data)
        except ValidationError as exc:
            raise ProviderDecodeError(
                self._provider_name, f"Unexpected node status payload: {exc}"
            ) from exc

        memory = status.memory or ProxmoxMemory()
        return NodeMetrics(
            cpu_usage=(status.cpu or 0.0) * 100.0,
            memory_used=memory.used,
            memory_total=memory.total,
            uptime=status.uptime or 0,
        )

    def build_node(self, entry: ProxmoxNodeEntry, metrics: NodeMetrics | None = None) -> NodeInfo:
        """Combine a node entry with its metrics into a NodeInfo."""
        metrics = metrics or NodeMetrics()
        try:
            return NodeInfo(
                name=entry.node,
                status=NodeStatus.ONLINE if self.is_online(entry) else NodeStatus.OFFLINE,
                cpu_usage=metrics.cpu_usage,
                memory_used=metrics.memory_used,
                memory_total=metrics.memory_total,
                uptime=metrics.uptime,
            )
        except ValidationError as exc:
            raise ProviderDecodeError(
                self._provider_name, f"Invalid metrics for node {entry.node}: {exc}"
            ) from exc

    def parse_guests(self, data: Any, node: str, kind: WorkloadKind) -> list[WorkloadInfo]:
        """Parse a qemu or lxc listing for one node into workloads.

        Args:
            data: Unwrapped ``data`` member of the listing response.
            node: Name of the node the listing was requested for.
            kind: Workload kind of every entry in the listing.

        Returns:
            List of WorkloadInfo objects.
        """
        guests = self._validate_list(ProxmoxGuest, data, f"{kind.value} guests")
        prefix = self._NAME_FALLBACK_PREFIX[kind]
        try:
            return [
                WorkloadInfo(
                    vmid=guest.vmid,
                    name=guest.name or f"{prefix} {guest.vmid}",
                    node=node,
                    kind=kind,
                    status=(
                        WorkloadStatus.RUNNING
                        if guest.status == PROXMOX_GUEST_RUNNING
                        else WorkloadStatus.STOPPED
                    ),
                    cpu_usage=(guest.cpu or 0.0) * 100.0,
                    memory_used=guest.mem or 0,
                    memory_max=guest.maxmem or 0,
                    uptime=guest.uptime or 0,
                )
                for guest in guests
            ]
        except ValidationError as exc:
            raise ProviderDecodeError(
                self._provider_name, f"Invalid {kind.value} guest values: {exc}"
            ) from exc


__all__ = [
    "NodeMetrics",
    "ProxmoxGuest",
    "ProxmoxNodeEntry",
    "ProxmoxNodeStatus",
    "ProxmoxParser",
]
