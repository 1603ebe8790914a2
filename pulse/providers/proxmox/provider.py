"""Proxmox VE provider."""

from __future__ import annotations

import logging

from pulse.constants.enums import WorkloadKind
from pulse.models.core import NodeInfo, WorkloadInfo
from pulse.models.state.config_manager import ProxmoxConfig
from pulse.providers.base import BaseProvider
from pulse.providers.exceptions import ProviderError
from pulse.providers.proxmox.client import ProxmoxClient
from pulse.providers.proxmox.parser import NodeMetrics, ProxmoxNodeEntry, ProxmoxParser

logger = logging.getLogger(__name__)


class ProxmoxProvider(BaseProvider):
    """Provider backed by one Proxmox VE host or cluster endpoint.

    Listing the nodes is the only call whose failure aborts a fetch.
    Per-node calls (status, qemu and lxc listings) that fail are logged,
    recorded in :attr:`partial_errors` and contribute nothing, so one
    unhealthy node does not hide the rest of the cluster.
    """

    _GUEST_ENDPOINTS: tuple[tuple[str, WorkloadKind], ...] = (
        ("qemu", WorkloadKind.VM),
        ("lxc", WorkloadKind.CONTAINER),
    )

    def __init__(
        self,
        config: ProxmoxConfig,
        *,
        client: ProxmoxClient | None = None,
    ) -> None:
        """Initialize from a provider config entry.

        Args:
            config: Proxmox provider configuration.
            client: Optional client override.
        """
        super().__init__()
        self._name = config.name
        self._client = client or ProxmoxClient(
            config.name,
            config.host,
            config.token_id,
            config.token_secret,
        )
        self._parser = ProxmoxParser(config.name)

    @property
    def name(self) -> str:
        return self._name

    def _list_nodes(self) -> list[ProxmoxNodeEntry]:
        return self._parser.parse_node_list(self._client.get("/nodes"))

    def _fetch_node_metrics(self, node: str) -> NodeMetrics:
        try:
            return self._parser.parse_node_status(self._client.get(f"/nodes/{node}/status"))
        except ProviderError as exc:
            self._record_partial_error(node, exc)
            return NodeMetrics()

    def _fetch_node_guests(self, node: str, endpoint: str, kind: WorkloadKind) -> list[WorkloadInfo]:
        try:
            data = self._client.get(f"/nodes/{node}/{endpoint}")
            return self._parser.parse_guests(data, node, kind)
        except ProviderError as exc:
            self._record_partial_error(f"{node}/{endpoint}", exc)
            return []

    def fetch_nodes(self) -> list[NodeInfo]:
        """Fetch every node with its current metrics.

        Offline nodes are reported with zero metrics and are not queried.

        Raises:
            ProviderError: The node list could not be fetched or decoded.
        """
        self._partial_errors.clear()
        nodes: list[NodeInfo] = []
        for entry in self._list_nodes():
            metrics = self._fetch_node_metrics(entry.node) if self._parser.is_online(entry) else None
            nodes.append(self._parser.build_node(entry, metrics))
        logger.debug("Provider %s: fetched %d nodes", self._name, len(nodes))
        return nodes

    def fetch_workloads(self) -> list[WorkloadInfo]:
        """Fetch every VM and container on the online nodes.

        Raises:
            ProviderError: The node list could not be fetched or decoded.
        """
        self._partial_errors.clear()
        workloads: list[WorkloadInfo] = []
        for entry in self._list_nodes():
            if not self._parser.is_online(entry):
                continue
            for endpoint, kind in self._GUEST_ENDPOINTS:
                workloads.extend(self._fetch_node_guests(entry.node, endpoint, kind))
        logger.debug("Provider %s: fetched %d workloads", self._name, len(workloads))
        return workloads

    def close(self) -> None:
        self._client.close()


__all__ = ["ProxmoxProvider"]
