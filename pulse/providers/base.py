"""Base provider interface for Pulse.

A provider adapts one virtualization backend to the normalized entity
model. The refresh coordinator iterates a plain list of providers and
calls the same three members on each of them.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod

from pulse.models.core import NodeInfo, WorkloadInfo

logger = logging.getLogger(__name__)


class BaseProvider(ABC):
    """Base provider class.

    Subclasses implement the fetch methods and raise
    :class:`~pulse.providers.exceptions.ProviderError` subclasses on failure.
    Node and workload fetches are independent: one failing must not stop
    the other from being attempted.
    """

    def __init__(self) -> None:
        """Initialize the provider."""
        self._partial_errors: dict[str, str] = {}

    @property
    @abstractmethod
    def name(self) -> str:
        """Backend identifier used for error attribution."""
        ...

    @property
    def partial_errors(self) -> dict[str, str]:
        """Per-host sub-fetch failures swallowed during the last fetch.

        Returns:
            Mapping of host name to error message.
        """
        return dict(self._partial_errors)

    def _record_partial_error(self, host: str, error: Exception) -> None:
        logger.warning("Provider %s: sub-fetch for %s failed: %s", self.name, host, error)
        self._partial_errors[host] = str(error)

    @abstractmethod
    def fetch_nodes(self) -> list[NodeInfo]:
        """Fetch all nodes known to the backend.

        Returns:
            List of normalized nodes, in no particular order.
        """
        ...

    @abstractmethod
    def fetch_workloads(self) -> list[WorkloadInfo]:
        """Fetch all VMs and containers known to the backend.

        Returns:
            List of normalized workloads, in no particular order.
        """
        ...

    def close(self) -> None:
        """Release backend resources. Providers without any keep this no-op."""


__all__ = ["BaseProvider"]
