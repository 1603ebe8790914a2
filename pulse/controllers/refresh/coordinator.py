"""Refresh coordinator - polls every provider and merges results into state."""

from __future__ import annotations

import logging
import time
from collections.abc import Sequence
from dataclasses import dataclass, field

from pulse.constants.enums import FetchKind
from pulse.models.core import NodeInfo, WorkloadInfo
from pulse.models.state.dashboard_state import DashboardState
from pulse.providers.base import BaseProvider
from pulse.providers.exceptions import ProviderError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FetchError:
    """One failed provider call."""

    provider: str
    kind: FetchKind
    message: str

    @property
    def display(self) -> str:
        return f"Error fetching {self.kind.value} from {self.provider}: {self.message}"


@dataclass
class RefreshOutcome:
    """Accumulated result of polling every provider once."""

    nodes: list[NodeInfo] = field(default_factory=list)
    workloads: list[WorkloadInfo] = field(default_factory=list)
    errors: list[FetchError] = field(default_factory=list)
    partial_errors: dict[str, str] = field(default_factory=dict)
    duration_ms: float = 0.0

    @property
    def had_error(self) -> bool:
        return bool(self.errors)

    @property
    def error_message(self) -> str | None:
        """Last error, for the status bar."""
        if not self.errors:
            return None
        return self.errors[-1].display


class RefreshCoordinator:
    """Polls providers and applies the stale-data retention policy.

    Retention is decided per entity kind: a collection that came back empty
    while at least one call failed is discarded and the previous one kept.
    An empty collection with no errors is trusted and replaces the old one.
    """

    def __init__(self, providers: Sequence[BaseProvider]) -> None:
        self._providers = list(providers)

    @property
    def providers(self) -> list[BaseProvider]:
        return list(self._providers)

    def _collect_partial_errors(self, provider: BaseProvider, outcome: RefreshOutcome) -> None:
        for host, message in provider.partial_errors.items():
            outcome.partial_errors[f"{provider.name}/{host}"] = message

    def poll(self) -> RefreshOutcome:
        """Call every provider once. Provider failures never propagate."""
        start = time.monotonic()
        outcome = RefreshOutcome()

        for provider in self._providers:
            try:
                outcome.nodes.extend(provider.fetch_nodes())
            except ProviderError as exc:
                logger.warning("Node fetch failed for %s: %s", provider.name, exc.message)
                outcome.errors.append(FetchError(provider.name, FetchKind.NODES, exc.message))
            self._collect_partial_errors(provider, outcome)

            try:
                outcome.workloads.extend(provider.fetch_workloads())
            except ProviderError as exc:
                logger.warning("Workload fetch failed for %s: %s", provider.name, exc.message)
                outcome.errors.append(FetchError(provider.name, FetchKind.WORKLOADS, exc.message))
            self._collect_partial_errors(provider, outcome)

        outcome.duration_ms = (time.monotonic() - start) * 1000
        logger.debug(
            "Polled %d providers in %.0fms: %d nodes, %d workloads, %d errors, %d partial",
            len(self._providers),
            outcome.duration_ms,
            len(outcome.nodes),
            len(outcome.workloads),
            len(outcome.errors),
            len(outcome.partial_errors),
        )
        return outcome

    @staticmethod
    def apply(state: DashboardState, outcome: RefreshOutcome) -> None:
        """Merge ``outcome`` into ``state`` under the retention policy."""
        nodes = state.nodes
        if outcome.nodes or not outcome.had_error:
            nodes = outcome.nodes
        else:
            logger.info("Keeping %d stale nodes after failed refresh", len(state.nodes))

        workloads = state.workloads
        if outcome.workloads or not outcome.had_error:
            workloads = outcome.workloads
        else:
            logger.info("Keeping %d stale workloads after failed refresh", len(state.workloads))

        state.error_message = outcome.error_message
        state.replace_collections(nodes, workloads)

    def refresh(self, state: DashboardState) -> RefreshOutcome:
        """Poll every provider and merge the result into ``state``."""
        outcome = self.poll()
        self.apply(state, outcome)
        return outcome


__all__ = ["FetchError", "RefreshCoordinator", "RefreshOutcome"]
