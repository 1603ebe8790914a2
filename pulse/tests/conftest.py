"""Shared fixtures for the Pulse test suite."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest

from pulse.app import PulseApp
from pulse.constants.enums import NodeStatus, WorkloadKind, WorkloadStatus
from pulse.models.core import NodeInfo, WorkloadInfo
from pulse.models.state.dashboard_state import DashboardState
from pulse.providers.base import BaseProvider
from pulse.providers.exceptions import ProviderError


class FakeProvider(BaseProvider):
    """In-memory provider. A stored exception is raised instead of returning data."""

    def __init__(
        self,
        name: str = "fake",
        nodes: list[NodeInfo] | None = None,
        workloads: list[WorkloadInfo] | None = None,
        *,
        nodes_error: ProviderError | None = None,
        workloads_error: ProviderError | None = None,
        partial_errors: dict[str, str] | None = None,
    ) -> None:
        super().__init__()
        self._name = name
        self.nodes = nodes or []
        self.workloads = workloads or []
        self.nodes_error = nodes_error
        self.workloads_error = workloads_error
        self._partial_errors.update(partial_errors or {})
        self.calls: list[str] = []
        self.closed = False

    @property
    def name(self) -> str:
        return self._name

    def fetch_nodes(self) -> list[NodeInfo]:
        self.calls.append("nodes")
        if self.nodes_error is not None:
            raise self.nodes_error
        return list(self.nodes)

    def fetch_workloads(self) -> list[WorkloadInfo]:
        self.calls.append("workloads")
        if self.workloads_error is not None:
            raise self.workloads_error
        return list(self.workloads)

    def close(self) -> None:
        self.closed = True


def _make_node(name: str = "pve1", **overrides: Any) -> NodeInfo:
    values: dict[str, Any] = {
        "name": name,
        "status": NodeStatus.ONLINE,
        "cpu_usage": 10.0,
        "memory_used": 4 * 1024**3,
        "memory_total": 16 * 1024**3,
        "uptime": 3600,
    }
    values.update(overrides)
    return NodeInfo(**values)


def _make_workload(name: str = "web", vmid: int = 100, **overrides: Any) -> WorkloadInfo:
    values: dict[str, Any] = {
        "vmid": vmid,
        "name": name,
        "node": "pve1",
        "kind": WorkloadKind.VM,
        "status": WorkloadStatus.RUNNING,
        "cpu_usage": 5.0,
        "memory_used": 1024**3,
        "memory_max": 2 * 1024**3,
        "uptime": 600,
    }
    values.update(overrides)
    return WorkloadInfo(**values)


@pytest.fixture
def make_node() -> Callable[..., NodeInfo]:
    """Factory for NodeInfo with sensible defaults."""
    return _make_node


@pytest.fixture
def make_workload() -> Callable[..., WorkloadInfo]:
    """Factory for WorkloadInfo with sensible defaults."""
    return _make_workload


@pytest.fixture
def fake_provider_cls() -> type[FakeProvider]:
    return FakeProvider


@pytest.fixture
def state() -> DashboardState:
    return DashboardState()


@pytest.fixture
def populated_state() -> DashboardState:
    """State holding three nodes and four workloads, sorted by name."""
    state = DashboardState()
    state.replace_collections(
        [
            _make_node("pve1", cpu_usage=50.0),
            _make_node("pve2", cpu_usage=10.0, status=NodeStatus.OFFLINE),
            _make_node("backup", cpu_usage=80.0),
        ],
        [
            _make_workload("web", 100, node="pve1"),
            _make_workload("db", 101, node="pve1", status=WorkloadStatus.STOPPED),
            _make_workload("dns", 200, node="pve2", kind=WorkloadKind.CONTAINER),
            _make_workload("media", 201, node="backup"),
        ],
        refreshed_at=0.0,
    )
    return state


@pytest.fixture
def fake_provider() -> FakeProvider:
    return FakeProvider(
        "homelab",
        nodes=[_make_node("pve1"), _make_node("pve2", cpu_usage=95.0)],
        workloads=[
            _make_workload("web", 100),
            _make_workload("dns", 200, node="pve2", kind=WorkloadKind.CONTAINER),
        ],
    )


@pytest.fixture
def app(fake_provider: FakeProvider) -> PulseApp:
    """App with one fake provider and a refresh interval long enough not to fire."""
    return PulseApp(providers=[fake_provider], refresh_interval=3600.0)
