"""Unit tests for ProxmoxClient. HTTP is faked with a mocked requests.Session."""

from __future__ import annotations

import json
import threading
import time
import warnings
from collections.abc import Iterator
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest
import requests
from urllib3.exceptions import InsecureRequestWarning
from urllib3.util import Timeout

from pulse.providers.exceptions import ProviderDecodeError, ProviderTransportError
from pulse.providers.proxmox.client import ProxmoxClient, build_auth_header


def _session_returning(payload: object = None, *, body: bytes | None = None) -> MagicMock:
    session = MagicMock(spec=requests.Session)
    session.headers = {}
    response = MagicMock()
    response.raise_for_status.return_value = None
    raw = body if body is not None else json.dumps(payload).encode()
    response.iter_content.side_effect = lambda chunk_size=1: iter(
        [raw[i : i + 1] for i in range(len(raw))]
    )
    session.get.return_value = response
    return session


def _client(
    session: MagicMock | None = None,
    base_url: str = "https://pve.local:8006/",
    **kwargs: float,
) -> ProxmoxClient:
    options = {"connect_timeout": 2.0, "total_timeout": 4.0}
    options.update(kwargs)
    return ProxmoxClient(
        "homelab",
        base_url,
        "root@pam!pulse",
        "secret",
        session=session,
        **options,
    )


class TestClientSetup:
    """Test session configuration."""

    def test_auth_header_format(self) -> None:
        assert build_auth_header("root@pam!pulse", "abc") == "PVEAPIToken=root@pam!pulse=abc"

    def test_session_configured(self) -> None:
        session = _session_returning({"data": []})
        client = _client(session)
        assert session.verify is False
        assert session.headers["Authorization"] == "PVEAPIToken=root@pam!pulse=secret"
        assert client.base_url == "https://pve.local:8006"


class TestClientGet:
    """Test ProxmoxClient.get()."""

    def test_unwraps_data_envelope(self) -> None:
        session = _session_returning({"data": [{"node": "pve1"}]})
        assert _client(session).get("/nodes") == [{"node": "pve1"}]

    def test_request_url_timeout_and_streaming(self) -> None:
        session = _session_returning({"data": []})
        _client(session).get("/nodes/pve1/qemu")
        args, kwargs = session.get.call_args
        assert args[0] == "https://pve.local:8006/api2/json/nodes/pve1/qemu"
        assert kwargs["stream"] is True
        timeout = kwargs["timeout"]
        assert isinstance(timeout, Timeout)
        assert timeout.connect_timeout == 2.0
        assert timeout.read_timeout == 4.0

    def test_response_closed_after_read(self) -> None:
        session = _session_returning({"data": []})
        _client(session).get("/nodes")
        session.get.return_value.close.assert_called_once()

    def test_connection_error_is_transport_error(self) -> None:
        session = _session_returning()
        session.get.side_effect = requests.ConnectionError("refused")
        with pytest.raises(ProviderTransportError) as exc_info:
            _client(session).get("/nodes")
        assert exc_info.value.provider == "homelab"
        assert "refused" in exc_info.value.message

    def test_timeout_is_transport_error(self) -> None:
        session = _session_returning()
        session.get.side_effect = requests.Timeout("timed out")
        with pytest.raises(ProviderTransportError):
            _client(session).get("/nodes")

    def test_http_status_is_transport_error(self) -> None:
        session = _session_returning({"data": []})
        session.get.return_value.raise_for_status.side_effect = requests.HTTPError("401")
        with pytest.raises(ProviderTransportError):
            _client(session).get("/nodes")
        session.get.return_value.close.assert_called_once()

    def test_invalid_json_is_decode_error(self) -> None:
        session = _session_returning(body=b"<html>oops</html>")
        with pytest.raises(ProviderDecodeError):
            _client(session).get("/nodes")

    def test_missing_envelope_is_decode_error(self) -> None:
        session = _session_returning({"errors": "nope"})
        with pytest.raises(ProviderDecodeError):
            _client(session).get("/nodes")

    def test_close_closes_session(self) -> None:
        session = _session_returning({"data": []})
        _client(session).close()
        session.close.assert_called_once()


class TestInsecureWarningScope:
    """The insecure-request warning is silenced only around the client's own calls."""

    def test_warning_suppressed_during_request(self) -> None:
        session = _session_returning({"data": []})

        def _get(*args, **kwargs):
            warnings.warn("unverified HTTPS request", InsecureRequestWarning)
            return session.get.return_value

        session.get.side_effect = _get
        with warnings.catch_warnings(record=True) as caught:
            warnings.simplefilter("always")
            _client(session).get("/nodes")
        assert not [w for w in caught if issubclass(w.category, InsecureRequestWarning)]

    def test_warning_not_silenced_globally(self) -> None:
        _client(_session_returning({"data": []})).get("/nodes")
        with warnings.catch_warnings(record=True) as caught:
            warnings.simplefilter("always")
            warnings.warn("unverified HTTPS request", InsecureRequestWarning)
        assert [w for w in caught if issubclass(w.category, InsecureRequestWarning)]


# =============================================================================
# Total timeout
# =============================================================================


class TestTotalTimeout:
    """A slowly trickled body must not outlive the total timeout."""

    def test_trickled_body_exceeds_deadline(self, monkeypatch: pytest.MonkeyPatch) -> None:
        clock = SimpleNamespace(now=0.0)
        monkeypatch.setattr(
            "pulse.providers.proxmox.client.time",
            SimpleNamespace(monotonic=lambda: clock.now),
        )
        body = b'{"data": []}      '
        delivered: list[bytes] = []

        def _trickle(chunk_size: int = 1) -> Iterator[bytes]:
            for i in range(len(body)):
                clock.now += 0.4
                delivered.append(body[i : i + 1])
                yield body[i : i + 1]

        session = _session_returning()
        session.get.return_value.iter_content.side_effect = _trickle

        with pytest.raises(ProviderTransportError) as exc_info:
            _client(session, connect_timeout=0.5, total_timeout=1.0).get("/nodes")
        assert "total timeout" in exc_info.value.message
        assert len(delivered) < len(body)
        session.get.return_value.close.assert_called_once()

    def test_body_within_deadline(self, monkeypatch: pytest.MonkeyPatch) -> None:
        clock = SimpleNamespace(now=0.0)
        monkeypatch.setattr(
            "pulse.providers.proxmox.client.time",
            SimpleNamespace(monotonic=lambda: clock.now),
        )
        session = _session_returning({"data": [1]})
        assert _client(session, total_timeout=1.0).get("/nodes") == [1]

    def test_real_trickling_server(self) -> None:
        body = b'{"data": []}      '

        class _TrickleHandler(BaseHTTPRequestHandler):
            def do_GET(self) -> None:
                self.send_response(200)
                self.send_header("Content-Type", "application/json")
                self.send_header("Content-Length", str(len(body)))
                self.end_headers()
                try:
                    for i in range(len(body)):
                        self.wfile.write(body[i : i + 1])
                        self.wfile.flush()
                        time.sleep(0.4)
                except OSError:
                    pass

            def log_message(self, format: str, *args) -> None:
                pass

        class _Server(ThreadingHTTPServer):
            block_on_close = False

        server = _Server(("127.0.0.1", 0), _TrickleHandler)
        thread = threading.Thread(target=server.serve_forever, daemon=True)
        thread.start()
        client = _client(
            base_url=f"http://127.0.0.1:{server.server_address[1]}",
            connect_timeout=0.5,
            total_timeout=1.0,
        )
        try:
            start = time.monotonic()
            with pytest.raises(ProviderTransportError):
                client.get("/nodes")
            assert time.monotonic() - start < 2.0
        finally:
            client.close()
            server.shutdown()
            server.server_close()
