"""Proxmox API client - issues authenticated GET requests against a PVE host."""

from __future__ import annotations

import json
import logging
import time
import warnings
from typing import Any

import requests
from urllib3.exceptions import InsecureRequestWarning
from urllib3.util import Timeout

from pulse.constants.timeouts import PROXMOX_CONNECT_TIMEOUT, PROXMOX_TOTAL_TIMEOUT
from pulse.constants.values import PROXMOX_API_PREFIX, PROXMOX_AUTH_SCHEME
from pulse.providers.exceptions import ProviderDecodeError, ProviderTransportError

logger = logging.getLogger(__name__)

# Single-byte reads are served from the socket buffer, so the deadline is
# checked between every recv even when a server trickles its response.
_READ_CHUNK_BYTES = 1


class ProxmoxClient:
    """Fetches raw JSON payloads from the Proxmox VE REST API."""

    def __init__(
        self,
        provider_name: str,
        base_url: str,
        token_id: str,
        token_secret: str,
        *,
        connect_timeout: float = PROXMOX_CONNECT_TIMEOUT,
        total_timeout: float = PROXMOX_TOTAL_TIMEOUT,
        session: requests.Session | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            provider_name: Name used to attribute errors.
            base_url: Host URL, e.g. ``https://pve:8006``.
            token_id: API token id, e.g. ``root@pam!pulse``.
            token_secret: API token secret.
            connect_timeout: Seconds allowed to establish a connection.
            total_timeout: Seconds allowed for the whole request.
            session: Optional preconfigured session.
        """
        self._provider_name = provider_name
        self._base_url = base_url.rstrip("/")
        self._total_timeout = total_timeout
        self._timeout = Timeout(connect=connect_timeout, read=total_timeout)
        self._session = session or requests.Session()
        self._session.verify = False
        self._session.headers["Authorization"] = build_auth_header(token_id, token_secret)

    @property
    def base_url(self) -> str:
        return self._base_url

    def get(self, path: str) -> Any:
        """GET ``path`` under the API prefix and unwrap the ``data`` envelope.

        Raises:
            ProviderTransportError: Connection, TLS, timeout or HTTP status failure.
            ProviderDecodeError: Body is not JSON or has no ``data`` member.
        """
        url = f"{self._base_url}{PROXMOX_API_PREFIX}{path}"
        logger.debug("GET %s", url)
        deadline = time.monotonic() + self._total_timeout
        try:
            # Homelab hosts use self-signed certificates and verification is off.
            with warnings.catch_warnings():
                warnings.simplefilter("ignore", InsecureRequestWarning)
                response = self._session.get(url, timeout=self._timeout, stream=True)
            try:
                response.raise_for_status()
                body = self._read_body(response, deadline, url)
            finally:
                response.close()
        except requests.RequestException as exc:
            raise ProviderTransportError(self._provider_name, str(exc)) from exc

        try:
            payload = json.loads(body)
        except ValueError as exc:
            raise ProviderDecodeError(
                self._provider_name, f"Invalid JSON from {url}: {exc}"
            ) from exc

        if not isinstance(payload, dict) or "data" not in payload:
            raise ProviderDecodeError(
                self._provider_name, f"Missing 'data' envelope in response from {url}"
            )
        return payload["data"]

    def _read_body(self, response: requests.Response, deadline: float, url: str) -> bytes:
        """Read the streamed body, giving up once ``deadline`` has passed.

        Raises:
            ProviderTransportError: The whole request took longer than the total timeout.
        """
        chunks: list[bytes] = []
        for chunk in response.iter_content(chunk_size=_READ_CHUNK_BYTES):
            if time.monotonic() > deadline:
                break
            chunks.append(chunk)
        if time.monotonic() > deadline:
            raise ProviderTransportError(
                self._provider_name,
                f"Request to {url} exceeded total timeout of {self._total_timeout:g}s",
            )
        return b"".join(chunks)

    def close(self) -> None:
        self._session.close()


def build_auth_header(token_id: str, token_secret: str) -> str:
    """Build the ``Authorization`` header value for an API token."""
    return f"{PROXMOX_AUTH_SCHEME}={token_id}={token_secret}"


__all__ = ["ProxmoxClient", "build_auth_header"]
