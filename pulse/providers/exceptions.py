"""Provider exceptions."""

from __future__ import annotations


class ProviderError(Exception):
    """Base exception for provider fetch failures.

    Carries the name of the provider that failed so the error can be
    attributed when several backends are polled together.
    """

    def __init__(self, provider: str, message: str) -> None:
        super().__init__(message)
        self.provider = provider
        self.message = message

    def __str__(self) -> str:
        return f"{self.provider}: {self.message}"


class ProviderTransportError(ProviderError):
    """DNS, connect, TLS, timeout or HTTP status failure."""


class ProviderDecodeError(ProviderError):
    """Malformed JSON or an unexpected payload shape."""


__all__ = [
    "ProviderDecodeError",
    "ProviderError",
    "ProviderTransportError",
]
