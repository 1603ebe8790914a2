"""Configuration models and loader.

The config file lists the backends to poll and the refresh rate. TOML is
the primary format; ``.yaml`` / ``.yml`` files are accepted as well and
map onto the same models.
"""

from __future__ import annotations

import logging
import re
import tomllib
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from pulse.constants.defaults import REFRESH_RATE_DEFAULT
from pulse.constants.limits import REFRESH_INTERVAL_MIN

logger = logging.getLogger(__name__)

_DURATION_RE = re.compile(r"^\s*(\d+(?:\.\d+)?)\s*(ms|s|m)?\s*$")
_DURATION_UNIT_SECONDS: dict[str, float] = {"ms": 0.001, "s": 1.0, "m": 60.0}
_YAML_SUFFIXES = frozenset({".yaml", ".yml"})


class ConfigError(Exception):
    """Base exception for configuration errors."""


class ConfigLoadError(ConfigError):
    """Raised when the config file fails to load or validate."""


class GeneralConfig(BaseModel):
    """General settings."""

    model_config = ConfigDict(coerce_numbers_to_str=True)

    refresh_rate: str = REFRESH_RATE_DEFAULT


class ProxmoxConfig(BaseModel):
    """One Proxmox VE endpoint. All values are opaque strings."""

    model_config = ConfigDict(frozen=True)

    name: str
    host: str
    user: str
    token_id: str
    token_secret: str


class ProvidersConfig(BaseModel):
    """Configured providers, grouped by backend kind."""

    proxmox: list[ProxmoxConfig] | None = None


class PulseConfig(BaseModel):
    """Top-level configuration model."""

    general: GeneralConfig = Field(default_factory=GeneralConfig)
    providers: ProvidersConfig = Field(default_factory=ProvidersConfig)

    @property
    def refresh_interval(self) -> float:
        """Refresh interval in seconds, raised to the supported minimum."""
        return max(parse_duration(self.general.refresh_rate), REFRESH_INTERVAL_MIN)


def parse_duration(value: str) -> float:
    """Parse a duration such as ``"5s"``, ``"1m"``, ``"500ms"`` or ``"10"``.

    Args:
        value: Duration string. A bare number is read as seconds.

    Returns:
        Duration in seconds.

    Raises:
        ConfigLoadError: If the value cannot be parsed.
    """
    match = _DURATION_RE.match(str(value))
    if match is None:
        raise ConfigLoadError(f"Invalid duration: {value!r}")
    amount, unit = match.groups()
    return float(amount) * _DURATION_UNIT_SECONDS[unit or "s"]


class ConfigManager:
    """Loads configuration files into :class:`PulseConfig`."""

    @staticmethod
    def _read_raw(path: Path) -> dict[str, Any]:
        try:
            text = path.read_text(encoding="utf-8")
        except OSError as exc:
            raise ConfigLoadError(f"Cannot read config file {path}: {exc}") from exc

        if path.suffix.lower() in _YAML_SUFFIXES:
            try:
                data = yaml.safe_load(text)
            except yaml.YAMLError as exc:
                raise ConfigLoadError(f"Invalid YAML in {path}: {exc}") from exc
        else:
            try:
                data = tomllib.loads(text)
            except tomllib.TOMLDecodeError as exc:
                raise ConfigLoadError(f"Invalid TOML in {path}: {exc}") from exc

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ConfigLoadError(f"Config file {path} must contain a mapping at top level")
        return data

    @classmethod
    def load(cls, path: str | Path) -> PulseConfig:
        """Load and validate a config file.

        Raises:
            ConfigLoadError: The file is unreadable, malformed or invalid.
        """
        config_path = Path(path).expanduser()
        raw = cls._read_raw(config_path)
        try:
            config = PulseConfig.model_validate(raw)
        except ValidationError as exc:
            raise ConfigLoadError(f"Invalid configuration in {config_path}: {exc}") from exc

        # Fail early on a bad refresh_rate rather than at first use.
        parse_duration(config.general.refresh_rate)
        logger.info(
            "Loaded config from %s (%d proxmox providers)",
            config_path,
            len(config.providers.proxmox or []),
        )
        return config


__all__ = [
    "ConfigError",
    "ConfigLoadError",
    "ConfigManager",
    "GeneralConfig",
    "ProvidersConfig",
    "ProxmoxConfig",
    "PulseConfig",
    "parse_duration",
]
