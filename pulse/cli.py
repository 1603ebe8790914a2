"""Command-line interface for Pulse."""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence

from textual.logging import TextualHandler

from pulse.constants import APP_DESCRIPTION, APP_TITLE, APP_VERSION, CONFIG_PATH_DEFAULT
from pulse.models.state.config_manager import ConfigError, ConfigManager, PulseConfig
from pulse.providers.base import BaseProvider
from pulse.providers.proxmox import ProxmoxProvider

logger = logging.getLogger(__name__)

_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(verbose: bool = False, log_file: str | None = None) -> None:
    """Configure root logging.

    Records go to ``log_file`` when given; otherwise they are routed through
    Textual so they never draw over the dashboard.
    """
    handler: logging.Handler
    if log_file:
        handler = logging.FileHandler(log_file, encoding="utf-8")
        handler.setFormatter(logging.Formatter(_LOG_FORMAT))
    else:
        handler = TextualHandler()
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        handlers=[handler],
        force=True,
    )
    # Per-request connection chatter is only useful when debugging the client.
    logging.getLogger("urllib3").setLevel(logging.WARNING)


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(prog=APP_TITLE.lower(), description=APP_DESCRIPTION)
    parser.add_argument(
        "--config", "-c",
        default=CONFIG_PATH_DEFAULT,
        help=f"Path to the TOML or YAML config file (default: {CONFIG_PATH_DEFAULT})",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable debug logging",
    )
    parser.add_argument(
        "--log-file",
        default=None,
        help="Write logs to this file instead of the Textual console",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {APP_VERSION}",
    )
    return parser.parse_args(argv)


def build_providers(config: PulseConfig) -> list[BaseProvider]:
    """Instantiate every configured provider.

    A provider that cannot be constructed is logged and skipped; the rest
    are still returned.
    """
    providers: list[BaseProvider] = []
    for entry in config.providers.proxmox or []:
        try:
            providers.append(ProxmoxProvider(entry))
        except Exception:
            logger.exception("Failed to initialize Proxmox provider %s", entry.name)
            continue
        logger.info("Configured Proxmox provider %s (%s)", entry.name, entry.host)
    return providers


def main(argv: Sequence[str] | None = None) -> int:
    """Main entry point."""
    args = parse_args(argv)
    setup_logging(args.verbose, args.log_file)

    try:
        config = ConfigManager.load(args.config)
    except ConfigError as e:
        logger.error("Configuration error: %s", e)
        return 1

    providers = build_providers(config)
    if not providers:
        logger.error("No usable providers configured in %s", args.config)
        return 1

    from pulse.app import PulseApp

    app = PulseApp(providers=providers, refresh_interval=config.refresh_interval)
    app.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
