"""Default values for configuration.

All default values used by the config models and the command line.
"""

from typing import Final

# ============================================================================
# Config defaults
# ============================================================================

CONFIG_PATH_DEFAULT: Final = "config.toml"
REFRESH_RATE_DEFAULT: Final = "5s"
REFRESH_INTERVAL_DEFAULT: Final = 5.0

__all__ = [
    "CONFIG_PATH_DEFAULT",
    "REFRESH_INTERVAL_DEFAULT",
    "REFRESH_RATE_DEFAULT",
]
