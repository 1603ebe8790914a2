"""Constants module for Pulse.

Centralized constants organized by domain:
- enums.py: All Enum class definitions
- values.py: Scalar constants (strings with Final)
- timeouts.py: Timeout values (seconds)
- limits.py: Limit and threshold values
- defaults.py: Default values for configuration

Note: Keyboard bindings are defined in pulse.keyboard module.
"""

from pulse.constants.defaults import (
    CONFIG_PATH_DEFAULT,
    REFRESH_INTERVAL_DEFAULT,
    REFRESH_RATE_DEFAULT,
)
from pulse.constants.enums import (
    Effect,
    FetchKind,
    InputEventKind,
    InputMode,
    NodeStatus,
    Panel,
    SortField,
    WorkloadKind,
    WorkloadStatus,
)
from pulse.constants.limits import REFRESH_INTERVAL_MIN
from pulse.constants.timeouts import (
    PROXMOX_CONNECT_TIMEOUT,
    PROXMOX_TOTAL_TIMEOUT,
)
from pulse.constants.values import (
    APP_DESCRIPTION,
    APP_TITLE,
    APP_VERSION,
)

__all__ = [
    # Application
    "APP_DESCRIPTION",
    "APP_TITLE",
    "APP_VERSION",
    # Defaults
    "CONFIG_PATH_DEFAULT",
    # Timeouts
    "PROXMOX_CONNECT_TIMEOUT",
    "PROXMOX_TOTAL_TIMEOUT",
    "REFRESH_INTERVAL_DEFAULT",
    "REFRESH_INTERVAL_MIN",
    "REFRESH_RATE_DEFAULT",
    # Enums
    "Effect",
    "FetchKind",
    "InputEventKind",
    "InputMode",
    "NodeStatus",
    "Panel",
    "SortField",
    "WorkloadKind",
    "WorkloadStatus",
]
