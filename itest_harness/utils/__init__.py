"""Utility modules for itest-harness."""

from itest_harness.utils.constants import (
    ErrorCode,
    ERROR_MESSAGES,
    DEFAULT_CONNECT_TIMEOUT,
    DEFAULT_PORTS,
    DISPLAY_NAMES,
)
from itest_harness.utils.exceptions import (
    HarnessError,
    UnknownProfileError,
    InvalidPortError,
    LoggingConfigError,
    InvalidSettingsError,
)
from itest_harness.utils.log_setup import configure_logging

__all__ = [
    "ErrorCode",
    "ERROR_MESSAGES",
    "DEFAULT_CONNECT_TIMEOUT",
    "DEFAULT_PORTS",
    "DISPLAY_NAMES",
    "HarnessError",
    "UnknownProfileError",
    "InvalidPortError",
    "LoggingConfigError",
    "InvalidSettingsError",
    "configure_logging",
]
