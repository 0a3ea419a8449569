"""Service modules for itest-harness."""

from itest_harness.services.probe import (
    check_socket_connection,
    resolve_port,
    probe,
    is_available,
    is_postgresql_available,
    is_mysql_available,
)
from itest_harness.services.harness import (
    regression_defaults,
    link,
    when,
)

__all__ = [
    # Probe
    "check_socket_connection",
    "resolve_port",
    "probe",
    "is_available",
    "is_postgresql_available",
    "is_mysql_available",
    # Harness
    "regression_defaults",
    "link",
    "when",
]
