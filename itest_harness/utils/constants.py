"""Constants for itest-harness."""

from enum import Enum


class ErrorCode(str, Enum):
    """Error code enumeration."""

    UNKNOWN_PROFILE = "ERR_001"
    INVALID_PORT = "ERR_002"
    LOGGING_CONFIG_FAILED = "ERR_003"
    INVALID_SETTINGS = "ERR_004"


ERROR_MESSAGES: dict[ErrorCode, str] = {
    ErrorCode.UNKNOWN_PROFILE: "No default port is known for this profile",
    ErrorCode.INVALID_PORT: "Configured port number is not a valid TCP port",
    ErrorCode.LOGGING_CONFIG_FAILED: "Logging configuration file could not be loaded",
    ErrorCode.INVALID_SETTINGS: "Harness settings failed validation",
}


# Connect timeout for availability probes, in seconds
DEFAULT_CONNECT_TIMEOUT = 5.0

POSTGRESQL = "postgresql"
MYSQL = "mysql"
MARIADB = "mariadb"
SQLSERVER = "sqlserver"
ORACLE = "oracle"

DEFAULT_PORTS: dict[str, int] = {
    POSTGRESQL: 5432,
    MYSQL: 3306,
    MARIADB: 3306,
    SQLSERVER: 1433,
    ORACLE: 1521,
}

DISPLAY_NAMES: dict[str, str] = {
    POSTGRESQL: "PostgreSQL",
    MYSQL: "MySQL",
    MARIADB: "MariaDB",
    SQLSERVER: "SQL Server",
    ORACLE: "Oracle",
}

# Start levels used by the OSGi test runner
START_LEVEL_SYSTEM_BUNDLES = 2
START_LEVEL_TEST_BUNDLE = 5

DEFAULT_CONSOLE_PORT = 6666
