"""Availability probes for database servers used by integration tests."""

import logging
import socket
from typing import Optional

from itest_harness.config import Settings
from itest_harness.models.profile import ProbeResult
from itest_harness.utils.constants import (
    DEFAULT_CONNECT_TIMEOUT,
    DEFAULT_PORTS,
    DISPLAY_NAMES,
    MYSQL,
    POSTGRESQL,
)
from itest_harness.utils.exceptions import InvalidPortError, UnknownProfileError

logger = logging.getLogger("availability-probe")


def resolve_port(port_number: Optional[str], default_port: int) -> int:
    """Resolve the port to probe.

    Args:
        port_number: Explicitly configured port, if any.
        default_port: Port used when nothing is configured.

    Returns:
        The explicit port when configured, else ``default_port``.

    Raises:
        InvalidPortError: If the configured port is not a valid TCP port.
    """
    if port_number is None or not port_number.strip():
        return default_port

    digits = port_number.strip()
    if not (digits.isascii() and digits.isdigit()):
        raise InvalidPortError(port_number)
    port = int(digits)

    if not 0 < port < 65536:
        raise InvalidPortError(port_number, "out of range")
    return port


def _close_socket(sock: socket.socket) -> None:
    try:
        sock.close()
    except OSError as e:
        logger.warning("Failed to close probe socket: %s", e)


def _connect(server_name: str, port: int, timeout: float) -> Optional[str]:
    """Attempt one TCP connection.

    Returns:
        None on success, otherwise a short description of the failure.
    """
    sock = None
    try:
        sock = socket.create_connection((server_name, port), timeout=timeout)
        return None
    except socket.gaierror as e:
        logger.debug("Cannot resolve %s: %s", server_name, e)
        return f"unknown host: {e}"
    except OSError as e:
        logger.debug("Cannot connect to %s:%d: %s", server_name, port, e)
        return str(e) or type(e).__name__
    finally:
        if sock is not None:
            _close_socket(sock)


def check_socket_connection(
    server_name: str,
    port: int,
    timeout: float = DEFAULT_CONNECT_TIMEOUT
) -> bool:
    """Check whether a TCP server accepts connections.

    A single attempt is made; there are no retries.

    Args:
        server_name: Host name or address.
        port: TCP port.
        timeout: Connect timeout in seconds.

    Returns:
        True if the connection succeeded, False on unknown host or I/O failure.
    """
    return _connect(server_name, port, timeout) is None


def probe(
    profile_name: str,
    default_port: Optional[int] = None,
    settings: Optional[Settings] = None
) -> ProbeResult:
    """Probe the server of a named profile.

    Args:
        profile_name: Profile name, e.g. ``postgresql``.
        default_port: Port used when the profile has none. Falls back to
            the well-known port of the profile.
        settings: Harness settings. Loaded from the environment if omitted.

    Returns:
        The probe result.

    Raises:
        UnknownProfileError: If no default port is available.
        InvalidPortError: If the profile's port is malformed.
    """
    settings = settings or Settings()
    if default_port is None:
        default_port = DEFAULT_PORTS.get(profile_name)
        if default_port is None:
            raise UnknownProfileError(profile_name)

    profile = settings.get_profile(profile_name)
    server_name = profile.server_name
    port = resolve_port(profile.port_number, default_port)

    error = _connect(server_name, port, settings.probe_timeout)
    if error is not None:
        logger.warning(
            "cannot connect to %s at %s:%d, ignoring test",
            DISPLAY_NAMES.get(profile_name, profile_name),
            server_name,
            port,
        )
    return ProbeResult(
        profile=profile_name,
        server_name=server_name,
        port=port,
        available=error is None,
        error=error,
    )


def is_available(
    profile_name: str,
    default_port: Optional[int] = None,
    settings: Optional[Settings] = None
) -> bool:
    """Check whether the server of a named profile is reachable.

    Connectivity failures are logged and reported as False, never raised.
    """
    return probe(profile_name, default_port, settings).available


def is_postgresql_available(settings: Optional[Settings] = None) -> bool:
    return is_available(POSTGRESQL, DEFAULT_PORTS[POSTGRESQL], settings)


def is_mysql_available(settings: Optional[Settings] = None) -> bool:
    return is_available(MYSQL, DEFAULT_PORTS[MYSQL], settings)
