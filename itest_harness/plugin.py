"""pytest plugin that skips tests whose database server is unreachable.

Mark a test with ``@pytest.mark.requires_db("postgresql")`` or request the
``postgresql_server`` / ``mysql_server`` fixtures. Probe results are cached
for the session so each server is probed at most once.
"""

import logging
from typing import Optional

import pytest

from itest_harness.config import Settings
from itest_harness.models.profile import ProbeResult, ServerProfile
from itest_harness.services.probe import probe
from itest_harness.utils.constants import DISPLAY_NAMES, MYSQL, POSTGRESQL

logger = logging.getLogger("itest-plugin")

_results_key = pytest.StashKey[dict]()
_settings_key = pytest.StashKey[Settings]()


def require_available(
    profile: str,
    settings: Optional[Settings] = None,
    cache: Optional[dict] = None
) -> ProbeResult:
    """Skip the current test unless the profile's server is reachable.

    Args:
        profile: Profile name.
        settings: Harness settings.
        cache: Optional dict of earlier probe results, keyed by profile.

    Returns:
        The successful probe result.
    """
    result = cache.get(profile) if cache is not None else None
    if result is None:
        result = probe(profile, settings=settings)
        if cache is not None:
            cache[profile] = result

    if not result.available:
        pytest.skip(
            f"{DISPLAY_NAMES.get(profile, profile)} not available at "
            f"{result.server_name}:{result.port}"
        )
    return result


def pytest_configure(config):
    """Register the marker and the session caches."""
    config.addinivalue_line(
        "markers",
        "requires_db(*profiles): skip unless the named database servers are reachable"
    )
    config.stash[_results_key] = {}


def _session_settings(config) -> Settings:
    settings = config.stash.get(_settings_key, None)
    if settings is None:
        settings = Settings()
        config.stash[_settings_key] = settings
    return settings


def pytest_runtest_setup(item):
    """Skip marked tests before their fixtures are set up."""
    for marker in item.iter_markers(name="requires_db"):
        for profile in marker.args:
            require_available(
                profile,
                settings=_session_settings(item.config),
                cache=item.config.stash.get(_results_key, None),
            )


@pytest.fixture(scope="session")
def itest_settings(request) -> Settings:
    """Harness settings shared by the session."""
    return _session_settings(request.config)


@pytest.fixture(scope="session")
def postgresql_server(request, itest_settings) -> ServerProfile:
    """PostgreSQL profile; skips when the server is unreachable."""
    require_available(POSTGRESQL, itest_settings, request.config.stash.get(_results_key, None))
    return itest_settings.get_profile(POSTGRESQL)


@pytest.fixture(scope="session")
def mysql_server(request, itest_settings) -> ServerProfile:
    """MySQL profile; skips when the server is unreachable."""
    require_available(MYSQL, itest_settings, request.config.stash.get(_results_key, None))
    return itest_settings.get_profile(MYSQL)
