"""Default option set for native container regression tests."""

import logging
from typing import Optional, Union

from itest_harness.config import Settings
from itest_harness.models.options import (
    BootDelegationOption,
    CleanCachesOption,
    CompositeOption,
    FrameworkStartLevelOption,
    JUnitBundlesOption,
    MavenBundleOption,
    Option,
    ProvisionOption,
    SystemPropertyOption,
)
from itest_harness.utils.constants import START_LEVEL_SYSTEM_BUNDLES, START_LEVEL_TEST_BUNDLE

logger = logging.getLogger("harness")

# Links normally contributed by the runner's default system options,
# minus the remote bundle context and pax-logging
SYSTEM_LINKS = [
    "org.ops4j.pax.exam",
    "org.ops4j.pax.exam.inject",
    "org.ops4j.pax.extender.service",
    "org.ops4j.base",
    "org.ops4j.pax.swissbox.core",
    "org.ops4j.pax.swissbox.extender",
    "org.ops4j.pax.swissbox.lifecycle",
    "org.ops4j.pax.swissbox.framework",
    "org.apache.geronimo.specs.atinject",
]

LOGGING_BUNDLES = [
    ("org.slf4j", "slf4j-api"),
    ("ch.qos.logback", "logback-core"),
    ("ch.qos.logback", "logback-classic"),
]


def link(artifact: str) -> ProvisionOption:
    """Provision option for a classpath link file."""
    return ProvisionOption(url=f"link:classpath:META-INF/links/{artifact}.link")


def when(condition: bool, *options: Union[Option, CompositeOption]) -> CompositeOption:
    """Include ``options`` only if ``condition`` holds."""
    return CompositeOption(options=list(options) if condition else [])


def regression_defaults(settings: Optional[Settings] = None) -> CompositeOption:
    """Build the default options for native container regression tests.

    The remote bundle context is not needed for a native container, and
    logging is unified through logback, configured by a system property so
    the driver and the container share one configuration.

    Args:
        settings: Harness settings. ``equinox_console`` enables the OSGi
            console on ``console_port``.

    Returns:
        The composite option list, in provisioning order.
    """
    settings = settings or Settings()

    options: list[Union[Option, CompositeOption]] = [
        BootDelegationOption(package="sun.*"),
        CleanCachesOption(),
        FrameworkStartLevelOption(start_level=START_LEVEL_TEST_BUNDLE),
    ]
    options.extend(
        link(artifact).with_start_level(START_LEVEL_SYSTEM_BUNDLES)
        for artifact in SYSTEM_LINKS
    )
    options.extend(
        MavenBundleOption(group_id=group_id, artifact_id=artifact_id)
        .with_start_level(START_LEVEL_SYSTEM_BUNDLES)
        for group_id, artifact_id in LOGGING_BUNDLES
    )
    options.append(
        SystemPropertyOption(
            key="logback.configurationFile",
            value=settings.get_logback_url(),
        )
    )
    options.append(
        when(
            settings.equinox_console,
            SystemPropertyOption(key="osgi.console", value=str(settings.console_port)),
        )
    )
    options.append(JUnitBundlesOption())

    if settings.equinox_console:
        logger.info("OSGi console enabled on port %d", settings.console_port)

    return CompositeOption(options=options)
