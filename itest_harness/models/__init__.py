"""Data models for itest-harness."""

from itest_harness.models.profile import (
    ServerProfile,
    ProbeResult,
)
from itest_harness.models.options import (
    Option,
    BootDelegationOption,
    CleanCachesOption,
    FrameworkStartLevelOption,
    ProvisionOption,
    MavenBundleOption,
    SystemPropertyOption,
    JUnitBundlesOption,
    CompositeOption,
)

__all__ = [
    "ServerProfile",
    "ProbeResult",
    "Option",
    "BootDelegationOption",
    "CleanCachesOption",
    "FrameworkStartLevelOption",
    "ProvisionOption",
    "MavenBundleOption",
    "SystemPropertyOption",
    "JUnitBundlesOption",
    "CompositeOption",
]
