"""Declarative option models consumed by the external OSGi test runner."""

from typing import Literal, Optional, Union

from pydantic import BaseModel, Field


class BootDelegationOption(BaseModel):
    """Package delegated to the boot classloader."""

    kind: Literal["boot_delegation"] = "boot_delegation"
    package: str


class CleanCachesOption(BaseModel):
    """Clean framework caches before the run."""

    kind: Literal["clean_caches"] = "clean_caches"
    value: bool = True


class FrameworkStartLevelOption(BaseModel):
    """Framework start level."""

    kind: Literal["framework_start_level"] = "framework_start_level"
    start_level: int


class ProvisionOption(BaseModel):
    """Bundle provisioned from a URL."""

    kind: Literal["provision"] = "provision"
    url: str
    start_level: Optional[int] = None

    def with_start_level(self, start_level: int) -> "ProvisionOption":
        return self.model_copy(update={"start_level": start_level})


class MavenBundleOption(BaseModel):
    """Bundle provisioned from a Maven coordinate.

    A ``version`` of ``None`` means the version declared by the project.
    """

    kind: Literal["maven_bundle"] = "maven_bundle"
    group_id: str
    artifact_id: str
    version: Optional[str] = None
    start_level: Optional[int] = None

    @property
    def version_as_in_project(self) -> bool:
        return self.version is None

    def with_start_level(self, start_level: int) -> "MavenBundleOption":
        return self.model_copy(update={"start_level": start_level})

    def get_url(self) -> str:
        """Get the ``mvn:`` URL of the bundle."""
        url = f"mvn:{self.group_id}/{self.artifact_id}"
        if self.version:
            url += f"/{self.version}"
        return url


class SystemPropertyOption(BaseModel):
    """System property set in the test container."""

    kind: Literal["system_property"] = "system_property"
    key: str
    value: str


class JUnitBundlesOption(BaseModel):
    """JUnit and its dependencies provisioned as bundles."""

    kind: Literal["junit_bundles"] = "junit_bundles"


Option = Union[
    BootDelegationOption,
    CleanCachesOption,
    FrameworkStartLevelOption,
    ProvisionOption,
    MavenBundleOption,
    SystemPropertyOption,
    JUnitBundlesOption,
]


class CompositeOption(BaseModel):
    """Ordered group of options; nested composites are flattened."""

    kind: Literal["composite"] = "composite"
    options: list[Union[Option, "CompositeOption"]] = Field(default_factory=list)

    def flatten(self) -> list[Option]:
        """Return all leaf options in declaration order."""
        flat: list[Option] = []
        for option in self.options:
            if isinstance(option, CompositeOption):
                flat.extend(option.flatten())
            else:
                flat.append(option)
        return flat


CompositeOption.model_rebuild()
