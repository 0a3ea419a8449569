# itest_harness/config.py
"""Configuration management for itest-harness."""

import os
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from itest_harness.models.profile import ServerProfile
from itest_harness.utils.constants import DEFAULT_CONNECT_TIMEOUT, DEFAULT_CONSOLE_PORT


class Settings(BaseSettings):
    """Harness settings loaded from environment variables."""

    # Availability probe configuration
    probe_timeout: float = Field(default=DEFAULT_CONNECT_TIMEOUT, gt=0)

    # Test runner configuration
    equinox_console: bool = False
    console_port: int = Field(default=DEFAULT_CONSOLE_PORT, gt=0, lt=65536)
    base_dir: str = Field(default_factory=os.getcwd)
    logback_config: str = "src/test/resources/logback.xml"

    # Logging configuration
    log_level: str = "INFO"
    log_config_file: Optional[str] = None

    # Optional dotenv file consulted for server profiles
    env_file: Optional[str] = None

    model_config = SettingsConfigDict(env_prefix="ITEST_")

    def get_logback_url(self) -> str:
        """Get the logback configuration URL shared by driver and container.

        Returns:
            A ``file:`` URL pointing at the logback configuration.
        """
        return "file:" + os.path.join(self.base_dir, self.logback_config)

    def get_profile(self, name: str) -> ServerProfile:
        """Load a server profile by name.

        Args:
            name: Profile name, e.g. ``postgresql``.

        Returns:
            The profile built from ``ITEST_<NAME>_*`` variables.
        """
        return ServerConfiguration.load(name, env_file=self.env_file).to_profile(name)


class ServerConfiguration(BaseSettings):
    """Connection parameters of one named backend.

    Values come from ``ITEST_<PROFILE>_SERVER_NAME``,
    ``ITEST_<PROFILE>_PORT_NUMBER`` and friends.
    """

    server_name: str = "localhost"
    port_number: Optional[str] = None
    database_name: Optional[str] = None
    user: Optional[str] = None
    password: Optional[str] = None

    model_config = SettingsConfigDict(extra="ignore")

    @classmethod
    def load(cls, profile: str, env_file: Optional[str] = None) -> "ServerConfiguration":
        """Read the configuration of a profile from the environment.

        Args:
            profile: Profile name.
            env_file: Optional dotenv file to read as well.

        Returns:
            A fresh configuration instance.
        """
        prefix = f"ITEST_{profile.upper()}_"
        return cls(_env_prefix=prefix, _env_file=env_file)

    def to_profile(self, name: str) -> ServerProfile:
        return ServerProfile(
            name=name,
            server_name=self.server_name,
            port_number=self.port_number,
            database_name=self.database_name,
            user=self.user,
            password=self.password,
        )
