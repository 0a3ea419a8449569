# tests/test_config.py
"""Tests for configuration management."""

import os

import pytest
from pydantic import ValidationError

from itest_harness.config import Settings, ServerConfiguration


class TestSettings:
    """Settings test suite."""

    def test_default_values(self):
        """Test default configuration values."""
        settings = Settings()
        assert settings.probe_timeout == 5.0
        assert settings.equinox_console is False
        assert settings.console_port == 6666
        assert settings.log_level == "INFO"
        assert settings.log_config_file is None
        assert settings.base_dir == os.getcwd()

    def test_env_prefix(self, monkeypatch):
        """Test settings are read from ITEST_ variables."""
        monkeypatch.setenv("ITEST_EQUINOX_CONSOLE", "true")
        monkeypatch.setenv("ITEST_CONSOLE_PORT", "7777")
        monkeypatch.setenv("ITEST_PROBE_TIMEOUT", "1.5")
        settings = Settings()
        assert settings.equinox_console is True
        assert settings.console_port == 7777
        assert settings.probe_timeout == 1.5

    def test_timeout_must_be_positive(self):
        """Test that a zero timeout is rejected."""
        with pytest.raises(ValidationError):
            Settings(probe_timeout=0)

    def test_logback_url(self):
        """Test logback configuration URL."""
        settings = Settings(base_dir="/work/itest")
        assert settings.get_logback_url() == "file:/work/itest/src/test/resources/logback.xml"


class TestServerConfiguration:
    """Server profile configuration test suite."""

    def test_defaults_without_environment(self):
        """Test profile defaults when nothing is configured."""
        config = ServerConfiguration.load("postgresql")
        assert config.server_name == "localhost"
        assert config.port_number is None
        assert config.user is None

    def test_reads_profile_variables(self, monkeypatch):
        """Test profile values come from prefixed variables."""
        monkeypatch.setenv("ITEST_POSTGRESQL_SERVER_NAME", "db.example.com")
        monkeypatch.setenv("ITEST_POSTGRESQL_PORT_NUMBER", "15432")
        monkeypatch.setenv("ITEST_POSTGRESQL_USER", "pax")
        config = ServerConfiguration.load("postgresql")
        assert config.server_name == "db.example.com"
        assert config.port_number == "15432"
        assert config.user == "pax"

    def test_profiles_are_independent(self, monkeypatch):
        """Test one profile's variables do not leak into another."""
        monkeypatch.setenv("ITEST_MYSQL_SERVER_NAME", "mysql-host")
        assert ServerConfiguration.load("mysql").server_name == "mysql-host"
        assert ServerConfiguration.load("postgresql").server_name == "localhost"

    def test_env_file(self, tmp_path):
        """Test profile values from a dotenv file."""
        env_file = tmp_path / ".env"
        env_file.write_text("ITEST_MYSQL_SERVER_NAME=from-file\nITEST_MYSQL_PORT_NUMBER=3307\n")
        settings = Settings(env_file=str(env_file))
        profile = settings.get_profile("mysql")
        assert profile.server_name == "from-file"
        assert profile.port_number == "3307"

    def test_get_profile(self, monkeypatch):
        """Test conversion to a server profile."""
        monkeypatch.setenv("ITEST_POSTGRESQL_DATABASE_NAME", "pax")
        profile = Settings().get_profile("postgresql")
        assert profile.name == "postgresql"
        assert profile.url == "postgresql://localhost/pax"
