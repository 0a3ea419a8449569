"""Pytest configuration and fixtures for itest-harness tests."""

import os
import socket

import pytest

pytest_plugins = ["pytester"]


# Markers for test categorization
def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "integration: marks tests as integration tests (deselect with '-m \"not integration\"')"
    )
    config.addinivalue_line(
        "markers", "slow: marks tests as slow running tests"
    )


@pytest.fixture(autouse=True)
def isolated_env(request, monkeypatch):
    """Hide ITEST_* variables from unit tests."""
    if request.node.get_closest_marker("integration") is None:
        for key in list(os.environ):
            if key.upper().startswith("ITEST_"):
                monkeypatch.delenv(key)


@pytest.fixture
def listening_port():
    """Port of a local TCP listener."""
    server = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    server.bind(("127.0.0.1", 0))
    server.listen(128)
    yield server.getsockname()[1]
    server.close()


@pytest.fixture
def closed_port():
    """Port on which nothing listens."""
    sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    sock.bind(("127.0.0.1", 0))
    port = sock.getsockname()[1]
    sock.close()
    return port


def pytest_collection_modifyitems(config, items):
    """Modify test items after collection."""
    items.sort(key=lambda item: (item.get_closest_marker("integration") is not None, item.name))
