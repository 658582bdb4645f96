"""
Fixtures used in the tests
"""
import pytest

from bitnets.network import NetworkRegistry, default_registry


@pytest.fixture()
def registry():
    return NetworkRegistry()


@pytest.fixture()
def known_registry():
    return default_registry()
