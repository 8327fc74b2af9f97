"""
Pytest configuration and fixtures
"""

import pytest

from .fixtures.dummy_adapter import DummyAdapter
from .fixtures.example_connector import ExampleConnector


@pytest.fixture
def adapter():
    """Create dummy adapter fixture"""
    return DummyAdapter()


@pytest.fixture
def connector(adapter):
    """Create connector bound to the dummy adapter"""
    return ExampleConnector(http_adapter=adapter)
