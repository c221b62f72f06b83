"""Pytest configuration and fixtures."""

import logging
from unittest.mock import Mock

import pytest

from simcoe.core.base import SimcoeProduct
from simcoe.mparticle import MParticle, MParticleClient


@pytest.fixture(autouse=True)
def reset_simcoe_logger():
    """Undo configure_logging calls made by a test."""
    yield
    root = logging.getLogger("simcoe")
    for handler in list(root.handlers):
        if getattr(handler, "_simcoe_handler", False):
            root.removeHandler(handler)
    root.setLevel(logging.NOTSET)


@pytest.fixture
def mock_client():
    """Create a mock mParticle SDK client."""
    return Mock(spec=MParticleClient)


@pytest.fixture
def tracker(mock_client):
    """Create an mParticle tracker started against the mock client."""
    tracker = MParticle(mock_client, key="test_key", secret="test_secret")
    mock_client.reset_mock()
    return tracker


@pytest.fixture
def sample_product():
    """Sample product descriptor for testing."""
    return SimcoeProduct(
        product_name="Trail Runner",
        product_id="SKU-001",
        quantity=2,
        price=89.5,
        properties={"color": "blue"},
    )
