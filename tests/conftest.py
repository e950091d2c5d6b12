"""
Test configuration and fixtures for the PaletteLab backend tests.
"""
import pytest
from fastapi.testclient import TestClient

# Import the main app
from main import app
from palettelab.services.storage import reset_storage
from palettelab.utils.metrics import reset_metrics


@pytest.fixture
def test_client():
    """Create test client for the FastAPI app."""
    return TestClient(app)


@pytest.fixture(autouse=True)
def fresh_state():
    """Reset metrics and the in-memory catalog before each test."""
    reset_metrics()
    reset_storage()
    yield
    reset_storage()
