# tests/conftest.py
import pytest
from fastapi.testclient import TestClient

from app.main import app
from app.core.config import Settings, get_settings
from app.dependencies import get_rate_engine
from app.services.shipping.rate_engine import RateEngine, fixed_jitter


@pytest.fixture(scope="session")
def settings():
    """Provide test settings"""
    return Settings(
        APP_NAME="Logistics Dashboard API",
        APP_VERSION="2.0.0",
        ENVIRONMENT="test",
        MOCK_DATA=True,
    )

@pytest.fixture
def fixed_engine():
    """Rate engine with jitter pinned to 1.0, so prices are exact"""
    return RateEngine(jitter=fixed_jitter(1.0))

@pytest.fixture
def test_client(settings, fixed_engine):
    """Provide a test client with overridden settings and a deterministic rate engine"""
    app.dependency_overrides[get_settings] = lambda: settings
    app.dependency_overrides[get_rate_engine] = lambda: fixed_engine
    with TestClient(app) as client:
        yield client
    app.dependency_overrides.clear()

@pytest.fixture
def sample_rate_request():
    """Provide a sample international rate request body"""
    return {
        "collection_country": "UK",
        "delivery_country": "US",
        "weight": 10,
        "collection_postcode": "EC1A 1BB",
        "delivery_postcode": "10001",
    }
