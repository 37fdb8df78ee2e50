from unittest.mock import AsyncMock, Mock

import pytest
from fastapi.testclient import TestClient
from tenacity import wait_none

from api.dependencies import get_history_service, get_rate_service
from api.main import app
from application.services import RateService


@pytest.fixture
def mock_provider():
    provider = Mock()
    provider.name = 'exchangerate-api'
    provider.fetch_usd_rates = AsyncMock(return_value={'USD': 1.0, 'EUR': 0.85, 'GBP': 0.74})
    provider.close = AsyncMock()
    return provider


@pytest.fixture
def rate_service(mock_provider):
    return RateService(primary_provider=mock_provider, retry_attempts=1, retry_wait=wait_none())


@pytest.fixture
def mock_history_service():
    return Mock()


@pytest.fixture
def client(rate_service, mock_history_service):
    # Override the real dependencies so no redis or database is needed
    app.dependency_overrides[get_rate_service] = lambda: rate_service
    app.dependency_overrides[get_history_service] = lambda: mock_history_service
    client = TestClient(app)
    yield client
    app.dependency_overrides.clear()
