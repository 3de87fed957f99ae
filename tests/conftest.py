"""
Shared fixtures.

Provides:
- Mocked bank and group clients for unit tests
- A fake config backend behind httpx.MockTransport
- Test clients for the FastAPI app with overridden dependencies
"""

from typing import AsyncGenerator
from unittest.mock import AsyncMock

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from src.core.dependencies import (
    get_bank_client,
    get_config_backend_client,
    get_tracking_service,
)
from src.application.services import TrackingService
from src.domain.interfaces import BankClient, GroupClient
from src.infrastructure.clients import (
    HttpBankClient,
    HttpConfigBackendClient,
    HttpGroupClient,
)
from src.main import app
from tests.factories import (
    DEFAULT_BANK_ID,
    SYNC_BANK_NAME,
    FakeConfigBackend,
    get_all_groups,
    get_credit_configuration,
    get_sync_bank,
    make_config_backend_client,
)


# =============================================================================
# Mock Client Fixtures
# =============================================================================

@pytest.fixture
def bank_client() -> AsyncMock:
    """A bank client returning the default bounds."""
    client = AsyncMock(spec=BankClient)
    client.get_bank.return_value = get_sync_bank()
    client.get_credit_configuration.return_value = get_credit_configuration()
    return client


@pytest.fixture
def group_client() -> AsyncMock:
    """A group client holding the three default groups."""
    client = AsyncMock(spec=GroupClient)
    client.get_all_groups.return_value = get_all_groups()
    client.update_group.side_effect = lambda group_id, group: group
    return client


# =============================================================================
# Fake Config Backend Fixtures
# =============================================================================

@pytest.fixture
def config_backend() -> FakeConfigBackend:
    """A healthy config backend with the default bank and groups."""
    return FakeConfigBackend()


@pytest.fixture
def config_backend_client(config_backend: FakeConfigBackend) -> HttpConfigBackendClient:
    return make_config_backend_client(config_backend)


# =============================================================================
# App Client Fixtures
# =============================================================================

@pytest_asyncio.fixture
async def client(
    config_backend: FakeConfigBackend,
    config_backend_client: HttpConfigBackendClient,
) -> AsyncGenerator[AsyncClient, None]:
    """
    Create a test client wired to the fake config backend.

    Everything from the route down to the HTTP transport is real; only
    the wire to the config backend is replaced.
    """
    def override_get_config_backend_client():
        return config_backend_client

    def override_get_bank_client():
        return HttpBankClient(config_backend_client, DEFAULT_BANK_ID)

    def override_get_tracking_service():
        return TrackingService(HttpGroupClient(config_backend_client), SYNC_BANK_NAME)

    app.dependency_overrides[get_config_backend_client] = override_get_config_backend_client
    app.dependency_overrides[get_bank_client] = override_get_bank_client
    app.dependency_overrides[get_tracking_service] = override_get_tracking_service

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()
