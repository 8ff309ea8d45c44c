"""API test fixtures — FastAPI test client with an injectable mock registry.

Invariants:
    - Every test gets a fresh, empty InMemoryMockRegistry
    - get_mock_registry dependency overridden to return that registry
"""

import pytest
from httpx import ASGITransport, AsyncClient

from oss_register.api.dependencies import get_mock_registry
from oss_register.core.mock_registry import InMemoryMockRegistry
from oss_register.main import app


@pytest.fixture
def registry():
    return InMemoryMockRegistry()


@pytest.fixture
async def client(registry):
    """Test client whose handlers consult the `registry` fixture."""
    app.dependency_overrides[get_mock_registry] = lambda: registry
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c
    app.dependency_overrides.clear()
