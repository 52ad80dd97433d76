"""Fixtures for API unit tests: fresh in-memory store, recording event sink, AsyncClient."""

from unittest.mock import AsyncMock

import pytest
from httpx import ASGITransport, AsyncClient

from book_archive.infrastructure.memory.clock import CounterClock
from book_archive.infrastructure.memory.record_store_memory import InMemoryRecordStore
from book_archive.main import app
from book_archive.observability.metrics import MetricsCollector
from book_archive.security.identity import FernetIdentityProvider

API_SECRET = "api-test-secret-0123456789abcdefghijklmnop"


@pytest.fixture(scope="session")
def real_identity_provider():
    return FernetIdentityProvider(API_SECRET)


@pytest.fixture
def store():
    return InMemoryRecordStore()


@pytest.fixture
def clock():
    return CounterClock(start=4)


@pytest.fixture
def mock_sink():
    """Mock event sink so tests do not connect to a real broker."""
    s = AsyncMock()
    s.publish = AsyncMock(return_value=None)
    return s


@pytest.fixture
def metrics():
    return MetricsCollector()


@pytest.fixture
def app_with_overrides(store, clock, mock_sink, metrics, real_identity_provider):
    """App with store, clock, sink, identity and metrics overridden for testing."""
    from book_archive.api import dependencies

    app.dependency_overrides[dependencies.get_store] = lambda: store
    app.dependency_overrides[dependencies.get_clock] = lambda: clock
    app.dependency_overrides[dependencies.get_event_sink] = lambda: mock_sink
    app.dependency_overrides[dependencies.get_identity_provider] = lambda: real_identity_provider
    app.dependency_overrides[dependencies.get_metrics] = lambda: metrics
    yield app
    app.dependency_overrides.clear()


@pytest.fixture
async def client(app_with_overrides):
    """Async HTTP client for testing; uses overridden app."""
    transport = ASGITransport(app=app_with_overrides)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
def auth_headers(real_identity_provider):
    def _headers(identity: str) -> dict:
        return {"Authorization": f"Bearer {real_identity_provider.issue_token(identity)}"}

    return _headers
