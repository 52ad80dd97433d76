"""Shared test setup: settings environment and fake collaborators."""

import os

# Settings are read at import time of book_archive.main; set them before any test module imports it.
os.environ.setdefault("ARCHIVE_AUTH_SECRET", "test-secret-0123456789abcdefghijklmnopqrstuvwxyz")
os.environ.setdefault("ARCHIVE_ENVIRONMENT", "test")
os.environ.setdefault("ARCHIVE_STORE_BACKEND", "memory")
os.environ.setdefault("ARCHIVE_EVENT_SINK", "log")

import pytest

from book_archive.domain.exceptions import UnauthenticatedError


class FakeIdentityProvider:
    """Treats the credentials string as the identity; None or blank is unauthenticated."""

    def authenticate(self, credentials):
        if not credentials or not credentials.strip():
            raise UnauthenticatedError("Caller credentials are required")
        return credentials.strip()


class FakeRedis:
    """In-memory Redis for unit tests."""

    def __init__(self):
        self._store: dict[str, str] = {}

    async def set_nx(self, key: str, value: str) -> bool:
        if key in self._store:
            return False
        self._store[key] = value
        return True

    async def get(self, key: str):
        return self._store.get(key)

    async def exists(self, key: str) -> bool:
        return key in self._store

    async def incr(self, key: str) -> int:
        value = int(self._store.get(key, "0")) + 1
        self._store[key] = str(value)
        return value


@pytest.fixture
def identity_provider():
    return FakeIdentityProvider()


@pytest.fixture
def fake_redis():
    return FakeRedis()
