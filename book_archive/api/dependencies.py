"""FastAPI dependency injection: store, clock, event sink, identity provider, ArchiveService, credentials."""

import logging
from typing import Annotated, Optional

from fastapi import Depends, Request

from book_archive.application.archive_service import ArchiveService
from book_archive.application.ports import EventSink, IdentityProvider, LogicalClock
from book_archive.application.record_store import RecordStore
from book_archive.config.settings import get_settings
from book_archive.infrastructure.cache.clock_redis import RedisClock
from book_archive.infrastructure.cache.record_store_redis import RedisRecordStore
from book_archive.infrastructure.cache.redis_client import RedisClient
from book_archive.infrastructure.database.record_store_db import DbRecordStore
from book_archive.infrastructure.database.session import create_engine, create_session_factory
from book_archive.infrastructure.memory.clock import CounterClock
from book_archive.infrastructure.memory.record_store_memory import InMemoryRecordStore
from book_archive.infrastructure.messaging.logging_sink import LoggingEventSink
from book_archive.infrastructure.messaging.rabbitmq_publisher import RabbitMQEventSink
from book_archive.observability.metrics import MetricsCollector
from book_archive.security.identity import FernetIdentityProvider

AUTHORIZATION_HEADER = "Authorization"
BEARER_PREFIX = "bearer "

_redis_client: RedisClient | None = None
_store: RecordStore | None = None
_clock: LogicalClock | None = None
_event_sink: EventSink | None = None
_identity_provider: IdentityProvider | None = None
_metrics: MetricsCollector | None = None
_engine = None


def get_redis_client() -> RedisClient:
    """Return singleton Redis client."""
    global _redis_client
    if _redis_client is None:
        _redis_client = RedisClient(get_settings().redis_url)
    return _redis_client


def get_engine():
    """Return singleton SQLAlchemy async engine."""
    global _engine
    if _engine is None:
        _engine = create_engine(get_settings().database_url, echo=get_settings().debug)
    return _engine


def get_store() -> RecordStore:
    """Return singleton record store for the configured backend."""
    global _store
    if _store is None:
        backend = get_settings().store_backend
        if backend == "redis":
            _store = RedisRecordStore(get_redis_client())
        elif backend == "database":
            engine = get_engine()
            _store = DbRecordStore(
                create_session_factory(engine),
                serialize_transactions=engine.dialect.name == "sqlite",
            )
        else:
            _store = InMemoryRecordStore()
    return _store


def get_clock() -> LogicalClock:
    """Return singleton logical clock. Redis-backed stores share the clock through Redis."""
    global _clock
    if _clock is None:
        if get_settings().store_backend == "redis":
            _clock = RedisClock(get_redis_client())
        else:
            _clock = CounterClock()
    return _clock


def set_clock(clock: LogicalClock) -> None:
    """Install a clock (e.g. one seeded from persisted state at startup)."""
    global _clock
    _clock = clock


def get_event_sink() -> EventSink:
    """Return singleton event sink."""
    global _event_sink
    if _event_sink is None:
        settings = get_settings()
        if settings.event_sink == "rabbitmq":
            _event_sink = RabbitMQEventSink(settings.rabbitmq_url)
        else:
            _event_sink = LoggingEventSink()
    return _event_sink


def get_identity_provider() -> IdentityProvider:
    """Return singleton identity provider."""
    global _identity_provider
    if _identity_provider is None:
        settings = get_settings()
        _identity_provider = FernetIdentityProvider(
            settings.auth_secret,
            max_age_seconds=settings.auth_token_max_age_seconds,
        )
    return _identity_provider


def get_metrics() -> MetricsCollector:
    """Return singleton metrics collector."""
    global _metrics
    if _metrics is None:
        _metrics = MetricsCollector()
    return _metrics


def get_archive_service(
    store: Annotated[RecordStore, Depends(get_store)],
    identity_provider: Annotated[IdentityProvider, Depends(get_identity_provider)],
    clock: Annotated[LogicalClock, Depends(get_clock)],
    event_sink: Annotated[EventSink, Depends(get_event_sink)],
    metrics: Annotated[MetricsCollector, Depends(get_metrics)],
) -> ArchiveService:
    """Build ArchiveService with injected store, identity provider, clock, event sink, logger."""
    return ArchiveService(
        store=store,
        identity_provider=identity_provider,
        clock=clock,
        event_sink=event_sink,
        logger=logging.getLogger("book_archive.archive"),
        metrics=metrics,
    )


def get_credentials(request: Request) -> Optional[str]:
    """Extract the bearer token from the Authorization header, or None."""
    header = request.headers.get(AUTHORIZATION_HEADER)
    if not header or not header.lower().startswith(BEARER_PREFIX):
        return None
    return header[len(BEARER_PREFIX):].strip() or None


def get_correlation_id(request: Request) -> str:
    """Extract correlation_id from request.state (set by middleware)."""
    return getattr(request.state, "correlation_id", "") or ""
