# book_archive/main.py

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.responses import JSONResponse

from book_archive.api import dependencies
from book_archive.api.middleware import CorrelationIdMiddleware, RequestAuditMiddleware
from book_archive.api.routers import books, health, metrics
from book_archive.config.logging import configure_logging
from book_archive.config.settings import get_settings
from book_archive.domain.exceptions import (
    AlreadyExistsInArchiveError,
    ArchiveError,
    InvalidFingerprintError,
    UnauthenticatedError,
)
from book_archive.infrastructure.database.record_store_db import DbRecordStore
from book_archive.infrastructure.database.session import create_tables
from book_archive.infrastructure.memory.clock import CounterClock

settings = get_settings()
configure_logging(settings.log_level)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    if settings.store_backend == "database":
        await create_tables(dependencies.get_engine())
        store = dependencies.get_store()
        if isinstance(store, DbRecordStore):
            # Continue logical time from the last archived record
            latest = await store.latest_logical_time()
            dependencies.set_clock(CounterClock(start=latest))
            logger.info("clock_seeded", extra={"logical_time": latest})
    yield
    sink = dependencies._event_sink
    if sink is not None and hasattr(sink, "close"):
        await sink.close()
    if dependencies._redis_client is not None:
        await dependencies._redis_client.close()
    if dependencies._engine is not None:
        await dependencies._engine.dispose()


app = FastAPI(
    title=settings.app_name,
    version=settings.version,
    debug=settings.debug,
    lifespan=lifespan,
)

# Middleware order: last added runs first (outermost). Request flow: CorrelationId -> RequestAudit.
app.add_middleware(RequestAuditMiddleware)
app.add_middleware(CorrelationIdMiddleware)


@app.exception_handler(UnauthenticatedError)
async def unauthenticated_error_handler(request, exc: UnauthenticatedError):
    return JSONResponse(
        status_code=401,
        content={"detail": exc.message},
        headers={"WWW-Authenticate": "Bearer"},
    )


@app.exception_handler(AlreadyExistsInArchiveError)
async def already_exists_error_handler(request, exc: AlreadyExistsInArchiveError):
    return JSONResponse(status_code=409, content={"detail": exc.message})


@app.exception_handler(InvalidFingerprintError)
async def invalid_fingerprint_error_handler(request, exc: InvalidFingerprintError):
    return JSONResponse(status_code=422, content={"detail": exc.message})


@app.exception_handler(ArchiveError)
async def archive_error_handler(request, exc: ArchiveError):
    return JSONResponse(status_code=400, content={"detail": exc.message})


@app.exception_handler(Exception)
async def unexpected_error_handler(request, exc: Exception):
    logger.error("unhandled_error", exc_info=exc)
    return JSONResponse(
        status_code=500,
        content={"detail": "Internal server error"},
    )


# Routers: /health, /metrics, /books, /fingerprint
app.include_router(health.router)
app.include_router(metrics.router)
app.include_router(books.router)
