# book_archive/api/routers/health.py

from fastapi import APIRouter, Request

from book_archive.config.settings import get_settings

router = APIRouter()


@router.get("/health")
async def health(request: Request):
    """Health check with correlation ID from request state."""
    settings = get_settings()
    return {
        "status": "ok",
        "correlation_id": request.state.correlation_id,
        "environment": settings.environment,
        "version": settings.version,
        "store_backend": settings.store_backend,
    }
