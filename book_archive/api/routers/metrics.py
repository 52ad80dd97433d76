# book_archive/api/routers/metrics.py

from typing import Annotated

from fastapi import APIRouter, Depends

from book_archive.api.dependencies import get_metrics
from book_archive.observability.metrics import MetricsCollector

router = APIRouter()


@router.get("/metrics")
async def metrics(collector: Annotated[MetricsCollector, Depends(get_metrics)]):
    """Export in-process counters."""
    return collector.export_metrics()
