"""Observability layer: in-process metrics. No external SaaS."""

from book_archive.observability.metrics import MetricsCollector

__all__ = [
    "MetricsCollector",
]
