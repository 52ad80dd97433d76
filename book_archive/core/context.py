# book_archive/core/context.py

import contextvars

correlation_id_ctx = contextvars.ContextVar("correlation_id", default=None)
caller_ctx = contextvars.ContextVar("caller", default=None)
