"""
Request-scoped correlation IDs.

A ContextVar carries the ID of the request being served so log records
emitted from services, pipeline tasks, and threadpool workers can be tied
back to one HTTP call. run_in_threadpool copies the context, so the value
follows work moved off the event loop.

Dependencies: contextvars
System role: Request tracing
"""

import uuid
from contextvars import ContextVar

correlation_id_ctx: ContextVar[str] = ContextVar("correlation_id", default="")


def new_correlation_id() -> str:
    return str(uuid.uuid4())


def set_correlation_id(correlation_id: str | None = None) -> str:
    """
    Bind a correlation ID to the current context.

    Args:
        correlation_id: Caller-supplied ID; a fresh UUID when empty

    Returns:
        str: The ID now bound
    """
    value = correlation_id or new_correlation_id()
    correlation_id_ctx.set(value)
    return value


def get_correlation_id() -> str:
    """Correlation ID of the current request, "" when none is bound."""
    return correlation_id_ctx.get()


def clear_correlation_id() -> None:
    correlation_id_ctx.set("")
