"""Correlation IDs for tracing one API request through the logs.

The ID lives in a ContextVar, so it follows the request across awaits
and into tasks spawned while serving it. LoggingMiddleware sets it;
``correlation_id_processor`` stamps it on every structlog entry.
"""

from contextvars import ContextVar
from typing import Any
from uuid import uuid4

# "" means no request is in flight (startup, background work)
_current_correlation_id: ContextVar[str] = ContextVar("printflow_correlation_id", default="")


def generate_correlation_id() -> str:
    """Fresh random correlation ID."""
    return str(uuid4())


def get_correlation_id() -> str:
    """Correlation ID of the current context, or "" outside a request."""
    return _current_correlation_id.get()


def set_correlation_id(correlation_id: str) -> None:
    """Attach ``correlation_id`` to the current context."""
    _current_correlation_id.set(correlation_id)


def correlation_id_processor(
    _logger: Any, _method_name: str, event_dict: dict[str, Any]
) -> dict[str, Any]:
    """Structlog processor: copy the current correlation ID into the entry.

    Entries written outside a request are left without the key.
    """
    correlation_id = get_correlation_id()
    if correlation_id:
        event_dict.setdefault("correlation_id", correlation_id)
    return event_dict
