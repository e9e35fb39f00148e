"""structlog setup for PrintFlow.

One call at startup (see printflow.bootstrap.logging) picks the renderer
and level for the whole process:

- production: one JSON object per line, for the log shipper
- development: colored console lines

Every entry carries ``service``, ``level``, ``timestamp`` and, inside an
API request, ``correlation_id`` plus the request context bound by
LoggingMiddleware. A typical production line:

    {"event": "task_status_changed", "task_id": "...", "previous_status":
     "pending-approval", "new_status": "approved", "service": "printflow",
     "level": "info", "timestamp": "2026-01-15T09:00:00Z",
     "correlation_id": "..."}

The in-memory stubs log through the standard library; the root logger
is set to the same level.
"""

import logging
import os
from typing import Any, cast

import structlog
from structlog.typing import Processor

from printflow.infrastructure.observability.correlation import correlation_id_processor

SERVICE_NAME = "printflow"
LOG_LEVEL_ENV = "LOG_LEVEL"


def _resolve_level(level_name: str | None) -> int:
    name = (level_name or os.getenv(LOG_LEVEL_ENV) or "INFO").upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.INFO


def _add_service_name(
    _logger: Any, _method_name: str, event_dict: dict[str, Any]
) -> dict[str, Any]:
    event_dict.setdefault("service", SERVICE_NAME)
    return event_dict


def configure_structlog(
    environment: str = "production",
    log_level: str | None = None,
) -> None:
    """Configure structlog (and stdlib logging) for the process.

    Args:
        environment: "production" for JSON lines, anything else for console output.
        log_level: Level name; falls back to LOG_LEVEL, then INFO.
    """
    level = _resolve_level(log_level)

    processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        cast(Processor, _add_service_name),
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        cast(Processor, correlation_id_processor),
        structlog.processors.StackInfoRenderer(),
    ]
    if environment == "production":
        processors += [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=True))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )
    logging.getLogger().setLevel(level)
