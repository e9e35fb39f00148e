"""Bootstrap wiring for logging configuration."""

from __future__ import annotations

from printflow.config.workflow_config import WorkflowConfig
from printflow.infrastructure.observability import configure_structlog as _configure_structlog


def configure_logging(config: WorkflowConfig) -> None:
    """Configure structlog from the workflow config."""
    _configure_structlog(environment=config.environment, log_level=config.log_level)


__all__ = ["configure_logging"]
