"""Bootstrap wiring: object graph construction and startup helpers."""

from printflow.bootstrap.workflow import (
    WorkflowServices,
    build_workflow_services,
    seed_if_configured,
)

__all__ = ["WorkflowServices", "build_workflow_services", "seed_if_configured"]
