"""FastAPI application entry point for PrintFlow.

Run with:
    uvicorn printflow.api.main:app
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from structlog import get_logger

from printflow import __version__
from printflow.api.dependencies.workflow import set_workflow_services
from printflow.api.middleware.logging_middleware import LoggingMiddleware
from printflow.api.routes import notifications_router, tasks_router, workflow_router
from printflow.bootstrap.logging import configure_logging
from printflow.bootstrap.workflow import (
    WorkflowServices,
    build_workflow_services,
    seed_if_configured,
)
from printflow.config.workflow_config import WorkflowConfig

logger = get_logger()


def create_app(services: WorkflowServices | None = None) -> FastAPI:
    """Build the API application.

    Args:
        services: Pre-wired services (tests). When None, services are
            built from the environment at startup.
    """
    if services is not None:
        set_workflow_services(services)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        wired = services
        if wired is None:
            config = WorkflowConfig.from_environment()
            configure_logging(config)
            wired = build_workflow_services(config)
            set_workflow_services(wired)
        await seed_if_configured(wired)
        logger.info("printflow_started", environment=wired.config.environment)
        yield
        logger.info("printflow_stopped")

    app = FastAPI(
        title="PrintFlow API",
        description="Print shop job tracking and approval workflow",
        version=__version__,
        lifespan=lifespan,
    )
    app.add_middleware(LoggingMiddleware)
    app.include_router(tasks_router)
    app.include_router(workflow_router)
    app.include_router(notifications_router)
    return app


app = create_app()
