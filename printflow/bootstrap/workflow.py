"""Bootstrap wiring for the workflow engine.

Builds the engine and its collaborators as explicit objects. Callers
(the API startup hook, tests, scripts) pass any collaborator they want
to replace; everything else gets the default implementation.
"""

from __future__ import annotations

from dataclasses import dataclass

from structlog import get_logger

from printflow.application.ports.notification_delivery import (
    NotificationDeliveryProtocol,
)
from printflow.application.ports.task_repository import TaskRepositoryProtocol
from printflow.application.ports.team_directory import TeamDirectoryProtocol
from printflow.application.ports.time_authority import TimeAuthorityProtocol
from printflow.application.services.notification_dispatcher import (
    NotificationDispatcher,
)
from printflow.application.services.workflow_engine import WorkflowEngine
from printflow.bootstrap.demo_data import seed_demo_tasks
from printflow.config.workflow_config import WorkflowConfig
from printflow.domain.services.notification_templates import (
    NotificationTemplateRegistry,
)
from printflow.domain.services.status_policy import StatusPolicy
from printflow.infrastructure.adapters.log_notification_delivery import (
    LogNotificationDelivery,
)
from printflow.infrastructure.adapters.system_time_authority import SystemTimeAuthority
from printflow.infrastructure.stubs.task_repository_stub import TaskRepositoryStub
from printflow.infrastructure.stubs.team_directory_stub import TeamDirectoryStub

logger = get_logger()


@dataclass(frozen=True)
class WorkflowServices:
    """The wired object graph."""

    config: WorkflowConfig
    engine: WorkflowEngine
    dispatcher: NotificationDispatcher
    repository: TaskRepositoryProtocol
    team_directory: TeamDirectoryProtocol
    time_authority: TimeAuthorityProtocol


def build_workflow_services(
    config: WorkflowConfig | None = None,
    *,
    repository: TaskRepositoryProtocol | None = None,
    team_directory: TeamDirectoryProtocol | None = None,
    delivery: NotificationDeliveryProtocol | None = None,
    time_authority: TimeAuthorityProtocol | None = None,
    templates: NotificationTemplateRegistry | None = None,
    policy: StatusPolicy | None = None,
) -> WorkflowServices:
    """Wire the workflow engine.

    Args:
        config: Settings; defaults to WorkflowConfig.from_environment().
        repository: Task store; defaults to an in-memory store.
        team_directory: Team rosters; defaults to the demo rosters.
        delivery: Delivery channel; defaults to structured-log delivery.
        time_authority: Clock; defaults to the system clock.
        templates: Notification templates; defaults to the built-in set.
        policy: Status policy; defaults to the shop workflow.

    Returns:
        WorkflowServices holding the engine and its collaborators.
    """
    config = config or WorkflowConfig.from_environment()
    repository = repository or TaskRepositoryStub()
    team_directory = team_directory or TeamDirectoryStub()
    time_authority = time_authority or SystemTimeAuthority()

    dispatcher = NotificationDispatcher(
        time_authority,
        templates,
        delivery or LogNotificationDelivery(),
        delivery_timeout=config.delivery_timeout_seconds,
        delivery_enabled=config.delivery_enabled,
    )
    engine = WorkflowEngine(
        repository=repository,
        team_directory=team_directory,
        dispatcher=dispatcher,
        time_authority=time_authority,
        policy=policy,
    )

    logger.info(
        "workflow_services_built",
        environment=config.environment,
        delivery_enabled=config.delivery_enabled,
        repository=type(repository).__name__,
    )
    return WorkflowServices(
        config=config,
        engine=engine,
        dispatcher=dispatcher,
        repository=repository,
        team_directory=team_directory,
        time_authority=time_authority,
    )


async def seed_if_configured(services: WorkflowServices) -> int:
    """Preload demo jobs when config.seed_demo_data is set.

    Returns:
        Number of tasks seeded (0 when seeding is off).
    """
    if not services.config.seed_demo_data:
        return 0
    count = await seed_demo_tasks(services.repository)
    logger.info("demo_tasks_seeded", count=count)
    return count
