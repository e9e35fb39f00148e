"""Infrastructure stubs for development and testing.

Available stubs:
- TaskRepositoryStub: In-memory task store
- TeamDirectoryStub: Static team rosters (demo accounts by default)
- NotificationDeliveryStub: Records deliveries, injectable failures

WARNING: These stubs are NOT for production use.
Production implementations are in printflow/infrastructure/adapters/.
"""

from printflow.infrastructure.stubs.notification_delivery_stub import (
    NotificationDeliveryError,
    NotificationDeliveryStub,
)
from printflow.infrastructure.stubs.task_repository_stub import TaskRepositoryStub
from printflow.infrastructure.stubs.team_directory_stub import (
    DEFAULT_TEAM_MEMBERS,
    TeamDirectoryStub,
)

__all__: list[str] = [
    "DEFAULT_TEAM_MEMBERS",
    "NotificationDeliveryError",
    "NotificationDeliveryStub",
    "TaskRepositoryStub",
    "TeamDirectoryStub",
]
