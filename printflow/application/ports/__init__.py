"""Application ports (interfaces to external collaborators)."""

from printflow.application.ports.notification_delivery import (
    NotificationDeliveryProtocol,
)
from printflow.application.ports.task_repository import TaskRepositoryProtocol
from printflow.application.ports.team_directory import TeamDirectoryProtocol
from printflow.application.ports.time_authority import TimeAuthorityProtocol

__all__: list[str] = [
    "NotificationDeliveryProtocol",
    "TaskRepositoryProtocol",
    "TeamDirectoryProtocol",
    "TimeAuthorityProtocol",
]
