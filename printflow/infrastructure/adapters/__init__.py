"""Production adapters for PrintFlow ports."""

from printflow.infrastructure.adapters.log_notification_delivery import (
    LogNotificationDelivery,
)
from printflow.infrastructure.adapters.system_time_authority import SystemTimeAuthority

__all__: list[str] = ["LogNotificationDelivery", "SystemTimeAuthority"]
