"""Log-backed notification delivery channel.

Default delivery channel until a push/SMS gateway is wired in: each
delivery is written as a structured log entry carrying the requested
side effects, which a log shipper can forward.
"""

from __future__ import annotations

import structlog

from printflow.application.ports.notification_delivery import (
    NotificationDeliveryProtocol,
)
from printflow.domain.models.notification import DeliveryEffect

log = structlog.get_logger()


class LogNotificationDelivery(NotificationDeliveryProtocol):
    """Writes one ``notification_delivered`` log entry per delivery."""

    async def deliver(self, effect: DeliveryEffect) -> None:
        notification = effect.notification
        log.info(
            "notification_delivered",
            notification_id=str(notification.id),
            recipient_id=notification.recipient_id,
            kind=notification.kind.value,
            priority=notification.priority.value,
            title=notification.title,
            tag=effect.tag,
            require_interaction=effect.require_interaction,
            silent=effect.silent,
            play_sound=effect.play_sound,
        )
