"""Notification delivery port.

Out-of-band delivery (browser push, alert sound, SMS) of notifications
that are already stored. Delivery is best-effort: implementations may
raise, and the dispatcher logs and swallows whatever they raise.
"""

from __future__ import annotations

from typing import Protocol

from printflow.domain.models.notification import DeliveryEffect


class NotificationDeliveryProtocol(Protocol):
    """Protocol for a notification delivery channel."""

    async def deliver(self, effect: DeliveryEffect) -> None:
        """Deliver one stored notification.

        Args:
            effect: The notification and the side effects requested for it.

        Note:
            - Called after the notification is stored
            - Failures never roll back the stored notification
        """
        ...
