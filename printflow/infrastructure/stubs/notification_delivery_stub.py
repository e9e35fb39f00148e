"""Notification delivery stub.

Records every delivery attempt in memory. Can be told to fail (raise) or
hang for particular recipients so tests can check that delivery trouble
never reaches the caller.
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field

from structlog import get_logger

from printflow.application.ports.notification_delivery import (
    NotificationDeliveryProtocol,
)
from printflow.domain.models.notification import DeliveryEffect

logger = get_logger()


class NotificationDeliveryError(Exception):
    """Simulated delivery channel failure."""


@dataclass
class NotificationDeliveryStub(NotificationDeliveryProtocol):
    """Stub delivery channel.

    Attributes:
        delivered: Effects delivered successfully, in delivery order.
        fail_recipients: Recipients whose delivery raises.
        hang_recipients: Recipients whose delivery never completes.
        attempts: Number of deliver() calls, including failures.
    """

    delivered: list[DeliveryEffect] = field(default_factory=list)
    fail_recipients: set[str] = field(default_factory=set)
    hang_recipients: set[str] = field(default_factory=set)
    attempts: int = 0

    async def deliver(self, effect: DeliveryEffect) -> None:
        self.attempts += 1
        recipient_id = effect.notification.recipient_id

        if recipient_id in self.fail_recipients:
            logger.warning(
                "notification_delivery_stub.failed",
                recipient_id=recipient_id,
            )
            raise NotificationDeliveryError(f"delivery to {recipient_id} failed")

        if recipient_id in self.hang_recipients:
            await asyncio.Event().wait()

        self.delivered.append(effect)
        logger.debug(
            "notification_delivery_stub.delivered",
            recipient_id=recipient_id,
            notification_id=str(effect.notification.id),
        )

    def delivered_to(self, recipient_id: str) -> list[DeliveryEffect]:
        """Effects delivered to one recipient (for testing)."""
        return [e for e in self.delivered if e.notification.recipient_id == recipient_id]
