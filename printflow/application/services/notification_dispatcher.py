"""Notification dispatcher.

Turns task events into stored, recipient-addressed notifications and
hands them to the delivery channel.

Two-phase dispatch:
1. ``enqueue`` renders the template and stores one notification per
   recipient (under the dispatcher lock). It returns the delivery
   effects for the stored records.
2. ``deliver`` hands those effects to the delivery channel. Failures and
   timeouts are logged and swallowed; the stored records stay.

``dispatch`` runs both phases. The workflow engine runs them separately
so delivery happens after the task lock is released.

Developer Golden Rules:
1. unread_count == number of unread records, always
2. unread_count never goes below zero
3. Missing template - log and skip, never raise
4. Delivery is fire-and-forget - log failures, don't raise
"""

from __future__ import annotations

import asyncio
from collections.abc import Iterable, Sequence
from uuid import UUID, uuid4

import structlog

from printflow.application.ports.notification_delivery import (
    NotificationDeliveryProtocol,
)
from printflow.application.ports.time_authority import TimeAuthorityProtocol
from printflow.domain.errors.notification import InvalidTemplateError
from printflow.domain.models.notification import (
    DeliveryEffect,
    Notification,
    NotificationKind,
    NotificationPriority,
)
from printflow.domain.services.notification_templates import (
    NotificationTemplateRegistry,
    TemplateContext,
)

log = structlog.get_logger()

DEFAULT_DELIVERY_TIMEOUT_SECONDS = 5.0


class NotificationDispatcher:
    """In-memory notification inbox with best-effort delivery.

    Attributes:
        _notifications: Stored notifications, most recent first.
        _unread_count: Number of unread notifications.
        _lock: Guards _notifications and _unread_count together.
    """

    def __init__(
        self,
        time_authority: TimeAuthorityProtocol,
        templates: NotificationTemplateRegistry | None = None,
        delivery: NotificationDeliveryProtocol | None = None,
        *,
        delivery_timeout: float = DEFAULT_DELIVERY_TIMEOUT_SECONDS,
        delivery_enabled: bool = True,
    ) -> None:
        """Initialize the dispatcher.

        Args:
            time_authority: Clock for notification timestamps.
            templates: Template registry; defaults to the built-in templates.
            delivery: Delivery channel. None disables delivery.
            delivery_timeout: Seconds to wait for each delivery attempt.
            delivery_enabled: When False, effects are computed but not delivered.
        """
        self._time = time_authority
        self._templates = templates or NotificationTemplateRegistry()
        self._delivery = delivery
        self._delivery_timeout = delivery_timeout
        self._delivery_enabled = delivery_enabled
        self._notifications: list[Notification] = []
        self._unread_count = 0
        self._lock = asyncio.Lock()

    @property
    def unread_count(self) -> int:
        """Number of unread notifications across all recipients."""
        return self._unread_count

    def list_notifications(self, recipient_id: str | None = None) -> list[Notification]:
        """Return stored notifications, most recent first.

        Args:
            recipient_id: Only return this recipient's notifications.
        """
        if recipient_id is None:
            return list(self._notifications)
        return [n for n in self._notifications if n.recipient_id == recipient_id]

    def unread_count_for(self, recipient_id: str) -> int:
        """Number of unread notifications addressed to ``recipient_id``."""
        return sum(
            1
            for n in self._notifications
            if n.recipient_id == recipient_id and not n.is_read
        )

    async def enqueue(
        self,
        kind: NotificationKind,
        recipient_ids: Sequence[str],
        task_title: str,
        task_id: UUID | None,
        *,
        new_status: str | None = None,
        reason: str | None = None,
    ) -> list[DeliveryEffect]:
        """Render and store one notification per recipient, without delivering.

        Recipients are not deduplicated here; a recipient listed twice
        gets two notifications.

        Args:
            kind: Notification kind; selects the template.
            recipient_ids: Users to notify, in order.
            task_title: Title of the related task.
            task_id: Related task, if any.
            new_status: Human-readable new status, for status updates.
            reason: Rejection reason, if any.

        Returns:
            Delivery effects for the stored notifications, in recipient
            order. Empty if the kind has no template.
        """
        context = TemplateContext(task_title=task_title, new_status=new_status, reason=reason)
        try:
            rendered = self._templates.render(kind, context)
        except InvalidTemplateError as e:
            log.error(
                "notification_template_missing",
                kind=str(kind),
                task_id=str(task_id) if task_id else None,
                error=str(e),
            )
            return []

        now = self._time.now()
        created = [
            Notification(
                id=uuid4(),
                recipient_id=recipient_id,
                title=rendered.title,
                message=rendered.message,
                kind=kind,
                priority=rendered.priority,
                created_at=now,
                task_id=task_id,
            )
            for recipient_id in recipient_ids
        ]
        await self._store(created)

        log.info(
            "notifications_enqueued",
            kind=str(kind),
            task_id=str(task_id) if task_id else None,
            recipients=len(created),
        )
        return [DeliveryEffect.for_notification(n) for n in created]

    async def deliver(self, effects: Iterable[DeliveryEffect]) -> int:
        """Hand stored notifications to the delivery channel.

        Never raises. Each failure or timeout is logged and the remaining
        effects are still attempted.

        Args:
            effects: Effects returned by ``enqueue`` or ``add_notification``.

        Returns:
            Number of effects delivered successfully.
        """
        if self._delivery is None or not self._delivery_enabled:
            return 0

        delivered = 0
        for effect in effects:
            notification = effect.notification
            try:
                await asyncio.wait_for(
                    self._delivery.deliver(effect),
                    timeout=self._delivery_timeout,
                )
                delivered += 1
            except asyncio.TimeoutError:
                log.warning(
                    "notification_delivery_timeout",
                    notification_id=str(notification.id),
                    recipient_id=notification.recipient_id,
                    timeout_seconds=self._delivery_timeout,
                )
            except Exception as e:
                log.warning(
                    "notification_delivery_failed",
                    notification_id=str(notification.id),
                    recipient_id=notification.recipient_id,
                    error=str(e),
                )
        return delivered

    async def dispatch(
        self,
        kind: NotificationKind,
        recipient_ids: Sequence[str],
        task_title: str,
        task_id: UUID | None,
        *,
        new_status: str | None = None,
        reason: str | None = None,
    ) -> list[DeliveryEffect]:
        """Enqueue and deliver in one step.

        See ``enqueue`` for arguments. Returns the delivery effects of the
        stored notifications whether or not delivery succeeded.
        """
        effects = await self.enqueue(
            kind,
            recipient_ids,
            task_title,
            task_id,
            new_status=new_status,
            reason=reason,
        )
        await self.deliver(effects)
        return effects

    async def add_notification(
        self,
        recipient_id: str,
        title: str,
        message: str,
        kind: NotificationKind,
        priority: NotificationPriority,
        task_id: UUID | None = None,
    ) -> Notification:
        """Store and deliver a pre-rendered notification.

        Returns:
            The stored (unread) notification.
        """
        notification = Notification(
            id=uuid4(),
            recipient_id=recipient_id,
            title=title,
            message=message,
            kind=kind,
            priority=priority,
            created_at=self._time.now(),
            task_id=task_id,
        )
        await self._store([notification])
        await self.deliver([DeliveryEffect.for_notification(notification)])
        return notification

    async def mark_read(self, notification_id: UUID) -> bool:
        """Mark one notification read.

        No-op for unknown ids and already-read notifications.

        Returns:
            True if the notification went from unread to read.
        """
        async with self._lock:
            for index, notification in enumerate(self._notifications):
                if notification.id != notification_id:
                    continue
                if notification.is_read:
                    return False
                self._notifications[index] = notification.mark_read()
                self._unread_count = max(0, self._unread_count - 1)
                return True
            return False

    async def mark_all_read(self) -> None:
        """Mark every stored notification read."""
        async with self._lock:
            self._notifications = [n.mark_read() for n in self._notifications]
            self._unread_count = 0

    async def clear(self) -> None:
        """Drop every stored notification."""
        async with self._lock:
            self._notifications.clear()
            self._unread_count = 0
        log.info("notifications_cleared")

    async def _store(self, notifications: list[Notification]) -> None:
        async with self._lock:
            for notification in notifications:
                self._notifications.insert(0, notification)
                self._unread_count += 1
