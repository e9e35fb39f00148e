"""Notification template errors."""

from __future__ import annotations

from printflow.domain.exceptions import PrintFlowError


class InvalidTemplateError(PrintFlowError):
    """Raised when no template is registered for a notification kind.

    Indicates a configuration bug. The dispatcher logs it and skips the
    dispatch; it never fails the operation that triggered the dispatch.

    Attributes:
        kind: The unregistered kind.
    """

    def __init__(self, kind: str) -> None:
        self.kind = kind
        super().__init__(f"No notification template registered for kind: {kind}")
