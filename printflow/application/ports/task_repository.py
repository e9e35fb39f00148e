"""Task repository port.

The task store is an external collaborator. The workflow engine holds no
copy of a task between calls: it reads a snapshot with ``get``, builds
the next version, and writes it back with ``save``.

Developer Golden Rules:
1. Protocol-based DI - all implementations through ports
2. ``get`` returns None for a missing task; the engine raises NotFound
3. ``save`` is an upsert keyed on task.id
"""

from __future__ import annotations

from typing import Protocol
from uuid import UUID

from printflow.domain.models.task import Task


class TaskRepositoryProtocol(Protocol):
    """Protocol for task storage operations.

    Implementations may use a database, a document store or in-memory
    storage.

    Methods:
        get: Fetch the current snapshot of a task
        save: Insert or replace a task
        delete: Remove a task
        list_all: All stored tasks in insertion order
    """

    async def get(self, task_id: UUID) -> Task | None:
        """Fetch a task.

        Args:
            task_id: Identifier of the task.

        Returns:
            The task if stored, None otherwise.
        """
        ...

    async def save(self, task: Task) -> None:
        """Insert or replace a task.

        Args:
            task: The task to store.
        """
        ...

    async def delete(self, task_id: UUID) -> bool:
        """Remove a task.

        Args:
            task_id: Identifier of the task.

        Returns:
            True if a task was removed, False if none was stored.
        """
        ...

    async def list_all(self) -> list[Task]:
        """Return every stored task, oldest insertion first."""
        ...
