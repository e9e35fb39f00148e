"""Task repository stub.

In-memory implementation of TaskRepositoryProtocol for development and
tests. Production deployments plug in their own task store.

Developer Golden Rules:
1. In-memory storage - no persistence across restarts
2. Safe for concurrent coroutines (asyncio lock)
3. Insertion order preserved; re-saving a task keeps its position
"""

from __future__ import annotations

import asyncio
import logging
from uuid import UUID

from printflow.application.ports.task_repository import TaskRepositoryProtocol
from printflow.domain.models.task import Task

logger = logging.getLogger(__name__)


class TaskRepositoryStub(TaskRepositoryProtocol):
    """In-memory stub implementation of the task repository.

    Attributes:
        _tasks: Map of task id to the latest saved snapshot.
        _lock: Async lock for thread-safe operations.
    """

    def __init__(self, tasks: list[Task] | None = None) -> None:
        """Initialize the repository stub.

        Args:
            tasks: Optional tasks to preload, in order.
        """
        self._tasks: dict[UUID, Task] = {task.id: task for task in tasks or []}
        self._lock = asyncio.Lock()

    async def get(self, task_id: UUID) -> Task | None:
        async with self._lock:
            return self._tasks.get(task_id)

    async def save(self, task: Task) -> None:
        async with self._lock:
            self._tasks[task.id] = task
            logger.debug("Saved task %s status=%s", task.id, task.status.value)

    async def delete(self, task_id: UUID) -> bool:
        async with self._lock:
            if task_id in self._tasks:
                del self._tasks[task_id]
                logger.debug("Deleted task %s", task_id)
                return True
            return False

    async def list_all(self) -> list[Task]:
        async with self._lock:
            return list(self._tasks.values())

    async def clear(self) -> None:
        """Clear all tasks (for testing)."""
        async with self._lock:
            self._tasks.clear()

    def count(self) -> int:
        """Get the number of stored tasks (for testing).

        Returns:
            Number of tasks stored.
        """
        return len(self._tasks)
