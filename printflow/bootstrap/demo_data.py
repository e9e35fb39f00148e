"""Demo print jobs for development environments."""

from __future__ import annotations

from datetime import datetime, timezone
from uuid import UUID

from printflow.application.ports.task_repository import TaskRepositoryProtocol
from printflow.domain.models.actor import Team
from printflow.domain.models.task import (
    JobSpecifications,
    Note,
    NoteKind,
    Task,
    TaskPriority,
    TaskStatus,
)


def _day(year: int, month: int, day: int) -> datetime:
    return datetime(year, month, day, tzinfo=timezone.utc)


def demo_tasks() -> list[Task]:
    """Three jobs at different workflow stages."""
    return [
        Task(
            id=UUID("00000000-0000-4000-8000-000000000001"),
            title="Business cards - ABC Trading",
            description="Professional business cards with company logo and contact details",
            client_name="ABC Trading Co.",
            client_contact="john@abccorp.com",
            priority=TaskPriority.HIGH,
            status=TaskStatus.IN_DESIGN,
            assigned_team=Team.DESIGN,
            created_by="sales-1",
            created_at=_day(2025, 1, 10),
            updated_at=_day(2025, 1, 12),
            due_date=_day(2025, 1, 15),
            estimated_value=500,
            specifications=JobSpecifications(
                quantity=1000,
                size="9x5 cm",
                material="Premium card stock",
                colors="4-color CMYK",
                finishes=("Matte lamination",),
                special_instructions="Include a QR code for digital contact",
            ),
            notes=(
                Note(
                    id=UUID("00000000-0000-4000-8000-0000000000a1"),
                    author_id="design-1",
                    author_name="Designer",
                    message="Started the first draft. It will be ready tomorrow.",
                    created_at=_day(2025, 1, 12),
                    kind=NoteKind.COMMENT,
                ),
            ),
        ),
        Task(
            id=UUID("00000000-0000-4000-8000-000000000002"),
            title="Brochure - XYZ Ltd",
            description="Tri-fold brochure presenting company services and testimonials",
            client_name="XYZ Ltd",
            client_contact="sarah@xyzltd.com",
            priority=TaskPriority.MEDIUM,
            status=TaskStatus.PENDING_APPROVAL,
            assigned_team=Team.DESIGN,
            created_by="sales-2",
            created_at=_day(2025, 1, 8),
            updated_at=_day(2025, 1, 11),
            due_date=_day(2025, 1, 16),
            estimated_value=750,
            specifications=JobSpecifications(
                quantity=500,
                size="A4 (folded)",
                material="Gloss paper",
                colors="Full color",
                finishes=("UV coating",),
            ),
        ),
        Task(
            id=UUID("00000000-0000-4000-8000-000000000003"),
            title="Banner - Events Co",
            description="Large format banner for a trade show booth",
            client_name="Events & Conferences Co",
            client_contact="mike@eventco.com",
            priority=TaskPriority.URGENT,
            status=TaskStatus.IN_PRODUCTION,
            assigned_team=Team.PRODUCTION,
            created_by="sales-1",
            created_at=_day(2025, 1, 9),
            updated_at=_day(2025, 1, 13),
            due_date=_day(2025, 1, 14),
            estimated_value=1200,
            specifications=JobSpecifications(
                quantity=2,
                size="3x2.5 m",
                material="Vinyl",
                colors="Full color",
                finishes=("Metal grommets", "Hemmed edges"),
            ),
        ),
    ]


async def seed_demo_tasks(repository: TaskRepositoryProtocol) -> int:
    """Save the demo jobs into ``repository``.

    Returns:
        Number of tasks saved.
    """
    tasks = demo_tasks()
    for task in tasks:
        await repository.save(task)
    return len(tasks)
