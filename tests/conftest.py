"""
Pytest configuration and shared fixtures for PrintFlow tests.

Testing Standards:
- Async tests use pytest.mark.asyncio (auto mode enabled in pyproject.toml)
- Use AsyncMock for async collaborator mocking
- Unit tests go in tests/unit/
- Integration tests go in tests/integration/
"""

from __future__ import annotations

from datetime import datetime, timezone

import pytest

from printflow.application.services.notification_dispatcher import (
    NotificationDispatcher,
)
from printflow.application.services.workflow_engine import WorkflowEngine
from printflow.domain.models.actor import Actor, Role, Team
from printflow.domain.models.task import JobSpecifications, TaskDraft, TaskPriority
from printflow.infrastructure.stubs.notification_delivery_stub import (
    NotificationDeliveryStub,
)
from printflow.infrastructure.stubs.task_repository_stub import TaskRepositoryStub
from printflow.infrastructure.stubs.team_directory_stub import TeamDirectoryStub
from tests.helpers import FakeTimeAuthority

FROZEN_AT = datetime(2026, 1, 15, 9, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def fake_time_authority() -> FakeTimeAuthority:
    """Clock frozen at 2026-01-15T09:00:00Z."""
    return FakeTimeAuthority(frozen_at=FROZEN_AT)


@pytest.fixture
def repository() -> TaskRepositoryStub:
    return TaskRepositoryStub()


@pytest.fixture
def team_directory() -> TeamDirectoryStub:
    """Demo rosters: design-1/2, production-1/2, sales-1/2, sales-manager-1, manager-1."""
    return TeamDirectoryStub()


@pytest.fixture
def delivery() -> NotificationDeliveryStub:
    return NotificationDeliveryStub()


@pytest.fixture
def dispatcher(
    fake_time_authority: FakeTimeAuthority,
    delivery: NotificationDeliveryStub,
) -> NotificationDispatcher:
    return NotificationDispatcher(
        fake_time_authority,
        delivery=delivery,
        delivery_timeout=0.05,
    )


@pytest.fixture
def engine(
    repository: TaskRepositoryStub,
    team_directory: TeamDirectoryStub,
    dispatcher: NotificationDispatcher,
    fake_time_authority: FakeTimeAuthority,
) -> WorkflowEngine:
    return WorkflowEngine(
        repository=repository,
        team_directory=team_directory,
        dispatcher=dispatcher,
        time_authority=fake_time_authority,
    )


@pytest.fixture
def sales() -> Actor:
    return Actor(id="sales-1", name="Sales Rep", role=Role.SALES_TEAM)


@pytest.fixture
def designer() -> Actor:
    return Actor(id="design-1", name="Designer", role=Role.DESIGN_TEAM)


@pytest.fixture
def manager() -> Actor:
    return Actor(id="manager-1", name="Manager", role=Role.MANAGER)


@pytest.fixture
def sales_manager() -> Actor:
    return Actor(id="sales-manager-1", name="Sales Manager", role=Role.SALES_MANAGER)


@pytest.fixture
def production() -> Actor:
    return Actor(id="production-1", name="Printer", role=Role.PRODUCTION_TEAM)


@pytest.fixture
def draft() -> TaskDraft:
    """A business card job assigned to the design team."""
    return TaskDraft(
        title="Business cards - ACME",
        description="Two-sided business cards",
        client_name="ACME Corp",
        client_contact="buyer@acme.example",
        priority=TaskPriority.HIGH,
        assigned_team=Team.DESIGN,
        due_date=datetime(2026, 1, 20, tzinfo=timezone.utc),
        estimated_value=500.0,
        specifications=JobSpecifications(
            quantity=1000,
            size="9x5 cm",
            material="Premium card stock",
            colors="4-color CMYK",
            finishes=("Matte lamination",),
        ),
    )
