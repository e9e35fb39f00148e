"""Fixtures for API route tests."""

from collections.abc import Iterator

import pytest
from fastapi.testclient import TestClient

from printflow.api.dependencies.workflow import set_workflow_services
from printflow.api.main import create_app
from printflow.bootstrap.workflow import WorkflowServices, build_workflow_services
from printflow.config.workflow_config import WorkflowConfig
from printflow.infrastructure.stubs.notification_delivery_stub import (
    NotificationDeliveryStub,
)
from printflow.infrastructure.stubs.task_repository_stub import TaskRepositoryStub
from tests.helpers import FakeTimeAuthority


@pytest.fixture
def services(
    repository: TaskRepositoryStub,
    delivery: NotificationDeliveryStub,
    fake_time_authority: FakeTimeAuthority,
) -> WorkflowServices:
    return build_workflow_services(
        WorkflowConfig(delivery_timeout_seconds=0.05),
        repository=repository,
        delivery=delivery,
        time_authority=fake_time_authority,
    )


@pytest.fixture
def client(services: WorkflowServices) -> Iterator[TestClient]:
    with TestClient(create_app(services), raise_server_exceptions=False) as test_client:
        yield test_client
    set_workflow_services(None)
