"""
Shared fixtures for the taskboard test suite.

Provides task factories, actors for each role, a populated store and an
AsyncMock standing in for the remote task service.
"""

from unittest.mock import AsyncMock

import pytest

from taskboard.constants import ROLE_HEAD_MANAGER, ROLE_HR_MANAGER, ROLE_EMPLOYEE
from taskboard.controller.transition import TransitionController
from taskboard.core.models import Actor, Employee, Task
from taskboard.store.task_store import TaskStore


def build_task(task_id, status="CREATED", **kwargs):
    """Create a Task with sensible defaults."""
    return Task(
        id=task_id,
        title=kwargs.get("title", f"Task {task_id}"),
        description=kwargs.get("description", ""),
        status=status,
        priority=kwargs.get("priority", "MEDIUM"),
        employee=kwargs.get("employee"),
    )


@pytest.fixture
def make_task():
    """Factory fixture for tasks: make_task(id, status, **fields)."""
    return build_task


@pytest.fixture
def head_manager():
    return Actor(role=ROLE_HEAD_MANAGER, email="head@example.com")


@pytest.fixture
def hr_manager():
    return Actor(role=ROLE_HR_MANAGER, email="hr@example.com")


@pytest.fixture
def employee_actor():
    return Actor(role=ROLE_EMPLOYEE, email="farid@example.com")


@pytest.fixture
def sample_employee():
    return Employee(name="Farid", surname="Aliyev", email="farid@example.com")


@pytest.fixture
def sample_tasks(sample_employee):
    return [
        build_task(1, "CREATED", employee=sample_employee),
        build_task(2, "IN_PROGRESS"),
        build_task(3, None),
        build_task(4, "DONE"),
    ]


@pytest.fixture
def store(sample_tasks):
    return TaskStore(sample_tasks)


@pytest.fixture
def service(sample_tasks):
    """Remote service double: confirms every update, lists sample tasks."""
    mock = AsyncMock()
    mock.list_tasks = AsyncMock(return_value=list(sample_tasks))
    mock.set_task_status = AsyncMock(return_value=None)
    return mock


@pytest.fixture
def controller(store, service):
    return TransitionController(store, service)
