"""Remote task service contract.

The board only needs two operations from the authoritative service: a full
task listing and a single-task status update. Any implementation (HTTP, test
double) must raise on failure rather than return an error value.
"""

from typing import List, Protocol, runtime_checkable

from taskboard.core.models import Task


@runtime_checkable
class RemoteTaskService(Protocol):
    """Authoritative persistence for tasks."""

    async def list_tasks(self) -> List[Task]:
        """Return the full authoritative task list in display order."""
        ...

    async def set_task_status(self, task_id: int, status: str) -> None:
        """Persist a new status for one task; raise on any failure."""
        ...
