"""
In-memory task store holding the board's client-side copy of the task list.
"""

import threading
from typing import Dict, Iterable, List, Optional

from taskboard.core.models import Task, is_valid_stage


class TaskStore:
    """Ordered, id-unique collection of tasks.

    Only two mutations exist: replace_all() swaps the whole collection after a
    load, update_status() rewrites the status of one task. Mutations are
    serialized with an RLock.
    """

    def __init__(self, tasks: Optional[Iterable[Task]] = None):
        """
        Initialize task store.

        Args:
            tasks: Optional initial tasks (same rules as replace_all).
        """
        self._lock = threading.RLock()
        self._tasks: List[Task] = []
        self._index: Dict[int, int] = {}
        if tasks is not None:
            self.replace_all(tasks)

    @staticmethod
    def _build_index(tasks: List[Task]) -> Dict[int, int]:
        """Map task id to list position, rejecting duplicates."""
        index: Dict[int, int] = {}
        for position, task in enumerate(tasks):
            if task.id in index:
                raise ValueError(f"Duplicate task id '{task.id}'")
            index[task.id] = position
        return index

    def replace_all(self, tasks: Iterable[Task]) -> None:
        """
        Replace the store contents wholesale.

        Args:
            tasks: Tasks in display order

        Raises:
            ValueError: If two tasks share an id (store left unchanged)
        """
        new_tasks = list(tasks)
        for task in new_tasks:
            task.validate()
        new_index = self._build_index(new_tasks)

        with self._lock:
            self._tasks = new_tasks
            self._index = new_index

    def update_status(self, task_id: int, status: str) -> Task:
        """
        Rewrite the status of a single task, leaving every other task untouched.

        Args:
            task_id: ID of task to update
            status: New stage value

        Returns:
            Updated Task

        Raises:
            KeyError: If no task has this id
            ValueError: If status is not a valid stage
        """
        if not is_valid_stage(status):
            raise ValueError(f"Invalid status '{status}'")

        with self._lock:
            position = self._index.get(task_id)
            if position is None:
                raise KeyError(f"Task with id '{task_id}' not found")

            updated = self._tasks[position].with_status(status)
            self._tasks[position] = updated
            return updated

    def get(self, task_id: int) -> Optional[Task]:
        with self._lock:
            position = self._index.get(task_id)
            return None if position is None else self._tasks[position]

    def all(self) -> List[Task]:
        """Return a snapshot list of all tasks in store order."""
        with self._lock:
            return list(self._tasks)

    def __contains__(self, task_id: object) -> bool:
        with self._lock:
            return task_id in self._index

    def __len__(self) -> int:
        with self._lock:
            return len(self._tasks)
