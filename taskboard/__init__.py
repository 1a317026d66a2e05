"""Team task board: stage partitioning and optimistic status transitions."""

from taskboard.store import TaskStore
from taskboard.core.models import Task, Employee, Actor
from taskboard.controller import TransitionController, TransitionOutcome

__all__ = [
    "TaskStore",
    "Task",
    "Employee",
    "Actor",
    "TransitionController",
    "TransitionOutcome",
]
