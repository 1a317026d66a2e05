"""
Store layer for the board's client-side task collection.

Canonical exports:
- TaskStore: Ordered in-memory task collection with unique ids
"""

from taskboard.store.task_store import TaskStore

__all__ = [
    "TaskStore",
]
