"""Core package: domain model, permission gate and exceptions."""

from taskboard.core.models import Task, Employee, Actor, is_valid_stage
from taskboard.core.permissions import (
    Capability,
    capability,
    actor_capability,
    can_transition,
)
from taskboard.core.exceptions import (
    TaskboardError,
    RemoteServiceError,
    ConfigError,
)

__all__ = [
    "Task",
    "Employee",
    "Actor",
    "is_valid_stage",
    "Capability",
    "capability",
    "actor_capability",
    "can_transition",
    "TaskboardError",
    "RemoteServiceError",
    "ConfigError",
]
