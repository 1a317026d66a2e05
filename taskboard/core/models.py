"""Core domain model: Task, Employee and Actor records and stage validation."""

from dataclasses import dataclass, replace
from typing import Dict, Any, Optional

from taskboard.constants import STAGE_ORDER


@dataclass(frozen=True)
class Employee:
    """Assignee reference carried on a task. Never mutated by the board."""

    name: str = ""
    surname: str = ""
    email: str = ""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Employee":
        """Create Employee from the remote payload, ignoring unknown keys."""
        return cls(
            name=data.get("name") or "",
            surname=data.get("surname") or "",
            email=data.get("email") or "",
        )

    def to_dict(self) -> Dict[str, Any]:
        return {"name": self.name, "surname": self.surname, "email": self.email}

    def full_name(self) -> str:
        return " ".join(part for part in (self.name, self.surname) if part)

    def initials(self) -> str:
        return "".join(part[0] for part in (self.name, self.surname) if part)


@dataclass(frozen=True)
class Task:
    """Client-side copy of a task as returned by the remote task service.

    ``status`` may be None; such a task is shown under CREATED but its stored
    value is left as None.
    """

    id: int
    title: Optional[str] = None
    description: Optional[str] = None
    status: Optional[str] = None
    priority: Optional[str] = None
    employee: Optional[Employee] = None

    VALID_STATUSES = frozenset(STAGE_ORDER)

    def validate(self) -> None:
        """Validate id and status values."""
        if isinstance(self.id, bool) or not isinstance(self.id, int):
            raise ValueError(f"Invalid task id '{self.id!r}'. Must be an integer")
        if self.status is not None and not is_valid_stage(self.status):
            raise ValueError(
                f"Invalid status '{self.status}'. Must be one of: {', '.join(STAGE_ORDER)}"
            )

    def with_status(self, status: str) -> "Task":
        """Return a copy of this task with only the status changed."""
        return replace(self, status=status)

    def display_title(self) -> str:
        return self.title or f"Task #{self.id}"

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Task":
        """Create Task from a remote payload dictionary.

        Args:
            data: Decoded JSON object for one task.

        Returns:
            Validated Task.

        Raises:
            ValueError: If id is missing/not an integer or status is unknown.
        """
        if "id" not in data:
            raise ValueError("Task payload is missing 'id'")

        employee_data = data.get("employee")
        task = cls(
            id=data["id"],
            title=data.get("title"),
            description=data.get("description"),
            status=data.get("status") or None,
            priority=data.get("priority"),
            employee=Employee.from_dict(employee_data) if employee_data else None,
        )
        task.validate()
        return task

    def to_dict(self) -> Dict[str, Any]:
        """Convert Task to its wire dictionary."""
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "status": self.status,
            "priority": self.priority,
            "employee": self.employee.to_dict() if self.employee else None,
        }


@dataclass(frozen=True)
class Actor:
    """Current authenticated user as seen by the board."""

    role: Optional[str] = None
    email: str = ""
    name: str = ""


def is_valid_stage(value: Any) -> bool:
    """Check whether value is one of the workflow stages."""
    return isinstance(value, str) and value in STAGE_ORDER
