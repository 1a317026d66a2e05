"""
Tests for Task, Employee and Actor records.
"""

import pytest

from taskboard.core.models import Task, Employee, is_valid_stage


class TestTaskFromDict:
    """Test building tasks from remote payloads."""

    def test_full_payload(self):
        """Test that every known field is read."""
        task = Task.from_dict(
            {
                "id": 7,
                "title": "Write report",
                "description": "Quarterly numbers",
                "status": "RESOLVED",
                "priority": "HIGH",
                "employee": {
                    "name": "Farid",
                    "surname": "Aliyev",
                    "email": "farid@example.com",
                },
            }
        )
        assert task.id == 7
        assert task.status == "RESOLVED"
        assert task.priority == "HIGH"
        assert task.employee == Employee("Farid", "Aliyev", "farid@example.com")

    def test_missing_optional_fields(self):
        """Test that status and employee may be absent."""
        task = Task.from_dict({"id": 3})
        assert task.status is None
        assert task.employee is None
        assert task.title is None

    def test_empty_status_is_absent(self):
        """Test that an empty status string is stored as None."""
        assert Task.from_dict({"id": 3, "status": ""}).status is None

    def test_unknown_keys_ignored(self):
        """Test that extra payload keys do not break parsing."""
        task = Task.from_dict({"id": 1, "status": "DONE", "createdAt": "2024-01-01"})
        assert task.status == "DONE"

    def test_missing_id(self):
        """Test that a payload without id is rejected."""
        with pytest.raises(ValueError, match="missing 'id'"):
            Task.from_dict({"title": "no id"})

    def test_non_integer_id(self):
        """Test that a string id is rejected."""
        with pytest.raises(ValueError, match="Invalid task id"):
            Task.from_dict({"id": "7"})

    def test_unknown_status(self):
        """Test that a status outside the workflow is rejected."""
        with pytest.raises(ValueError, match="Invalid status"):
            Task.from_dict({"id": 1, "status": "ARCHIVED"})

    def test_to_dict(self):
        """Test converting Task back to its wire form."""
        task = Task(id=5, title="T", status="DONE", employee=Employee("A", "B", "a@b.c"))
        data = task.to_dict()
        assert data["id"] == 5
        assert data["status"] == "DONE"
        assert data["employee"] == {"name": "A", "surname": "B", "email": "a@b.c"}


class TestTaskHelpers:
    """Test display helpers and copy semantics."""

    def test_display_title_falls_back_to_id(self):
        """Test that an untitled task shows its id."""
        assert Task(id=12).display_title() == "Task #12"
        assert Task(id=12, title="").display_title() == "Task #12"
        assert Task(id=12, title="Fix login").display_title() == "Fix login"

    def test_with_status_changes_only_status(self):
        """Test that with_status leaves the original untouched."""
        original = Task(id=1, title="T", status="CREATED", priority="LOW")
        moved = original.with_status("DONE")
        assert moved.status == "DONE"
        assert moved.title == "T"
        assert moved.priority == "LOW"
        assert original.status == "CREATED"


class TestEmployee:
    """Test employee display helpers."""

    def test_full_name_and_initials(self):
        employee = Employee(name="Farid", surname="Aliyev")
        assert employee.full_name() == "Farid Aliyev"
        assert employee.initials() == "FA"

    def test_missing_surname(self):
        employee = Employee(name="Farid")
        assert employee.full_name() == "Farid"
        assert employee.initials() == "F"


class TestStageValidation:
    def test_valid_stages(self):
        for stage in ("CREATED", "IN_PROGRESS", "RESOLVED", "DONE"):
            assert is_valid_stage(stage)

    def test_invalid_stages(self):
        for value in (None, "", "created", "ARCHIVED", 1):
            assert not is_valid_stage(value)
