"""
Tests for the role to capability mapping.
"""

from taskboard.core.models import Actor
from taskboard.core.permissions import (
    Capability,
    capability,
    actor_capability,
    can_transition,
)


class TestCapability:
    """Test capability() for each role."""

    def test_head_manager_has_full(self):
        assert capability("HEAD_MANAGER") is Capability.FULL

    def test_hr_manager_is_read_only(self):
        assert capability("HR_MANAGER") is Capability.READ_ONLY

    def test_other_roles_have_none(self):
        """Test that every other value maps to NONE."""
        for role in ("EMPLOYEE", "ADMIN", "head_manager", "", None):
            assert capability(role) is Capability.NONE

    def test_non_string_role_has_none(self):
        """Test that odd role values do not raise."""
        assert capability(["HEAD_MANAGER"]) is Capability.NONE
        assert capability(42) is Capability.NONE


class TestActorCapability:
    """Test actor-level helpers."""

    def test_missing_actor(self):
        assert actor_capability(None) is Capability.NONE
        assert not can_transition(None)

    def test_actor_without_role(self):
        assert actor_capability(Actor()) is Capability.NONE

    def test_only_full_can_transition(self, head_manager, hr_manager, employee_actor):
        assert can_transition(head_manager)
        assert not can_transition(hr_manager)
        assert not can_transition(employee_actor)
