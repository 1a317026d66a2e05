"""Permission gate: maps an actor role to its transition capability."""

from enum import Enum
from typing import Optional

from taskboard.constants import ROLE_HEAD_MANAGER, ROLE_HR_MANAGER
from taskboard.core.models import Actor


class Capability(str, Enum):
    """What an actor may do with tasks on the board."""

    FULL = "full"
    READ_ONLY = "read_only"
    NONE = "none"


_ROLE_CAPABILITIES = {
    ROLE_HEAD_MANAGER: Capability.FULL,
    ROLE_HR_MANAGER: Capability.READ_ONLY,
}


def capability(role: Optional[str]) -> Capability:
    """Return the capability granted to a role.

    HEAD_MANAGER may move tasks, HR_MANAGER only views them, any other
    role (or no role) gets nothing.
    """
    if not isinstance(role, str):
        return Capability.NONE
    return _ROLE_CAPABILITIES.get(role, Capability.NONE)


def actor_capability(actor: Optional[Actor]) -> Capability:
    """Return the capability of an actor; a missing actor has none."""
    if actor is None:
        return Capability.NONE
    return capability(actor.role)


def can_transition(actor: Optional[Actor]) -> bool:
    return actor_capability(actor) is Capability.FULL
