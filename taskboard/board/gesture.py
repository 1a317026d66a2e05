"""
Drop-event boundary.

Translates the fields a drag-and-drop library reports on drop into the
(task id, source stage, destination stage) triple the controller consumes.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class DropEvent:
    """Raw drop result: draggable id plus source and destination container ids."""

    draggable_id: str
    source_id: str
    destination_id: Optional[str] = None


@dataclass(frozen=True)
class TransitionRequest:
    task_id: int
    source_stage: str
    dest_stage: Optional[str]


def resolve_drop(event: DropEvent) -> Optional[TransitionRequest]:
    """Resolve a drop event into a transition request.

    Args:
        event: Drop event from the interaction layer.

    Returns:
        TransitionRequest, with dest_stage None when the drop landed outside
        any column, or None if the draggable id is not a task id.
    """
    try:
        task_id = int(str(event.draggable_id).strip())
    except ValueError:
        return None

    return TransitionRequest(
        task_id=task_id,
        source_stage=event.source_id,
        dest_stage=event.destination_id or None,
    )
