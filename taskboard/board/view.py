"""Board view: immutable snapshot of what the presentation layer draws."""

from dataclasses import dataclass
from typing import Optional, Tuple, TYPE_CHECKING

from taskboard.board.partition import partition
from taskboard.constants import (
    STAGE_ORDER,
    STAGE_LABELS,
    HINT_FULL,
    HINT_VIEW_ONLY,
    EMPTY_COLUMN_MESSAGE,
)
from taskboard.core.models import Actor, Task
from taskboard.core.permissions import Capability, actor_capability

if TYPE_CHECKING:
    from taskboard.controller.transition import TransitionController


@dataclass(frozen=True)
class Column:
    stage: str
    label: str
    tasks: Tuple[Task, ...]

    @property
    def count(self) -> int:
        return len(self.tasks)

    @property
    def empty_message(self) -> Optional[str]:
        return EMPTY_COLUMN_MESSAGE if not self.tasks else None


@dataclass(frozen=True)
class BoardView:
    """Columns plus the flags the board header needs."""

    columns: Tuple[Column, ...]
    capability: Capability
    busy: bool = False
    loading: bool = False

    @property
    def can_drag(self) -> bool:
        return self.capability is Capability.FULL

    @property
    def hint(self) -> str:
        return HINT_FULL if self.can_drag else HINT_VIEW_ONLY

    @property
    def show_updating(self) -> bool:
        return self.busy and self.can_drag

    @classmethod
    def build(
        cls,
        tasks,
        actor: Optional[Actor],
        busy: bool = False,
        loading: bool = False,
    ) -> Optional["BoardView"]:
        """Build a view from a task sequence.

        Returns None when there is no actor, as nothing is shown then.
        """
        if actor is None:
            return None

        buckets = partition(tasks, STAGE_ORDER)
        columns = tuple(
            Column(stage=stage, label=STAGE_LABELS[stage], tasks=tuple(buckets[stage]))
            for stage in STAGE_ORDER
        )
        return cls(
            columns=columns,
            capability=actor_capability(actor),
            busy=busy,
            loading=loading,
        )

    @classmethod
    def from_controller(
        cls,
        controller: "TransitionController",
        actor: Optional[Actor],
    ) -> Optional["BoardView"]:
        return cls.build(
            controller.store.all(),
            actor,
            busy=controller.busy,
            loading=controller.loading,
        )
