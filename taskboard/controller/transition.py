"""
Transition controller: moves a task between stages with optimistic update
and reload-based rollback.

Lifecycle of one request:
  Idle -> OptimisticallyApplied -> Confirmed | RolledBack -> Idle

The optimistic status is written to the store synchronously, before the
remote call is awaited, so anything reading the store sees the new column
immediately. If the remote service rejects the change for any reason the
whole store is reloaded from the service.
"""

import logging
from enum import Enum
from typing import Dict, List, Optional

from taskboard.adapters.protocol import RemoteTaskService
from taskboard.board.gesture import DropEvent, resolve_drop
from taskboard.board.partition import partition
from taskboard.constants import STAGE_ORDER
from taskboard.core.exceptions import RemoteServiceError
from taskboard.core.models import Actor, Task, is_valid_stage
from taskboard.core.permissions import can_transition
from taskboard.store.task_store import TaskStore

logger = logging.getLogger(__name__)


class TransitionOutcome(str, Enum):
    """How a transition request ended."""

    IGNORED_FORBIDDEN = "ignored_forbidden"
    IGNORED_NO_DESTINATION = "ignored_no_destination"
    IGNORED_SAME_STAGE = "ignored_same_stage"
    IGNORED_INVALID_STAGE = "ignored_invalid_stage"
    IGNORED_UNKNOWN_TASK = "ignored_unknown_task"
    CONFIRMED = "confirmed"
    ROLLED_BACK = "rolled_back"
    ROLLBACK_FAILED = "rollback_failed"

    @property
    def ignored(self) -> bool:
        return self.value.startswith("ignored_")


class TransitionController:
    """Owns the optimistic-update/rollback protocol for one board."""

    def __init__(self, store: TaskStore, service: RemoteTaskService):
        """
        Args:
            store: Task store this controller mutates.
            service: Authoritative remote task service.
        """
        self.store = store
        self.service = service
        self._in_flight = 0
        self._loads_in_flight = 0
        self._stale = False
        self.last_error: Optional[Exception] = None

    @property
    def busy(self) -> bool:
        """True while any status confirmation round trip is in flight."""
        return self._in_flight > 0

    @property
    def loading(self) -> bool:
        """True while any task list load is in flight."""
        return self._loads_in_flight > 0

    @property
    def stale(self) -> bool:
        """True when a rollback reload failed and the store may hold unconfirmed state."""
        return self._stale

    def columns(self) -> Dict[str, List[Task]]:
        return partition(self.store.all(), STAGE_ORDER)

    async def load(self) -> List[Task]:
        """Replace the store contents with the service's task list.

        Returns:
            The loaded tasks.

        Raises:
            RemoteServiceError: If listing fails or returns duplicate ids.
                The store is left unchanged.
        """
        self._loads_in_flight += 1
        try:
            tasks = await self.service.list_tasks()
            try:
                self.store.replace_all(tasks)
            except ValueError as e:
                raise RemoteServiceError("list_tasks", str(e)) from e
            self._stale = False
            logger.info(f"Loaded {len(tasks)} tasks")
            return tasks
        finally:
            self._loads_in_flight -= 1

    async def request_transition(
        self,
        task_id: int,
        source_stage: str,
        dest_stage: Optional[str],
        actor: Optional[Actor],
    ) -> TransitionOutcome:
        """Move one task to a new stage.

        Requests from actors without full capability, drops with no
        destination and same-stage drops are ignored without touching the
        store or the service.

        Args:
            task_id: Task to move.
            source_stage: Stage the gesture started in.
            dest_stage: Stage the task was dropped on, None if none.
            actor: Current actor (None if unauthenticated).

        Returns:
            TransitionOutcome describing what happened.
        """
        if not can_transition(actor):
            logger.debug(f"Ignoring transition of {task_id}: actor lacks capability")
            return TransitionOutcome.IGNORED_FORBIDDEN

        if dest_stage is None:
            logger.debug(f"Ignoring transition of {task_id}: no destination")
            return TransitionOutcome.IGNORED_NO_DESTINATION

        if source_stage == dest_stage:
            logger.debug(f"Ignoring transition of {task_id}: already in {dest_stage}")
            return TransitionOutcome.IGNORED_SAME_STAGE

        if not is_valid_stage(dest_stage):
            logger.warning(f"Ignoring transition of {task_id}: unknown stage {dest_stage!r}")
            return TransitionOutcome.IGNORED_INVALID_STAGE

        if task_id not in self.store:
            logger.warning(f"Ignoring transition of unknown task {task_id}")
            return TransitionOutcome.IGNORED_UNKNOWN_TASK

        self.store.update_status(task_id, dest_stage)
        logger.info(f"Task {task_id}: {source_stage} -> {dest_stage} (optimistic)")

        self._in_flight += 1
        try:
            try:
                await self.service.set_task_status(task_id, dest_stage)
            except Exception as e:
                self.last_error = e
                logger.warning(
                    f"Status update for task {task_id} failed, reloading tasks: {e}"
                )
                return await self._rollback(task_id)

            logger.debug(f"Task {task_id} confirmed in {dest_stage}")
            return TransitionOutcome.CONFIRMED
        finally:
            self._in_flight -= 1

    async def _rollback(self, task_id: int) -> TransitionOutcome:
        """Resynchronize the whole store from the service."""
        try:
            await self.load()
        except Exception as e:
            self._stale = True
            self.last_error = e
            logger.error(f"Reload after failed update of task {task_id} failed: {e}")
            return TransitionOutcome.ROLLBACK_FAILED

        restored = self.store.get(task_id)
        logger.info(
            f"Task {task_id} rolled back to "
            f"{restored.status if restored else 'absent'}"
        )
        return TransitionOutcome.ROLLED_BACK

    async def handle_drop(
        self,
        event: DropEvent,
        actor: Optional[Actor],
    ) -> TransitionOutcome:
        """Resolve a drop event and request the matching transition."""
        if not can_transition(actor):
            return TransitionOutcome.IGNORED_FORBIDDEN

        request = resolve_drop(event)
        if request is None:
            logger.debug(f"Ignoring drop of non-task draggable {event.draggable_id!r}")
            return TransitionOutcome.IGNORED_UNKNOWN_TASK

        return await self.request_transition(
            request.task_id,
            request.source_stage,
            request.dest_stage,
            actor,
        )
