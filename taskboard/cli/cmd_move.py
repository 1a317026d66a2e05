"""
taskboard move command implementation.

Loads the board, then moves one task to a new stage as the configured actor.
"""

import sys
import asyncio
import argparse

from taskboard.board.partition import effective_stage
from taskboard.controller.transition import TransitionOutcome
from taskboard.core.exceptions import TaskboardError

_IGNORED_MESSAGES = {
    TransitionOutcome.IGNORED_FORBIDDEN: "current role may not move tasks",
    TransitionOutcome.IGNORED_NO_DESTINATION: "no destination stage",
    TransitionOutcome.IGNORED_SAME_STAGE: "task is already in that stage",
    TransitionOutcome.IGNORED_INVALID_STAGE: "unknown stage",
    TransitionOutcome.IGNORED_UNKNOWN_TASK: "task not found",
}


def cmd_move(cli_instance, args: argparse.Namespace) -> int:
    """Move a task to another stage.

    Args:
        cli_instance: BoardCLI instance
        args: Parsed command-line arguments with: id, stage

    Returns:
        Exit code (0 on success or no-op, 1 on error or rollback)
    """
    task_id = args.id
    dest_stage = args.stage.strip().upper()
    actor = cli_instance.actor

    async def _move(controller):
        await controller.load()
        task = controller.store.get(task_id)
        source_stage = effective_stage(task) if task else None
        outcome = await controller.request_transition(
            task_id, source_stage, dest_stage, actor
        )
        return outcome, controller

    try:
        outcome, controller = asyncio.run(cli_instance.with_controller(_move))
    except TaskboardError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except Exception as e:
        print(f"Unexpected error: {e}", file=sys.stderr)
        return 1

    if outcome is TransitionOutcome.CONFIRMED:
        print(f"Task moved: {task_id} -> {dest_stage}")
        return 0

    if outcome is TransitionOutcome.IGNORED_SAME_STAGE:
        print(f"Task {task_id} is already in {dest_stage}")
        return 0

    if outcome.ignored:
        print(
            f"Error: Task {task_id} not moved: {_IGNORED_MESSAGES[outcome]}",
            file=sys.stderr,
        )
        return 1

    if outcome is TransitionOutcome.ROLLED_BACK:
        task = controller.store.get(task_id)
        current = task.status if task else "absent"
        print(
            f"Error: Update rejected, task {task_id} rolled back to {current}: "
            f"{controller.last_error}",
            file=sys.stderr,
        )
        return 1

    print(
        f"Error: Update rejected and reload failed: {controller.last_error}",
        file=sys.stderr,
    )
    return 1
