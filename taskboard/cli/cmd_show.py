"""
taskboard show command implementation.

Loads the task list and prints it grouped by stage, or as JSON.
"""

import sys
import json
import asyncio
import argparse

from taskboard.board.view import BoardView
from taskboard.constants import UPDATING_MESSAGE
from taskboard.core.exceptions import TaskboardError
from taskboard.core.models import Actor, Task


def format_task_line(task: Task) -> str:
    """One-line summary of a task for the text board."""
    line = f"  #{task.id} {task.display_title()}"
    if task.priority:
        line += f" [{task.priority}]"
    if task.employee:
        line += f" ({task.employee.initials()}) {task.employee.full_name()}"
        if task.employee.email:
            line += f" <{task.employee.email}>"
    return line


def render_board(view: BoardView) -> str:
    lines = [view.hint]
    if view.show_updating:
        lines.append(UPDATING_MESSAGE)
    for column in view.columns:
        lines.append("")
        lines.append(f"{column.label.upper()} ({column.count}):")
        if column.empty_message:
            lines.append(f"  {column.empty_message}")
        for task in column.tasks:
            lines.append(format_task_line(task))
    return "\n".join(lines)


def render_json(view: BoardView) -> str:
    return json.dumps(
        {column.stage: [t.to_dict() for t in column.tasks] for column in view.columns},
        indent=2,
        default=str,
    )


def cmd_show(cli_instance, args: argparse.Namespace) -> int:
    """Display the task board.

    Args:
        cli_instance: BoardCLI instance
        args: Parsed command-line arguments with: json (optional)

    Returns:
        Exit code (0 on success, 1 on error)
    """
    # Viewing does not need a role; anyone reaching the CLI may look
    actor = cli_instance.actor or Actor()

    async def _load(controller):
        await controller.load()
        return BoardView.from_controller(controller, actor)

    try:
        view = asyncio.run(cli_instance.with_controller(_load))
    except TaskboardError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except Exception as e:
        print(f"Unexpected error: {e}", file=sys.stderr)
        return 1

    if getattr(args, "json", False):
        print(render_json(view))
    else:
        print(render_board(view))
    return 0
