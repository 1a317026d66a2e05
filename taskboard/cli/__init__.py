"""
taskboard CLI command implementations.

Commands live in separate modules; BoardCLI wires configuration, the remote
service and the transition controller together and delegates to them.
"""

import argparse
from typing import Awaitable, Callable, Optional, TypeVar

from taskboard.cli import cmd_show as _cmd_show_module
from taskboard.cli import cmd_move as _cmd_move_module
from taskboard.adapters.http_service import HttpTaskService
from taskboard.adapters.protocol import RemoteTaskService
from taskboard.controller.transition import TransitionController
from taskboard.core.models import Actor
from taskboard.store.task_store import TaskStore
from taskboard.support.config import BoardConfig

T = TypeVar("T")


class BoardCLI:
    """Task board CLI interface.

    A service may be injected (tests); otherwise an HttpTaskService is built
    from the config for each command and closed afterwards.
    """

    def __init__(
        self,
        config: Optional[BoardConfig] = None,
        service: Optional[RemoteTaskService] = None,
    ):
        self.config = config or BoardConfig()
        self.service = service
        self.store = TaskStore()

    @property
    def actor(self) -> Optional[Actor]:
        return self.config.actor()

    def _build_service(self) -> HttpTaskService:
        return HttpTaskService(
            base_url=self.config.base_url,
            tasks_path=self.config.tasks_path,
            status_path=self.config.status_path,
            token=self.config.token,
            timeout=self.config.timeout,
        )

    async def with_controller(
        self, fn: Callable[[TransitionController], Awaitable[T]]
    ) -> T:
        """Run fn with a controller bound to this CLI's store and a live service."""
        if self.service is not None:
            return await fn(TransitionController(self.store, self.service))

        async with self._build_service() as service:
            return await fn(TransitionController(self.store, service))

    def cmd_show(self, args: argparse.Namespace) -> int:
        """Print the board (delegates to cmd_show module)."""
        return _cmd_show_module.cmd_show(self, args)

    def cmd_move(self, args: argparse.Namespace) -> int:
        """Move a task to another stage (delegates to cmd_move module)."""
        return _cmd_move_module.cmd_move(self, args)


__all__ = [
    "BoardCLI",
]
