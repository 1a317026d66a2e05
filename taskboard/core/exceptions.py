"""Core exceptions: base board error, remote service and configuration errors."""

from typing import Optional


class TaskboardError(Exception):
    """Base exception for task board errors."""

    pass


class RemoteServiceError(TaskboardError):
    """Raised when a call to the remote task service fails."""

    def __init__(
        self,
        operation: str,
        message: str,
        status_code: Optional[int] = None,
    ):
        self.operation = operation
        self.message = message
        self.status_code = status_code
        super().__init__(f"[{operation}] {message}")


class ConfigError(TaskboardError):
    """Raised when board configuration is invalid."""

    pass
