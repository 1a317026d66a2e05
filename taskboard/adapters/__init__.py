"""Remote task service adapters.

- taskboard.adapters.protocol: RemoteTaskService contract
- taskboard.adapters.http_service: HTTP implementation (httpx)
"""

from taskboard.adapters.protocol import RemoteTaskService
from taskboard.adapters.http_service import HttpTaskService

__all__ = [
    "RemoteTaskService",
    "HttpTaskService",
]
