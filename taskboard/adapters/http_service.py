"""
HTTP client for the remote task service.

Talks to the task REST API with httpx:
- GET  <base_url>/tasks            -> JSON array of tasks
- POST <base_url>/task-workflow    -> {"taskId": <id>, "status": "<STAGE>"}
"""

import logging
from typing import Any, Dict, List, Optional

import httpx

from taskboard.constants import (
    DEFAULT_BASE_URL,
    DEFAULT_TASKS_PATH,
    DEFAULT_STATUS_PATH,
    DEFAULT_TIMEOUT_SECONDS,
)
from taskboard.core.exceptions import RemoteServiceError
from taskboard.core.models import Task

logger = logging.getLogger(__name__)


class HttpTaskService:
    """RemoteTaskService over HTTP."""

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        tasks_path: str = DEFAULT_TASKS_PATH,
        status_path: str = DEFAULT_STATUS_PATH,
        token: Optional[str] = None,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        client: Optional[httpx.AsyncClient] = None,
    ):
        """
        Initialize the HTTP task service.

        Args:
            base_url: Service root URL (e.g., "http://127.0.0.1:8080").
            tasks_path: Path of the task listing endpoint.
            status_path: Path of the status update endpoint.
            token: Optional bearer token sent with every request.
            timeout: Request timeout in seconds.
            client: Optional pre-built client; when given, the caller owns it.
        """
        self.base_url = base_url.rstrip("/")
        self.tasks_path = tasks_path
        self.status_path = status_path
        self.timeout = timeout

        headers = {"Accept": "application/json"}
        if token:
            headers["Authorization"] = f"Bearer {token}"
        self.headers = headers

        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(timeout=timeout, headers=headers)

    def _url(self, path: str) -> str:
        return f"{self.base_url}/{path.lstrip('/')}"

    async def _request(
        self,
        operation: str,
        method: str,
        path: str,
        json_body: Optional[Dict[str, Any]] = None,
    ) -> httpx.Response:
        """Send a request and map every failure to RemoteServiceError."""
        url = self._url(path)
        logger.debug(f"{method} {url}")
        try:
            response = await self._client.request(
                method,
                url,
                json=json_body,
                headers=self.headers,
                timeout=self.timeout,
            )
        except httpx.TimeoutException as e:
            raise RemoteServiceError(operation, f"Request timed out: {e}") from e
        except httpx.HTTPError as e:
            raise RemoteServiceError(operation, f"Request failed: {e}") from e

        if response.is_error:
            raise RemoteServiceError(
                operation,
                f"HTTP {response.status_code} from {url}",
                status_code=response.status_code,
            )
        return response

    async def list_tasks(self) -> List[Task]:
        """Fetch the full task list.

        Returns:
            Tasks in the order the service returned them.

        Raises:
            RemoteServiceError: On transport error, non-2xx status or malformed body.
        """
        response = await self._request("list_tasks", "GET", self.tasks_path)

        try:
            payload = response.json()
        except ValueError as e:
            raise RemoteServiceError(
                "list_tasks", f"Response is not valid JSON: {e}"
            ) from e

        if not isinstance(payload, list):
            raise RemoteServiceError("list_tasks", "Expected a JSON array of tasks")

        try:
            tasks = [Task.from_dict(item) for item in payload]
        except (ValueError, TypeError, AttributeError) as e:
            raise RemoteServiceError("list_tasks", f"Malformed task: {e}") from e

        logger.debug(f"Fetched {len(tasks)} tasks")
        return tasks

    async def set_task_status(self, task_id: int, status: str) -> None:
        """Request persistence of a task's new status.

        Raises:
            RemoteServiceError: If the service did not accept the change.
        """
        await self._request(
            "set_task_status",
            "POST",
            self.status_path,
            json_body={"taskId": task_id, "status": status},
        )

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> "HttpTaskService":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()
