"""Task backend integration for taskfrontend.

Talks to the task management API over HTTP. Every failure is surfaced as a
TaskServiceError carrying a user-facing message; the underlying detail is
kept for logging only.
"""

import os
import errno
import logging
from typing import Optional
import requests
from dotenv import load_dotenv
from pydantic import ValidationError as PydanticValidationError

from taskfrontend.models.task import CreateTaskRequest, Task
from taskfrontend.models.constants import (
    DEFAULT_TASK_BACKEND_URL,
    DEFAULT_TASK_BACKEND_TIMEOUT_SEC,
    BACKEND_INVALID_DATA_MESSAGE,
    BACKEND_SERVER_ERROR_MESSAGE,
    BACKEND_REQUEST_FAILED_MESSAGE,
    BACKEND_UNAVAILABLE_MESSAGE,
    BACKEND_NETWORK_ERROR_MESSAGE,
    BACKEND_UNEXPECTED_ERROR_MESSAGE,
)

load_dotenv()

logger = logging.getLogger(__name__)

TASK_BACKEND_URL = os.getenv("TASK_BACKEND_URL", DEFAULT_TASK_BACKEND_URL)
TASK_BACKEND_TIMEOUT_SEC = float(os.getenv("TASK_BACKEND_TIMEOUT_SEC", str(DEFAULT_TASK_BACKEND_TIMEOUT_SEC)))


class TaskServiceError(Exception):
    """Raised when the task backend cannot fulfil a request."""

    def __init__(self, message: str, status_code: int, details: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.details = details


class TaskBackendClient:
    """Client for the task backend API."""

    def __init__(self, base_url: Optional[str] = None, timeout: Optional[float] = None):
        """Initialize task backend client.

        Args:
            base_url: Backend base URL. If None, reads TASK_BACKEND_URL env var.
            timeout: Request timeout in seconds. If None, reads TASK_BACKEND_TIMEOUT_SEC env var.
        """
        self.base_url = (base_url or TASK_BACKEND_URL).rstrip("/")
        self.timeout = timeout if timeout is not None else TASK_BACKEND_TIMEOUT_SEC

    def create_task(self, task_request: CreateTaskRequest) -> Task:
        """Create a task via the backend API.

        Args:
            task_request: Validated, canonical creation request

        Returns:
            The created task, including its generated id and creation date

        Raises:
            TaskServiceError: If the request fails or the response cannot be read
        """
        url = f"{self.base_url}/tasks"
        try:
            response = requests.post(url, json=task_request.to_payload(), timeout=self.timeout)
            response.raise_for_status()
        except requests.HTTPError as e:
            status_code = e.response.status_code if e.response is not None else 500
            raise TaskServiceError(
                _message_for_status(status_code),
                status_code,
                details=e.response.text if e.response is not None else str(e),
            ) from e
        except requests.Timeout as e:
            raise TaskServiceError(BACKEND_NETWORK_ERROR_MESSAGE, 500, details=str(e)) from e
        except requests.ConnectionError as e:
            if _is_connection_refused(e):
                raise TaskServiceError(BACKEND_UNAVAILABLE_MESSAGE, 503, details=str(e)) from e
            raise TaskServiceError(BACKEND_NETWORK_ERROR_MESSAGE, 500, details=str(e)) from e
        except requests.RequestException as e:
            raise TaskServiceError(BACKEND_NETWORK_ERROR_MESSAGE, 500, details=str(e)) from e

        try:
            task = Task(**response.json())
        except (ValueError, TypeError, PydanticValidationError) as e:
            raise TaskServiceError(BACKEND_UNEXPECTED_ERROR_MESSAGE, 500, details=str(e)) from e

        logger.debug(f"Backend created task {task.id}: {task.title[:50]}")
        return task


def _message_for_status(status_code: int) -> str:
    """Map a backend error status to the message shown to the user."""
    if status_code == 400:
        return BACKEND_INVALID_DATA_MESSAGE
    if status_code == 500:
        return BACKEND_SERVER_ERROR_MESSAGE
    return BACKEND_REQUEST_FAILED_MESSAGE


def _is_connection_refused(error: BaseException) -> bool:
    """Return True if a refused connection (ECONNREFUSED) caused this error.

    requests wraps the socket error several levels deep (urllib3's
    MaxRetryError.reason, then NewConnectionError's cause), so the whole
    chain is searched.
    """
    pending = [error]
    seen = set()
    while pending:
        current = pending.pop()
        if id(current) in seen:
            continue
        seen.add(id(current))
        if isinstance(current, ConnectionRefusedError):
            return True
        if isinstance(current, OSError) and current.errno == errno.ECONNREFUSED:
            return True
        linked = [current.__cause__, current.__context__, getattr(current, "reason", None)]
        linked.extend(current.args)
        pending.extend(item for item in linked if isinstance(item, BaseException))
    return False
