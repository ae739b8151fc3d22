"""Data models for taskfrontend."""

from taskfrontend.models.task import (
    Task,
    TaskStatus,
    TaskFormData,
    ValidationError,
    CreateTaskRequest,
    TASK_STATUSES,
    status_display_text,
)

__all__ = [
    "Task",
    "TaskStatus",
    "TaskFormData",
    "ValidationError",
    "CreateTaskRequest",
    "TASK_STATUSES",
    "status_display_text",
]
