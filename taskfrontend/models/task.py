"""Task data models for taskfrontend.

These models mirror the task backend API contract (camelCase on the wire).
"""

from typing import Dict, List, Mapping, Optional
from enum import Enum
from pydantic import BaseModel, Field


class TaskStatus(str, Enum):
    """Task status enumeration."""
    PENDING = "PENDING"
    IN_PROGRESS = "IN_PROGRESS"
    COMPLETED = "COMPLETED"


# Display options for task statuses, in form order
TASK_STATUSES: List[Dict[str, str]] = [
    {"value": TaskStatus.PENDING.value, "text": "Pending"},
    {"value": TaskStatus.IN_PROGRESS.value, "text": "In Progress"},
    {"value": TaskStatus.COMPLETED.value, "text": "Completed"},
]


def status_display_text(status: Optional[str]) -> str:
    """Return the display text for a status value (the raw value if unknown)."""
    for option in TASK_STATUSES:
        if option["value"] == status:
            return option["text"]
    return status or ""


class TaskFormData(BaseModel):
    """Raw task creation form submission.

    Every value is an untrusted, optional string exactly as posted.
    """

    title: Optional[str] = None
    description: Optional[str] = None
    status: Optional[str] = None
    due_date_day: Optional[str] = Field(None, alias="dueDate-day")
    due_date_month: Optional[str] = Field(None, alias="dueDate-month")
    due_date_year: Optional[str] = Field(None, alias="dueDate-year")
    due_time_hour: Optional[str] = Field(None, alias="dueTime-hour")
    due_time_minute: Optional[str] = Field(None, alias="dueTime-minute")

    class Config:
        """Pydantic configuration."""
        populate_by_name = True
        frozen = True

    @classmethod
    def from_form(cls, form: Mapping[str, object]) -> "TaskFormData":
        """Build form data from a submitted mapping, ignoring unknown keys.

        Non-string values (e.g. uploaded files) are treated as absent.
        """
        values = {}
        for name, field in cls.model_fields.items():
            key = field.alias or name
            value = form.get(key)
            values[key] = value if isinstance(value, str) else None
        return cls(**values)

    def as_form_values(self) -> Dict[str, str]:
        """Return the submitted values keyed by form field name, for redisplay."""
        return {
            key: value
            for key, value in self.model_dump(by_alias=True).items()
            if value is not None
        }


class ValidationError(BaseModel):
    """A single field validation error, shaped for an error summary."""

    field: str = Field(..., description="Logical field that failed (e.g. 'title', 'dueDate')")
    text: str = Field(..., description="Human-readable message")
    href: str = Field(..., description="Anchor of the form control to focus")

    class Config:
        """Pydantic configuration."""
        frozen = True


class CreateTaskRequest(BaseModel):
    """Canonical task creation request sent to the backend."""

    title: str = Field(..., description="Trimmed task title")
    description: Optional[str] = Field(None, description="Trimmed description, omitted when empty")
    status: TaskStatus = Field(TaskStatus.PENDING, description="Initial task status")
    due_date_time: str = Field(
        ...,
        alias="dueDateTime",
        description="Local ISO 8601 datetime (YYYY-MM-DDTHH:MM:00, no offset)",
    )

    class Config:
        """Pydantic configuration."""
        populate_by_name = True
        use_enum_values = True
        frozen = True

    def to_payload(self) -> dict:
        """Serialize to the backend's JSON body."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class Task(BaseModel):
    """Task record as returned by the backend."""

    id: Optional[int] = Field(None, description="Backend-generated task identifier")
    title: str = Field(..., description="Task title")
    description: Optional[str] = Field(None, description="Task description")
    status: TaskStatus = Field(..., description="Task status")
    due_date_time: str = Field(..., alias="dueDateTime", description="Due date and time (ISO 8601)")
    created_date: Optional[str] = Field(None, alias="createdDate", description="Creation timestamp (ISO 8601)")

    class Config:
        """Pydantic configuration."""
        populate_by_name = True
        use_enum_values = True
