"""Task form validation and normalization for taskfrontend."""

from taskfrontend.validation.task_validator import (
    validate_task,
    build_date_time_from_form,
    build_task_request,
    first_error_for,
    errors_by_field,
)

__all__ = [
    "validate_task",
    "build_date_time_from_form",
    "build_task_request",
    "first_error_for",
    "errors_by_field",
]
