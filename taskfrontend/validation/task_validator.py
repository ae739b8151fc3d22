"""Server-side validation for the task creation form.

Errors are returned (never raised) in error-summary order:
title, description, due date, due time. Each error carries the anchor
of the form control that should receive focus.
"""

import re
import calendar
import logging
from datetime import date, datetime
from typing import Dict, List, Optional

from taskfrontend.models.task import TaskFormData, ValidationError, CreateTaskRequest, TaskStatus
from taskfrontend.models.constants import MAX_TITLE_LENGTH, MAX_DESCRIPTION_LENGTH

logger = logging.getLogger(__name__)

_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")

REAL_DATE_MESSAGE = "Due date must be a real date"
REAL_TIME_MESSAGE = "Due time must be a real time"


def validate_task(form_data: TaskFormData, now: Optional[datetime] = None) -> List[ValidationError]:
    """Validate a task creation form submission.

    Args:
        form_data: Raw form submission
        now: Current local time used for the "today or in the future" check.
            Defaults to the server clock.

    Returns:
        List of validation errors; empty if the submission is valid
    """
    errors: List[ValidationError] = []

    # Title
    title = form_data.title
    if not title or not title.strip():
        errors.append(ValidationError(field="title", text="Enter a task title", href="#title"))
    elif _text_length(title) > MAX_TITLE_LENGTH:
        errors.append(ValidationError(
            field="title",
            text=f"Task title must be {MAX_TITLE_LENGTH} characters or fewer",
            href="#title",
        ))

    # Description is optional but bounded
    description = form_data.description
    if description and _text_length(description) > MAX_DESCRIPTION_LENGTH:
        errors.append(ValidationError(
            field="description",
            text=f"Description must be {MAX_DESCRIPTION_LENGTH} characters or fewer",
            href="#description",
        ))

    today = (now or datetime.now()).date()
    errors.extend(_validate_date(form_data, today))
    errors.extend(_validate_time(form_data))

    if errors:
        logger.debug(f"Task form rejected with {len(errors)} error(s): {[e.field for e in errors]}")
    return errors


def _validate_date(form_data: TaskFormData, today: date) -> List[ValidationError]:
    """Validate the due date parts. Returns at most one error."""
    day = _clean(form_data.due_date_day)
    month = _clean(form_data.due_date_month)
    year = _clean(form_data.due_date_year)

    if not day and not month and not year:
        return [_date_error("Enter a due date")]

    missing_parts = [
        name for name, value in (("day", day), ("month", month), ("year", year)) if not value
    ]
    if missing_parts:
        return [_date_error(f"Due date must include a {_join_parts(missing_parts)}")]

    day_num = _parse_int(day)
    month_num = _parse_int(month)
    year_num = _parse_int(year)
    if day_num is None or month_num is None or year_num is None:
        return [_date_error(REAL_DATE_MESSAGE)]

    if month_num < 1 or month_num > 12:
        return [_date_error(REAL_DATE_MESSAGE, href="#dueDate-month")]

    if day_num < 1 or day_num > 31:
        return [_date_error(REAL_DATE_MESSAGE)]

    if not _is_real_date(year_num, month_num, day_num):
        return [_date_error(REAL_DATE_MESSAGE)]

    if (year_num, month_num, day_num) < (today.year, today.month, today.day):
        return [_date_error("Due date must be today or in the future")]

    return []


def _validate_time(form_data: TaskFormData) -> List[ValidationError]:
    """Validate the due time parts.

    Unlike the date, hour and minute range errors are reported together.
    """
    hour = _clean(form_data.due_time_hour)
    minute = _clean(form_data.due_time_minute)

    if not hour and not minute:
        return [_time_error("Enter a due time")]

    missing_parts = [name for name, value in (("hour", hour), ("minute", minute)) if not value]
    if missing_parts:
        return [_time_error(f"Due time must include {_join_parts(missing_parts)}")]

    hour_num = _parse_int(hour)
    minute_num = _parse_int(minute)
    if hour_num is None or minute_num is None:
        return [_time_error(REAL_TIME_MESSAGE)]

    errors: List[ValidationError] = []
    if hour_num < 0 or hour_num > 23:
        errors.append(_time_error("Hour must be between 0 and 23"))
    if minute_num < 0 or minute_num > 59:
        errors.append(_time_error("Minute must be between 0 and 59", href="#dueTime-minute"))
    return errors


def _clean(value: Optional[str]) -> str:
    return value.strip() if value else ""


def _join_parts(parts: List[str]) -> str:
    return " and ".join(parts)


def _parse_int(value: str) -> Optional[int]:
    """Parse a whole (optionally signed) decimal integer, or return None."""
    if not _INTEGER_PATTERN.fullmatch(value):
        return None
    return int(value)


def _is_real_date(year: int, month: int, day: int) -> bool:
    """Return True if (year, month, day) is a day on the proleptic Gregorian calendar.

    Years 0-99 are read as two-digit years and never accepted. Negative and
    five-digit years are real; whether they are in the past is checked separately.
    Month and day must already be within 1-12 and 1-31.
    """
    if 0 <= year < 100:
        return False
    days_in_month = calendar.mdays[month] + (1 if month == 2 and calendar.isleap(year) else 0)
    return day <= days_in_month


def _text_length(value: str) -> int:
    """Length in UTF-16 code units, as counted by browsers (maxlength) and the backend."""
    return len(value.encode("utf-16-le", "surrogatepass")) // 2


def _date_error(text: str, href: str = "#dueDate-day") -> ValidationError:
    return ValidationError(field="dueDate", text=text, href=href)


def _time_error(text: str, href: str = "#dueTime-hour") -> ValidationError:
    return ValidationError(field="dueTime", text=text, href=href)


def build_date_time_from_form(form_data: TaskFormData) -> str:
    """Build a local ISO 8601 datetime string from the date and time parts.

    Assumes validation has already passed; values are not re-checked.
    Seconds are always zero and no timezone offset is added.

    Args:
        form_data: Validated form submission

    Returns:
        Datetime string in the form YYYY-MM-DDTHH:MM:00
    """
    year = form_data.due_date_year.strip()
    month = form_data.due_date_month.strip().rjust(2, "0")
    day = form_data.due_date_day.strip().rjust(2, "0")
    hour = form_data.due_time_hour.strip().rjust(2, "0")
    minute = form_data.due_time_minute.strip().rjust(2, "0")

    return f"{year}-{month}-{day}T{hour}:{minute}:00"


def build_task_request(form_data: TaskFormData) -> CreateTaskRequest:
    """Build the canonical creation request from a validated submission.

    New tasks always start as PENDING.
    """
    description = (form_data.description or "").strip()
    return CreateTaskRequest(
        title=form_data.title.strip(),
        description=description or None,
        status=TaskStatus.PENDING,
        due_date_time=build_date_time_from_form(form_data),
    )


def first_error_for(errors: List[ValidationError], field: str) -> Optional[str]:
    """Return the message of the first error for a field, if any."""
    for error in errors:
        if error.field == field:
            return error.text
    return None


def errors_by_field(errors: List[ValidationError]) -> Dict[str, str]:
    """Map each field to the message of its first error (for inline messages)."""
    messages: Dict[str, str] = {}
    for error in errors:
        messages.setdefault(error.field, error.text)
    return messages
