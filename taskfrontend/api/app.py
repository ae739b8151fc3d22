"""FastAPI web application for taskfrontend."""

import logging
from pathlib import Path
from typing import List

from fastapi import FastAPI, Depends, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates
from starlette.concurrency import run_in_threadpool

from taskfrontend.models.task import (
    TaskFormData,
    ValidationError,
    TaskStatus,
    TASK_STATUSES,
    status_display_text,
)
from taskfrontend.models.constants import (
    MAX_TITLE_LENGTH,
    MAX_DESCRIPTION_LENGTH,
    TASK_CREATION_FAILED_MESSAGE,
)
from taskfrontend.validation.task_validator import validate_task, build_task_request, errors_by_field
from taskfrontend.integrations.task_backend import TaskBackendClient, TaskServiceError
from taskfrontend.api.formatting import format_govuk_date_time

logger = logging.getLogger(__name__)

VERSION = "0.1.0"

TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"

# Initialize FastAPI app
app = FastAPI(
    title="taskfrontend",
    description="Server-rendered frontend for creating tasks against the task backend API",
    version=VERSION,
)

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))
templates.env.filters["govuk_date_time"] = format_govuk_date_time
templates.env.filters["status_text"] = status_display_text


def get_task_backend() -> TaskBackendClient:
    """Provide the task backend client (overridden in tests)."""
    return TaskBackendClient()


def _render_form(request: Request, form_data: TaskFormData, errors: List[ValidationError]):
    """Render the task creation form with errors and the submitted values."""
    return templates.TemplateResponse(
        request,
        "task/create.html",
        {
            "errors": errors,
            "error_summary": errors,
            "field_errors": errors_by_field(errors),
            "values": form_data.as_form_values(),
            "statuses": TASK_STATUSES,
            "initial_status": TaskStatus.PENDING.value,
            "max_title_length": MAX_TITLE_LENGTH,
            "max_description_length": MAX_DESCRIPTION_LENGTH,
        },
    )


@app.get("/", response_class=HTMLResponse)
async def home(request: Request):
    """Home page."""
    return templates.TemplateResponse(request, "home.html", {})


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {"status": "healthy", "version": VERSION}


@app.get("/task/create", response_class=HTMLResponse)
async def show_task_form(request: Request):
    """Display the task creation form."""
    return _render_form(request, TaskFormData(), [])


@app.post("/task/create", response_class=HTMLResponse)
async def submit_task_form(request: Request, backend: TaskBackendClient = Depends(get_task_backend)):
    """Handle a task creation form submission.

    Invalid submissions and backend failures re-render the form (HTTP 200)
    with an error summary and the submitted values preserved.
    """
    form = await request.form()
    form_data = TaskFormData.from_form(form)

    errors = validate_task(form_data)
    if errors:
        return _render_form(request, form_data, errors)

    task_request = build_task_request(form_data)
    try:
        created_task = await run_in_threadpool(backend.create_task, task_request)
    except TaskServiceError as e:
        logger.error(f"Failed to create task: {e.status_code} {e.message} ({e.details})")
        message = e.message
    except Exception as e:
        logger.error(f"Failed to create task: {type(e).__name__}: {str(e)}")
        message = TASK_CREATION_FAILED_MESSAGE
    else:
        logger.info(f"Created task {created_task.id}")
        return templates.TemplateResponse(request, "task/confirmation.html", {"task": created_task})

    form_error = ValidationError(field="form", text=message, href="#")
    return _render_form(request, form_data, [form_error])
