"""Pytest fixtures and configuration for taskfrontend tests."""

import pytest
from datetime import date, datetime, timedelta
from unittest.mock import MagicMock
from fastapi.testclient import TestClient

from taskfrontend.models.task import TaskFormData
from taskfrontend.integrations.task_backend import TaskBackendClient


# Fixed clock for validator tests
FIXED_NOW = datetime(2025, 6, 15, 10, 30)


@pytest.fixture
def fixed_now():
    """Current local time used by deterministic validator tests."""
    return FIXED_NOW


@pytest.fixture
def valid_form_base():
    """Valid form submission (relative to FIXED_NOW) keyed by form field name.

    Returns a dict that can be overridden per test.
    """
    return {
        "title": "Test Task",
        "description": "Test description",
        "status": "PENDING",
        "dueDate-day": "25",
        "dueDate-month": "12",
        "dueDate-year": "2025",
        "dueTime-hour": "14",
        "dueTime-minute": "30",
    }


@pytest.fixture
def make_form(valid_form_base):
    """Build TaskFormData from the valid base with overrides applied."""
    def _make(**overrides):
        values = dict(valid_form_base)
        for key, value in overrides.items():
            values[key.replace("__", "-")] = value
        return TaskFormData.from_form(values)
    return _make


@pytest.fixture
def future_form_fields():
    """Valid form submission relative to the real clock (for route tests)."""
    due = date.today() + timedelta(days=30)
    return {
        "title": "Test Task",
        "description": "Test description",
        "status": "PENDING",
        "dueDate-day": str(due.day),
        "dueDate-month": str(due.month),
        "dueDate-year": str(due.year),
        "dueTime-hour": "14",
        "dueTime-minute": "30",
    }


@pytest.fixture
def created_task_payload():
    """Backend response body for a created task."""
    return {
        "id": 123,
        "title": "Test Task",
        "description": "Test description",
        "status": "PENDING",
        "dueDateTime": "2025-12-25T14:30:00",
        "createdDate": "2025-01-15T10:00:00",
    }


@pytest.fixture
def mock_backend():
    """Task backend client double (no network)."""
    return MagicMock(spec=TaskBackendClient)


@pytest.fixture
def test_client(mock_backend):
    """Create a FastAPI test client with the backend dependency overridden."""
    from taskfrontend.api.app import app, get_task_backend

    app.dependency_overrides[get_task_backend] = lambda: mock_backend

    with TestClient(app) as client:
        yield client

    # Clean up dependency overrides
    app.dependency_overrides.clear()
