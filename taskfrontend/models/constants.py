"""Constants for taskfrontend.

This module centralizes limits, defaults and user-facing backend messages.
"""


# Form field limits
MAX_TITLE_LENGTH = 255
MAX_DESCRIPTION_LENGTH = 1000

# Task backend
DEFAULT_TASK_BACKEND_URL = "http://localhost:4000"
DEFAULT_TASK_BACKEND_TIMEOUT_SEC = 10

# Backend failure messages shown to the user
BACKEND_INVALID_DATA_MESSAGE = "Invalid task data. Please check your input."
BACKEND_SERVER_ERROR_MESSAGE = "The server encountered an error. Please try again later."
BACKEND_REQUEST_FAILED_MESSAGE = "Failed to create task. Please try again."
BACKEND_UNAVAILABLE_MESSAGE = "Unable to connect to the server. Please ensure the backend is running."
BACKEND_NETWORK_ERROR_MESSAGE = "A network error occurred. Please check your connection."
BACKEND_UNEXPECTED_ERROR_MESSAGE = "An unexpected error occurred"
TASK_CREATION_FAILED_MESSAGE = "Unable to create task. Please try again."
