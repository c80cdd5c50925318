"""Core application components."""

from task_management.core.config import Settings, settings
from task_management.core.exceptions import (
    InvalidRequestError,
    TaskManagementException,
    ValidationFailedError,
)

__all__ = [
    # Config
    "Settings",
    "settings",
    # Exceptions
    "TaskManagementException",
    "ValidationFailedError",
    "InvalidRequestError",
]
