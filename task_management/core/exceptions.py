"""Custom exceptions for the application."""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from task_management.models.validation import ValidationResultViewModel


class TaskManagementException(Exception):
    """Base exception for the Task Management API."""


class ValidationFailedError(TaskManagementException):
    """A request was bound but failed field or form validation."""

    def __init__(self, result: "ValidationResultViewModel"):
        self.result = result
        self.message = result.general_error or "Validation failed"
        super().__init__(self.message)


class InvalidRequestError(TaskManagementException):
    """The request is well-formed but cannot be processed as sent."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)
