"""API version 1."""

from task_management.api.v1.api import api_router

__all__ = ["api_router"]
