"""API v1 endpoint routers."""

from task_management.api.v1.endpoints import validation

__all__ = ["validation"]
