"""Utility functions."""

from task_management.utils.datetime_utils import ensure_utc_aware, utc_now, utc_today

__all__ = ["ensure_utc_aware", "utc_now", "utc_today"]
