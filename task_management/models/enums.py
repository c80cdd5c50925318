"""Enum definitions for search and validation."""

import enum


class SearchType(str, enum.Enum):
    """Kinds of records a search can target."""

    ALL = "all"
    TASKS = "tasks"
    USERS = "users"
    COMMENTS = "comments"


class ValidationType(str, enum.Enum):
    """Tags understood by the tag-driven validator."""

    FUTURE = "future"
    PAST = "past"
    RANGE = "range"
    CUSTOM = "custom"
