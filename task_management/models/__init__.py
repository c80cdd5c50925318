"""View models for the Task Management API."""

from task_management.models.base import ViewModel
from task_management.models.enums import SearchType, ValidationType
from task_management.models.search import (
    AdvancedSearchViewModel,
    NoResultSearch,
    SavedSearch,
    SearchAnalyticsViewModel,
    SearchFilterViewModel,
    SearchHistoryItem,
    SearchHistoryViewModel,
    SearchPagination,
    SearchResultItem,
    SearchResultViewModel,
    SearchSortOptions,
    SearchSuggestionViewModel,
    SearchTerm,
    SearchViewModel,
)
from task_management.models.validation import (
    FieldValidationRules,
    FormValidationRules,
    ValidationError,
    ValidationResultViewModel,
)

__all__ = [
    # Base
    "ViewModel",
    # Enums
    "SearchType",
    "ValidationType",
    # Search
    "SearchViewModel",
    "SearchSortOptions",
    "SearchPagination",
    "SearchResultViewModel",
    "SearchResultItem",
    "AdvancedSearchViewModel",
    "SearchFilterViewModel",
    "SearchSuggestionViewModel",
    # Search analytics and history
    "SearchAnalyticsViewModel",
    "SearchTerm",
    "NoResultSearch",
    "SearchHistoryViewModel",
    "SearchHistoryItem",
    "SavedSearch",
    # Validation
    "ValidationResultViewModel",
    "FormValidationRules",
    "FieldValidationRules",
    "ValidationError",
]
