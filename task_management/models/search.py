"""Search-related view models."""

import math
from datetime import datetime
from typing import Any

from pydantic import Field, computed_field

from task_management.models.base import ViewModel
from task_management.models.enums import SearchType


class SearchSortOptions(ViewModel):
    """Sort order requested for a search."""

    field: str | None = Field(default=None, description="Field to sort on")
    ascending: bool = False
    sort_by: str | None = None


class SearchPagination(ViewModel):
    """Page request and page echo for search results."""

    page: int = Field(default=1, description="1-based page number")
    page_size: int = Field(default=10, description="Number of items per page")
    total_items: int = Field(default=0, description="Total number of matching items")

    @computed_field  # type: ignore[prop-decorator]
    @property
    def total_pages(self) -> int:
        """Number of pages needed to show ``total_items``."""
        if self.page_size <= 0:
            return 0
        return math.ceil(self.total_items / self.page_size)


class SearchViewModel(ViewModel):
    """Parameters of a simple search request."""

    query: str | None = None
    type: SearchType = Field(default=SearchType.ALL, description="Kind of records to search")
    filters: dict[str, list[str]] = Field(
        default_factory=dict,
        description="Field name mapped to the values allowed for it",
    )
    sort_options: SearchSortOptions = Field(default_factory=SearchSortOptions)
    pagination: SearchPagination = Field(default_factory=SearchPagination)


class SearchResultItem(ViewModel):
    """A single hit in a search result."""

    id: str | None = None
    type: str | None = None
    title: str | None = None
    description: str | None = None
    url: str | None = None
    created_at: datetime
    updated_at: datetime | None = None
    metadata: dict[str, Any] = Field(default_factory=dict)
    highlights: list[str] = Field(default_factory=list, description="Matched text snippets")


class SearchResultViewModel(ViewModel):
    """Results of a search together with facets and suggestions."""

    items: list[SearchResultItem] = Field(default_factory=list)
    total_results: int = 0
    facets: dict[str, list[str]] = Field(default_factory=dict)
    suggestions: list[str] = Field(default_factory=list)
    pagination: SearchPagination | None = None
    metadata: dict[str, Any] = Field(default_factory=dict)


class AdvancedSearchViewModel(ViewModel):
    """Criteria of an advanced search across several record kinds."""

    query: str | None = None
    types: list[str] = Field(default_factory=list)
    start_date: datetime | None = None
    end_date: datetime | None = None
    categories: list[str] = Field(default_factory=list)
    tags: list[str] = Field(default_factory=list)
    user_ids: list[int] = Field(default_factory=list)
    include_archived: bool = False
    custom_filters: dict[str, Any] = Field(default_factory=dict)


class SearchFilterViewModel(ViewModel):
    """One filter condition applied to a search field."""

    field: str | None = None
    operator: str | None = None
    value: Any = None
    is_exact: bool = False
    is_case_sensitive: bool = False


class SearchSuggestionViewModel(ViewModel):
    """A suggested query shown while the user types."""

    text: str | None = None
    type: str | None = None
    score: float = 0.0
    metadata: dict[str, Any] = Field(default_factory=dict)


class SearchTerm(ViewModel):
    """Aggregated statistics for one search query."""

    query: str | None = None
    count: int = 0
    last_searched: datetime
    average_results: float = 0.0
    related_queries: list[str] = Field(default_factory=list)


class NoResultSearch(ViewModel):
    """A search that returned nothing."""

    query: str | None = None
    searched_at: datetime
    user_agent: str | None = None
    suggested_alternatives: list[str] = Field(default_factory=list)


class SearchAnalyticsViewModel(ViewModel):
    """Search usage analytics."""

    popular_searches: list[SearchTerm] = Field(default_factory=list)
    recent_searches: list[SearchTerm] = Field(default_factory=list)
    searches_by_type: dict[str, int] = Field(default_factory=dict)
    average_result_counts: dict[str, float] = Field(default_factory=dict)
    no_result_searches: list[NoResultSearch] = Field(default_factory=list)


class SearchHistoryItem(ViewModel):
    """One past search made by a user."""

    query: str | None = None
    searched_at: datetime
    result_count: int = 0
    filters: list[str] = Field(default_factory=list)
    clicked_results: list[str] = Field(default_factory=list)


class SavedSearch(ViewModel):
    """A search a user saved for later."""

    id: int = 0
    name: str | None = None
    query: str | None = None
    filters: dict[str, Any] = Field(default_factory=dict)
    notify_on_results: bool = False
    created_at: datetime
    last_executed: datetime | None = None


class SearchHistoryViewModel(ViewModel):
    """Search history and saved searches for one user."""

    user_id: int = 0
    searches: list[SearchHistoryItem] = Field(default_factory=list)
    searches_by_category: dict[str, int] = Field(default_factory=dict)
    saved_searches: list[SavedSearch] = Field(default_factory=list)
