"""API endpoints for form and search request validation."""

import logging
from typing import ClassVar

from fastapi import APIRouter

from task_management.api.dependencies import SettingsDep, ValidationHelperDep
from task_management.core.exceptions import InvalidRequestError, ValidationFailedError
from task_management.models import SearchViewModel, ValidationResultViewModel, ViewModel
from task_management.validation import (
    Email,
    FieldRule,
    MinValue,
    Phone,
    Range,
    StrongPassword,
    Url,
)

logger = logging.getLogger(__name__)

router = APIRouter()


class FieldCheckRequest(ViewModel):
    """Values to run through the common format checks. Omitted values are skipped,
    but at least one value must be given.
    """

    email: str | None = None
    password: str | None = None
    phone_number: str | None = None
    url: str | None = None

    validation_rules: ClassVar[list[FieldRule]] = [
        FieldRule("email", Email()),
        FieldRule("password", StrongPassword()),
        FieldRule("phone_number", Phone()),
        FieldRule("url", Url()),
    ]


@router.post(
    "/fields",
    response_model=ValidationResultViewModel,
    summary="Check common form fields",
    description="Check e-mail, password strength, phone number and URL formats",
)
def check_fields(
    *, request_in: FieldCheckRequest, helper: ValidationHelperDep
) -> ValidationResultViewModel:
    """Check each supplied field and report every failure."""
    if all(value is None for value in request_in.model_dump().values()):
        raise InvalidRequestError("No fields to check")

    result = helper.validate_object(request_in)
    if not result.is_valid:
        raise ValidationFailedError(result)
    return result


@router.post(
    "/search",
    response_model=SearchViewModel,
    summary="Validate a search request",
    description="Validate paging of a search request and echo it with computed page counts",
)
def validate_search(
    *, search_in: SearchViewModel, helper: ValidationHelperDep, app_settings: SettingsDep
) -> SearchViewModel:
    """Validate a search request's pagination."""
    rules = [
        FieldRule("pagination.page", MinValue(minimum=1, message="Page must be 1 or greater")),
        FieldRule("pagination.page_size", Range(minimum=1, maximum=app_settings.MAX_PAGE_SIZE)),
    ]
    result = helper.validate_object(search_in, rules=rules)
    if not result.is_valid:
        logger.info("Rejected search request: %s", result.errors)
        raise ValidationFailedError(result)
    return search_in
