"""Dependencies for FastAPI routes."""

from typing import Annotated

from fastapi import Depends

from task_management.core.config import Settings, settings
from task_management.validation import ValidationHelper


def get_settings() -> Settings:
    """Dependency for getting the application settings."""
    return settings


def get_validation_helper() -> type[ValidationHelper]:
    """Dependency for getting the validation helper."""
    return ValidationHelper


# Type Aliases
SettingsDep = Annotated[Settings, Depends(get_settings)]
ValidationHelperDep = Annotated[type[ValidationHelper], Depends(get_validation_helper)]
