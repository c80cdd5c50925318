"""Shared base class for view models."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class ViewModel(BaseModel):
    """Base for all view models.

    Serialises with camelCase aliases (``pageSize``, ``isValid``) and accepts
    either the alias or the attribute name on input.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        serialize_by_alias=True,
    )
