"""Tag-driven validator usable as pydantic field metadata."""

from datetime import datetime
from typing import Any

from pydantic import GetCoreSchemaHandler
from pydantic_core import PydanticCustomError, core_schema

from task_management.validation.rules import Rule, evaluate_rule, rule_for_tag


class CustomValidation:
    """
    Validator configured by a validation-type tag and extra parameters.

    Supported tags (case-insensitive): "future", "past", "range" (with min
    and max parameters) and "custom". Unknown tags accept every value, and
    values of a type the tag does not judge are accepted too.

    Use it directly::

        CustomValidation("range", 1, 10).validate(15)

    or as pydantic field metadata::

        priority: Annotated[int, CustomValidation("range", 1, 5)]
    """

    def __init__(self, validation_type: str, *parameters: Any):
        self.validation_type = validation_type
        self.parameters = parameters
        self.rule: Rule | None = rule_for_tag(validation_type, parameters)

    def __repr__(self) -> str:
        args = ", ".join(repr(arg) for arg in (self.validation_type, *self.parameters))
        return f"{type(self).__name__}({args})"

    def validate(self, value: Any, now: datetime | None = None) -> str | None:
        """Return the failure message for ``value``, or None if it passes."""
        return evaluate_rule(self.rule, value, now=now)

    def is_valid(self, value: Any, now: datetime | None = None) -> bool:
        """Return True if ``value`` passes."""
        return self.validate(value, now=now) is None

    def __get_pydantic_core_schema__(
        self, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        return core_schema.no_info_after_validator_function(self._check, handler(source_type))

    def _check(self, value: Any) -> Any:
        message = self.validate(value)
        if message is not None:
            raise PydanticCustomError("custom_validation", "{reason}", {"reason": message})
        return value
