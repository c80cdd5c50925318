"""Validation entry points used by the API layer."""

import logging
from collections.abc import Iterable, Mapping
from datetime import datetime
from typing import Any, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from task_management.models.validation import ValidationResultViewModel
from task_management.utils.datetime_utils import utc_now
from task_management.validation import predicates
from task_management.validation.attributes import CustomValidation
from task_management.validation.model_state import PydanticModelState
from task_management.validation.rules import FieldRule, evaluate_rule

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


class ValidationHelper:
    """Static validation utilities."""

    is_valid_email = staticmethod(predicates.is_valid_email)
    is_strong_password = staticmethod(predicates.is_strong_password)
    is_valid_phone_number = staticmethod(predicates.is_valid_phone_number)
    is_valid_url = staticmethod(predicates.is_valid_url)

    @staticmethod
    def validate_object(
        model: Any,
        rules: Iterable[FieldRule] | None = None,
        now: datetime | None = None,
    ) -> ValidationResultViewModel:
        """
        Run a model's rule table and collect every failure.

        Args:
            model: Object or mapping to validate; rule fields may be dotted paths
            rules: Rules to apply; defaults to the ``validation_rules`` declared
                on the model's class
            now: Evaluation instant for date rules, defaults to the current time

        Returns:
            Result listing every violated rule under its field. Never raises.
        """
        if rules is None:
            rules = getattr(type(model), "validation_rules", ())
        now = now or utc_now()
        result = ValidationResultViewModel()

        for field_rule in rules:
            value = _read_field(model, field_rule.field)
            rule = field_rule.rule
            if isinstance(rule, CustomValidation):
                message = rule.validate(value, now=now)
            else:
                message = evaluate_rule(rule, value, now=now, field_name=field_rule.field)
            if message is not None:
                result.add_error(field_rule.field, message)

        if not result.errors:
            result.is_valid = True
        else:
            logger.debug(
                "%s failed validation on fields: %s",
                type(model).__name__,
                ", ".join(result.errors),
            )

        return result

    @staticmethod
    def validate_payload(
        model_cls: type[ModelT], data: Any, now: datetime | None = None
    ) -> tuple[ModelT | None, ValidationResultViewModel]:
        """
        Bind raw data to a model and validate it.

        Binding errors are converted through the model state; a model that
        binds is then checked against its rule table.

        Args:
            model_cls: Pydantic model to bind to
            data: Raw input, usually decoded JSON
            now: Evaluation instant for date rules

        Returns:
            Tuple of the bound model (None if binding failed) and the result
        """
        try:
            model = model_cls.model_validate(data)
        except PydanticValidationError as e:
            state = PydanticModelState.from_exception(e)
            return None, ValidationResultViewModel.from_model_state(state)

        return model, ValidationHelper.validate_object(model, now=now)


def _read_field(model: Any, path: str) -> Any:
    """Follow a dotted attribute or key path, yielding None once a step is missing."""
    value = model
    for name in path.split("."):
        if value is None:
            return None
        if isinstance(value, Mapping):
            value = value.get(name)
        else:
            value = getattr(value, name, None)
    return value
