"""Form and field validation."""

from task_management.validation.attributes import CustomValidation
from task_management.validation.helper import ValidationHelper
from task_management.validation.model_state import (
    DictModelState,
    ModelState,
    PydanticModelState,
)
from task_management.validation.rules import (
    AllowedValues,
    Custom,
    Email,
    FieldRule,
    FutureDate,
    Length,
    MinValue,
    PastDate,
    Pattern,
    Phone,
    Range,
    Required,
    Rule,
    StrongPassword,
    Url,
    evaluate_rule,
    rule_for_tag,
)

__all__ = [
    # Entry points
    "ValidationHelper",
    "CustomValidation",
    # Model state
    "ModelState",
    "DictModelState",
    "PydanticModelState",
    # Rules
    "Rule",
    "FieldRule",
    "Required",
    "Length",
    "Pattern",
    "AllowedValues",
    "Email",
    "StrongPassword",
    "Phone",
    "Url",
    "FutureDate",
    "PastDate",
    "Range",
    "MinValue",
    "Custom",
    "evaluate_rule",
    "rule_for_tag",
]
