"""Validation rules and their evaluation.

Each rule is a small immutable value. ``evaluate_rule`` is a pure function of
the rule, the candidate value and the evaluation instant; it returns the
failure message or ``None`` when the value passes.

Rules other than ``Required`` only judge values they know how to judge:
``None``, empty strings and values of the wrong type pass.
"""

import logging
import re
from collections.abc import Callable, Collection, Sequence
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import TYPE_CHECKING, Any

from task_management.models.enums import ValidationType
from task_management.utils.datetime_utils import ensure_utc_aware, utc_now, utc_today
from task_management.validation import predicates

if TYPE_CHECKING:
    from task_management.validation.attributes import CustomValidation

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Required:
    """Value must be present and, for strings, not blank."""

    message: str | None = None


@dataclass(frozen=True)
class Length:
    """Length of a string or collection must lie within the given bounds."""

    min_length: int | None = None
    max_length: int | None = None
    message: str | None = None


@dataclass(frozen=True)
class Pattern:
    """String form of the value must fully match a regular expression."""

    pattern: str
    message: str | None = None
    compiled: re.Pattern[str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "compiled", re.compile(self.pattern))


@dataclass(frozen=True)
class AllowedValues:
    """Value must be one of a fixed set."""

    values: Collection[Any]
    message: str | None = None


@dataclass(frozen=True)
class Email:
    """Value must be a well-formed mail address."""

    message: str | None = None


@dataclass(frozen=True)
class StrongPassword:
    """Value must satisfy the password strength policy."""

    message: str | None = None


@dataclass(frozen=True)
class Phone:
    """Value must look like a phone number."""

    message: str | None = None


@dataclass(frozen=True)
class Url:
    """Value must be an absolute http(s) URL."""

    message: str | None = None


@dataclass(frozen=True)
class FutureDate:
    """Date must be strictly later than now."""

    message: str | None = None


@dataclass(frozen=True)
class PastDate:
    """Date must be strictly earlier than now."""

    message: str | None = None


@dataclass(frozen=True)
class Range:
    """Whole number must lie within ``[minimum, maximum]``.

    A range missing either bound accepts everything.
    """

    minimum: int | None = None
    maximum: int | None = None
    message: str | None = None

    @classmethod
    def from_parameters(cls, parameters: Sequence[Any]) -> "Range":
        """Build a range from loosely typed parameters, coercing them to ``int``."""
        if len(parameters) < 2:
            return cls()
        try:
            return cls(minimum=int(parameters[0]), maximum=int(parameters[1]))
        except (TypeError, ValueError):
            logger.warning("Ignoring range bounds that are not integers: %r", parameters[:2])
            return cls()


@dataclass(frozen=True)
class MinValue:
    """Whole number must be at least ``minimum``."""

    minimum: int
    message: str | None = None


@dataclass(frozen=True)
class Custom:
    """Named extension point. Always passes."""

    name: str = "custom"
    parameters: tuple[Any, ...] = ()
    message: str | None = None


Rule = (
    Required
    | Length
    | Pattern
    | AllowedValues
    | Email
    | StrongPassword
    | Phone
    | Url
    | FutureDate
    | PastDate
    | Range
    | MinValue
    | Custom
)


@dataclass(frozen=True)
class FieldRule:
    """A rule bound to the model attribute it checks."""

    field: str
    rule: "Rule | CustomValidation"


def rule_for_tag(validation_type: str, parameters: Sequence[Any] = ()) -> Rule | None:
    """
    Resolve a validation-type tag to a rule.

    Args:
        validation_type: Case-insensitive tag ("future", "past", "range", "custom")
        parameters: Extra parameters; "range" reads its bounds from the first two

    Returns:
        The matching rule, or None for an unknown tag (which accepts everything)
    """
    try:
        tag = ValidationType(validation_type.lower())
    except ValueError:
        logger.debug("Unknown validation type %r, values will always pass", validation_type)
        return None

    if tag is ValidationType.FUTURE:
        return FutureDate()
    if tag is ValidationType.PAST:
        return PastDate()
    if tag is ValidationType.RANGE:
        return Range.from_parameters(parameters)
    return Custom(name=validation_type, parameters=tuple(parameters))


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def _label(field_name: str | None) -> str:
    return field_name or "value"


def _check_required(rule: Required, value: Any, now: datetime, field_name: str | None):
    if _is_blank(value):
        return rule.message or f"The {_label(field_name)} field is required."
    return None


def _check_length(rule: Length, value: Any, now: datetime, field_name: str | None):
    if _is_blank(value) or not hasattr(value, "__len__"):
        return None
    size = len(value)
    too_short = rule.min_length is not None and size < rule.min_length
    too_long = rule.max_length is not None and size > rule.max_length
    if not (too_short or too_long):
        return None
    if rule.message:
        return rule.message
    if rule.min_length is not None and rule.max_length is not None:
        return (
            f"The {_label(field_name)} field must have a length between "
            f"{rule.min_length} and {rule.max_length}."
        )
    if too_short:
        return f"The {_label(field_name)} field must have a minimum length of {rule.min_length}."
    return f"The {_label(field_name)} field must have a maximum length of {rule.max_length}."


def _check_pattern(rule: Pattern, value: Any, now: datetime, field_name: str | None):
    if _is_blank(value) or rule.compiled.fullmatch(str(value)):
        return None
    return rule.message or (
        f"The {_label(field_name)} field must match the pattern '{rule.pattern}'."
    )


def _is_allowed(value: Any, values: Collection[Any]) -> bool:
    try:
        return value in values
    except TypeError:
        # unhashable value against a set
        return any(value == allowed for allowed in values)


def _check_allowed_values(rule: AllowedValues, value: Any, now: datetime, field_name: str | None):
    if _is_blank(value) or _is_allowed(value, rule.values):
        return None
    allowed = ", ".join(str(v) for v in rule.values)
    return rule.message or f"The {_label(field_name)} field must be one of: {allowed}."


def _predicate_check(predicate: Callable[[str], bool], default_message: str):
    def check(rule, value: Any, now: datetime, field_name: str | None):
        if _is_blank(value) or not isinstance(value, str) or predicate(value):
            return None
        return rule.message or default_message.format(field=_label(field_name))

    return check


def _check_future_date(rule: FutureDate, value: Any, now: datetime, field_name: str | None):
    if isinstance(value, datetime):
        passed = ensure_utc_aware(value) > now
    elif isinstance(value, date):
        passed = value > utc_today(now)
    else:
        return None
    return None if passed else rule.message or "Date must be in the future"


def _check_past_date(rule: PastDate, value: Any, now: datetime, field_name: str | None):
    if isinstance(value, datetime):
        passed = ensure_utc_aware(value) < now
    elif isinstance(value, date):
        passed = value <= utc_today(now)
    else:
        return None
    return None if passed else rule.message or "Date must be in the past"


def _check_range(rule: Range, value: Any, now: datetime, field_name: str | None):
    if rule.minimum is None or rule.maximum is None:
        return None
    if not isinstance(value, int) or isinstance(value, bool):
        return None
    if rule.minimum <= value <= rule.maximum:
        return None
    return rule.message or f"Value must be between {rule.minimum} and {rule.maximum}"


def _check_min_value(rule: MinValue, value: Any, now: datetime, field_name: str | None):
    if not isinstance(value, int) or isinstance(value, bool) or value >= rule.minimum:
        return None
    return rule.message or f"Value must be at least {rule.minimum}"


def _check_custom(rule: Custom, value: Any, now: datetime, field_name: str | None):
    return None


_CHECKS: dict[type, Callable[..., str | None]] = {
    Required: _check_required,
    Length: _check_length,
    Pattern: _check_pattern,
    AllowedValues: _check_allowed_values,
    Email: _predicate_check(
        predicates.is_valid_email, "The {field} field is not a valid e-mail address."
    ),
    StrongPassword: _predicate_check(
        predicates.is_strong_password,
        "The {field} field must be at least 8 characters and contain an uppercase letter, "
        "a lowercase letter, a digit and a symbol.",
    ),
    Phone: _predicate_check(
        predicates.is_valid_phone_number, "The {field} field is not a valid phone number."
    ),
    Url: _predicate_check(
        predicates.is_valid_url, "The {field} field is not a valid fully-qualified http or https URL."
    ),
    FutureDate: _check_future_date,
    PastDate: _check_past_date,
    Range: _check_range,
    MinValue: _check_min_value,
    Custom: _check_custom,
}


def evaluate_rule(
    rule: Rule | None,
    value: Any,
    now: datetime | None = None,
    field_name: str | None = None,
) -> str | None:
    """
    Evaluate a rule against a value.

    Args:
        rule: Rule to apply; None accepts everything
        value: Candidate value
        now: Evaluation instant for date rules, defaults to the current UTC time
        field_name: Field name used in default messages

    Returns:
        Failure message, or None if the value passes
    """
    if rule is None:
        return None
    check = _CHECKS.get(type(rule))
    if check is None:
        logger.debug("No check registered for rule %r, value passes", rule)
        return None
    return check(rule, value, ensure_utc_aware(now) or utc_now(), field_name)
