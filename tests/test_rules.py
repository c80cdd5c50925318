"""Test validation rules and the tag-driven validator."""

import logging
import sys
from datetime import UTC, date, datetime, timedelta
from typing import Annotated

import pytest
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from task_management.validation import (
    AllowedValues,
    Custom,
    CustomValidation,
    FutureDate,
    Length,
    MinValue,
    PastDate,
    Pattern,
    Range,
    Required,
    evaluate_rule,
    rule_for_tag,
)


class TestRuleForTag:
    """Test tag resolution."""

    def test_tags_are_case_insensitive(self):
        """Test mixed-case tags resolve to the same rule."""
        assert rule_for_tag("Future") == FutureDate()
        assert rule_for_tag("PAST") == PastDate()

    def test_range_coerces_parameters(self):
        """Test range bounds are coerced to integers."""
        assert rule_for_tag("range", ["1", 10]) == Range(minimum=1, maximum=10)

    def test_range_without_enough_parameters_is_unbounded(self):
        """Test a range with a single parameter has no bounds."""
        assert rule_for_tag("range", [1]) == Range()

    def test_range_with_bad_parameters_logs_warning(self, caplog: pytest.LogCaptureFixture):
        """Test bounds that are not integers are dropped with a warning."""
        with caplog.at_level(logging.WARNING):
            assert rule_for_tag("range", ["low", "high"]) == Range()
        assert "not integers" in caplog.text

    def test_custom_and_unknown(self):
        """Test custom resolves to the extension point and unknown tags to nothing."""
        assert isinstance(rule_for_tag("custom", ["x"]), Custom)
        assert rule_for_tag("weekday") is None


class TestDateRules:
    """Test future and past date rules."""

    def test_future_datetime(self, fixed_now: datetime):
        """Test only instants after now pass."""
        assert evaluate_rule(FutureDate(), fixed_now + timedelta(seconds=1), now=fixed_now) is None
        assert evaluate_rule(FutureDate(), fixed_now, now=fixed_now) == "Date must be in the future"
        assert (
            evaluate_rule(FutureDate(), fixed_now - timedelta(days=1), now=fixed_now)
            == "Date must be in the future"
        )

    def test_past_datetime(self, fixed_now: datetime):
        """Test only instants before now pass."""
        assert evaluate_rule(PastDate(), fixed_now - timedelta(seconds=1), now=fixed_now) is None
        assert evaluate_rule(PastDate(), fixed_now, now=fixed_now) == "Date must be in the past"

    def test_naive_datetime_is_treated_as_utc(self, fixed_now: datetime):
        """Test naive datetimes compare as UTC."""
        tomorrow = datetime(2026, 1, 16, 12, 0)
        assert evaluate_rule(FutureDate(), tomorrow, now=fixed_now) is None
        assert evaluate_rule(PastDate(), tomorrow, now=fixed_now) == "Date must be in the past"

    def test_calendar_dates(self, fixed_now: datetime):
        """Test today counts as past and not as future."""
        today = date(2026, 1, 15)
        assert evaluate_rule(FutureDate(), today, now=fixed_now) == "Date must be in the future"
        assert evaluate_rule(PastDate(), today, now=fixed_now) is None
        assert evaluate_rule(FutureDate(), date(2026, 1, 16), now=fixed_now) is None

    def test_non_dates_pass(self, fixed_now: datetime):
        """Test values that are not dates are not judged."""
        assert evaluate_rule(FutureDate(), "2020-01-01", now=fixed_now) is None
        assert evaluate_rule(PastDate(), 12345, now=fixed_now) is None
        assert evaluate_rule(FutureDate(), None, now=fixed_now) is None

    def test_custom_message(self, fixed_now: datetime):
        """Test the message can be replaced."""
        rule = FutureDate(message="Due date must be ahead")
        assert evaluate_rule(rule, fixed_now, now=fixed_now) == "Due date must be ahead"


class TestRangeRule:
    """Test the whole-number range rule."""

    def test_inside_and_on_bounds(self):
        """Test the bounds are inclusive."""
        rule = Range(minimum=1, maximum=10)
        assert evaluate_rule(rule, 1) is None
        assert evaluate_rule(rule, 5) is None
        assert evaluate_rule(rule, 10) is None

    def test_outside_bounds(self):
        """Test values outside the bounds fail with both bounds in the message."""
        rule = Range(minimum=1, maximum=10)
        assert evaluate_rule(rule, 15) == "Value must be between 1 and 10"
        assert evaluate_rule(rule, 0) == "Value must be between 1 and 10"

    def test_non_integers_pass(self):
        """Test floats, strings and booleans are not judged."""
        rule = Range(minimum=1, maximum=10)
        assert evaluate_rule(rule, 15.0) is None
        assert evaluate_rule(rule, "15") is None
        assert evaluate_rule(rule, True) is None

    def test_unbounded_range_passes(self):
        """Test a range missing a bound accepts everything."""
        assert evaluate_rule(Range(minimum=1), 1000) is None


class TestMinValueRule:
    """Test the lower-bound-only rule."""

    def test_below_minimum_fails(self):
        """Test values under the minimum fail with the bound in the message."""
        assert evaluate_rule(MinValue(minimum=1), 0) == "Value must be at least 1"
        assert evaluate_rule(MinValue(minimum=1, message="Page must be 1 or greater"), -5) == (
            "Page must be 1 or greater"
        )

    def test_no_upper_limit(self):
        """Test arbitrarily large integers pass."""
        assert evaluate_rule(MinValue(minimum=1), 1) is None
        assert evaluate_rule(MinValue(minimum=1), sys.maxsize + 1) is None

    def test_non_integers_pass(self):
        """Test floats, strings and booleans are not judged."""
        assert evaluate_rule(MinValue(minimum=1), 0.5) is None
        assert evaluate_rule(MinValue(minimum=1), "0") is None
        assert evaluate_rule(MinValue(minimum=1), False) is None


class TestGeneralRules:
    """Test the general-purpose rules used by rule tables."""

    def test_required(self):
        """Test missing and blank values fail."""
        assert evaluate_rule(Required(), None, field_name="title") == "The title field is required."
        assert evaluate_rule(Required(), "   ", field_name="title") == "The title field is required."
        assert evaluate_rule(Required(), "Write docs") is None
        assert evaluate_rule(Required(), 0) is None

    def test_length(self):
        """Test length bounds on strings and lists."""
        rule = Length(min_length=3, max_length=5)
        assert evaluate_rule(rule, "abcd") is None
        assert evaluate_rule(rule, ["a", "b"], field_name="tags") == (
            "The tags field must have a length between 3 and 5."
        )
        assert evaluate_rule(Length(max_length=2), "abc", field_name="code") == (
            "The code field must have a maximum length of 2."
        )
        assert evaluate_rule(rule, None) is None
        assert evaluate_rule(rule, 12345) is None

    def test_pattern_must_match_whole_value(self):
        """Test the pattern is anchored at both ends."""
        rule = Pattern(r"[A-Z]{3}-\d+")
        assert evaluate_rule(rule, "TSK-42") is None
        assert evaluate_rule(rule, "xTSK-42", field_name="key") == (
            r"The key field must match the pattern '[A-Z]{3}-\d+'."
        )
        assert evaluate_rule(rule, "") is None

    def test_allowed_values(self):
        """Test membership in the allowed set."""
        rule = AllowedValues(values=("open", "closed"))
        assert evaluate_rule(rule, "open") is None
        assert evaluate_rule(rule, "archived", field_name="status") == (
            "The status field must be one of: open, closed."
        )

    def test_allowed_values_with_unhashable_value(self):
        """Test a list value checked against a set is reported instead of raising."""
        rule = AllowedValues(values=frozenset({"a", "b"}))
        message = evaluate_rule(rule, ["a"], field_name="tags")
        assert message.startswith("The tags field must be one of: ")
        assert evaluate_rule(AllowedValues(values=(["a"], ["b"])), ["a"]) is None

    def test_custom_always_passes(self):
        """Test the extension point accepts everything."""
        assert evaluate_rule(Custom(), object()) is None
        assert evaluate_rule(None, "anything") is None


class TestCustomValidation:
    """Test the tag-driven validator."""

    def test_range_from_parameters(self):
        """Test range checks with positional parameters."""
        validator = CustomValidation("range", 1, 10)
        assert validator.is_valid(5)
        assert validator.validate(15) == "Value must be between 1 and 10"

    def test_range_with_one_parameter_passes(self):
        """Test a range missing its upper bound accepts everything."""
        assert CustomValidation("range", 1).validate(15) is None

    def test_future_against_current_time(self):
        """Test date tags default to the current time."""
        validator = CustomValidation("future")
        assert validator.is_valid(datetime.now(UTC) + timedelta(days=1))
        assert not validator.is_valid(datetime.now(UTC) - timedelta(days=1))

    def test_unknown_and_custom_tags_pass(self):
        """Test tags without a check accept everything."""
        assert CustomValidation("weekday").is_valid("anything")
        assert CustomValidation("custom", "extra").is_valid(None)

    def test_repr(self):
        """Test the repr shows tag and parameters."""
        assert repr(CustomValidation("range", 1, 10)) == "CustomValidation('range', 1, 10)"

    def test_as_pydantic_metadata(self):
        """Test the validator runs during model binding."""

        class TaskForm(BaseModel):
            priority: Annotated[int, CustomValidation("range", 1, 5)]

        assert TaskForm(priority=3).priority == 3

        with pytest.raises(PydanticValidationError) as exc_info:
            TaskForm(priority=9)

        errors = exc_info.value.errors()
        assert errors[0]["loc"] == ("priority",)
        assert errors[0]["msg"] == "Value must be between 1 and 5"
        assert errors[0]["type"] == "custom_validation"
