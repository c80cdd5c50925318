"""Validation result and validation schema view models."""

from typing import TYPE_CHECKING, Any

from pydantic import Field, model_validator

from task_management.models.base import ViewModel

if TYPE_CHECKING:
    from task_management.validation.model_state import ModelState


class ValidationResultViewModel(ViewModel):
    """Outcome of validating a form or request.

    ``errors`` maps a field name to its messages in the order they were
    added. A result that carries any field error or a ``general_error`` is
    never valid.
    """

    is_valid: bool = False
    errors: dict[str, list[str]] = Field(default_factory=dict)
    general_error: str | None = None

    @model_validator(mode="after")
    def errors_imply_invalid(self) -> "ValidationResultViewModel":
        if self.errors or self.general_error is not None:
            self.is_valid = False
        return self

    @classmethod
    def success(cls) -> "ValidationResultViewModel":
        """Create a valid result with no errors."""
        return cls(is_valid=True)

    @classmethod
    def fail(cls, error: str) -> "ValidationResultViewModel":
        """Create an invalid result carrying a single general error."""
        return cls(is_valid=False, general_error=error)

    @classmethod
    def from_model_state(cls, model_state: "ModelState") -> "ValidationResultViewModel":
        """
        Build a result from the errors collected by a model binder.

        Args:
            model_state: Binder output exposing ``is_valid`` and ``errors()``

        Returns:
            Result whose validity mirrors the binder's and whose errors
            contain every field with at least one message
        """
        result = cls(is_valid=model_state.is_valid)

        for field, messages in model_state.errors().items():
            if messages:
                result.errors[field] = list(messages)
                result.is_valid = False

        return result

    def add_error(self, field: str, error: str) -> None:
        """Append ``error`` to the messages for ``field`` and mark the result invalid."""
        self.errors.setdefault(field, []).append(error)
        self.is_valid = False


class FieldValidationRules(ViewModel):
    """Declarative constraints for a single form field."""

    required: bool = False
    type: str | None = Field(default=None, description="Expected value type, e.g. 'string' or 'date'")
    min_length: int | None = None
    max_length: int | None = None
    pattern: str | None = None
    allowed_values: list[str] | None = None
    custom_rules: dict[str, Any] = Field(default_factory=dict)
    messages: dict[str, str] = Field(
        default_factory=dict,
        description="Rule name mapped to the message shown when it fails",
    )


class FormValidationRules(ViewModel):
    """Declarative validation schema for a whole form."""

    fields: dict[str, FieldValidationRules] = Field(default_factory=dict)
    required_fields: list[str] = Field(default_factory=list)
    custom_messages: dict[str, str] = Field(default_factory=dict)


class ValidationError(ViewModel):
    """A single validation problem reported on its own."""

    field: str | None = None
    message: str | None = None
    code: str | None = None
    metadata: dict[str, Any] = Field(default_factory=dict)
