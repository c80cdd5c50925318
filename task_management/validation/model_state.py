"""Binder output consumed by ``ValidationResultViewModel.from_model_state``."""

from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any, Protocol, runtime_checkable

# Location prefixes FastAPI adds in front of the field path
REQUEST_LOCATIONS = frozenset({"body", "query", "path", "header", "cookie"})


@runtime_checkable
class ModelState(Protocol):
    """Validity flag and per-field messages produced by a model binder."""

    @property
    def is_valid(self) -> bool: ...

    def errors(self) -> Mapping[str, Sequence[str]]: ...


@dataclass
class DictModelState:
    """Model state backed by a plain mapping of field name to messages."""

    field_errors: dict[str, list[str]] = field(default_factory=dict)

    @property
    def is_valid(self) -> bool:
        return not any(self.field_errors.values())

    def errors(self) -> Mapping[str, Sequence[str]]:
        return self.field_errors


class PydanticModelState:
    """Model state built from pydantic error details.

    Accepts the ``errors()`` list of a pydantic ``ValidationError`` or of
    FastAPI's ``RequestValidationError``. Each message is keyed by the dotted
    location of the failing field.
    """

    def __init__(self, error_details: Iterable[Mapping[str, Any]]):
        self._errors: dict[str, list[str]] = {}
        for detail in error_details:
            key = self.field_key(detail.get("loc", ()))
            self._errors.setdefault(key, []).append(detail.get("msg", ""))

    @classmethod
    def from_exception(cls, exc: Any) -> "PydanticModelState":
        """Wrap any exception exposing a pydantic-style ``errors()`` method."""
        return cls(exc.errors())

    @staticmethod
    def field_key(loc: Sequence[Any]) -> str:
        """Join a pydantic location into a field name, dropping the request location."""
        parts = list(loc)
        if parts and parts[0] in REQUEST_LOCATIONS:
            parts = parts[1:]
        return ".".join(str(part) for part in parts)

    @property
    def is_valid(self) -> bool:
        return not self._errors

    def errors(self) -> Mapping[str, Sequence[str]]:
        return self._errors
