"""Validation error taxonomy for the estimation engine.

Calculators raise these; ``EventImpactEngine`` turns them into
``ValidationIssue`` values so callers can show a message without
unwinding a stack.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional, TypeVar

from pydantic import BaseModel, ValidationError

ModelT = TypeVar("ModelT", bound=BaseModel)


class EstimationError(ValueError):
    """Base class for every input problem the engine reports."""

    code = "estimation_error"

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.field = field

    def to_issue(self) -> ValidationIssue:
        return ValidationIssue(code=self.code, field=self.field, message=self.message)


class InvalidConfiguration(EstimationError):
    """Unknown enum value, negative number, or a zero headcount before a per-attendee division."""

    code = "invalid_configuration"


class DistributionError(EstimationError):
    """Travel cohort shares do not add up to 100 within tolerance."""

    code = "distribution_error"


@dataclass(frozen=True)
class ValidationIssue:
    """A failure value surfaced to the caller instead of an exception."""

    code: str
    field: Optional[str]
    message: str


def require_non_negative(value: float, field: str) -> float:
    if value < 0:
        raise InvalidConfiguration(f"{field} cannot be negative, got {value}", field=field)
    return value


def require_positive(value: float, field: str) -> float:
    if value <= 0:
        raise InvalidConfiguration(f"{field} must be greater than 0, got {value}", field=field)
    return value


def parse_model(model_cls: type[ModelT], data: Mapping[str, Any]) -> ModelT:
    """Validate raw input into ``model_cls``.

    pydantic's ``ValidationError`` is re-raised as ``InvalidConfiguration``
    naming the first offending field.
    """
    try:
        return model_cls.model_validate(data)
    except ValidationError as e:
        first = e.errors()[0]
        field = ".".join(str(part) for part in first.get("loc", ())) or None
        raise InvalidConfiguration(
            f"Invalid {model_cls.__name__}: {first.get('msg', str(e))}",
            field=field,
        ) from e
