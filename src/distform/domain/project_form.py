"""Pre-submission checks for a project's name and distribution window."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime

from distform.domain import messages
from distform.domain.text import is_blank


@dataclass(frozen=True, slots=True)
class ProjectFormData:
    name: str
    start_time: datetime | None = None
    end_time: datetime | None = None


@dataclass(frozen=True, slots=True)
class FormValidationResult:
    is_valid: bool
    error_message: str | None = None


def _as_aware(value: datetime) -> datetime:
    # Naive values are read as UTC so they compare against aware ones.
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value


def validate_project_form(form: ProjectFormData) -> FormValidationResult:
    """Return the first failing check, or a valid result when all pass."""

    if is_blank(form.name):
        return FormValidationResult(is_valid=False, error_message=messages.NAME_REQUIRED)

    if form.start_time is None or form.end_time is None:
        return FormValidationResult(is_valid=False, error_message=messages.TIME_RANGE_REQUIRED)

    if _as_aware(form.end_time) <= _as_aware(form.start_time):
        return FormValidationResult(is_valid=False, error_message=messages.END_BEFORE_START)

    return FormValidationResult(is_valid=True)


__all__ = ["FormValidationResult", "ProjectFormData", "validate_project_form"]
