"""Translate form payloads into domain values."""

from __future__ import annotations

from typing import TYPE_CHECKING

from distform.domain.project_form import ProjectFormData

if TYPE_CHECKING:
    from .schema import ProjectFormPayload


def to_project_form(payload: ProjectFormPayload) -> ProjectFormData:
    return ProjectFormData(
        name=payload.name,
        start_time=payload.start_time,
        end_time=payload.end_time,
    )
