"""Public interface for the form payload adapter."""

from __future__ import annotations

from .schema import ImportRequestPayload, ProjectFormPayload
from .translator import to_project_form

__all__ = [
    "ImportRequestPayload",
    "ProjectFormPayload",
    "to_project_form",
]
