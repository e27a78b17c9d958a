"""Bulk import of distribution content."""

from __future__ import annotations

from .parsing import FULLWIDTH_COMMA, parse_import_content
from .reconcile import (
    ErrorCallback,
    ImportFailure,
    ImportOutcome,
    ImportSuccess,
    SuccessCallback,
    handle_bulk_import_content,
    handle_bulk_import_content_with_filter,
    reconcile_import,
)

__all__ = [
    "FULLWIDTH_COMMA",
    "ErrorCallback",
    "ImportFailure",
    "ImportOutcome",
    "ImportSuccess",
    "SuccessCallback",
    "handle_bulk_import_content",
    "handle_bulk_import_content_with_filter",
    "parse_import_content",
    "reconcile_import",
]
