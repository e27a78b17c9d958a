"""Merge parsed items into an existing collection under a duplicate policy."""

from __future__ import annotations

from dataclasses import dataclass
from logging import getLogger
from typing import TYPE_CHECKING, Protocol, TypeAlias

from distform.config.form import CONTENT_ITEM_MAX_LENGTH
from distform.domain import messages
from distform.domain.text import trim

from .parsing import parse_import_content

if TYPE_CHECKING:
    from collections.abc import Sequence

log = getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ImportSuccess:
    """Merged collection plus accounting of what the import added and skipped.

    ``skipped_info`` is ``None`` when duplicates were allowed, ``""`` when nothing
    was skipped, and otherwise a clause that reads on from a success message.
    """

    items: tuple[str, ...]
    imported_count: int
    skipped_info: str | None = None
    self_duplicates: int = 0
    existing_duplicates: int = 0

    @property
    def skipped(self) -> int:
        return self.self_duplicates + self.existing_duplicates


@dataclass(frozen=True, slots=True)
class ImportFailure:
    message: str
    skipped: int = 0


ImportOutcome: TypeAlias = ImportSuccess | ImportFailure


class SuccessCallback(Protocol):
    def __call__(
        self,
        items: list[str],
        imported_count: int,
        skipped_info: str | None = ...,
        /,
    ) -> object: ...


class ErrorCallback(Protocol):
    def __call__(self, message: str, /) -> object: ...


def reconcile_import(
    raw: str,
    current_items: Sequence[str],
    *,
    allow_duplicates: bool = False,
    max_length: int = CONTENT_ITEM_MAX_LENGTH,
) -> ImportOutcome:
    """Parse ``raw`` and append its items to ``current_items``.

    Without ``allow_duplicates`` the parsed batch is first collapsed onto its
    first occurrences, then anything already present in ``current_items`` is
    dropped. ``current_items`` itself is never modified.
    """

    content = trim(raw)
    if not content:
        return ImportFailure(messages.NO_CONTENT)

    parsed = parse_import_content(content, max_length=max_length)
    if not parsed:
        return ImportFailure(messages.NO_VALID_CONTENT)

    if allow_duplicates:
        log.debug("Appending %s parsed items without deduplication", len(parsed))
        return ImportSuccess(items=(*current_items, *parsed), imported_count=len(parsed))

    distinct = list(dict.fromkeys(parsed))
    self_duplicates = len(parsed) - len(distinct)

    existing = set(current_items)
    fresh = [item for item in distinct if item not in existing]
    existing_duplicates = len(distinct) - len(fresh)

    log.debug(
        "Deduplicated import: parsed=%s, self_duplicates=%s, existing_duplicates=%s",
        len(parsed),
        self_duplicates,
        existing_duplicates,
    )

    if not fresh:
        total = self_duplicates + existing_duplicates
        return ImportFailure(messages.ALL_DUPLICATES.format(total=total), skipped=total)

    return ImportSuccess(
        items=(*current_items, *fresh),
        imported_count=len(fresh),
        skipped_info=_skipped_info(self_duplicates, existing_duplicates),
        self_duplicates=self_duplicates,
        existing_duplicates=existing_duplicates,
    )


def _skipped_info(self_duplicates: int, existing_duplicates: int) -> str:
    details: list[str] = []
    if self_duplicates > 0:
        details.append(messages.SELF_DUPLICATES.format(count=self_duplicates))
    if existing_duplicates > 0:
        details.append(messages.EXISTING_DUPLICATES.format(count=existing_duplicates))
    if not details:
        return ""
    return messages.SKIPPED_PREFIX + messages.SKIPPED_SEPARATOR.join(details)


def handle_bulk_import_content_with_filter(
    raw: str,
    current_items: Sequence[str],
    allow_duplicates: bool,  # noqa: FBT001
    on_success: SuccessCallback,
    on_error: ErrorCallback,
) -> None:
    """Callback flavour of :func:`reconcile_import`; exactly one callback fires."""

    outcome = reconcile_import(raw, current_items, allow_duplicates=allow_duplicates)
    match outcome:
        case ImportFailure(message=message):
            on_error(message)
        case ImportSuccess(items=items, imported_count=count, skipped_info=None):
            on_success(list(items), count)
        case ImportSuccess(items=items, imported_count=count, skipped_info=info):
            on_success(list(items), count, info)


def handle_bulk_import_content(
    raw: str,
    current_items: Sequence[str],
    on_success: SuccessCallback,
    on_error: ErrorCallback,
) -> None:
    """Deduplicating variant of :func:`handle_bulk_import_content_with_filter`."""

    handle_bulk_import_content_with_filter(raw, current_items, False, on_success, on_error)  # noqa: FBT003


__all__ = [
    "ErrorCallback",
    "ImportFailure",
    "ImportOutcome",
    "ImportSuccess",
    "SuccessCallback",
    "handle_bulk_import_content",
    "handle_bulk_import_content_with_filter",
    "reconcile_import",
]
