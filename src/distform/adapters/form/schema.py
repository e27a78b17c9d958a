"""Pydantic models describing form payloads submitted by the UI."""

from __future__ import annotations

from datetime import UTC, datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _blank_to_none(value: object) -> object:
    if isinstance(value, str):
        stripped = value.strip()
        return stripped or None
    return value


def _assume_utc(value: datetime | None) -> datetime | None:
    if value is None:
        return None
    if value.tzinfo is None:
        value = value.replace(tzinfo=UTC)
    return value.astimezone(UTC)


class FormBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class ProjectFormPayload(FormBaseModel):
    name: str = ""
    start_time: datetime | None = Field(default=None, alias="startTime")
    end_time: datetime | None = Field(default=None, alias="endTime")

    _normalize_blank_times = field_validator("start_time", "end_time", mode="before")(
        _blank_to_none
    )
    _normalize_timezones = field_validator("start_time", "end_time", mode="after")(_assume_utc)


class ImportRequestPayload(FormBaseModel):
    content: str
    current_items: list[str] = Field(default_factory=list[str], alias="currentItems")
    allow_duplicates: bool = Field(default=False, alias="allowDuplicates")
