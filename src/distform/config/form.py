"""Project form limits and defaults."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta
from typing import Final

from .env import read_env_int

CONTENT_ITEM_MAX_LENGTH: Final[int] = 1024


@dataclass(frozen=True, slots=True)
class FormLimits:
    project_name_max_length: int = 32
    tag_max_length: int = 16
    max_tags: int = 10
    description_max_length: int = 1024
    content_item_max_length: int = CONTENT_ITEM_MAX_LENGTH


@dataclass(frozen=True, slots=True)
class FormDefaults:
    risk_level: int = 60
    time_offset: timedelta = timedelta(hours=24)


FORM_LIMITS: Final[FormLimits] = FormLimits()
DEFAULT_FORM_VALUES: Final[FormDefaults] = FormDefaults()


def get_form_limits() -> FormLimits:
    """Return form limits, honouring ``DISTFORM_*`` environment overrides."""

    return FormLimits(
        project_name_max_length=read_env_int(
            "DISTFORM_PROJECT_NAME_MAX_LENGTH", FORM_LIMITS.project_name_max_length
        ),
        tag_max_length=read_env_int("DISTFORM_TAG_MAX_LENGTH", FORM_LIMITS.tag_max_length),
        max_tags=read_env_int("DISTFORM_MAX_TAGS", FORM_LIMITS.max_tags),
        description_max_length=read_env_int(
            "DISTFORM_DESCRIPTION_MAX_LENGTH", FORM_LIMITS.description_max_length
        ),
        content_item_max_length=read_env_int(
            "DISTFORM_CONTENT_ITEM_MAX_LENGTH", FORM_LIMITS.content_item_max_length
        ),
    )
