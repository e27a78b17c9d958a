"""Application configuration helpers."""

from __future__ import annotations

from .env import read_env_int
from .errors import ConfigurationError
from .form import (
    CONTENT_ITEM_MAX_LENGTH,
    DEFAULT_FORM_VALUES,
    FORM_LIMITS,
    FormDefaults,
    FormLimits,
    get_form_limits,
)
from .logging import configure_logging, resolve_log_level

__all__ = [
    "CONTENT_ITEM_MAX_LENGTH",
    "DEFAULT_FORM_VALUES",
    "FORM_LIMITS",
    "ConfigurationError",
    "FormDefaults",
    "FormLimits",
    "configure_logging",
    "get_form_limits",
    "read_env_int",
    "resolve_log_level",
]
