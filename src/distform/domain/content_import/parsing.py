"""Turn pasted text into normalized distribution items.

Three input shapes are recognised, tried in order:

1. a JSON array (``[{...}, {...}]``) whose elements become one item each;
2. one item per line;
3. a single line of comma separated items (full-width commas included).

Parsing never fails: a malformed JSON array is treated as plain text.
"""

from __future__ import annotations

import json
from logging import getLogger
from typing import Final

from distform.config.form import CONTENT_ITEM_MAX_LENGTH
from distform.domain.text import is_blank, trim

from .numbers import decode_int, dump_json, format_number

log = getLogger(__name__)

FULLWIDTH_COMMA: Final[str] = "，"


def parse_import_content(raw: str, *, max_length: int = CONTENT_ITEM_MAX_LENGTH) -> list[str]:
    """Split ``raw`` into items of at most ``max_length`` characters, preserving order."""

    content = trim(raw)

    elements = _decode_json_array(content)
    if elements is not None:
        items = [_stringify(element) for element in elements]
        return [item[:max_length] for item in items if not is_blank(item)]

    entries = [line for line in content.split("\n") if not is_blank(line)]
    if len(entries) == 1:
        entries = [
            entry
            for entry in content.replace(FULLWIDTH_COMMA, ",").split(",")
            if not is_blank(entry)
        ]

    truncated = (trim(entry)[:max_length] for entry in entries)
    return [entry for entry in truncated if entry]


def _decode_json_array(content: str) -> list[object] | None:
    """Return the decoded elements when ``content`` is a JSON array, otherwise ``None``."""

    if not (content.startswith("[") and content.endswith("]")):
        return None
    try:
        decoded: object = json.loads(
            content,
            parse_int=decode_int,
            parse_constant=_reject_constant,
        )
    except (ValueError, RecursionError) as exc:
        log.debug("Bracketed input is not valid JSON, falling back to text: %s", exc)
        return None
    if not isinstance(decoded, list):
        return None
    return decoded


def _reject_constant(literal: str) -> float:
    raise ValueError(f"Non-standard JSON constant: {literal}")


def _stringify(element: object) -> str:
    if isinstance(element, dict | list):
        return dump_json(element)
    if element is None:
        return "null"
    if isinstance(element, bool):
        return "true" if element else "false"
    if isinstance(element, int | float):
        return format_number(element)
    return str(element)


__all__ = ["FULLWIDTH_COMMA", "parse_import_content"]
