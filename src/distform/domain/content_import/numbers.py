"""Number and JSON rendering that matches how a browser prints values.

``parse_import_content`` turns JSON array elements into strings. The browser
rules differ from Python's ``str``/``json.dumps`` for numbers (``0.00001`` vs
``1e-05``, integers beyond 2**53 lose precision) and for object key order
(integer-like keys come first, ascending).
"""

from __future__ import annotations

import json
import math
from decimal import Decimal
from typing import Final, cast

MAX_EXACT_INTEGER: Final[int] = 2**53
# Decimal exponent range a browser prints without scientific notation.
_MAX_PLAIN_EXPONENT: Final[int] = 21
_MIN_PLAIN_EXPONENT: Final[int] = -6
_MAX_ARRAY_INDEX: Final[int] = 2**32 - 2


def decode_int(literal: str) -> int | float:
    """``json.loads`` hook: integers outside the exact double range become floats."""

    value = int(literal)
    if abs(value) <= MAX_EXACT_INTEGER:
        return value
    try:
        return float(value)
    except OverflowError:
        return math.inf if value > 0 else -math.inf


def format_number(value: float) -> str:
    """Render ``value`` the way ``String(number)`` does."""

    if isinstance(value, int):
        if abs(value) <= MAX_EXACT_INTEGER:
            return str(value)
        return format_number(decode_int(str(value)))
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == 0:
        return "0"
    if value < 0:
        return "-" + format_number(-value)

    _, digit_tuple, exponent = Decimal(repr(value)).as_tuple()
    digits = "".join(map(str, digit_tuple)).rstrip("0")
    exponent = cast(int, exponent) + len(digit_tuple) - len(digits)
    k = len(digits)
    n = exponent + k

    if k <= n <= _MAX_PLAIN_EXPONENT:
        return digits + "0" * (n - k)
    if 0 < n <= _MAX_PLAIN_EXPONENT:
        return f"{digits[:n]}.{digits[n:]}"
    if _MIN_PLAIN_EXPONENT < n <= 0:
        return "0." + "0" * -n + digits

    power = n - 1
    sign = "+" if power >= 0 else "-"
    mantissa = digits if k == 1 else f"{digits[0]}.{digits[1:]}"
    return f"{mantissa}e{sign}{abs(power)}"


def dump_json(value: object) -> str:
    """Compact JSON text with browser number formatting and property order."""

    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int | float):
        if isinstance(value, float) and not math.isfinite(value):
            return "null"
        return format_number(value)
    if isinstance(value, str):
        return json.dumps(value, ensure_ascii=False)
    if isinstance(value, list):
        return "[" + ",".join(dump_json(item) for item in cast(list[object], value)) + "]"
    if isinstance(value, dict):
        mapping = cast(dict[str, object], value)
        members = (
            f"{json.dumps(key, ensure_ascii=False)}:{dump_json(mapping[key])}"
            for key in _property_order(mapping)
        )
        return "{" + ",".join(members) + "}"
    raise TypeError(f"Cannot render {type(value).__name__} as JSON")


def _property_order(mapping: dict[str, object]) -> list[str]:
    indices = sorted((key for key in mapping if _is_array_index(key)), key=int)
    named = [key for key in mapping if not _is_array_index(key)]
    return indices + named


def _is_array_index(key: str) -> bool:
    if not key.isdecimal() or not key.isascii():
        return False
    if key != "0" and key.startswith("0"):
        return False
    return int(key) <= _MAX_ARRAY_INDEX
