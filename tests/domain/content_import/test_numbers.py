from __future__ import annotations

import math

import pytest

from distform.domain.content_import.numbers import decode_int, dump_json, format_number


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (0.00001, "0.00001"),
        (0.000001, "0.000001"),
        (1e-7, "1e-7"),
        (1.5e-10, "1.5e-10"),
        (5e-324, "5e-324"),
        (1.5, "1.5"),
        (2.0, "2"),
        (100.0, "100"),
        (0.1 + 0.2, "0.30000000000000004"),
        (1.2345678901234568e20, "123456789012345680000"),
        (1e21, "1e+21"),
        (1.5e21, "1.5e+21"),
        (-0.5, "-0.5"),
        (-1e-7, "-1e-7"),
        (0.0, "0"),
        (-0.0, "0"),
        (42, "42"),
        (-42, "-42"),
        (2**53, "9007199254740992"),
        (2**53 + 2, "9007199254740994"),
        (12345678901234567890, "12345678901234567000"),
        (10**400, "Infinity"),
        (math.inf, "Infinity"),
        (-math.inf, "-Infinity"),
        (math.nan, "NaN"),
    ],
)
def test_format_number_matches_browser_output(value: float, expected: str) -> None:
    assert format_number(value) == expected


def test_decode_int_keeps_exact_integers() -> None:
    assert decode_int("9007199254740992") == 2**53
    assert isinstance(decode_int("-17"), int)


def test_decode_int_rounds_beyond_double_precision() -> None:
    assert decode_int("12345678901234567890") == 12345678901234567890.0
    assert isinstance(decode_int("12345678901234567890"), float)
    assert decode_int("-1" + "0" * 400) == -math.inf


def test_dump_json_is_compact_with_browser_numbers() -> None:
    value = {"a": 1e-7, "b": [0.00001, 2.0, None, True], "c": "引号\"", "d": {}}

    assert dump_json(value) == '{"a":1e-7,"b":[0.00001,2,null,true],"c":"引号\\"","d":{}}'


def test_dump_json_orders_integer_keys_first() -> None:
    value = {"b": 1, "2": 2, "a": 3, "1": 4, "01": 5, "4294967295": 6}

    assert dump_json(value) == '{"1":4,"2":2,"b":1,"a":3,"01":5,"4294967295":6}'


def test_dump_json_renders_non_finite_numbers_as_null() -> None:
    assert dump_json([math.inf, -math.inf]) == "[null,null]"


def test_dump_json_rejects_unknown_types() -> None:
    with pytest.raises(TypeError, match="set"):
        dump_json({1, 2})
