from __future__ import annotations

import pytest

from distform.config import CONTENT_ITEM_MAX_LENGTH
from distform.domain.content_import import parse_import_content


def test_json_array_of_objects_is_reserialized_compactly() -> None:
    assert parse_import_content('[{"a":1},{"a":2}]') == ['{"a":1}', '{"a":2}']


def test_json_array_is_not_split_on_commas_or_lines() -> None:
    raw = '[\n  {"code": "A1", "note": "x, y"},\n  {"code": "B2"}\n]'

    assert parse_import_content(raw) == [
        '{"code":"A1","note":"x, y"}',
        '{"code":"B2"}',
    ]


def test_json_array_keeps_non_ascii_and_key_order() -> None:
    assert parse_import_content('[{"名称": "值", "a": [1, 2]}]') == ['{"名称":"值","a":[1,2]}']


def test_json_scalars_are_stringified_and_blanks_dropped() -> None:
    raw = '[1, 2.0, 2.5, true, false, null, "text", "   ", "", ["a", 1.0]]'

    assert parse_import_content(raw) == [
        "1",
        "2",
        "2.5",
        "true",
        "false",
        "null",
        "text",
        '["a",1]',
    ]


def test_json_string_elements_are_not_trimmed() -> None:
    assert parse_import_content('["  padded  "]') == ["  padded  "]


def test_json_elements_are_truncated() -> None:
    assert parse_import_content('["abcdefgh", {"k": "v"}]', max_length=4) == ["abcd", '{"k"']


def test_empty_json_array_yields_nothing() -> None:
    assert parse_import_content("  [ ]  ") == []


def test_unterminated_bracket_falls_back_to_lines() -> None:
    assert parse_import_content("[a\n[b") == ["[a", "[b"]


def test_malformed_json_falls_back_to_commas() -> None:
    assert parse_import_content("[not, json]") == ["[not", "json]"]


def test_non_standard_json_constants_are_treated_as_text() -> None:
    assert parse_import_content("[NaN]") == ["[NaN]"]


def test_single_line_splits_on_ascii_and_fullwidth_commas() -> None:
    assert parse_import_content("x,y，z") == ["x", "y", "z"]


def test_multiple_lines_keep_commas_inside_items() -> None:
    assert parse_import_content("a\nb,c\n\n  d  ") == ["a", "b,c", "d"]


def test_windows_line_endings_are_trimmed() -> None:
    assert parse_import_content("first\r\nsecond\r\n") == ["first", "second"]


def test_blank_comma_entries_are_dropped() -> None:
    assert parse_import_content(" a ,, ， ,b ") == ["a", "b"]


@pytest.mark.parametrize("raw", ["", "   ", "\n \n\t", " , ，"])
def test_blank_input_yields_nothing(raw: str) -> None:
    assert parse_import_content(raw) == []


def test_default_truncation_length() -> None:
    items = parse_import_content("x" * (CONTENT_ITEM_MAX_LENGTH + 500))

    assert items == ["x" * CONTENT_ITEM_MAX_LENGTH]


def test_truncation_is_idempotent() -> None:
    items = parse_import_content("abcdefgh\n12345678", max_length=5)

    assert items == ["abcde", "12345"]
    assert parse_import_content(items[0], max_length=5) == [items[0]]


def test_entries_are_trimmed_before_truncation() -> None:
    assert parse_import_content("    abcdef\nxy", max_length=3) == ["abc", "xy"]


def test_byte_order_mark_is_trimmed_from_text_input() -> None:
    assert parse_import_content("\ufeffA1\nB2") == ["A1", "B2"]
    assert parse_import_content("\ufeffA1,B2") == ["A1", "B2"]


def test_byte_order_mark_does_not_hide_json_array() -> None:
    assert parse_import_content('\ufeff[{"a":1}]') == ['{"a":1}']


def test_lines_holding_only_invisible_whitespace_are_dropped() -> None:
    assert parse_import_content("x\n\ufeff\n\u3000 \ny") == ["x", "y"]


def test_unicode_spaces_are_trimmed_from_entries() -> None:
    assert parse_import_content("\u3000code-1 \n code-2") == ["code-1", "code-2"]


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("[0.00001, 1e-7, 12345678901234567890]", ["0.00001", "1e-7", "12345678901234567000"]),
        ("[1e21, 123456789012345678901, -0]", ["1e+21", "123456789012345680000", "0"]),
        ("[1e400]", ["Infinity"]),
        ('[{"a": 1e-7, "b": [0.00001, 1.50]}]', ['{"a":1e-7,"b":[0.00001,1.5]}']),
        ('[{"n": 1e400}]', ['{"n":null}']),
        ('[{"b": 1, "2": 2, "a": 3, "1": 4}]', ['{"1":4,"2":2,"b":1,"a":3}']),
    ],
)
def test_json_numbers_and_keys_render_like_a_browser(raw: str, expected: list[str]) -> None:
    assert parse_import_content(raw) == expected
