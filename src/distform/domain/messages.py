"""User-facing messages shown by the project form."""

from __future__ import annotations

from typing import Final

NO_CONTENT: Final[str] = "请输入要导入的内容"
NO_VALID_CONTENT: Final[str] = "未找到有效的内容"
ALL_DUPLICATES: Final[str] = "所有内容都重复，共跳过 {total} 个重复项"
SKIPPED_PREFIX: Final[str] = "，已跳过 "
SKIPPED_SEPARATOR: Final[str] = "，"
SELF_DUPLICATES: Final[str] = "{count} 个内容重复"
EXISTING_DUPLICATES: Final[str] = "{count} 个已存在"

NAME_REQUIRED: Final[str] = "项目名称不能为空"
TIME_RANGE_REQUIRED: Final[str] = "请选择开始和结束时间"
END_BEFORE_START: Final[str] = "结束时间必须晚于开始时间"
