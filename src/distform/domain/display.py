"""Display lookups for distribution modes and trust levels (pure, dependency-light)."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Final


class DistributionMode(IntEnum):
    SINGLE_USE = 0
    LOTTERY = 1
    INVITE = 2


class TrustLevel(IntEnum):
    NEW_USER = 0
    BASIC_USER = 1
    USER = 2
    ACTIVE_USER = 3
    LEADER = 4


@dataclass(frozen=True, slots=True)
class TrustLevelOption:
    value: TrustLevel
    label: str


@dataclass(frozen=True, slots=True)
class TrustLevelStyle:
    name: str
    gradient: str


DISTRIBUTION_MODE_NAMES: Final[dict[int, str]] = {
    DistributionMode.SINGLE_USE: "一码一用",
    DistributionMode.LOTTERY: "抽奖分发",
    DistributionMode.INVITE: "邀请制",
}

TRUST_LEVEL_CONFIG: Final[dict[int, TrustLevelStyle]] = {
    TrustLevel.NEW_USER: TrustLevelStyle("新用户", "bg-gradient-to-br from-gray-600 to-gray-700"),
    TrustLevel.BASIC_USER: TrustLevelStyle(
        "基本用户", "bg-gradient-to-br from-emerald-500 to-cyan-500"
    ),
    TrustLevel.USER: TrustLevelStyle("成员", "bg-gradient-to-br from-blue-600 to-purple-700"),
    TrustLevel.ACTIVE_USER: TrustLevelStyle(
        "活跃用户", "bg-gradient-to-br from-purple-600 to-pink-600"
    ),
    TrustLevel.LEADER: TrustLevelStyle("领导者", "bg-gradient-to-br from-orange-500 to-pink-500"),
}

# Selector entries, ordered by level.
TRUST_LEVEL_OPTIONS: Final[tuple[TrustLevelOption, ...]] = tuple(
    TrustLevelOption(value=level, label=TRUST_LEVEL_CONFIG[level].name) for level in TrustLevel
)


def trust_level_gradient(trust_level: int) -> str:
    """Return the card gradient for ``trust_level``, falling back to the new-user style."""

    style = TRUST_LEVEL_CONFIG.get(trust_level) or TRUST_LEVEL_CONFIG[TrustLevel.NEW_USER]
    return style.gradient


def distribution_mode_name(mode: int) -> str | None:
    return DISTRIBUTION_MODE_NAMES.get(mode)


__all__ = [
    "DISTRIBUTION_MODE_NAMES",
    "TRUST_LEVEL_CONFIG",
    "TRUST_LEVEL_OPTIONS",
    "DistributionMode",
    "TrustLevel",
    "TrustLevelOption",
    "TrustLevelStyle",
    "distribution_mode_name",
    "trust_level_gradient",
]
