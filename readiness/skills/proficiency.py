"""Ordered proficiency scale and comparison primitives"""
from enum import Enum
from typing import Union

from ..errors import InvalidLevel


class ProficiencyLevel(str, Enum):
    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"


LevelLike = Union[ProficiencyLevel, str]

_RANKS = {
    ProficiencyLevel.BEGINNER: 1,
    ProficiencyLevel.INTERMEDIATE: 2,
    ProficiencyLevel.ADVANCED: 3,
}


def parse_level(level: LevelLike) -> ProficiencyLevel:
    """Return the enum member for a level or its exact string value"""
    if isinstance(level, ProficiencyLevel):
        return level
    if isinstance(level, str):
        try:
            return ProficiencyLevel(level)
        except ValueError:
            raise InvalidLevel(level) from None
    raise InvalidLevel(level)


def rank(level: LevelLike) -> int:
    """beginner=1, intermediate=2, advanced=3"""
    return _RANKS[parse_level(level)]


def meets(have: LevelLike, need: LevelLike) -> bool:
    return rank(have) >= rank(need)
