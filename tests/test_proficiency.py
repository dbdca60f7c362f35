import pytest
from pydantic import ValidationError

from readiness import InvalidLevel, ProficiencyLevel, UserSkill
from readiness.skills import meets, parse_level, rank


class TestRank:
    def test_scale(self):
        assert rank("beginner") == 1
        assert rank("intermediate") == 2
        assert rank("advanced") == 3

    def test_accepts_enum(self):
        assert rank(ProficiencyLevel.ADVANCED) == 3

    @pytest.mark.parametrize("level", ["expert", "Beginner", "", None, 2])
    def test_unknown_level_fails(self, level):
        with pytest.raises(InvalidLevel):
            rank(level)

    def test_invalid_level_is_value_error(self):
        with pytest.raises(ValueError):
            parse_level("novice")


class TestMeets:
    def test_equal_meets(self):
        assert meets("intermediate", "intermediate")

    def test_higher_meets(self):
        assert meets("advanced", "beginner")

    def test_lower_does_not_meet(self):
        assert not meets("beginner", "advanced")

    def test_unknown_need_fails(self):
        with pytest.raises(InvalidLevel):
            meets("advanced", "guru")


def test_user_skill_rejects_unknown_level():
    with pytest.raises(ValidationError):
        UserSkill(id="js", name="JavaScript", proficiency="expert")
