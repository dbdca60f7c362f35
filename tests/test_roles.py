import pytest

from readiness import adjacent_roles, browse_roles
from readiness.recommendation import role_overlap, time_to_ready


@pytest.mark.parametrize("percentage,expected", [
    (100, "1-2 months"),
    (80, "1-2 months"),
    (79.9, "3-4 months"),
    (60, "3-4 months"),
    (40, "5-6 months"),
    (39.9, "6+ months"),
    (0, "6+ months"),
])
def test_time_to_ready(percentage, expected):
    assert time_to_ready(percentage) == expected


class TestBrowseRoles:
    def test_orders_by_quick_match(self, user_skill, make_role):
        roles = [
            make_role(("go", "advanced"), role_id="backend"),
            make_role(("js", "advanced"), ("css", "beginner"), role_id="frontend"),
            make_role(("js", "beginner"), role_id="scripting"),
        ]
        inventory = [user_skill("js", "intermediate")]

        matches = browse_roles(inventory, roles)

        assert [m.role.id for m in matches] == ["scripting", "frontend", "backend"]
        assert [m.quick_match for m in matches] == [100.0, 25.0, 0.0]
        assert matches[1].overlap == 50
        assert matches[0].time_to_ready == "1-2 months"

    def test_overlap_ignores_proficiency(self, user_skill, make_role):
        role = make_role(("js", "advanced"), ("css", "advanced"))

        assert role_overlap([user_skill("js", "beginner")], role) == 50
        assert role_overlap([], make_role()) == 0


class TestAdjacentRoles:
    def test_similarity_and_order(self, make_role):
        selected = make_role(("js", "advanced"), ("react", "beginner"), ("css", "beginner"), role_id="frontend")
        roles = [
            selected,
            make_role(("go", "advanced"), role_id="backend"),
            make_role(("js", "advanced"), ("react", "advanced"), ("node", "beginner"), role_id="fullstack"),
            make_role(("css", "advanced"), ("figma", "beginner"), role_id="designer"),
        ]

        adjacent = adjacent_roles(selected, roles)

        assert [a.role.id for a in adjacent] == ["fullstack", "designer", "backend"]
        assert adjacent[0].similarity == pytest.approx(2 / 3)
        assert adjacent[1].similarity == pytest.approx(1 / 3)
        assert adjacent[2].similarity == 0.0

    def test_limit(self, make_role):
        selected = make_role(("js", "advanced"), role_id="selected")
        roles = [make_role(("js", "beginner"), role_id=f"r{i}") for i in range(6)]

        assert len(adjacent_roles(selected, roles, limit=2)) == 2

    def test_without_selection(self, make_role):
        roles = [make_role(role_id=f"r{i}") for i in range(6)]

        assert [a.role.id for a in adjacent_roles(None, roles)] == ["r0", "r1", "r2", "r3"]
