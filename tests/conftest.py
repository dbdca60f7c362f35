import os
import sys
from datetime import datetime, timezone

import pytest

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from readiness import JobRole, RoleRequirement, Skill, UserSkill
from readiness.catalog import Catalog
from readiness.roadmap import RoadmapItem


@pytest.fixture
def user_skill():
    def make(skill_id, proficiency, name=None):
        return UserSkill(id=skill_id, name=name or skill_id, category="", proficiency=proficiency)
    return make


@pytest.fixture
def make_role():
    def make(*requirements, role_id="role"):
        return JobRole(
            id=role_id,
            title=role_id.title(),
            required_skills=[RoleRequirement(skill_id=s, min_proficiency=p) for s, p in requirements],
        )
    return make


@pytest.fixture
def frontend_role(make_role):
    return make_role(("js", "intermediate"), ("css", "beginner"), role_id="frontend-dev")


@pytest.fixture
def four_skill_role(make_role):
    return make_role(
        ("js", "intermediate"),
        ("css", "intermediate"),
        ("html", "advanced"),
        ("react", "advanced"),
        role_id="web-dev",
    )


@pytest.fixture
def css_item():
    return RoadmapItem(id="roadmap-css", skill_id="css", skill_name="CSS3", difficulty="beginner")


@pytest.fixture
def sample_catalog():
    return Catalog(
        skills=[
            Skill(id="js", name="JavaScript", category="Programming Languages"),
            Skill(id="css", name="CSS3", category="Frontend"),
            Skill(id="html", name="HTML5", category="Frontend"),
            Skill(id="react", name="React", category="Frontend"),
        ],
        roles=[],
        resources={
            "react": [
                {"id": "react-1", "title": "React Documentation", "duration": "15 hours"},
                {"id": "react-2", "title": "Full Stack Open", "duration": "50 hours"},
            ],
        },
    )


@pytest.fixture
def fixed_now():
    return datetime(2026, 10, 19, 12, 0, tzinfo=timezone.utc)
