"""Builds a learning roadmap from a skill-gap analysis"""
import re
from typing import List, Mapping, Optional, Sequence

from .models import RoadmapItem
from ..skills.models import LearningResource, SkillGapAnalysis
from ..utils import logger

_LEADING_INT = re.compile(r"^\s*(\d+)")


def estimate_hours(resources: Sequence[LearningResource]) -> int:
    """Sum the leading integer of each resource duration ("12 hours" -> 12)"""
    total = 0
    for resource in resources:
        match = _LEADING_INT.match(resource.duration or "")
        if match:
            total += int(match.group(1))
    return total


def generate_roadmap(
    analysis: SkillGapAnalysis,
    resources: Optional[Mapping[str, Sequence[LearningResource]]] = None,
) -> List[RoadmapItem]:
    """Partial skills first, then missing skills, each at its required level"""
    resources = resources or {}
    gaps = [
        (p.skill.id, p.skill.name, p.required) for p in analysis.partial_skills
    ] + [
        (m.skill_id, m.skill_name, m.required) for m in analysis.missing_skills
    ]

    items = []
    for skill_id, skill_name, required in gaps:
        skill_resources = list(resources.get(skill_id, []))
        items.append(RoadmapItem(
            id=f"roadmap-{skill_id}",
            skill_id=skill_id,
            skill_name=skill_name,
            difficulty=required.value,
            estimated_time=f"{estimate_hours(skill_resources)} hours",
            completed=False,
            resources=skill_resources,
        ))

    logger.info(f"Generated roadmap with {len(items)} items for role {analysis.role_id}")
    return items
