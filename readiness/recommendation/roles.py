"""Role browsing: quick match ordering, adjacent roles and time-to-ready"""
from typing import Iterable, List, Optional, Sequence

from .models import AdjacentRole, RoleMatch
from ..skills.models import JobRole, UserSkill
from ..skills.scorer import quick_match_percentage
from ..utils import round_half_up


def time_to_ready(percentage: float) -> str:
    if percentage >= 80:
        return "1-2 months"
    if percentage >= 60:
        return "3-4 months"
    if percentage >= 40:
        return "5-6 months"
    return "6+ months"


def role_overlap(inventory: Iterable[UserSkill], role: JobRole) -> int:
    """Percent of required skills owned at any proficiency"""
    required = [req.skill_id for req in role.required_skills]
    if not required:
        return 0
    owned = {s.id for s in inventory}
    shared = sum(1 for skill_id in required if skill_id in owned)
    return int(round_half_up(100 * shared / len(required)))


def browse_roles(inventory: Iterable[UserSkill], roles: Iterable[JobRole]) -> List[RoleMatch]:
    """Roles ordered by quick match, best first"""
    inventory = list(inventory)
    matches = []
    for role in roles:
        quick = quick_match_percentage(inventory, role)
        matches.append(RoleMatch(
            role=role,
            quick_match=quick,
            overlap=role_overlap(inventory, role),
            time_to_ready=time_to_ready(quick),
        ))
    matches.sort(key=lambda m: m.quick_match, reverse=True)
    return matches


def adjacent_roles(
    selected: Optional[JobRole],
    roles: Sequence[JobRole],
    limit: int = 4,
) -> List[AdjacentRole]:
    """Roles sharing the most requirements with the selected one"""
    if selected is None:
        return [AdjacentRole(role=role, similarity=0.0) for role in roles[:limit]]

    target = {req.skill_id for req in selected.required_skills}
    adjacent = []
    for role in roles:
        if role.id == selected.id:
            continue
        skills = {req.skill_id for req in role.required_skills}
        denominator = max(len(target), len(skills))
        similarity = len(target & skills) / denominator if denominator else 0.0
        adjacent.append(AdjacentRole(role=role, similarity=similarity))

    adjacent.sort(key=lambda a: a.similarity, reverse=True)
    return adjacent[:limit]
