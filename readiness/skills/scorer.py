"""Skill-gap scoring of an inventory against a role's requirements.

Two independent metrics live here:

- ``score_skill_gap``: the strict readiness score used once a role is
  selected. Only skills at or above the required level count.
- ``quick_match_percentage``: the softer browsing metric that gives partial
  credit to owned-but-underlevelled skills. Role browsing uses it to order
  candidate roles before one is picked.

They diverge whenever the inventory has partial skills and must not be
substituted for one another.
"""
from typing import Dict, Iterable, Mapping, Optional

from .models import (
    JobRole,
    MatchedSkill,
    MissingSkill,
    PartialSkill,
    Skill,
    SkillGapAnalysis,
    UserSkill,
)
from .proficiency import meets
from ..errors import NoRoleSelected
from ..utils import config, logger, monitor, round_half_up


def index_inventory(inventory: Iterable[UserSkill]) -> Dict[str, UserSkill]:
    """Map skill id to the learner's entry; the first entry wins on duplicates"""
    owned: Dict[str, UserSkill] = {}
    for user_skill in inventory:
        owned.setdefault(user_skill.id, user_skill)
    return owned


def _skill_name(skill_id: str, catalog: Optional[Mapping[str, Skill]]) -> str:
    if catalog and skill_id in catalog:
        return catalog[skill_id].name
    return skill_id


@monitor.measure
def score_skill_gap(
    inventory: Iterable[UserSkill],
    role: Optional[JobRole],
    catalog: Optional[Mapping[str, Skill]] = None,
) -> SkillGapAnalysis:
    """
    Classify each required skill as matched, partial or missing

    Args:
        inventory: Learner's skills
        role: Selected target role
        catalog: Optional skill index used to name missing skills

    Returns:
        SkillGapAnalysis with the strict matched-only readiness score
    """
    if role is None:
        raise NoRoleSelected()

    owned = index_inventory(inventory)
    matched, partial, missing = [], [], []

    for req in role.required_skills:
        user_skill = owned.get(req.skill_id)
        if user_skill is None:
            missing.append(MissingSkill(
                skill_id=req.skill_id,
                skill_name=_skill_name(req.skill_id, catalog),
                required=req.min_proficiency,
            ))
        elif meets(user_skill.proficiency, req.min_proficiency):
            matched.append(MatchedSkill(skill=user_skill, required=req.min_proficiency))
        else:
            partial.append(PartialSkill(skill=user_skill, required=req.min_proficiency))

    total = len(role.required_skills)
    if total == 0:
        logger.warning(f"Role {role.id} has no required skills, readiness defaults to 0")
        readiness_score = 0
    else:
        readiness_score = int(round_half_up(100 * len(matched) / total))

    logger.debug(
        f"Scored role {role.id}: matched={len(matched)} partial={len(partial)} "
        f"missing={len(missing)} readiness={readiness_score}"
    )

    return SkillGapAnalysis(
        role_id=role.id,
        readiness_score=readiness_score,
        matched_skills=matched,
        partial_skills=partial,
        missing_skills=missing,
        degenerate=total == 0,
    )


def quick_match_percentage(inventory: Iterable[UserSkill], role: Optional[JobRole]) -> float:
    """Browsing match: (matched + credit * partial) / total, one decimal"""
    if role is None:
        raise NoRoleSelected()

    total = len(role.required_skills)
    if total == 0:
        return 0.0

    owned = index_inventory(inventory)
    matched = partial = 0
    for req in role.required_skills:
        user_skill = owned.get(req.skill_id)
        if user_skill is None:
            continue
        if meets(user_skill.proficiency, req.min_proficiency):
            matched += 1
        else:
            partial += 1

    credit = config.quick_match_partial_credit
    return round_half_up(100 * (matched + credit * partial) / total, 1)
