"""Proficiency model and skill-gap scoring"""
from .proficiency import ProficiencyLevel, parse_level, rank, meets
from .models import (
    Skill,
    UserSkill,
    RoleRequirement,
    JobRole,
    LearningResource,
    MatchedSkill,
    PartialSkill,
    MissingSkill,
    SkillGapAnalysis,
)
from .scorer import score_skill_gap, quick_match_percentage, index_inventory

__all__ = [
    "ProficiencyLevel", "parse_level", "rank", "meets",
    "Skill", "UserSkill", "RoleRequirement", "JobRole", "LearningResource",
    "MatchedSkill", "PartialSkill", "MissingSkill", "SkillGapAnalysis",
    "score_skill_gap", "quick_match_percentage", "index_inventory",
]
