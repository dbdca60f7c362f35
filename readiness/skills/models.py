"""Skill, role and gap-analysis models"""
from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field

from .proficiency import ProficiencyLevel


class Skill(BaseModel):
    """Catalog skill (reference data)"""
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    category: str = ""


class UserSkill(Skill):
    """Skill owned by a learner at a given proficiency"""
    proficiency: ProficiencyLevel


class RoleRequirement(BaseModel):
    """Minimum proficiency a role expects for one skill"""
    model_config = ConfigDict(frozen=True)

    skill_id: str
    min_proficiency: ProficiencyLevel


class JobRole(BaseModel):
    """Target job role (reference data)"""
    model_config = ConfigDict(frozen=True)

    id: str
    title: str
    category: str = ""
    description: str = ""
    required_skills: List[RoleRequirement] = Field(default_factory=list)
    avg_salary: Optional[str] = None
    demand: Optional[str] = Field(None, description="high, medium or low")


class LearningResource(BaseModel):
    """Course, tutorial, documentation page or video for a skill"""
    model_config = ConfigDict(frozen=True)

    id: str
    title: str
    url: str = ""
    type: str = Field("course", description="course, tutorial, documentation or video")
    duration: str = Field("", description="Free text such as '12 hours'")
    provider: str = ""
    difficulty: Optional[ProficiencyLevel] = None


class MatchedSkill(BaseModel):
    """Owned skill at or above the required level"""
    model_config = ConfigDict(frozen=True)

    skill: UserSkill
    required: ProficiencyLevel


class PartialSkill(BaseModel):
    """Owned skill below the required level"""
    model_config = ConfigDict(frozen=True)

    skill: UserSkill
    required: ProficiencyLevel


class MissingSkill(BaseModel):
    """Required skill absent from the inventory"""
    model_config = ConfigDict(frozen=True)

    skill_id: str
    skill_name: str
    required: ProficiencyLevel


class SkillGapAnalysis(BaseModel):
    """Derived comparison of an inventory against one role. Never a source of truth."""
    model_config = ConfigDict(frozen=True)

    role_id: str
    readiness_score: int = Field(..., ge=0, le=100, description="Strict matched-only percentage")
    matched_skills: List[MatchedSkill] = Field(default_factory=list)
    partial_skills: List[PartialSkill] = Field(default_factory=list)
    missing_skills: List[MissingSkill] = Field(default_factory=list)
    degenerate: bool = Field(False, description="Role has no requirements; score defaults to 0")

    @property
    def total_required(self) -> int:
        return len(self.matched_skills) + len(self.partial_skills) + len(self.missing_skills)
