"""Recommendation models"""
from datetime import datetime
from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field

from ..skills.models import JobRole


class JobPosting(BaseModel):
    """External job posting. Unknown fields are kept as-is."""
    model_config = ConfigDict(frozen=True, extra="allow")

    job_id: str
    title: str
    company: str = ""
    skills: List[str] = Field(default_factory=list, description="Free-text skill tags")
    posted_date: Optional[datetime] = None
    location: Optional[str] = None
    url: Optional[str] = None


class JobMatch(BaseModel):
    """Fuzzy skill overlap between one posting and an inventory"""
    model_config = ConfigDict(frozen=True)

    exact_count: int = 0
    partial_count: int = 0
    match_score: int = Field(..., ge=0, le=100, description="Weighted match percentage")
    matching_skills: List[str] = Field(default_factory=list, description="Job tags matched exactly or partially")


class RankedJob(JobPosting):
    """Posting annotated with its match against the learner's skills"""
    match_score: int = Field(..., ge=0, le=100)
    matching_skills: List[str] = Field(default_factory=list)


class RoleMatch(BaseModel):
    """Role as seen while browsing, before one is selected"""
    model_config = ConfigDict(frozen=True)

    role: JobRole
    quick_match: float = Field(..., description="Matched plus partial credit percentage")
    overlap: int = Field(..., description="Percent of required skills owned at any level")
    time_to_ready: str


class AdjacentRole(BaseModel):
    """Role sharing requirements with the selected one"""
    model_config = ConfigDict(frozen=True)

    role: JobRole
    similarity: float = Field(..., ge=0.0, le=1.0)
