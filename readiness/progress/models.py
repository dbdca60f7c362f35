"""Progress tracking models"""
from datetime import datetime
from enum import Enum
from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field


class ProgressEventType(str, Enum):
    ROADMAP_COMPLETION = "roadmap_completion"
    SKILL_ADDED = "skill_added"
    SKILL_UPDATED = "skill_updated"
    SKILL_REMOVED = "skill_removed"
    REANALYSIS = "reanalysis"


class ProgressEvent(BaseModel):
    """One entry of the append-only progress history"""
    model_config = ConfigDict(frozen=True)

    timestamp: datetime
    readiness_score: int
    completed_skills: int = Field(..., description="Matched skill count after the event")
    event: str
    skill_id: Optional[str] = None


class AnalysisProgress(BaseModel):
    """Readiness time series for one (learner, role) pair"""
    model_config = ConfigDict(frozen=True)

    role_id: str
    initial_score: int
    current_score: int
    score_improvement: int = 0
    initial_matched_skills: int
    current_matched_skills: int
    skills_improvement: int = 0
    completed_roadmap_items: int = 0
    progress_history: List[ProgressEvent] = Field(default_factory=list)
    created_at: datetime
    last_updated: datetime
