"""Per-learner state snapshot"""
from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field

from .progress.models import AnalysisProgress
from .roadmap.models import RoadmapItem
from .skills.models import JobRole, SkillGapAnalysis, UserSkill


class LearnerState(BaseModel):
    """Everything the engine knows about one learner at a point in time"""
    model_config = ConfigDict(frozen=True)

    learner_id: str
    inventory: List[UserSkill] = Field(default_factory=list)
    role: Optional[JobRole] = None
    roadmap: List[RoadmapItem] = Field(default_factory=list)
    analysis: Optional[SkillGapAnalysis] = None
    progress: Optional[AnalysisProgress] = None
