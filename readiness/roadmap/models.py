"""Roadmap models"""
from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field

from ..progress.models import AnalysisProgress
from ..skills.models import LearningResource, SkillGapAnalysis, UserSkill


class RoadmapItem(BaseModel):
    """A single learnable skill in the learner's plan"""
    model_config = ConfigDict(frozen=True)

    id: str
    skill_id: str
    skill_name: str
    difficulty: str = Field("intermediate", description="Target level; drives the proficiency granted on completion")
    estimated_time: str = ""
    completed: bool = False
    resources: List[LearningResource] = Field(default_factory=list)


class RoadmapProgress(BaseModel):
    """Aggregate recomputed from the roadmap on every toggle"""
    model_config = ConfigDict(frozen=True)

    total_items: int
    completed_items: int
    progress: int = Field(..., ge=0, le=100, description="Completed percentage")

    @property
    def is_complete(self) -> bool:
        return self.total_items > 0 and self.completed_items == self.total_items


class ToggleResult(BaseModel):
    """State produced by one roadmap toggle.

    ``analysis`` and ``progress`` are None when the toggle un-completed an
    item, which never re-scores.
    """
    model_config = ConfigDict(frozen=True)

    item: RoadmapItem
    roadmap: List[RoadmapItem]
    roadmap_progress: RoadmapProgress
    inventory: List[UserSkill]
    analysis: Optional[SkillGapAnalysis] = None
    progress: Optional[AnalysisProgress] = None
