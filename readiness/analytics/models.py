"""Learning analytics models"""
from datetime import datetime
from typing import List, Optional
from pydantic import BaseModel, Field

from ..skills.proficiency import ProficiencyLevel


class LearningSession(BaseModel):
    """One logged study session"""
    id: str
    skill_id: str
    resource_id: Optional[str] = None
    start_time: datetime
    duration_minutes: float = Field(0, ge=0)
    completed: bool = False


class LearningInsight(BaseModel):
    type: str = Field(..., description="success, warning, info or error")
    title: str
    message: str
    action: Optional[str] = None
    priority: Optional[str] = Field(None, description="low, medium or high")


class LearningAnalytics(BaseModel):
    """Pace and habit summary for a learner's roadmap"""
    progress_percent: float
    learning_velocity: float = Field(..., description="Completed items per week")
    weeks_elapsed: int
    estimated_weeks_remaining: int
    estimated_completion_date: datetime
    completion_likelihood: int = Field(..., ge=5, le=95)
    is_on_track: bool
    recommended_pace: float = Field(..., description="Items per week")
    insights: List[LearningInsight] = Field(default_factory=list)
    total_time_spent_hours: float
    average_session_minutes: float
    current_streak: int = Field(..., description="Consecutive study days up to today")
    longest_streak: int


class SkillProgression(BaseModel):
    """Roadmap-driven progression for one owned skill"""
    skill_id: str
    current_level: ProficiencyLevel
    practical_projects: int = Field(0, description="Completed roadmap items for the skill")
    time_to_mastery_hours: float = 0
    last_completed: Optional[datetime] = None


class LearningROI(BaseModel):
    """Return on the time invested in closing a skill gap"""
    time_invested_hours: float
    skills_gained: int
    potential_salary_increase: float
    roi_percentage: float
    payback_period_months: float
