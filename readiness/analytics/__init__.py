"""Learning analytics"""
from .learning import (
    analyze_skill_progression,
    calculate_learning_analytics,
    calculate_learning_roi,
    completion_likelihood,
    learning_insights,
    learning_streaks,
)
from .models import LearningAnalytics, LearningInsight, LearningROI, LearningSession, SkillProgression

__all__ = [
    "analyze_skill_progression", "calculate_learning_analytics", "calculate_learning_roi",
    "completion_likelihood", "learning_insights", "learning_streaks",
    "LearningAnalytics", "LearningInsight", "LearningROI", "LearningSession", "SkillProgression",
]
