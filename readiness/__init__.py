"""Skill-gap readiness and progress engine"""
from .errors import (
    ReadinessError,
    InvalidLevel,
    NoRoleSelected,
    ItemNotFound,
    SkillNotInInventory,
    PersistenceFailure,
)
from .skills import (
    ProficiencyLevel,
    Skill,
    UserSkill,
    RoleRequirement,
    JobRole,
    LearningResource,
    SkillGapAnalysis,
    rank,
    meets,
    score_skill_gap,
    quick_match_percentage,
)
from .progress import AnalysisProgress, ProgressEvent, init_progress, record_progress_event
from .roadmap import RoadmapItem, RoadmapProgress, ToggleResult, generate_roadmap, toggle_roadmap_item
from .recommendation import JobPosting, RankedJob, rank_jobs, browse_roles, adjacent_roles
from .analytics import calculate_learning_analytics
from .catalog import Catalog, load_catalog
from .models import LearnerState
from .session import LearnerSession, SessionRegistry
from .storage import LearnerStateStore

__all__ = [
    "ReadinessError", "InvalidLevel", "NoRoleSelected", "ItemNotFound",
    "SkillNotInInventory", "PersistenceFailure",
    "ProficiencyLevel", "Skill", "UserSkill", "RoleRequirement", "JobRole", "LearningResource",
    "SkillGapAnalysis", "rank", "meets", "score_skill_gap", "quick_match_percentage",
    "AnalysisProgress", "ProgressEvent", "init_progress", "record_progress_event",
    "RoadmapItem", "RoadmapProgress", "ToggleResult", "generate_roadmap", "toggle_roadmap_item",
    "JobPosting", "RankedJob", "rank_jobs", "browse_roles", "adjacent_roles",
    "calculate_learning_analytics",
    "Catalog", "load_catalog", "LearnerState",
    "LearnerSession", "SessionRegistry", "LearnerStateStore",
]
