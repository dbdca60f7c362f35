"""Job and role recommendation"""
from .matcher import match_job, rank_jobs
from .roles import adjacent_roles, browse_roles, role_overlap, time_to_ready
from .models import AdjacentRole, JobMatch, JobPosting, RankedJob, RoleMatch

__all__ = [
    "match_job", "rank_jobs",
    "adjacent_roles", "browse_roles", "role_overlap", "time_to_ready",
    "AdjacentRole", "JobMatch", "JobPosting", "RankedJob", "RoleMatch",
]
