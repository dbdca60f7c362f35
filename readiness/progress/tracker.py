"""Turns successive skill-gap analyses into a readiness time series"""
from datetime import datetime, timezone
from typing import Optional

from .models import AnalysisProgress, ProgressEvent, ProgressEventType
from ..skills.models import SkillGapAnalysis
from ..utils import logger


def _now() -> datetime:
    return datetime.now(timezone.utc)


def init_progress(analysis: SkillGapAnalysis, timestamp: Optional[datetime] = None) -> AnalysisProgress:
    """Capture the baseline from the first analysis of a role"""
    timestamp = timestamp or _now()
    matched = len(analysis.matched_skills)

    logger.info(f"Initialized progress for role {analysis.role_id} at {analysis.readiness_score}%")

    return AnalysisProgress(
        role_id=analysis.role_id,
        initial_score=analysis.readiness_score,
        current_score=analysis.readiness_score,
        initial_matched_skills=matched,
        current_matched_skills=matched,
        completed_roadmap_items=0,
        progress_history=[],
        created_at=timestamp,
        last_updated=timestamp,
    )


def record_progress_event(
    progress: AnalysisProgress,
    analysis: SkillGapAnalysis,
    event: str,
    skill_id: Optional[str] = None,
    timestamp: Optional[datetime] = None,
) -> AnalysisProgress:
    """
    Append an event and re-derive current values against the baseline

    Identical calls append identical entries; deduplication is the
    caller's job.
    """
    if analysis.role_id != progress.role_id:
        raise ValueError(
            f"Analysis for role {analysis.role_id} cannot be recorded on progress for {progress.role_id}"
        )

    event = event.value if isinstance(event, ProgressEventType) else event
    timestamp = timestamp or _now()
    matched = len(analysis.matched_skills)

    entry = ProgressEvent(
        timestamp=timestamp,
        readiness_score=analysis.readiness_score,
        completed_skills=matched,
        event=event,
        skill_id=skill_id,
    )

    completed_items = progress.completed_roadmap_items
    if event == ProgressEventType.ROADMAP_COMPLETION.value:
        completed_items += 1

    updated = progress.model_copy(update={
        "current_score": analysis.readiness_score,
        "score_improvement": analysis.readiness_score - progress.initial_score,
        "current_matched_skills": matched,
        "skills_improvement": matched - progress.initial_matched_skills,
        "completed_roadmap_items": completed_items,
        "progress_history": [*progress.progress_history, entry],
        "last_updated": timestamp,
    })

    logger.info(
        f"Recorded {event} for role {progress.role_id}: "
        f"{progress.current_score}% -> {updated.current_score}% "
        f"({updated.score_improvement:+d} since start)"
    )
    return updated
