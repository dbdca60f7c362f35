"""Learning analytics over a roadmap and the learner's study sessions"""
import math
from datetime import date, datetime, timedelta, timezone
from typing import Iterable, List, Optional, Sequence, Tuple

import numpy as np

from .models import LearningAnalytics, LearningInsight, LearningROI, LearningSession, SkillProgression
from ..progress.models import AnalysisProgress, ProgressEventType
from ..roadmap.models import RoadmapItem
from ..roadmap.sync import roadmap_progress
from ..skills.models import UserSkill
from ..utils import clamp

WEEK = timedelta(days=7)
DEFAULT_WEEKS_REMAINING = 12
DEFAULT_HOURS_PER_COMPLETION = 20
HOURLY_OPPORTUNITY_COST = 25


def _aware(moment: datetime) -> datetime:
    return moment if moment.tzinfo else moment.replace(tzinfo=timezone.utc)


def completion_likelihood(
    progress_percent: float,
    velocity: float,
    weeks_elapsed: int,
    recent_sessions: int,
) -> int:
    """Heuristic chance (5-95) that the learner finishes the roadmap"""
    likelihood = 50

    if progress_percent > 10:
        likelihood += 15
    if progress_percent > 25:
        likelihood += 10
    if progress_percent > 50:
        likelihood += 15
    if progress_percent > 75:
        likelihood += 10

    if velocity > 1:
        likelihood += 10
    if velocity > 2:
        likelihood += 5
    if velocity < 0.5 and weeks_elapsed > 4:
        likelihood -= 15

    if recent_sessions > 5:
        likelihood += 10
    if recent_sessions == 0 and weeks_elapsed > 2:
        likelihood -= 20

    if weeks_elapsed < 2:
        likelihood += 5
    if weeks_elapsed > 12 and progress_percent < 50:
        likelihood -= 10

    return int(clamp(likelihood, 5, 95))


def learning_streaks(sessions: Iterable[LearningSession], today: date) -> Tuple[int, int]:
    """Current and longest runs of consecutive study days"""
    days = sorted({_aware(s.start_time).date() for s in sessions})
    if not days:
        return 0, 0

    longest = run = 0
    previous = None
    for day in days:
        run = run + 1 if previous is not None and day - previous == timedelta(days=1) else 1
        longest = max(longest, run)
        previous = day

    studied = set(days)
    current = 0
    # A streak stays alive until a full day is missed
    cursor = today if today in studied else today - timedelta(days=1)
    while cursor in studied:
        current += 1
        cursor -= timedelta(days=1)

    return current, longest


def learning_insights(
    progress_percent: float,
    velocity: float,
    weeks_elapsed: int,
    current_streak: int,
    total_hours: float,
) -> List[LearningInsight]:
    insights = []

    if progress_percent < 10 and weeks_elapsed > 2:
        insights.append(LearningInsight(
            type="warning", title="Slow Start", priority="high",
            message="Consider setting aside dedicated learning time each day to build momentum.",
            action="Set a daily learning goal",
        ))
    if 25 < progress_percent < 50 and velocity < 0.5:
        insights.append(LearningInsight(
            type="info", title="Maintain Momentum", priority="medium",
            message="You've made good progress! Try to maintain consistent learning to avoid plateaus.",
            action="Schedule regular learning sessions",
        ))
    if progress_percent > 50 and velocity > 1:
        insights.append(LearningInsight(
            type="success", title="Excellent Progress!", priority="low",
            message="You're ahead of schedule and learning at a great pace. Keep it up!",
            action="Consider mentoring others",
        ))
    if progress_percent > 80:
        insights.append(LearningInsight(
            type="success", title="Almost There!", priority="high",
            message="You're in the final stretch. Start preparing for job applications and portfolio updates.",
            action="Update resume and LinkedIn",
        ))
    if velocity > 2:
        insights.append(LearningInsight(
            type="success", title="Fast Learner", priority="medium",
            message="You're learning faster than average. Consider taking on more challenging projects.",
            action="Explore advanced topics",
        ))
    if velocity < 0.3 and weeks_elapsed > 4:
        insights.append(LearningInsight(
            type="warning", title="Learning Pace", priority="high",
            message="Your learning pace has slowed down. Consider adjusting your schedule or approach.",
            action="Review learning strategy",
        ))
    if current_streak > 7:
        insights.append(LearningInsight(
            type="success", title="Great Consistency!", priority="low",
            message=f"{current_streak} day learning streak! Consistency is key to mastering new skills.",
            action="Keep the streak alive",
        ))
    if current_streak == 0 and weeks_elapsed > 1:
        insights.append(LearningInsight(
            type="info", title="Get Back on Track", priority="medium",
            message="It's been a while since your last learning session. Even 15 minutes can help maintain momentum.",
            action="Start a quick learning session",
        ))
    if total_hours > 50:
        insights.append(LearningInsight(
            type="success", title="Dedicated Learner", priority="low",
            message=f"You've invested {round(total_hours)} hours in learning. That's impressive dedication!",
            action="Track your achievements",
        ))
    if total_hours < 5 and weeks_elapsed > 3:
        insights.append(LearningInsight(
            type="warning", title="More Practice Needed", priority="medium",
            message="Consider spending more time on hands-on practice to reinforce your learning.",
            action="Increase practice time",
        ))

    return insights


def calculate_learning_analytics(
    roadmap: Sequence[RoadmapItem],
    started_at: Optional[datetime] = None,
    sessions: Iterable[LearningSession] = (),
    now: Optional[datetime] = None,
) -> LearningAnalytics:
    """
    Summarize pace, projected completion and study habits for a roadmap

    Args:
        roadmap: Learner's roadmap
        started_at: When the learner started it; defaults to now
        sessions: Logged study sessions
        now: Reference time, defaults to the current UTC time

    Returns:
        LearningAnalytics
    """
    now = _aware(now or datetime.now(timezone.utc))
    started_at = _aware(started_at or now)
    sessions = list(sessions)

    aggregate = roadmap_progress(roadmap)
    total, completed = aggregate.total_items, aggregate.completed_items
    progress_percent = 100 * completed / total if total else 0.0

    weeks_elapsed = max(1, math.ceil((now - started_at) / WEEK))
    velocity = completed / weeks_elapsed

    remaining = total - completed
    weeks_remaining = math.ceil(remaining / velocity) if velocity > 0 else DEFAULT_WEEKS_REMAINING

    recent = sum(1 for s in sessions if _aware(s.start_time) > now - timedelta(days=14))
    durations = [s.duration_minutes for s in sessions]
    total_hours = float(np.sum(durations)) / 60 if durations else 0.0
    average_minutes = float(np.mean(durations)) if durations else 0.0

    current_streak, longest_streak = learning_streaks(sessions, now.date())

    target_weeks = max(8, total * 0.5)
    recommended_pace = total / target_weeks

    return LearningAnalytics(
        progress_percent=progress_percent,
        learning_velocity=velocity,
        weeks_elapsed=weeks_elapsed,
        estimated_weeks_remaining=weeks_remaining,
        estimated_completion_date=now + weeks_remaining * WEEK,
        completion_likelihood=completion_likelihood(progress_percent, velocity, weeks_elapsed, recent),
        is_on_track=velocity >= recommended_pace * 0.8,
        recommended_pace=recommended_pace,
        insights=learning_insights(progress_percent, velocity, weeks_elapsed, current_streak, total_hours),
        total_time_spent_hours=total_hours,
        average_session_minutes=average_minutes,
        current_streak=current_streak,
        longest_streak=longest_streak,
    )


def analyze_skill_progression(
    inventory: Sequence[UserSkill],
    progress: Optional[AnalysisProgress] = None,
    hours_per_completion: float = DEFAULT_HOURS_PER_COMPLETION,
) -> List[SkillProgression]:
    """Count roadmap completions per owned skill from the progress history"""
    completions = {}
    if progress is not None:
        for event in progress.progress_history:
            if event.event == ProgressEventType.ROADMAP_COMPLETION.value and event.skill_id:
                completions.setdefault(event.skill_id, []).append(event.timestamp)

    result = []
    for skill in inventory:
        stamps = completions.get(skill.id, [])
        result.append(SkillProgression(
            skill_id=skill.id,
            current_level=skill.proficiency,
            practical_projects=len(stamps),
            time_to_mastery_hours=len(stamps) * hours_per_completion,
            last_completed=max(stamps) if stamps else None,
        ))
    return result


def calculate_learning_roi(
    time_invested_hours: float,
    skills_gained: int,
    current_salary: float,
    target_salary: float,
    hourly_cost: float = HOURLY_OPPORTUNITY_COST,
) -> LearningROI:
    """
    Compare the salary gain of a target role with the cost of study time

    Args:
        time_invested_hours: Hours spent learning
        skills_gained: Skills acquired along the way
        current_salary: Current yearly salary
        target_salary: Expected yearly salary in the target role
        hourly_cost: Opportunity cost of one study hour

    Returns:
        LearningROI; ROI and payback are 0 when undefined
    """
    increase = target_salary - current_salary
    cost_of_time = time_invested_hours * hourly_cost
    roi = 100 * increase / cost_of_time if cost_of_time > 0 else 0.0
    payback = cost_of_time / (increase / 12) if increase > 0 else 0.0

    return LearningROI(
        time_invested_hours=time_invested_hours,
        skills_gained=skills_gained,
        potential_salary_increase=increase,
        roi_percentage=roi,
        payback_period_months=payback,
    )
