"""Fuzzy matching of learner skills against job posting tags"""
from typing import Iterable, List, Mapping, Union

from .models import JobMatch, JobPosting, RankedJob
from ..skills.models import UserSkill
from ..utils import clamp, config, logger, monitor, round_half_up

JobLike = Union[JobPosting, Mapping]


def _as_posting(job: JobLike) -> JobPosting:
    return job if isinstance(job, JobPosting) else JobPosting.model_validate(job)


def match_job(job: JobLike, inventory: Iterable[UserSkill]) -> JobMatch:
    """
    Score one posting against the learner's skill names

    Exact matches are case-insensitive equal; partial matches contain or are
    contained by a skill name. A posting without tags gets the neutral score.
    """
    job = _as_posting(job)
    if not job.skills:
        return JobMatch(match_score=config.neutral_job_score)

    names = {s.name.strip().lower() for s in inventory if s.name.strip()}
    weights = config.matching_weights

    exact, partial, matching = 0, 0, []
    for tag in job.skills:
        needle = tag.strip().lower()
        if not needle:
            continue
        if needle in names:
            exact += 1
            matching.append(tag)
        elif any(needle in name or name in needle for name in names):
            partial += 1
            matching.append(tag)

    weighted = weights.get("exact", 1.0) * exact + weights.get("partial", 0.6) * partial
    score = round_half_up(100 * weighted / max(1, len(job.skills)))

    return JobMatch(
        exact_count=exact,
        partial_count=partial,
        match_score=int(clamp(score, 0, 100)),
        matching_skills=matching,
    )


def _rank_key(job: RankedJob):
    posted = job.posted_date.timestamp() if job.posted_date else float("-inf")
    return (-job.match_score, -posted)


@monitor.measure
def rank_jobs(jobs: Iterable[JobLike], inventory: Iterable[UserSkill]) -> List[RankedJob]:
    """Annotate postings with their match and sort best first, newest first on ties"""
    inventory = list(inventory)
    results = []

    for job in jobs:
        job = _as_posting(job)
        match = match_job(job, inventory)
        data = job.model_dump(exclude={"match_score", "matching_skills"})
        results.append(RankedJob(
            **data,
            match_score=match.match_score,
            matching_skills=match.matching_skills,
        ))
        logger.debug(
            f"Matched {job.job_id}: exact={match.exact_count}, "
            f"partial={match.partial_count}, score={match.match_score}"
        )

    results.sort(key=_rank_key)

    logger.info(f"Ranked {len(results)} jobs. Top score: {results[0].match_score if results else 0}")
    return results
