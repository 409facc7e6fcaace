"""Recommendation ranking for jobs the student has not applied to yet."""

from __future__ import annotations

from collections.abc import Callable, Collection, Mapping, Sequence

from job_board.config import RankingConfig
from job_board.errors import ValidationError
from job_board.models.ids import EntityId
from job_board.models.job import Job, JobStatus
from job_board.models.skill import Skill

# Does this job's category correlate with these skills? Supplied by the
# profile matcher; the ranker only consumes the answer.
AffinityPredicate = Callable[[Job, Sequence[Skill]], bool]


def affinity_from_mapping(
    mapping: Mapping[str, Collection[EntityId]],
) -> AffinityPredicate:
    """Build a predicate from a skill name -> category ids mapping."""
    table = {name.strip().lower(): set(ids) for name, ids in mapping.items()}

    def predicate(job: Job, skills: Sequence[Skill]) -> bool:
        if job.category_id is None:
            return False
        return any(
            job.category_id in table.get(skill.name.strip().lower(), ())
            for skill in skills
        )

    return predicate


def score_job(
    job: Job,
    skills: Sequence[Skill],
    affinity: AffinityPredicate | None = None,
    weights: RankingConfig | None = None,
) -> int:
    weights = weights or RankingConfig()
    score = 0
    if affinity is not None and affinity(job, skills):
        score += weights.category_affinity_weight
    if job.status == JobStatus.ACTIVE:
        score += weights.active_weight
    return score


def recommend(
    candidate_jobs: Sequence[Job],
    applied_job_ids: Collection[EntityId],
    skills: Sequence[Skill],
    limit: int | None = None,
    *,
    affinity: AffinityPredicate | None = None,
    weights: RankingConfig | None = None,
) -> list[Job]:
    """Rank candidate jobs and return at most ``limit`` of them.

    Already-applied jobs are never returned. Higher score first, then newer
    ``created_at`` first; jobs without a date come after dated ones and any
    remaining ties keep their input order, so equal inputs always give the
    same output.
    """
    weights = weights or RankingConfig()
    if limit is None:
        limit = weights.default_limit
    if limit < 0:
        raise ValidationError("limit", f"must be >= 0, got {limit}")

    applied = set(applied_job_ids)
    scored = [
        (score_job(job, skills, affinity, weights), job)
        for job in candidate_jobs
        if job.id not in applied
    ]

    def sort_key(item: tuple[int, Job]) -> tuple[int, int, float]:
        score, job = item
        if job.created_at is None:
            return (-score, 1, 0.0)
        return (-score, 0, -job.created_at.timestamp())

    scored.sort(key=sort_key)
    return [job for _, job in scored[:limit]]
