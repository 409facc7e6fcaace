"""Job/application reconciliation for the student dashboard."""

from __future__ import annotations

import logging
from collections.abc import Collection, Iterable, Sequence

from job_board.models.ids import EntityId
from job_board.models.job import Application, ApplicationStatus, Job
from job_board.models.stats import ReconciledJob, ReconciledStatus, ReconciledView

logger = logging.getLogger(__name__)


def percentage(part: int, whole: int) -> int:
    """Integer percentage rounded half-up; 0 when ``whole`` is 0."""
    if whole <= 0:
        return 0
    return (part * 200 + whole) // (whole * 2)


def index_applications(
    applications: Iterable[Application],
) -> dict[EntityId, Application]:
    """Map job id to its application, keeping the first one seen per job."""
    index: dict[EntityId, Application] = {}
    for app in applications:
        if app.job_id in index:
            logger.debug("Duplicate application %s for job %s ignored", app.id, app.job_id)
            continue
        index[app.job_id] = app
    return index


def _status(applied: bool, saved: bool) -> ReconciledStatus:
    if applied and saved:
        return ReconciledStatus.APPLIED_AND_SAVED
    if applied:
        return ReconciledStatus.APPLIED
    if saved:
        return ReconciledStatus.SAVED
    return ReconciledStatus.NOT_APPLIED


def reconcile(
    jobs: Sequence[Job],
    applications: Iterable[Application],
    saved_job_ids: Collection[EntityId],
) -> ReconciledView:
    """Tag every job with its application/save state and count the totals.

    Applications pointing at a job missing from ``jobs`` are skipped: the job
    may have been deleted after the student applied.
    """
    saved = set(saved_job_ids)
    by_job = index_applications(applications)
    job_ids = {job.id for job in jobs}

    orphans = [job_id for job_id in by_job if job_id not in job_ids]
    if orphans:
        logger.debug("Ignoring %d application(s) for unknown jobs: %s", len(orphans), orphans)

    entries = []
    for job in jobs:
        app = by_job.get(job.id)
        entries.append(
            ReconciledJob(
                job=job,
                status=_status(app is not None, job.id in saved),
                application=app,
            )
        )

    total = len(jobs)
    applied = sum(1 for job_id in by_job if job_id in job_ids)
    return ReconciledView(
        jobs=entries,
        total_jobs=total,
        applied_jobs=applied,
        saved_jobs=len(saved),
        success_rate=percentage(applied, total),
    )


def application_status_breakdown(
    applications: Iterable[Application],
) -> dict[ApplicationStatus, int]:
    """Count applications per status, with every status present."""
    breakdown = {status: 0 for status in ApplicationStatus}
    for app in applications:
        breakdown[app.status] += 1
    return breakdown
