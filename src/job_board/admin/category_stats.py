"""Per-category job and application statistics for the admin view."""

from __future__ import annotations

import csv
import io
import logging
from collections import Counter
from collections.abc import Iterable, Sequence
from datetime import datetime, timedelta

from job_board.errors import CategoryNotFoundError
from job_board.models.ids import EntityId
from job_board.models.job import Application, Category, Job, JobStatus
from job_board.models.stats import CategoryOverview, CategoryStats, JobTypeCount

logger = logging.getLogger(__name__)

CSV_HEADERS = [
    "ID",
    "Name",
    "Status",
    "Total Jobs",
    "Active Jobs",
    "Total Applications",
    "Created At",
]


def aggregate(
    category: Category | None,
    jobs: Iterable[Job],
    applications: Iterable[Application],
) -> CategoryStats:
    """Count jobs, active jobs, applications and job types in one category.

    A category with no jobs yields zero-filled stats. A missing category
    (``None``) is the caller's mistake and raises CategoryNotFoundError.
    """
    if category is None:
        raise CategoryNotFoundError(None)

    own_jobs = [job for job in jobs if job.category_id == category.id]
    job_ids = {job.id for job in own_jobs}

    # Counter keeps first-seen order, and sorted() is stable
    types = Counter(job.job_type for job in own_jobs)
    distribution = [
        JobTypeCount(job_type=job_type, count=count)
        for job_type, count in sorted(types.items(), key=lambda kv: kv[1], reverse=True)
    ]

    return CategoryStats(
        category=category,
        job_count=len(own_jobs),
        active_job_count=sum(1 for job in own_jobs if job.status == JobStatus.ACTIVE),
        total_applications=sum(1 for app in applications if app.job_id in job_ids),
        job_type_distribution=distribution,
    )


def find_category(categories: Iterable[Category], category_id: EntityId) -> Category:
    for category in categories:
        if category.id == category_id:
            return category
    raise CategoryNotFoundError(category_id)


def aggregate_by_id(
    category_id: EntityId,
    categories: Iterable[Category],
    jobs: Iterable[Job],
    applications: Iterable[Application],
) -> CategoryStats:
    return aggregate(find_category(categories, category_id), jobs, applications)


def overview(
    categories: Sequence[Category],
    jobs: Sequence[Job],
    applications: Sequence[Application],
    *,
    now: datetime | None = None,
    recent_days: int = 30,
    top: int = 5,
) -> CategoryOverview:
    """Totals across all categories plus the busiest ones by job count."""
    now = now or datetime.now()
    cutoff = now - timedelta(days=recent_days)

    active = sum(1 for c in categories if c.is_active)
    recent = sum(
        1 for c in categories if c.created_at is not None and _after(c.created_at, cutoff)
    )
    per_category = [aggregate(c, jobs, applications) for c in categories]
    top_performing = sorted(per_category, key=lambda s: s.job_count, reverse=True)[:top]

    return CategoryOverview(
        total_categories=len(categories),
        active_categories=active,
        inactive_categories=len(categories) - active,
        recent_categories=recent,
        total_jobs=len(jobs),
        total_applications=len(applications),
        average_jobs_per_category=round(len(jobs) / active, 2) if active else 0.0,
        top_performing=top_performing,
    )


def _after(value: datetime, cutoff: datetime) -> bool:
    # Snapshots may mix aware and naive timestamps; compare on the wall clock
    if (value.tzinfo is None) != (cutoff.tzinfo is None):
        value = value.replace(tzinfo=cutoff.tzinfo)
    return value >= cutoff


def export_csv(
    categories: Sequence[Category],
    jobs: Sequence[Job],
    applications: Sequence[Application],
) -> str:
    """Render all categories with their counts as CSV, newest first."""
    ordered = sorted(
        categories,
        key=lambda c: (
            c.created_at is not None,
            c.created_at.timestamp() if c.created_at else 0.0,
        ),
        reverse=True,
    )
    buf = io.StringIO()
    writer = csv.writer(buf, lineterminator="\n")
    writer.writerow(CSV_HEADERS)
    for category in ordered:
        stats = aggregate(category, jobs, applications)
        writer.writerow([
            category.id,
            category.name,
            "Active" if category.is_active else "Inactive",
            stats.job_count,
            stats.active_job_count,
            stats.total_applications,
            category.created_at.isoformat() if category.created_at else "",
        ])
    logger.info("Exported %d categories to CSV", len(ordered))
    return buf.getvalue()
