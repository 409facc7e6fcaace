"""Pydantic models for derived dashboard and admin statistics.

None of these are persisted; they are recomputed from the current jobs and
applications every time.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel

from job_board.models.ids import EntityId
from job_board.models.job import Application, Category, Job


class ReconciledStatus(str, Enum):
    NOT_APPLIED = "NOT_APPLIED"
    APPLIED = "APPLIED"
    SAVED = "SAVED"
    APPLIED_AND_SAVED = "APPLIED_AND_SAVED"


class ReconciledJob(BaseModel):
    job: Job
    status: ReconciledStatus
    application: Application | None = None


class ReconciledView(BaseModel):
    jobs: list[ReconciledJob]
    total_jobs: int
    applied_jobs: int
    saved_jobs: int
    success_rate: int  # 0-100

    def status_of(self, job_id: EntityId) -> ReconciledStatus | None:
        for entry in self.jobs:
            if entry.job.id == job_id:
                return entry.status
        return None

    def application_for(self, job_id: EntityId) -> Application | None:
        for entry in self.jobs:
            if entry.job.id == job_id:
                return entry.application
        return None


class JobTypeCount(BaseModel):
    job_type: str
    count: int


class CategoryStats(BaseModel):
    category: Category
    job_count: int
    active_job_count: int
    total_applications: int
    job_type_distribution: list[JobTypeCount]


class CategoryOverview(BaseModel):
    total_categories: int
    active_categories: int
    inactive_categories: int
    recent_categories: int
    total_jobs: int
    total_applications: int
    average_jobs_per_category: float
    top_performing: list[CategoryStats]
