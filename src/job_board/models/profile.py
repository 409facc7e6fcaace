"""Pydantic models for the student profile and the dashboard snapshot."""

from __future__ import annotations

from pydantic import BaseModel, Field

from job_board.models.actions import QuickAction
from job_board.models.base import ApiModel
from job_board.models.ids import EntityId
from job_board.models.job import Application, ApplicationStatus, Category, Job
from job_board.models.skill import Skill
from job_board.models.stats import ReconciledView


class StudentProfile(ApiModel):
    id: EntityId
    full_name: str | None = None
    phone_number: str | None = None
    location: str | None = None
    university: str | None = None
    major: str | None = None
    about: str | None = None
    experience_count: int = 0


class ProfileCompleteness(BaseModel):
    percentage: int  # 0-100
    level: str  # "Excellent", "Good", "Average", "Needs Work"
    missing_fields: list[str]


class DashboardSnapshot(ApiModel):
    """Everything the dashboard needs, already fetched by the API layer."""

    profile: StudentProfile
    jobs: list[Job] = []
    applications: list[Application] = []
    saved_job_ids: list[EntityId] = []
    skills: list[Skill] = []
    categories: list[Category] = []
    # skill name -> category ids, supplied by the profile matcher
    affinities: dict[str, list[EntityId]] = Field(default_factory=dict)


class StudentDashboard(BaseModel):
    view: ReconciledView
    status_breakdown: dict[ApplicationStatus, int]
    completeness: ProfileCompleteness
    quick_actions: list[QuickAction]
    recommendations: list[Job]
    recent_applications: list[Application]
