"""Pydantic models for jobs, applications and categories."""

from __future__ import annotations

from datetime import datetime
from enum import Enum

from pydantic import AliasChoices, Field, field_validator

from job_board.models.base import ApiModel
from job_board.models.ids import EntityId


class JobStatus(str, Enum):
    DRAFT = "DRAFT"
    ACTIVE = "ACTIVE"
    PAUSED = "PAUSED"
    CLOSED = "CLOSED"
    EXPIRED = "EXPIRED"


class ApplicationStatus(str, Enum):
    PENDING = "PENDING"
    REVIEWED = "REVIEWED"
    INTERVIEW_SCHEDULED = "INTERVIEW_SCHEDULED"
    ACCEPTED = "ACCEPTED"
    REJECTED = "REJECTED"
    WITHDRAWN = "WITHDRAWN"


class Job(ApiModel):
    id: EntityId
    title: str = ""
    company_name: str = ""
    job_type: str = ""  # PART_TIME, CONTRACT, INTERNSHIP, FREELANCE, REMOTE
    status: JobStatus = JobStatus.ACTIVE
    category_id: EntityId | None = None
    created_at: datetime | None = None


class Application(ApiModel):
    id: EntityId
    job_id: EntityId
    student_id: EntityId | None = None
    status: ApplicationStatus = ApplicationStatus.PENDING
    created_at: datetime | None = Field(
        default=None,
        validation_alias=AliasChoices("created_at", "createdAt", "appliedAt"),
    )


class Category(ApiModel):
    id: EntityId
    name: str = Field(min_length=1)
    is_active: bool = True
    created_at: datetime | None = None

    @field_validator("name", mode="before")
    @classmethod
    def _strip_name(cls, value: object) -> object:
        if isinstance(value, str):
            return value.strip()
        return value
