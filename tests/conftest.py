"""Shared test fixtures."""

from __future__ import annotations

from datetime import datetime

import pytest

from job_board.models.job import (
    Application,
    ApplicationStatus,
    Category,
    Job,
    JobStatus,
)
from job_board.models.profile import DashboardSnapshot, StudentProfile
from job_board.models.skill import Skill, SkillLevel
from job_board.skills.registry import SkillRegistry


@pytest.fixture
def sample_categories() -> list[Category]:
    return [
        Category(id="cat-eng", name="Engineering", created_at=datetime(2025, 1, 10)),
        Category(id="cat-design", name="Design", created_at=datetime(2025, 3, 1)),
        Category(
            id="cat-legacy",
            name="Legacy",
            is_active=False,
            created_at=datetime(2024, 6, 1),
        ),
    ]


@pytest.fixture
def sample_jobs() -> list[Job]:
    return [
        Job(
            id="job-1",
            title="Backend Intern",
            company_name="Acme",
            job_type="INTERNSHIP",
            category_id="cat-eng",
            created_at=datetime(2025, 3, 1),
        ),
        Job(
            id="job-2",
            title="Frontend Contractor",
            company_name="Globex",
            job_type="CONTRACT",
            category_id="cat-eng",
            created_at=datetime(2025, 3, 5),
        ),
        Job(
            id="job-3",
            title="Data Analyst",
            company_name="Initech",
            job_type="PART_TIME",
            status=JobStatus.CLOSED,
            category_id="cat-eng",
            created_at=datetime(2025, 2, 1),
        ),
        Job(
            id="job-4",
            title="UI Designer",
            company_name="Umbrella",
            job_type="INTERNSHIP",
            category_id="cat-design",
            created_at=datetime(2025, 3, 10),
        ),
        Job(
            id="job-5",
            title="Platform Intern",
            company_name="Hooli",
            job_type="INTERNSHIP",
            category_id="cat-eng",
            created_at=datetime(2025, 1, 20),
        ),
    ]


@pytest.fixture
def sample_applications() -> list[Application]:
    return [
        Application(
            id="app-1",
            job_id="job-1",
            student_id="stu-1",
            created_at=datetime(2025, 3, 2),
        ),
        Application(
            id="app-2",
            job_id="job-3",
            student_id="stu-1",
            status=ApplicationStatus.REJECTED,
            created_at=datetime(2025, 2, 10),
        ),
    ]


@pytest.fixture
def sample_skills() -> list[Skill]:
    return [
        Skill(id="sk-1", profile_id="stu-1", name="Python", level=SkillLevel.ADVANCED,
              years_of_experience=3),
        Skill(id="sk-2", profile_id="stu-1", name="Figma", level=SkillLevel.BEGINNER),
    ]


@pytest.fixture
def complete_profile() -> StudentProfile:
    return StudentProfile(
        id="stu-1",
        full_name="Jamie Rivera",
        phone_number="555-0100",
        location="Lisbon",
        university="Tech University",
        major="Computer Science",
        about="Backend-leaning CS student",
        experience_count=1,
    )


@pytest.fixture
def sample_snapshot(
    complete_profile, sample_jobs, sample_applications, sample_skills, sample_categories
) -> DashboardSnapshot:
    return DashboardSnapshot(
        profile=complete_profile,
        jobs=sample_jobs,
        applications=sample_applications,
        saved_job_ids=["job-2", "job-3"],
        skills=sample_skills,
        categories=sample_categories,
        affinities={"Figma": ["cat-design"]},
    )


@pytest.fixture
def registry(tmp_path) -> SkillRegistry:
    return SkillRegistry(db_path=tmp_path / "skills.db")
