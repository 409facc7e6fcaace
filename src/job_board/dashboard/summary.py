"""Assembles the student dashboard from an already-fetched snapshot."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence

from job_board.config import AppConfig
from job_board.dashboard.prioritizer import prioritize
from job_board.dashboard.ranker import affinity_from_mapping, recommend
from job_board.dashboard.reconciler import (
    application_status_breakdown,
    percentage,
    reconcile,
)
from job_board.models.actions import ActionFlags
from job_board.models.job import Application, ApplicationStatus
from job_board.models.profile import (
    DashboardSnapshot,
    ProfileCompleteness,
    StudentDashboard,
    StudentProfile,
)
from job_board.models.skill import Skill

logger = logging.getLogger(__name__)

COMPLETION_LEVELS: list[tuple[int, str]] = [
    (90, "Excellent"),
    (70, "Good"),
    (50, "Average"),
]


def completion_level(percent: int) -> str:
    for threshold, label in COMPLETION_LEVELS:
        if percent >= threshold:
            return label
    return "Needs Work"


def profile_completeness(profile: StudentProfile, skill_count: int) -> ProfileCompleteness:
    """Share of the eight profile fields a student has filled in."""
    fields = {
        "full_name": bool(profile.full_name),
        "phone_number": bool(profile.phone_number),
        "location": bool(profile.location),
        "university": bool(profile.university),
        "major": bool(profile.major),
        "about": bool(profile.about),
        "skills": skill_count > 0,
        "experience": profile.experience_count > 0,
    }
    filled = sum(fields.values())
    percent = percentage(filled, len(fields))
    return ProfileCompleteness(
        percentage=percent,
        level=completion_level(percent),
        missing_fields=[name for name, ok in fields.items() if not ok],
    )


def derive_flags(
    completeness: ProfileCompleteness,
    applications: Iterable[Application],
    skills: Sequence[Skill],
) -> ActionFlags:
    return ActionFlags(
        incomplete_profile=completeness.percentage < 100,
        pending_applications=any(
            app.status == ApplicationStatus.PENDING for app in applications
        ),
        needs_skill_update=not skills,
    )


def _recent(applications: Sequence[Application], limit: int) -> list[Application]:
    # Newest first; undated applications last
    ordered = sorted(
        applications,
        key=lambda a: (
            a.created_at is not None,
            a.created_at.timestamp() if a.created_at else 0.0,
        ),
        reverse=True,
    )
    return ordered[:limit]


class DashboardBuilder:
    """Builds the student dashboard view model from a snapshot."""

    def __init__(self, config: AppConfig | None = None):
        self.config = config or AppConfig()

    def build(self, snapshot: DashboardSnapshot, *, limit: int | None = None) -> StudentDashboard:
        view = reconcile(snapshot.jobs, snapshot.applications, snapshot.saved_job_ids)
        completeness = profile_completeness(snapshot.profile, len(snapshot.skills))
        flags = derive_flags(completeness, snapshot.applications, snapshot.skills)

        affinity = affinity_from_mapping(snapshot.affinities) if snapshot.affinities else None
        recommendations = recommend(
            snapshot.jobs,
            {app.job_id for app in snapshot.applications},
            snapshot.skills,
            limit,
            affinity=affinity,
            weights=self.config.ranking,
        )

        logger.info(
            "Dashboard for profile %s: %d jobs, %d applied, %d saved, %d recommended",
            snapshot.profile.id,
            view.total_jobs,
            view.applied_jobs,
            view.saved_jobs,
            len(recommendations),
        )
        return StudentDashboard(
            view=view,
            status_breakdown=application_status_breakdown(snapshot.applications),
            completeness=completeness,
            quick_actions=prioritize(flags),
            recommendations=recommendations,
            recent_applications=_recent(
                snapshot.applications, self.config.dashboard.recent_limit
            ),
        )
