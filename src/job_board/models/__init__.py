"""Data models for the job board core."""

from job_board.models.actions import ActionFlags, PriorityTier, QuickAction
from job_board.models.ids import EntityId
from job_board.models.job import (
    Application,
    ApplicationStatus,
    Category,
    Job,
    JobStatus,
)
from job_board.models.profile import (
    DashboardSnapshot,
    ProfileCompleteness,
    StudentDashboard,
    StudentProfile,
)
from job_board.models.skill import (
    LevelInfo,
    Skill,
    SkillInput,
    SkillLevel,
    SkillPatch,
)
from job_board.models.stats import (
    CategoryOverview,
    CategoryStats,
    JobTypeCount,
    ReconciledJob,
    ReconciledStatus,
    ReconciledView,
)

__all__ = [
    "ActionFlags",
    "Application",
    "ApplicationStatus",
    "Category",
    "CategoryOverview",
    "CategoryStats",
    "DashboardSnapshot",
    "EntityId",
    "Job",
    "JobStatus",
    "JobTypeCount",
    "LevelInfo",
    "PriorityTier",
    "ProfileCompleteness",
    "QuickAction",
    "ReconciledJob",
    "ReconciledStatus",
    "ReconciledView",
    "Skill",
    "SkillInput",
    "SkillLevel",
    "SkillPatch",
    "StudentDashboard",
    "StudentProfile",
]
