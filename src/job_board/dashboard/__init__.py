"""Student dashboard logic: reconciliation, ranking and quick actions."""

from job_board.dashboard.prioritizer import prioritize
from job_board.dashboard.ranker import affinity_from_mapping, recommend, score_job
from job_board.dashboard.reconciler import application_status_breakdown, reconcile
from job_board.dashboard.summary import DashboardBuilder, profile_completeness

__all__ = [
    "DashboardBuilder",
    "affinity_from_mapping",
    "application_status_breakdown",
    "prioritize",
    "profile_completeness",
    "reconcile",
    "recommend",
    "score_job",
]
