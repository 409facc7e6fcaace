"""Quick action catalog for the student dashboard."""

from __future__ import annotations

from job_board.models.actions import ActionFlags, PriorityTier, QuickAction
from job_board.models.base import validate_input


def _catalog(flags: ActionFlags) -> list[QuickAction]:
    pending = flags.pending_applications
    incomplete = flags.incomplete_profile
    needs_skills = flags.needs_skill_update
    return [
        QuickAction(
            id="browse-jobs",
            title="Browse Jobs",
            description="Find your next opportunity",
            priority_tier=PriorityTier.HIGH,
            target_link="/student/dashboard/jobs",
        ),
        QuickAction(
            id="view-applications",
            title="My Applications",
            description="Check pending applications" if pending else "Track your progress",
            priority_tier=PriorityTier.HIGH if pending else PriorityTier.MEDIUM,
            badge="Updates" if pending else None,
            target_link="/student/dashboard/applications",
        ),
        QuickAction(
            id="saved-jobs",
            title="Saved Jobs",
            description="Review bookmarked positions",
            priority_tier=PriorityTier.MEDIUM,
            target_link="/student/dashboard/saved-jobs",
        ),
        QuickAction(
            id="update-profile",
            title="Update Profile",
            description="Complete your profile" if incomplete else "Keep profile fresh",
            priority_tier=PriorityTier.HIGH if incomplete else PriorityTier.LOW,
            badge="Incomplete" if incomplete else None,
            target_link="/student/dashboard/profile",
        ),
        QuickAction(
            id="add-skills",
            title="Manage Skills",
            description="Add your skills" if needs_skills else "Update your expertise",
            priority_tier=PriorityTier.HIGH if needs_skills else PriorityTier.LOW,
            badge="Add Skills" if needs_skills else None,
            target_link="/student/dashboard/profile?tab=skills",
        ),
        QuickAction(
            id="add-experience",
            title="Add Experience",
            description="Showcase your background",
            priority_tier=PriorityTier.MEDIUM,
            target_link="/student/dashboard/profile?tab=experience",
        ),
    ]


def prioritize(flags: ActionFlags | dict | None = None) -> list[QuickAction]:
    """Return the six quick actions, highest tier first.

    Flag dicts may use snake_case or camelCase keys; unknown keys raise
    ValidationError. The sort is stable, so actions in the same tier stay in
    catalog order.
    """
    if flags is None:
        flags = ActionFlags()
    elif isinstance(flags, dict):
        flags = validate_input(ActionFlags, flags)
    return sorted(_catalog(flags), key=lambda a: a.priority_tier.rank, reverse=True)
