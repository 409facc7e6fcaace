"""Display metadata and ordering for skill levels."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from job_board.models.skill import LevelInfo, Skill, SkillLevel

logger = logging.getLogger(__name__)

LEVELS: dict[SkillLevel, LevelInfo] = {
    SkillLevel.BEGINNER: LevelInfo(level=SkillLevel.BEGINNER, label="Beginner", rank=1),
    SkillLevel.INTERMEDIATE: LevelInfo(
        level=SkillLevel.INTERMEDIATE, label="Intermediate", rank=2
    ),
    SkillLevel.ADVANCED: LevelInfo(level=SkillLevel.ADVANCED, label="Advanced", rank=3),
    SkillLevel.EXPERT: LevelInfo(level=SkillLevel.EXPERT, label="Expert", rank=4),
}


def classify(level: SkillLevel | str | None) -> LevelInfo:
    """Return display metadata for a level.

    Unknown values fall back to BEGINNER. Writes already reject them, so this
    only happens for rows stored before the enumeration was enforced.
    """
    try:
        key = SkillLevel(level.strip().upper() if isinstance(level, str) else level)
    except ValueError:
        logger.debug("Unknown skill level %r, using BEGINNER metadata", level)
        return LEVELS[SkillLevel.BEGINNER]
    return LEVELS[key]


def sort_by_level(skills: Sequence[Skill]) -> list[Skill]:
    """Highest level first; equal levels keep their input order."""
    return sorted(skills, key=lambda s: classify(s.level).rank, reverse=True)
