"""Student skill storage and level metadata."""

from job_board.skills.levels import LEVELS, classify, sort_by_level
from job_board.skills.registry import SkillRegistry

__all__ = ["LEVELS", "SkillRegistry", "classify", "sort_by_level"]
