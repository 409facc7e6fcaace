"""SQLite-backed skill registry, one row per student skill."""

from __future__ import annotations

import logging
import sqlite3
import uuid
from contextlib import contextmanager
from datetime import datetime
from pathlib import Path
from typing import Iterator

from job_board.errors import NotFoundError, ValidationError
from job_board.models.base import validate_input
from job_board.models.ids import EntityId
from job_board.models.skill import Skill, SkillInput, SkillPatch

logger = logging.getLogger(__name__)

DEFAULT_DB_PATH = Path.home() / ".job-board" / "skills.db"
DEFAULT_MAX_YEARS = 50
DEFAULT_MAX_SKILLS = 20


class SkillRegistry:
    """Stores and validates skills, scoped by student profile.

    Profile ids are stored as text, so skills read back carry a ``str``
    ``profile_id`` whatever type the caller passed in.
    """

    def __init__(
        self,
        db_path: str | Path = DEFAULT_DB_PATH,
        *,
        max_years: int = DEFAULT_MAX_YEARS,
        max_skills: int = DEFAULT_MAX_SKILLS,
    ):
        self.db_path = Path(db_path)
        self.max_years = max_years
        self.max_skills = max_skills
        self.db_path.parent.mkdir(parents=True, exist_ok=True)
        self._init_db()

    @contextmanager
    def _connect(self) -> Iterator[sqlite3.Connection]:
        """Open a connection for one operation: commit on success, then close."""
        conn = sqlite3.connect(str(self.db_path))
        try:
            with conn:
                yield conn
        finally:
            conn.close()

    def _init_db(self) -> None:
        with self._connect() as conn:
            conn.execute("""
                CREATE TABLE IF NOT EXISTS skills (
                    id TEXT PRIMARY KEY,
                    profile_id TEXT NOT NULL,
                    name TEXT NOT NULL,
                    level TEXT NOT NULL,
                    years_of_experience INTEGER NOT NULL DEFAULT 0,
                    created_at TEXT NOT NULL
                )
            """)
            conn.execute(
                "CREATE INDEX IF NOT EXISTS idx_skills_profile ON skills (profile_id)"
            )

    def _check_years(self, years: int | None) -> None:
        if years is not None and years > self.max_years:
            raise ValidationError(
                "years_of_experience",
                f"must be between 0 and {self.max_years}, got {years}",
            )

    def add_skill(self, profile_id: EntityId, data: SkillInput | dict) -> Skill:
        """Validate and store a new skill for a profile."""
        skill_input = validate_input(SkillInput, data)
        self._check_years(skill_input.years_of_experience)

        key = str(profile_id)
        with self._connect() as conn:
            count = conn.execute(
                "SELECT COUNT(*) FROM skills WHERE profile_id = ?", (key,)
            ).fetchone()[0]
            if count >= self.max_skills:
                raise ValidationError(
                    "skills", f"cannot have more than {self.max_skills} skills"
                )
            skill = Skill(
                id=str(uuid.uuid4()),
                profile_id=key,
                name=skill_input.name,
                level=skill_input.level,
                years_of_experience=skill_input.years_of_experience,
            )
            conn.execute(
                """INSERT INTO skills
                   (id, profile_id, name, level, years_of_experience, created_at)
                   VALUES (?, ?, ?, ?, ?, ?)""",
                (
                    skill.id,
                    key,
                    skill.name,
                    skill.level.value,
                    skill.years_of_experience,
                    skill.created_at.isoformat(),
                ),
            )
        logger.info("Added skill %s (%s) to profile %s", skill.name, skill.level.value, key)
        return skill

    def get_skill(self, profile_id: EntityId, skill_id: str) -> Skill:
        """Fetch one skill; raises NotFoundError outside the caller's profile."""
        with self._connect() as conn:
            row = conn.execute(
                "SELECT * FROM skills WHERE id = ? AND profile_id = ?",
                (skill_id, str(profile_id)),
            ).fetchone()
        if row is None:
            raise NotFoundError("Skill", skill_id)
        return self._row_to_skill(row)

    def list_skills(self, profile_id: EntityId) -> list[Skill]:
        """All skills of a profile in creation order."""
        with self._connect() as conn:
            rows = conn.execute(
                "SELECT * FROM skills WHERE profile_id = ? ORDER BY created_at, rowid",
                (str(profile_id),),
            ).fetchall()
        return [self._row_to_skill(row) for row in rows]

    def update_skill(
        self, profile_id: EntityId, skill_id: str, patch: SkillPatch | dict
    ) -> Skill:
        """Apply a partial update with the same rules as add_skill."""
        skill_patch = validate_input(SkillPatch, patch)
        self._check_years(skill_patch.years_of_experience)

        current = self.get_skill(profile_id, skill_id)
        changes = skill_patch.model_dump(exclude_unset=True, exclude_none=True)
        updated = current.model_copy(update=changes)

        with self._connect() as conn:
            cursor = conn.execute(
                """UPDATE skills SET name = ?, level = ?, years_of_experience = ?
                   WHERE id = ? AND profile_id = ?""",
                (
                    updated.name,
                    updated.level.value,
                    updated.years_of_experience,
                    skill_id,
                    str(profile_id),
                ),
            )
            if cursor.rowcount == 0:
                raise NotFoundError("Skill", skill_id)
        return updated

    def remove_skill(self, profile_id: EntityId, skill_id: str) -> None:
        """Delete a skill. Asking the user first is the caller's job."""
        with self._connect() as conn:
            cursor = conn.execute(
                "DELETE FROM skills WHERE id = ? AND profile_id = ?",
                (skill_id, str(profile_id)),
            )
            if cursor.rowcount == 0:
                raise NotFoundError("Skill", skill_id)
        logger.info("Removed skill %s from profile %s", skill_id, profile_id)

    def remove_profile(self, profile_id: EntityId) -> int:
        """Delete every skill of a profile. Returns count of deleted rows."""
        with self._connect() as conn:
            cursor = conn.execute(
                "DELETE FROM skills WHERE profile_id = ?", (str(profile_id),)
            )
            return cursor.rowcount

    @staticmethod
    def _row_to_skill(row: tuple) -> Skill:
        return Skill(
            id=row[0],
            profile_id=row[1],
            name=row[2],
            level=row[3],
            years_of_experience=row[4],
            created_at=datetime.fromisoformat(row[5]),
        )
