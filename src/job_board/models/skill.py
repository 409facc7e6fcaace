"""Pydantic models for student skills."""

from __future__ import annotations

import uuid
from datetime import datetime
from enum import Enum

from pydantic import AliasChoices, BaseModel, Field, field_validator

from job_board.models.base import ApiModel
from job_board.models.ids import EntityId

MAX_NAME_LENGTH = 100
MAX_YEARS = 50


class SkillLevel(str, Enum):
    BEGINNER = "BEGINNER"
    INTERMEDIATE = "INTERMEDIATE"
    ADVANCED = "ADVANCED"
    EXPERT = "EXPERT"


def _normalize_level(value: object) -> object:
    # The profile form sends "Beginner", the API stores "BEGINNER"
    if isinstance(value, str):
        return value.strip().upper()
    return value


def _strip(value: object) -> object:
    if isinstance(value, str):
        return value.strip()
    return value


class SkillInput(BaseModel):
    name: str = Field(min_length=1, max_length=MAX_NAME_LENGTH)
    level: SkillLevel
    years_of_experience: int = Field(default=0, ge=0, le=MAX_YEARS)

    @field_validator("name", mode="before")
    @classmethod
    def _strip_name(cls, value: object) -> object:
        return _strip(value)

    @field_validator("level", mode="before")
    @classmethod
    def _upper_level(cls, value: object) -> object:
        return _normalize_level(value)


class SkillPatch(BaseModel):
    name: str | None = Field(default=None, min_length=1, max_length=MAX_NAME_LENGTH)
    level: SkillLevel | None = None
    years_of_experience: int | None = Field(default=None, ge=0, le=MAX_YEARS)

    @field_validator("name", mode="before")
    @classmethod
    def _strip_name(cls, value: object) -> object:
        return _strip(value)

    @field_validator("level", mode="before")
    @classmethod
    def _upper_level(cls, value: object) -> object:
        return _normalize_level(value)


class Skill(ApiModel):
    """A stored skill. Holds the same rules as SkillInput however it is built."""

    id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    profile_id: EntityId | None = Field(
        default=None,
        validation_alias=AliasChoices("profile_id", "profileId", "userId"),
    )
    name: str = Field(min_length=1, max_length=MAX_NAME_LENGTH)
    level: SkillLevel
    years_of_experience: int = Field(
        default=0,
        ge=0,
        le=MAX_YEARS,
        validation_alias=AliasChoices(
            "years_of_experience", "yearsOfExperience", "yearsOfExp"
        ),
    )
    created_at: datetime = Field(default_factory=datetime.now)

    @field_validator("name", mode="before")
    @classmethod
    def _strip_name(cls, value: object) -> object:
        return _strip(value)

    @field_validator("level", mode="before")
    @classmethod
    def _upper_level(cls, value: object) -> object:
        return _normalize_level(value)


class LevelInfo(BaseModel):
    """Display metadata for a skill level."""

    level: SkillLevel
    label: str
    rank: int  # BEGINNER=1 ... EXPERT=4
