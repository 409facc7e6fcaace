"""Pydantic models for dashboard quick actions."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict

from job_board.models.base import ApiModel


class PriorityTier(str, Enum):
    HIGH = "HIGH"
    MEDIUM = "MEDIUM"
    LOW = "LOW"

    @property
    def rank(self) -> int:
        return _TIER_RANK[self]


_TIER_RANK = {PriorityTier.HIGH: 3, PriorityTier.MEDIUM: 2, PriorityTier.LOW: 1}


class ActionFlags(ApiModel):
    model_config = ConfigDict(extra="forbid")

    incomplete_profile: bool = False
    pending_applications: bool = False
    needs_skill_update: bool = False


class QuickAction(BaseModel):
    id: str
    title: str
    description: str
    priority_tier: PriorityTier
    badge: str | None = None
    target_link: str
