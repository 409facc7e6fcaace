"""Application configuration loaded from config.yaml."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

import yaml


def _check_range(name: str, value: int | float, low: int | float, high: int | float) -> None:
    if not low <= value <= high:
        raise ValueError(f"{name} must be between {low} and {high}, got {value}")


@dataclass(frozen=True)
class RankingConfig:
    category_affinity_weight: int = 2
    active_weight: int = 1
    default_limit: int = 3

    def __post_init__(self) -> None:
        _check_range("category_affinity_weight", self.category_affinity_weight, 0, 100)
        _check_range("active_weight", self.active_weight, 0, 100)
        _check_range("default_limit", self.default_limit, 1, 100)


@dataclass(frozen=True)
class SkillConfig:
    max_years: int = 50
    max_skills: int = 20
    db_path: str = "~/.job-board/skills.db"

    def __post_init__(self) -> None:
        _check_range("max_years", self.max_years, 1, 50)
        _check_range("max_skills", self.max_skills, 1, 1000)

    @property
    def resolved_db_path(self) -> Path:
        return Path(self.db_path).expanduser()


@dataclass(frozen=True)
class DashboardConfig:
    recent_limit: int = 5
    recent_category_days: int = 30
    top_categories: int = 5

    def __post_init__(self) -> None:
        _check_range("recent_limit", self.recent_limit, 1, 50)
        _check_range("recent_category_days", self.recent_category_days, 1, 365)
        _check_range("top_categories", self.top_categories, 1, 50)


@dataclass(frozen=True)
class AppConfig:
    ranking: RankingConfig = field(default_factory=RankingConfig)
    skills: SkillConfig = field(default_factory=SkillConfig)
    dashboard: DashboardConfig = field(default_factory=DashboardConfig)


def load_config(path: str | Path | None = None) -> AppConfig:
    """Load config from YAML file, falling back to defaults."""
    if path is None:
        # Look for config.yaml relative to the project root
        candidates = [
            Path.cwd() / "config.yaml",
            Path(__file__).resolve().parent.parent.parent / "config.yaml",
        ]
        for c in candidates:
            if c.exists():
                path = c
                break

    raw: dict = {}
    if path is not None:
        p = Path(path)
        if p.exists():
            raw = yaml.safe_load(p.read_text()) or {}

    return AppConfig(
        ranking=RankingConfig(**raw.get("ranking", {})),
        skills=SkillConfig(**raw.get("skills", {})),
        dashboard=DashboardConfig(**raw.get("dashboard", {})),
    )
