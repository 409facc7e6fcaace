"""Load dashboard snapshots exported by the API (JSON or YAML)."""

from __future__ import annotations

import json
from pathlib import Path

import yaml

from job_board.models.profile import DashboardSnapshot


def parse_snapshot(data: dict) -> DashboardSnapshot:
    """Validate a raw snapshot dict.

    Accepts the API's camelCase keys (``savedJobIds``, ``jobType``...) as well
    as snake_case. Keys inside ``affinities`` are skill names and are kept
    as given.
    """
    return DashboardSnapshot.model_validate(data)


def load_snapshot(file_path: str | Path) -> DashboardSnapshot:
    """Load a snapshot from a .json, .yaml or .yml file."""
    path = Path(file_path)
    if not path.exists():
        raise FileNotFoundError(f"Snapshot not found: {path}")
    text = path.read_text(encoding="utf-8")
    if path.suffix.lower() in (".yaml", ".yml"):
        raw = yaml.safe_load(text) or {}
    else:
        raw = json.loads(text)
    if not isinstance(raw, dict):
        raise ValueError(f"Snapshot must be a mapping, got {type(raw).__name__}")
    return parse_snapshot(raw)
