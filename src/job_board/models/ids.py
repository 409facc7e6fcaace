"""Identifier type shared by all entities."""

from __future__ import annotations

from typing import Union

# Snapshots from the API carry UUID strings; fixtures often use plain ints.
EntityId = Union[int, str]
