"""Error types raised by the job board core."""

from __future__ import annotations


class JobBoardError(Exception):
    """Base class for all job board errors."""


class ValidationError(JobBoardError, ValueError):
    """Malformed input (bad skill level, empty name, out-of-range years)."""

    def __init__(self, field: str, message: str):
        self.field = field
        super().__init__(f"{field}: {message}")


class NotFoundError(JobBoardError, LookupError):
    """A referenced entity id does not exist."""

    def __init__(self, entity: str, entity_id: object):
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(f"{entity} not found: {entity_id}")


class PreconditionError(JobBoardError):
    """The caller asked for something that cannot be computed."""


class CategoryNotFoundError(NotFoundError, PreconditionError):
    """Stats were requested for a category that does not exist."""

    def __init__(self, category_id: object):
        super().__init__("Category", category_id)
