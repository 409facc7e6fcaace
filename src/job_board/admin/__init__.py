"""Admin-side statistics."""

from job_board.admin.category_stats import (
    aggregate,
    aggregate_by_id,
    export_csv,
    overview,
)

__all__ = ["aggregate", "aggregate_by_id", "export_csv", "overview"]
