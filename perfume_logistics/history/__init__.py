"""Run history log."""

from .log import (
    HISTORY_LIMIT,
    append_run,
    credit_dispatch,
    generate_run_id,
    new_run_entry,
    search_history,
    sort_history,
)

__all__ = [
    "HISTORY_LIMIT",
    "append_run",
    "credit_dispatch",
    "generate_run_id",
    "new_run_entry",
    "search_history",
    "sort_history",
]
