"""Operations on the bounded, newest-first run history.

All functions return new lists; the input history is never modified.
"""
from datetime import datetime
from typing import Literal

from perfume_logistics.ids import generate_id
from perfume_logistics.models.alert import Alert
from perfume_logistics.models.history import HistoryEntry, HistoryStatus

HISTORY_LIMIT = 50

SortField = Literal["date", "total_alerts", "alerts_dispatched", "status"]


def generate_run_id() -> str:
    return generate_id("run", random_length=6)


def new_run_entry(alerts: list[Alert], run_date: datetime | None = None) -> HistoryEntry:
    """Create the history entry for a freshly completed run."""
    run_date = run_date or datetime.now()
    return HistoryEntry(
        id=generate_run_id(),
        date=run_date.strftime("%Y-%m-%d %H:%M:%S"),
        total_alerts=len(alerts),
        alerts_dispatched=0,
        status=HistoryStatus.REVIEWED,
        alerts=list(alerts),
    )


def append_run(
    history: list[HistoryEntry], entry: HistoryEntry, limit: int = HISTORY_LIMIT
) -> list[HistoryEntry]:
    """Put ``entry`` at the head and keep the ``limit`` newest entries."""
    return [entry, *history][:limit]


def credit_dispatch(
    history: list[HistoryEntry], count: int, target_run_id: str | None = None
) -> tuple[list[HistoryEntry], HistoryEntry | None]:
    """Credit ``count`` dispatched alerts to the head entry.

    The increment is not keyed by alert id: dispatching the same alerts
    twice counts them twice.

    Args:
        history: Current history, newest first.
        count: Number of alerts just dispatched.
        target_run_id: When given, only credit the head entry if it is this run.

    Returns:
        Tuple of (new history, credited entry or None when nothing was credited).
    """
    if not history:
        return history, None

    head = history[0]
    if target_run_id is not None and head.id != target_run_id:
        return history, None

    credited = head.with_dispatch(count)
    return [credited, *history[1:]], credited


def search_history(history: list[HistoryEntry], term: str) -> list[HistoryEntry]:
    """Case-insensitive search over id, date, status and alert titles."""
    needle = term.strip().lower()
    if not needle:
        return list(history)

    return [
        entry
        for entry in history
        if needle in entry.id.lower()
        or needle in entry.date.lower()
        or needle in entry.status.value.lower()
        or any(needle in alert.title.lower() for alert in entry.alerts)
    ]


def sort_history(
    history: list[HistoryEntry], field: SortField = "date", ascending: bool = False
) -> list[HistoryEntry]:
    """Sort history for display; the default is newest date first."""
    keys = {
        "date": lambda e: e.date,
        "total_alerts": lambda e: e.total_alerts,
        "alerts_dispatched": lambda e: e.alerts_dispatched,
        "status": lambda e: e.status.value,
    }
    return sorted(history, key=keys[field], reverse=not ascending)
