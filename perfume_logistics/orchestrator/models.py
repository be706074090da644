"""Data models for the run and dispatch orchestrators."""

from dataclasses import dataclass, field
from datetime import datetime

from perfume_logistics.models.alert import CheckResult
from perfume_logistics.models.dispatch import DispatchResult
from perfume_logistics.models.history import HistoryEntry


@dataclass
class RunOutcome:
    """Result of one logistics check: a committed run or an error."""

    success: bool
    result: CheckResult | None = None
    entry: HistoryEntry | None = None
    error: str | None = None
    timestamp: datetime = field(default_factory=datetime.now)


@dataclass
class DispatchOutcome:
    """Result of one dispatch call.

    ``credited_entry`` is None when history was empty or the targeted run
    was no longer the most recent one.
    """

    success: bool
    result: DispatchResult | None = None
    credited_entry: HistoryEntry | None = None
    error: str | None = None
    timestamp: datetime = field(default_factory=datetime.now)
