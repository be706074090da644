"""Run history models."""
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from perfume_logistics.models.alert import Alert


class HistoryStatus(str, Enum):
    """Status of a completed run. Transitions one way: REVIEWED -> DISPATCHED."""

    REVIEWED = "Reviewed"
    DISPATCHED = "Dispatched"


class HistoryEntry(BaseModel):
    """One completed logistics check.

    Alerts are embedded copies, so later catalog edits never change a
    stored run.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str
    date: str
    total_alerts: int = 0
    alerts_dispatched: int = 0
    status: HistoryStatus = HistoryStatus.REVIEWED
    alerts: list[Alert] = Field(default_factory=list)

    def with_dispatch(self, count: int) -> "HistoryEntry":
        """Return a copy credited with ``count`` more dispatched alerts."""
        return self.model_copy(
            update={
                "alerts_dispatched": self.alerts_dispatched + count,
                "status": HistoryStatus.DISPATCHED,
            }
        )
