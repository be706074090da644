"""Alert models produced by a logistics check."""
from pydantic import BaseModel, ConfigDict, Field


class Alert(BaseModel):
    """One flagged inventory, shipping or order condition.

    Category and severity are free text as returned by the Manager agent.
    Use the helpers in ``perfume_logistics.alerts.classify`` to match them.
    """

    model_config = ConfigDict(frozen=True)

    id: str = ""
    title: str = ""
    category: str = ""
    severity: str = ""
    description: str = ""
    affected_items: str = ""
    recommended_action: str = ""
    timestamp: str = ""


class AlertAggregates(BaseModel):
    """Severity totals as reported by the Manager agent."""

    total_critical: int = 0
    total_warning: int = 0
    total_info: int = 0

    @property
    def total(self) -> int:
        return self.total_critical + self.total_warning + self.total_info


class CheckResult(BaseModel):
    """Canonical result of one logistics check."""

    alerts: list[Alert] = Field(default_factory=list)
    aggregates: AlertAggregates = Field(default_factory=AlertAggregates)
    summary: str = ""
    timestamp: str = ""
