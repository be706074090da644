"""Dispatch result models."""
from pydantic import BaseModel, Field


class DispatchRecord(BaseModel):
    """Per-alert outcome reported by the Dispatcher agent."""

    alert_id: str = ""
    alert_title: str = ""
    channels_sent: list[str] = Field(default_factory=list)
    status: str = ""
    timestamp: str = ""


class DispatchResult(BaseModel):
    """Outcome of one dispatch call. Not persisted."""

    dispatched_alerts: list[DispatchRecord] = Field(default_factory=list)
    total_dispatched: int = 0
    slack_status: str = "unknown"
    email_status: str = "unknown"
    summary: str = "Alerts dispatched."
