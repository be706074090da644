"""Session state shared with the presentation layer."""
from dataclasses import dataclass, field

from perfume_logistics.models.alert import Alert, AlertAggregates, CheckResult
from perfume_logistics.models.dispatch import DispatchResult
from perfume_logistics.models.history import HistoryEntry
from perfume_logistics.models.product import Product
from perfume_logistics.models.thresholds import ThresholdSettings


@dataclass
class SessionState:
    """Everything the dashboard reads for one operator session.

    Alerts and aggregates are transient display state; settings, history and
    products mirror what the store holds.
    """

    alerts: list[Alert] = field(default_factory=list)
    aggregates: AlertAggregates = field(default_factory=AlertAggregates)
    summary: str = ""
    check_timestamp: str = ""
    current_run_id: str | None = None

    loading: bool = False
    loading_step: str = ""
    error: str | None = None
    sample_mode: bool = False

    dispatching: bool = False
    dispatch_result: DispatchResult | None = None
    dispatch_error: str | None = None

    settings: ThresholdSettings = field(default_factory=ThresholdSettings)
    history: list[HistoryEntry] = field(default_factory=list)
    products: list[Product] = field(default_factory=list)

    def apply_check_result(self, result: CheckResult, run_id: str | None = None) -> None:
        """Show ``result`` as the current alert feed."""
        self.alerts = list(result.alerts)
        self.aggregates = result.aggregates
        self.summary = result.summary
        self.check_timestamp = result.timestamp
        self.current_run_id = run_id

    def clear_check(self) -> None:
        self.apply_check_result(CheckResult())
