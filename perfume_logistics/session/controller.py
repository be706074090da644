"""Operator session: the operations the dashboard can trigger."""
import asyncio
import logging
from pathlib import Path
from typing import ClassVar

from perfume_logistics.agents.factory import build_agent_client
from perfume_logistics.alerts.samples import sample_check_result
from perfume_logistics.catalog.product_catalog import ProductCatalog
from perfume_logistics.config.settings import AppSettings
from perfume_logistics.models.alert import Alert
from perfume_logistics.models.product import Product, ProductDraft
from perfume_logistics.models.thresholds import ThresholdSettings
from perfume_logistics.orchestrator.dispatch_orchestrator import DispatchOrchestrator
from perfume_logistics.orchestrator.models import DispatchOutcome, RunOutcome
from perfume_logistics.orchestrator.run_orchestrator import RunOrchestrator
from perfume_logistics.session.state import SessionState
from perfume_logistics.store.backends import JsonFileBackend, MemoryBackend
from perfume_logistics.store.state_store import StateStore

logger = logging.getLogger(__name__)

EMPTY_SELECTION_MESSAGE = "Select at least one alert to dispatch."


class LogisticsSession:
    """Owns the session state and exposes the public operations.

    run_check, dispatch, save_settings and toggle_sample_mode are the four
    operations of the dashboard; the catalog edits stand in for the product
    management screen. Only one session per store is supported.
    """

    _instance: ClassVar["LogisticsSession | None"] = None

    LOADING_STEPS = [
        "Initializing logistics analysis...",
        "Analyzing inventory levels...",
        "Checking shipment statuses...",
        "Reviewing order pipeline...",
        "Aggregating findings...",
    ]

    def __init__(
        self,
        store: StateStore,
        run_orchestrator: RunOrchestrator,
        dispatch_orchestrator: DispatchOrchestrator,
        progress_interval_seconds: float = 3.0,
        max_alerts_displayed: int = 50,
    ) -> None:
        self._store = store
        self._runner = run_orchestrator
        self._dispatcher = dispatch_orchestrator
        self._progress_interval = progress_interval_seconds
        self.max_alerts_displayed = max_alerts_displayed
        self._state = SessionState()
        self.reload()

    @classmethod
    def from_settings(cls, settings: AppSettings) -> "LogisticsSession":
        """Wire a session from application settings."""
        if settings.store.enabled:
            backend = JsonFileBackend(Path(settings.store.data_dir))
        else:
            backend = MemoryBackend()
        store = StateStore(backend)
        client = build_agent_client(settings)

        return cls(
            store=store,
            run_orchestrator=RunOrchestrator(
                agent_client=client,
                store=store,
                manager_agent_id=settings.agents.manager_agent_id,
                history_limit=settings.store.history_limit,
            ),
            dispatch_orchestrator=DispatchOrchestrator(
                agent_client=client,
                store=store,
                dispatcher_agent_id=settings.agents.dispatcher_agent_id,
            ),
            progress_interval_seconds=settings.dashboard.progress_interval_seconds,
            max_alerts_displayed=settings.dashboard.max_alerts_displayed,
        )

    @classmethod
    def get_instance(cls, settings: AppSettings | None = None) -> "LogisticsSession":
        """Get or create the singleton session."""
        if cls._instance is None:
            cls._instance = cls.from_settings(settings or AppSettings.load())
        return cls._instance

    @classmethod
    def reset_instance(cls) -> None:
        """Reset the singleton instance (for testing)."""
        cls._instance = None

    @property
    def state(self) -> SessionState:
        return self._state

    def reload(self) -> None:
        """Refresh settings, history and products from the store."""
        self._state.settings = self._store.load_settings()
        self._state.history = self._store.load_history()
        self._state.products = self._store.load_products()

    async def _advance_progress(self) -> None:
        step = 0
        while True:
            await asyncio.sleep(self._progress_interval)
            step = min(step + 1, len(self.LOADING_STEPS) - 1)
            self._state.loading_step = self.LOADING_STEPS[step]

    async def run_check(self) -> RunOutcome:
        """Run a logistics check with the current settings and catalog."""
        state = self._state
        state.loading = True
        state.error = None
        state.loading_step = self.LOADING_STEPS[0]

        progress = asyncio.create_task(self._advance_progress())
        try:
            outcome = await self._runner.run_check(state.settings, state.products)
        finally:
            progress.cancel()
            try:
                await progress
            except asyncio.CancelledError:
                pass
            state.loading = False
            state.loading_step = ""

        if outcome.success:
            state.apply_check_result(outcome.result, run_id=outcome.entry.id)
            state.history = self._store.load_history()
        else:
            state.error = outcome.error
        return outcome

    async def dispatch(
        self,
        selected_alerts: list[Alert],
        slack_channel: str,
        email_recipients: list[str],
    ) -> DispatchOutcome:
        """Dispatch the selected alerts of the current feed."""
        state = self._state
        if not selected_alerts:
            state.dispatch_error = EMPTY_SELECTION_MESSAGE
            return DispatchOutcome(success=False, error=EMPTY_SELECTION_MESSAGE)

        state.dispatching = True
        state.dispatch_error = None
        state.dispatch_result = None
        try:
            outcome = await self._dispatcher.dispatch(
                selected_alerts,
                slack_channel,
                email_recipients,
                target_run_id=state.current_run_id,
            )
        finally:
            state.dispatching = False

        if outcome.success:
            state.dispatch_result = outcome.result
            state.history = self._store.load_history()
        else:
            state.dispatch_error = outcome.error
        return outcome

    def save_settings(self, settings: ThresholdSettings) -> ThresholdSettings:
        self._state.settings = settings
        self._store.save_settings(settings)
        logger.info("Threshold settings saved")
        return settings

    def toggle_sample_mode(self, enabled: bool) -> None:
        """Show or hide the sample alert feed. The store is never touched."""
        state = self._state
        state.sample_mode = enabled
        if enabled:
            state.apply_check_result(sample_check_result())
            state.error = None
        else:
            state.clear_check()

    def update_products(self, products: list[Product]) -> None:
        self._state.products = list(products)
        self._store.save_products(self._state.products)

    def add_product(self, draft: ProductDraft) -> None:
        """Add a product. Raises ValueError when the draft is invalid."""
        self.update_products(ProductCatalog(self._state.products).add(draft))

    def edit_product(self, product_id: str, draft: ProductDraft) -> None:
        """Edit a product. Raises ValueError when the draft is invalid."""
        self.update_products(ProductCatalog(self._state.products).update(product_id, draft))

    def delete_product(self, product_id: str) -> None:
        self.update_products(ProductCatalog(self._state.products).delete(product_id))
