"""Runs a logistics check through the Manager agent and records it."""

import logging

from perfume_logistics.agents.models import AgentClient
from perfume_logistics.agents.prompts import build_check_brief
from perfume_logistics.alerts.normalizer import normalize_check_response
from perfume_logistics.history.log import HISTORY_LIMIT, append_run, new_run_entry
from perfume_logistics.models.product import Product
from perfume_logistics.models.thresholds import ThresholdSettings
from perfume_logistics.orchestrator.models import RunOutcome
from perfume_logistics.store.state_store import StateStore

logger = logging.getLogger(__name__)

RUN_FAILED_MESSAGE = "Failed to run logistics check. Please try again."
UNEXPECTED_ERROR_MESSAGE = "An unexpected error occurred."


class RunOrchestrator:
    """Builds the check request, calls the Manager agent, commits the run.

    Every successful call appends its own history entry; identical inputs are
    not coalesced. Failures leave the store untouched.
    """

    def __init__(
        self,
        agent_client: AgentClient,
        store: StateStore,
        manager_agent_id: str,
        history_limit: int = HISTORY_LIMIT,
    ):
        self._client = agent_client
        self._store = store
        self._agent_id = manager_agent_id
        self._history_limit = history_limit

    async def run_check(
        self, thresholds: ThresholdSettings, products: list[Product]
    ) -> RunOutcome:
        """Run one logistics check.

        Args:
            thresholds: Alert thresholds to embed in the request.
            products: Full catalog; discontinued products are left out.

        Returns:
            RunOutcome with the normalized result and the new history entry,
            or an operator-facing error.
        """
        monitored = [p for p in products if p.is_monitored]
        message = build_check_brief(thresholds, monitored)
        logger.info(f"Running logistics check over {len(monitored)} products")

        try:
            call = await self._client.invoke(message, self._agent_id)
        except Exception as e:
            logger.error(f"Manager agent call raised: {e}")
            return RunOutcome(success=False, error=str(e) or UNEXPECTED_ERROR_MESSAGE)

        if not call.success:
            logger.error(f"Logistics check failed: {call.error}")
            return RunOutcome(success=False, error=call.error or RUN_FAILED_MESSAGE)

        if call.response is None:
            logger.error("Manager agent reported success without a response")
            return RunOutcome(success=False, error=RUN_FAILED_MESSAGE)

        result = normalize_check_response(call.response.result)
        entry = new_run_entry(result.alerts)

        history = append_run(self._store.load_history(), entry, self._history_limit)
        self._store.save_history(history)

        logger.info(
            f"Logistics check {entry.id} recorded: {entry.total_alerts} alerts "
            f"({result.aggregates.total_critical} critical, "
            f"{result.aggregates.total_warning} warning, {result.aggregates.total_info} info)"
        )
        return RunOutcome(success=True, result=result, entry=entry)
