"""Sends selected alerts through the Dispatcher agent and credits the run."""

import logging

from perfume_logistics.agents.models import AgentClient
from perfume_logistics.agents.prompts import build_dispatch_brief
from perfume_logistics.alerts.normalizer import normalize_dispatch_response
from perfume_logistics.history.log import credit_dispatch
from perfume_logistics.models.alert import Alert
from perfume_logistics.orchestrator.models import DispatchOutcome
from perfume_logistics.orchestrator.run_orchestrator import UNEXPECTED_ERROR_MESSAGE
from perfume_logistics.store.state_store import StateStore

logger = logging.getLogger(__name__)

DISPATCH_FAILED_MESSAGE = "Failed to dispatch alerts."


class DispatchOrchestrator:
    """Dispatches alerts and folds the result into the most recent run.

    The selection is not validated here; callers guard against empty
    selections.
    """

    def __init__(self, agent_client: AgentClient, store: StateStore, dispatcher_agent_id: str):
        self._client = agent_client
        self._store = store
        self._agent_id = dispatcher_agent_id

    async def dispatch(
        self,
        selected_alerts: list[Alert],
        slack_channel: str,
        email_recipients: list[str],
        target_run_id: str | None = None,
    ) -> DispatchOutcome:
        """Dispatch alerts to Slack and email.

        Args:
            selected_alerts: Alerts to send.
            slack_channel: Target Slack channel.
            email_recipients: Target email addresses, possibly empty.
            target_run_id: Run the alerts came from. When given, the dispatch
                is only credited if that run is still the most recent entry.
                When None, whatever entry is most recent is credited.

        Returns:
            DispatchOutcome with the normalized result, or an error.
        """
        message = build_dispatch_brief(selected_alerts, slack_channel, email_recipients)

        try:
            call = await self._client.invoke(message, self._agent_id)
        except Exception as e:
            logger.error(f"Dispatcher agent call raised: {e}")
            return DispatchOutcome(success=False, error=str(e) or UNEXPECTED_ERROR_MESSAGE)

        if not call.success or call.response is None:
            logger.error(f"Dispatch failed: {call.error}")
            return DispatchOutcome(success=False, error=call.error or DISPATCH_FAILED_MESSAGE)

        result = normalize_dispatch_response(call.response.result)

        history, credited = credit_dispatch(
            self._store.load_history(), len(selected_alerts), target_run_id
        )
        if credited is not None:
            self._store.save_history(history)
            logger.info(
                f"Dispatched {len(selected_alerts)} alerts for run {credited.id} "
                f"(total {credited.alerts_dispatched})"
            )
        elif target_run_id is not None and history:
            logger.warning(
                f"Run {target_run_id} is no longer the most recent run; dispatch not credited"
            )

        return DispatchOutcome(success=True, result=result, credited_entry=credited)
