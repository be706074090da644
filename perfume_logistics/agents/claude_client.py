"""Agent client backed directly by the Anthropic Messages API."""
import asyncio
import logging

from anthropic import Anthropic, APIError

from perfume_logistics.agents.models import AgentCallResult, AgentResponse
from perfume_logistics.agents.parsing import extract_json

logger = logging.getLogger(__name__)


class ClaudeAgentClient:
    """Runs each agent id as a Claude system prompt.

    Useful when the hosted agents are unavailable. Note that this backend
    cannot deliver Slack or email messages itself; the Dispatcher prompt only
    reports what it would send.
    """

    DEFAULT_MODEL = "claude-sonnet-4-20250514"
    DEFAULT_MAX_TOKENS = 4000

    def __init__(
        self,
        api_key: str,
        system_prompts: dict[str, str],
        model: str | None = None,
        max_tokens: int | None = None,
    ):
        """Initialize the client.

        Args:
            api_key: Anthropic API key.
            system_prompts: Agent id -> system prompt.
            model: Claude model to use.
            max_tokens: Maximum tokens per reply.
        """
        self.client = Anthropic(api_key=api_key)
        self._system_prompts = system_prompts
        self.model = model or self.DEFAULT_MODEL
        self.max_tokens = max_tokens or self.DEFAULT_MAX_TOKENS

    async def invoke(self, message: str, agent_id: str) -> AgentCallResult:
        system_prompt = self._system_prompts.get(agent_id)
        if system_prompt is None:
            return AgentCallResult(success=False, error=f"Unknown agent: {agent_id}")

        try:
            # Synchronous SDK call; run it off the event loop
            reply = await asyncio.to_thread(
                self.client.messages.create,
                model=self.model,
                max_tokens=self.max_tokens,
                system=system_prompt,
                messages=[{"role": "user", "content": message}],
            )
            text = reply.content[0].text
        except APIError as e:
            logger.error(f"Claude call for agent {agent_id} failed: {e}")
            return AgentCallResult(success=False, error=f"Agent request failed: {e}")
        except (IndexError, AttributeError):
            return AgentCallResult(success=False, error="Agent returned an empty reply")

        try:
            result = extract_json(text)
        except ValueError as e:
            logger.warning(f"Claude reply for agent {agent_id} could not be parsed: {e}")
            return AgentCallResult(success=False, error=str(e))

        return AgentCallResult(success=True, response=AgentResponse(result=result, raw=text))
