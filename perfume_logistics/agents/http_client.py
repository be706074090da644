"""Client for agents hosted on a remote agent platform."""
import logging
from typing import Any
from uuid import uuid4

import httpx

from perfume_logistics.agents.models import AgentCallResult, AgentResponse
from perfume_logistics.agents.parsing import extract_json

logger = logging.getLogger(__name__)


class HttpAgentClient:
    """Invokes hosted agents over HTTP.

    Transport and decoding problems are returned as failed results, never
    raised, so callers only deal with ``AgentCallResult``.
    """

    def __init__(
        self,
        base_url: str,
        api_key: str,
        user_id: str = "perfume-logistics",
        timeout: float = 120.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """Initialize the client.

        Args:
            base_url: Agent inference endpoint.
            api_key: Platform API key, sent as ``x-api-key``.
            user_id: User id reported to the platform.
            timeout: Request timeout in seconds.
            transport: Optional httpx transport (tests use MockTransport).
        """
        self._base_url = base_url
        self._user_id = user_id
        self._timeout = timeout
        self._transport = transport
        self.headers = {
            "x-api-key": api_key,
            "Content-Type": "application/json",
        }

    async def invoke(self, message: str, agent_id: str) -> AgentCallResult:
        body = {
            "user_id": self._user_id,
            "agent_id": agent_id,
            "session_id": f"{agent_id}-{uuid4().hex[:12]}",
            "message": message,
        }

        try:
            async with httpx.AsyncClient(timeout=self._timeout, transport=self._transport) as client:
                response = await client.post(self._base_url, headers=self.headers, json=body)
                response.raise_for_status()
                data = response.json()
        except httpx.HTTPStatusError as e:
            logger.error(f"Agent {agent_id} returned HTTP {e.response.status_code}")
            return AgentCallResult(
                success=False,
                error=f"Agent request failed with status {e.response.status_code}",
            )
        except httpx.HTTPError as e:
            logger.error(f"Agent {agent_id} request failed: {e}")
            return AgentCallResult(success=False, error=f"Agent request failed: {e}")
        except ValueError:
            logger.error(f"Agent {agent_id} returned a non-JSON body")
            return AgentCallResult(success=False, error="Agent returned a non-JSON response")

        try:
            result = self._extract_result(data)
        except ValueError as e:
            logger.error(f"Agent {agent_id} reply could not be parsed: {e}")
            return AgentCallResult(success=False, error=str(e))

        return AgentCallResult(success=True, response=AgentResponse(result=result, raw=data))

    @staticmethod
    def _extract_result(data: Any) -> Any:
        """Unwrap the agent output from a platform response body.

        The body's ``response`` may be an object or a JSON string, optionally
        wrapping the payload in a ``result`` key.
        """
        payload = data.get("response", data) if isinstance(data, dict) else data
        if isinstance(payload, str):
            payload = extract_json(payload)
        if isinstance(payload, dict) and "result" in payload:
            return payload["result"]
        return payload
