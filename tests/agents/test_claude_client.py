# tests/agents/test_claude_client.py
import json
from unittest.mock import MagicMock, patch

import httpx
import pytest
from anthropic import APIError

from perfume_logistics.agents import ClaudeAgentClient

PROMPTS = {"manager-id": "You are the manager.", "dispatcher-id": "You dispatch."}


def make_reply(text: str) -> MagicMock:
    reply = MagicMock()
    reply.content = [MagicMock(text=text)]
    return reply


class TestClaudeAgentClient:
    def test_init_creates_client(self):
        with patch("perfume_logistics.agents.claude_client.Anthropic") as mock:
            client = ClaudeAgentClient(api_key="test-key", system_prompts=PROMPTS)

            mock.assert_called_once_with(api_key="test-key")
            assert client.model == ClaudeAgentClient.DEFAULT_MODEL

    @pytest.mark.asyncio
    async def test_invoke_uses_agent_system_prompt(self):
        with patch("perfume_logistics.agents.claude_client.Anthropic") as mock_anthropic:
            create = mock_anthropic.return_value.messages.create
            create.return_value = make_reply(json.dumps({"total_critical": 1}))

            client = ClaudeAgentClient(api_key="test-key", system_prompts=PROMPTS, max_tokens=1000)
            result = await client.invoke("Run a check", "manager-id")

            assert result.success is True
            assert result.response.result == {"total_critical": 1}
            kwargs = create.call_args.kwargs
            assert kwargs["system"] == "You are the manager."
            assert kwargs["max_tokens"] == 1000
            assert kwargs["messages"] == [{"role": "user", "content": "Run a check"}]

    @pytest.mark.asyncio
    async def test_unknown_agent(self):
        with patch("perfume_logistics.agents.claude_client.Anthropic") as mock_anthropic:
            client = ClaudeAgentClient(api_key="test-key", system_prompts=PROMPTS)
            result = await client.invoke("msg", "someone-else")

            assert result.success is False
            assert "someone-else" in result.error
            mock_anthropic.return_value.messages.create.assert_not_called()

    @pytest.mark.asyncio
    async def test_api_error(self):
        with patch("perfume_logistics.agents.claude_client.Anthropic") as mock_anthropic:
            request = httpx.Request("POST", "https://api.anthropic.com/v1/messages")
            mock_anthropic.return_value.messages.create.side_effect = APIError(
                "overloaded", request, body=None
            )

            client = ClaudeAgentClient(api_key="test-key", system_prompts=PROMPTS)
            result = await client.invoke("msg", "manager-id")

            assert result.success is False
            assert "overloaded" in result.error

    @pytest.mark.asyncio
    async def test_empty_reply(self):
        with patch("perfume_logistics.agents.claude_client.Anthropic") as mock_anthropic:
            reply = MagicMock()
            reply.content = []
            mock_anthropic.return_value.messages.create.return_value = reply

            client = ClaudeAgentClient(api_key="test-key", system_prompts=PROMPTS)
            result = await client.invoke("msg", "manager-id")

            assert result.success is False
            assert result.error == "Agent returned an empty reply"

    @pytest.mark.asyncio
    async def test_malformed_json(self):
        with patch("perfume_logistics.agents.claude_client.Anthropic") as mock_anthropic:
            mock_anthropic.return_value.messages.create.return_value = make_reply(
                "This is not valid JSON {broken"
            )

            client = ClaudeAgentClient(api_key="test-key", system_prompts=PROMPTS)
            result = await client.invoke("msg", "manager-id")

            assert result.success is False
            assert result.response is None
