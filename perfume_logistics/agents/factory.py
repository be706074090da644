"""Builds the configured agent client."""
from perfume_logistics.agents.claude_client import ClaudeAgentClient
from perfume_logistics.agents.http_client import HttpAgentClient
from perfume_logistics.agents.models import AgentClient
from perfume_logistics.agents.prompts import DISPATCHER_SYSTEM_PROMPT, MANAGER_SYSTEM_PROMPT
from perfume_logistics.config.settings import AppSettings


def build_agent_client(settings: AppSettings) -> AgentClient:
    agents = settings.agents
    if agents.backend == "claude":
        return ClaudeAgentClient(
            api_key=settings.anthropic.api_key,
            system_prompts={
                agents.manager_agent_id: MANAGER_SYSTEM_PROMPT,
                agents.dispatcher_agent_id: DISPATCHER_SYSTEM_PROMPT,
            },
            model=agents.claude_model,
            max_tokens=agents.max_tokens,
        )

    return HttpAgentClient(
        base_url=agents.base_url,
        api_key=settings.agent_platform.api_key,
        user_id=settings.agent_platform.user_id,
        timeout=agents.request_timeout_seconds,
    )
