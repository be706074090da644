"""Clients for the Manager and Dispatcher agents."""

from .claude_client import ClaudeAgentClient
from .factory import build_agent_client
from .http_client import HttpAgentClient
from .models import AgentCallResult, AgentClient, AgentResponse
from .parsing import extract_json

__all__ = [
    "AgentCallResult",
    "AgentClient",
    "AgentResponse",
    "ClaudeAgentClient",
    "HttpAgentClient",
    "build_agent_client",
    "extract_json",
]
