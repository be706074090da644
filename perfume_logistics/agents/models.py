"""Agent invocation result models."""
from dataclasses import dataclass, field
from typing import Any, Protocol


@dataclass
class AgentResponse:
    """Body of a successful agent call. ``result`` is untyped agent output."""

    result: Any = None
    raw: Any = None


@dataclass
class AgentCallResult:
    """Outcome of one agent invocation."""

    success: bool
    response: AgentResponse | None = None
    error: str | None = None
    metadata: dict = field(default_factory=dict)


class AgentClient(Protocol):
    """Sends a message to an agent identified by an opaque id."""

    async def invoke(self, message: str, agent_id: str) -> AgentCallResult: ...
