"""Application configuration."""

from .settings import (
    DISPATCHER_AGENT_ID,
    MANAGER_AGENT_ID,
    AgentPlatformConfig,
    AgentsSettings,
    AnthropicConfig,
    AppSettings,
    DashboardSettings,
    StoreSettings,
    SystemConfig,
)

__all__ = [
    "AgentPlatformConfig",
    "AgentsSettings",
    "AnthropicConfig",
    "AppSettings",
    "DISPATCHER_AGENT_ID",
    "DashboardSettings",
    "MANAGER_AGENT_ID",
    "StoreSettings",
    "SystemConfig",
]
