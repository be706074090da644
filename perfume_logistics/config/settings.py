from pathlib import Path
from typing import Literal

import yaml
from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

MANAGER_AGENT_ID = "69a27d578e6d0e51fd5cd3b6"
DISPATCHER_AGENT_ID = "69a27d78a96eb35aa78a9c82"


class SystemConfig(BaseModel):
    name: str = "Perfume Logistics Monitor"
    version: str = "1.0.0"
    environment: Literal["development", "staging", "production"] = "development"


class AgentsSettings(BaseModel):
    """Settings for reaching the Manager and Dispatcher agents."""

    backend: Literal["http", "claude"] = "http"
    manager_agent_id: str = MANAGER_AGENT_ID
    dispatcher_agent_id: str = DISPATCHER_AGENT_ID
    base_url: str = "https://agent-prod.studio.lyzr.ai/v3/inference/chat/"
    request_timeout_seconds: float = Field(default=120.0, gt=0)
    claude_model: str = "claude-sonnet-4-20250514"
    max_tokens: int = Field(default=4000, ge=100, le=16000)


class StoreSettings(BaseModel):
    """Settings for the local state store."""

    enabled: bool = True
    data_dir: str = "data/state"
    history_limit: int = Field(default=50, ge=1)


class DashboardSettings(BaseModel):
    """Configuration for the dashboard."""

    progress_interval_seconds: float = Field(default=3.0, gt=0)
    max_alerts_displayed: int = Field(default=50, gt=0)


class AgentPlatformConfig(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="AGENT_PLATFORM_")

    api_key: str = ""
    user_id: str = "perfume-logistics"


class AnthropicConfig(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="ANTHROPIC_")

    api_key: str = ""


class AppSettings(BaseModel):
    system: SystemConfig = Field(default_factory=SystemConfig)
    agents: AgentsSettings = Field(default_factory=AgentsSettings)
    store: StoreSettings = Field(default_factory=StoreSettings)
    dashboard: DashboardSettings = Field(default_factory=DashboardSettings)
    agent_platform: AgentPlatformConfig = Field(default_factory=AgentPlatformConfig)
    anthropic: AnthropicConfig = Field(default_factory=AnthropicConfig)

    @classmethod
    def from_yaml(cls, path: Path) -> "AppSettings":
        """Load settings from YAML file with env var overrides."""
        with open(path) as f:
            data = yaml.safe_load(f) or {}

        return cls(
            **data,
            agent_platform=AgentPlatformConfig(),
            anthropic=AnthropicConfig(),
        )

    @classmethod
    def load(cls, path: Path = Path("config/settings.yaml")) -> "AppSettings":
        """Load from ``path`` when present, otherwise defaults plus env."""
        if path.exists():
            return cls.from_yaml(path)
        return cls()
