# main.py
"""Main entry point for the perfume logistics monitor.

Runs one logistics check against the configured agent and logs the ranked
alert feed. The interactive dashboard is started separately with
``streamlit run perfume_logistics/dashboard/Home.py``.
"""
import asyncio
import os
import sys
import logging
from pathlib import Path

from dotenv import load_dotenv

from perfume_logistics.alerts import sort_by_severity
from perfume_logistics.config import AppSettings
from perfume_logistics.orchestrator import RunOutcome
from perfume_logistics.session import LogisticsSession


# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='[%(asctime)s] %(levelname)s: %(message)s',
    datefmt='%Y-%m-%d %H:%M:%S'
)
logger = logging.getLogger(__name__)

CONFIG_PATH = Path("config/settings.yaml")


def required_env_vars(settings: AppSettings) -> list[str]:
    """Environment variables needed by the configured agent backend."""
    if settings.agents.backend == "claude":
        return ["ANTHROPIC_API_KEY"]
    return ["AGENT_PLATFORM_API_KEY"]


def validate_env_vars(settings: AppSettings) -> None:
    """Validate required environment variables are set.

    Raises:
        SystemExit: If any required env var is missing.
    """
    missing = [var for var in required_env_vars(settings) if not os.getenv(var)]

    if missing:
        logger.error(f"Missing required environment variables: {', '.join(missing)}")
        logger.error("Please check your .env file")
        sys.exit(1)


def create_data_dirs(settings: AppSettings) -> None:
    """Create the state directory if the store is enabled."""
    if not settings.store.enabled:
        return

    Path(settings.store.data_dir).mkdir(parents=True, exist_ok=True)
    logger.info("Data directories verified")


def print_startup_banner(settings: AppSettings) -> None:
    """Print system startup banner."""
    logger.info("=" * 60)
    logger.info(f"Starting {settings.system.name}")
    logger.info(f"Environment: {settings.system.environment}")
    logger.info(f"Agent backend: {settings.agents.backend}")
    logger.info(f"Version: {settings.system.version}")
    logger.info("=" * 60)


def load_and_validate_config(config_path: Path = CONFIG_PATH) -> AppSettings:
    """Load and validate configuration.

    Returns:
        AppSettings loaded from YAML.

    Raises:
        SystemExit: If config file missing, env vars invalid, or YAML parsing fails.
    """
    load_dotenv()
    logger.info("✓ Loaded environment variables")

    if not config_path.exists():
        logger.error(f"{config_path} not found")
        sys.exit(1)

    try:
        settings = AppSettings.from_yaml(config_path)
        logger.info(f"✓ Settings loaded from {config_path}")
    except Exception as e:
        logger.error(f"Failed to parse {config_path}: {e}")
        sys.exit(1)

    validate_env_vars(settings)
    logger.info("✓ Environment variables validated")

    create_data_dirs(settings)

    return settings


def log_check_outcome(outcome: RunOutcome) -> None:
    """Log a check result as a severity-ranked feed."""
    if not outcome.success:
        logger.error(f"Logistics check failed: {outcome.error}")
        return

    result = outcome.result
    aggregates = result.aggregates
    logger.info(
        f"Run {outcome.entry.id}: {aggregates.total_critical} critical, "
        f"{aggregates.total_warning} warning, {aggregates.total_info} info"
    )
    if result.summary:
        logger.info(result.summary)

    for alert in sort_by_severity(result.alerts):
        logger.info(f"[{alert.severity.upper() or '?'}] {alert.title} ({alert.category})")
        if alert.recommended_action:
            logger.info(f"    → {alert.recommended_action}")


async def main() -> int:
    """Run one logistics check and report it.

    Returns:
        Process exit code.
    """
    settings = load_and_validate_config()
    print_startup_banner(settings)

    session = LogisticsSession.from_settings(settings)
    logger.info(f"✓ Session ready ({len(session.state.products)} products, {len(session.state.history)} past runs)")

    outcome = await session.run_check()
    log_check_outcome(outcome)

    return 0 if outcome.success else 1


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))
