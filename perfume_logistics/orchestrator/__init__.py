"""Run and dispatch orchestration."""

from .dispatch_orchestrator import DispatchOrchestrator
from .models import DispatchOutcome, RunOutcome
from .run_orchestrator import RunOrchestrator

__all__ = [
    "DispatchOrchestrator",
    "DispatchOutcome",
    "RunOrchestrator",
    "RunOutcome",
]
