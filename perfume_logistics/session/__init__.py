"""Operator session state and operations."""

from .controller import EMPTY_SELECTION_MESSAGE, LogisticsSession
from .state import SessionState

__all__ = [
    "EMPTY_SELECTION_MESSAGE",
    "LogisticsSession",
    "SessionState",
]
