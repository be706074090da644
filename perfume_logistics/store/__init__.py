"""Persistence for settings, history and products."""

from .backends import JsonFileBackend, KeyValueBackend, MemoryBackend
from .state_store import HISTORY_KEY, PRODUCTS_KEY, SETTINGS_KEY, StateStore

__all__ = [
    "HISTORY_KEY",
    "JsonFileBackend",
    "KeyValueBackend",
    "MemoryBackend",
    "PRODUCTS_KEY",
    "SETTINGS_KEY",
    "StateStore",
]
