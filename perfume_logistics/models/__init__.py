"""Domain models for alerts, catalog, history and dispatch."""

from .alert import Alert, AlertAggregates, CheckResult
from .dispatch import DispatchRecord, DispatchResult
from .history import HistoryEntry, HistoryStatus
from .product import CATEGORIES, SIZES, Product, ProductDraft, ProductStatus
from .thresholds import ThresholdSettings

__all__ = [
    "Alert",
    "AlertAggregates",
    "CATEGORIES",
    "CheckResult",
    "DispatchRecord",
    "DispatchResult",
    "HistoryEntry",
    "HistoryStatus",
    "Product",
    "ProductDraft",
    "ProductStatus",
    "SIZES",
    "ThresholdSettings",
]
