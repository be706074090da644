"""Alert normalization, classification and review helpers."""

from .classify import (
    category_counts,
    filter_alerts,
    in_category,
    is_severity,
    severity_counts,
    severity_rank,
    sort_by_severity,
)
from .normalizer import normalize_check_response, normalize_dispatch_response
from .review import AlertSelection, RecipientList
from .samples import SAMPLE_ALERTS, sample_check_result

__all__ = [
    "AlertSelection",
    "RecipientList",
    "SAMPLE_ALERTS",
    "category_counts",
    "filter_alerts",
    "in_category",
    "is_severity",
    "normalize_check_response",
    "normalize_dispatch_response",
    "sample_check_result",
    "severity_counts",
    "severity_rank",
    "sort_by_severity",
]
