# tests/alerts/test_classify.py
"""Tests for severity and category matching."""

from perfume_logistics.alerts import (
    SAMPLE_ALERTS,
    category_counts,
    filter_alerts,
    in_category,
    is_severity,
    severity_counts,
    severity_rank,
    sort_by_severity,
)
from perfume_logistics.models import Alert


def test_severity_rank():
    """Known severities rank in order; anything else sorts last."""
    assert severity_rank("critical") == 0
    assert severity_rank("Warning") == 1
    assert severity_rank(" INFO ") == 2
    assert severity_rank("urgent") == 3
    assert severity_rank("") == 3
    assert severity_rank(None) == 3


def test_is_severity_case_insensitive():
    alert = Alert(id="a", severity="CRITICAL")

    assert is_severity(alert, "critical")
    assert not is_severity(alert, "warning")


def test_in_category_uses_match_keys():
    """Labels match by substring of their key."""
    assert in_category(Alert(category="Shipment Delay"), "shipping")
    assert in_category(Alert(category="Purchase Orders"), "orders")
    assert in_category(Alert(category="Inventory"), "inventory")
    assert not in_category(Alert(category="Inventory"), "shipping")
    assert in_category(Alert(category="Returns"), "return")


def test_sort_by_severity_is_stable():
    alerts = [
        Alert(id="1", severity="info"),
        Alert(id="2", severity="critical"),
        Alert(id="3", severity="unknown"),
        Alert(id="4", severity="Critical"),
        Alert(id="5", severity="warning"),
    ]

    assert [a.id for a in sort_by_severity(alerts)] == ["2", "4", "5", "1", "3"]


def test_sort_by_severity_does_not_mutate_input():
    alerts = [Alert(id="1", severity="info"), Alert(id="2", severity="critical")]

    sort_by_severity(alerts)

    assert [a.id for a in alerts] == ["1", "2"]


def test_filter_alerts_on_sample_feed():
    critical = filter_alerts(SAMPLE_ALERTS, severity="critical")
    shipping = filter_alerts(SAMPLE_ALERTS, category="shipping")
    both = filter_alerts(SAMPLE_ALERTS, severity="critical", category="shipping")

    assert [a.id for a in critical] == ["inv-001", "ship-001"]
    assert [a.id for a in shipping] == ["ship-001", "ship-002"]
    assert [a.id for a in both] == ["ship-001"]
    assert filter_alerts(SAMPLE_ALERTS) == SAMPLE_ALERTS


def test_counts_on_sample_feed():
    assert severity_counts(SAMPLE_ALERTS) == {"critical": 2, "warning": 2, "info": 1}
    assert category_counts(SAMPLE_ALERTS) == {"inventory": 2, "shipping": 2, "orders": 1}
