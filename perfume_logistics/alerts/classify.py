"""Severity and category matching for agent-labelled alerts.

The Manager agent is not bound to a fixed vocabulary, so categories are
matched by case-insensitive substring and severities by case-insensitive
equality. All such matching lives here.
"""
from perfume_logistics.models.alert import Alert

SEVERITY_ORDER = {"critical": 0, "warning": 1, "info": 2}
UNRANKED = len(SEVERITY_ORDER)

SEVERITIES = ["critical", "warning", "info"]

# Category label -> substring looked for in the alert's category text.
CATEGORY_KEYS = {
    "inventory": "inventory",
    "shipping": "ship",
    "orders": "order",
}


def severity_rank(severity: str | None) -> int:
    """Rank a severity label; unknown labels sort after info."""
    return SEVERITY_ORDER.get((severity or "").strip().lower(), UNRANKED)


def is_severity(alert: Alert, severity: str) -> bool:
    return (alert.severity or "").strip().lower() == severity.strip().lower()


def in_category(alert: Alert, category: str) -> bool:
    """Check whether the alert belongs to ``category``.

    Known labels ("inventory", "shipping", "orders") use their match key;
    any other text is matched as a substring itself.
    """
    needle = CATEGORY_KEYS.get(category.strip().lower(), category.strip().lower())
    return needle in (alert.category or "").lower()


def sort_by_severity(alerts: list[Alert]) -> list[Alert]:
    """Return alerts ordered critical, warning, info, other.

    The sort is stable, so alerts of equal rank keep their feed order.
    """
    return sorted(alerts, key=lambda alert: severity_rank(alert.severity))


def filter_alerts(
    alerts: list[Alert],
    severity: str | None = None,
    category: str | None = None,
) -> list[Alert]:
    """Filter alerts by severity and/or category; None disables a filter."""
    filtered = alerts
    if severity:
        filtered = [a for a in filtered if is_severity(a, severity)]
    if category:
        filtered = [a for a in filtered if in_category(a, category)]
    return filtered


def severity_counts(alerts: list[Alert]) -> dict[str, int]:
    counts = {severity: 0 for severity in SEVERITIES}
    for alert in alerts:
        for severity in SEVERITIES:
            if is_severity(alert, severity):
                counts[severity] += 1
    return counts


def category_counts(alerts: list[Alert]) -> dict[str, int]:
    return {
        category: sum(1 for alert in alerts if in_category(alert, category))
        for category in CATEGORY_KEYS
    }
