"""Normalizes Manager and Dispatcher agent responses into canonical models."""
import logging
from collections.abc import Mapping
from typing import Any

from perfume_logistics.alerts.decoder import (
    ALERT_SCHEMA,
    CHECK_RESPONSE_SCHEMA,
    DISPATCH_RECORD_SCHEMA,
    DISPATCH_RESPONSE_SCHEMA,
    decode,
)
from perfume_logistics.models.alert import Alert, AlertAggregates, CheckResult
from perfume_logistics.models.dispatch import DispatchRecord, DispatchResult

logger = logging.getLogger(__name__)

# Response field -> prefix for synthesized ids. Order is the feed order.
ALERT_BLOCKS = [
    ("inventory_alerts", "inv"),
    ("shipping_alerts", "ship"),
    ("order_alerts", "ord"),
]


def _unique_id(base: str, seen: set[str]) -> str:
    candidate = base
    suffix = 2
    while candidate in seen:
        candidate = f"{base}-{suffix}"
        suffix += 1
    return candidate


def normalize_check_response(payload: Any) -> CheckResult:
    """Turn a raw Manager agent result into a CheckResult.

    Alert blocks are concatenated inventory, shipping, orders, keeping the
    order inside each block. Totals, summary and timestamp are read from the
    top level of the payload, each with its own default.

    Args:
        payload: The agent's ``response.result``, of any shape.

    Returns:
        CheckResult; never raises.
    """
    fields = decode(payload, CHECK_RESPONSE_SCHEMA)

    alerts: list[Alert] = []
    seen_ids: set[str] = set()
    for block, prefix in ALERT_BLOCKS:
        for index, record in enumerate(fields[block], start=1):
            if not isinstance(record, Mapping):
                logger.warning(f"Skipping non-object entry {index} in {block}")
                continue

            alert_fields = decode(record, ALERT_SCHEMA)
            if not alert_fields["id"]:
                alert_fields["id"] = _unique_id(f"{prefix}-{index:03d}", seen_ids)
            elif alert_fields["id"] in seen_ids:
                logger.warning(f"Dropping duplicate alert id {alert_fields['id']} in {block}")
                continue

            seen_ids.add(alert_fields["id"])
            alerts.append(Alert(**alert_fields))

    return CheckResult(
        alerts=alerts,
        aggregates=AlertAggregates(
            total_critical=fields["total_critical"],
            total_warning=fields["total_warning"],
            total_info=fields["total_info"],
        ),
        summary=fields["overall_summary"],
        timestamp=fields["check_timestamp"],
    )


def normalize_dispatch_response(payload: Any) -> DispatchResult:
    """Turn a raw Dispatcher agent result into a DispatchResult; never raises."""
    fields = decode(payload, DISPATCH_RESPONSE_SCHEMA)

    records = [
        DispatchRecord(**decode(record, DISPATCH_RECORD_SCHEMA))
        for record in fields["dispatched_alerts"]
        if isinstance(record, Mapping)
    ]

    return DispatchResult(
        dispatched_alerts=records,
        total_dispatched=fields["total_dispatched"],
        slack_status=fields["slack_status"],
        email_status=fields["email_status"],
        summary=fields["summary"],
    )
