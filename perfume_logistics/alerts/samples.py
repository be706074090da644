"""Fixture alerts shown in sample mode."""
from perfume_logistics.models.alert import Alert, AlertAggregates, CheckResult

SAMPLE_ALERTS = [
    Alert(
        id="inv-001",
        title="Low Stock: Chanel No. 5 EDP 100ml",
        category="Inventory",
        severity="Critical",
        description=(
            "Current stock at 12 units, well below minimum threshold of 50 units. "
            "Projected stockout in 3 days based on current sales velocity."
        ),
        affected_items="Chanel No. 5 EDP 100ml (SKU: CHN5-100)",
        recommended_action=(
            "Place emergency reorder of 200 units with priority shipping. "
            "Contact supplier for expedited fulfillment."
        ),
        timestamp="2024-01-15 09:23",
    ),
    Alert(
        id="inv-002",
        title="Approaching Reorder: Tom Ford Oud Wood",
        category="Inventory",
        severity="Warning",
        description=(
            "Stock at 95 units, approaching reorder point of 100. "
            "Current demand trend suggests reorder within 5 days."
        ),
        affected_items="Tom Ford Oud Wood 50ml (SKU: TF-OW-50)",
        recommended_action="Schedule standard reorder within 48 hours to maintain optimal stock levels.",
        timestamp="2024-01-15 09:23",
    ),
    Alert(
        id="ship-001",
        title="Delayed Shipment: Dior Sauvage Batch",
        category="Shipping",
        severity="Critical",
        description=(
            "Shipment SH-2024-0891 delayed 72 hours at customs in Rotterdam. "
            "Contains 500 units of Dior Sauvage EDT and EDP variants."
        ),
        affected_items="Dior Sauvage EDT 100ml (250 units), Dior Sauvage EDP 60ml (250 units)",
        recommended_action=(
            "Contact customs broker immediately. "
            "Prepare alternative stock allocation from secondary warehouse."
        ),
        timestamp="2024-01-15 08:45",
    ),
    Alert(
        id="ship-002",
        title="Routing Change: Mediterranean Shipment",
        category="Shipping",
        severity="Info",
        description=(
            "Shipment SH-2024-0903 rerouted via alternative port due to weather conditions. "
            "Estimated 12-hour delay."
        ),
        affected_items="Mixed luxury fragrance order (15 SKUs)",
        recommended_action="Monitor tracking updates. No immediate action required.",
        timestamp="2024-01-15 07:30",
    ),
    Alert(
        id="ord-001",
        title="Stale Order: Wholesale Client Pending 14 Days",
        category="Orders",
        severity="Warning",
        description=(
            "Order ORD-2024-4521 from premium wholesale client has been in processing "
            "for 14 days without fulfillment confirmation."
        ),
        affected_items="Bulk order: 50x Acqua di Parma Colonia, 30x Jo Malone English Pear",
        recommended_action=(
            "Escalate to fulfillment team lead. "
            "Contact client with status update and revised timeline."
        ),
        timestamp="2024-01-15 06:00",
    ),
]

SAMPLE_SUMMARY = (
    "Sample mode active. 5 alerts detected across inventory, shipping, and orders. "
    "2 critical issues require immediate attention: low stock on Chanel No. 5 and a "
    "customs-delayed Dior Sauvage shipment."
)

SAMPLE_TIMESTAMP = "2024-01-15 09:23 UTC"


def sample_check_result() -> CheckResult:
    return CheckResult(
        alerts=list(SAMPLE_ALERTS),
        aggregates=AlertAggregates(total_critical=2, total_warning=2, total_info=1),
        summary=SAMPLE_SUMMARY,
        timestamp=SAMPLE_TIMESTAMP,
    )
