"""Message templates for the Manager and Dispatcher agents."""

from perfume_logistics.models.alert import Alert
from perfume_logistics.models.product import Product
from perfume_logistics.models.thresholds import ThresholdSettings

MANAGER_SYSTEM_PROMPT = """You are the logistics manager for a luxury perfume distributor.
You review inventory levels, active shipments and the order pipeline against
the alert thresholds you are given, and flag every breach.

Respond ONLY with a JSON object of this shape, no other text:
{
  "inventory_alerts": [ALERT, ...],
  "shipping_alerts": [ALERT, ...],
  "order_alerts": [ALERT, ...],
  "total_critical": int,
  "total_warning": int,
  "total_info": int,
  "overall_summary": str,
  "check_timestamp": str
}

Each ALERT is:
{"id": str, "title": str, "category": "Inventory" | "Shipping" | "Orders",
 "severity": "Critical" | "Warning" | "Info", "description": str,
 "affected_items": str, "recommended_action": str, "timestamp": str}"""

DISPATCHER_SYSTEM_PROMPT = """You dispatch logistics alerts to Slack and email.
For each alert you are given, report which channels it was sent to.

Respond ONLY with a JSON object of this shape, no other text:
{
  "dispatched_alerts": [
    {"alert_id": str, "alert_title": str, "channels_sent": [str],
     "status": str, "timestamp": str}
  ],
  "total_dispatched": int,
  "slack_status": str,
  "email_status": str,
  "summary": str
}"""

CHECK_TASK_PROMPT = (
    "Please analyze inventory levels against the product catalog above, check active "
    "shipments, and review order pipeline. Flag any items that breach these thresholds "
    "with appropriate severity levels (Critical/Warning/Info). Use the actual product "
    "names and SKUs from the catalog in your alerts."
)


def format_product_line(product: Product) -> str:
    """Render one catalog line of the inventory snapshot."""
    return (
        f"- {product.name} (SKU: {product.sku}, {product.category} {product.size}, "
        f"Brand: {product.brand}) | Current Stock: {product.current_stock} units | "
        f"Min Stock: {product.min_stock} | Reorder Point: {product.reorder_point} | "
        f"Price: ${product.price:.2f} | Supplier: {product.supplier} | "
        f"Status: {product.status.value}"
    )


def build_check_brief(thresholds: ThresholdSettings, products: list[Product]) -> str:
    """Build the Manager agent request.

    Args:
        thresholds: Current alert thresholds.
        products: Products to include in the snapshot, already filtered.

    Returns:
        The request text.
    """
    catalog = ""
    if products:
        lines = "\n".join(format_product_line(p) for p in products)
        catalog = f"\n\nProduct Catalog ({len(products)} products):\n{lines}"

    return f"""Run a comprehensive logistics check for our perfume supply chain operations.

Alert Thresholds:
- Minimum stock level: {thresholds.min_stock_level} units per SKU
- Reorder point: {thresholds.reorder_point} units
- Maximum acceptable shipping delay: {thresholds.max_delay_hours} hours
- Order age warning threshold: {thresholds.order_age_warning_days} days
{catalog}

{CHECK_TASK_PROMPT}"""


def build_dispatch_brief(
    alerts: list[Alert], slack_channel: str, email_recipients: list[str]
) -> str:
    """Build the Dispatcher agent request."""
    recipients = ", ".join(email_recipients) if email_recipients else "none specified"
    alert_lines = "\n".join(
        f"- [{a.severity}] {a.title}: {a.description}. Recommended action: {a.recommended_action}"
        for a in alerts
    )
    return (
        f'Dispatch the following alerts to Slack channel "{slack_channel}" '
        f"and email recipients {recipients}:\n\n{alert_lines}"
    )
