"""Operator-configured alert thresholds."""
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class ThresholdSettings(BaseModel):
    """Alert policy persisted as a single record.

    Values are coerced to numbers but not range-checked: zero or negative
    thresholds are the operator's call.

    Attributes:
        min_stock_level: Minimum units per SKU.
        reorder_point: Units at which a reorder is due.
        max_delay_hours: Maximum acceptable shipping delay.
        order_age_warning_days: Age at which an open order is flagged.
        default_slack_channel: Channel preselected for dispatch.
        default_email_recipients: Recipients preselected for dispatch.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    min_stock_level: int = 50
    reorder_point: int = 100
    max_delay_hours: int = 48
    order_age_warning_days: int = 7
    default_slack_channel: str = "#logistics-alerts"
    default_email_recipients: list[str] = Field(default_factory=list)
