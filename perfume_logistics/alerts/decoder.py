"""Schema-driven defaulting decoder for agent payloads.

Agent responses are model output: any field may be missing, null or of the
wrong type. Each field is decoded on its own, so one bad field never
invalidates the rest of the payload.
"""
from collections.abc import Mapping
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Callable


def as_text(value: Any) -> str | None:
    """Accept strings and plain numbers (rendered as text)."""
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return None


def as_count(value: Any) -> int | None:
    """Accept non-fractional numbers and numeric strings."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            return None
    return None


def as_list(value: Any) -> list | None:
    if isinstance(value, list):
        return value
    return None


def as_text_list(value: Any) -> list[str] | None:
    """Accept a list of text items (others dropped) or a single string."""
    if isinstance(value, str):
        return [value]
    if not isinstance(value, list):
        return None
    return [text for text in (as_text(item) for item in value) if text is not None]


def utc_now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


@dataclass(frozen=True)
class FieldSpec:
    """One decoded field.

    Attributes:
        name: Key in the payload.
        coerce: Returns the coerced value, or None when the raw value is unusable.
        default: Fallback value, or a zero-argument callable producing one.
    """

    name: str
    coerce: Callable[[Any], Any]
    default: Any = None

    def resolve_default(self) -> Any:
        if callable(self.default):
            return self.default()
        return self.default


def decode(payload: Any, schema: list[FieldSpec]) -> dict[str, Any]:
    """Decode ``payload`` against ``schema``; never raises.

    A payload that is not a mapping decodes to all defaults.
    """
    source = payload if isinstance(payload, Mapping) else {}
    decoded: dict[str, Any] = {}
    for field_spec in schema:
        raw = source.get(field_spec.name)
        value = field_spec.coerce(raw) if raw is not None else None
        decoded[field_spec.name] = value if value is not None else field_spec.resolve_default()
    return decoded


ALERT_SCHEMA = [
    FieldSpec("id", as_text, ""),
    FieldSpec("title", as_text, ""),
    FieldSpec("category", as_text, ""),
    FieldSpec("severity", as_text, ""),
    FieldSpec("description", as_text, ""),
    FieldSpec("affected_items", as_text, ""),
    FieldSpec("recommended_action", as_text, ""),
    FieldSpec("timestamp", as_text, ""),
]

CHECK_RESPONSE_SCHEMA = [
    FieldSpec("inventory_alerts", as_list, list),
    FieldSpec("shipping_alerts", as_list, list),
    FieldSpec("order_alerts", as_list, list),
    FieldSpec("total_critical", as_count, 0),
    FieldSpec("total_warning", as_count, 0),
    FieldSpec("total_info", as_count, 0),
    FieldSpec("overall_summary", as_text, ""),
    FieldSpec("check_timestamp", as_text, utc_now_iso),
]

DISPATCH_RECORD_SCHEMA = [
    FieldSpec("alert_id", as_text, ""),
    FieldSpec("alert_title", as_text, ""),
    FieldSpec("channels_sent", as_text_list, list),
    FieldSpec("status", as_text, ""),
    FieldSpec("timestamp", as_text, ""),
]

DISPATCH_RESPONSE_SCHEMA = [
    FieldSpec("dispatched_alerts", as_list, list),
    FieldSpec("total_dispatched", as_count, 0),
    FieldSpec("slack_status", as_text, "unknown"),
    FieldSpec("email_status", as_text, "unknown"),
    FieldSpec("summary", as_text, "Alerts dispatched."),
]
