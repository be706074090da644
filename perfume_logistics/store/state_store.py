"""Best-effort persistence for settings, run history and the product catalog."""
import json
import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Callable

from pydantic import BaseModel, ValidationError

from perfume_logistics.alerts.decoder import ALERT_SCHEMA, decode
from perfume_logistics.models.history import HistoryEntry
from perfume_logistics.models.product import Product
from perfume_logistics.models.thresholds import ThresholdSettings
from perfume_logistics.store.backends import KeyValueBackend

logger = logging.getLogger(__name__)

SETTINGS_KEY = "perfume-logistics-settings"
HISTORY_KEY = "perfume-logistics-history"
PRODUCTS_KEY = "perfume-logistics-products"


@dataclass(frozen=True)
class RecordSpec:
    """How a stored key is decoded: one model, or a list of models."""

    model: type[BaseModel]
    many: bool
    default: Callable[[], Any]
    prepare: Callable[[Any], Any] | None = None


def _prepare_history_entry(data: Any) -> Any:
    """Decode embedded alerts one by one with per-field defaults.

    A bad field inside one alert then only resets that field; non-object
    alert items are skipped.
    """
    if not isinstance(data, dict) or not isinstance(data.get("alerts"), list):
        return data
    alerts = [decode(alert, ALERT_SCHEMA) for alert in data["alerts"] if isinstance(alert, Mapping)]
    return {**data, "alerts": alerts}


RECORD_SPECS: dict[str, RecordSpec] = {
    SETTINGS_KEY: RecordSpec(ThresholdSettings, many=False, default=ThresholdSettings),
    HISTORY_KEY: RecordSpec(HistoryEntry, many=True, default=list, prepare=_prepare_history_entry),
    PRODUCTS_KEY: RecordSpec(Product, many=True, default=list),
}


def _validate_record(model: type[BaseModel], data: Any) -> BaseModel:
    """Validate a stored record, dropping top-level fields that fail.

    Dropped fields fall back to their model defaults. Raises ValidationError
    when the record is still invalid, e.g. a required field is missing.
    """
    try:
        return model.model_validate(data)
    except ValidationError as e:
        if not isinstance(data, dict):
            raise
        bad_fields = {err["loc"][0] for err in e.errors() if err["loc"]}
        cleaned = {k: v for k, v in data.items() if k not in bad_fields}
        return model.model_validate(cleaned)


class StateStore:
    """Loads and saves the three persisted records.

    Reads never fail: absent keys, corrupt JSON and an unavailable backend
    all yield the record's default. Writes fully overwrite the previous value
    and never raise.
    """

    def __init__(self, backend: KeyValueBackend | None) -> None:
        """Initialize the store.

        Args:
            backend: Persistence backend, or None when no durable medium is
                attached (everything then behaves as empty and unsaved).
        """
        self._backend = backend

    @property
    def is_durable(self) -> bool:
        return self._backend is not None

    def load(self, key: str) -> Any:
        """Load the value stored under ``key`` or its default."""
        record_spec = RECORD_SPECS[key]
        if self._backend is None:
            return record_spec.default()

        try:
            raw = self._backend.get(key)
        except (OSError, UnicodeDecodeError) as e:
            logger.warning(f"Could not read {key}: {e}")
            return record_spec.default()

        if not raw:
            return record_spec.default()

        try:
            data = json.loads(raw)
        except json.JSONDecodeError as e:
            logger.warning(f"Stored {key} is not valid JSON, using defaults: {e}")
            return record_spec.default()

        if record_spec.many:
            return self._load_many(key, record_spec, data)

        try:
            return _validate_record(record_spec.model, data)
        except ValidationError as e:
            logger.warning(f"Stored {key} is invalid, using defaults: {e}")
            return record_spec.default()

    def _load_many(self, key: str, record_spec: RecordSpec, data: Any) -> list:
        if not isinstance(data, list):
            logger.warning(f"Stored {key} is not a list, using defaults")
            return record_spec.default()

        records = []
        for index, item in enumerate(data):
            if record_spec.prepare is not None:
                item = record_spec.prepare(item)
            try:
                records.append(_validate_record(record_spec.model, item))
            except ValidationError:
                logger.warning(f"Skipping invalid {key} item at index {index}")
        return records

    def save(self, key: str, value: Any) -> None:
        """Persist ``value`` under ``key``. Failures are logged and swallowed."""
        if key not in RECORD_SPECS:
            raise KeyError(key)
        if self._backend is None:
            return

        if isinstance(value, list):
            payload = [item.model_dump(mode="json", by_alias=True) for item in value]
        else:
            payload = value.model_dump(mode="json", by_alias=True)

        try:
            self._backend.set(key, json.dumps(payload))
        except OSError as e:
            logger.warning(f"Could not save {key}: {e}")

    def load_settings(self) -> ThresholdSettings:
        return self.load(SETTINGS_KEY)

    def save_settings(self, settings: ThresholdSettings) -> None:
        self.save(SETTINGS_KEY, settings)

    def load_history(self) -> list[HistoryEntry]:
        return self.load(HISTORY_KEY)

    def save_history(self, history: list[HistoryEntry]) -> None:
        self.save(HISTORY_KEY, history)

    def load_products(self) -> list[Product]:
        return self.load(PRODUCTS_KEY)

    def save_products(self, products: list[Product]) -> None:
        self.save(PRODUCTS_KEY, products)
