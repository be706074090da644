# tests/store/test_state_store.py
"""Tests for StateStore and its backends."""

import json
import tempfile
from pathlib import Path

import pytest

from perfume_logistics.models import (
    Alert,
    HistoryEntry,
    HistoryStatus,
    Product,
    ProductStatus,
    ThresholdSettings,
)
from perfume_logistics.store import (
    HISTORY_KEY,
    PRODUCTS_KEY,
    SETTINGS_KEY,
    JsonFileBackend,
    MemoryBackend,
    StateStore,
)


class FailingBackend:
    """Backend whose medium is unreadable and unwritable."""

    def get(self, key):
        raise OSError("disk unavailable")

    def set(self, key, value):
        raise OSError("disk full")


def make_entry(entry_id: str = "run-1", dispatched: int = 0) -> HistoryEntry:
    return HistoryEntry(
        id=entry_id,
        date="2024-01-15 09:23:00",
        total_alerts=1,
        alerts_dispatched=dispatched,
        alerts=[Alert(id="inv-001", title="Low stock", severity="critical", category="Inventory")],
    )


class TestDefaults:
    """Absent or unreadable keys yield defaults."""

    def test_missing_settings_returns_defaults(self):
        store = StateStore(MemoryBackend())
        settings = store.load_settings()

        assert settings.min_stock_level == 50
        assert settings.reorder_point == 100
        assert settings.max_delay_hours == 48
        assert settings.order_age_warning_days == 7
        assert settings.default_slack_channel == "#logistics-alerts"
        assert settings.default_email_recipients == []

    def test_missing_lists_return_empty(self):
        store = StateStore(MemoryBackend())

        assert store.load_history() == []
        assert store.load_products() == []

    def test_no_backend_behaves_as_empty(self):
        store = StateStore(None)

        assert store.is_durable is False
        assert store.load_history() == []
        assert store.load_settings() == ThresholdSettings()

    def test_no_backend_save_is_noop(self):
        store = StateStore(None)
        store.save_history([make_entry()])

        assert store.load_history() == []

    def test_unreadable_backend_returns_defaults(self):
        store = StateStore(FailingBackend())

        assert store.load_settings() == ThresholdSettings()
        assert store.load_products() == []

    def test_unwritable_backend_does_not_raise(self):
        store = StateStore(FailingBackend())
        store.save_settings(ThresholdSettings(min_stock_level=10))


class TestCorruption:
    """Corrupt stored values never break a load."""

    def test_invalid_json_returns_defaults(self):
        backend = MemoryBackend({SETTINGS_KEY: "{not json", HISTORY_KEY: "[oops"})
        store = StateStore(backend)

        assert store.load_settings() == ThresholdSettings()
        assert store.load_history() == []

    def test_partial_settings_merge_over_defaults(self):
        backend = MemoryBackend({SETTINGS_KEY: json.dumps({"minStockLevel": 25})})
        settings = StateStore(backend).load_settings()

        assert settings.min_stock_level == 25
        assert settings.reorder_point == 100

    def test_invalid_settings_field_falls_back_to_default(self):
        payload = {"minStockLevel": "lots", "reorderPoint": 80}
        backend = MemoryBackend({SETTINGS_KEY: json.dumps(payload)})
        settings = StateStore(backend).load_settings()

        assert settings.min_stock_level == 50
        assert settings.reorder_point == 80

    def test_invalid_history_items_are_skipped(self):
        good = make_entry("run-good").model_dump(mode="json", by_alias=True)
        backend = MemoryBackend({HISTORY_KEY: json.dumps([good, "garbage", {"date": "no id"}])})
        history = StateStore(backend).load_history()

        assert [e.id for e in history] == ["run-good"]

    def test_undecodable_file_returns_defaults(self, tmp_path):
        (tmp_path / f"{SETTINGS_KEY}.json").write_bytes(b'\xff\xfe{"minStockLevel": 10}')
        store = StateStore(JsonFileBackend(tmp_path))

        assert store.load_settings() == ThresholdSettings()

    def test_bad_alert_field_keeps_other_alerts(self):
        stored = {
            "id": "run-1",
            "date": "2024-01-15 09:23:00",
            "totalAlerts": 2,
            "alerts": [
                {"id": "a1", "title": "Low stock", "severity": "Critical", "category": "Inventory"},
                {"id": "a2", "title": None, "severity": "Warning", "category": "Shipping"},
            ],
        }
        backend = MemoryBackend({HISTORY_KEY: json.dumps([stored])})

        history = StateStore(backend).load_history()

        assert [a.id for a in history[0].alerts] == ["a1", "a2"]
        assert history[0].alerts[0].title == "Low stock"
        assert history[0].alerts[1].title == ""
        assert history[0].alerts[1].severity == "Warning"
        assert history[0].total_alerts == 2

    def test_non_object_alert_items_skipped(self):
        stored = {"id": "run-1", "date": "2024-01-15 09:23:00", "alerts": ["junk", {"id": "a1"}]}
        backend = MemoryBackend({HISTORY_KEY: json.dumps([stored])})

        history = StateStore(backend).load_history()

        assert [a.id for a in history[0].alerts] == ["a1"]

    def test_non_list_history_returns_empty(self):
        backend = MemoryBackend({HISTORY_KEY: json.dumps({"id": "run-1"})})

        assert StateStore(backend).load_history() == []


class TestRoundTrip:
    """Saved values load back unchanged."""

    def test_history_save_then_load(self):
        store = StateStore(MemoryBackend())
        history = [make_entry("run-2", dispatched=3), make_entry("run-1")]

        store.save_history(history)

        assert store.load_history() == history

    def test_save_is_idempotent(self):
        backend = MemoryBackend()
        store = StateStore(backend)
        settings = ThresholdSettings(min_stock_level=30, default_email_recipients=["ops@example.com"])

        store.save_settings(settings)
        first = backend.get(SETTINGS_KEY)
        store.save_settings(settings)

        assert backend.get(SETTINGS_KEY) == first

    def test_stored_keys_use_camel_case(self):
        backend = MemoryBackend()
        StateStore(backend).save_history([make_entry(dispatched=2)])

        stored = json.loads(backend.get(HISTORY_KEY))
        assert stored[0]["alertsDispatched"] == 2
        assert stored[0]["totalAlerts"] == 1
        assert stored[0]["status"] == HistoryStatus.REVIEWED.value

    def test_unknown_key_rejected(self):
        store = StateStore(MemoryBackend())

        with pytest.raises(KeyError):
            store.save("something-else", ThresholdSettings())


def test_json_file_backend_persists_across_instances():
    """Products written by one store are read by a fresh one."""
    with tempfile.TemporaryDirectory() as tmpdir:
        data_dir = Path(tmpdir) / "state"
        product = Product(id="prod-1", sku="CH-001", name="Chanel No. 5", brand="Chanel", current_stock=12)

        StateStore(JsonFileBackend(data_dir)).save_products([product])
        loaded = StateStore(JsonFileBackend(data_dir)).load_products()

        assert (data_dir / f"{PRODUCTS_KEY}.json").exists()
        assert loaded == [product]
        assert loaded[0].status == ProductStatus.ACTIVE


def test_json_file_backend_missing_file_returns_none(tmp_path):
    """Reading a key that was never written returns None."""
    backend = JsonFileBackend(tmp_path)

    assert backend.get(SETTINGS_KEY) is None
