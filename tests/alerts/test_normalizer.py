# tests/alerts/test_normalizer.py
"""Tests for agent response normalization."""

from perfume_logistics.alerts import normalize_check_response, normalize_dispatch_response


def make_check_payload() -> dict:
    return {
        "inventory_alerts": [
            {
                "id": "inv-001",
                "title": "Low Stock: Chanel No. 5 EDP 100ml",
                "category": "Inventory",
                "severity": "Critical",
                "description": "Current stock at 12 units",
                "affected_items": "CHN5-100",
                "recommended_action": "Reorder 200 units",
                "timestamp": "2024-01-15 09:23",
            }
        ],
        "shipping_alerts": [
            {"id": "ship-001", "title": "Delayed shipment", "category": "Shipping", "severity": "Warning"}
        ],
        "order_alerts": [
            {"id": "ord-001", "title": "Aged order", "category": "Orders", "severity": "Info"}
        ],
        "total_critical": 1,
        "total_warning": 1,
        "total_info": 1,
        "overall_summary": "One critical stock issue.",
        "check_timestamp": "2024-01-15T09:23:00Z",
    }


class TestNormalizeCheckResponse:
    """Tests for normalize_check_response()."""

    def test_blocks_concatenated_in_order(self):
        result = normalize_check_response(make_check_payload())

        assert [a.id for a in result.alerts] == ["inv-001", "ship-001", "ord-001"]
        assert result.aggregates.total_critical == 1
        assert result.aggregates.total == 3
        assert result.summary == "One critical stock issue."
        assert result.timestamp == "2024-01-15T09:23:00Z"

    def test_alert_fields_carried_over(self):
        alert = normalize_check_response(make_check_payload()).alerts[0]

        assert alert.title == "Low Stock: Chanel No. 5 EDP 100ml"
        assert alert.affected_items == "CHN5-100"
        assert alert.recommended_action == "Reorder 200 units"

    def test_missing_block_treated_as_empty(self):
        payload = make_check_payload()
        del payload["shipping_alerts"]
        payload["order_alerts"] = "not a list"

        result = normalize_check_response(payload)

        assert [a.id for a in result.alerts] == ["inv-001"]

    def test_empty_payload_gives_empty_result(self):
        result = normalize_check_response({})

        assert result.alerts == []
        assert result.aggregates.total == 0
        assert result.summary == ""
        assert result.timestamp

    def test_non_object_entries_skipped(self):
        payload = {"inventory_alerts": ["oops", None, {"id": "inv-009", "title": "Real"}]}

        result = normalize_check_response(payload)

        assert [a.id for a in result.alerts] == ["inv-009"]

    def test_missing_ids_synthesized(self):
        payload = {
            "inventory_alerts": [{"title": "A"}, {"title": "B"}],
            "order_alerts": [{"title": "C"}],
        }

        result = normalize_check_response(payload)

        assert [a.id for a in result.alerts] == ["inv-001", "inv-002", "ord-001"]

    def test_synthesized_id_avoids_collision(self):
        payload = {"inventory_alerts": [{"id": "inv-002", "title": "A"}, {"title": "B"}]}

        result = normalize_check_response(payload)

        assert [a.id for a in result.alerts] == ["inv-002", "inv-002-2"]

    def test_duplicate_ids_keep_first(self):
        payload = {
            "inventory_alerts": [{"id": "x-1", "title": "First"}],
            "shipping_alerts": [{"id": "x-1", "title": "Second"}],
        }

        result = normalize_check_response(payload)

        assert len(result.alerts) == 1
        assert result.alerts[0].title == "First"

    def test_aggregates_not_reconciled_with_alerts(self):
        payload = make_check_payload()
        payload["total_critical"] = 9

        result = normalize_check_response(payload)

        assert result.aggregates.total_critical == 9
        assert len(result.alerts) == 3

    def test_wrong_typed_fields_default(self):
        payload = {"inventory_alerts": [{"id": 17, "title": None, "severity": ["critical"]}]}

        alert = normalize_check_response(payload).alerts[0]

        assert alert.id == "17"
        assert alert.title == ""
        assert alert.severity == ""


class TestNormalizeDispatchResponse:
    """Tests for normalize_dispatch_response()."""

    def test_full_payload(self):
        result = normalize_dispatch_response(
            {
                "dispatched_alerts": [
                    {
                        "alert_id": "inv-001",
                        "alert_title": "Low Stock",
                        "channels_sent": ["slack", "email"],
                        "status": "sent",
                        "timestamp": "2024-01-15 09:30",
                    }
                ],
                "total_dispatched": 1,
                "slack_status": "sent",
                "email_status": "sent",
                "summary": "1 alert sent.",
            }
        )

        assert result.total_dispatched == 1
        assert result.dispatched_alerts[0].channels_sent == ["slack", "email"]
        assert result.slack_status == "sent"
        assert result.summary == "1 alert sent."

    def test_defaults(self):
        result = normalize_dispatch_response({"dispatched_alerts": [{}, "junk"]})

        assert len(result.dispatched_alerts) == 1
        assert result.dispatched_alerts[0].alert_id == ""
        assert result.total_dispatched == 0
        assert result.slack_status == "unknown"
        assert result.email_status == "unknown"
        assert result.summary == "Alerts dispatched."
