# tests/alerts/test_review.py
"""Tests for alert selection and recipient handling."""

from perfume_logistics.alerts import SAMPLE_ALERTS, AlertSelection, RecipientList


class TestAlertSelection:
    """Tests for AlertSelection."""

    def test_toggle(self):
        selection = AlertSelection()

        selection.toggle("inv-001")
        assert selection.is_selected("inv-001")
        assert len(selection) == 1

        selection.toggle("inv-001")
        assert not selection.is_selected("inv-001")
        assert len(selection) == 0

    def test_select_critical_replaces_selection(self):
        selection = AlertSelection({"ord-001"})

        selection.select_critical(SAMPLE_ALERTS)

        assert selection.selected_ids == {"inv-001", "ship-001"}

    def test_select_all_and_clear(self):
        selection = AlertSelection()

        selection.select_all(SAMPLE_ALERTS)
        assert len(selection) == 5

        selection.clear()
        assert len(selection) == 0

    def test_resolve_keeps_feed_order(self):
        selection = AlertSelection({"ord-001", "inv-001", "missing"})

        resolved = selection.resolve(SAMPLE_ALERTS)

        assert [a.id for a in resolved] == ["inv-001", "ord-001"]


class TestRecipientList:
    """Tests for RecipientList."""

    def test_add_trims_and_dedupes(self):
        recipients = RecipientList()

        assert recipients.add("  ops@example.com ")
        assert not recipients.add("ops@example.com")
        assert not recipients.add("   ")
        assert recipients.recipients == ["ops@example.com"]

    def test_initial_recipients_deduped(self):
        recipients = RecipientList(["a@example.com", "a@example.com", "b@example.com"])

        assert recipients.recipients == ["a@example.com", "b@example.com"]

    def test_remove(self):
        recipients = RecipientList(["a@example.com", "b@example.com"])

        recipients.remove("a@example.com")
        recipients.remove("nobody@example.com")

        assert recipients.recipients == ["b@example.com"]
