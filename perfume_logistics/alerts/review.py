"""Alert selection and recipient handling for the review step."""
from perfume_logistics.alerts.classify import is_severity
from perfume_logistics.models.alert import Alert


class AlertSelection:
    """Set of alert ids picked for dispatch."""

    def __init__(self, selected_ids: set[str] | None = None) -> None:
        self._selected_ids: set[str] = set(selected_ids or ())

    @property
    def selected_ids(self) -> set[str]:
        return set(self._selected_ids)

    def __len__(self) -> int:
        return len(self._selected_ids)

    def is_selected(self, alert_id: str) -> bool:
        return alert_id in self._selected_ids

    def toggle(self, alert_id: str) -> None:
        if alert_id in self._selected_ids:
            self._selected_ids.discard(alert_id)
        else:
            self._selected_ids.add(alert_id)

    def select_all(self, alerts: list[Alert]) -> None:
        self._selected_ids = {alert.id for alert in alerts}

    def select_critical(self, alerts: list[Alert]) -> None:
        """Replace the selection with the critical alerts only."""
        self._selected_ids = {alert.id for alert in alerts if is_severity(alert, "critical")}

    def clear(self) -> None:
        self._selected_ids = set()

    def resolve(self, alerts: list[Alert]) -> list[Alert]:
        """Selected alerts, in feed order."""
        return [alert for alert in alerts if alert.id in self._selected_ids]


class RecipientList:
    """Email recipients for a dispatch, without duplicates."""

    def __init__(self, recipients: list[str] | None = None) -> None:
        self._recipients: list[str] = []
        for recipient in recipients or []:
            self.add(recipient)

    @property
    def recipients(self) -> list[str]:
        return list(self._recipients)

    def add(self, email: str) -> bool:
        """Add a trimmed address. Returns False for blanks and duplicates."""
        trimmed = email.strip()
        if not trimmed or trimmed in self._recipients:
            return False
        self._recipients.append(trimmed)
        return True

    def remove(self, email: str) -> None:
        self._recipients = [r for r in self._recipients if r != email]
