"""Settings page - alert thresholds and default channels."""
import streamlit as st

from perfume_logistics.models import ThresholdSettings
from perfume_logistics.session import LogisticsSession

st.set_page_config(page_title="Settings | Perfume Logistics", page_icon="⚙️", layout="wide")

st.title("⚙️ Settings")

session = LogisticsSession.get_instance()
current = session.state.settings

with st.form("settings_form"):
    st.subheader("⚠️ Alert Thresholds")

    col1, col2 = st.columns(2)

    with col1:
        min_stock_level = st.number_input("Minimum stock level (units)", value=current.min_stock_level, step=1)
        reorder_point = st.number_input("Reorder point (units)", value=current.reorder_point, step=1)

    with col2:
        max_delay_hours = st.number_input("Max shipping delay (hours)", value=current.max_delay_hours, step=1)
        order_age_warning_days = st.number_input(
            "Order age warning (days)", value=current.order_age_warning_days, step=1
        )

    st.subheader("📣 Notification Defaults")

    slack_channel = st.text_input("Default Slack channel", value=current.default_slack_channel)
    recipients = st.text_area(
        "Default email recipients (one per line)",
        value="\n".join(current.default_email_recipients),
    )

    submitted = st.form_submit_button("💾 Save Settings", type="primary")

if submitted:
    session.save_settings(
        ThresholdSettings(
            min_stock_level=int(min_stock_level),
            reorder_point=int(reorder_point),
            max_delay_hours=int(max_delay_hours),
            order_age_warning_days=int(order_age_warning_days),
            default_slack_channel=slack_channel.strip(),
            default_email_recipients=[r.strip() for r in recipients.splitlines() if r.strip()],
        )
    )
    st.success("Settings saved")
