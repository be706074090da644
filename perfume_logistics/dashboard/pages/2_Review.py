"""Review page - select alerts and dispatch them."""
import asyncio

import streamlit as st

from perfume_logistics.alerts import AlertSelection, RecipientList
from perfume_logistics.session import LogisticsSession

st.set_page_config(page_title="Review | Perfume Logistics", page_icon="📨", layout="wide")

st.title("📨 Review & Dispatch")

session = LogisticsSession.get_instance()
state = session.state

if "selection" not in st.session_state:
    st.session_state.selection = AlertSelection()
if "recipients" not in st.session_state:
    st.session_state.recipients = RecipientList(state.settings.default_email_recipients)

selection: AlertSelection = st.session_state.selection
recipients: RecipientList = st.session_state.recipients

if not state.alerts:
    st.info("No alerts to review. Run a logistics check first.", icon="📭")
    st.stop()

col1, col2, col3 = st.columns(3)

with col1:
    if st.button("Select All"):
        selection.select_all(state.alerts)
        st.rerun()

with col2:
    if st.button("Critical Only"):
        selection.select_critical(state.alerts)
        st.rerun()

with col3:
    if st.button("Clear"):
        selection.clear()
        st.rerun()

for alert in state.alerts:
    checked = st.checkbox(
        f"[{alert.severity.upper()}] {alert.title} · {alert.category}",
        value=selection.is_selected(alert.id),
        key=f"alert-{alert.id}",
    )
    if checked != selection.is_selected(alert.id):
        selection.toggle(alert.id)

st.divider()

st.subheader("📣 Channels")

slack_channel = st.text_input("Slack channel", value=state.settings.default_slack_channel)

col1, col2 = st.columns([3, 1])

with col1:
    new_email = st.text_input("Add email recipient")

with col2:
    if st.button("Add") and recipients.add(new_email):
        st.rerun()

for email in recipients.recipients:
    col1, col2 = st.columns([4, 1])
    with col1:
        st.write(email)
    with col2:
        if st.button("Remove", key=f"remove-{email}"):
            recipients.remove(email)
            st.rerun()

selected = selection.resolve(state.alerts)

if st.button(f"🚀 Dispatch {len(selected)} Alerts", type="primary", disabled=not selected or state.dispatching):
    with st.spinner("Dispatching alerts..."):
        asyncio.run(session.dispatch(selected, slack_channel, recipients.recipients))

if state.dispatch_error:
    st.error(state.dispatch_error)

if state.dispatch_result:
    result = state.dispatch_result
    st.success(result.summary)

    col1, col2, col3 = st.columns(3)
    with col1:
        st.metric("Dispatched", result.total_dispatched)
    with col2:
        st.metric("Slack", result.slack_status)
    with col3:
        st.metric("Email", result.email_status)

    for record in result.dispatched_alerts:
        st.write(f"**{record.alert_title}** → {', '.join(record.channels_sent) or '—'} ({record.status})")
