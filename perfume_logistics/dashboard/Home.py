"""Home page - logistics check, metrics and alert feed."""
import asyncio

import plotly.graph_objects as go
import streamlit as st

from perfume_logistics.alerts.classify import category_counts, filter_alerts, severity_counts, sort_by_severity
from perfume_logistics.session import LogisticsSession

st.set_page_config(
    page_title="Perfume Logistics",
    page_icon="🧴",
    layout="wide",
)

st.title("🧴 Perfume Logistics Monitor")

session = LogisticsSession.get_instance()
state = session.state

col1, col2 = st.columns([3, 1])

with col1:
    if st.button("▶️ Run Logistics Check", type="primary", disabled=state.loading):
        with st.spinner(state.loading_step or "Running logistics check..."):
            asyncio.run(session.run_check())
        st.rerun()

with col2:
    sample = st.toggle("Sample data", value=state.sample_mode)
    if sample != state.sample_mode:
        session.toggle_sample_mode(sample)
        st.rerun()

if not state.products:
    st.caption("No products in the catalog yet. Add them on the Products page for SKU-level alerts.")

if state.error:
    st.error(state.error)

st.divider()

col1, col2, col3, col4 = st.columns(4)

with col1:
    st.metric("Critical", state.aggregates.total_critical)

with col2:
    st.metric("Warning", state.aggregates.total_warning)

with col3:
    st.metric("Info", state.aggregates.total_info)

with col4:
    st.metric("Last Check", state.check_timestamp or "—")

if state.summary:
    st.info(state.summary)

if state.alerts:
    col1, col2 = st.columns(2)

    with col1:
        counts = severity_counts(state.alerts)
        fig = go.Figure(
            data=[
                go.Bar(
                    x=[s.capitalize() for s in counts],
                    y=list(counts.values()),
                    marker_color=["#d62728", "#ff7f0e", "#1f77b4"],
                )
            ]
        )
        fig.update_layout(title="Alerts by Severity", height=300)
        st.plotly_chart(fig, use_container_width=True)

    with col2:
        counts = category_counts(state.alerts)
        fig = go.Figure(data=[go.Bar(x=[c.capitalize() for c in counts], y=list(counts.values()))])
        fig.update_layout(title="Alerts by Category", height=300)
        st.plotly_chart(fig, use_container_width=True)

st.divider()

st.subheader("📋 Alert Feed")

col1, col2 = st.columns(2)

with col1:
    severity = st.selectbox("Severity", options=["All", "Critical", "Warning", "Info"], index=0)

with col2:
    category = st.selectbox("Category", options=["All", "Inventory", "Shipping", "Orders"], index=0)

alerts = filter_alerts(
    sort_by_severity(state.alerts),
    severity=None if severity == "All" else severity,
    category=None if category == "All" else category,
)

max_alerts = session.max_alerts_displayed
if alerts:
    for alert in alerts[:max_alerts]:
        level = (alert.severity or "").lower()
        container = st.error if level == "critical" else st.warning if level == "warning" else st.info
        container(
            f"**[{alert.severity.upper()}] {alert.title}** · {alert.category}\n\n"
            f"{alert.description}\n\n"
            f"_Affected:_ {alert.affected_items}\n\n"
            f"_Action:_ {alert.recommended_action}"
        )
elif state.alerts:
    st.info("No alerts match the current filters.")
else:
    st.info("Configure your thresholds in Settings, then run your first logistics check.", icon="✅")
