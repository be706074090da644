"""History page - past logistics checks."""
import pandas as pd
import streamlit as st

from perfume_logistics.history import search_history, sort_history
from perfume_logistics.session import LogisticsSession

st.set_page_config(page_title="History | Perfume Logistics", page_icon="🗂️", layout="wide")

st.title("🗂️ Alert History")

session = LogisticsSession.get_instance()
history = session.state.history

col1, col2, col3 = st.columns([2, 1, 1])

with col1:
    term = st.text_input("Search runs or alert titles")

with col2:
    sort_labels = {
        "Date": "date",
        "Alerts": "total_alerts",
        "Dispatched": "alerts_dispatched",
        "Status": "status",
    }
    sort_field = st.selectbox("Sort by", options=list(sort_labels.keys()))

with col3:
    ascending = st.toggle("Ascending", value=False)

entries = sort_history(search_history(history, term), sort_labels[sort_field], ascending)

if not entries:
    st.info("No runs recorded yet.", icon="📭")
    st.stop()

df = pd.DataFrame(
    [
        {
            "Run": e.id,
            "Date": e.date,
            "Alerts": e.total_alerts,
            "Dispatched": e.alerts_dispatched,
            "Status": e.status.value,
        }
        for e in entries
    ]
)
st.dataframe(df, use_container_width=True, hide_index=True)

for entry in entries:
    with st.expander(f"{entry.date} · {entry.total_alerts} alerts · {entry.status.value}"):
        for alert in entry.alerts:
            st.write(f"**[{alert.severity.upper()}] {alert.title}** · {alert.category}")
            st.caption(alert.description)
