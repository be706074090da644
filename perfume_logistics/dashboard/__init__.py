"""Streamlit dashboard for the logistics monitor."""
