"""Streamlit UI for FootyHub."""
