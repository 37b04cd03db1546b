"""Streamlit front end for Pig."""
