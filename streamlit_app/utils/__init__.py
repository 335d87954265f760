"""
Utility modules for the Streamlit frontend.

This package contains:
- state: Per-session filter model and search controller
"""
