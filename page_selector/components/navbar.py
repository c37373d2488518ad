"""Top navigation bar component."""

from __future__ import annotations

import streamlit as st


def render_navbar(title: str, current_page: int, total_pages: int) -> None:
    """Render header with the current page summary."""
    st.markdown(
        f"""
        <div class="navbar">
            <div class="navbar-title">{title}</div>
            <div class="navbar-meta">Page {current_page} of {total_pages}</div>
        </div>
        """,
        unsafe_allow_html=True,
    )
