"""Read-only table of the rows on the current page."""

from __future__ import annotations

import pandas as pd
import streamlit as st

from page_selector.config import TABLE_COLUMNS


def render_table(page_df: pd.DataFrame) -> None:
    """Render the current page's rows, or a notice when the page is empty."""
    if page_df.empty:
        st.info("No rows available.")
        return

    display_columns = [column for column in TABLE_COLUMNS if column in page_df.columns]
    st.dataframe(
        page_df[display_columns],
        hide_index=True,
        width="stretch",
        column_config={
            "row_id": st.column_config.NumberColumn("Row", width="small"),
            "page": st.column_config.NumberColumn("Page", width="small"),
            "label": st.column_config.TextColumn("Label"),
        },
    )
