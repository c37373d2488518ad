"""Demo dataset construction and per-page slicing."""

from __future__ import annotations

import pandas as pd

from page_selector.config import TABLE_COLUMNS
from page_selector.utils.pagination import clamp_page_number, compute_total_pages, page_slice


def build_demo_dataset(row_count: int, page_size: int) -> pd.DataFrame:
    """Build a synthetic dataset whose rows are tagged with their page number."""
    safe_row_count = max(0, int(row_count))
    row_ids = range(1, safe_row_count + 1)
    safe_page_size = max(1, int(page_size))
    return pd.DataFrame(
        {
            "row_id": list(row_ids),
            "page": [(row_id - 1) // safe_page_size + 1 for row_id in row_ids],
            "label": [f"Record {row_id:05d}" for row_id in row_ids],
        },
        columns=TABLE_COLUMNS,
    )


def count_pages(dataframe: pd.DataFrame, page_size: int) -> int:
    """Return the number of pages needed to show every row."""
    return compute_total_pages(len(dataframe), page_size)


def get_page_frame(dataframe: pd.DataFrame, page_number: int, page_size: int) -> pd.DataFrame:
    """Return the rows of one page, clamping the page into range."""
    total_pages = count_pages(dataframe, page_size)
    safe_page = clamp_page_number(page_number, total_pages)
    start, end = page_slice(safe_page, max(1, page_size))
    return dataframe.iloc[start:end].reset_index(drop=True)
