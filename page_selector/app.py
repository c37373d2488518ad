"""Streamlit app entrypoint for the Page Selector demo."""

from __future__ import annotations

import logging
import random
from typing import List, Optional, Tuple

import pandas as pd
import streamlit as st

from page_selector.components.navbar import render_navbar
from page_selector.components.pagination import render_pagination
from page_selector.components.table import render_table
from page_selector.config import (
    ASSETS_DIR,
    DEFAULT_PAGE_SIZE,
    DEMO_ROW_COUNT,
    LOG_LEVEL,
    PAGE_QUERY_PARAM,
    PAGE_SIZE_OPTIONS,
)
from page_selector.errors import InvalidPage
from page_selector.services import dataset_service
from page_selector.services.pagination_controller import PaginationController
from page_selector.utils.helpers import configure_logging, parse_page_number
from page_selector.utils.pagination import clamp_page_number

configure_logging(LOG_LEVEL)
logger = logging.getLogger(__name__)

st.set_page_config(page_title="Page Selector", layout="wide")


def load_css() -> None:
    """Load app-level CSS styling from the assets directory."""
    css_path = ASSETS_DIR / "styles.css"
    if css_path.exists():
        with css_path.open("r", encoding="utf-8") as css_file:
            st.markdown(f"<style>{css_file.read()}</style>", unsafe_allow_html=True)


def init_session_state() -> None:
    """Initialize required session-state variables."""
    st.session_state.setdefault("controller", None)
    st.session_state.setdefault("page_size", DEFAULT_PAGE_SIZE)
    st.session_state.setdefault("notifications", [])


def queue_notification(level: str, message: str) -> None:
    """Queue a UI notification for display on the next render pass."""
    st.session_state["notifications"].append((level, message))


def show_notifications() -> None:
    """Render queued status messages then clear the queue."""
    notifications: List[Tuple[str, str]] = st.session_state.get("notifications", [])
    if not notifications:
        return

    with st.container(border=True):
        for level, message in notifications:
            if level == "success":
                st.success(message)
            elif level == "warning":
                st.warning(message)
            else:
                st.info(message)

    st.session_state["notifications"] = []


@st.cache_data(show_spinner=False)
def get_dataset(row_count: int, page_size: int) -> pd.DataFrame:
    """Build the demo dataset, cached per page size."""
    return dataset_service.build_demo_dataset(row_count, page_size)


def sync_page_query_param(page: int) -> None:
    """Mirror the current page into the URL."""
    st.query_params[PAGE_QUERY_PARAM] = str(page)


def requested_page() -> Optional[int]:
    """Return the page requested through the URL, queueing a warning if malformed."""
    raw_value = st.query_params.get(PAGE_QUERY_PARAM)
    if raw_value is None:
        return None
    page = parse_page_number(raw_value)
    if page is None:
        queue_notification("warning", f"Ignored page parameter {raw_value!r}: not a number.")
    return page


def get_controller(total_pages: int) -> PaginationController:
    """Return the session controller, recreating it when the page count changes."""
    controller: Optional[PaginationController] = st.session_state["controller"]
    if controller is not None and controller.total == total_pages:
        return controller

    start_page = 1
    if controller is not None:
        start_page = clamp_page_number(controller.current_page, total_pages)

    controller = PaginationController(total_pages, start_page, on_page_change=sync_page_query_param)
    if st.session_state.get("_query_param_applied") is None:
        st.session_state["_query_param_applied"] = True
        page = requested_page()
        if page is not None:
            try:
                controller.jump(page)
            except InvalidPage as exc:
                queue_notification("warning", f"Ignored page parameter: {exc}")

    logger.info("Created pagination controller total=%s page=%s", total_pages, controller.current_page)
    st.session_state["controller"] = controller
    sync_page_query_param(controller.current_page)
    return controller


def jump_to_random_page(controller: PaginationController) -> None:
    """Jump to a random page of the current dataset."""
    controller.jump(random.randint(1, controller.total))


def main() -> None:
    """Render and run the Page Selector demo."""
    load_css()
    init_session_state()

    page_size = st.sidebar.selectbox(
        "Rows per page",
        options=PAGE_SIZE_OPTIONS,
        index=PAGE_SIZE_OPTIONS.index(st.session_state["page_size"]),
        key="page_size_select",
    )
    st.session_state["page_size"] = page_size

    dataset_df = get_dataset(DEMO_ROW_COUNT, page_size)
    total_pages = dataset_service.count_pages(dataset_df, page_size)
    controller = get_controller(total_pages)

    render_navbar("Page Selector", controller.current_page, controller.total)
    show_notifications()

    render_pagination(controller)

    st.button(
        "Set to random page",
        key="random_page",
        on_click=jump_to_random_page,
        args=(controller,),
    )
    st.markdown(f"#### Current page: {controller.current_page}")

    page_df = dataset_service.get_page_frame(dataset_df, controller.current_page, page_size)
    st.caption(f"Total Rows: {len(page_df)}/{len(dataset_df)}")
    render_table(page_df)


if __name__ == "__main__":
    main()
