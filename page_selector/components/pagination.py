"""Page-selector strip with overflow popovers."""

from __future__ import annotations

from typing import Sequence

import streamlit as st

from page_selector.config import GROUP_TRIGGER_DISABLED, ITEM_EXTENT, VIEWPORT_EXTENT
from page_selector.services.pagination_controller import PaginationController
from page_selector.utils.pagination import PageGroup
from page_selector.utils.windowing import compute_window, max_scroll_offset


def render_page_button(controller: PaginationController, page: int, key: str) -> None:
    """Render one page button; the current page is highlighted."""
    is_current = page == controller.current_page
    st.button(
        str(page),
        key=key,
        type="primary" if is_current else "secondary",
        on_click=controller.jump,
        args=(page,),
        width="stretch",
    )


def render_virtual_pages(
    controller: PaginationController,
    pages: Sequence[int],
    key: str,
    item_extent: int = ITEM_EXTENT,
    viewport_extent: int = VIEWPORT_EXTENT,
) -> None:
    """Render only the group pages that fall inside the scroll viewport."""
    upper_offset = int(max_scroll_offset(len(pages), item_extent, viewport_extent))
    scroll_offset = 0
    if upper_offset > 0:
        scroll_offset = st.slider(
            "Scroll",
            min_value=0,
            max_value=upper_offset,
            value=0,
            step=1,
            key=f"{key}_scroll",
            label_visibility="collapsed",
        )

    # Extents are nominal row units; the slider is the only scroll source.
    window = compute_window(len(pages), item_extent, viewport_extent, scroll_offset)
    with st.container(height="content", border=False):
        for virtual_item in window.visible_items:
            page = pages[virtual_item.index]
            render_page_button(controller, page, key=f"{key}_page_{page}")


def render_group_menu(
    controller: PaginationController,
    group: PageGroup,
    key: str,
    disabled: bool = GROUP_TRIGGER_DISABLED,
) -> None:
    """Render the overflow trigger for a collapsed group.

    An empty group keeps its slot but its trigger is inert.
    """
    pages = controller.group_pages(group)
    with st.popover("...", disabled=disabled or not pages, width="stretch"):
        if pages:
            render_virtual_pages(controller, pages, key=key)


def render_pagination(controller: PaginationController, key: str = "page_selector") -> None:
    """Render previous/next buttons around the current pagination range."""
    items = controller.pagination_range
    columns = st.columns(len(items) + 2, gap="small")

    with columns[0]:
        st.button(
            "<",
            key=f"{key}_prev",
            disabled=not controller.has_prev,
            on_click=controller.prev,
            width="stretch",
        )

    for slot, item in enumerate(items, start=1):
        with columns[slot]:
            if isinstance(item, PageGroup):
                render_group_menu(controller, item, key=f"{key}_group_{item.start}_{item.end}")
            else:
                render_page_button(controller, item.page, key=f"{key}_page_{item.page}")

    with columns[-1]:
        st.button(
            ">",
            key=f"{key}_next",
            disabled=not controller.has_next,
            on_click=controller.next,
            width="stretch",
        )
