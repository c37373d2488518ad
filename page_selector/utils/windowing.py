"""Fixed-extent virtual windowing for long scrollable lists."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Tuple

from page_selector.errors import InvalidArgument


@dataclass(frozen=True)
class VirtualItem:
    """One rendered slot: source index, offset from content top, and size."""

    index: int
    offset: float
    extent: float


@dataclass(frozen=True)
class WindowResult:
    visible_items: Tuple[VirtualItem, ...]
    total_extent: float

    @property
    def indices(self) -> Tuple[int, ...]:
        return tuple(item.index for item in self.visible_items)


def _validate_geometry(item_count: int, item_extent: float, viewport_extent: float) -> None:
    if item_count < 0:
        raise InvalidArgument(f"item_count must be >= 0, got {item_count!r}.")
    if item_extent <= 0:
        raise InvalidArgument(f"item_extent must be > 0, got {item_extent!r}.")
    if viewport_extent < 0:
        raise InvalidArgument(f"viewport_extent must be >= 0, got {viewport_extent!r}.")


def compute_window(
    item_count: int,
    item_extent: float,
    viewport_extent: float,
    scroll_offset: float,
) -> WindowResult:
    """Return the items whose slots intersect the visible viewport.

    Item ``i`` occupies ``[i * item_extent, (i + 1) * item_extent)`` and the
    viewport covers ``[scroll_offset, scroll_offset + viewport_extent)``.
    Only intersecting items are emitted, with no overscan.
    """
    _validate_geometry(item_count, item_extent, viewport_extent)

    total_extent = item_count * item_extent
    if item_count == 0:
        return WindowResult(visible_items=(), total_extent=0)

    first_visible = max(0, math.floor(scroll_offset / item_extent))
    last_visible = min(item_count - 1, math.ceil((scroll_offset + viewport_extent) / item_extent) - 1)

    visible_items = tuple(
        VirtualItem(index=index, offset=index * item_extent, extent=item_extent)
        for index in range(first_visible, last_visible + 1)
    )
    return WindowResult(visible_items=visible_items, total_extent=total_extent)


def max_scroll_offset(item_count: int, item_extent: float, viewport_extent: float) -> float:
    """Largest scroll offset that still keeps the viewport filled."""
    _validate_geometry(item_count, item_extent, viewport_extent)
    return max(0, item_count * item_extent - viewport_extent)


def clamp_scroll_offset(
    scroll_offset: float,
    item_count: int,
    item_extent: float,
    viewport_extent: float,
) -> float:
    """Clamp a scroll offset to the scrollable range of the list."""
    upper = max_scroll_offset(item_count, item_extent, viewport_extent)
    return min(max(scroll_offset, 0), upper)
