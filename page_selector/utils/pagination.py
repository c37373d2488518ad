"""Pagination range computation and page arithmetic helpers."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, Iterator, List, Tuple, Union

from page_selector.errors import InvalidArgument

SMALL_SET_THRESHOLD = 10
EDGE_SPAN = 4
CURRENT_PAGE_SPAN = 2


@dataclass(frozen=True)
class SinglePage:
    """One page shown as its own button."""

    page: int


@dataclass(frozen=True)
class PageGroup:
    """Inclusive run of pages collapsed behind an overflow trigger.

    Only the bounds are stored; page numbers are produced on demand. A group
    whose ``end`` is below its ``start`` is empty but still occupies a slot.
    """

    start: int
    end: int

    def __len__(self) -> int:
        return max(0, self.end - self.start + 1)

    def __iter__(self) -> Iterator[int]:
        return iter(range(self.start, self.end + 1))

    def __getitem__(self, index: int) -> int:
        return range(self.start, self.end + 1)[index]

    @property
    def is_empty(self) -> bool:
        return self.end < self.start

    @property
    def pages(self) -> Tuple[int, ...]:
        return tuple(self)


PaginationItem = Union[SinglePage, PageGroup]
PaginationRange = Tuple[PaginationItem, ...]


def _singles(start: int, end: int) -> List[SinglePage]:
    return [SinglePage(page) for page in range(start, end + 1)]


def compute_range(total: int, current_page: int) -> PaginationRange:
    """Split pages ``1..total`` into standalone pages and collapsed groups.

    Small page counts are shown in full. Near either edge the first and last
    four pages stay visible with one group between them; otherwise the first
    page, the two pages on each side of ``current_page`` and the last page
    stay visible with a group on each side of the current window.
    """
    if isinstance(total, bool) or not isinstance(total, int) or total < 1:
        raise InvalidArgument(f"total must be an integer >= 1, got {total!r}.")
    if isinstance(current_page, bool) or not isinstance(current_page, int):
        raise InvalidArgument(f"current_page must be an integer, got {current_page!r}.")

    if total < SMALL_SET_THRESHOLD:
        return tuple(_singles(1, total))

    if current_page < EDGE_SPAN or current_page > total - (EDGE_SPAN - 1):
        return (
            *_singles(1, EDGE_SPAN),
            PageGroup(EDGE_SPAN + 1, total - EDGE_SPAN),
            *_singles(total - (EDGE_SPAN - 1), total),
        )

    return (
        SinglePage(1),
        PageGroup(2, current_page - CURRENT_PAGE_SPAN - 1),
        *_singles(current_page - CURRENT_PAGE_SPAN, current_page + CURRENT_PAGE_SPAN),
        PageGroup(current_page + CURRENT_PAGE_SPAN + 1, total - 1),
        SinglePage(total),
    )


def flatten_range(items: Iterable[PaginationItem]) -> List[int]:
    """Expand every group and return the page numbers in display order."""
    pages: List[int] = []
    for item in items:
        if isinstance(item, PageGroup):
            pages.extend(item)
        else:
            pages.append(item.page)
    return pages


def sorted_group_pages(group: Union[PageGroup, Iterable[int]]) -> Tuple[int, ...]:
    """Return a new ascending tuple of the group's pages."""
    return tuple(sorted(group))


def compute_total_pages(total_rows: int, page_size: int) -> int:
    """Compute the total number of pages for the provided page size."""
    if page_size <= 0:
        return 1
    return max(1, math.ceil(total_rows / page_size))


def clamp_page_number(page_number: int, total_pages: int) -> int:
    """Clamp page number to valid bounds."""
    return min(max(page_number, 1), max(total_pages, 1))


def page_slice(page_number: int, page_size: int) -> Tuple[int, int]:
    """Return start/end row offsets for the selected page."""
    start = (page_number - 1) * page_size
    end = start + page_size
    return start, end
