"""Navigation state for one pagination control."""

from __future__ import annotations

import logging
import threading
from typing import Callable, Iterable, Optional, Tuple, Union

from page_selector.errors import InvalidArgument, InvalidPage
from page_selector.utils.pagination import PageGroup, PaginationRange, compute_range, sorted_group_pages

logger = logging.getLogger(__name__)

PageChangeCallback = Callable[[int], None]


def _is_page_number(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


class PaginationController:
    """Hold the current page and apply prev/next/jump transitions.

    The page count is fixed for the controller's lifetime. The observer is
    called once per transition that actually changes the current page, in the
    order the transitions were applied.
    """

    def __init__(
        self,
        total: int,
        current_page: int = 1,
        on_page_change: Optional[PageChangeCallback] = None,
    ) -> None:
        if not _is_page_number(total) or total < 1:
            raise InvalidArgument(f"total must be an integer >= 1, got {total!r}.")
        if not _is_page_number(current_page) or not 1 <= current_page <= total:
            raise InvalidPage(current_page, total)

        self._total = total
        self._current_page = current_page
        self._on_page_change = on_page_change
        self._lock = threading.RLock()

    @property
    def total(self) -> int:
        return self._total

    @property
    def current_page(self) -> int:
        with self._lock:
            return self._current_page

    @property
    def has_prev(self) -> bool:
        return self.current_page > 1

    @property
    def has_next(self) -> bool:
        return self.current_page < self._total

    @property
    def pagination_range(self) -> PaginationRange:
        """Range for the current page, derived fresh on every access."""
        return compute_range(self._total, self.current_page)

    def subscribe(self, callback: Optional[PageChangeCallback]) -> None:
        """Replace the page-change observer."""
        with self._lock:
            self._on_page_change = callback

    def prev(self) -> bool:
        with self._lock:
            if self._current_page <= 1:
                return False
            return self._move_to(self._current_page - 1)

    def next(self) -> bool:
        with self._lock:
            if self._current_page >= self._total:
                return False
            return self._move_to(self._current_page + 1)

    def jump(self, page: int) -> bool:
        """Move to ``page``; raises ``InvalidPage`` and keeps state when out of range."""
        if not _is_page_number(page) or not 1 <= page <= self._total:
            logger.debug("Rejected jump to %r (total=%s)", page, self._total)
            raise InvalidPage(page, self._total)

        with self._lock:
            if page == self._current_page:
                return False
            return self._move_to(page)

    def group_pages(self, group: Union[PageGroup, Iterable[int]]) -> Tuple[int, ...]:
        """Ascending copy of a group's pages, ready for windowed display."""
        return sorted_group_pages(group)

    def _move_to(self, page: int) -> bool:
        previous_page = self._current_page
        self._current_page = page
        logger.debug("Page changed %s -> %s (total=%s)", previous_page, page, self._total)
        if self._on_page_change is not None:
            self._on_page_change(page)
        return True
