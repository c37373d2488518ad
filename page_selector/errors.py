"""Exceptions raised by the pagination core."""

from __future__ import annotations


class PaginationError(ValueError):
    """Base class for pagination failures."""


class InvalidArgument(PaginationError):
    """Raised when a page count or viewport geometry is out of bounds."""


class InvalidPage(PaginationError):
    """Raised when navigation targets a page outside ``[1, total]``."""

    def __init__(self, page: object, total: int) -> None:
        super().__init__(f"Page {page!r} is outside the valid range 1..{total}.")
        self.page = page
        self.total = total
