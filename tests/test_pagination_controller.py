from __future__ import annotations

import threading

import pytest

from page_selector.errors import InvalidArgument, InvalidPage
from page_selector.services.pagination_controller import PaginationController
from page_selector.utils.pagination import PageGroup, compute_range


class _Recorder:
    def __init__(self) -> None:
        self.pages: list[int] = []

    def __call__(self, page: int) -> None:
        self.pages.append(page)


def test_prev_at_first_page_is_silent_noop() -> None:
    recorder = _Recorder()
    controller = PaginationController(10, on_page_change=recorder)
    assert controller.prev() is False
    assert controller.current_page == 1
    assert recorder.pages == []
    assert controller.has_prev is False


def test_next_at_last_page_is_silent_noop() -> None:
    recorder = _Recorder()
    controller = PaginationController(10, current_page=10, on_page_change=recorder)
    assert controller.next() is False
    assert controller.current_page == 10
    assert recorder.pages == []
    assert controller.has_next is False


def test_prev_and_next_notify_once_per_change() -> None:
    recorder = _Recorder()
    controller = PaginationController(10, current_page=5, on_page_change=recorder)
    assert controller.next() is True
    assert controller.prev() is True
    assert controller.prev() is True
    assert controller.current_page == 4
    assert recorder.pages == [6, 5, 4]


@pytest.mark.parametrize("page", [0, 11, -1, 2.0, "3", None, True])
def test_invalid_jump_keeps_state(page: object) -> None:
    recorder = _Recorder()
    controller = PaginationController(10, current_page=3, on_page_change=recorder)
    with pytest.raises(InvalidPage) as exc_info:
        controller.jump(page)
    assert exc_info.value.total == 10
    assert controller.current_page == 3
    assert recorder.pages == []


def test_jump_sets_page_and_same_page_is_idempotent() -> None:
    recorder = _Recorder()
    controller = PaginationController(50, on_page_change=recorder)
    assert controller.jump(25) is True
    assert controller.jump(25) is False
    assert controller.current_page == 25
    assert recorder.pages == [25]


def test_range_is_derived_from_current_page() -> None:
    controller = PaginationController(50)
    assert controller.pagination_range == compute_range(50, 1)
    controller.jump(25)
    assert controller.pagination_range == compute_range(50, 25)


def test_group_selection_goes_through_jump() -> None:
    recorder = _Recorder()
    controller = PaginationController(50, on_page_change=recorder)
    group = next(item for item in controller.pagination_range if isinstance(item, PageGroup))
    pages = controller.group_pages(group)
    assert pages[0] == 5
    controller.jump(pages[10])
    assert controller.current_page == 15
    assert recorder.pages == [15]


def test_group_pages_does_not_mutate_input() -> None:
    controller = PaginationController(50)
    stored = [12, 10, 11]
    assert controller.group_pages(stored) == (10, 11, 12)
    assert stored == [12, 10, 11]


def test_subscribe_replaces_observer() -> None:
    first = _Recorder()
    second = _Recorder()
    controller = PaginationController(10, on_page_change=first)
    controller.next()
    controller.subscribe(second)
    controller.next()
    controller.subscribe(None)
    controller.next()
    assert first.pages == [2]
    assert second.pages == [3]
    assert controller.current_page == 4


def test_invalid_construction() -> None:
    with pytest.raises(InvalidArgument):
        PaginationController(0)
    with pytest.raises(InvalidPage):
        PaginationController(5, current_page=6)
    with pytest.raises(InvalidPage):
        PaginationController(5, current_page=0)


def test_concurrent_navigation_is_applied_atomically() -> None:
    recorder = _Recorder()
    controller = PaginationController(1000, on_page_change=recorder)
    threads = [threading.Thread(target=lambda: [controller.next() for _ in range(100)]) for _ in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert controller.current_page == 801
    assert recorder.pages == list(range(2, 802))


def test_observer_can_read_controller_state() -> None:
    seen: list[tuple[int, int]] = []
    controller = PaginationController(10)
    controller.subscribe(lambda page: seen.append((page, controller.current_page)))
    controller.jump(7)
    assert seen == [(7, 7)]
