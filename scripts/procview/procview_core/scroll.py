"""Vertical scroll state shared by the table, details and dialog regions."""

from __future__ import annotations

from enum import Enum


class ScrollType(Enum):
    UP = "up"
    DOWN = "down"
    PAGE_UP = "page_up"
    PAGE_DOWN = "page_down"
    HOME = "home"
    END = "end"


def compute_follow_top(current_top: int, visible_height: int, selection: int, selection_max: int) -> int:
    """Return the first visible line that keeps ``selection`` on screen.

    Moves the window as little as possible: a selection below the window
    becomes the last visible line, a selection above it becomes the first.
    """
    if visible_height <= 0:
        return 0
    if selection_max <= visible_height:
        return 0

    if current_top + visible_height <= selection:
        return max(0, selection - visible_height) + 1
    if current_top > selection:
        return max(0, selection)
    return current_top


class ScrollPosition:
    def __init__(self) -> None:
        self.top = 0
        self.max_top = 0

    def reset(self) -> None:
        self.top = 0

    def _clamp(self, value: int) -> int:
        return min(max(0, value), self.max_top)

    def move(self, direction: ScrollType, page_size: int = 0) -> bool:
        """Move the window and report whether ``top`` actually changed."""
        old = self.top
        page = max(0, int(page_size))

        if direction is ScrollType.DOWN:
            candidate = old + 1
        elif direction is ScrollType.UP:
            candidate = old - 1
        elif direction is ScrollType.PAGE_DOWN:
            candidate = old + page
        elif direction is ScrollType.PAGE_UP:
            candidate = old - page
        elif direction is ScrollType.HOME:
            candidate = 0
        elif direction is ScrollType.END:
            candidate = self.max_top
        else:
            candidate = old

        candidate = self._clamp(candidate)
        if candidate == old:
            return False
        self.top = candidate
        return True

    def recompute_bounds(self, content_length: int, visible_height: int) -> None:
        if visible_height <= 0:
            self.max_top = 0
        else:
            self.max_top = max(0, int(content_length) - int(visible_height))
        self.top = self._clamp(self.top)

    def ensure_range_visible(self, visible_height: int, range_start: int, range_end: int) -> None:
        top = self.top
        bottom = top + max(0, visible_height)

        # start of the range is hidden above the window
        if range_start < top:
            self.top = max(0, range_start)
            return

        # end is hidden below and the start can move up without leaving the window
        if range_end > bottom and range_start > top:
            diff = min(range_start - top, range_end - bottom)
            self.top = min(self.max_top, top + diff)

    def follow(self, selection: int, content_length: int, visible_height: int) -> int:
        self.top = compute_follow_top(self.top, visible_height, selection, content_length)
        self.recompute_bounds(content_length, visible_height)
        return self.top

    def follow_content(self, content_length: int, visible_height: int) -> int:
        return self.follow(self.top, content_length, visible_height)

    def visible_range(self, content_length: int, visible_height: int) -> range:
        start = min(self.top, max(0, content_length))
        return range(start, min(content_length, start + max(0, visible_height)))
