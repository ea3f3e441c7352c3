"""Row selection cursor for the process table."""

from __future__ import annotations

from procview_core.details import DetailsPaneController


class SelectionCursor:
    """Tracks the highlighted row over a list of ``count`` items.

    ``selected`` is ``None`` exactly when the list is empty. Stepping past the
    end wraps to the first row, stepping before the start stops at row 0.
    Every ``select_*`` call resets the scroll of the attached details pane.
    """

    def __init__(self, details: DetailsPaneController | None = None) -> None:
        self.selected: int | None = None
        self.count = 0
        self.details = details

    def selected_index(self) -> int | None:
        return self.selected

    def _changed(self) -> None:
        if self.details is not None:
            self.details.reset_offset()

    def select_next(self, step: int = 1) -> None:
        if self.selected is None or self.count == 0:
            return
        index = self.selected + max(0, step)
        if index >= self.count:
            index = 0
        self.selected = index
        self._changed()

    def select_previous(self, step: int = 1) -> None:
        if self.selected is None or self.count == 0:
            return
        index = max(0, self.selected - max(0, step))
        self.selected = min(index, self.count - 1)
        self._changed()

    def select(self, index: int) -> None:
        if self.count == 0:
            return
        self.selected = min(max(0, index), self.count - 1)
        self._changed()

    def relocate(self, index: int) -> None:
        """Follow the same row to a new index after a refresh reordered the list."""
        if self.count == 0:
            return
        self.selected = min(max(0, index), self.count - 1)

    def select_first(self) -> None:
        self.select(0)

    def select_last(self) -> None:
        self.select(self.count - 1)

    def replace_list(self, new_count: int) -> None:
        """Adopt a freshly searched list and put the cursor on its first row."""
        self.count = max(0, int(new_count))
        self.selected = 0 if self.count > 0 else None

    def resize(self, new_count: int) -> None:
        """Adopt a refreshed list of the same search, keeping the cursor row."""
        self.count = max(0, int(new_count))
        if self.count == 0:
            self.selected = None
        elif self.selected is None:
            self.selected = 0
        else:
            self.selected = min(self.selected, self.count - 1)
