"""Dashboard state: search results, selection, scroll regions and key routing."""

from __future__ import annotations

import logging
from typing import Protocol

from rich.align import Align
from rich.layout import Layout

from procview_core.collectors.processes import KillError
from procview_core.details import DetailsPaneController
from procview_core.dialog import DialogVisibility
from procview_core.keys import Command, KeyEvent
from procview_core.layout import BORDER_WIDTH, split_regions
from procview_core.models import ProcessRecord, ProcessSearchResults
from procview_core.panels.details import render as render_details
from procview_core.panels.dialog import render as render_dialog
from procview_core.panels.footer import KEY_BINDINGS_TEXT, render_help, render_search
from procview_core.panels.table import render as render_table
from procview_core.scroll import ScrollPosition
from procview_core.selection import SelectionCursor

logger = logging.getLogger(__name__)


class ProcessSourceLike(Protocol):
    def search(self, query: str | None) -> ProcessSearchResults: ...

    def kill(self, pid: int) -> None: ...


class Dashboard:
    """Owns every piece of mutable view state; driven by one render loop.

    Within a tick the list is replaced first, then the table window follows
    the selection, then the details pane recomputes for the selected process.
    """

    def __init__(self, source: ProcessSourceLike, profile: dict) -> None:
        self.source = source
        self.profile = profile
        self.page_step = int(profile.get("page_step", 10))
        self.panels = list(profile.get("panels", []))
        self.query = str(profile.get("query", ""))

        self.details = DetailsPaneController()
        self.cursor = SelectionCursor(self.details)
        self.table_scroll = ScrollPosition()
        self.dialog = DialogVisibility()

        self.results = ProcessSearchResults()
        self.status_message: str | None = None
        self.running = True

    def _fetch(self) -> ProcessSearchResults:
        results = self.source.search(self.query)
        for error in results.errors:
            logger.info("process source: %s", error)
        return results

    def selected_process(self) -> ProcessRecord | None:
        return self.results.nth(self.cursor.selected_index())

    def search(self) -> None:
        """Run the current query and start over at the first match."""
        self.results = self._fetch()
        self.cursor.replace_list(len(self.results))
        self.table_scroll.reset()
        self.details.reset_offset()

    def refresh(self) -> None:
        """Re-run the current query, keeping the cursor on the same process."""
        previous = self.selected_process()
        self.results = self._fetch()
        self.cursor.resize(len(self.results))
        if previous is None:
            return
        index = self.results.index_of(previous.pid)
        if index is None:
            self.details.reset_offset()
        else:
            self.cursor.relocate(index)

    def kill_selected(self) -> None:
        process = self.selected_process()
        if process is None:
            return
        try:
            self.source.kill(process.pid)
        except KillError as exc:
            logger.error("kill %s (%s) failed: %s", process.pid, process.cmd, exc)
            self.status_message = str(exc)
            self.dialog.show_error(str(exc))
            return
        self.status_message = None
        self.refresh()

    def handle(self, event: KeyEvent) -> None:
        command = event.command
        if self.dialog.visible:
            if self.dialog.handle_key(event):
                return
            if command in (Command.QUIT, Command.CANCEL):
                self.running = False
            return

        if command in (Command.QUIT, Command.CANCEL):
            self.running = False
        elif command is Command.UP:
            self.cursor.select_previous(1)
        elif command is Command.DOWN:
            self.cursor.select_next(1)
        elif command is Command.PREVIOUS_ROW:
            self.cursor.select_previous(event.step)
        elif command is Command.NEXT_ROW:
            self.cursor.select_next(event.step)
        elif command is Command.PAGE_UP:
            self.cursor.select_previous(self.page_step)
        elif command is Command.PAGE_DOWN:
            self.cursor.select_next(self.page_step)
        elif command is Command.HOME:
            self.cursor.select_first()
        elif command is Command.END:
            self.cursor.select_last()
        elif command is Command.DETAILS_FORWARD:
            self.details.scroll_forward()
        elif command is Command.DETAILS_BACKWARD:
            self.details.scroll_backward()
        elif command is Command.KILL:
            self.kill_selected()
        elif command is Command.REFRESH:
            self.search()
        elif command is Command.HELP:
            self.dialog.show_key_bindings(KEY_BINDINGS_TEXT)
        elif command is Command.CHAR:
            self.query += event.text
            self.status_message = None
            self.search()
        elif command is Command.DELETE_CHAR:
            if self.query:
                self.query = self.query[:-1]
                self.status_message = None
                self.search()

    def render(self, width: int, height: int) -> Layout:
        regions = split_regions(
            height,
            show_details="details" in self.panels,
            show_search="search" in self.panels,
            show_help="help" in self.panels,
        )
        selected = self.cursor.selected_index()
        total = len(self.results)
        self.table_scroll.follow(selected or 0, total, regions.table_rows)
        visible = self.table_scroll.visible_range(total, regions.table_rows)

        process = self.results.nth(selected)
        content_width = max(1, width - BORDER_WIDTH)
        self.details.recompute(process, content_width)
        offset = self.details.clamp(regions.details_rows)

        parts: list[Layout] = []
        if regions.search:
            parts.append(Layout(render_search(self.query), name="search", size=regions.search))

        body_height = regions.table + regions.details
        if self.dialog.visible:
            popup = render_dialog(self.dialog, width, height, body_height)
            parts.append(Layout(Align.center(popup, vertical="middle"), name="body", size=body_height))
        else:
            parts.append(Layout(render_table(self.results, selected, visible), name="table", size=regions.table))
            if regions.details:
                details = render_details(
                    process, offset, regions.details_rows, content_width, self.details.line_count
                )
                parts.append(Layout(details, name="details", size=regions.details))

        if regions.help:
            parts.append(Layout(render_help(self.status_message), name="help", size=regions.help))

        layout = Layout()
        layout.split_column(*parts)
        return layout
