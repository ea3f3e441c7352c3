"""Process table renderer."""

from __future__ import annotations

from typing import Callable

from rich import box
from rich.panel import Panel
from rich.table import Table

from procview_core.models import ProcessRecord, ProcessSearchResults, SearchBy
from procview_core.panels import TABLE_BORDER, row_style

COLUMNS = [
    ("USER", 5),
    ("PID", 5),
    ("PARENT", 5),
    ("STARTED", 5),
    ("TIME", 5),
    ("CMD", 10),
    ("CMD_PATH", 25),
]
DYNAMIC_COLUMN_RATIO = 40


def dynamic_column(search_by: SearchBy) -> tuple[str, Callable[[ProcessRecord], str]]:
    if search_by is SearchBy.PORT:
        return "PORT", lambda record: record.ports or ""
    if search_by is SearchBy.ARGS:
        return "ARGS", lambda record: record.args
    return "", lambda record: ""


def table_title(selected: int | None, total: int) -> str:
    position = 0 if selected is None else selected + 1
    return f" {position} / {total} "


def _cells(record: ProcessRecord, value_getter) -> list[str]:
    return [
        record.user_name,
        str(record.pid),
        record.parent_as_string(),
        record.start_time,
        record.run_time,
        record.cmd,
        record.cmd_path or "",
        value_getter(record),
    ]


def render(results: ProcessSearchResults, selected: int | None, visible: range) -> Panel:
    header, value_getter = dynamic_column(results.search_by)

    table = Table(box=None, expand=True, pad_edge=False, show_edge=False)
    for name, ratio in COLUMNS:
        table.add_column(name, ratio=ratio, no_wrap=True, overflow="ellipsis")
    table.add_column(header, ratio=DYNAMIC_COLUMN_RATIO, no_wrap=True, overflow="ellipsis")

    for index in visible:
        record = results.items[index]
        table.add_row(*_cells(record, value_getter), style=row_style(index, index == selected))

    return Panel(
        table,
        title=table_title(selected, len(results)),
        title_align="left",
        border_style=TABLE_BORDER,
        box=box.SQUARE,
        padding=(0, 0),
    )
