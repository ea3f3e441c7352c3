"""Process details renderer."""

from __future__ import annotations

from rich import box
from rich.panel import Panel
from rich.text import Text

from procview_core.details import details_lines
from procview_core.models import ProcessRecord


def render(
    process: ProcessRecord | None,
    offset: int,
    rows: int,
    content_width: int,
    line_count: int,
) -> Panel:
    lines = details_lines(process, content_width)
    shown = lines[offset : offset + max(0, rows)]

    # one terminal row per line; rich must not rewrap what line_count counted
    content = Text(no_wrap=True, overflow="ellipsis")
    for index, line in enumerate(shown):
        if index:
            content.append("\n")
        content.append(line)

    # arrows hint at content above/below the window
    subtitle = ""
    if offset > 0:
        subtitle += "↑"
    if offset + rows < line_count:
        subtitle += "↓"

    return Panel(
        content,
        title=" Process Details ",
        title_align="left",
        subtitle=subtitle or None,
        subtitle_align="right",
        box=box.ROUNDED,
        padding=(0, 0),
    )
