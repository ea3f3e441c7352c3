"""Message popup renderer."""

from __future__ import annotations

from rich import box
from rich.panel import Panel
from rich.text import Text

from procview_core.dialog import DialogVisibility
from procview_core.layout import BORDER_WIDTH, popup_size, popup_text_height
from procview_core.panels import DANGER


def render(dialog: DialogVisibility, screen_width: int, screen_height: int, max_height: int) -> Panel:
    width, height = popup_size(dialog.body, screen_width, screen_height)
    height = min(height, max_height)
    text_height = min(popup_text_height(screen_height), max(0, height - BORDER_WIDTH))
    lines = dialog.visible_lines(max(1, width - BORDER_WIDTH), text_height)

    return Panel(
        Text("\n".join(lines)),
        title=Text(dialog.title, style=DANGER),
        title_align="left",
        box=box.HEAVY,
        width=width,
        height=height,
        padding=(0, 0),
    )
