"""Search line and help bar renderers."""

from __future__ import annotations

from rich.table import Table
from rich.text import Text

from procview_core.panels import DANGER

HELP_TEXT = (
    "ESC/<C+C> quit | <C+X> kill process | <C+R> refresh | "
    "<C+F> details forward | <C+B> details backward | <F1> help "
)

KEY_BINDINGS_TEXT = "\n".join(
    [
        "Up / Down          select previous / next process",
        "Tab / Shift+Tab    select next / previous process",
        "PgUp / PgDn        move selection by a page",
        "Home / End         select first / last process",
        "Ctrl+F / Ctrl+B    scroll process details forward / backward",
        "Ctrl+X             kill selected process",
        "Ctrl+R             refresh the process list",
        "Esc / Ctrl+C       quit",
        "",
        "Search prefixes:",
        "  (none)  process name",
        "  /       executable path",
        "  -       arguments",
        "  :       listening port",
        "  !       pid",
        "  ~       everywhere",
        "",
        "Enter closes this popup, Up / Down scrolls it.",
    ]
)


def render_search(query: str) -> Text:
    text = Text("> ", style="bold")
    text.append(query)
    text.append("█", style="blink")
    return text


def render_help(status_message: str | None) -> Table:
    grid = Table.grid(expand=True, padding=(0, 1))
    grid.add_column(ratio=25, no_wrap=True, overflow="ellipsis")
    grid.add_column(ratio=75, justify="right", no_wrap=True, overflow="ellipsis")
    grid.add_row(Text(status_message or "", style=DANGER), Text(HELP_TEXT))
    return grid
