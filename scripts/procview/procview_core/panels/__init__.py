"""Panel rendering helpers."""

from __future__ import annotations

# tailwind slate/blue palette
ROW_FG = "#e2e8f0"
SELECTED_FG = "#60a5fa"
NORMAL_ROW_BG = "#020617"
ALT_ROW_BG = "#0f172a"
TABLE_BORDER = "#60a5fa"
DANGER = "bold red"


def row_style(index: int, selected: bool) -> str:
    if selected:
        return f"reverse {SELECTED_FG}"
    background = NORMAL_ROW_BG if index % 2 == 0 else ALT_ROW_BG
    return f"{ROW_FG} on {background}"

