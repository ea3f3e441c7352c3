"""Scroll state and line accounting for the process details pane."""

from __future__ import annotations

import math

from procview_core.models import ProcessRecord

# summary line + command line
HEADER_LINES = 2
NO_SELECTION_TEXT = "No process selected"


def fold_args(args: str, width: int) -> list[str]:
    """Cut ``args`` into rows of exactly ``width`` characters (the last may be shorter)."""
    width = max(1, int(width))
    if not args:
        return [""]
    return [args[start : start + width] for start in range(0, len(args), width)]


def details_lines(process: ProcessRecord | None, content_width: int) -> list[str]:
    """Pane rows: summary, command, then the args folded to the pane width.

    The row count always equals ``DetailsPaneController.recompute`` for the
    same process and width.
    """
    if process is None:
        return [NO_SELECTION_TEXT]

    parent = f" PARENT: {process.parent_pid}" if process.parent_pid is not None else ""
    ports = f" PORTS: {process.ports}" if process.ports else ""
    memory_mb = int(process.memory) // 1024 // 1024
    return [
        (
            f"USER: {process.user_name} PID: {process.pid}{parent} "
            f"START_TIME: {process.start_time}, RUN_TIME: {process.run_time} "
            f"MEMORY: {memory_mb}MB{ports}"
        ),
        f"CMD: {process.exe()}",
        *fold_args(process.args, content_width),
    ]


class DetailsPaneController:
    """Offset and wrapped line count of the details pane.

    The offset is only bounded by ``clamp`` because the pane height is known
    at render time alone.
    """

    def __init__(self) -> None:
        self.scroll_offset = 0
        self.line_count = 0

    def recompute(self, process: ProcessRecord | None, content_width: int) -> int:
        if process is None:
            self.line_count = 1
            return self.line_count

        width = max(1, int(content_width))
        args_lines = max(1, math.ceil(len(process.args) / width))
        self.line_count = args_lines + HEADER_LINES
        return self.line_count

    def reset_offset(self) -> None:
        self.scroll_offset = 0

    def scroll_forward(self) -> None:
        self.scroll_offset += 1

    def scroll_backward(self) -> None:
        self.scroll_offset = max(0, self.scroll_offset - 1)

    def clamp(self, visible_height: int) -> int:
        upper = max(0, self.line_count - max(0, visible_height))
        self.scroll_offset = min(self.scroll_offset, upper)
        return self.scroll_offset
