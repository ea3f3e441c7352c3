"""Modal message popup: visibility, owned scroll and text wrapping."""

from __future__ import annotations

from rich.console import Console
from rich.text import Text

from procview_core.keys import Command, KeyEvent
from procview_core.scroll import ScrollPosition, ScrollType

ERROR_TITLE = "Error"
KEY_BINDINGS_TITLE = "Keybindings"

_measure_console: Console | None = None


def _console() -> Console:
    global _measure_console
    if _measure_console is None:
        _measure_console = Console(width=200, color_system=None, force_terminal=False)
    return _measure_console


def wrap_lines(text: str, width: int) -> list[str]:
    """Wrap ``text`` into lines no wider than ``width`` terminal cells.

    Breaks inside a word only when the word alone is wider than ``width``.
    """
    width = max(1, int(width))
    lines = Text(text).wrap(_console(), width, overflow="fold")
    return [line.plain for line in lines]


class DialogVisibility:
    def __init__(self) -> None:
        self.visible = False
        self.title = ""
        self.body = ""
        self.scroll = ScrollPosition()

    def show(self, title: str, body: str) -> None:
        self.title = title
        self.body = body
        self.scroll.reset()
        # bounds of the previous message no longer apply
        self.scroll.max_top = 0
        self.visible = True

    def hide(self) -> None:
        self.visible = False

    def show_error(self, message: str) -> None:
        self.show(ERROR_TITLE, message)

    def show_key_bindings(self, text: str) -> None:
        self.show(KEY_BINDINGS_TITLE, text)

    def handle_key(self, event: KeyEvent) -> bool:
        """Route one key to the popup; ``False`` means the caller may handle it."""
        if not self.visible:
            return False
        if event.command is Command.CONFIRM:
            self.hide()
            return True
        if event.command is Command.UP:
            self.scroll.move(ScrollType.UP)
            return True
        if event.command is Command.DOWN:
            self.scroll.move(ScrollType.DOWN)
            return True
        return False

    def visible_lines(self, text_width: int, visible_height: int) -> list[str]:
        lines = wrap_lines(self.body, text_width)
        top = self.scroll.follow_content(len(lines), visible_height)
        return lines[top : top + max(0, visible_height)]
