"""Decode raw terminal input into logical dashboard commands."""

from __future__ import annotations

import codecs
import os
import select
from dataclasses import dataclass
from enum import Enum


class Command(Enum):
    UP = "up"
    DOWN = "down"
    PAGE_UP = "page_up"
    PAGE_DOWN = "page_down"
    HOME = "home"
    END = "end"
    NEXT_ROW = "next_row"
    PREVIOUS_ROW = "previous_row"
    CONFIRM = "confirm"
    CANCEL = "cancel"
    QUIT = "quit"
    KILL = "kill"
    REFRESH = "refresh"
    DETAILS_FORWARD = "details_forward"
    DETAILS_BACKWARD = "details_backward"
    HELP = "help"
    DELETE_CHAR = "delete_char"
    CHAR = "char"


@dataclass(frozen=True)
class KeyEvent:
    command: Command
    text: str = ""
    step: int = 1


ESCAPE_SEQUENCES = {
    "\x1b[A": Command.UP,
    "\x1bOA": Command.UP,
    "\x1b[B": Command.DOWN,
    "\x1bOB": Command.DOWN,
    "\x1b[5~": Command.PAGE_UP,
    "\x1b[6~": Command.PAGE_DOWN,
    "\x1b[H": Command.HOME,
    "\x1bOH": Command.HOME,
    "\x1b[1~": Command.HOME,
    "\x1b[7~": Command.HOME,
    "\x1b[F": Command.END,
    "\x1bOF": Command.END,
    "\x1b[4~": Command.END,
    "\x1b[8~": Command.END,
    "\x1bOP": Command.HELP,
    "\x1b[11~": Command.HELP,
    "\x1b[Z": Command.PREVIOUS_ROW,
}

CONTROL_KEYS = {
    "\r": Command.CONFIRM,
    "\n": Command.CONFIRM,
    "\t": Command.NEXT_ROW,
    "\x03": Command.QUIT,
    "\x18": Command.KILL,
    "\x12": Command.REFRESH,
    "\x06": Command.DETAILS_FORWARD,
    "\x02": Command.DETAILS_BACKWARD,
    "\x7f": Command.DELETE_CHAR,
    "\x08": Command.DELETE_CHAR,
}


def _escape_length(data: str, start: int, final: bool = True) -> int | None:
    """Length of the CSI/SS3 sequence at ``start``, or 1 for a lone ESC.

    Returns ``None`` when the sequence may still be completed by later input
    and ``final`` is false.
    """
    remaining = len(data) - start
    if remaining == 1:
        return 1 if final else None
    lead = data[start + 1]
    if lead == "O":
        if remaining < 3 and not final:
            return None
        return min(3, remaining)
    if lead != "[":
        return 1
    index = start + 2
    while index < len(data):
        # final byte of a CSI sequence
        if "\x40" <= data[index] <= "\x7e":
            return index - start + 1
        index += 1
    return remaining if final else None


def _decode(data: str, final: bool) -> tuple[list[KeyEvent], str]:
    events: list[KeyEvent] = []
    index = 0
    while index < len(data):
        ch = data[index]
        if ch == "\x1b":
            length = _escape_length(data, index, final)
            if length is None:
                break
            sequence = data[index : index + length]
            index += length
            if length == 1:
                events.append(KeyEvent(Command.CANCEL))
            elif sequence in ESCAPE_SEQUENCES:
                events.append(KeyEvent(ESCAPE_SEQUENCES[sequence]))
            continue

        index += 1
        command = CONTROL_KEYS.get(ch)
        if command is not None:
            events.append(KeyEvent(command))
        elif ch.isprintable():
            events.append(KeyEvent(Command.CHAR, text=ch))
    return events, data[index:]


def decode_keys(data: str) -> list[KeyEvent]:
    return _decode(data, final=True)[0]


class KeyReader:
    """Non-blocking reader of terminal input on ``fd``.

    A read can end in the middle of an escape sequence or a multi-byte UTF-8
    character; that tail is held until the next read completes it. An ESC
    still held when a poll finds no new input is an Esc key press.
    """

    def __init__(self, fd: int | None = None) -> None:
        self.fd = fd
        self._decoder = codecs.getincrementaldecoder("utf-8")(errors="ignore")
        self._pending = ""

    def feed(self, raw: bytes) -> list[KeyEvent]:
        events, self._pending = _decode(self._pending + self._decoder.decode(raw), final=False)
        return events

    def flush(self) -> list[KeyEvent]:
        data, self._pending = self._pending, ""
        return decode_keys(data)

    def poll(self, timeout: float = 0.0) -> list[KeyEvent]:
        ready, _, _ = select.select([self.fd], [], [], timeout)
        if not ready:
            return self.flush()
        try:
            raw = os.read(self.fd, 64)
        except OSError:
            return self.flush()
        if not raw:
            return self.flush()
        return self.feed(raw)
