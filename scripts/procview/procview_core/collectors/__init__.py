"""Collector helpers and package exports."""

from __future__ import annotations

import os

from procview_core.models import SearchBy

QUERY_PREFIXES = {
    "/": SearchBy.PATH,
    "-": SearchBy.ARGS,
    ":": SearchBy.PORT,
    "!": SearchBy.PID,
    "~": SearchBy.EVERYWHERE,
}


def parse_query(query: str | None) -> tuple[SearchBy, str]:
    """Split a search query into its mode prefix and the text to match."""
    text = (query or "").strip()
    if text and text[0] in QUERY_PREFIXES:
        return QUERY_PREFIXES[text[0]], text[1:].strip()
    return SearchBy.CMD, text


def current_pid() -> int:
    return os.getpid()
