"""Screen geometry: region heights and popup placement."""

from __future__ import annotations

from dataclasses import dataclass

from rich.cells import cell_len

SEARCH_HEIGHT = 1
HELP_HEIGHT = 1
TABLE_MIN_HEIGHT = 10
DETAILS_MAX_HEIGHT = 7
BORDER_WIDTH = 2
TABLE_HEADER_HEIGHT = 1

POPUP_HEIGHT = 25
POPUP_MIN_WIDTH = 60


@dataclass(frozen=True)
class Regions:
    search: int
    table: int
    details: int
    help: int

    @property
    def table_rows(self) -> int:
        return max(0, self.table - BORDER_WIDTH - TABLE_HEADER_HEIGHT)

    @property
    def details_rows(self) -> int:
        return max(0, self.details - BORDER_WIDTH)


def split_regions(
    height: int,
    show_details: bool = True,
    show_search: bool = True,
    show_help: bool = True,
) -> Regions:
    """Split the screen the way the dashboard stacks its panels.

    The table keeps at least ``TABLE_MIN_HEIGHT`` rows before the details pane
    gets any; the details pane never grows past ``DETAILS_MAX_HEIGHT``.
    """
    height = max(0, int(height))
    search = min(SEARCH_HEIGHT, height) if show_search else 0
    help_ = min(HELP_HEIGHT, height - search) if show_help else 0
    body = height - search - help_
    details = 0
    if show_details:
        details = max(0, min(DETAILS_MAX_HEIGHT, body - TABLE_MIN_HEIGHT))
    return Regions(search=search, table=body - details, details=details, help=help_)


def popup_size(body: str, screen_width: int, screen_height: int) -> tuple[int, int]:
    """Width and height of the message popup, clipped to the screen."""
    longest = max((cell_len(line) for line in body.splitlines()), default=0)
    max_width = max(screen_width, POPUP_MIN_WIDTH)
    width = min(max(longest + BORDER_WIDTH, POPUP_MIN_WIDTH), max_width)
    return min(width, max(0, screen_width)), min(POPUP_HEIGHT, max(0, screen_height))


def popup_text_height(screen_height: int) -> int:
    return max(0, min(POPUP_HEIGHT - BORDER_WIDTH, screen_height - BORDER_WIDTH))
