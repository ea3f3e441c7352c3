"""Process dashboard entrypoint."""

from __future__ import annotations

import argparse
import json
import logging
import os
import sys
import time

try:
    import termios
except ImportError:  # non-POSIX platforms
    termios = None

from rich.console import Console
from rich.live import Live

from procview_core.collectors.processes import ProcessSource
from procview_core.dashboard import Dashboard
from procview_core.keys import KeyReader
from procview_core.profiles import resolve_profile

logger = logging.getLogger("procview_core")

# input polling interval between redraws
POLL_SECONDS = 0.1


def configure_logging(log_file: str | None, verbose: bool = False) -> None:
    # the alternate screen owns stdout, so logs only ever go to a file
    root = logging.getLogger("procview_core")
    root.handlers.clear()
    if not log_file:
        root.addHandler(logging.NullHandler())
        return
    handler = logging.FileHandler(log_file)
    handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s"))
    root.addHandler(handler)
    root.setLevel(logging.DEBUG if verbose else logging.INFO)


def run_live(console: Console, dashboard: Dashboard, refresh_seconds: int) -> None:
    """Run the interactive dashboard until quit.

    Uses termios non-canonical mode (ICANON/ECHO off, VMIN=0/VTIME=0) instead
    of tty.setraw() so Rich Live's alternate screen rendering works over SSH.
    """
    old_settings = None
    has_termios = False
    fd = sys.stdin.fileno()
    reader = KeyReader(fd)

    try:
        if termios is None:
            raise OSError("termios not available")
        old_settings = termios.tcgetattr(fd)
        new = termios.tcgetattr(fd)
        new[3] &= ~(termios.ICANON | termios.ECHO | termios.ISIG)
        new[6][termios.VMIN] = 0
        new[6][termios.VTIME] = 0
        termios.tcsetattr(fd, termios.TCSADRAIN, new)
        has_termios = True
    except (OSError, getattr(termios, "error", OSError)) as exc:
        logger.warning("keyboard input unavailable: %s", exc)

    try:
        with Live(console=console, auto_refresh=False, screen=True) as live:
            next_refresh = time.monotonic() + refresh_seconds
            last_size = None
            dirty = True
            while dashboard.running:
                if time.monotonic() >= next_refresh:
                    dashboard.refresh()
                    next_refresh = time.monotonic() + refresh_seconds
                    dirty = True

                size = tuple(console.size)
                if dirty or size != last_size:
                    width, height = size
                    live.update(dashboard.render(width, height), refresh=True)
                    last_size = size
                    dirty = False

                if has_termios:
                    events = reader.poll(timeout=POLL_SECONDS)
                    for event in events:
                        dashboard.handle(event)
                    dirty = bool(events)
                else:
                    time.sleep(POLL_SECONDS)
    except KeyboardInterrupt:
        pass
    finally:
        if old_settings is not None:
            termios.tcsetattr(fd, termios.TCSADRAIN, old_settings)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Interactive process viewer and killer")
    parser.add_argument("query", nargs="?", help="Initial search query (prefixes: / path, - args, : port, ! pid, ~ all)")
    parser.add_argument("-l", "--live", action="store_true", help="Run the interactive dashboard")
    parser.add_argument("--json", action="store_true", help="Emit matching processes as JSON")
    parser.add_argument("--profile", default=os.environ.get("PROCVIEW_PROFILE", "default"), help="Profile name: default|compact")
    parser.add_argument("--config", help="Optional JSON config file for panel/profile overrides")
    parser.add_argument("--refresh", type=int, help="Refresh interval seconds override")
    parser.add_argument("--log-file", default=os.environ.get("PROCVIEW_LOG_FILE"), help="Write debug logs to this file")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log at debug level")
    args = parser.parse_args(argv)

    configure_logging(args.log_file, args.verbose)

    try:
        profile = resolve_profile(args.profile, args.config)
    except ValueError as exc:
        print(f"procview: {exc}", file=sys.stderr)
        return 2

    if args.query is not None:
        profile["query"] = args.query
    refresh_seconds = max(1, int(args.refresh or profile.get("refresh_seconds", 2)))
    logger.info("starting with profile %s, refresh %ss", profile["name"], refresh_seconds)

    dashboard = Dashboard(ProcessSource(), profile)
    dashboard.search()

    if args.json:
        print(json.dumps(dashboard.results.to_dict(), indent=2))
        return 0

    console = Console()
    if args.live:
        run_live(console, dashboard, refresh_seconds)
        return 0

    width, height = console.size
    console.print(dashboard.render(width, height))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
