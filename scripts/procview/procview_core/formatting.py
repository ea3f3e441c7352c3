"""Shared text and time formatting helpers for human-facing panels."""

from __future__ import annotations

from datetime import datetime


def format_run_time(seconds: float | int | None) -> str:
    if seconds is None:
        return "n/a"

    total = max(0, int(seconds))
    days, rest = divmod(total, 86400)
    hours, rest = divmod(rest, 3600)
    minutes, secs = divmod(rest, 60)
    clock = f"{hours:02d}:{minutes:02d}:{secs:02d}"
    if days:
        return f"{days}d {clock}"
    return clock


def format_start_time(started_at: float | None, now: datetime | None = None) -> str:
    """Clock time for processes started today, the date otherwise."""
    if started_at is None:
        return "n/a"
    try:
        started = datetime.fromtimestamp(started_at)
    except (OverflowError, OSError, ValueError):
        return "n/a"

    today = (now or datetime.now()).date()
    if started.date() == today:
        return started.strftime("%H:%M:%S")
    return started.strftime("%Y-%m-%d")


def join_ports(ports: set[int] | list[int] | None) -> str | None:
    if not ports:
        return None
    return ", ".join(str(port) for port in sorted(ports))
