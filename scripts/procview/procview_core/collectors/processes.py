"""Process table collector and kill action (fail-soft)."""

from __future__ import annotations

import logging
import time
from typing import Iterable

import psutil

from procview_core.collectors import current_pid, parse_query
from procview_core.formatting import format_run_time, format_start_time, join_ports
from procview_core.models import ProcessRecord, ProcessSearchResults, SearchBy

logger = logging.getLogger(__name__)

PROCESS_ATTRS = ["pid", "ppid", "username", "create_time", "name", "exe", "cmdline", "memory_info"]
SKIPPED_ERRORS = (psutil.NoSuchProcess, psutil.AccessDenied, psutil.ZombieProcess)


class KillError(Exception):
    """Raised when a process could not be killed; the message is user-facing."""


def _field_values(record: ProcessRecord, search_by: SearchBy) -> list[str]:
    if search_by is SearchBy.CMD:
        return [record.cmd]
    if search_by is SearchBy.PATH:
        return [record.cmd_path or ""]
    if search_by is SearchBy.ARGS:
        return [record.args]
    if search_by is SearchBy.PORT:
        return [record.ports or ""]
    if search_by is SearchBy.PID:
        return [str(record.pid)]
    return [record.cmd, record.cmd_path or "", record.args, record.ports or "", str(record.pid)]


def matches(record: ProcessRecord, search_by: SearchBy, needle: str) -> bool:
    if not needle:
        return True
    lowered = needle.lower()
    return any(lowered in value.lower() for value in _field_values(record, search_by))


def filter_records(
    records: Iterable[ProcessRecord],
    query: str | None,
    exclude_pid: int | None = None,
) -> ProcessSearchResults:
    search_by, needle = parse_query(query)
    items = [
        record
        for record in records
        if record.pid != exclude_pid and matches(record, search_by, needle)
    ]
    items.sort(key=lambda record: record.pid)
    return ProcessSearchResults(search_by=search_by, items=items)


def listening_ports() -> tuple[dict[int, set[int]], list[str]]:
    ports: dict[int, set[int]] = {}
    try:
        connections = psutil.net_connections(kind="inet")
    except (psutil.AccessDenied, OSError) as exc:
        logger.debug("port lookup unavailable: %s", exc)
        return ports, ["port lookup requires elevated permissions"]

    for conn in connections:
        if conn.pid is None or not conn.laddr:
            continue
        if conn.status not in (psutil.CONN_LISTEN, psutil.CONN_NONE):
            continue
        ports.setdefault(conn.pid, set()).add(conn.laddr.port)
    return ports, []


def _record_from_info(info: dict, ports: dict[int, set[int]], now: float) -> ProcessRecord:
    pid = int(info["pid"])
    ppid = info.get("ppid")
    created = info.get("create_time")
    cmdline = info.get("cmdline") or []
    memory_info = info.get("memory_info")
    return ProcessRecord(
        pid=pid,
        parent_pid=int(ppid) if ppid else None,
        user_name=str(info.get("username") or "?"),
        start_time=format_start_time(created),
        run_time=format_run_time(now - created if created else None),
        cmd=str(info.get("name") or "?"),
        cmd_path=info.get("exe") or None,
        args=" ".join(cmdline[1:]),
        ports=join_ports(ports.get(pid)),
        memory=int(memory_info.rss) if memory_info else 0,
    )


def snapshot() -> tuple[list[ProcessRecord], list[str]]:
    ports, errors = listening_ports()
    now = time.time()
    records: list[ProcessRecord] = []
    for proc in psutil.process_iter(attrs=PROCESS_ATTRS, ad_value=None):
        try:
            records.append(_record_from_info(proc.info, ports, now))
        except SKIPPED_ERRORS:
            continue
    return records, errors


class ProcessSource:
    """Live process table backed by psutil."""

    def __init__(self, exclude_self: bool = True) -> None:
        self.exclude_pid = current_pid() if exclude_self else None

    def search(self, query: str | None) -> ProcessSearchResults:
        records, errors = snapshot()
        results = filter_records(records, query, exclude_pid=self.exclude_pid)
        results.errors = errors
        logger.debug("search %r matched %d of %d processes", query, len(results), len(records))
        return results

    def kill(self, pid: int) -> None:
        logger.info("killing process %s", pid)
        try:
            psutil.Process(pid).kill()
        except psutil.NoSuchProcess as exc:
            logger.warning("kill %s failed: %s", pid, exc)
            raise KillError(f"Process {pid} no longer exists") from exc
        except psutil.AccessDenied as exc:
            logger.warning("kill %s failed: %s", pid, exc)
            raise KillError("Failed to kill process, check permissions") from exc

