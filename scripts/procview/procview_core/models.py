"""Shared model contracts for process data flow."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from enum import Enum
from typing import Any, Iterator


class SearchBy(Enum):
    CMD = "cmd"
    PATH = "path"
    ARGS = "args"
    PORT = "port"
    PID = "pid"
    EVERYWHERE = "everywhere"


@dataclass
class ProcessRecord:
    pid: int
    parent_pid: int | None
    user_name: str
    start_time: str
    run_time: str
    cmd: str
    cmd_path: str | None = None
    args: str = ""
    ports: str | None = None
    memory: int = 0

    def exe(self) -> str:
        return self.cmd_path or self.cmd

    def parent_as_string(self) -> str:
        return "" if self.parent_pid is None else str(self.parent_pid)

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass
class ProcessSearchResults:
    search_by: SearchBy = SearchBy.CMD
    items: list[ProcessRecord] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[ProcessRecord]:
        return iter(self.items)

    def nth(self, index: int | None) -> ProcessRecord | None:
        if index is None or index < 0 or index >= len(self.items):
            return None
        return self.items[index]

    def index_of(self, pid: int) -> int | None:
        for index, item in enumerate(self.items):
            if item.pid == pid:
                return index
        return None

    def to_dict(self) -> dict[str, Any]:
        return {
            "search_by": self.search_by.value,
            "count": len(self.items),
            "items": [item.to_dict() for item in self.items],
            "errors": self.errors,
        }
