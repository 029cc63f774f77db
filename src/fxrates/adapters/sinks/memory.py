# src/fxrates/adapters/sinks/memory.py
"""
In-memory Row Sink

A list-backed implementation of the host row-sink protocol. It is what the
command-line entry point prints from, and it lets tests observe exactly
which rows a reader delivered.

Files that USE this module:
- fxrates.app (collects rows before printing)
- tests.test_reader (unit tests)

Files that this module USES:
- fxrates.domain.models (RowStatus)
"""
from __future__ import annotations

from typing import Any, Dict, List, Optional

from fxrates.domain.models import RowStatus

Row = Dict[str, Any]


class ListRowSink:
    """
    Collects rows in a list.

    With `max_rows` set, the sink answers ABORT once that many rows have
    been added, the way a host stops a read early.
    """

    def __init__(self, max_rows: Optional[int] = None):
        if max_rows is not None and max_rows < 1:
            raise ValueError("max_rows must be at least 1")
        self.max_rows = max_rows
        self.rows: List[Row] = []

    def new_row(self) -> Row:
        return {}

    def add_row(self, row: Row) -> RowStatus:
        self.rows.append(row)
        if self.max_rows is not None and len(self.rows) >= self.max_rows:
            return RowStatus.ABORT
        return RowStatus.CONTINUE

    def __len__(self) -> int:
        return len(self.rows)
