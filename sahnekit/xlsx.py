"""A simple comma-separated spreadsheet reader with a parse cache."""

from __future__ import annotations

import threading

Rows = list[list[str]]


def _lines(text: str) -> list[str]:
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return [line.removesuffix("\r") for line in lines]


def parse_xlsx(data: bytes) -> Rows:
    """Split data into rows of comma-separated, trimmed cells.

    Invalid UTF-8 sequences are replaced rather than rejected.
    """
    text = bytes(data).decode("utf-8", errors="replace")
    return [[cell.strip() for cell in line.split(",")] for line in _lines(text)]


class XlsxFile:
    """Spreadsheet bytes whose parsed rows are computed once and cached."""

    def __init__(self, data: bytes) -> None:
        self.data = bytes(data)
        self._parsed: Rows | None = None
        self._lock = threading.Lock()

    def read(self) -> Rows:
        """Return a copy of the parsed rows, parsing on first use."""
        with self._lock:
            if self._parsed is None:
                self._parsed = parse_xlsx(self.data)
            return [list(row) for row in self._parsed]