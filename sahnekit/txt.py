"""Line-oriented text files."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from os import PathLike
from pathlib import Path


@dataclass
class TxtFile:
    """A text file addressed by path, read and written as lines."""

    path: str | PathLike[str]

    def read_lines(self) -> list[str]:
        """Return the non-empty lines of the file.

        Raises FileNotFoundError if the file is missing and
        UnicodeDecodeError if it is not valid UTF-8.
        """
        text = Path(self.path).read_bytes().decode("utf-8")
        return [line for line in text.split("\n") if line]

    def write_lines(self, lines: Iterable[str]) -> None:
        """Replace the file with the given lines, each ended by a newline."""
        payload = "".join(f"{line}\n" for line in lines)
        Path(self.path).write_bytes(payload.encode("utf-8"))

    def append_line(self, line: str) -> None:
        """Add a line at the end, creating the file if needed."""
        try:
            existing = self.read_lines()
        except FileNotFoundError:
            existing = []
        existing.append(line)
        self.write_lines(existing)