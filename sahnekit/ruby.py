"""Reading Ruby source files and splitting them into words."""

from __future__ import annotations

from collections.abc import Iterable
from os import PathLike


def read_ruby_file(filepath: str | PathLike[str]) -> list[str]:
    """Return the lines of a file without their line endings."""
    with open(filepath, encoding="utf-8", newline="") as handle:
        text = handle.read()
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return [line.removesuffix("\r") for line in lines]


def parse_ruby_lines(lines: Iterable[str]) -> list[str]:
    """Split every line on whitespace and return all words in order."""
    return [word for line in lines for word in line.split()]