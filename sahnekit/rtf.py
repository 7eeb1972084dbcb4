"""Plain-text extraction from RTF documents."""

from __future__ import annotations

import re
from dataclasses import dataclass
from os import PathLike

_RTF_PATTERN = re.compile(rb"\\([{}\\])|\\[A-Za-z]*;?|[{}]")


def parse_rtf(data: bytes) -> str:
    """Strip RTF control words and group braces, keeping escaped symbols and text.

    Each remaining byte is taken as one character (Latin-1).
    """
    return _RTF_PATTERN.sub(lambda m: m.group(1) or b"", bytes(data)).decode("latin-1")


@dataclass
class RtfFile:
    """The text content of an RTF document."""

    content: str

    @classmethod
    def from_file(cls, path: str | PathLike[str]) -> "RtfFile":
        """Read an RTF file and extract its text."""
        with open(path, "rb") as handle:
            return cls(parse_rtf(handle.read()))