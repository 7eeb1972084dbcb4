"""Checking the leading EBML and Segment headers of WebM files."""

from __future__ import annotations

from dataclasses import dataclass
from os import PathLike
from typing import BinaryIO

EBML_ID = 0x1A45DFA3
SEGMENT_ID = 0x18538067
HEADER_RECORD_SIZE = 12
_ID_SIZE = 4


class WebmError(ValueError):
    """The file does not start with the expected WebM headers."""


@dataclass(frozen=True)
class EbmlHeader:
    id: int


@dataclass(frozen=True)
class SegmentHeader:
    id: int


def _read_id(handle: BinaryIO, expected: int, what: str) -> int:
    record = handle.read(HEADER_RECORD_SIZE)
    if len(record) < _ID_SIZE:
        raise WebmError(f"not enough data for the {what} header")
    element_id = int.from_bytes(record[:_ID_SIZE], "big")
    if element_id != expected:
        raise WebmError(f"invalid {what} header id: {element_id:#010x}")
    return element_id


@dataclass
class WebM:
    """A WebM file addressed by path.

    Each leading header is a 12-byte record that starts with a big-endian
    element ID.
    """

    file_path: str | PathLike[str]

    def parse(self) -> tuple[EbmlHeader, SegmentHeader]:
        """Read and check the EBML header and the Segment header."""
        with open(self.file_path, "rb") as handle:
            ebml = EbmlHeader(_read_id(handle, EBML_ID, "EBML"))
            segment = SegmentHeader(_read_id(handle, SEGMENT_ID, "Segment"))
        return ebml, segment