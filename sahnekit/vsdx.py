"""Read-only access to the parts of a VSDX (zip) package."""

from __future__ import annotations

import io
import zipfile
from typing import BinaryIO

_READ_ERRORS = (
    zipfile.BadZipFile,
    OSError,
    EOFError,
    RuntimeError,
    NotImplementedError,
)


class VsdxFile:
    """A VSDX package held as a zip archive.

    The content of the first member of the archive is cached on opening and
    served by read(); it is None when the archive is empty or the member
    cannot be read.
    """

    def __init__(self, data: bytes | bytearray | memoryview | BinaryIO) -> None:
        if isinstance(data, (bytes, bytearray, memoryview)):
            stream: BinaryIO = io.BytesIO(bytes(data))
        else:
            stream = data
        self._archive = zipfile.ZipFile(stream)
        self.first_file_content: bytes | None = self._load_first()

    def _load_first(self) -> bytes | None:
        names = self._archive.namelist()
        if not names:
            return None
        try:
            return self._archive.read(names[0])
        except _READ_ERRORS:
            return None

    def __enter__(self) -> "VsdxFile":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self._archive.close()

    def get_file(self, filename: str) -> bytes:
        """Return the bytes of a member; raises KeyError if it is absent."""
        return self._archive.read(filename)

    def read(self, offset: int, size: int) -> bytes:
        """Return up to size bytes of the first member, starting at offset.

        An offset at or past the end gives b"". Raises OSError when there is
        no first member content.
        """
        if offset < 0 or size < 0:
            raise ValueError("offset and size must not be negative")
        content = self.first_file_content
        if content is None:
            raise OSError("Could not read content from VSDX file")
        if offset >= len(content):
            return b""
        return content[offset : offset + size]

    def write(self, offset: int, data: bytes) -> int:
        """Reject a write: raises ValueError for a negative offset and
        io.UnsupportedOperation otherwise, since packages are read-only."""
        if offset < 0:
            raise ValueError("offset must not be negative")
        length = len(memoryview(data))
        raise io.UnsupportedOperation(
            f"Write operation is not supported for VSDX files "
            f"({length} bytes at offset {offset} rejected)."
        )