"""A SAS device simulated by an existing image file."""

from __future__ import annotations

from os import PathLike


class SasDeviceError(Exception):
    """A SAS device operation failed."""


class OpenError(SasDeviceError):
    """The device image could not be opened."""


class SeekError(SasDeviceError):
    """The position of a block could not be reached."""


class ReadError(SasDeviceError):
    """A block could not be read in full."""


class WriteError(SasDeviceError):
    """A block could not be written."""


class SasDevice:
    """Block access to an existing image file opened for reading and writing."""

    def __init__(self, path: str | PathLike[str], block_size: int) -> None:
        self.path = path
        self.block_size = block_size
        try:
            self._file = open(path, "r+b")
        except OSError as exc:
            raise OpenError(f"cannot open {path}: {exc}") from exc

    def __enter__(self) -> "SasDevice":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def _seek(self, block_number: int) -> None:
        offset = block_number * self.block_size
        if offset < 0:
            raise SeekError(f"invalid offset {offset}")
        try:
            self._file.seek(offset)
        except (OSError, ValueError) as exc:
            raise SeekError(str(exc)) from exc

    def read_block(self, block_number: int, length: int | None = None) -> bytes:
        """Read length bytes (one block by default) starting at the block."""
        size = self.block_size if length is None else length
        if size < 0:
            raise ReadError(f"invalid length {size}")
        self._seek(block_number)
        try:
            data = self._file.read(size)
        except OSError as exc:
            raise ReadError(str(exc)) from exc
        if len(data) != size:
            raise ReadError(f"wanted {size} bytes, got {len(data)}")
        return data

    def write_block(self, block_number: int, data: bytes) -> None:
        """Write data starting at the block."""
        self._seek(block_number)
        try:
            self._file.write(bytes(data))
            self._file.flush()
        except OSError as exc:
            raise WriteError(str(exc)) from exc

    def close(self) -> None:
        self._file.close()