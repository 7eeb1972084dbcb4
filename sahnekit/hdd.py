"""A hard disk drive simulated by an image file split into fixed-size blocks."""

from __future__ import annotations

import os
from os import PathLike


class BlockDeviceError(Exception):
    """A block device operation failed."""


class BlockSizeError(BlockDeviceError, ValueError):
    """The block size, or the size of the data for a block, is wrong."""


class HDD:
    """Block access to an image file, opened for reading and writing.

    The file is created if it does not exist; existing content is kept.
    """

    def __init__(self, path: str | PathLike[str], block_size: int) -> None:
        if block_size <= 0:
            raise BlockSizeError("Block size cannot be zero!")
        self.path = path
        self.block_size = block_size
        try:
            fd = os.open(path, os.O_RDWR | os.O_CREAT, 0o666)
            self._file = os.fdopen(fd, "r+b")
        except OSError as exc:
            raise BlockDeviceError(f"I/O error: {exc}") from exc

    def __enter__(self) -> "HDD":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def _seek(self, block_id: int) -> None:
        if block_id < 0:
            raise BlockDeviceError(f"I/O error: invalid block {block_id}")
        try:
            self._file.seek(block_id * self.block_size)
        except (OSError, ValueError) as exc:
            raise BlockDeviceError(f"I/O error: {exc}") from exc

    def read_block(self, block_id: int) -> bytes:
        """Return the contents of one block.

        Raises BlockDeviceError if the image ends before the block does.
        """
        self._seek(block_id)
        try:
            data = self._file.read(self.block_size)
        except OSError as exc:
            raise BlockDeviceError(f"I/O error: {exc}") from exc
        if len(data) != self.block_size:
            raise BlockDeviceError(
                f"I/O error: unexpected end of image reading block {block_id}"
            )
        return data

    def write_block(self, block_id: int, data: bytes) -> None:
        """Write one block; data must be exactly block_size bytes long."""
        if len(data) != self.block_size:
            raise BlockSizeError(
                f"Buffer size must equal the block size ({self.block_size}), "
                f"but it is {len(data)}."
            )
        self._seek(block_id)
        try:
            self._file.write(bytes(data))
            self._file.flush()
        except OSError as exc:
            raise BlockDeviceError(f"I/O error: {exc}") from exc

    def close(self) -> None:
        self._file.close()