"""An in-memory solid state drive made of fixed-size blocks."""

from __future__ import annotations


class SsdError(Exception):
    """A block operation on the drive failed."""


class InvalidBlockId(SsdError, IndexError):
    """The block index is outside the drive."""


class InvalidBufferSize(SsdError, ValueError):
    """The data length does not match the block size."""


class SSD:
    """A drive of size // block_size zero-filled blocks kept in memory."""

    def __init__(self, size: int, block_size: int) -> None:
        if block_size <= 0:
            raise ValueError("block_size must be positive")
        if size < 0:
            raise ValueError("size must not be negative")
        self.size = size
        self.block_size = block_size
        self._blocks = [bytearray(block_size) for _ in range(size // block_size)]

    @property
    def block_count(self) -> int:
        return len(self._blocks)

    def _check_id(self, block_id: int) -> None:
        if not 0 <= block_id < len(self._blocks):
            raise InvalidBlockId(f"block {block_id} is outside the drive")

    def read_block(self, block_id: int) -> bytes:
        """Return a copy of a block's contents."""
        self._check_id(block_id)
        return bytes(self._blocks[block_id])

    def write_block(self, block_id: int, data: bytes) -> None:
        """Replace a block's contents; data must be exactly one block long."""
        self._check_id(block_id)
        if len(data) != self.block_size:
            raise InvalidBufferSize(
                f"data is {len(data)} bytes, block size is {self.block_size}"
            )
        self._blocks[block_id][:] = data