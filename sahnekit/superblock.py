"""The file system superblock."""

from __future__ import annotations

import enum
import struct
from dataclasses import dataclass

MAGIC = 0x12345678
ROOT_INODE = 1

# Native C layout of the superblock record; the device type occupies one byte.
_LAYOUT = struct.Struct("@IIIQQQQQBQ")


class DeviceType(enum.Enum):
    HDD = enum.auto()
    SSD = enum.auto()
    NVME = enum.auto()
    SATA = enum.auto()
    SAS = enum.auto()
    UFS = enum.auto()
    EMMC = enum.auto()
    USB = enum.auto()
    OTHER = enum.auto()


@dataclass
class Superblock:
    """File system geometry and free space counters."""

    block_size: int
    inode_size: int
    blocks_count: int
    inodes_count: int
    device_type: DeviceType
    device_id: int
    magic: int = MAGIC
    root_inode: int = ROOT_INODE
    free_blocks_count: int | None = None
    free_inodes_count: int | None = None

    def __post_init__(self) -> None:
        if self.free_blocks_count is None:
            self.free_blocks_count = self.blocks_count
        if self.free_inodes_count is None:
            self.free_inodes_count = self.inodes_count

    def size(self) -> int:
        """Size in bytes of the superblock record in native C layout."""
        return _LAYOUT.size

    def is_valid(self) -> bool:
        return self.magic == MAGIC

    def update_free_blocks(self, free_blocks_count: int) -> None:
        self.free_blocks_count = free_blocks_count

    def update_free_inodes(self, free_inodes_count: int) -> None:
        self.free_inodes_count = free_inodes_count