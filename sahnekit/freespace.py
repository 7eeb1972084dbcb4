"""Bitmap-based free block tracking for one or more devices."""

from __future__ import annotations


class FreeSpaceManager:
    """Tracks which blocks of a device are in use with one bit per block."""

    def __init__(self, total_blocks: int, block_size: int) -> None:
        if total_blocks < 0:
            raise ValueError("total_blocks must not be negative")
        self.total_blocks = total_blocks
        self.block_size = block_size
        self._bitmap = bytearray((total_blocks + 7) // 8)

    def allocate_block(self) -> int | None:
        """Mark the lowest free block as used and return its index, or None."""
        for byte_index, byte in enumerate(self._bitmap):
            if byte == 0xFF:
                continue
            for bit in range(8):
                if byte & (1 << bit):
                    continue
                block_index = byte_index * 8 + bit
                if block_index >= self.total_blocks:
                    return None
                self._bitmap[byte_index] |= 1 << bit
                return block_index
        return None

    def deallocate_block(self, block_index: int) -> None:
        """Mark a block as free; indexes outside the device are ignored."""
        if 0 <= block_index < self.total_blocks:
            byte_index, bit = divmod(block_index, 8)
            self._bitmap[byte_index] &= ~(1 << bit) & 0xFF

    def is_block_free(self, block_index: int) -> bool:
        """True if the block exists and is not in use."""
        if not 0 <= block_index < self.total_blocks:
            return False
        byte_index, bit = divmod(block_index, 8)
        return not self._bitmap[byte_index] & (1 << bit)


class DeviceManager:
    """Free space managers for named devices."""

    def __init__(self) -> None:
        self.devices: dict[str, FreeSpaceManager] = {}

    def add_device(self, device_name: str, total_blocks: int, block_size: int) -> None:
        """Add or replace a device with all blocks free."""
        self.devices[device_name] = FreeSpaceManager(total_blocks, block_size)

    def allocate_block(self, device_name: str) -> tuple[str, int] | None:
        """Allocate a block on a device; None if unknown or full."""
        manager = self.devices.get(device_name)
        if manager is None:
            return None
        block_index = manager.allocate_block()
        if block_index is None:
            return None
        return device_name, block_index

    def deallocate_block(self, device_name: str, block_index: int) -> None:
        manager = self.devices.get(device_name)
        if manager is not None:
            manager.deallocate_block(block_index)

    def is_block_free(self, device_name: str, block_index: int) -> bool:
        """True if the device exists and the block on it is free."""
        manager = self.devices.get(device_name)
        return manager is not None and manager.is_block_free(block_index)