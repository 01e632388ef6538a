"""
Memory Bus
==========

Flat byte-addressable store for the LR35902 core.

There is no memory map here: no ROM banks, no I/O registers, no echo RAM.
Reads and writes are plain indexed accesses with no side effects. An
address at or beyond the bus size raises MemoryAccessError; addresses
are never wrapped.

Sizing:
    MEMORY_SIZE         0x10000  full 16-bit address space (default)
    LEGACY_MEMORY_SIZE  0xFFFF   one byte short; $FFFF faults

Copyright (c) 2025-2026 Hugo José Pinto & Contributors
"""

from ..config import LEGACY_MEMORY_SIZE, MEMORY_SIZE
from ..errors import MemoryAccessError

__all__ = ["MemoryBus", "MEMORY_SIZE", "LEGACY_MEMORY_SIZE"]


class MemoryBus:
    """
    Flat memory bus.

    Attributes:
        size: Number of addressable bytes

    Example:
        >>> mem = MemoryBus()
        >>> mem.write_byte(0xC000, 0x42)
        >>> mem.read_byte(0xC000)
        66
    """

    def __init__(self, size: int = MEMORY_SIZE):
        """
        Initialize a zero-filled bus.

        Args:
            size: Number of bytes (1 to 0x10000)

        Raises:
            ValueError: If size is outside 1..0x10000
        """
        if not 0 < size <= MEMORY_SIZE:
            raise ValueError(
                f"Memory size must be 1-{MEMORY_SIZE} bytes, got {size}"
            )
        self._data = bytearray(size)

    @property
    def size(self) -> int:
        return len(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def _check(self, address: int) -> None:
        if not 0 <= address < len(self._data):
            raise MemoryAccessError(address, len(self._data))

    def read_byte(self, address: int) -> int:
        """
        Read byte from memory.

        Raises:
            MemoryAccessError: If address is outside the bus
        """
        self._check(address)
        return self._data[address]

    def write_byte(self, address: int, value: int) -> None:
        """
        Write byte to memory (value masked to 8 bits).

        Raises:
            MemoryAccessError: If address is outside the bus
        """
        self._check(address)
        self._data[address] = value & 0xFF

    def load(self, data: bytes, address: int = 0) -> None:
        """
        Copy a program image into memory.

        The whole image must fit; nothing is written if it doesn't.

        Args:
            data: Bytes to copy
            address: Destination of the first byte

        Raises:
            MemoryAccessError: If any byte would land outside the bus
        """
        if not data:
            return
        self._check(address)
        self._check(address + len(data) - 1)
        self._data[address:address + len(data)] = data

    def dump(self, address: int, length: int) -> bytes:
        """
        Return a copy of a memory range.

        Raises:
            MemoryAccessError: If the range leaves the bus
        """
        if length <= 0:
            return b""
        self._check(address)
        self._check(address + length - 1)
        return bytes(self._data[address:address + length])

    def clear(self) -> None:
        """Zero the whole store."""
        self._data[:] = bytes(len(self._data))
